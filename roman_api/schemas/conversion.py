"""Conversion and Service Schemas: JSON bodies returned by the API.

Invariants:
    - ConversionResponse.input echoes the raw query string, not the parsed int
    - Wire names are camelCase (traceId, totalRequests, ...)
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing snake_case fields as camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversionResponse(CamelModel):
    """Successful integer -> Roman numeral conversion."""
    input: str
    output: str
    trace_id: str


class HealthResponse(CamelModel):
    status: str = "healthy"
    timestamp: str
    trace_id: str


class MetricsResponse(CamelModel):
    """Counter snapshot for GET /metrics."""
    uptime: int
    total_requests: int
    successful_conversions: int
    error_count: int
    timestamp: str
    trace_id: str


class EndpointCatalog(BaseModel):
    health: str
    convert: str
    metrics: str
    ui: str
    examples: list[str]


class ApiInfoResponse(BaseModel):
    message: str
    version: str
    endpoints: EndpointCatalog
    frontend: str
