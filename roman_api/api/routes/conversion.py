"""Conversion Route: GET /romannumeral?query={number}.

Invariants:
    - Query validated by core.parse_query before the converter runs
    - Client errors (missing, malformed, out of range) -> 400 plain text via error handlers
    - Converter failure after validation -> ConversionFailedError (500)
    - Successful conversions increment metrics.successful_conversions
"""

import logging

from fastapi import APIRouter, Depends, Query

from roman_api.api.dependencies import get_metrics, get_trace_id
from roman_api.core.errors import (
    ConversionFailedError, NotAnIntegerError, NumberOutOfRangeError,
)
from roman_api.core.metrics import MetricsCollector
from roman_api.core.parse_query import parse_query
from roman_api.core.roman_converter import convert_to_roman
from roman_api.schemas.conversion import ConversionResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["conversion"])


@router.get("/romannumeral", response_model=ConversionResponse)
async def convert_number(
    query: str | None = Query(None, description="Integer between 1 and 3999"),
    metrics: MetricsCollector = Depends(get_metrics),
    trace_id: str | None = Depends(get_trace_id),
):
    """Convert the `query` integer to a Roman numeral."""
    logger.info(
        f"Roman numeral conversion requested for: {query}",
        extra={"trace_id": trace_id, "query": query},
    )
    value = parse_query(query)

    try:
        numeral = convert_to_roman(value)
    except (NumberOutOfRangeError, NotAnIntegerError) as exc:
        raise ConversionFailedError(value, exc.message) from exc

    metrics.record_success()
    logger.info(
        f"Converted {value} to {numeral}", extra={"trace_id": trace_id},
    )
    return ConversionResponse(input=query, output=numeral, trace_id=trace_id)
