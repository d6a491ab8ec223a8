"""API Info: GET / describes the available endpoints."""

from fastapi import APIRouter, Depends

from roman_api.api.dependencies import get_app_settings
from roman_api.config import Settings
from roman_api.schemas.conversion import ApiInfoResponse, EndpointCatalog

router = APIRouter(tags=["info"])

AVAILABLE_ENDPOINTS = {
    "root": "GET /",
    "health": "GET /health",
    "metrics": "GET /metrics",
    "convert": "GET /romannumeral?query={number}",
}


@router.get("/", response_model=ApiInfoResponse)
async def api_info(settings: Settings = Depends(get_app_settings)):
    return ApiInfoResponse(
        message="Roman Numeral Converter API",
        version=settings.version,
        endpoints=EndpointCatalog(
            health=AVAILABLE_ENDPOINTS["health"],
            convert=AVAILABLE_ENDPOINTS["convert"],
            metrics=AVAILABLE_ENDPOINTS["metrics"],
            ui="GET /ui/",
            examples=[
                "GET /romannumeral?query=1",
                "GET /romannumeral?query=42",
                "GET /romannumeral?query=1984",
            ],
        ),
        frontend="Open /ui/ in a browser for the web interface",
    )
