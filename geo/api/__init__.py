from fastapi import HTTPException
from starlette.requests import Request

from geo.models.domain import TraceContext
from geo.services.geo_service import GeoService
from geo.storage.repository import LocationStore


def get_store(request: Request) -> LocationStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=500, detail="Location store not initialized")
    return store


def get_geo_service(request: Request) -> GeoService:
    service = getattr(request.app.state, "geo_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="Geo service not initialized")
    return service


def get_trace_context(request: Request) -> TraceContext:
    # Header lookup is case-insensitive, so "traceID" and "traceid" both match.
    return TraceContext(
        trace_id=request.headers.get("traceid"),
        caller=request.headers.get("from"),
    )
