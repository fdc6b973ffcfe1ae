from fastapi import APIRouter, Depends

from geo.api import get_geo_service, get_trace_context
from geo.models.domain import TraceContext
from geo.models.schemas import BoundedBoxReply, RectangleSchema
from geo.services.geo_service import GeoService

router = APIRouter()


@router.post("/bounded-box", response_model=BoundedBoxReply)
def bounded_box(
    rect: RectangleSchema,
    service: GeoService = Depends(get_geo_service),
    trace: TraceContext = Depends(get_trace_context),
) -> BoundedBoxReply:
    hotel_ids = service.bounded_box(rect.to_domain(), trace=trace)
    return BoundedBoxReply(hotel_ids=hotel_ids)
