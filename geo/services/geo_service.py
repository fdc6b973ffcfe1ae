import logging
import math
from datetime import datetime, timezone
from typing import List, Optional

from geo.core.tracing import LoggingTracer, Tracer
from geo.models.domain import Point, Rectangle, TraceContext
from geo.storage.repository import LocationStore

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_NAME = "service.geo"


def contains(point: Point, rect: Rectangle) -> bool:
    """
    Planar, edge-inclusive containment test. The rectangle corners may be given
    in any order; no antimeridian or pole wraparound is applied.
    """
    left = min(rect.lo.longitude, rect.hi.longitude)
    right = max(rect.lo.longitude, rect.hi.longitude)
    top = max(rect.lo.latitude, rect.hi.latitude)
    bottom = min(rect.lo.latitude, rect.hi.latitude)

    # min/max return the first argument when the other is NaN; re-check the
    # raw bounds so any NaN corner matches nothing.
    lats = (rect.lo.latitude, rect.hi.latitude)
    lons = (rect.lo.longitude, rect.hi.longitude)
    if any(math.isnan(v) for v in lats + lons):
        return False

    return left <= point.longitude <= right and bottom <= point.latitude <= top


class GeoService:
    def __init__(
        self,
        store: LocationStore,
        tracer: Optional[Tracer] = None,
        service_name: str = DEFAULT_SERVICE_NAME,
    ):
        self.store = store
        self.tracer = tracer or LoggingTracer()
        self.service_name = service_name

    def bounded_box(self, rect: Rectangle, trace: Optional[TraceContext] = None) -> List[int]:
        """Return ids of all hotels inside ``rect``, in store order."""
        trace = trace or TraceContext()
        started_at = datetime.now(timezone.utc)
        self._trace_in(trace)
        try:
            return [loc.hotel_id for loc in self.store if contains(loc.point, rect)]
        finally:
            self._trace_out(trace, started_at)

    def _trace_in(self, trace: TraceContext) -> None:
        try:
            self.tracer.trace_in(trace, self.service_name)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Tracer failed on enter: %s", exc)

    def _trace_out(self, trace: TraceContext, started_at: datetime) -> None:
        try:
            self.tracer.trace_out(trace, self.service_name, started_at)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Tracer failed on exit: %s", exc)
