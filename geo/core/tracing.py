import logging
from datetime import datetime, timezone
from typing import Protocol

from geo.models.domain import TraceContext

logger = logging.getLogger(__name__)


class Tracer(Protocol):
    """Receives enter/exit events for each handled request."""

    def trace_in(self, trace: TraceContext, service_name: str) -> None:
        ...

    def trace_out(self, trace: TraceContext, service_name: str, started_at: datetime) -> None:
        ...


class LoggingTracer:
    """
    Default tracer: writes the events to the application log. A collector-backed
    tracer can replace it by implementing the Tracer protocol.
    """

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def trace_in(self, trace: TraceContext, service_name: str) -> None:
        self.log.info(
            "trace=%s in %s -> %s",
            trace.trace_id or "-",
            trace.caller or "-",
            service_name,
        )

    def trace_out(self, trace: TraceContext, service_name: str, started_at: datetime) -> None:
        elapsed_ms = (datetime.now(timezone.utc) - started_at).total_seconds() * 1000
        self.log.info(
            "trace=%s out %s -> %s (%.3f ms)",
            trace.trace_id or "-",
            service_name,
            trace.caller or "-",
            elapsed_ms,
        )
