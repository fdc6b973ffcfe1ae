from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Point:
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class Rectangle:
    lo: Point = field(default_factory=Point)
    hi: Point = field(default_factory=Point)


@dataclass(frozen=True)
class LocationRecord:
    hotel_id: int
    point: Point


@dataclass(frozen=True)
class TraceContext:
    """Per-request correlation data handed to the tracer, never interpreted here."""

    trace_id: Optional[str] = None
    caller: Optional[str] = None
