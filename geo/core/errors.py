class GeoServiceError(Exception):
    """Base error for the geo service."""


class LoadError(GeoServiceError):
    """The location dataset could not be read or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load locations from {source}: {reason}")
        self.source = source
        self.reason = reason
