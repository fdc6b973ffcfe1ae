from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from geo.models.domain import LocationRecord


class LocationStore:
    """Read-only, ordered collection of hotel locations held in memory."""

    def __init__(self, records: Iterable[LocationRecord] = ()) -> None:
        self._records: Tuple[LocationRecord, ...] = tuple(records)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> LocationRecord:
        return self._records[index]

    def __repr__(self) -> str:
        return f"LocationStore({len(self._records)} records)"
