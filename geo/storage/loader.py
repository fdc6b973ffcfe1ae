import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from geo.core.errors import LoadError
from geo.models.schemas import DatasetLocationSchema
from geo.storage.repository import LocationStore

logger = logging.getLogger(__name__)

_dataset_adapter = TypeAdapter(List[DatasetLocationSchema])


def parse_locations(raw: bytes | str, source: str = "<memory>") -> LocationStore:
    """
    Deserialize a JSON array of hotel locations, keeping source order.
    Raises LoadError if the content is not a valid array of location objects.
    """
    try:
        parsed = _dataset_adapter.validate_json(raw)
    except ValidationError as exc:
        raise LoadError(source, str(exc)) from exc
    return LocationStore(item.to_domain() for item in parsed)


def load_locations(path: str | Path) -> LocationStore:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LoadError(str(path), str(exc)) from exc
    store = parse_locations(raw, source=str(path))
    logger.info("Loaded %d hotel locations from %s", len(store), path)
    return store
