from fastapi import APIRouter, Depends

from geo.api import get_store
from geo.storage.repository import LocationStore

router = APIRouter()


@router.get("/health")
def healthcheck(store: LocationStore = Depends(get_store)) -> dict:
    return {"status": "ok", "locations": len(store)}
