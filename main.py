import argparse
import logging
import sys
from typing import List, Optional

from fastapi import FastAPI

from geo.api import routes_geo, routes_health
from geo.core.config import Settings, get_settings
from geo.core.errors import LoadError
from geo.core.logging import configure_logging
from geo.core.tracing import LoggingTracer, Tracer
from geo.services.geo_service import GeoService
from geo.storage.loader import load_locations
from geo.storage.repository import LocationStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings,
    store: Optional[LocationStore] = None,
    tracer: Optional[Tracer] = None,
) -> FastAPI:
    """
    Build the application. The location store is loaded eagerly from
    ``settings.json_db_file`` unless one is passed in, so a bad dataset raises
    LoadError here rather than after the server starts accepting requests.
    """
    if store is None:
        store = load_locations(settings.json_db_file)

    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_geo.router, prefix="/geo", tags=["geo"])

    app.state.settings = settings
    app.state.store = store
    app.state.geo_service = GeoService(
        store=store,
        tracer=tracer or LoggingTracer(),
        service_name=settings.service_name,
    )
    return app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Geo service: look up hotels inside a bounding box."
    )
    parser.add_argument("--port", type=int, default=None, help="The server port")
    parser.add_argument(
        "--json-db-file",
        "--json_db_file",
        dest="json_db_file",
        default=None,
        help="A json file containing hotel locations",
    )
    return parser.parse_args(argv)


def build_settings(argv: Optional[List[str]] = None) -> Settings:
    args = parse_args(argv)
    overrides = {}
    if args.port is not None:
        overrides["port"] = args.port
    if args.json_db_file is not None:
        overrides["json_db_file"] = args.json_db_file
    return get_settings().model_copy(update=overrides)


def main(argv: Optional[List[str]] = None) -> None:
    import uvicorn

    settings = build_settings(argv)
    configure_logging(settings.log_level)
    try:
        app = create_app(settings)
    except LoadError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    logger.info("Serving %s on %s:%d", settings.service_name, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
