"""Application entrypoint and configuration for FastAPI.

Builds the app, owns the process-wide catalog manager and secret, and
applies project-wide settings and routers.
"""

from fastapi import FastAPI
from contextlib import asynccontextmanager
from get_env_values import SOFKA_SECRET, CATALOG_PATH
from sofka_aroma.catalog.catalog import CatalogManager
from sofka_aroma.routers.validate_router import validate_router
from sofka_aroma.settings import configure_app
import logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle handler.

    The catalog itself is read lazily on the first request.
    """
    catalog = app.state.catalog
    if catalog.loaded:
        logging.info(f"Catalog provided in memory ({len(catalog.load())} records)")
    else:
        logging.info(f"Catalog configured at {catalog.path}")
    if app.state.secret:
        logging.info("Signature enforcement enabled")
    else:
        logging.info("Signature enforcement disabled (no SOFKA_SECRET)")
    yield


def create_app(catalog: CatalogManager = None, secret: str = None) -> FastAPI:
    """
    Build the application. `catalog` and `secret` default to the values from
    the environment.
    """
    app = FastAPI(lifespan=lifespan)
    app.state.catalog = catalog if catalog is not None else CatalogManager(CATALOG_PATH or None)
    app.state.secret = SOFKA_SECRET if secret is None else secret
    configure_app(app)
    app.include_router(validate_router)
    return app


# Configure root logger to show INFO in CLI
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

app = create_app()
