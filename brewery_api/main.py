from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brewery_api.api.v1.api import api_router
from brewery_api.api.v1.errors import register_exception_handlers
from brewery_api.core.config import Settings, get_settings
from brewery_api.core.logging import get_logger
from brewery_api.core.metrics import instrument_app
from brewery_api.db.bootstrap_data import DataSeeder
from brewery_api.db.session import Stores, create_stores

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    owns_stores = app.state.stores is None
    if owns_stores:
        app.state.stores = create_stores(settings)
    stores: Stores = app.state.stores

    app.state.seeder = None
    if settings.SEED_ON_STARTUP:
        seeder = DataSeeder(customer_store=stores.customers, beer_store=stores.beers)
        app.state.seeder = seeder
        seeder.start()
        if settings.SEED_BLOCKING_STARTUP:
            # no request is served before the example data is in place
            report = await seeder.wait()
            logger.info("Startup seed finished: inserted=%s failed=%s", report.inserted, report.failed)

    logger.info("Application startup")
    yield
    logger.info("Application shutdown")

    if app.state.seeder is not None:
        await app.state.seeder.cancel()
    if owns_stores:
        stores.close()
        app.state.stores = None


def create_app(settings: Settings | None = None, stores: Stores | None = None) -> FastAPI:
    """
    Builds the application. ``stores`` may be passed in (tests do this);
    otherwise they are created from ``settings`` when the app starts.
    """
    settings = settings or get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.stores = stores
    app.state.seeder = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    if settings.METRICS_ENABLED:
        instrument_app(app)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
