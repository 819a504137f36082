# brewery_api/db/session.py
from dataclasses import dataclass

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

from brewery_api.core.config import Settings
from brewery_api.core.logging import get_logger
from brewery_api.db.models import Beer, Customer
from brewery_api.db.store import EntityStore, InMemoryEntityStore, MongoEntityStore

logger = get_logger(__name__)


@dataclass
class Stores:
    """The per-resource stores plus the client backing them, if any."""
    customers: EntityStore[Customer]
    beers: EntityStore[Beer]
    client: AsyncIOMotorClient | None = None

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None


def create_stores(settings: Settings) -> Stores:
    """
    Builds the stores for the configured backend.
    Must be called from inside the running event loop (app lifespan / script main).
    """
    if settings.STORE_BACKEND == "memory":
        logger.info("Using in-memory entity stores")
        return Stores(customers=InMemoryEntityStore(), beers=InMemoryEntityStore())

    # motor connects lazily, nothing is sent to the server until the first operation
    client = AsyncIOMotorClient(settings.MONGODB_URL, tz_aware=True)
    database = client[settings.MONGODB_DATABASE]
    logger.info("Using MongoDB database '%s'", settings.MONGODB_DATABASE)
    return Stores(
        customers=MongoEntityStore(database[Customer.COLLECTION], Customer),
        beers=MongoEntityStore(database[Beer.COLLECTION], Beer),
        client=client,
    )


# FastAPI dependencies; the stores are created once at startup and live on app.state
def get_customer_store(request: Request) -> EntityStore[Customer]:
    return request.app.state.stores.customers


def get_beer_store(request: Request) -> EntityStore[Beer]:
    return request.app.state.stores.beers
