from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from brewery_api.core.config import Settings
from brewery_api.db.session import Stores
from brewery_api.db.store import InMemoryEntityStore
from brewery_api.main import create_app


@pytest.fixture()
def customer_store():
    return InMemoryEntityStore()


@pytest.fixture()
def beer_store():
    return InMemoryEntityStore()


@pytest.fixture()
def settings():
    return Settings(
        _env_file=None,
        STORE_BACKEND="memory",
        SEED_ON_STARTUP=False,
        METRICS_ENABLED=False,
    )


@pytest.fixture()
def app(settings, customer_store, beer_store):
    return create_app(settings=settings, stores=Stores(customers=customer_store, beers=beer_store))


@pytest.fixture()
def client(app):
    """TestClient with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def clock(monkeypatch):
    """
    Controls the time seen by the crud layer. ``clock.advance(seconds)``
    moves it forward.
    """

    class Clock:
        def __init__(self):
            self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        def __call__(self):
            return self.now

        def advance(self, seconds: float = 60):
            self.now += timedelta(seconds=seconds)
            return self.now

    fake = Clock()
    monkeypatch.setattr("brewery_api.crud.common.utcnow", fake)
    return fake
