"""Integration tests for the health probes and the startup seed."""
import asyncio
import logging

import pytest
from fastapi.testclient import TestClient

from brewery_api.db.session import Stores
from brewery_api.db.store import InMemoryEntityStore
from brewery_api.main import create_app

pytestmark = pytest.mark.integration


@pytest.fixture()
def seeding_settings(settings):
    return settings.model_copy(update={"SEED_ON_STARTUP": True, "SEED_BLOCKING_STARTUP": True})


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_ready_without_seeding(self, client):
        assert client.get("/api/v1/health/ready").json() == {"status": "ready"}

    def test_ready_is_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="brewery_api.utils.decorators"):
            client.get("/api/v1/health/ready")
        assert "Endpoint readiness_check finished" in caplog.text


class TestStartupSeed:
    def test_seed_data_available_on_first_request(self, seeding_settings):
        app = create_app(
            settings=seeding_settings,
            stores=Stores(customers=InMemoryEntityStore(), beers=InMemoryEntityStore()),
        )

        with TestClient(app) as client:
            assert client.get("/api/v1/health/ready").status_code == 200
            customers = client.get("/api/v1/customer").json()
            beers = client.get("/api/v1/beer").json()

        assert sorted(c["customerName"] for c in customers) == ["Average Customer", "Bad Customer", "Good Customer"]
        assert len(beers) == 3

    def test_restart_resets_to_seed(self, seeding_settings):
        stores = Stores(customers=InMemoryEntityStore(), beers=InMemoryEntityStore())
        app = create_app(settings=seeding_settings, stores=stores)

        with TestClient(app) as client:
            client.post("/api/v1/customer", json={"customerName": "Extra"})
            assert len(client.get("/api/v1/customer").json()) == 4

        with TestClient(app) as client:
            assert len(client.get("/api/v1/customer").json()) == 3

    def test_memory_backend_from_settings(self, seeding_settings):
        app = create_app(settings=seeding_settings)

        with TestClient(app) as client:
            assert len(client.get("/api/v1/beer").json()) == 3

        assert app.state.stores is None


class GatedStore(InMemoryEntityStore):
    """delete_all blocks until ``gate`` is set, holding the seed chain open."""

    def __init__(self):
        super().__init__()
        self.gate = asyncio.Event()

    async def delete_all(self):
        await self.gate.wait()
        await super().delete_all()


class TestBackgroundSeed:
    def test_ready_reports_seeding_until_seed_completes(self, settings):
        beers = GatedStore()
        app = create_app(
            settings=settings.model_copy(update={"SEED_ON_STARTUP": True, "SEED_BLOCKING_STARTUP": False}),
            stores=Stores(customers=InMemoryEntityStore(), beers=beers),
        )

        with TestClient(app) as client:
            response = client.get("/api/v1/health/ready")
            assert response.status_code == 503
            assert response.json() == {"status": "seeding"}

            # the event lives on the app's loop, so release it from there
            client.portal.call(beers.gate.set)
            report = client.portal.call(app.state.seeder.wait)

            response = client.get("/api/v1/health/ready")
            assert response.status_code == 200
            assert response.json() == {"status": "ready"}
            assert report.inserted == {"beer": 3, "customer": 3}
            assert len(client.get("/api/v1/beer").json()) == 3
