"""
Resets both collections of the configured store and loads the example data.

    python scripts/seed_data.py

Connection settings come from the environment / .env (MONGODB_URL,
MONGODB_DATABASE, STORE_BACKEND), same as the API.
"""
import asyncio

from brewery_api.core.config import get_settings
from brewery_api.db.bootstrap_data import DataSeeder
from brewery_api.db.session import create_stores


async def main() -> int:
    settings = get_settings()
    stores = create_stores(settings)
    try:
        print(f"Seeding {settings.STORE_BACKEND} store...")
        report = await DataSeeder(customer_store=stores.customers, beer_store=stores.beers).wait()
        print(f"Beers in store: {await stores.beers.count()}")
        print(f"Customers in store: {await stores.customers.count()}")
        for name, error in report.failed.items():
            print(f"❌ Seeding {name} failed: {error}")
        return 0 if report.ok else 1
    finally:
        stores.close()


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
