# brewery_api/db/bootstrap_data.py
"""
Example data loaded at startup.

For each resource the collection is emptied and, once the store reports a
count of zero, the fixed records below are inserted. Beers and customers are
seeded independently and concurrently. Seeding is best-effort: a failing
insert is logged and the remaining records are still saved, and a failing
resource never takes the application down.
"""
import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from brewery_api.core.logging import get_logger
from brewery_api.db.models import Beer, Customer
from brewery_api.db.store import EntityStore

logger = get_logger(__name__)

BEER_SEED_DATA: tuple[dict[str, Any], ...] = (
    {"beer_name": "Galaxy Cat", "beer_style": "Pale Ale", "upc": "12356",
     "price": Decimal("12.99"), "quantity_on_hand": 122},
    {"beer_name": "Crank", "beer_style": "Pale Ale", "upc": "12356222",
     "price": Decimal("11.99"), "quantity_on_hand": 392},
    {"beer_name": "Sunshine City", "beer_style": "IPA", "upc": "12356",
     "price": Decimal("13.99"), "quantity_on_hand": 144},
)

CUSTOMER_SEED_DATA: tuple[dict[str, Any], ...] = (
    {"customer_name": "Good Customer"},
    {"customer_name": "Average Customer"},
    {"customer_name": "Bad Customer"},
)


async def seed_if_empty(store: EntityStore, model: type[BaseModel], records) -> int:
    """
    Inserts ``records`` only if the store is empty.
    Returns how many records were actually inserted.
    """
    count = await store.count()
    if count:
        logger.info("%s store already holds %d records, skipping seed", model.__name__, count)
        return 0

    inserted = 0
    for fields in records:
        now = datetime.now(timezone.utc)
        try:
            await store.save(model(**fields, created_date=now, last_modified_date=now))
        except Exception:
            logger.exception("Could not seed %s %s", model.__name__, fields)
            continue
        inserted += 1
    logger.info("Seeded %d/%d %s records", inserted, len(records), model.__name__)
    return inserted


async def reset_and_seed(store: EntityStore, model: type[BaseModel], records) -> int:
    await store.delete_all()
    return await seed_if_empty(store, model, records)


@dataclass
class SeedReport:
    inserted: dict[str, int] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class DataSeeder:
    """
    Runs the reset-and-seed chain of every resource as one task.

    ``start()`` schedules it without waiting, ``wait()`` awaits it and returns
    the SeedReport, and ``ready`` is set once all chains finished, whatever
    their outcome.
    """

    def __init__(self, customer_store: EntityStore[Customer], beer_store: EntityStore[Beer]):
        self._plan = {
            "beer": (beer_store, Beer, BEER_SEED_DATA),
            "customer": (customer_store, Customer, CUSTOMER_SEED_DATA),
        }
        self._task: asyncio.Task | None = None
        self.ready = asyncio.Event()
        self.report = SeedReport()

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._run(), name="bootstrap-seed")
        return self._task

    async def wait(self) -> SeedReport:
        return await self.start()

    async def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.warning("Seeding cancelled before completion")

    async def _run(self) -> SeedReport:
        names = list(self._plan)
        try:
            results = await asyncio.gather(
                *(reset_and_seed(*self._plan[name]) for name in names),
                return_exceptions=True,
            )
            for name, result in zip(names, results):
                if isinstance(result, Exception):
                    logger.error("Seeding %s failed", name, exc_info=result)
                    self.report.failed[name] = repr(result)
                else:
                    self.report.inserted[name] = result
        finally:
            self.ready.set()
        return self.report
