# brewery_api/db/store.py
"""
Entity store adapters.

``EntityStore`` is the persistence contract the crud layer and the
bootstrap seeder depend on. Two implementations are provided:

* ``MongoEntityStore`` - one MongoDB collection per entity type, accessed
  through motor.
* ``InMemoryEntityStore`` - a dict living in the process, used by the
  test-suite and by ``STORE_BACKEND=memory``.

Adapters do no validation and never raise on a missing id; callers are
expected to check existence first when they care.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Generic, TypeVar

from bson import ObjectId
from bson.codec_options import CodecOptions, TypeCodec, TypeRegistry
from bson.decimal128 import Decimal128
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel

E = TypeVar("E", bound=BaseModel)


def new_id() -> str:
    return str(ObjectId())


class EntityStore(ABC, Generic[E]):
    """Persistence contract for one entity type, keyed by an opaque string id."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entities."""

    @abstractmethod
    async def find_all(self) -> list[E]:
        """All stored entities."""

    @abstractmethod
    async def find_by_id(self, entity_id: str) -> E | None:
        """The entity with ``entity_id`` or ``None``."""

    @abstractmethod
    async def save(self, entity: E) -> E:
        """Insert when ``entity.id`` is empty (a new id is assigned), replace otherwise."""

    @abstractmethod
    async def delete_by_id(self, entity_id: str) -> None:
        """Remove the entity; silently does nothing if it is absent."""

    @abstractmethod
    async def delete_all(self) -> None:
        """Empty the whole collection."""


class DecimalCodec(TypeCodec):
    python_type = Decimal
    bson_type = Decimal128

    def transform_python(self, value):
        return Decimal128(value)

    def transform_bson(self, value):
        return value.to_decimal()


CODEC_OPTIONS = CodecOptions(tz_aware=True, type_registry=TypeRegistry([DecimalCodec()]))


class MongoEntityStore(EntityStore[E]):
    def __init__(self, collection: AsyncIOMotorCollection, model: type[E]):
        self._collection = collection.with_options(codec_options=CODEC_OPTIONS)
        self._model = model

    def _to_document(self, entity: E) -> dict:
        document = entity.model_dump(exclude={"id"})
        document["_id"] = entity.id
        return document

    def _to_entity(self, document: dict) -> E:
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return self._model.model_validate(data)

    async def count(self) -> int:
        return await self._collection.count_documents({})

    async def find_all(self) -> list[E]:
        return [self._to_entity(doc) async for doc in self._collection.find({})]

    async def find_by_id(self, entity_id: str) -> E | None:
        document = await self._collection.find_one({"_id": entity_id})
        if document is None:
            return None
        return self._to_entity(document)

    async def save(self, entity: E) -> E:
        if not entity.id:
            entity = entity.model_copy(update={"id": new_id()})
            await self._collection.insert_one(self._to_document(entity))
        else:
            await self._collection.replace_one({"_id": entity.id}, self._to_document(entity), upsert=True)
        return entity

    async def delete_by_id(self, entity_id: str) -> None:
        await self._collection.delete_one({"_id": entity_id})

    async def delete_all(self) -> None:
        await self._collection.delete_many({})


class InMemoryEntityStore(EntityStore[E]):
    """
    Keeps deep copies so callers can never mutate what is "persisted".
    Iteration order is insertion order.
    """

    def __init__(self):
        self._records: dict[str, E] = {}

    async def count(self) -> int:
        return len(self._records)

    async def find_all(self) -> list[E]:
        return [entity.model_copy(deep=True) for entity in self._records.values()]

    async def find_by_id(self, entity_id: str) -> E | None:
        entity = self._records.get(entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    async def save(self, entity: E) -> E:
        if not entity.id:
            entity = entity.model_copy(update={"id": new_id()})
        self._records[entity.id] = entity.model_copy(deep=True)
        return entity

    async def delete_by_id(self, entity_id: str) -> None:
        self._records.pop(entity_id, None)

    async def delete_all(self) -> None:
        self._records.clear()
