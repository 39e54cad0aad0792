"""Shared base for repositories that keep a whole collection under one key.

Reads parse the JSON array; writes serialize the full array back. There is no
locking or version check: concurrent writers race and the last write wins.
"""

import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from app.application.interfaces import KeyValueStore
from app.application.services.id_generator import Clock, utc_now
from app.infrastructure.storage.seed_data import SEEDS
from app.infrastructure.storage.storage_keys import StorageKey

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class JsonCollectionRepository(Generic[EntityT]):
    """Loads and saves one collection of entities as a JSON array.

    Subclasses set ``key`` and ``record_type`` (a record model exposing
    ``from_entity`` / ``to_entity``). When the key is absent the seed for the
    collection is returned; ``persist_seed`` also writes it back. Unreadable
    stored text is logged and replaced by the seed on read.
    """

    key: StorageKey
    record_type: Any
    persist_seed: bool = False

    def __init__(self, store: KeyValueStore, clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    def _seed(self) -> list[EntityT]:
        return SEEDS[self.key](self._clock())

    async def _load(self) -> list[EntityT]:
        raw = await self._store.get_item(self.key.value)
        if raw is None:
            entities = self._seed()
            if self.persist_seed:
                await self._save(entities)
            return entities

        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError(f"expected a JSON array, got {type(items).__name__}")
            return [self.record_type.model_validate(item).to_entity() for item in items]
        except (ValueError, ValidationError) as exc:
            logger.warning(
                "Stored collection '%s' is unreadable, using seed data: %s",
                self.key.value,
                exc,
            )
            return self._seed()

    async def _save(self, entities: list[EntityT]) -> None:
        payload = [self.record_type.from_entity(e).to_json_dict() for e in entities]
        await self._store.set_item(self.key.value, json.dumps(payload))
        logger.debug("Saved %d records to '%s'", len(payload), self.key.value)

    async def _find(self, entity_id: str) -> EntityT | None:
        for entity in await self._load():
            if getattr(entity, "id") == entity_id:
                return entity
        return None

    async def _prepend(self, entity: EntityT) -> EntityT:
        entities = await self._load()
        await self._save([entity, *entities])
        return entity

    async def _append(self, entity: EntityT) -> EntityT:
        entities = await self._load()
        await self._save([*entities, entity])
        return entity

    async def _replace(self, entity: EntityT) -> bool:
        """Swap in ``entity`` for the stored one with the same id."""
        entities = await self._load()
        entity_id = getattr(entity, "id")
        replaced = False
        for index, existing in enumerate(entities):
            if getattr(existing, "id") == entity_id:
                entities[index] = entity
                replaced = True
        if replaced:
            await self._save(entities)
        return replaced

    async def _remove(self, entity_id: str) -> bool:
        entities = await self._load()
        remaining = [e for e in entities if getattr(e, "id") != entity_id]
        if len(remaining) == len(entities):
            return False
        await self._save(remaining)
        return True
