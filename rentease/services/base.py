"""
Entity Service Base
Uniform list/get/create/update/delete over one persisted collection.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from rentease.models.base import generate_id, next_timestamp, utcnow
from rentease.services.result import ServiceResult
from rentease.storage import CollectionKey, KeyValueStore

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Payload = Union[BaseModel, Mapping[str, Any]]

# Fields a patch may never overwrite
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


def format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors()[:5]:
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(parts)


class EntityService(Generic[M]):
    model: Type[M]
    collection: CollectionKey
    id_prefix: str
    entity_name: str = "Record"

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    # ==================== Storage ====================

    def _load(self) -> List[M]:
        raw = self.store.get(self.collection) or []
        return [self.model.model_validate(item) for item in raw]

    def _save(self, items: List[M]) -> None:
        self.store.set(self.collection, [item.model_dump(mode="json", by_alias=True) for item in items])

    @staticmethod
    def _index_of(items: List[M], entity_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == entity_id:
                return index
        return -1

    def _not_found(self) -> ServiceResult:
        return ServiceResult.not_found(f"{self.entity_name} not found")

    def _field_names(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Map camelCase or snake_case keys onto model field names, dropping unknown keys."""
        aliases = {}
        for name, info in self.model.model_fields.items():
            aliases[name] = name
            if info.alias:
                aliases[info.alias] = name
        normalized = {}
        for key, value in payload.items():
            name = aliases.get(key)
            if name is None:
                logger.debug(f"Ignoring unknown {self.entity_name} field '{key}'")
                continue
            normalized[name] = value
        return normalized

    def _to_mapping(self, payload: Payload, *, partial: bool) -> Dict[str, Any]:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=partial)
        return self._field_names(payload)

    @property
    def _tracks_updates(self) -> bool:
        return "updated_at" in self.model.model_fields

    # ==================== Hooks ====================

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def _prepare_update(self, before: M, merged: Dict[str, Any]) -> Dict[str, Any]:
        return merged

    def _after_create(self, entity: M) -> None:
        pass

    def _after_update(self, before: M, after: M) -> None:
        pass

    # ==================== Queries ====================

    def list_all(self) -> ServiceResult[List[M]]:
        return ServiceResult.ok(self._load())

    def list_by(self, field: str, value: Any) -> ServiceResult[List[M]]:
        """Items whose ``field`` equals ``value``; an unknown value yields an empty list."""
        return ServiceResult.ok([item for item in self._load() if getattr(item, field, None) == value])

    def get_by_id(self, entity_id: str) -> ServiceResult[M]:
        for item in self._load():
            if item.id == entity_id:
                return ServiceResult.ok(item)
        return self._not_found()

    # ==================== Commands ====================

    def create(self, payload: Payload) -> ServiceResult[M]:
        data = self._to_mapping(payload, partial=False)
        for name in IMMUTABLE_FIELDS:
            data.pop(name, None)
        data = self._prepare_create(data)

        now = utcnow()
        data["id"] = generate_id(self.id_prefix)
        data["created_at"] = now
        if self._tracks_updates:
            data["updated_at"] = now

        try:
            entity = self.model.model_validate(data)
        except ValidationError as exc:
            return ServiceResult.invalid(format_validation_error(exc))

        with self.store.lock:
            items = self._load()
            items.append(entity)
            self._save(items)
            self._after_create(entity)

        logger.info(f"Created {self.entity_name.lower()} {entity.id}")
        return ServiceResult.ok(entity)

    def update(self, entity_id: str, patch: Payload) -> ServiceResult[M]:
        """Shallow-merge ``patch`` over the stored record."""
        changes = self._to_mapping(patch, partial=True)
        for name in IMMUTABLE_FIELDS:
            changes.pop(name, None)

        with self.store.lock:
            items = self._load()
            index = self._index_of(items, entity_id)
            if index == -1:
                logger.warning(f"{self.entity_name} {entity_id} not found for update")
                return self._not_found()

            before = items[index]
            merged = {**before.model_dump(), **changes}
            if self._tracks_updates:
                merged["updated_at"] = next_timestamp(before.updated_at)
            merged = self._prepare_update(before, merged)
            try:
                after = self.model.model_validate(merged)
            except ValidationError as exc:
                return ServiceResult.invalid(format_validation_error(exc))

            items[index] = after
            self._save(items)
            self._after_update(before, after)

        logger.info(f"Updated {self.entity_name.lower()} {entity_id} fields={sorted(changes)}")
        return ServiceResult.ok(after)

    def delete(self, entity_id: str) -> ServiceResult[None]:
        """Remove the record; deleting an unknown id is a no-op."""
        with self.store.lock:
            items = self._load()
            remaining = [item for item in items if item.id != entity_id]
            if len(remaining) != len(items):
                self._save(remaining)
                logger.info(f"Deleted {self.entity_name.lower()} {entity_id}")
        return ServiceResult.ok(None)
