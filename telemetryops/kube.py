"""A small in-memory object store with Kubernetes-style helpers."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Callable, Iterable


class NotFoundError(LookupError):
    """Raised when an object does not exist in the store."""

    def __init__(self, kind: str, namespace: str, name: str) -> None:
        super().__init__(f'{kind} "{namespace}/{name}" not found')
        self.kind = kind
        self.namespace = namespace
        self.name = name


class OperationResult(str, Enum):
    """What create_or_update did to the stored object."""

    NONE = "unchanged"
    CREATED = "created"
    UPDATED = "updated"


def object_key(obj: dict) -> tuple[str, str]:
    """Return the (namespace, name) pair identifying an object."""
    meta = obj.get("metadata") or {}
    return meta.get("namespace", ""), meta.get("name", "")


def _store_key(obj: dict) -> tuple[str, str, str]:
    namespace, name = object_key(obj)
    return obj.get("kind", ""), namespace, name


class KubeClient:
    """Objects kept in memory, keyed by kind, namespace and name."""

    def __init__(self, objects: Iterable[dict] = ()) -> None:
        self._objects: dict[tuple[str, str, str], dict] = {}
        for obj in objects:
            self.create(obj)

    def __len__(self) -> int:
        return len(self._objects)

    def exists(self, kind: str, namespace: str, name: str) -> bool:
        return (kind, namespace, name) in self._objects

    def get(self, kind: str, namespace: str, name: str) -> dict:
        try:
            return copy.deepcopy(self._objects[(kind, namespace, name)])
        except KeyError:
            raise NotFoundError(kind, namespace, name) from None

    def create(self, obj: dict) -> None:
        key = _store_key(obj)
        if key in self._objects:
            kind, namespace, name = key
            raise ValueError(f'{kind} "{namespace}/{name}" already exists')
        self._objects[key] = copy.deepcopy(obj)

    def update(self, obj: dict) -> None:
        key = _store_key(obj)
        if key not in self._objects:
            raise NotFoundError(*key)
        self._objects[key] = copy.deepcopy(obj)

    def delete(self, obj: dict) -> None:
        key = _store_key(obj)
        if key not in self._objects:
            raise NotFoundError(*key)
        del self._objects[key]


def ensure_deleted(client: KubeClient, obj: dict) -> bool:
    """Delete the object unless it is absent or already being deleted.

    Returns True when a delete was issued.
    """
    kind = obj.get("kind", "")
    namespace, name = object_key(obj)
    try:
        current = client.get(kind, namespace, name)
    except NotFoundError:
        return False
    if (current.get("metadata") or {}).get("deletionTimestamp"):
        return False
    client.delete(current)
    return True


def create_or_update(
    client: KubeClient, obj: dict, mutate: Callable[[dict], None]
) -> OperationResult:
    """Fetch the object into ``obj``, apply ``mutate`` and store the result."""
    kind = obj.get("kind", "")
    key = object_key(obj)
    try:
        existing = client.get(kind, *key)
    except NotFoundError:
        mutate(obj)
        _check_key_unchanged(key, obj)
        client.create(obj)
        return OperationResult.CREATED

    obj.clear()
    obj.update(existing)
    mutate(obj)
    _check_key_unchanged(key, obj)
    if obj == existing:
        return OperationResult.NONE
    client.update(obj)
    return OperationResult.UPDATED


def _check_key_unchanged(key: tuple[str, str], obj: dict) -> None:
    if object_key(obj) != key:
        raise ValueError("mutate function must not change the object's name or namespace")