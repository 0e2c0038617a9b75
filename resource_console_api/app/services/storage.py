"""
In‑memory record storage.

``ResourceStore`` keeps one ``id -> record`` dict and one id counter
per resource kind.  Records are the ``<Kind>Read`` Pydantic models
from ``RESOURCES``.  Ids start at 1 and are never reused, even after
the record holding them is deleted.  ``created_at`` is stamped once
at creation and cannot be changed by an update.

Each map has its own lock.  The async route handlers call the store
on the event loop, one step at a time, but the store is also used
directly from plain threads (seeding, sync callers, the tests), and
update, delete and id allocation are read‑modify‑write steps that
must not interleave there.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from ..core.resources import RESOURCES, ResourceKind


logger = logging.getLogger(__name__)

# Server-assigned fields; never taken from an update payload.
PROTECTED_FIELDS = frozenset({"id", "created_at"})


class DuplicateUsernameError(ValueError):
    """Raised when a username is already taken by another user."""

    def __init__(self, username: str) -> None:
        super().__init__("Username already exists")
        self.username = username


class ResourceStore:
    """Key‑to‑record maps with auto‑incrementing ids, one per kind."""

    def __init__(self) -> None:
        self._records: Dict[ResourceKind, Dict[int, BaseModel]] = {}
        self._counters: Dict[ResourceKind, int] = {}
        self._locks: Dict[ResourceKind, threading.RLock] = {
            kind: threading.RLock() for kind in ResourceKind
        }
        self.reset()

    def reset(self) -> None:
        """Remove every record and restart all id counters at 1."""
        for kind in ResourceKind:
            with self._locks[kind]:
                self._records[kind] = {}
                self._counters[kind] = 1

    def list(self, kind: ResourceKind) -> List[BaseModel]:
        """Return all records of ``kind`` in insertion order."""
        with self._locks[kind]:
            return list(self._records[kind].values())

    def get(self, kind: ResourceKind, record_id: int) -> Optional[BaseModel]:
        with self._locks[kind]:
            return self._records[kind].get(record_id)

    def create(self, kind: ResourceKind, data: BaseModel) -> BaseModel:
        """Store a validated insertable payload and return the full record."""
        spec = RESOURCES[kind]
        values = data.model_dump()
        with self._locks[kind]:
            if kind is ResourceKind.USERS:
                self._check_username(values["username"])
            record_id = self._counters[kind]
            self._counters[kind] += 1
            record = spec.read_schema(
                **values,
                id=record_id,
                created_at=datetime.now(timezone.utc),
            )
            self._records[kind][record_id] = record
        logger.info("Created %s %s", spec.singular.lower(), record_id)
        return record

    def update(
        self, kind: ResourceKind, record_id: int, changes: Dict[str, Any]
    ) -> Optional[BaseModel]:
        """Merge ``changes`` onto an existing record.

        ``changes`` uses attribute names (``user_id``, not ``userId``).
        Returns ``None`` when no record has ``record_id``.
        """
        spec = RESOURCES[kind]
        changes = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        with self._locks[kind]:
            current = self._records[kind].get(record_id)
            if current is None:
                return None
            if kind is ResourceKind.USERS and "username" in changes:
                self._check_username(changes["username"], exclude_id=record_id)
            updated = current.model_copy(update=changes)
            self._records[kind][record_id] = updated
        logger.info("Updated %s %s", spec.singular.lower(), record_id)
        return updated

    def delete(self, kind: ResourceKind, record_id: int) -> bool:
        """Delete a record.  Returns ``False`` if it did not exist."""
        with self._locks[kind]:
            removed = self._records[kind].pop(record_id, None)
        if removed is None:
            return False
        logger.info("Deleted %s %s", RESOURCES[kind].singular.lower(), record_id)
        return True

    def search(self, kind: ResourceKind, term: str) -> List[BaseModel]:
        """Case-insensitive substring search over the kind's search fields.

        An empty term matches every record.
        """
        fields = RESOURCES[kind].search_fields
        needle = term.lower()
        return [
            record
            for record in self.list(kind)
            if any(needle in str(getattr(record, field)).lower() for field in fields)
        ]

    def _check_username(self, username: str, exclude_id: Optional[int] = None) -> None:
        # Caller holds the users lock.
        for record_id, user in self._records[ResourceKind.USERS].items():
            if record_id != exclude_id and user.username == username:
                raise DuplicateUsernameError(username)
