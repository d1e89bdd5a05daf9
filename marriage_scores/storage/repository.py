from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from marriage_scores.storage.models import KeyValueEntry

ROSTER_KEY = "roster"
RULE_SET_KEY = "rule_set"
HISTORY_KEY = "settlement_history"
FOULER_CARRY_KEY = "fouler_carry"


class StorageError(RuntimeError):
    """Raised when the key-value store cannot be read or written."""


class SqlKeyValueStore:
    """JSON values stored under string keys in a single table."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def load(self, key: str) -> Any | None:
        try:
            with self._session_factory() as db:
                entry = db.get(KeyValueEntry, key)
                return None if entry is None else entry.value
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to load {key!r}") from exc

    def save(self, key: str, value: Any) -> None:
        self.save_many({key: value})

    def save_many(self, values: Mapping[str, Any]) -> None:
        """Write all values in one transaction; ``None`` removes the key."""
        try:
            with self._session_factory() as db:
                for key, value in values.items():
                    entry = db.get(KeyValueEntry, key)
                    if value is None:
                        if entry is not None:
                            db.delete(entry)
                    elif entry is None:
                        db.add(KeyValueEntry(key=key, value=value))
                    else:
                        entry.value = value
                db.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to save {', '.join(values)}") from exc

    def remove(self, *keys: str) -> None:
        try:
            with self._session_factory() as db:
                db.execute(delete(KeyValueEntry).where(KeyValueEntry.key.in_(keys)))
                db.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"failed to remove {', '.join(keys)}") from exc
