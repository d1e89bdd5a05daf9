from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from marriage_scores.domain import DomainValidationError, PlayerRoundResult
from marriage_scores.storage.repository import HISTORY_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def load(self, key: str) -> Any | None: ...

    def save(self, key: str, value: Any) -> None: ...

    def save_many(self, values: Mapping[str, Any]) -> None: ...

    def remove(self, *keys: str) -> None: ...


def decode_history(raw: Any) -> list[list[PlayerRoundResult]]:
    """Stored history to rounds; malformed data reads as an empty history."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Stored %s is not a list, treating it as empty", HISTORY_KEY)
        return []
    try:
        return [[PlayerRoundResult.from_dict(entry) for entry in round_results] for round_results in raw]
    except (KeyError, TypeError, AttributeError) as exc:
        logger.warning("Stored %s is malformed (%s), treating it as empty", HISTORY_KEY, exc)
        return []


def encode_history(rounds: Sequence[Sequence[PlayerRoundResult]]) -> list[list[dict[str, Any]]]:
    return [[result.to_dict() for result in round_results] for round_results in rounds]


class SettlementHistory:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def load(self) -> list[list[PlayerRoundResult]]:
        return decode_history(self.store.load(HISTORY_KEY))

    def append(self, round_results: Sequence[PlayerRoundResult], also_save: Mapping[str, Any] | None = None) -> int:
        """Append a round; ``also_save`` is written in the same transaction."""
        rounds = [*self.load(), list(round_results)]
        self.store.save_many({HISTORY_KEY: encode_history(rounds), **(also_save or {})})
        return len(rounds)

    def remove_at(self, index: int) -> list[list[PlayerRoundResult]]:
        rounds = self.load()
        if not 0 <= index < len(rounds):
            raise DomainValidationError(f"round index out of range: {index}")
        remaining = rounds[:index] + rounds[index + 1 :]
        self.store.save(HISTORY_KEY, encode_history(remaining))
        logger.info("Removed round %s, %s rounds left", index, len(remaining))
        return remaining

    def clear(self, *also_remove: str) -> None:
        self.store.remove(HISTORY_KEY, *also_remove)
