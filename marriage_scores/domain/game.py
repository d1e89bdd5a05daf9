from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

MIN_PLAYERS = 3
MAX_PLAYERS = 6

Number = int | float


class DomainValidationError(ValueError):
    """Raised when a game rule is violated."""


@dataclass(frozen=True)
class RuleSet:
    point_rate: Number = 0
    seen_points: Number = 0
    unseen_points: Number = 0
    dublee_win_bonus_points: Number = 0
    foul_points: Number = 0

    def to_dict(self) -> dict[str, Number]:
        return {
            "pointRate": self.point_rate,
            "seenPoints": self.seen_points,
            "unseenPoints": self.unseen_points,
            "dubleeWinBonusPoints": self.dublee_win_bonus_points,
            "foulPoints": self.foul_points,
        }


def resolve_rule_set(raw: Any) -> RuleSet:
    """Build a rule set from stored JSON; anything unusable becomes 0."""
    if not isinstance(raw, Mapping):
        return RuleSet()
    return RuleSet(
        point_rate=_number_or_zero(raw.get("pointRate")),
        seen_points=_number_or_zero(raw.get("seenPoints")),
        unseen_points=_number_or_zero(raw.get("unseenPoints")),
        dublee_win_bonus_points=_number_or_zero(raw.get("dubleeWinBonusPoints")),
        foul_points=_number_or_zero(raw.get("foulPoints")),
    )


def _number_or_zero(value: Any) -> Number:
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
        if value.is_integer():
            value = int(value)
    if not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def normalize_player(name: str) -> str:
    value = name.strip()
    if not value:
        raise DomainValidationError("player name must be non-empty")
    return value


def unique_preserve_order(players: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for player in players:
        normalized = normalize_player(player)
        if normalized not in seen:
            seen.add(normalized)
            result.append(normalized)
    return result


def validate_roster(players: Iterable[str]) -> list[str]:
    names = [normalize_player(player) for player in players]
    ordered = unique_preserve_order(names)
    if len(ordered) != len(names):
        raise DomainValidationError("players must be unique")
    if len(ordered) < MIN_PLAYERS:
        raise DomainValidationError(f"at least {MIN_PLAYERS} players required")
    if len(ordered) > MAX_PLAYERS:
        raise DomainValidationError(f"at most {MAX_PLAYERS} players allowed")
    return ordered
