"""Round settlement for the Marriage card game.

A round is settled from every player's shown points and flags plus the name of
the winner. The winner collects from everybody, seen and unseen players pay
their fixed amounts, a seen player who opened dublee claws the dublee bonus
back, and a foul is penalised one round later: the fouler pays ``foul_points``
in the next round and that round's winner is credited the same amount.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .game import DomainValidationError, Number, RuleSet, MIN_PLAYERS, normalize_player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerRoundInput:
    name: str
    points: Number = 0
    seen: bool = False
    dublee_opened: bool = False
    foul: bool = False


@dataclass(frozen=True)
class PlayerRoundResult:
    name: str
    points_collected: Number
    is_winner: bool = False
    is_fouler: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "pointsCollected": self.points_collected,
            "isWinner": self.is_winner,
            "isFouler": self.is_fouler,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PlayerRoundResult":
        name = payload["name"]
        points = payload["pointsCollected"]
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        if isinstance(points, bool) or not isinstance(points, (int, float)):
            raise TypeError("pointsCollected must be a number")
        return cls(
            name=name,
            points_collected=points,
            is_winner=bool(payload.get("isWinner", False)),
            is_fouler=bool(payload.get("isFouler", False)),
        )


@dataclass
class SettlementOutcome:
    results: list[PlayerRoundResult] = field(default_factory=list)
    next_foul_carry: str | None = None


def validate_round(inputs: Sequence[PlayerRoundInput], winner_name: str | None) -> None:
    """Reject a round before it reaches :func:`settle`."""
    if not winner_name or not winner_name.strip():
        raise DomainValidationError("a winner must be selected")
    names = [normalize_player(player.name) for player in inputs]
    if len(set(names)) != len(names):
        raise DomainValidationError("players in a round must be unique")
    if len(names) < MIN_PLAYERS:
        raise DomainValidationError(f"at least {MIN_PLAYERS} players required")
    if names.count(winner_name.strip()) != 1:
        raise DomainValidationError(f"unknown winner: {winner_name}")


def settle(
    inputs: Sequence[PlayerRoundInput],
    winner_name: str,
    rules: RuleSet,
    prior_fouler: str | None = None,
) -> SettlementOutcome:
    winner = next((player for player in inputs if player.name == winner_name), None)
    if winner is None:
        raise DomainValidationError(f"unknown winner: {winner_name}")

    player_count = len(inputs)
    total_points = sum(player.points for player in inputs)

    # First pass: non-winners. Each contributes a delta to the winner.
    deltas: dict[str, Number] = {}
    foulers: list[str] = []
    winner_adjustments: list[Number] = []
    for player in inputs:
        if player is winner:
            continue

        points = player.points
        if player.foul:
            points = 0
            foulers.append(player.name)
        if not player.seen:
            points = 0

        collected = player_count * points - total_points

        if prior_fouler is not None and player.name == prior_fouler:
            collected -= rules.foul_points

        if player.seen:
            winner_adjustments.append(rules.seen_points)
            collected -= rules.seen_points
            if player.dublee_opened:
                winner_adjustments.append(-rules.dublee_win_bonus_points)
                collected += rules.dublee_win_bonus_points
        else:
            winner_adjustments.append(rules.unseen_points)
            collected -= rules.unseen_points

        deltas[player.name] = collected

    # Second pass: the winner entry is finalized from the collected adjustments.
    winner_points = player_count * winner.points - total_points
    if winner.dublee_opened:
        winner_points += rules.dublee_win_bonus_points
    if prior_fouler is not None and winner.name != prior_fouler:
        winner_points += rules.foul_points
    winner_points += sum(winner_adjustments)
    deltas[winner.name] = winner_points

    if len(foulers) > 1:
        logger.warning("Several players fouled in one round (%s); only %s is carried", ", ".join(foulers), foulers[-1])
    next_foul_carry = foulers[-1] if foulers else None

    results = [
        PlayerRoundResult(
            name=player.name,
            points_collected=deltas[player.name],
            is_winner=player is winner,
            is_fouler=player is not winner and player.foul,
        )
        for player in inputs
    ]
    logger.debug(
        "Settled round: players=%s total=%s winner=%s prior_fouler=%s next_foul_carry=%s",
        player_count,
        total_points,
        winner.name,
        prior_fouler,
        next_foul_carry,
    )
    return SettlementOutcome(results=results, next_foul_carry=next_foul_carry)


def round_total(results: Sequence[PlayerRoundResult]) -> Number:
    return sum(result.points_collected for result in results)
