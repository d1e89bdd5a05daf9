"""Points table folds over the settlement history."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .game import Number
from .settlement import PlayerRoundResult

Round = Sequence[PlayerRoundResult]


@dataclass(frozen=True)
class PlayerTotal:
    name: str
    points: Number
    money: Number


@dataclass
class PointsTable:
    rounds_count: int
    totals: list[PlayerTotal] = field(default_factory=list)


@dataclass
class PlayerSetGroup:
    player_set: str
    rounds: list[list[PlayerRoundResult]]
    table: PointsTable


def player_universe(history: Sequence[Round]) -> list[str]:
    names: list[str] = []
    for round_results in history:
        for result in round_results:
            if result.name not in names:
                names.append(result.name)
    return names


def build_points_table(history: Sequence[Round], point_rate: Number) -> PointsTable:
    totals: dict[str, Number] = {name: 0 for name in player_universe(history)}
    for round_results in history:
        for result in round_results:
            totals[result.name] += result.points_collected

    return PointsTable(
        rounds_count=len(history),
        totals=[PlayerTotal(name=name, points=points, money=points * point_rate) for name, points in totals.items()],
    )


def group_by_player_set(history: Sequence[Round], point_rate: Number) -> list[PlayerSetGroup]:
    """Split the history into tables of rounds played by the same set of players."""
    grouped: dict[str, list[list[PlayerRoundResult]]] = {}
    for round_results in history:
        key = ", ".join(sorted(result.name for result in round_results))
        grouped.setdefault(key, []).append(list(round_results))

    return [
        PlayerSetGroup(player_set=key, rounds=rounds, table=build_points_table(rounds, point_rate))
        for key, rounds in grouped.items()
    ]
