from __future__ import annotations

from marriage_scores.domain import PlayerSetGroup, PointsTable, build_points_table, group_by_player_set
from marriage_scores.service import ScoreService


class StatsService:
    """Points table views, recomputed from the stored history on every call."""

    def __init__(self, scores: ScoreService) -> None:
        self.scores = scores

    def _point_rate(self) -> int | float:
        rules = self.scores.get_rules()
        return rules.point_rate if rules is not None else 0

    def points_table(self) -> PointsTable:
        return build_points_table(self.scores.history.load(), self._point_rate())

    def player_set_groups(self) -> list[PlayerSetGroup]:
        return group_by_player_set(self.scores.history.load(), self._point_rate())
