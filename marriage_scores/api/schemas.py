from __future__ import annotations

from pydantic import BaseModel, Field

from marriage_scores.domain import (
    PlayerRoundInput,
    PlayerRoundResult,
    PlayerSetGroup,
    PointsTable,
    RuleSet,
)


class PlayersRequest(BaseModel):
    players: list[str] = Field(
        ...,
        description="Player names, 3 to 6 unique entries",
        examples=[["Ram", "Shyam", "Hari"]],
    )


class PlayersResponse(BaseModel):
    players: list[str]


class RuleSetResponse(BaseModel):
    point_rate: float
    seen_points: float
    unseen_points: float
    dublee_win_bonus_points: float
    foul_points: float

    @classmethod
    def from_rules(cls, rules: RuleSet) -> "RuleSetResponse":
        return cls(
            point_rate=rules.point_rate,
            seen_points=rules.seen_points,
            unseen_points=rules.unseen_points,
            dublee_win_bonus_points=rules.dublee_win_bonus_points,
            foul_points=rules.foul_points,
        )


class PlayerInputRequest(BaseModel):
    name: str
    points: int = 0
    seen: bool = False
    dublee_opened: bool = False
    foul: bool = False

    def to_domain(self) -> PlayerRoundInput:
        return PlayerRoundInput(
            name=self.name.strip(),
            points=self.points,
            seen=self.seen,
            dublee_opened=self.dublee_opened,
            foul=self.foul,
        )


class RoundRequest(BaseModel):
    winner: str | None = Field(None, examples=["Ram"])
    players: list[PlayerInputRequest]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "winner": "Ram",
                    "players": [
                        {"name": "Ram", "points": 10},
                        {"name": "Shyam", "points": 4, "seen": True},
                        {"name": "Hari", "points": 2},
                    ],
                }
            ]
        }
    }


class PlayerResultResponse(BaseModel):
    name: str
    points_collected: float
    is_winner: bool
    is_fouler: bool

    @classmethod
    def from_result(cls, result: PlayerRoundResult) -> "PlayerResultResponse":
        return cls(
            name=result.name,
            points_collected=result.points_collected,
            is_winner=result.is_winner,
            is_fouler=result.is_fouler,
        )


class RoundResponse(BaseModel):
    round_number: int
    results: list[PlayerResultResponse]
    next_foul_carry: str | None = None


class HistoryResponse(BaseModel):
    rounds: list[list[PlayerResultResponse]]
    foul_carry: str | None = None


class RemainingRoundsResponse(BaseModel):
    rounds_count: int


class PlayerTotalResponse(BaseModel):
    name: str
    points: float
    money: float


class PointsTableResponse(BaseModel):
    rounds_count: int
    totals: list[PlayerTotalResponse]

    @classmethod
    def from_table(cls, table: PointsTable) -> "PointsTableResponse":
        return cls(
            rounds_count=table.rounds_count,
            totals=[PlayerTotalResponse(name=t.name, points=t.points, money=t.money) for t in table.totals],
        )


class PlayerSetGroupResponse(BaseModel):
    player_set: str
    rounds: list[list[PlayerResultResponse]]
    table: PointsTableResponse

    @classmethod
    def from_group(cls, group: PlayerSetGroup) -> "PlayerSetGroupResponse":
        return cls(
            player_set=group.player_set,
            rounds=[[PlayerResultResponse.from_result(r) for r in round_results] for round_results in group.rounds],
            table=PointsTableResponse.from_table(group.table),
        )
