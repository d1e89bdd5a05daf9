from .game import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    DomainValidationError,
    RuleSet,
    normalize_player,
    resolve_rule_set,
    unique_preserve_order,
    validate_roster,
)
from .reporting import (
    PlayerSetGroup,
    PlayerTotal,
    PointsTable,
    build_points_table,
    group_by_player_set,
    player_universe,
)
from .settlement import (
    PlayerRoundInput,
    PlayerRoundResult,
    SettlementOutcome,
    round_total,
    settle,
    validate_round,
)

__all__ = [
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "DomainValidationError",
    "PlayerRoundInput",
    "PlayerRoundResult",
    "PlayerSetGroup",
    "PlayerTotal",
    "PointsTable",
    "RuleSet",
    "SettlementOutcome",
    "build_points_table",
    "group_by_player_set",
    "normalize_player",
    "player_universe",
    "resolve_rule_set",
    "round_total",
    "settle",
    "unique_preserve_order",
    "validate_roster",
    "validate_round",
]
