from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

from marriage_scores.domain import (
    DomainValidationError,
    PlayerRoundInput,
    PlayerRoundResult,
    RuleSet,
    resolve_rule_set,
    settle,
    validate_roster,
    validate_round,
)
from marriage_scores.services.history_service import KeyValueStore, SettlementHistory
from marriage_scores.storage.repository import FOULER_CARRY_KEY, ROSTER_KEY, RULE_SET_KEY

logger = logging.getLogger(__name__)


@dataclass
class RoundRecord:
    round_number: int
    results: list[PlayerRoundResult] = field(default_factory=list)
    next_foul_carry: str | None = None


class ScoreService:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self.history = SettlementHistory(store)
        self._submit_lock = threading.Lock()

    def register_players(self, players: list[str]) -> list[str]:
        roster = validate_roster(players)
        self.store.save(ROSTER_KEY, roster)
        logger.info("Registered players: %s", ", ".join(roster))
        return roster

    def get_roster(self) -> list[str]:
        raw = self.store.load(ROSTER_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(name, str) for name in raw):
            logger.warning("Stored %s is malformed, treating it as empty", ROSTER_KEY)
            return []
        return raw

    def set_rules(self, raw: Any) -> RuleSet:
        rules = resolve_rule_set(raw)
        self.store.save(RULE_SET_KEY, rules.to_dict())
        return rules

    def get_rules(self) -> RuleSet | None:
        raw = self.store.load(RULE_SET_KEY)
        if raw is None:
            return None
        if not isinstance(raw, dict):
            logger.warning("Stored %s is malformed, treating it as absent", RULE_SET_KEY)
            return None
        return resolve_rule_set(raw)

    def get_foul_carry(self) -> str | None:
        raw = self.store.load(FOULER_CARRY_KEY)
        if raw is not None and not isinstance(raw, str):
            logger.warning("Stored %s is malformed, treating it as absent", FOULER_CARRY_KEY)
            return None
        return raw or None

    def submit_round(self, inputs: list[PlayerRoundInput], winner_name: str | None) -> RoundRecord:
        validate_round(inputs, winner_name)
        winner_name = winner_name.strip()
        rules = self.get_rules()
        if rules is None:
            raise DomainValidationError("rules are not set")
        roster = self.get_roster()
        if not roster:
            raise DomainValidationError("players are not registered")
        if sorted(player.name for player in inputs) != sorted(roster):
            raise DomainValidationError("round players must match the registered players")

        with self._submit_lock:
            prior_fouler = self.get_foul_carry()
            if prior_fouler:
                logger.info("Previous round was fouled by %s", prior_fouler)
            outcome = settle(inputs, winner_name, rules, prior_fouler)

            round_number = self.history.append(outcome.results, {FOULER_CARRY_KEY: outcome.next_foul_carry})

        logger.info("Round %s settled, winner %s", round_number, winner_name)
        return RoundRecord(
            round_number=round_number,
            results=outcome.results,
            next_foul_carry=outcome.next_foul_carry,
        )

    def remove_round(self, index: int) -> int:
        with self._submit_lock:
            return len(self.history.remove_at(index))

    def clear_history(self) -> None:
        with self._submit_lock:
            self.history.clear(FOULER_CARRY_KEY)
        logger.info("History and foul carry cleared")
