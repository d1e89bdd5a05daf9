from __future__ import annotations

from fastapi import Depends

from marriage_scores.service import ScoreService
from marriage_scores.services.stats_service import StatsService
from marriage_scores.storage.database import SessionLocal
from marriage_scores.storage.repository import SqlKeyValueStore

store = SqlKeyValueStore(SessionLocal)
score_service = ScoreService(store)


def get_score_service() -> ScoreService:
    return score_service


def get_stats_service(scores: ScoreService = Depends(get_score_service)) -> StatsService:
    return StatsService(scores)
