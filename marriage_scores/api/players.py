from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from marriage_scores.api.errors import api_error, storage_error
from marriage_scores.api.schemas import PlayersRequest, PlayersResponse, RuleSetResponse
from marriage_scores.domain import DomainValidationError
from marriage_scores.runtime import get_score_service
from marriage_scores.service import ScoreService
from marriage_scores.storage.repository import StorageError

router = APIRouter(tags=["setup"])


@router.get("/players", response_model=PlayersResponse, summary="Registered players")
def get_players(scores: ScoreService = Depends(get_score_service)) -> PlayersResponse:
    try:
        return PlayersResponse(players=scores.get_roster())
    except StorageError as exc:
        raise storage_error(exc) from exc


@router.put("/players", response_model=PlayersResponse, summary="Register players")
def put_players(payload: PlayersRequest, scores: ScoreService = Depends(get_score_service)) -> PlayersResponse:
    try:
        roster = scores.register_players(payload.players)
    except DomainValidationError as exc:
        raise api_error(code="invalid_players", message=str(exc), details={"players": payload.players}) from exc
    except StorageError as exc:
        raise storage_error(exc, details={"players": payload.players}) from exc
    return PlayersResponse(players=roster)


@router.get("/rules", response_model=RuleSetResponse, summary="Current rule set")
def get_rules(scores: ScoreService = Depends(get_score_service)) -> RuleSetResponse:
    try:
        rules = scores.get_rules()
    except StorageError as exc:
        raise storage_error(exc) from exc
    if rules is None:
        raise api_error(code="rules_not_set", message="Rules are not set", status_code=404)
    return RuleSetResponse.from_rules(rules)


@router.put("/rules", response_model=RuleSetResponse, summary="Save the rule set")
def put_rules(
    payload: dict[str, Any] = Body(..., examples=[{"pointRate": 0.5, "seenPoints": 3, "unseenPoints": 10}]),
    scores: ScoreService = Depends(get_score_service),
) -> RuleSetResponse:
    try:
        rules = scores.set_rules(payload)
    except StorageError as exc:
        raise storage_error(exc, details=payload) from exc
    return RuleSetResponse.from_rules(rules)
