from __future__ import annotations

from fastapi import APIRouter, Depends, status

from marriage_scores.api.errors import api_error, storage_error
from marriage_scores.api.schemas import (
    HistoryResponse,
    PlayerResultResponse,
    RemainingRoundsResponse,
    RoundRequest,
    RoundResponse,
)
from marriage_scores.domain import DomainValidationError
from marriage_scores.runtime import get_score_service
from marriage_scores.service import ScoreService
from marriage_scores.storage.repository import StorageError

router = APIRouter(prefix="/rounds", tags=["rounds"])


@router.post(
    "",
    response_model=RoundResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Settle a round and append it to the history",
)
def submit_round(payload: RoundRequest, scores: ScoreService = Depends(get_score_service)) -> RoundResponse:
    inputs = [player.to_domain() for player in payload.players]
    try:
        record = scores.submit_round(inputs, payload.winner)
    except DomainValidationError as exc:
        raise api_error(code="invalid_round", message=str(exc), details={"winner": payload.winner}) from exc
    except StorageError as exc:
        # The client keeps the submitted round and may send it again unchanged.
        raise storage_error(exc, details=payload.model_dump()) from exc

    return RoundResponse(
        round_number=record.round_number,
        results=[PlayerResultResponse.from_result(result) for result in record.results],
        next_foul_carry=record.next_foul_carry,
    )


@router.get("", response_model=HistoryResponse, summary="Settlement history")
def get_history(scores: ScoreService = Depends(get_score_service)) -> HistoryResponse:
    try:
        rounds = scores.history.load()
        foul_carry = scores.get_foul_carry()
    except StorageError as exc:
        raise storage_error(exc) from exc
    return HistoryResponse(
        rounds=[[PlayerResultResponse.from_result(result) for result in round_results] for round_results in rounds],
        foul_carry=foul_carry,
    )


@router.delete("/{index}", response_model=RemainingRoundsResponse, summary="Remove one round")
def remove_round(index: int, scores: ScoreService = Depends(get_score_service)) -> RemainingRoundsResponse:
    try:
        remaining = scores.remove_round(index)
    except DomainValidationError as exc:
        raise api_error(
            code="round_not_found",
            message=str(exc),
            details={"index": index},
            status_code=status.HTTP_404_NOT_FOUND,
        ) from exc
    except StorageError as exc:
        raise storage_error(exc) from exc
    return RemainingRoundsResponse(rounds_count=remaining)


@router.delete("", response_model=RemainingRoundsResponse, summary="Clear the history and the foul carry")
def clear_history(scores: ScoreService = Depends(get_score_service)) -> RemainingRoundsResponse:
    try:
        scores.clear_history()
    except StorageError as exc:
        raise storage_error(exc) from exc
    return RemainingRoundsResponse(rounds_count=0)
