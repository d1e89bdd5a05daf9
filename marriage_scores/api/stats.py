from fastapi import APIRouter, Depends

from marriage_scores.api.errors import storage_error
from marriage_scores.api.schemas import PlayerSetGroupResponse, PointsTableResponse
from marriage_scores.runtime import get_stats_service
from marriage_scores.services.stats_service import StatsService
from marriage_scores.storage.repository import StorageError

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/points-table", response_model=PointsTableResponse)
def points_table(stats: StatsService = Depends(get_stats_service)) -> PointsTableResponse:
    try:
        table = stats.points_table()
    except StorageError as exc:
        raise storage_error(exc) from exc
    return PointsTableResponse.from_table(table)


@router.get("/points-table/groups", response_model=list[PlayerSetGroupResponse])
def points_table_groups(stats: StatsService = Depends(get_stats_service)) -> list[PlayerSetGroupResponse]:
    try:
        groups = stats.player_set_groups()
    except StorageError as exc:
        raise storage_error(exc) from exc
    return [PlayerSetGroupResponse.from_group(group) for group in groups]
