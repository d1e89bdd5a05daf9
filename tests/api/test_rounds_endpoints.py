import pytest

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from marriage_scores.main import app
from marriage_scores.runtime import get_score_service
from marriage_scores.service import ScoreService
from marriage_scores.storage.repository import SqlKeyValueStore, StorageError


@pytest.fixture
def client(store: SqlKeyValueStore):
    service = ScoreService(store)
    app.dependency_overrides[get_score_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _setup(client: TestClient) -> None:
    players = client.put("/players", json={"players": ["A", "B", "C"]})
    assert players.status_code == 200
    rules = client.put(
        "/rules",
        json={"pointRate": 0.5, "seenPoints": 2, "unseenPoints": 1, "dubleeWinBonusPoints": 5, "foulPoints": 3},
    )
    assert rules.status_code == 200


ROUND = {
    "winner": "A",
    "players": [
        {"name": "A", "points": 10, "seen": True},
        {"name": "B", "points": 4, "seen": True},
        {"name": "C", "points": 2},
    ],
}


def test_players_and_rules_contract(client: TestClient) -> None:
    assert client.get("/players").json() == {"players": []}
    assert client.get("/rules").status_code == 404

    _setup(client)

    assert client.get("/players").json() == {"players": ["A", "B", "C"]}
    assert client.get("/rules").json() == {
        "point_rate": 0.5,
        "seen_points": 2,
        "unseen_points": 1,
        "dublee_win_bonus_points": 5,
        "foul_points": 3,
    }


def test_rules_with_garbage_fields_default_to_zero(client: TestClient) -> None:
    response = client.put("/rules", json={"seenPoints": "lots", "foulPoints": 4})

    assert response.status_code == 200
    assert response.json()["seen_points"] == 0
    assert response.json()["foul_points"] == 4


def test_invalid_roster_error_shape(client: TestClient) -> None:
    response = client.put("/players", json={"players": ["A", "B"]})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert set(detail.keys()) == {"code", "message", "details"}
    assert detail["code"] == "invalid_players"


def test_submit_round_history_and_points_table(client: TestClient) -> None:
    _setup(client)

    submitted = client.post("/rounds", json=ROUND)
    assert submitted.status_code == 201
    body = submitted.json()
    assert body["round_number"] == 1
    assert [(r["name"], r["points_collected"]) for r in body["results"]] == [("A", 17), ("B", -6), ("C", -17)]
    assert body["next_foul_carry"] is None

    history = client.get("/rounds").json()
    assert len(history["rounds"]) == 1
    assert history["foul_carry"] is None

    table = client.get("/stats/points-table").json()
    assert table["rounds_count"] == 1
    assert table["totals"] == [
        {"name": "A", "points": 17, "money": 8.5},
        {"name": "B", "points": -6, "money": -3.0},
        {"name": "C", "points": -17, "money": -8.5},
    ]

    groups = client.get("/stats/points-table/groups").json()
    assert [group["player_set"] for group in groups] == ["A, B, C"]


def test_submit_round_without_winner(client: TestClient) -> None:
    _setup(client)

    response = client.post("/rounds", json={**ROUND, "winner": None})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "invalid_round"


def test_submit_round_storage_failure_echoes_round(client: TestClient, store, monkeypatch) -> None:
    _setup(client)

    def failing_save_many(values) -> None:
        raise StorageError("database is locked")

    monkeypatch.setattr(store, "save_many", failing_save_many)

    response = client.post("/rounds", json=ROUND)

    assert response.status_code == 503
    detail = response.json()["detail"]
    assert detail["code"] == "storage_unavailable"
    assert detail["details"]["winner"] == "A"
    assert [p["name"] for p in detail["details"]["players"]] == ["A", "B", "C"]


def test_remove_and_clear_rounds(client: TestClient) -> None:
    _setup(client)
    client.post("/rounds", json=ROUND)
    client.post("/rounds", json=ROUND)

    removed = client.delete("/rounds/0")
    assert removed.status_code == 200
    assert removed.json() == {"rounds_count": 1}

    missing = client.delete("/rounds/7")
    assert missing.status_code == 404
    assert missing.json()["detail"]["code"] == "round_not_found"

    cleared = client.delete("/rounds")
    assert cleared.json() == {"rounds_count": 0}
    assert client.get("/rounds").json() == {"rounds": [], "foul_carry": None}
