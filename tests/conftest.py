import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from marriage_scores.service import ScoreService
from marriage_scores.storage.database import Base
from marriage_scores.storage.models import KeyValueEntry  # noqa: F401
from marriage_scores.storage.repository import SqlKeyValueStore


def make_session_factory() -> sessionmaker[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def store() -> SqlKeyValueStore:
    return SqlKeyValueStore(make_session_factory())


@pytest.fixture
def scores(store: SqlKeyValueStore) -> ScoreService:
    service = ScoreService(store)
    service.register_players(["A", "B", "C"])
    service.set_rules({"pointRate": 2, "seenPoints": 2, "unseenPoints": 1, "dubleeWinBonusPoints": 5, "foulPoints": 3})
    return service
