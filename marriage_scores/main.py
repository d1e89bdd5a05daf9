from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from marriage_scores.api.players import router as players_router
from marriage_scores.api.rounds import router as rounds_router
from marriage_scores.api.stats import router as stats_router
from marriage_scores.config import configure_logging, settings
from marriage_scores.storage.database import init_db


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.log_level)
    init_db()
    yield


app = FastAPI(title="Marriage Score Keeper API", lifespan=lifespan)
app.include_router(players_router)
app.include_router(rounds_router)
app.include_router(stats_router)
