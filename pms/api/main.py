"""FastAPI application exposing the public JSON API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from ..config import CONFIG, reload_config
from ..db import connect_database
from ..logger import log, log_error
from .schemas import HealthResponse
from .routes import assets, tasks, users


load_dotenv()
reload_config()

LIVENESS_BANNER = "PMS API is running"


@asynccontextmanager
async def lifespan(api_app: FastAPI) -> AsyncIterator[None]:
    """Open the shared database connection for the lifetime of the process.

    A failed connection is logged and the server keeps running; data routes
    then answer 503 through :func:`pms.api.dependencies.get_database`.
    """

    api_app.state.database = None
    try:
        database = connect_database()
    except PyMongoError as exc:
        log_error("[api] MongoDB connection error:", exc)
    else:
        database.ensure_indexes()
        api_app.state.database = database
        log("[api] connected to MongoDB", database=CONFIG.mongo_db_name)

    try:
        yield
    finally:
        database = api_app.state.database
        if database is not None:
            database.close()
            api_app.state.database = None
            log("[api] MongoDB connection closed")


app = FastAPI(
    title=CONFIG.api_title,
    version=CONFIG.api_version,
    description="Preventive-maintenance API for users, assets and recurring maintenance tasks.",
    lifespan=lifespan,
)


def _configure_cors(api_app: FastAPI) -> None:
    origins = [origin for origin in CONFIG.cors_origins if origin]
    if not origins:
        return

    api_app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


_configure_cors(app)


@app.get("/", response_class=PlainTextResponse, tags=["health"])
def root() -> str:
    """Liveness banner."""

    return LIVENESS_BANNER


@app.get("/health", response_model=HealthResponse, tags=["health"])
def healthcheck() -> HealthResponse:
    """Simple health endpoint for load balancers and smoke tests."""

    return HealthResponse()


app.include_router(assets.router, tags=["assets"])
app.include_router(tasks.router, tags=["tasks"])
app.include_router(users.router, tags=["users"])
