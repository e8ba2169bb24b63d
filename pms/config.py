"""Environment-driven runtime settings for the PMS API."""

from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Optional, Sequence, Tuple


def _env_str(
    name: str,
    default: Optional[str] = None,
    *,
    alias: Optional[str] = None,
    empty_to_none: bool = True,
) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None and alias:
        raw = os.getenv(alias)
    if raw is None:
        return default
    value = raw.strip()
    if not value and empty_to_none:
        return None if default is None else default
    return value if value else default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_tuple(name: str, default: Sequence[str]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return tuple(default)
    items = tuple(part.strip() for part in raw.split(",") if part.strip())
    return items or tuple(default)


class Settings(SimpleNamespace):
    """Simple attribute container used throughout the codebase."""

CONFIG = Settings()


def _compute_values() -> tuple[dict[str, object], dict[str, object]]:
    # -----------------------------------------------------------------------
    # RUNTIME ENVIRONMENT
    # -----------------------------------------------------------------------
    environment = _env_str("ENV", "prod", empty_to_none=False).lower()
    if environment not in {"dev", "prod"}:
        environment = "prod"
    is_development = environment == "dev"

    api_title = _env_str("API_TITLE", "PMS API", empty_to_none=False)
    api_version = _env_str("API_VERSION", "1.0.0", empty_to_none=False)

    # -----------------------------------------------------------------------
    # HTTP SERVER
    # -----------------------------------------------------------------------
    host = _env_str("HOST", "0.0.0.0", empty_to_none=False)
    port = _env_int("PORT", 3000)
    cors_origins = _env_tuple("API_CORS_ORIGINS", ("*",))

    # -----------------------------------------------------------------------
    # DOCUMENT STORE
    # -----------------------------------------------------------------------
    mongo_uri = _env_str("MONGO_URI", "mongodb://localhost:27017", alias="MONGODB_URI")
    mongo_db_name = _env_str("MONGO_DB_NAME", "PMS", empty_to_none=False)
    mongo_timeout_ms = _env_int("MONGO_SERVER_SELECTION_TIMEOUT_MS", 5000)

    globals_map = {
        "ENVIRONMENT": environment,
        "IS_DEVELOPMENT": is_development,
        "API_TITLE": api_title,
        "API_VERSION": api_version,
        "HOST": host,
        "PORT": port,
        "API_CORS_ORIGINS": cors_origins,
        "MONGO_URI": mongo_uri,
        "MONGO_DB_NAME": mongo_db_name,
        "MONGO_SERVER_SELECTION_TIMEOUT_MS": mongo_timeout_ms,
    }

    config_map = {
        "environment": environment,
        "is_development": is_development,
        "api_title": api_title,
        "api_version": api_version,
        "host": host,
        "port": port,
        "cors_origins": cors_origins,
        "mongo_uri": mongo_uri,
        "mongo_db_name": mongo_db_name,
        "mongo_timeout_ms": mongo_timeout_ms,
    }

    return globals_map, config_map


def reload_config() -> None:
    globals_map, config_map = _compute_values()
    globals().update(globals_map)
    CONFIG.__dict__.update(config_map)


def load_envs(env_file: str | None = None) -> None:
    """Load environment variables from a ``.env`` file and refresh ``CONFIG``."""
    from dotenv import load_dotenv

    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    reload_config()


# Load once on import so downstream modules can use CONFIG immediately.
reload_config()
