"""
Environment-backed settings.

Every accessor reads the environment at call time, so tests can set
variables with monkeypatch without reloading modules.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_PORT = 5000


def env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    """
    DSN for asyncpg. libpq's `sslmode` query parameter is dropped because
    asyncpg rejects it (hosted Postgres URLs usually carry it).
    """
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")

    parts = urlsplit(url)
    if not parts.query:
        return url
    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))


def host() -> str:
    return env_str("HOST", "0.0.0.0")


def port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def pool_min_size() -> int:
    return max(env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    # asyncpg rejects max_size < min_size.
    return max(env_int("DB_POOL_MAX_SIZE", 5), pool_min_size(), 1)


def command_timeout() -> float:
    return float(env_int("DB_COMMAND_TIMEOUT", 30))
