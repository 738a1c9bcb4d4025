from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default

    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def database_pool_size() -> int:
    return _int_setting("DATABASE_POOL_SIZE", 10)


def database_max_overflow() -> int:
    return _int_setting("DATABASE_MAX_OVERFLOW", 20)
