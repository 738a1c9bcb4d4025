from __future__ import annotations

import os

DEFAULT_API_URL = "https://musicbrainz.org/ws/2/release"
DEFAULT_USER_AGENT = "record-shop/0.1.0 ( dev@record-shop.example )"


def musicbrainz_api_url() -> str:
    return os.getenv("MUSICBRAINZ_API_URL", DEFAULT_API_URL).rstrip("/")


def musicbrainz_timeout_seconds() -> float:
    raw = os.getenv("MUSICBRAINZ_TIMEOUT_SECONDS", "5")

    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"MUSICBRAINZ_TIMEOUT_SECONDS must be a number, got {raw!r}")


def musicbrainz_user_agent() -> str:
    return os.getenv("MUSICBRAINZ_USER_AGENT", DEFAULT_USER_AGENT)
