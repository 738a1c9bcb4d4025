"""MusicBrainz implementation of TrackListProvider."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from record_shop.ports.track_list_provider import TrackListProvider

logger = logging.getLogger(__name__)


def extract_track_titles(payload: Any) -> list[str]:
    """
    Flatten `media[].tracks[].title` in release order.

    Entries of the wrong shape or without a title are skipped.
    """
    titles: list[str] = []
    if not isinstance(payload, dict):
        return titles

    media = payload.get("media")
    if not isinstance(media, list):
        return titles

    for medium in media:
        tracks = medium.get("tracks") if isinstance(medium, dict) else None
        if not isinstance(tracks, list):
            continue
        for track in tracks:
            title = track.get("title") if isinstance(track, dict) else None
            if isinstance(title, str) and title:
                titles.append(title)

    return titles


class MusicBrainzTrackListProvider(TrackListProvider):
    """
    Fetches a release's track list from the MusicBrainz web service.

    GET {api_url}/{external_id}?fmt=json&inc=recordings

    Never raises: any failure is logged and reported as an empty list.
    """

    def __init__(self, client: httpx.Client, api_url: str) -> None:
        """
        Args:
            client: Configured httpx client (timeout, User-Agent)
            api_url: Release lookup endpoint, without trailing slash
        """
        self._client = client
        self._api_url = api_url.rstrip("/")

    def fetch_track_list(self, external_id: str | None) -> list[str]:
        if not external_id:
            return []

        url = f"{self._api_url}/{external_id}"

        try:
            response = self._client.get(url, params={"fmt": "json", "inc": "recordings"})
            response.raise_for_status()
            return extract_track_titles(response.json())
        except Exception as exc:
            logger.warning(
                "Could not fetch track list",
                extra={
                    "external_id": external_id,
                    "url": url,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return []
