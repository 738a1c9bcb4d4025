"""Tests for MusicBrainzTrackListProvider using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from record_shop.adapters.musicbrainz_track_list_provider import (
    MusicBrainzTrackListProvider,
    extract_track_titles,
)

API_URL = "https://musicbrainz.test/ws/2/release"
RELEASE_ID = "b3b7e934-445b-4c68-a097-730c6a6d47e6"

RELEASE_PAYLOAD = {
    "id": RELEASE_ID,
    "title": "The Wall",
    "media": [
        {"position": 1, "tracks": [{"title": "In the Flesh?"}, {"title": "The Thin Ice"}]},
        {"position": 2, "tracks": [{"title": "Hey You"}]},
    ],
}


def _provider(handler) -> MusicBrainzTrackListProvider:  # type: ignore[no-untyped-def]
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return MusicBrainzTrackListProvider(client=client, api_url=API_URL + "/")


# ==============================================================================
# Payload flattening
# ==============================================================================


def test_extract_track_titles_flattens_media_in_order() -> None:
    assert extract_track_titles(RELEASE_PAYLOAD) == ["In the Flesh?", "The Thin Ice", "Hey You"]


@pytest.mark.parametrize(
    "payload",
    [None, [], {}, {"media": "x"}, {"media": [None, {"tracks": None}]}],
)
def test_extract_track_titles_tolerates_bad_shapes(payload: object) -> None:
    assert extract_track_titles(payload) == []


def test_extract_track_titles_skips_untitled_tracks() -> None:
    payload = {"media": [{"tracks": [{"title": ""}, {"number": "2"}, {"title": "Mother"}]}]}

    assert extract_track_titles(payload) == ["Mother"]


# ==============================================================================
# HTTP lookups
# ==============================================================================


def test_fetch_requests_release_with_recordings() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=RELEASE_PAYLOAD)

    tracks = _provider(handler).fetch_track_list(RELEASE_ID)

    assert tracks == ["In the Flesh?", "The Thin Ice", "Hey You"]
    assert len(seen) == 1
    assert seen[0].url.path == f"/ws/2/release/{RELEASE_ID}"
    assert seen[0].url.params["fmt"] == "json"
    assert seen[0].url.params["inc"] == "recordings"


@pytest.mark.parametrize("external_id", [None, ""])
def test_no_external_id_makes_no_request(external_id: str | None) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=RELEASE_PAYLOAD)

    assert _provider(handler).fetch_track_list(external_id) == []
    assert seen == []


def test_error_status_yields_empty_list() -> None:
    provider = _provider(lambda request: httpx.Response(404, json={"error": "Not Found"}))

    assert provider.fetch_track_list(RELEASE_ID) == []


def test_transport_error_yields_empty_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    assert _provider(handler).fetch_track_list(RELEASE_ID) == []


def test_invalid_json_yields_empty_list() -> None:
    provider = _provider(lambda request: httpx.Response(200, content=b"<html>"))

    assert provider.fetch_track_list(RELEASE_ID) == []
