"""Test suite for CreateRecord use case."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from record_shop.adapters.in_memory_store import InMemoryStore
from record_shop.adapters.in_memory_unit_of_work import InMemoryUnitOfWork
from record_shop.domain.errors import AlreadyExistsError, ValidationError
from record_shop.domain.record import RecordCategory, RecordDraft, RecordFormat
from record_shop.ports.track_list_provider import TrackListProvider
from record_shop.use_cases.create_record import CreateRecord, CreateRecordRequest

RELEASE_ID = "b3b7e934-445b-4c68-a097-730c6a6d47e6"


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def track_list_provider() -> Mock:
    provider = Mock(spec=TrackListProvider)
    provider.fetch_track_list.return_value = ["In the Flesh?", "The Thin Ice"]
    return provider


@pytest.fixture()
def use_case(store: InMemoryStore, track_list_provider: Mock) -> CreateRecord:
    return CreateRecord(
        unit_of_work=InMemoryUnitOfWork(store),
        track_list_provider=track_list_provider,
    )


def _request(**overrides: object) -> CreateRecordRequest:
    values: dict[str, object] = {
        "artist": "Pink Floyd",
        "album": "The Wall",
        "price": Decimal("29.99"),
        "quantity": 10,
        "format": RecordFormat.VINYL,
        "category": RecordCategory.ROCK,
        "external_id": RELEASE_ID,
    }
    values.update(overrides)
    return CreateRecordRequest(draft=RecordDraft(**values))  # type: ignore[arg-type]


# ==============================================================================
# Happy Path
# ==============================================================================


def test_create_stores_normalized_record_with_tracks(
    use_case: CreateRecord, store: InMemoryStore, track_list_provider: Mock
) -> None:
    result = use_case.execute(_request())

    record = result.record
    assert record.artist == "pink floyd"
    assert record.album == "the wall"
    assert record.quantity == 10
    assert record.track_list == ("In the Flesh?", "The Thin Ice")
    assert store.records[record.id] == record
    track_list_provider.fetch_track_list.assert_called_once_with(RELEASE_ID)


def test_create_without_external_id_has_empty_tracks(
    use_case: CreateRecord, track_list_provider: Mock
) -> None:
    track_list_provider.fetch_track_list.return_value = []

    result = use_case.execute(_request(external_id=None))

    assert result.record.track_list == ()
    track_list_provider.fetch_track_list.assert_called_once_with(None)


def test_same_album_in_other_format_is_allowed(use_case: CreateRecord, store: InMemoryStore) -> None:
    use_case.execute(_request())
    use_case.execute(_request(format=RecordFormat.CD))

    assert len(store.records) == 2


# ==============================================================================
# Rejections
# ==============================================================================


def test_duplicate_is_rejected_case_insensitively(
    use_case: CreateRecord, store: InMemoryStore, track_list_provider: Mock
) -> None:
    use_case.execute(_request())

    with pytest.raises(AlreadyExistsError) as exc_info:
        use_case.execute(_request(artist="PINK FLOYD", album="the wall"))

    assert exc_info.value.context["format"] == "vinyl"
    assert len(store.records) == 1
    # No enrichment lookup for a rejected draft
    assert track_list_provider.fetch_track_list.call_count == 1


def test_invalid_draft_is_rejected_before_lookup(
    use_case: CreateRecord, store: InMemoryStore, track_list_provider: Mock
) -> None:
    with pytest.raises(ValidationError):
        use_case.execute(_request(price=Decimal("-1")))

    assert store.records == {}
    track_list_provider.fetch_track_list.assert_not_called()
