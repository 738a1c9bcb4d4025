"""Test suite for GetRecordById use case."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from record_shop.domain.errors import InvalidIdentifierError, NotFoundError, ValidationError
from record_shop.domain.record import CatalogItem, RecordCategory, RecordFormat
from record_shop.ports.record_catalog_repository import RecordCatalogRepository
from record_shop.use_cases.get_record_by_id import (
    GetRecordById,
    GetRecordByIdRequest,
    GetRecordByIdResponse,
)

RECORD_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock RecordCatalogRepository."""
    return Mock(spec=RecordCatalogRepository)


@pytest.fixture()
def sample_record() -> CatalogItem:
    return CatalogItem(
        id=RECORD_ID,
        artist="pink floyd",
        album="the wall",
        price=Decimal("29.99"),
        quantity=3,
        format=RecordFormat.VINYL,
        category=RecordCategory.ROCK,
    )


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_execute_successful_get(mock_repository: Mock, sample_record: CatalogItem) -> None:
    """Use case returns the record when found."""
    mock_repository.get_by_id.return_value = sample_record
    use_case = GetRecordById(record_catalog_repository=mock_repository)

    result = use_case.execute(GetRecordByIdRequest(record_id=RECORD_ID))

    assert isinstance(result, GetRecordByIdResponse)
    assert result.record == sample_record
    mock_repository.get_by_id.assert_called_once_with(RECORD_ID)


# ==============================================================================
# Error Tests
# ==============================================================================


def test_execute_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None
    use_case = GetRecordById(record_catalog_repository=mock_repository)

    with pytest.raises(NotFoundError) as exc_info:
        use_case.execute(GetRecordByIdRequest(record_id=RECORD_ID))

    assert exc_info.value.context["identifier"] == RECORD_ID


@pytest.mark.parametrize("record_id", ["", "123", "not-a-uuid", "550e8400-e29b-41d4-a716"])
def test_execute_rejects_malformed_id(mock_repository: Mock, record_id: str) -> None:
    """Malformed IDs fail before the repository is touched."""
    use_case = GetRecordById(record_catalog_repository=mock_repository)

    with pytest.raises(InvalidIdentifierError) as exc_info:
        use_case.execute(GetRecordByIdRequest(record_id=record_id))

    assert isinstance(exc_info.value, ValidationError)
    mock_repository.get_by_id.assert_not_called()
