"""Get record by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from record_shop.domain.errors import InvalidIdentifierError, NotFoundError
from record_shop.domain.record import CatalogItem
from record_shop.ports.record_catalog_repository import RecordCatalogRepository


def ensure_record_id(record_id: str) -> None:
    """
    Raises:
        InvalidIdentifierError: If record_id is not a valid UUID
    """
    try:
        UUID(record_id)
    except ValueError:
        raise InvalidIdentifierError(field="record_id", value=record_id)


@dataclass(frozen=True, slots=True)
class GetRecordByIdRequest:
    """Request to get a record by ID."""

    record_id: str


@dataclass(frozen=True, slots=True)
class GetRecordByIdResponse:
    """Response containing the requested record."""

    record: CatalogItem


class GetRecordById:
    """
    Use case for retrieving a single record by ID.

    Responsibilities:
    - Validate record_id format (must be valid UUID)
    - Delegate to repository for data access
    - Raise NotFoundError if the record doesn't exist
    """

    def __init__(self, record_catalog_repository: RecordCatalogRepository) -> None:
        self._repository = record_catalog_repository

    def execute(self, request: GetRecordByIdRequest) -> GetRecordByIdResponse:
        """
        Raises:
            InvalidIdentifierError: If record_id is not a valid UUID format
            NotFoundError: If no record has the given ID
        """
        ensure_record_id(request.record_id)

        record = self._repository.get_by_id(request.record_id)

        if record is None:
            raise NotFoundError(resource="Record", identifier=request.record_id)

        return GetRecordByIdResponse(record=record)
