from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from record_shop.domain.errors import NotFoundError, UpdateFailedError
from record_shop.domain.record import CatalogItem, RecordChanges
from record_shop.ports.track_list_provider import TrackListProvider
from record_shop.ports.unit_of_work import UnitOfWork
from record_shop.use_cases.get_record_by_id import ensure_record_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateRecordRequest:
    record_id: str
    changes: RecordChanges


@dataclass(frozen=True, slots=True)
class UpdateRecordResponse:
    record: CatalogItem


class UpdateRecord:
    """
    Partial update of a catalog record.

    Order of checks: identifier format, existence, field rules. A changed
    external_id triggers a fresh track list lookup outside any unit of work.
    Only the fields present in the request are written, so a concurrent
    stock decrement is never overwritten.
    """

    def __init__(self, unit_of_work: UnitOfWork, track_list_provider: TrackListProvider) -> None:
        self._uow = unit_of_work
        self._track_list_provider = track_list_provider

    def execute(self, request: UpdateRecordRequest) -> UpdateRecordResponse:
        """
        Raises:
            InvalidIdentifierError: If record_id is not a valid UUID
            NotFoundError: If the record does not exist
            ValidationError: If a changed field breaks a field rule
            AlreadyExistsError: If the change collides with another record's key
            UpdateFailedError: If the store modified zero rows
        """
        ensure_record_id(request.record_id)

        with self._uow as uow:
            current = uow.records.get_by_id(request.record_id)

        if current is None:
            raise NotFoundError(resource="Record", identifier=request.record_id)

        changes = request.changes.normalized()
        changes.validate()

        if changes.external_id is not None and changes.external_id != current.external_id:
            track_list = self._track_list_provider.fetch_track_list(changes.external_id)
            changes = replace(changes, track_list=tuple(track_list))

        with self._uow as uow:
            updated = uow.records.update(request.record_id, changes)
            if updated is None:
                raise UpdateFailedError(record_id=request.record_id)
            uow.commit()

        logger.info(
            "Record updated",
            extra={"record_id": updated.id, "fields": sorted(changes.as_values())},
        )
        return UpdateRecordResponse(record=updated)
