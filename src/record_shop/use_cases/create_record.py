from __future__ import annotations

import logging
from dataclasses import dataclass

from record_shop.domain.errors import AlreadyExistsError
from record_shop.domain.record import CatalogItem, RecordDraft
from record_shop.ports.track_list_provider import TrackListProvider
from record_shop.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateRecordRequest:
    draft: RecordDraft


@dataclass(frozen=True, slots=True)
class CreateRecordResponse:
    record: CatalogItem


class CreateRecord:
    """
    Add a record to the catalog.

    - artist/album are lowercased before any lookup or write
    - (artist, album, format) must be unused; the store's unique index is
      the backstop for two creates racing each other
    - the track list is fetched between the two units of work, never
      inside one
    """

    def __init__(self, unit_of_work: UnitOfWork, track_list_provider: TrackListProvider) -> None:
        self._uow = unit_of_work
        self._track_list_provider = track_list_provider

    def execute(self, request: CreateRecordRequest) -> CreateRecordResponse:
        """
        Raises:
            ValidationError: If the draft breaks a field rule
            AlreadyExistsError: If (artist, album, format) is already in the catalog
        """
        draft = request.draft.normalized()
        draft.validate()

        with self._uow as uow:
            existing = uow.records.find_by_identity(draft.artist, draft.album, draft.format)

        if existing is not None:
            raise AlreadyExistsError(
                "Record already exists",
                artist=draft.artist,
                album=draft.album,
                format=draft.format.value,
            )

        track_list = self._track_list_provider.fetch_track_list(draft.external_id)

        with self._uow as uow:
            record = uow.records.add(draft, track_list)
            uow.commit()

        logger.info(
            "Record created",
            extra={"record_id": record.id, "tracks": len(record.track_list)},
        )
        return CreateRecordResponse(record=record)
