from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from record_shop.domain.record import (
    CatalogItem,
    RecordChanges,
    RecordDraft,
    RecordFormat,
)
from record_shop.domain.search import Paging, RecordQuery


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including the count used for pagination."""

    records: list[CatalogItem]
    total_count: int  # Total matching records before paging


class RecordCatalogRepository(ABC):
    """
    Port for catalog data access.

    Contract (Preconditions):
        - queries and paging parameters are pre-validated by caller (UseCase)
        - artist/album are already normalized by caller
        - identifiers that are not well formed are treated as absent
    """

    @abstractmethod
    def search(self, query: RecordQuery, paging: Paging) -> SearchResult:
        """
        Search catalog with a predicate, sort order and paging.

        Args:
            query: Predicate and sort order built by the query builder
            paging: Offset/limit applied AFTER filtering and sorting

        Returns:
            SearchResult containing the page of records and the total count
        """
        ...

    @abstractmethod
    def get_by_id(self, record_id: str) -> CatalogItem | None: ...

    @abstractmethod
    def find_by_identity(
        self, artist: str, album: str, format: RecordFormat
    ) -> CatalogItem | None:
        """Lookup by the unique (artist, album, format) key."""
        ...

    @abstractmethod
    def add(self, draft: RecordDraft, track_list: list[str]) -> CatalogItem:
        """
        Persist a new record.

        Raises:
            AlreadyExistsError: If the (artist, album, format) key is taken
        """
        ...

    @abstractmethod
    def update(self, record_id: str, changes: RecordChanges) -> CatalogItem | None:
        """
        Apply a partial update.

        Returns:
            The updated record, or None if no row was modified

        Raises:
            AlreadyExistsError: If the change collides with another record's key
        """
        ...

    @abstractmethod
    def decrement_stock(self, record_id: str, quantity: int) -> bool:
        """
        Guarded decrement: subtract `quantity` only if the stored quantity is
        still >= `quantity` at write time.

        Returns:
            True if the row was updated, False if the guard matched nothing
        """
        ...
