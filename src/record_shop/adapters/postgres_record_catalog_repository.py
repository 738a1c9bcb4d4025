"""PostgreSQL implementation of RecordCatalogRepository."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import and_, false, func, or_, select, true, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from record_shop.domain.errors import AlreadyExistsError
from record_shop.domain.record import (
    CatalogItem,
    RecordCategory,
    RecordChanges,
    RecordDraft,
    RecordFormat,
)
from record_shop.domain.search import (
    AllOf,
    AnyOf,
    ExactMatch,
    MatchAll,
    Paging,
    Predicate,
    PrefixMatch,
    RecordQuery,
    SearchField,
    SortOrder,
    TextMatch,
)
from record_shop.infra.db.models.record import (
    TEXT_SEARCH_CONFIG,
    RecordRow,
    search_document,
)
from record_shop.ports.record_catalog_repository import (
    RecordCatalogRepository,
    SearchResult,
)

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select

UNIQUE_INDEX_NAME = "record_compound_unique_index"

# Store order when no relevance sort applies: insertion time, then id
NATURAL_ORDER = (RecordRow.created_at, RecordRow.id)

_WORD = re.compile(r"\w+")

_COLUMNS = {
    SearchField.ARTIST: RecordRow.artist,
    SearchField.ALBUM: RecordRow.album,
    SearchField.FORMAT: RecordRow.format,
    SearchField.CATEGORY: RecordRow.category,
}


def _parse_uuid(record_id: str) -> UUID | None:
    try:
        return UUID(record_id)
    except ValueError:  # Invalid UUID format
        return None


def text_query(query: str) -> ColumnElement | None:
    """
    tsquery matching ANY word of the free-text query.

    Returns None when the query has no searchable words.
    """
    words = _WORD.findall(query.lower())
    if not words:
        return None
    return func.to_tsquery(TEXT_SEARCH_CONFIG, " | ".join(words))


def _document() -> ColumnElement:
    return search_document(RecordRow.artist, RecordRow.album, RecordRow.category)


def _is_unique_violation(exc: IntegrityError) -> bool:
    return UNIQUE_INDEX_NAME in str(exc.orig)


class PostgresRecordCatalogRepository(RecordCatalogRepository):
    """
    PostgreSQL implementation of RecordCatalogRepository.

    - Compiles domain predicates to SQL WHERE clauses
    - Full-text match via the GIN-indexed tsvector, ranked with ts_rank
    - Prefix match via LIKE 'value%' on the lowercased stored value
    - Returns total_count via COUNT(*) query
    - Converts RecordRow (infrastructure) to CatalogItem (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, query: RecordQuery, paging: Paging) -> SearchResult:
        """
        Search catalog with predicate, sort order and paging.

        Executes two queries:
        1. COUNT(*) to get total matching records (before paging)
        2. SELECT with ORDER BY/OFFSET/LIMIT to get the page

        Args:
            query: Predicate and sort order - must be pre-validated
            paging: Pagination parameters - must be pre-validated

        Returns:
            SearchResult with records and total_count
        """
        count_query = select(func.count()).select_from(self._filtered(query).subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        statement = self._build_query(query).offset(paging.offset).limit(paging.limit)

        rows = self._session.execute(statement).scalars().all()
        records = [self._to_domain(row) for row in rows]

        return SearchResult(records=records, total_count=total_count)

    def get_by_id(self, record_id: str) -> CatalogItem | None:
        """
        Get record by ID.

        Args:
            record_id: Record ID (expected to be a valid UUID string)

        Returns:
            CatalogItem if found, None otherwise (including malformed IDs)
        """
        uid = _parse_uuid(record_id)
        if uid is None:
            return None

        row = self._session.execute(
            select(RecordRow).where(RecordRow.id == uid)
        ).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def find_by_identity(
        self, artist: str, album: str, format: RecordFormat
    ) -> CatalogItem | None:
        row = self._session.execute(
            select(RecordRow).where(
                RecordRow.artist == artist,
                RecordRow.album == album,
                RecordRow.format == format.value,
            )
        ).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def add(self, draft: RecordDraft, track_list: list[str]) -> CatalogItem:
        row = RecordRow(
            id=uuid4(),
            artist=draft.artist,
            album=draft.album,
            price=draft.price,
            quantity=draft.quantity,
            format=draft.format.value,
            category=draft.category.value,
            external_id=draft.external_id,
            track_list=list(track_list),
        )
        self._session.add(row)

        try:
            self._session.flush()
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise AlreadyExistsError(
                    "Record already exists", artist=draft.artist, album=draft.album
                ) from exc
            raise

        return self._to_domain(row)

    def update(self, record_id: str, changes: RecordChanges) -> CatalogItem | None:
        uid = _parse_uuid(record_id)
        values = self._to_column_values(changes)
        if uid is None or not values:
            return None

        statement = (
            update(RecordRow)
            .where(RecordRow.id == uid)
            .values(**values)
            .returning(RecordRow)
            .execution_options(synchronize_session=False)
        )

        try:
            row = self._session.execute(statement).scalar_one_or_none()
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise AlreadyExistsError("Record already exists", record_id=record_id) from exc
            raise

        return self._to_domain(row) if row else None

    def decrement_stock(self, record_id: str, quantity: int) -> bool:
        """
        UPDATE records SET quantity = quantity - :q
        WHERE id = :id AND quantity >= :q

        The WHERE guard is evaluated against the row version current at write
        time, so a decrement committed by another transaction after our read
        makes this match zero rows instead of over-drawing stock.
        """
        uid = _parse_uuid(record_id)
        if uid is None:
            return False

        statement = (
            update(RecordRow)
            .where(RecordRow.id == uid, RecordRow.quantity >= quantity)
            .values(quantity=RecordRow.quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        result = self._session.execute(statement)
        return result.rowcount == 1

    def _build_query(self, query: RecordQuery) -> Select[tuple[RecordRow]]:
        """
        Build SQLAlchemy query with predicate and ordering applied.

        Args:
            query: Domain query to compile

        Returns:
            SQLAlchemy select statement
        """
        statement = self._filtered(query)

        if query.sort is SortOrder.RELEVANCE:
            rank = self._rank(query.predicate)
            if rank is not None:
                # id breaks rank ties
                return statement.order_by(rank.desc(), RecordRow.id)

        return statement.order_by(*NATURAL_ORDER)

    def _filtered(self, query: RecordQuery) -> Select[tuple[RecordRow]]:
        return select(RecordRow).where(self._compile(query.predicate))

    def _compile(self, predicate: Predicate) -> ColumnElement[bool]:
        if isinstance(predicate, MatchAll):
            return true()
        if isinstance(predicate, PrefixMatch):
            column = _COLUMNS[predicate.field]
            # Stored values are lowercase; compare against the lowercased prefix
            return column.startswith(predicate.value.lower(), autoescape=True)
        if isinstance(predicate, ExactMatch):
            return _COLUMNS[predicate.field] == predicate.value
        if isinstance(predicate, TextMatch):
            tsquery = text_query(predicate.query)
            if tsquery is None:
                return false()
            return _document().op("@@")(tsquery)
        if isinstance(predicate, AnyOf):
            return or_(*(self._compile(term) for term in predicate.terms))
        if isinstance(predicate, AllOf):
            return and_(*(self._compile(term) for term in predicate.terms))
        raise TypeError(f"Unsupported predicate: {predicate!r}")

    def _rank(self, predicate: Predicate) -> ColumnElement | None:
        """ts_rank of the first TextMatch in the predicate tree, if any."""
        if isinstance(predicate, TextMatch):
            tsquery = text_query(predicate.query)
            return func.ts_rank(_document(), tsquery) if tsquery is not None else None
        if isinstance(predicate, (AnyOf, AllOf)):
            for term in predicate.terms:
                rank = self._rank(term)
                if rank is not None:
                    return rank
        return None

    def _to_column_values(self, changes: RecordChanges) -> dict[str, object]:
        values = changes.as_values()
        if "format" in values:
            values["format"] = values["format"].value
        if "category" in values:
            values["category"] = values["category"].value
        if "track_list" in values:
            values["track_list"] = list(values["track_list"])
        return values

    def _to_domain(self, row: RecordRow) -> CatalogItem:
        """
        Convert database model (RecordRow) to domain entity (CatalogItem).

        Args:
            row: SQLAlchemy RecordRow model

        Returns:
            CatalogItem domain entity
        """
        return CatalogItem(
            id=str(row.id),  # Convert UUID to string
            artist=row.artist,
            album=row.album,
            price=row.price,  # Already Decimal from NUMERIC column
            quantity=row.quantity,
            format=RecordFormat(row.format),
            category=RecordCategory(row.category),
            external_id=row.external_id,
            track_list=tuple(row.track_list or ()),
        )
