from __future__ import annotations

import re
import uuid
from dataclasses import replace
from enum import Enum

from record_shop.adapters.in_memory_store import InMemoryStore
from record_shop.domain.errors import AlreadyExistsError
from record_shop.domain.record import (
    CatalogItem,
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
from record_shop.ports.record_catalog_repository import (
    RecordCatalogRepository,
    SearchResult,
)

_WORD = re.compile(r"\w+")


def _field_value(record: CatalogItem, field: SearchField) -> str:
    value = getattr(record, field.value)
    return value.value if isinstance(value, Enum) else value


def _words(text: str) -> list[str]:
    return _WORD.findall(text.lower())


def text_score(record: CatalogItem, match: TextMatch) -> int:
    """
    Occurrences of query words among the indexed fields' words.

    Words match exactly. Unlike the english tsvector index there is no
    stemming, so "floyds" does not match "floyd" here.
    """
    terms = set(_words(match.query))
    if not terms:
        return 0
    document = [word for f in match.fields for word in _words(_field_value(record, f))]
    return sum(1 for word in document if word in terms)


class InMemoryRecordCatalogRepository(RecordCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Natural order is insertion order
    - Evaluates predicates in Python, prefix matches case-insensitive
    - Relevance sort is by text score descending, stable on ties
    - Text matching compares whole words without stemming (see text_score)
    - Applies paging AFTER filtering and sorting
    - Returns total_count of matching records before paging
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def search(self, query: RecordQuery, paging: Paging) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [
            record
            for record in self._store.records.values()
            if self._matches(record, query.predicate)
        ]
        total_count = len(matches)  # Count BEFORE paging

        if query.sort is SortOrder.RELEVANCE:
            matches.sort(key=lambda record: -self._score(record, query.predicate))

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(records=matches[start:end], total_count=total_count)

    def get_by_id(self, record_id: str) -> CatalogItem | None:
        return self._store.records.get(record_id)

    def find_by_identity(
        self, artist: str, album: str, format: RecordFormat
    ) -> CatalogItem | None:
        for record in self._store.records.values():
            if (record.artist, record.album, record.format) == (artist, album, format):
                return record
        return None

    def add(self, draft: RecordDraft, track_list: list[str]) -> CatalogItem:
        with self._store.lock:
            if self.find_by_identity(draft.artist, draft.album, draft.format):
                raise AlreadyExistsError("Record already exists", artist=draft.artist, album=draft.album)

            record = CatalogItem(
                id=str(uuid.uuid4()),
                artist=draft.artist,
                album=draft.album,
                price=draft.price,
                quantity=draft.quantity,
                format=draft.format,
                category=draft.category,
                external_id=draft.external_id,
                track_list=tuple(track_list),
            )
            self._store.records[record.id] = record
            return record

    def update(self, record_id: str, changes: RecordChanges) -> CatalogItem | None:
        with self._store.lock:
            current = self._store.records.get(record_id)
            if current is None or changes.is_empty():
                return None

            updated = changes.apply_to(current)
            clash = self.find_by_identity(updated.artist, updated.album, updated.format)
            if clash is not None and clash.id != record_id:
                raise AlreadyExistsError("Record already exists", artist=updated.artist, album=updated.album)

            self._store.records[record_id] = updated
            return updated

    def decrement_stock(self, record_id: str, quantity: int) -> bool:
        with self._store.lock:
            current = self._store.records.get(record_id)
            # Guard re-checked at write time
            if current is None or current.quantity < quantity:
                return False

            self._store.records[record_id] = replace(current, quantity=current.quantity - quantity)
            return True

    def _matches(self, record: CatalogItem, predicate: Predicate) -> bool:
        if isinstance(predicate, MatchAll):
            return True
        if isinstance(predicate, PrefixMatch):
            return _field_value(record, predicate.field).lower().startswith(predicate.value.lower())
        if isinstance(predicate, ExactMatch):
            return _field_value(record, predicate.field) == predicate.value
        if isinstance(predicate, TextMatch):
            return text_score(record, predicate) > 0
        if isinstance(predicate, AnyOf):
            return any(self._matches(record, term) for term in predicate.terms)
        if isinstance(predicate, AllOf):
            return all(self._matches(record, term) for term in predicate.terms)
        raise TypeError(f"Unsupported predicate: {predicate!r}")

    def _score(self, record: CatalogItem, predicate: Predicate) -> int:
        if isinstance(predicate, TextMatch):
            return text_score(record, predicate)
        if isinstance(predicate, (AnyOf, AllOf)):
            return sum(self._score(record, term) for term in predicate.terms)
        return 0
