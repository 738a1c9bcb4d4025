from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from record_shop.domain.errors import ValidationError
from record_shop.domain.record import RecordCategory, RecordFormat

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


# ==============================================================================
# Search input
# ==============================================================================


@dataclass(frozen=True, slots=True)
class SearchFilter:
    q: str | None = None
    artist: str | None = None
    album: str | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def validate(self) -> None:
        """
        Validate filter and paging parameters.

        Raises:
            PagingValidationError: If page or limit is not positive
            FilterValidationError: If format/category are not enum members
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.limit < 1:
            raise PagingValidationError("limit must be >= 1")
        if self.format is not None and not isinstance(self.format, RecordFormat):
            raise FilterValidationError("format must be a RecordFormat")
        if self.category is not None and not isinstance(self.category, RecordCategory):
            raise FilterValidationError("category must be a RecordCategory")


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = DEFAULT_LIMIT


# ==============================================================================
# Storage-agnostic predicates
# ==============================================================================


class SearchField(str, Enum):
    ARTIST = "artist"
    ALBUM = "album"
    FORMAT = "format"
    CATEGORY = "category"


TEXT_SEARCH_FIELDS: tuple[SearchField, ...] = (
    SearchField.ARTIST,
    SearchField.ALBUM,
    SearchField.CATEGORY,
)


@dataclass(frozen=True, slots=True)
class MatchAll:
    """Matches every record."""


@dataclass(frozen=True, slots=True)
class PrefixMatch:
    """Field value starts with `value`, case-insensitive."""

    field: SearchField
    value: str


@dataclass(frozen=True, slots=True)
class ExactMatch:
    field: SearchField
    value: str


@dataclass(frozen=True, slots=True)
class TextMatch:
    """Full-text match against the text search index. Produces a relevance score."""

    query: str
    fields: tuple[SearchField, ...] = TEXT_SEARCH_FIELDS


@dataclass(frozen=True, slots=True)
class AnyOf:
    terms: tuple[Predicate, ...]


@dataclass(frozen=True, slots=True)
class AllOf:
    terms: tuple[Predicate, ...]


Predicate = Union[MatchAll, PrefixMatch, ExactMatch, TextMatch, AnyOf, AllOf]


class SortOrder(str, Enum):
    NATURAL = "natural"  # store's default order
    RELEVANCE = "relevance"  # text score, descending


@dataclass(frozen=True, slots=True)
class RecordQuery:
    predicate: Predicate
    sort: SortOrder = SortOrder.NATURAL
