"""Translate a sparse SearchFilter into a RecordQuery.

Precedence:
- `q` contributes one AND-term: an OR of a full-text match and prefix
  matches on artist, album and category; it also switches sorting to relevance
- artist / album add prefix constraints
- format / category add exact constraints
- no constraints at all means match everything
"""

from __future__ import annotations

from record_shop.domain.search import (
    AllOf,
    AnyOf,
    ExactMatch,
    MatchAll,
    Predicate,
    PrefixMatch,
    RecordQuery,
    SearchField,
    SearchFilter,
    SortOrder,
    TEXT_SEARCH_FIELDS,
    TextMatch,
)


def free_text_predicate(q: str) -> AnyOf:
    return AnyOf(
        terms=(
            TextMatch(query=q),
            *(PrefixMatch(field=search_field, value=q) for search_field in TEXT_SEARCH_FIELDS),
        )
    )


def build_search_query(filters: SearchFilter) -> RecordQuery:
    """
    Build the predicate and sort order for a catalog search.

    Pure: the same filter always yields an equal RecordQuery.

    Args:
        filters: Search filter, every field optional (assumed validated)

    Returns:
        RecordQuery with predicate and sort order
    """
    terms: list[Predicate] = []
    sort = SortOrder.NATURAL

    if filters.q:
        terms.append(free_text_predicate(filters.q))
        sort = SortOrder.RELEVANCE

    if filters.artist:
        terms.append(PrefixMatch(field=SearchField.ARTIST, value=filters.artist))

    if filters.album:
        terms.append(PrefixMatch(field=SearchField.ALBUM, value=filters.album))

    if filters.format:
        terms.append(ExactMatch(field=SearchField.FORMAT, value=filters.format.value))

    if filters.category:
        terms.append(ExactMatch(field=SearchField.CATEGORY, value=filters.category.value))

    return RecordQuery(predicate=_combine(terms), sort=sort)


def _combine(terms: list[Predicate]) -> Predicate:
    if not terms:
        return MatchAll()
    if len(terms) == 1:
        return terms[0]
    return AllOf(terms=tuple(terms))
