from __future__ import annotations

import logging
from dataclasses import dataclass

from record_shop.domain.pagination import PageWindow, calculate_page_window, paging_for
from record_shop.domain.query_builder import build_search_query
from record_shop.domain.record import CatalogItem
from record_shop.domain.search import SearchFilter
from record_shop.ports.record_catalog_repository import RecordCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchRecordCatalogRequest:
    filters: SearchFilter


@dataclass(frozen=True, slots=True)
class SearchRecordCatalogResponse:
    page: PageWindow
    records: list[CatalogItem]


class SearchRecordCatalog:
    """
    Record catalog search with relevance ranking and page metadata.

    The use case validates the filter, builds the query (pure), derives the
    offset from page/limit, and delegates execution to the repository.
    An empty result is a valid outcome, never an error.
    """

    def __init__(self, record_catalog_repository: RecordCatalogRepository) -> None:
        self._repository = record_catalog_repository

    def execute(self, request: SearchRecordCatalogRequest) -> SearchRecordCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Search filter including page and limit

        Returns:
            Response containing the page window and the page of records

        Raises:
            PagingValidationError: If page or limit is not positive
            FilterValidationError: If format/category are not enum members
        """
        filters = request.filters
        # Validate inputs (UseCase responsibility per contract)
        filters.validate()

        query = build_search_query(filters)
        result = self._repository.search(
            query=query,
            paging=paging_for(filters.page, filters.limit),
        )

        page = calculate_page_window(
            total_count=result.total_count,
            page=filters.page,
            limit=filters.limit,
        )

        logger.debug(
            "Catalog search",
            extra={"total_count": result.total_count, "page": filters.page, "sort": query.sort.value},
        )

        return SearchRecordCatalogResponse(page=page, records=result.records)
