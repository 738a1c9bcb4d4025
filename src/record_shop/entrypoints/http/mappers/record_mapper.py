from __future__ import annotations

from decimal import Decimal, InvalidOperation

from record_shop.domain.errors import ValidationError
from record_shop.domain.record import CatalogItem, RecordChanges, RecordDraft
from record_shop.domain.search import SearchFilter
from record_shop.entrypoints.http.dtos.records import (
    CreateRecordRequestDTO,
    RecordResponseDTO,
    RecordsSearchQueryDTO,
    RecordsSearchResponseDTO,
    UpdateRecordRequestDTO,
)
from record_shop.use_cases.search_record_catalog import (
    SearchRecordCatalogRequest,
    SearchRecordCatalogResponse,
)


def _to_decimal(value: str, field: str) -> Decimal:
    """
    String → Decimal at the boundary.

    Raises:
        ValidationError: If the string is not a valid decimal
    """
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        raise ValidationError(
            errors=[
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {value}",
                    "code": "INVALID_DECIMAL",
                }
            ]
        )


class RecordMapper:
    """Maps between REST DTOs and domain models for the record catalog."""

    @staticmethod
    def to_domain_filter(dto: RecordsSearchQueryDTO) -> SearchFilter:
        """
        Converts query params to the domain search filter.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            SearchFilter: Domain filter including page and limit
        """
        return SearchFilter(
            q=dto.q,
            artist=dto.artist,
            album=dto.album,
            format=dto.format,
            category=dto.category,
            page=dto.page,
            limit=dto.limit,
        )

    @staticmethod
    def to_search_request(dto: RecordsSearchQueryDTO) -> SearchRecordCatalogRequest:
        return SearchRecordCatalogRequest(filters=RecordMapper.to_domain_filter(dto))

    @staticmethod
    def to_domain_draft(dto: CreateRecordRequestDTO) -> RecordDraft:
        return RecordDraft(
            artist=dto.artist,
            album=dto.album,
            price=_to_decimal(dto.price, "price"),
            quantity=dto.quantity,
            format=dto.format,
            category=dto.category,
            external_id=dto.external_id,
        )

    @staticmethod
    def to_domain_changes(dto: UpdateRecordRequestDTO) -> RecordChanges:
        return RecordChanges(
            artist=dto.artist,
            album=dto.album,
            price=_to_decimal(dto.price, "price") if dto.price is not None else None,
            format=dto.format,
            category=dto.category,
            external_id=dto.external_id,
        )

    @staticmethod
    def to_record_response(record: CatalogItem) -> RecordResponseDTO:
        """
        Converts domain CatalogItem to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return RecordResponseDTO(
            id=record.id,
            artist=record.artist,
            album=record.album,
            price=str(record.price),  # Decimal → str at boundary
            quantity=record.quantity,
            format=record.format,
            category=record.category,
            external_id=record.external_id,
            track_list=list(record.track_list),
        )

    @staticmethod
    def to_search_response(result: SearchRecordCatalogResponse) -> RecordsSearchResponseDTO:
        """
        Converts domain search result to REST response with page metadata.

        Args:
            result: Page window and records

        Returns:
            RecordsSearchResponseDTO: REST response with records and page metadata
        """
        return RecordsSearchResponseDTO(
            current_page=result.page.current_page,
            previous_page=result.page.previous_page,
            next_page=result.page.next_page,
            page_count=result.page.page_count,
            limit=result.page.limit,
            records=[RecordMapper.to_record_response(record) for record in result.records],
        )
