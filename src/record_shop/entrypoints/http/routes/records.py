from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from record_shop.entrypoints.http.dependencies import (
    get_create_record_use_case,
    get_get_record_by_id_use_case,
    get_search_catalog_use_case,
    get_update_record_use_case,
)
from record_shop.entrypoints.http.dtos.records import (
    CreateRecordRequestDTO,
    RecordResponseDTO,
    RecordsSearchQueryDTO,
    RecordsSearchResponseDTO,
    UpdateRecordRequestDTO,
)
from record_shop.entrypoints.http.error_responses import ErrorResponse
from record_shop.entrypoints.http.mappers.record_mapper import RecordMapper
from record_shop.use_cases.create_record import CreateRecord, CreateRecordRequest
from record_shop.use_cases.get_record_by_id import GetRecordById, GetRecordByIdRequest
from record_shop.use_cases.search_record_catalog import SearchRecordCatalog
from record_shop.use_cases.update_record import UpdateRecord, UpdateRecordRequest


router = APIRouter(tags=["Records"])

_RECORD_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "artist": "pink floyd",
    "album": "the wall",
    "price": "29.99",
    "quantity": 10,
    "format": "vinyl",
    "category": "rock",
    "external_id": "b3b7e934-445b-4c68-a097-730c6a6d47e6",
    "track_list": ["In the Flesh?", "The Thin Ice"],
}


@router.get(
    "/records",
    response_model=RecordsSearchResponseDTO,
    summary="Search record catalog",
    description="""
    Search for records in the catalog with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - q: free text over artist, album and category; results ranked by relevance
    - artist/album: case-insensitive prefix match
    - format/category: exact match

    ## Pagination
    - page starts at 1
    - Default limit: 10
    - Max limit: 100
    - previous_page/next_page are clamped to the first and last page

    ## Example
    ```
    GET /v1/records?q=floyd&format=vinyl&page=1&limit=10
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "current_page": 1,
                        "previous_page": 1,
                        "next_page": 2,
                        "page_count": 3,
                        "limit": 10,
                        "records": [_RECORD_EXAMPLE],
                    }
                }
            },
        },
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def search_records(
    query: Annotated[RecordsSearchQueryDTO, Query()],
    use_case: SearchRecordCatalog = Depends(get_search_catalog_use_case),
) -> RecordsSearchResponseDTO:
    """Search records endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = RecordMapper.to_search_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return RecordMapper.to_search_response(result)


@router.get(
    "/records/{record_id}",
    response_model=RecordResponseDTO,
    summary="Get a record",
    responses={
        200: {
            "description": "Record found",
            "content": {"application/json": {"example": _RECORD_EXAMPLE}},
        },
        400: {"model": ErrorResponse, "description": "Malformed record ID"},
        404: {"model": ErrorResponse, "description": "Record not found"},
    },
)
def get_record(
    record_id: str,
    use_case: GetRecordById = Depends(get_get_record_by_id_use_case),
) -> RecordResponseDTO:
    result = use_case.execute(GetRecordByIdRequest(record_id=record_id))
    return RecordMapper.to_record_response(result.record)


@router.post(
    "/records",
    response_model=RecordResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a record",
    description="""
    Add a record to the catalog.

    - artist and album are stored lowercase
    - (artist, album, format) must be unique
    - When external_id is a MusicBrainz release ID, the track list is
      fetched from MusicBrainz. A failed lookup leaves the track list empty.
    """,
    responses={
        201: {
            "description": "Record created",
            "content": {"application/json": {"example": _RECORD_EXAMPLE}},
        },
        409: {
            "model": ErrorResponse,
            "description": "Record already exists",
            "content": {
                "application/json": {
                    "example": {"detail": "Record already exists", "code": "ALREADY_EXISTS"}
                }
            },
        },
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def create_record(
    payload: CreateRecordRequestDTO,
    use_case: CreateRecord = Depends(get_create_record_use_case),
) -> RecordResponseDTO:
    request = CreateRecordRequest(draft=RecordMapper.to_domain_draft(payload))

    result = use_case.execute(request)

    return RecordMapper.to_record_response(result.record)


@router.put(
    "/records/{record_id}",
    response_model=RecordResponseDTO,
    summary="Update a record",
    description="""
    Partially update a record. Omitted fields are left unchanged.

    Stock quantity cannot be changed here. A new external_id refreshes the
    track list from MusicBrainz.
    """,
    responses={
        200: {
            "description": "Record updated",
            "content": {"application/json": {"example": _RECORD_EXAMPLE}},
        },
        400: {"model": ErrorResponse, "description": "Malformed record ID"},
        404: {"model": ErrorResponse, "description": "Record not found"},
        409: {"model": ErrorResponse, "description": "Change collides with another record"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Update failed"},
    },
)
def update_record(
    record_id: str,
    payload: UpdateRecordRequestDTO,
    use_case: UpdateRecord = Depends(get_update_record_use_case),
) -> RecordResponseDTO:
    request = UpdateRecordRequest(
        record_id=record_id,
        changes=RecordMapper.to_domain_changes(payload),
    )

    result = use_case.execute(request)

    return RecordMapper.to_record_response(result.record)
