from pydantic import BaseModel, ConfigDict, Field

from record_shop.domain.record import RecordCategory, RecordFormat

# Fits NUMERIC(10,2)
PRICE_PATTERN = r"^\d{1,8}(\.\d{1,2})?$"


class RecordResponseDTO(BaseModel):
    id: str
    artist: str
    album: str
    price: str
    quantity: int
    format: RecordFormat
    category: RecordCategory
    external_id: str | None = None
    track_list: list[str]


class RecordsSearchQueryDTO(BaseModel):
    """Query parameters for searching records in the catalog."""

    q: str | None = Field(
        default=None,
        description="Free-text search across artist, album and category (ranked by relevance)",
        examples=["floyd"],
    )
    artist: str | None = Field(
        default=None,
        description="Filter by artist (case-insensitive prefix match)",
        examples=["pink"],
    )
    album: str | None = Field(
        default=None,
        description="Filter by album (case-insensitive prefix match)",
        examples=["the wall"],
    )
    format: RecordFormat | None = Field(
        default=None,
        description="Filter by record format (exact match)",
        examples=["vinyl"],
    )
    category: RecordCategory | None = Field(
        default=None,
        description="Filter by record category (exact match)",
        examples=["rock"],
    )
    page: int = Field(
        default=1,
        description="Page number, starting at 1",
        examples=[1],
        ge=1,
    )
    limit: int = Field(
        default=10,
        description="Maximum number of records per page",
        examples=[10],
        ge=1,
        le=100,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "q": "floyd",
                "format": "vinyl",
                "page": 1,
                "limit": 10,
            }
        }
    )


class RecordsSearchResponseDTO(BaseModel):
    current_page: int
    previous_page: int
    next_page: int
    page_count: int
    limit: int
    records: list[RecordResponseDTO]


class CreateRecordRequestDTO(BaseModel):
    """Request payload for adding a record to the catalog."""

    artist: str = Field(min_length=1, max_length=200, examples=["Pink Floyd"])
    album: str = Field(min_length=1, max_length=200, examples=["The Wall"])
    price: str = Field(
        description="Price as decimal string",
        examples=["29.99"],
        pattern=PRICE_PATTERN,
    )
    quantity: int = Field(description="Units in stock", examples=[10], ge=0)
    format: RecordFormat = Field(examples=["vinyl"])
    category: RecordCategory = Field(examples=["rock"])
    external_id: str | None = Field(
        default=None,
        description="MusicBrainz release ID used to fetch the track list",
        examples=["b3b7e934-445b-4c68-a097-730c6a6d47e6"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "artist": "Pink Floyd",
                "album": "The Wall",
                "price": "29.99",
                "quantity": 10,
                "format": "vinyl",
                "category": "rock",
                "external_id": "b3b7e934-445b-4c68-a097-730c6a6d47e6",
            }
        }
    )


class UpdateRecordRequestDTO(BaseModel):
    """Partial update payload. Omitted fields are left unchanged; stock is not editable here."""

    artist: str | None = Field(default=None, min_length=1, max_length=200)
    album: str | None = Field(default=None, min_length=1, max_length=200)
    price: str | None = Field(default=None, pattern=PRICE_PATTERN, examples=["24.99"])
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    external_id: str | None = None

    model_config = ConfigDict(extra="forbid")
