from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from decimal import Decimal
from enum import Enum
from typing import Any

from record_shop.domain.errors import ValidationError


class RecordFormat(str, Enum):
    VINYL = "vinyl"
    CD = "cd"
    CASSETTE = "cassette"
    DIGITAL = "digital"


class RecordCategory(str, Enum):
    ROCK = "rock"
    JAZZ = "jazz"
    HIPHOP = "hip-hop"
    CLASSICAL = "classical"
    POP = "pop"
    ALTERNATIVE = "alternative"
    INDIE = "indie"


def normalize_name(value: str) -> str:
    """Artist and album are stored lowercase."""
    return value.lower()


@dataclass(frozen=True)
class CatalogItem:
    id: str
    artist: str
    album: str
    price: Decimal
    quantity: int
    format: RecordFormat
    category: RecordCategory
    external_id: str | None = None
    track_list: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RecordDraft:
    """Fields of a record that does not exist yet."""

    artist: str
    album: str
    price: Decimal
    quantity: int
    format: RecordFormat
    category: RecordCategory
    external_id: str | None = None

    def normalized(self) -> RecordDraft:
        return replace(
            self,
            artist=normalize_name(self.artist),
            album=normalize_name(self.album),
        )

    def validate(self) -> None:
        """
        Validate draft fields.

        Raises:
            ValidationError: If any field breaks a catalog invariant
        """
        errors = []
        if not self.artist.strip():
            errors.append({"field": "artist", "message": "Must not be empty", "code": "REQUIRED"})
        if not self.album.strip():
            errors.append({"field": "album", "message": "Must not be empty", "code": "REQUIRED"})
        # Guardrail: prevent float leakage past boundary
        if not isinstance(self.price, Decimal):
            errors.append(
                {"field": "price", "message": "Must be Decimal", "code": "INVALID_DECIMAL"}
            )
        elif self.price < 0:
            errors.append({"field": "price", "message": "Must be >= 0", "code": "INVALID_VALUE"})
        if self.quantity < 0:
            errors.append(
                {"field": "quantity", "message": "Must be >= 0", "code": "INVALID_VALUE"}
            )

        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class RecordChanges:
    """
    Partial update of a record. None means "leave unchanged".

    Has no quantity field: stock only moves through the guarded decrement
    of order placement.
    """

    artist: str | None = None
    album: str | None = None
    price: Decimal | None = None
    format: RecordFormat | None = None
    category: RecordCategory | None = None
    external_id: str | None = None
    track_list: tuple[str, ...] | None = field(default=None)

    def normalized(self) -> RecordChanges:
        return replace(
            self,
            artist=normalize_name(self.artist) if self.artist is not None else None,
            album=normalize_name(self.album) if self.album is not None else None,
        )

    def validate(self) -> None:
        errors = []
        if self.artist is not None and not self.artist.strip():
            errors.append({"field": "artist", "message": "Must not be empty", "code": "REQUIRED"})
        if self.album is not None and not self.album.strip():
            errors.append({"field": "album", "message": "Must not be empty", "code": "REQUIRED"})
        if self.price is not None:
            if not isinstance(self.price, Decimal):
                errors.append(
                    {"field": "price", "message": "Must be Decimal", "code": "INVALID_DECIMAL"}
                )
            elif self.price < 0:
                errors.append(
                    {"field": "price", "message": "Must be >= 0", "code": "INVALID_VALUE"}
                )

        if errors:
            raise ValidationError(errors=errors)

    def as_values(self) -> dict[str, Any]:
        """Only the fields that were set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.as_values()

    def apply_to(self, item: CatalogItem) -> CatalogItem:
        return replace(item, **self.as_values())
