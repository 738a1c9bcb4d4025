"""
Dependency injection for FastAPI routes.

Key principle: Database sessions and units of work are per-request, not cached.
Only stateless singletons (the enrichment HTTP client) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

import httpx
from fastapi import Depends
from sqlalchemy.orm import Session

from record_shop.adapters.musicbrainz_track_list_provider import (
    MusicBrainzTrackListProvider,
)
from record_shop.adapters.postgres_record_catalog_repository import (
    PostgresRecordCatalogRepository,
)
from record_shop.adapters.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork
from record_shop.infra.db.session import get_session, get_session_local
from record_shop.infra.musicbrainz.config import (
    musicbrainz_api_url,
    musicbrainz_timeout_seconds,
    musicbrainz_user_agent,
)
from record_shop.ports.track_list_provider import TrackListProvider
from record_shop.ports.unit_of_work import UnitOfWork
from record_shop.use_cases.create_record import CreateRecord
from record_shop.use_cases.get_record_by_id import GetRecordById
from record_shop.use_cases.place_order import PlaceOrder
from record_shop.use_cases.search_record_catalog import SearchRecordCatalog
from record_shop.use_cases.update_record import UpdateRecord


def get_db() -> Generator[Session, None, None]:
    """
    Provides a read session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_unit_of_work() -> UnitOfWork:
    """Fresh unit of work per request; each `with` block is its own transaction."""
    return SqlAlchemyUnitOfWork(session_factory=get_session_local())


@lru_cache(maxsize=1)
def get_track_list_provider() -> TrackListProvider:
    """Process-wide enrichment client (connection pooling lives in httpx.Client)."""
    client = httpx.Client(
        timeout=musicbrainz_timeout_seconds(),
        headers={"User-Agent": musicbrainz_user_agent(), "Accept": "application/json"},
        follow_redirects=True,
    )
    return MusicBrainzTrackListProvider(client=client, api_url=musicbrainz_api_url())


def get_search_catalog_use_case(db: Session = Depends(get_db)) -> SearchRecordCatalog:
    """
    Factory function that returns a configured SearchRecordCatalog use case.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))

    Returns:
        SearchRecordCatalog: Configured use case instance
    """
    repository = PostgresRecordCatalogRepository(session=db)
    return SearchRecordCatalog(record_catalog_repository=repository)


def get_get_record_by_id_use_case(db: Session = Depends(get_db)) -> GetRecordById:
    repository = PostgresRecordCatalogRepository(session=db)
    return GetRecordById(record_catalog_repository=repository)


def get_place_order_use_case(
    unit_of_work: UnitOfWork = Depends(get_unit_of_work),
) -> PlaceOrder:
    return PlaceOrder(unit_of_work=unit_of_work)


def get_create_record_use_case(
    unit_of_work: UnitOfWork = Depends(get_unit_of_work),
    track_list_provider: TrackListProvider = Depends(get_track_list_provider),
) -> CreateRecord:
    return CreateRecord(unit_of_work=unit_of_work, track_list_provider=track_list_provider)


def get_update_record_use_case(
    unit_of_work: UnitOfWork = Depends(get_unit_of_work),
    track_list_provider: TrackListProvider = Depends(get_track_list_provider),
) -> UpdateRecord:
    return UpdateRecord(unit_of_work=unit_of_work, track_list_provider=track_list_provider)
