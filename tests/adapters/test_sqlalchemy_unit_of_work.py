"""Unit tests for SqlAlchemyUnitOfWork session lifecycle."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from sqlalchemy.orm import Session

from record_shop.adapters.postgres_order_repository import PostgresOrderRepository
from record_shop.adapters.postgres_record_catalog_repository import (
    PostgresRecordCatalogRepository,
)
from record_shop.adapters.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture()
def mock_session() -> Mock:
    return Mock(spec=Session)


@pytest.fixture()
def uow(mock_session: Mock) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory=Mock(return_value=mock_session))


def test_entering_opens_session_and_repositories(
    uow: SqlAlchemyUnitOfWork, mock_session: Mock
) -> None:
    with uow:
        assert uow.session is mock_session
        assert isinstance(uow.records, PostgresRecordCatalogRepository)
        assert isinstance(uow.orders, PostgresOrderRepository)


def test_commit_then_exit_closes_session(uow: SqlAlchemyUnitOfWork, mock_session: Mock) -> None:
    with uow:
        uow.commit()

    mock_session.commit.assert_called_once()
    mock_session.close.assert_called_once()


def test_exit_without_commit_rolls_back(uow: SqlAlchemyUnitOfWork, mock_session: Mock) -> None:
    with uow:
        pass

    mock_session.rollback.assert_called_once()
    mock_session.commit.assert_not_called()
    mock_session.close.assert_called_once()


def test_exception_rolls_back_closes_and_propagates(
    uow: SqlAlchemyUnitOfWork, mock_session: Mock
) -> None:
    with pytest.raises(RuntimeError):
        with uow:
            raise RuntimeError("boom")

    mock_session.rollback.assert_called_once()
    mock_session.close.assert_called_once()


def test_session_outside_scope_raises(uow: SqlAlchemyUnitOfWork) -> None:
    with pytest.raises(RuntimeError):
        uow.session

    with uow:
        pass

    with pytest.raises(RuntimeError):
        uow.session
