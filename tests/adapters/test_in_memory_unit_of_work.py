"""Tests for the snapshot-based InMemoryUnitOfWork."""

from __future__ import annotations

from decimal import Decimal

import pytest

from record_shop.adapters.in_memory_store import InMemoryStore
from record_shop.adapters.in_memory_unit_of_work import InMemoryUnitOfWork
from record_shop.domain.record import CatalogItem, RecordCategory, RecordFormat


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore(
        records=[
            CatalogItem(
                id="1",
                artist="pink floyd",
                album="the wall",
                price=Decimal("20.00"),
                quantity=5,
                format=RecordFormat.VINYL,
                category=RecordCategory.ROCK,
            )
        ]
    )


def test_commit_keeps_writes(store: InMemoryStore) -> None:
    uow = InMemoryUnitOfWork(store)

    with uow:
        uow.records.decrement_stock("1", 2)
        uow.orders.add(record_id="1", quantity=2)
        uow.commit()

    assert store.records["1"].quantity == 3
    assert len(store.orders) == 1


def test_exit_without_commit_rolls_back(store: InMemoryStore) -> None:
    uow = InMemoryUnitOfWork(store)

    with uow:
        uow.records.decrement_stock("1", 2)
        uow.orders.add(record_id="1", quantity=2)

    assert store.records["1"].quantity == 5
    assert store.orders == []


def test_exception_rolls_back_and_propagates(store: InMemoryStore) -> None:
    uow = InMemoryUnitOfWork(store)

    with pytest.raises(RuntimeError):
        with uow:
            uow.records.decrement_stock("1", 2)
            raise RuntimeError("boom")

    assert store.records["1"].quantity == 5


def test_unit_of_work_can_be_reentered(store: InMemoryStore) -> None:
    uow = InMemoryUnitOfWork(store)

    with uow:
        uow.records.decrement_stock("1", 1)
        uow.commit()

    with uow:
        uow.records.decrement_stock("1", 1)

    assert store.records["1"].quantity == 4
