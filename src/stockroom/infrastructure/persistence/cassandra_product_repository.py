"""Cassandra-backed implementation of ProductRepository."""

from __future__ import annotations

from uuid import UUID

from cassandra import DriverException, OperationTimedOut
from cassandra.cluster import NoHostAvailable, Session

from stockroom.domain.exceptions import RecordStoreError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.infrastructure.persistence.cassandra_session import TABLE

_DRIVER_ERRORS = (DriverException, NoHostAvailable, OperationTimedOut)


class CassandraProductRepository(ProductRepository):
    """Products stored one row per id in ``<keyspace>.products``.

    Statements are prepared once at construction. Every write is a plain
    upsert, so ``save`` serves both create and update.
    """

    def __init__(self, session: Session, keyspace: str) -> None:
        self._session = session
        table = f"{keyspace}.{TABLE}"
        try:
            self._insert = session.prepare(
                f"INSERT INTO {table} (id, name, price, quantity) VALUES (?, ?, ?, ?)"
            )
            self._select_one = session.prepare(
                f"SELECT id, name, price, quantity FROM {table} WHERE id = ?"
            )
            self._select_all = session.prepare(
                f"SELECT id, name, price, quantity FROM {table}"
            )
            self._delete = session.prepare(f"DELETE FROM {table} WHERE id = ?")
        except _DRIVER_ERRORS as exc:
            raise RecordStoreError(f"Cannot prepare statements: {exc}") from exc

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        self._execute(
            self._insert,
            (product.id, product.name, product.price, product.quantity),
        )
        return product

    def find_by_id(self, product_id: UUID) -> Product | None:
        row = self._execute(self._select_one, (product_id,)).one()
        return self._to_product(row) if row is not None else None

    def find_all(self) -> list[Product]:
        try:
            return [self._to_product(row) for row in self._execute(self._select_all)]
        except _DRIVER_ERRORS as exc:
            # paging past the first page can fail mid-iteration
            raise RecordStoreError(str(exc)) from exc

    def delete_by_id(self, product_id: UUID) -> None:
        self._execute(self._delete, (product_id,))

    # --- Internal helpers -----------------------------------------------------

    def _execute(self, statement, params=()):
        try:
            return self._session.execute(statement, params)
        except _DRIVER_ERRORS as exc:
            raise RecordStoreError(str(exc)) from exc
        except (TypeError, ValueError) as exc:
            # raised while binding a value the column type cannot hold
            raise RecordStoreError(f"Cannot bind parameters: {exc}") from exc

    @staticmethod
    def _to_product(row) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=row.price,
            quantity=row.quantity,
        )
