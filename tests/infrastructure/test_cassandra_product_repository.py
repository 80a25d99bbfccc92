"""Tests for the Cassandra record store, against a mocked driver session."""

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from cassandra import DriverException
from cassandra.cluster import NoHostAvailable
from cassandra.cqltypes import DoubleType, LongType, UTF8Type, UUIDType
from cassandra.protocol import ColumnMetadata
from cassandra.query import PreparedStatement

from stockroom.application.dto import ProductInput
from stockroom.application.product_service import ProductService
from stockroom.application.result import Err, Ok
from stockroom.domain.errors import StorageError
from stockroom.domain.exceptions import RecordStoreError
from stockroom.domain.model.product import Product
from stockroom.infrastructure.persistence.cassandra_product_repository import (
    CassandraProductRepository,
)
from stockroom.infrastructure.persistence.cassandra_session import COLUMNS, create_schema


def _row(product: Product) -> SimpleNamespace:
    return SimpleNamespace(
        id=product.id, name=product.name, price=product.price, quantity=product.quantity
    )


@pytest.fixture
def session():
    s = MagicMock()
    s.prepare.side_effect = lambda cql: SimpleNamespace(cql=cql)
    return s


@pytest.fixture
def repo(session):
    return CassandraProductRepository(session, "inventory")


def test_statements_target_the_keyspace_table(session, repo):
    prepared = [call.args[0] for call in session.prepare.call_args_list]
    assert len(prepared) == 4
    assert all("inventory.products" in cql for cql in prepared)


def test_save_upserts_all_columns(session, repo):
    product = Product(id=uuid4(), name="Widget", price=9.99, quantity=5)

    assert repo.save(product) == product

    statement, params = session.execute.call_args.args
    assert statement.cql.startswith("INSERT INTO inventory.products")
    assert params == (product.id, "Widget", 9.99, 5)


def test_find_by_id_maps_row(session, repo):
    product = Product(id=uuid4(), name="Widget", price=9.99, quantity=5)
    session.execute.return_value.one.return_value = _row(product)

    assert repo.find_by_id(product.id) == product
    assert session.execute.call_args.args[1] == (product.id,)


def test_find_by_id_missing(session, repo):
    session.execute.return_value.one.return_value = None
    assert repo.find_by_id(uuid4()) is None


def test_find_all_maps_every_row(session, repo):
    products = [Product(id=uuid4(), name=f"P{i}", price=1.0, quantity=i) for i in range(3)]
    session.execute.return_value = [_row(p) for p in products]

    assert repo.find_all() == products


def test_delete_by_id(session, repo):
    product_id = uuid4()
    repo.delete_by_id(product_id)

    statement, params = session.execute.call_args.args
    assert statement.cql.startswith("DELETE FROM inventory.products")
    assert params == (product_id,)


@pytest.mark.parametrize(
    "error", [DriverException("boom"), NoHostAvailable("no hosts", {})]
)
def test_driver_errors_become_record_store_errors(session, repo, error):
    session.execute.side_effect = error
    with pytest.raises(RecordStoreError):
        repo.find_all()


def test_create_schema_creates_keyspace_then_table():
    session = MagicMock()
    create_schema(session, "inventory", replication_factor=3)

    keyspace_cql, table_cql = [call.args[0] for call in session.execute.call_args_list]
    assert "CREATE KEYSPACE IF NOT EXISTS inventory" in keyspace_cql
    assert "'replication_factor': 3" in keyspace_cql
    assert "CREATE TABLE IF NOT EXISTS inventory.products" in table_cql
    assert "quantity bigint" in table_cql


# ── Binding against the declared column types ────────────────────────────────

_DRIVER_TYPES = {"uuid": UUIDType, "text": UTF8Type, "double": DoubleType, "bigint": LongType}


class BindingSession:
    """Prepares statements with the table's column types and binds on execute.

    Binding is where the driver serializes each value for its column, so
    out-of-range values fail here just as they would against a live node.
    """

    def __init__(self) -> None:
        self.bound = []

    def prepare(self, cql):
        if cql.startswith("INSERT"):
            names = [name for name, _ in COLUMNS]
        elif "WHERE id = ?" in cql:
            names = ["id"]
        else:
            names = []
        types = dict(COLUMNS)
        metadata = [
            ColumnMetadata("inventory", "products", name, _DRIVER_TYPES[types[name]])
            for name in names
        ]
        return PreparedStatement(
            metadata, b"query-id", [0] if names else None, cql, "inventory", 4, [], None
        )

    def execute(self, statement, params=()):
        self.bound.append(statement.bind(params))
        return MagicMock()


def test_quantity_beyond_32_bits_is_stored():
    session = BindingSession()
    service = ProductService(CassandraProductRepository(session, "inventory"))

    result = service.create(ProductInput(name="Widget", price=1.0, quantity=3_000_000_000))

    assert isinstance(result, Ok)
    assert result.value.quantity == 3_000_000_000
    assert len(session.bound) == 1


def test_unbindable_quantity_becomes_storage_error():
    service = ProductService(CassandraProductRepository(BindingSession(), "inventory"))

    result = service.create(ProductInput(name="Widget", price=1.0, quantity=2**63))

    assert isinstance(result, Err)
    assert isinstance(result.error, StorageError)
    assert result.error.message.startswith("Cannot bind parameters")


def test_bind_type_error_becomes_record_store_error(session, repo):
    session.execute.side_effect = TypeError("invalid type for column")
    with pytest.raises(RecordStoreError, match="Cannot bind parameters"):
        repo.save(Product(id=uuid4(), name="Widget", price=1.0, quantity=1))
