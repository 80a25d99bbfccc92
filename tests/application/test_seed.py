"""Tests for startup seeding."""

import random

from stockroom.application.product_service import ProductService
from stockroom.application.result import Err, Ok
from stockroom.application.seed import random_product_input, seed_products
from stockroom.domain.errors import StorageError
from tests.fakes import BrokenProductRepository, FakeProductRepository


def test_seed_creates_requested_count():
    repo = FakeProductRepository()
    service = ProductService(repo)

    result = seed_products(service, 10, random.Random(42))

    assert isinstance(result, Ok)
    assert len(result.value) == 10
    assert len(repo.find_all()) == 10


def test_seed_zero_creates_nothing():
    repo = FakeProductRepository()
    assert seed_products(ProductService(repo), 0) == Ok([])
    assert repo.saves == 0


def test_seeded_inputs_are_valid():
    rng = random.Random(7)
    for _ in range(200):
        data = random_product_input(rng)
        assert data.name.strip()
        assert 1 <= data.price <= 500
        assert 0 <= data.quantity <= 100


def test_seed_is_deterministic_for_a_seeded_rng():
    first = [random_product_input(random.Random(3)) for _ in range(3)]
    second = [random_product_input(random.Random(3)) for _ in range(3)]
    assert first == second


def test_seed_stops_on_store_failure():
    service = ProductService(BrokenProductRepository())
    result = seed_products(service, 5)
    assert result == Err(StorageError("connection refused"))
