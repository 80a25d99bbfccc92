"""Abstract record store for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (Cassandra, JSON file) live in
the infrastructure layer and raise ``RecordStoreError`` on failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from stockroom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert or overwrite a product, keyed by its id."""

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product, in store-defined order."""

    @abstractmethod
    def delete_by_id(self, product_id: UUID) -> None:
        """Remove a product. Missing ids are ignored."""
