"""Application service: Product lifecycle.

Owns every business rule applied between the HTTP/CLI layers and the
record store: validation on create, the partial-update merge, and
not-found handling. Failures are returned as ``Err`` values, never raised.
"""

from __future__ import annotations

import logging
import math
from uuid import UUID, uuid4

from stockroom.application.dto import ProductInput
from stockroom.application.result import Err, Ok, Result
from stockroom.domain.errors import InvalidArgument, NotFound, StorageError
from stockroom.domain.exceptions import RecordStoreError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def create(self, data: ProductInput) -> Result[Product]:
        """Validate ``data`` and store it as a new product with a fresh id."""
        if data.name is None or not data.name.strip():
            return Err(InvalidArgument("name"))
        if data.price is None or not math.isfinite(data.price) or data.price < 0:
            return Err(InvalidArgument("price"))
        if data.quantity is None or data.quantity < 0:
            return Err(InvalidArgument("quantity"))

        product = Product(
            id=uuid4(),
            name=data.name,
            price=data.price,
            quantity=data.quantity,
        )
        try:
            saved = self._product_repo.save(product)
        except RecordStoreError as exc:
            return self._storage_failure("create", exc)

        logger.info("Created product %s", saved.id)
        return Ok(saved)

    def update(self, product_id: UUID, data: ProductInput) -> Result[Product]:
        """Overwrite the fields of ``data`` that pass the merge rules.

        A blank name is ignored. Price and quantity are only applied when
        strictly positive (and price finite), so neither can be set to 0
        through an update.
        """
        try:
            current = self._product_repo.find_by_id(product_id)
        except RecordStoreError as exc:
            return self._storage_failure("update", exc)
        if current is None:
            logger.debug("Update of missing product %s", product_id)
            return Err(NotFound(product_id))

        if data.name is not None and data.name.strip():
            current.name = data.name
        if data.price is not None and math.isfinite(data.price) and data.price > 0:
            current.price = data.price
        if data.quantity is not None and data.quantity > 0:
            current.quantity = data.quantity

        try:
            self._product_repo.save(current)
        except RecordStoreError as exc:
            return self._storage_failure("update", exc)

        logger.info("Updated product %s", product_id)
        return Ok(current)

    def get(self, product_id: UUID) -> Result[Product]:
        try:
            product = self._product_repo.find_by_id(product_id)
        except RecordStoreError as exc:
            return self._storage_failure("get", exc)
        if product is None:
            logger.debug("Product %s not found", product_id)
            return Err(NotFound(product_id))
        return Ok(product)

    def delete(self, product_id: UUID) -> Result[None]:
        """Remove a product. Deleting an unknown id is not an error."""
        try:
            self._product_repo.delete_by_id(product_id)
        except RecordStoreError as exc:
            return self._storage_failure("delete", exc)

        logger.info("Deleted product %s", product_id)
        return Ok(None)

    def get_all(self) -> Result[list[Product]]:
        try:
            return Ok(self._product_repo.find_all())
        except RecordStoreError as exc:
            return self._storage_failure("list", exc)

    @staticmethod
    def _storage_failure(operation: str, exc: RecordStoreError) -> Err:
        logger.error("Record store failed during %s: %s", operation, exc)
        return Err(StorageError(str(exc)))
