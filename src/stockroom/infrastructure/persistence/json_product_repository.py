"""JSON-file-backed implementation of ProductRepository.

Meant for local development and demos where no Cassandra node is
available. The whole file is rewritten on every change.
"""

from __future__ import annotations

import json
from pathlib import Path
from uuid import UUID

from stockroom.domain.exceptions import RecordStoreError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> Product:
        products = self._load()
        products[product.id] = product
        self._persist(products)
        return product

    def find_by_id(self, product_id: UUID) -> Product | None:
        return self._load().get(product_id)

    def find_all(self) -> list[Product]:
        return list(self._load().values())

    def delete_by_id(self, product_id: UUID) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[UUID, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                UUID(item["id"]): Product(
                    id=UUID(item["id"]),
                    name=item["name"],
                    price=float(item["price"]),
                    quantity=int(item["quantity"]),
                )
                for item in raw
            }
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise RecordStoreError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist(self, products: dict[UUID, Product]) -> None:
        raw = [
            {
                "id": str(p.id),
                "name": p.name,
                "price": p.price,
                "quantity": p.quantity,
            }
            for p in products.values()
        ]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise RecordStoreError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
