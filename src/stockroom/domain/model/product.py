"""Product entity.

The only record the service manages. Ids are assigned by the product
service before construction; the entity itself never generates one.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Product:
    """A product held in the record store.

    Kept as a mutable dataclass because partial updates overwrite fields in
    place. ``id`` must not change once the product has been saved.
    """

    id: UUID
    name: str
    price: float
    quantity: int
