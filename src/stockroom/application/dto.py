"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing how products are stored.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductInput:
    """Input for both create and update.

    Every field is optional here; ``create`` requires all three to pass
    validation while ``update`` treats each as an optional override.
    """

    name: str | None = None
    price: float | None = None
    quantity: int | None = None
