"""Application service: seed the store with synthetic products."""

from __future__ import annotations

import logging
import random

from stockroom.application.dto import ProductInput
from stockroom.application.product_service import ProductService
from stockroom.application.result import Err, Ok, Result
from stockroom.domain.model.product import Product

logger = logging.getLogger(__name__)

_NAMES = (
    "Widget", "Gadget", "Sprocket", "Bracket", "Fastener",
    "Gasket", "Bearing", "Spindle", "Coupler", "Valve",
)


def random_product_input(rng: random.Random) -> ProductInput:
    """Build a valid input with a random name, price and quantity."""
    return ProductInput(
        name=f"{rng.choice(_NAMES)} {rng.randint(100, 999)}",
        price=round(rng.uniform(1, 500), 2),
        quantity=rng.randint(0, 100),
    )


def seed_products(
    service: ProductService, count: int, rng: random.Random | None = None
) -> Result[list[Product]]:
    """Create ``count`` products through the service.

    Stops at the first failed create and returns its error.
    """
    rng = rng or random.Random()
    created: list[Product] = []
    for _ in range(count):
        result = service.create(random_product_input(rng))
        if isinstance(result, Err):
            return result
        created.append(result.value)

    logger.info("Seeded %d products", len(created))
    return Ok(created)
