"""Pydantic schemas for the product endpoints.

Request fields are all optional: which ones are required depends on the
operation, and that rule belongs to the product service, not the schema.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from stockroom.application.dto import ProductInput


class ProductIn(BaseModel):
    """Body of ``POST /products`` and ``PUT /products/{id}``."""

    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None

    def to_input(self) -> ProductInput:
        return ProductInput(name=self.name, price=self.price, quantity=self.quantity)


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price: float
    quantity: int


class HealthResponse(BaseModel):
    status: str
    service: str
