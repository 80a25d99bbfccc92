"""Result values returned by the product service.

A service call either succeeds with ``Ok(value)`` or fails with
``Err(error)``. Both are dataclasses, so callers can ``match`` on them::

    match service.get(product_id):
        case Ok(product):
            ...
        case Err(NotFound()):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from stockroom.domain.errors import ProductError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: ProductError


Result = Union[Ok[T], Err]
