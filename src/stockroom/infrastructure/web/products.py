"""Product endpoints.

Each route decodes the request, calls the product service and maps its
result: ``InvalidArgument`` to 400, ``NotFound`` to 404 and
``StorageError`` to 500.
"""

from typing import Any, List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from stockroom.application.product_service import ProductService
from stockroom.application.result import Err, Ok, Result
from stockroom.domain.errors import InvalidArgument, NotFound, StorageError
from stockroom.infrastructure.web.schemas import ProductIn, ProductRead

router = APIRouter()


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def _unwrap(result: Result) -> Any:
    match result:
        case Ok(value):
            return value
        case Err(InvalidArgument() as error):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
        case Err(NotFound() as error):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
        case Err(StorageError() as error):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
            )
        case _:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Unexpected service result: {result!r}",
            )


@router.get("", response_model=List[ProductRead])
def list_products(service: ProductService = Depends(get_product_service)) -> List[ProductRead]:
    """Return every product, in no particular order."""
    products = _unwrap(service.get_all())
    return [ProductRead.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: UUID, service: ProductService = Depends(get_product_service)
) -> ProductRead:
    return ProductRead.model_validate(_unwrap(service.get(product_id)))


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductIn, service: ProductService = Depends(get_product_service)
) -> ProductRead:
    """Create a product; name, price and quantity are all required."""
    return ProductRead.model_validate(_unwrap(service.create(payload.to_input())))


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: UUID,
    payload: ProductIn,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Partially update a product.

    Omitted or blank fields keep their current value, and so do a price or
    quantity of 0.
    """
    return ProductRead.model_validate(
        _unwrap(service.update(product_id, payload.to_input()))
    )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: UUID, service: ProductService = Depends(get_product_service)
) -> None:
    _unwrap(service.delete(product_id))
    return None
