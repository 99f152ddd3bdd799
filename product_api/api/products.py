"""Product CRUD API endpoints."""
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from product_api.database import get_db
from product_api.repositories.product_repository import ProductRepository
from product_api.schemas.product import ProductRequest, ProductResponse
from product_api.schemas.response import ResponseMessage
from product_api.services.product_service import ProductService

PRODUCTS_PATH = "/api/v1/products"

NOT_FOUND_RESPONSE = {
    404: {
        "model": ResponseMessage,
        "description": "El producto con el id dado no fue encontrado",
    }
}

router = APIRouter(prefix=PRODUCTS_PATH)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency wiring the service to the request's session."""
    return ProductService(ProductRepository(db))


@router.get("", response_model=List[ProductResponse], tags=["reading"])
def get_all_products(service: ProductService = Depends(get_product_service)):
    """List every product."""
    return service.find_all_products()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    tags=["reading"],
    summary="Recupera un producto por su id",
    description=(
        "Obtiene un objeto de Product especificando su id. "
        "La respuesta es un objeto Product con id, name, quantityAvailable, "
        "price, available y creationDate."
    ),
    responses=NOT_FOUND_RESPONSE,
)
def get_product(
    product_id: int, service: ProductService = Depends(get_product_service)
):
    return service.find_product_by_id(product_id)


@router.post(
    "", response_model=ProductResponse, status_code=201, tags=["modification"]
)
def save_product(
    product: ProductRequest,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product.

    The store assigns the id; the new resource's path is returned in the
    ``Location`` header.
    """
    product_db = service.save_product(product)
    response.headers["Location"] = f"{PRODUCTS_PATH}/{product_db.id}"
    return product_db


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    tags=["modification"],
    responses=NOT_FOUND_RESPONSE,
)
def update_product(
    product_id: int,
    product: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    """
    Update a product.

    Every field is replaced, including the ones missing from the body.
    """
    return service.update_product(product_id, product)


@router.delete(
    "/{product_id}",
    status_code=204,
    tags=["modification"],
    responses=NOT_FOUND_RESPONSE,
)
def delete_product(
    product_id: int, service: ProductService = Depends(get_product_service)
):
    """Delete a single product."""
    service.delete_product_by_id(product_id)
    return None
