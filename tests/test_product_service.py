"""Tests for the product service and repository."""
from datetime import date
from decimal import Decimal

import pytest

from product_api.exceptions import NotFoundError
from product_api.repositories.product_repository import ProductRepository
from product_api.schemas.product import ProductRequest
from product_api.services.product_service import ProductService


@pytest.fixture
def service(db_session):
    return ProductService(ProductRepository(db_session))


def laptop(**overrides):
    fields = {
        "name": "Laptop",
        "quantity_available": 5,
        "price": Decimal("999.99"),
        "available": True,
        "creation_date": date(2024, 1, 10),
    }
    fields.update(overrides)
    return ProductRequest(**fields)


def test_find_all_products_empty(service):
    assert service.find_all_products() == []


def test_save_assigns_id(service):
    """Test saving without an id lets the store assign one."""
    saved = service.save_product(laptop())
    assert saved.id is not None

    found = service.find_product_by_id(saved.id)
    assert found.name == "Laptop"
    assert found.quantity_available == 5
    assert found.price == Decimal("999.99")
    assert found.available is True
    assert found.creation_date == date(2024, 1, 10)


def test_save_with_id_overwrites(service):
    """Test a save carrying an existing id replaces that row."""
    saved = service.save_product(laptop())

    service.save_product(laptop(id=saved.id, name="Otra"))

    products = service.find_all_products()
    assert len(products) == 1
    assert products[0].name == "Otra"


@pytest.mark.parametrize(
    "call, message",
    [
        (
            lambda s: s.find_product_by_id(7),
            "No existe el producto con el id: 7",
        ),
        (
            lambda s: s.update_product(7, laptop()),
            "No existe el producto para actualizar con el id: 7",
        ),
        (
            lambda s: s.delete_product_by_id(7),
            "No existe el producto para eliminar con el id: 7",
        ),
    ],
)
def test_missing_product_raises_not_found(service, call, message):
    """Test every lookup-dependent operation reports the missing id."""
    with pytest.raises(NotFoundError) as exc_info:
        call(service)

    assert exc_info.value.message == message
    assert exc_info.value.status_code == 404


def test_update_replaces_fields_and_keeps_id(service):
    """Test the path id wins over the body id and every field is replaced."""
    saved = service.save_product(laptop())

    updated = service.update_product(
        saved.id,
        laptop(
            id=saved.id + 100,
            name="Laptop Pro",
            quantity_available=None,
            price=Decimal("1099.99"),
            available=False,
            creation_date=None,
        ),
    )

    assert updated.id == saved.id
    assert updated.name == "Laptop Pro"
    assert updated.quantity_available is None
    assert updated.price == Decimal("1099.99")
    assert updated.available is False
    assert updated.creation_date is None
    assert len(service.find_all_products()) == 1


def test_delete_then_find_raises(service):
    """Test a deleted product can no longer be found."""
    saved = service.save_product(laptop())

    service.delete_product_by_id(saved.id)

    with pytest.raises(NotFoundError):
        service.find_product_by_id(saved.id)


def test_repository_find_by_id_returns_none(db_session):
    assert ProductRepository(db_session).find_by_id(1) is None


def test_repository_delete_missing_is_noop(db_session):
    ProductRepository(db_session).delete_by_id(1)
