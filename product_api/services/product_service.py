"""Product use cases on top of the repository."""
import logging
from typing import List

from product_api.exceptions import NotFoundError
from product_api.models.product import Product
from product_api.repositories.product_repository import ProductRepository
from product_api.schemas.product import ProductRequest

logger = logging.getLogger(__name__)


class ProductService:
    """
    Existence checks and field merging for products.

    Keeps no state besides the repository, so one instance can serve any
    number of calls.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def find_all_products(self) -> List[Product]:
        """Return every stored product."""
        return self.repository.find_all()

    def find_product_by_id(self, product_id: int) -> Product:
        """
        Return the product with the given id.

        Raises:
            NotFoundError: if no product has that id
        """
        product = self.repository.find_by_id(product_id)
        if product is None:
            logger.warning(f"Product {product_id} not found")
            raise NotFoundError(f"No existe el producto con el id: {product_id}")
        return product

    def save_product(self, product: ProductRequest) -> Product:
        """
        Persist a product as received.

        No checks are made. A body carrying an ``id`` overwrites (or creates)
        the row with that id.
        """
        saved = self.repository.save(
            Product(
                id=product.id,
                name=product.name,
                quantity_available=product.quantity_available,
                price=product.price,
                available=product.available,
                creation_date=product.creation_date,
            )
        )
        logger.info(f"Product {saved.id} saved")
        return saved

    def update_product(self, product_id: int, product: ProductRequest) -> Product:
        """
        Replace every field of an existing product with the incoming values.

        Null values are written as well. ``product.id`` is ignored; the
        stored record keeps ``product_id``.

        Raises:
            NotFoundError: if no product has that id
        """
        product_db = self.repository.find_by_id(product_id)
        if product_db is None:
            logger.warning(f"Cannot update product {product_id}: not found")
            raise NotFoundError(
                f"No existe el producto para actualizar con el id: {product_id}"
            )

        product_db.name = product.name
        product_db.quantity_available = product.quantity_available
        product_db.price = product.price
        product_db.available = product.available
        product_db.creation_date = product.creation_date

        updated = self.repository.save(product_db)
        logger.info(f"Product {product_id} updated")
        return updated

    def delete_product_by_id(self, product_id: int) -> None:
        """
        Delete an existing product.

        Raises:
            NotFoundError: if no product has that id
        """
        if self.repository.find_by_id(product_id) is None:
            logger.warning(f"Cannot delete product {product_id}: not found")
            raise NotFoundError(
                f"No existe el producto para eliminar con el id: {product_id}"
            )

        self.repository.delete_by_id(product_id)
        logger.info(f"Product {product_id} deleted")
