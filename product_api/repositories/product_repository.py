"""Persistence of products through a SQLAlchemy session."""
from typing import List, Optional

from sqlalchemy.orm import Session

from product_api.models.product import Product


class ProductRepository:
    """CRUD access to the ``products`` table.

    Holds nothing but the request's session; existence checks are the
    caller's job.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Product]:
        return self.db.query(Product).all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def save(self, product: Product) -> Product:
        """Insert when ``id`` is unset, otherwise overwrite the row with that id."""
        if product.id is None:
            self.db.add(product)
        else:
            product = self.db.merge(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_by_id(self, product_id: int) -> None:
        self.db.query(Product).filter(Product.id == product_id).delete()
        self.db.commit()
