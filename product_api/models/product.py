"""Product model."""
from sqlalchemy import Boolean, Column, Date, Integer, Numeric, String

from product_api.database import Base


class Product(Base):
    """Product model for storing product information."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    quantity_available = Column(Integer, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    available = Column(Boolean, nullable=True)
    creation_date = Column(Date, nullable=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}')>"
