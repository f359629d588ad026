# pylint: disable=too-few-public-methods
"""
SQLAlchemy table models for the favorites store

The favorites relationship is a plain join table without a primary key, so a
customer may hold the same product more than once.
"""

from decimal import Decimal
from typing import Optional, Type

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, Numeric, String, Table
from sqlalchemy.orm import DeclarativeMeta, Mapped, declarative_base, mapped_column

from favorites_store.domain.entities.product_entity import ProductCategory
from favorites_store.infrastructure.utilities.constants import SchemaSettings

_Base = declarative_base()

# Type alias for mypy
Base: Type[DeclarativeMeta] = _Base


class Customer(Base):
    """Customer table"""
    __tablename__ = SchemaSettings.CUSTOMER_TABLE

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(SchemaSettings.USERNAME_LENGTH), unique=True, nullable=False
    )
    first_name: Mapped[Optional[str]] = mapped_column(
        String(SchemaSettings.NAME_LENGTH), nullable=True
    )
    last_name: Mapped[Optional[str]] = mapped_column(
        String(SchemaSettings.NAME_LENGTH), nullable=True
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, username='{self.username}')>"


class Product(Base):
    """Product table"""
    __tablename__ = SchemaSettings.PRODUCT_TABLE

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(
        String(SchemaSettings.CODE_LENGTH), unique=True, nullable=False
    )
    name: Mapped[Optional[str]] = mapped_column(
        String(SchemaSettings.NAME_LENGTH), nullable=True
    )
    price: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(SchemaSettings.PRICE_PRECISION, SchemaSettings.PRICE_SCALE, asdecimal=True),
        nullable=True,
    )
    in_stock: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    # Stored by member name so reordering the enum never rewrites data
    category: Mapped[Optional[ProductCategory]] = mapped_column(
        Enum(
            ProductCategory,
            native_enum=False,
            length=SchemaSettings.CATEGORY_LENGTH,
            validate_strings=True,
        ),
        index=True,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, code='{self.code}')>"


customer_favorite_product = Table(
    SchemaSettings.FAVORITES_TABLE,
    Base.metadata,
    Column(
        "customer_id",
        Integer,
        ForeignKey(f"{SchemaSettings.CUSTOMER_TABLE}.id"),
        nullable=False,
        index=True,
    ),
    Column(
        "product_id",
        Integer,
        ForeignKey(f"{SchemaSettings.PRODUCT_TABLE}.id"),
        nullable=False,
        index=True,
    ),
)
