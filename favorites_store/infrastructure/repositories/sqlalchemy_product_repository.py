"""
SQLAlchemy implementation of ProductRepository
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import Select, String, delete, func, literal, or_, select, type_coerce

from favorites_store.domain.entities.product_entity import Product, ProductCategory
from favorites_store.domain.repositories.product_repository import ProductRepository
from favorites_store.infrastructure.database.models import Product as SQLProduct
from favorites_store.infrastructure.database.models import customer_favorite_product
from favorites_store.infrastructure.repositories.mappers import (
    copy_product_fields,
    product_to_domain,
)
from favorites_store.infrastructure.repositories.session_handler import (
    SessionFactory,
    managed_session,
)
from favorites_store.infrastructure.utilities.constants import SearchSettings
from favorites_store.infrastructure.utilities.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def escape_like(term: str, escape_char: str = SearchSettings.LIKE_ESCAPE_CHAR) -> str:
    """Make LIKE wildcards in a search term match literally"""
    return (
        term.replace(escape_char, escape_char * 2)
        .replace("%", f"{escape_char}%")
        .replace("_", f"{escape_char}_")
    )


def select_favorite_products(customer_id: int) -> Select:
    """Products linked to the customer through the favorites table, by product ID"""
    return (
        select(SQLProduct)
        .join(
            customer_favorite_product,
            customer_favorite_product.c.product_id == SQLProduct.id,
        )
        .where(customer_favorite_product.c.customer_id == customer_id)
        .order_by(SQLProduct.id)
    )


class SQLAlchemyProductRepository(ProductRepository):
    """SQLAlchemy implementation of product repository"""

    def __init__(self, session_factory: Optional[SessionFactory] = None):
        self._session_factory = session_factory
        self._logger = logging.getLogger(self.__class__.__name__)

    def save(self, product: Product) -> Product:
        """Insert a transient product or update a persisted one"""
        with managed_session(self._session_factory) as session:
            if not product.is_persisted:
                sql_product = SQLProduct()
                copy_product_fields(product, sql_product)
                session.add(sql_product)
                session.flush()
                new_id = sql_product.id
            else:
                sql_product = session.get(SQLProduct, product.id)
                if sql_product is None:
                    raise EntityNotFoundError("Product", product.id)
                copy_product_fields(product, sql_product)
                new_id = None

        if new_id is not None:
            product.mark_persisted(new_id)
            self._logger.info("Created product %s with id %s", product.code, new_id)
        return product

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Find product by ID"""
        with managed_session(self._session_factory) as session:
            sql_product = session.get(SQLProduct, product_id)
            return product_to_domain(sql_product) if sql_product else None

    def find_by_code(self, code: str) -> Optional[Product]:
        """Find product by code"""
        with managed_session(self._session_factory) as session:
            sql_product = (
                session.query(SQLProduct).filter(SQLProduct.code == code).first()
            )
            return product_to_domain(sql_product) if sql_product else None

    def find_all(self) -> List[Product]:
        with managed_session(self._session_factory) as session:
            sql_products = session.query(SQLProduct).order_by(SQLProduct.id).all()
            return [product_to_domain(p) for p in sql_products]

    def find_in_stock(self) -> List[Product]:
        """Find products that are in stock"""
        with managed_session(self._session_factory) as session:
            sql_products = (
                session.query(SQLProduct)
                .filter(SQLProduct.in_stock.is_(True))
                .order_by(SQLProduct.id)
                .all()
            )
            return [product_to_domain(p) for p in sql_products]

    def find_by_category(self, category: ProductCategory) -> List[Product]:
        """Find products by category"""
        with managed_session(self._session_factory) as session:
            sql_products = (
                session.query(SQLProduct)
                .filter(SQLProduct.category == category)
                .order_by(SQLProduct.id)
                .all()
            )
            return [product_to_domain(p) for p in sql_products]

    def find_by_global_search(self, search: str) -> List[Product]:
        """Case-insensitive substring search over code, name and category name"""
        escape_char = SearchSettings.LIKE_ESCAPE_CHAR
        # Term and columns go through the same SQL UPPER so both fold alike
        pattern = func.upper(literal(f"%{escape_like(search, escape_char)}%", String))
        with managed_session(self._session_factory) as session:
            sql_products = (
                session.query(SQLProduct)
                .filter(
                    or_(
                        func.upper(SQLProduct.code).like(pattern, escape=escape_char),
                        func.upper(SQLProduct.name).like(pattern, escape=escape_char),
                        func.upper(type_coerce(SQLProduct.category, String)).like(
                            pattern, escape=escape_char
                        ),
                    )
                )
                .order_by(SQLProduct.id)
                .all()
            )
            return [product_to_domain(p) for p in sql_products]

    def find_favorite_by_customer_id(self, customer_id: int) -> List[Product]:
        """Products favorited by the customer, ascending by product ID"""
        with managed_session(self._session_factory) as session:
            # duplicate links yield duplicate rows
            sql_products = (
                session.execute(select_favorite_products(customer_id)).scalars().all()
            )
            return [product_to_domain(p) for p in sql_products]

    def set_out_of_stock_by_ids(self, product_ids: Iterable[int]) -> int:
        """Mark the given products out of stock with one UPDATE statement"""
        ids = list(product_ids)
        if not ids:
            return 0
        with managed_session(self._session_factory) as session:
            updated = (
                session.query(SQLProduct)
                .filter(SQLProduct.id.in_(ids))
                .update({SQLProduct.in_stock: False}, synchronize_session=False)
            )
        self._logger.info("Marked %d of %d products out of stock", updated, len(ids))
        return updated

    def delete(self, product_id: int) -> bool:
        """Delete product and the favorite links pointing at it"""
        with managed_session(self._session_factory) as session:
            sql_product = session.get(SQLProduct, product_id)
            if not sql_product:
                return False

            session.execute(
                delete(customer_favorite_product).where(
                    customer_favorite_product.c.product_id == product_id
                )
            )
            session.delete(sql_product)
            return True

    def count(self) -> int:
        with managed_session(self._session_factory) as session:
            return session.query(func.count(SQLProduct.id)).scalar()
