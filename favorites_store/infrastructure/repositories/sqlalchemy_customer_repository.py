"""
SQLAlchemy implementation of CustomerRepository
"""

import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func, insert

from favorites_store.domain.entities.customer_entity import Customer
from favorites_store.domain.entities.favorites import FavoriteProducts
from favorites_store.domain.entities.product_entity import Product
from favorites_store.domain.repositories.customer_repository import CustomerRepository
from favorites_store.infrastructure.database.models import Customer as SQLCustomer
from favorites_store.infrastructure.database.models import Product as SQLProduct
from favorites_store.infrastructure.database.models import customer_favorite_product
from favorites_store.infrastructure.repositories.mappers import (
    copy_customer_fields,
    copy_product_fields,
    customer_to_domain,
    product_to_domain,
)
from favorites_store.infrastructure.repositories.session_handler import (
    SessionFactory,
    managed_session,
)
from favorites_store.infrastructure.repositories.sqlalchemy_product_repository import (
    select_favorite_products,
)
from favorites_store.infrastructure.utilities.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class SQLAlchemyCustomerRepository(CustomerRepository):
    """SQLAlchemy implementation of customer repository"""

    def __init__(self, session_factory: Optional[SessionFactory] = None):
        self._session_factory = session_factory
        self._logger = logging.getLogger(self.__class__.__name__)

    def save(self, customer: Customer) -> Customer:
        """Save customer to database"""
        with managed_session(self._session_factory) as session:
            if not customer.is_persisted:
                sql_customer = SQLCustomer()
                copy_customer_fields(customer, sql_customer)
                session.add(sql_customer)
                session.flush()
                new_id = sql_customer.id
            else:
                sql_customer = session.get(SQLCustomer, customer.id)
                if sql_customer is None:
                    raise EntityNotFoundError("Customer", customer.id)
                copy_customer_fields(customer, sql_customer)
                new_id = None

        # The id is only recorded once the insert has been committed
        if new_id is not None:
            customer.mark_persisted(new_id)
            self._logger.info("Created customer %s with id %s", customer.username, new_id)
        return customer

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """Find customer by ID"""
        with managed_session(self._session_factory) as session:
            sql_customer = session.get(SQLCustomer, customer_id)
            if not sql_customer:
                return None
            return customer_to_domain(sql_customer)

    def find_by_username(self, username: str) -> Optional[Customer]:
        """Find customer by username"""
        with managed_session(self._session_factory) as session:
            sql_customer = (
                session.query(SQLCustomer)
                .filter(SQLCustomer.username == username)
                .first()
            )
            if not sql_customer:
                return None
            return customer_to_domain(sql_customer)

    def find_all(self) -> List[Customer]:
        """Find all customers"""
        with managed_session(self._session_factory) as session:
            sql_customers = session.query(SQLCustomer).order_by(SQLCustomer.id).all()
            return [customer_to_domain(c) for c in sql_customers]

    def find_all_active(self) -> List[Customer]:
        """Find all active customers in creation order"""
        with managed_session(self._session_factory) as session:
            sql_customers = (
                session.query(SQLCustomer)
                .filter(SQLCustomer.active.is_(True))
                .order_by(SQLCustomer.id)
                .all()
            )
            return [customer_to_domain(c) for c in sql_customers]

    def delete(self, customer_id: int) -> bool:
        """Delete customer by ID"""
        with managed_session(self._session_factory) as session:
            sql_customer = session.get(SQLCustomer, customer_id)
            if not sql_customer:
                return False

            session.execute(
                delete(customer_favorite_product).where(
                    customer_favorite_product.c.customer_id == customer_id
                )
            )
            session.delete(sql_customer)
            return True

    def count(self) -> int:
        with managed_session(self._session_factory) as session:
            return session.query(func.count(SQLCustomer.id)).scalar()

    def load_favorites(
        self, customer: Customer, favorites: FavoriteProducts
    ) -> FavoriteProducts:
        """
        Fetch the customer's favorite products, ascending by product ID

        A transient customer has nothing stored; the component is returned
        untouched.
        """
        if not customer.is_persisted:
            return favorites

        with managed_session(self._session_factory) as session:
            sql_products = (
                session.execute(select_favorite_products(customer.id)).scalars().all()
            )
            products = [product_to_domain(p) for p in sql_products]

        favorites.replace_favorite_products(customer, products)
        return favorites

    def save_favorites(self, customer: Customer, favorites: FavoriteProducts) -> None:
        """
        Replace the customer's stored favorite links

        Transient products among the favorites are inserted in the same
        transaction and receive their ids once it commits.
        """
        if not customer.is_persisted:
            raise ValueError("Customer must be saved before its favorites")

        products = list(favorites.get_favorite_products(customer))
        created: Dict[int, Tuple[Product, int]] = {}

        with managed_session(self._session_factory) as session:
            session.execute(
                delete(customer_favorite_product).where(
                    customer_favorite_product.c.customer_id == customer.id
                )
            )

            product_ids = []
            for product in products:
                if product.is_persisted:
                    product_ids.append(product.id)
                    continue
                if id(product) not in created:
                    sql_product = SQLProduct()
                    copy_product_fields(product, sql_product)
                    session.add(sql_product)
                    session.flush()
                    created[id(product)] = (product, sql_product.id)
                product_ids.append(created[id(product)][1])

            if product_ids:
                session.execute(
                    insert(customer_favorite_product),
                    [
                        {"customer_id": customer.id, "product_id": product_id}
                        for product_id in product_ids
                    ],
                )

        for product, product_id in created.values():
            product.mark_persisted(product_id)

        self._logger.info(
            "Saved %d favorite links for customer %s", len(products), customer.id
        )
