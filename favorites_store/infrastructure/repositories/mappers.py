"""
Conversions between table rows and domain entities
"""

from favorites_store.domain.entities.customer_entity import Customer
from favorites_store.domain.entities.product_entity import Product
from favorites_store.domain.value_objects.entity_id import Persisted
from favorites_store.infrastructure.database.models import Customer as SQLCustomer
from favorites_store.infrastructure.database.models import Product as SQLProduct


def customer_to_domain(sql_customer: SQLCustomer) -> Customer:
    """Map SQLAlchemy Customer to domain Customer"""
    return Customer(
        username=sql_customer.username,
        first_name=sql_customer.first_name,
        last_name=sql_customer.last_name,
        active=sql_customer.active,
        identity=Persisted(sql_customer.id),
    )


def product_to_domain(sql_product: SQLProduct) -> Product:
    """Map SQLAlchemy Product to domain Product"""
    return Product(
        code=sql_product.code,
        name=sql_product.name,
        price=sql_product.price,
        category=sql_product.category,
        in_stock=sql_product.in_stock,
        identity=Persisted(sql_product.id),
    )


def copy_customer_fields(customer: Customer, sql_customer: SQLCustomer) -> None:
    sql_customer.username = customer.username
    sql_customer.first_name = customer.first_name
    sql_customer.last_name = customer.last_name
    sql_customer.active = customer.active


def copy_product_fields(product: Product, sql_product: SQLProduct) -> None:
    sql_product.code = product.code
    sql_product.name = product.name
    sql_product.price = product.price
    sql_product.category = product.category
    sql_product.in_stock = product.in_stock
