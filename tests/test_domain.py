"""
Domain Layer Tests - Identity, Entities and the favorites relationship
"""

from decimal import Decimal

import pytest

from favorites_store.domain.entities.customer_entity import Customer
from favorites_store.domain.entities.favorites import FavoriteProducts, ReadOnlyView
from favorites_store.domain.entities.product_entity import Product, ProductCategory
from favorites_store.domain.value_objects.entity_id import TRANSIENT, Persisted, Transient
from favorites_store.domain.exceptions import (
    EntityIdentityError,
    ReadOnlyCollectionError,
)


def make_customer(username="alice", entity_id=None):
    customer = Customer(username, "Alice", "Smith")
    if entity_id is not None:
        customer.mark_persisted(entity_id)
    return customer


def make_product(code="P-1", entity_id=None):
    product = Product(code, "Smartphone", Decimal("10.00"), ProductCategory.PHONES)
    if entity_id is not None:
        product.mark_persisted(entity_id)
    return product


class TestEntityId:
    """Test identity value objects"""

    def test_persisted_valid(self):
        pid = Persisted(42)
        assert pid.value == 42
        assert int(pid) == 42
        assert str(pid) == "42"
        assert pid == Persisted(42)

    def test_persisted_invalid(self):
        """Test invalid identifier values"""
        for value in [0, -1, None, "1", True]:
            with pytest.raises(ValueError):
                Persisted(value)

    def test_transient_has_no_value(self):
        assert TRANSIENT.value is None
        assert isinstance(TRANSIENT, Transient)
        assert str(TRANSIENT) == "transient"


class TestCustomer:
    """Test Customer entity"""

    def test_defaults(self):
        customer = Customer("alice", "Alice", "Smith")
        assert customer.active is True
        assert customer.id is None
        assert not customer.is_persisted
        assert customer.full_name == "Alice Smith"

    def test_model_does_not_prevalidate_username(self):
        for username in ["", None]:
            assert Customer(username, "Alice", "Smith").username == username

    def test_activation(self):
        customer = make_customer()
        customer.deactivate()
        assert customer.active is False
        customer.activate()
        assert customer.active is True

    def test_to_dict(self):
        customer = make_customer(entity_id=3)
        assert customer.to_dict() == {
            "id": 3,
            "username": "alice",
            "first_name": "Alice",
            "last_name": "Smith",
            "active": True,
        }


class TestProduct:
    """Test Product entity"""

    def test_defaults(self):
        product = Product("P-1", "Smartphone", None, ProductCategory.PHONES)
        assert product.in_stock is True
        assert product.price is None
        assert product.id is None

    def test_model_does_not_prevalidate_code(self):
        assert Product("", "Nameless", None, None).code == ""
        assert Product(None, "Nameless", None, None).code is None

    def test_price_is_coerced_to_decimal(self):
        product = Product("P-1", "Smartphone", 19.99, None)
        assert product.price == Decimal("19.99")

    def test_category_accepts_member_name(self):
        product = Product("P-1", "Smartphone", None, "PHONES")
        assert product.category is ProductCategory.PHONES

    def test_unknown_category_name_rejected(self):
        with pytest.raises(ValueError):
            Product("P-1", "Smartphone", None, "TOASTERS")

    def test_stock_changes(self):
        product = make_product()
        product.mark_out_of_stock()
        assert product.in_stock is False
        product.restock()
        assert product.in_stock is True

    def test_to_dict(self):
        product = make_product(entity_id=7)
        assert product.to_dict() == {
            "id": 7,
            "code": "P-1",
            "name": "Smartphone",
            "price": "10.00",
            "in_stock": True,
            "category": "PHONES",
        }


class TestEntityEquality:
    """Identity-based equality and type-based hashing"""

    def test_transient_entities_are_never_equal(self):
        first = make_customer()
        second = make_customer()
        assert first != second

    def test_transient_entity_equals_itself(self):
        customer = make_customer()
        assert customer == customer

    def test_persisted_entities_with_same_id_are_equal(self):
        assert make_customer("alice", 1) == make_customer("bob", 1)

    def test_persisted_entities_with_different_ids_differ(self):
        assert make_customer("alice", 1) != make_customer("alice", 2)

    def test_transient_never_equals_persisted(self):
        assert make_customer() != make_customer(entity_id=1)

    def test_different_entity_types_never_equal(self):
        assert make_customer(entity_id=1) != make_product(entity_id=1)

    def test_hash_is_stable_across_id_assignment(self):
        customer = make_customer()
        before = hash(customer)
        customer.mark_persisted(5)
        assert hash(customer) == before
        assert hash(customer) == hash(make_customer("other", 9))

    def test_set_membership_survives_persistence(self):
        customer = make_customer()
        members = {customer}
        customer.mark_persisted(5)
        assert customer in members
        assert make_customer("copy", 5) in members

    def test_mark_persisted_is_immutable(self):
        customer = make_customer(entity_id=1)
        customer.mark_persisted(1)
        assert customer.id == 1
        with pytest.raises(EntityIdentityError):
            customer.mark_persisted(2)
        assert customer.id == 1


class TestFavoriteProducts:
    """Test the bidirectional favorites relationship"""

    def test_add_updates_both_sides(self):
        favorites = FavoriteProducts()
        customer, product = make_customer(), make_product()

        favorites.add_favorite_product(customer, product)

        assert list(favorites.get_favorite_products(customer)) == [product]
        assert list(favorites.get_customers(product)) == [customer]
        assert favorites.is_favorite(customer, product)

    def test_add_then_remove_restores_prior_state(self):
        favorites = FavoriteProducts()
        customer, kept, added = make_customer(), make_product("P-1"), make_product("P-2")
        favorites.add_favorite_product(customer, kept)

        favorites.add_favorite_product(customer, added)
        favorites.remove_favorite_product(customer, added)

        assert list(favorites.get_favorite_products(customer)) == [kept]
        assert list(favorites.get_customers(added)) == []
        assert list(favorites.get_customers(kept)) == [customer]
        assert len(favorites) == 1

    def test_adding_twice_records_duplicate(self):
        favorites = FavoriteProducts()
        customer, product = make_customer(), make_product()

        favorites.add_favorite_product(customer, product)
        favorites.add_favorite_product(customer, product)

        assert len(favorites.get_favorite_products(customer)) == 2
        assert len(favorites.get_customers(product)) == 2

        favorites.remove_favorite_product(customer, product)
        assert list(favorites.get_favorite_products(customer)) == [product]
        assert list(favorites.get_customers(product)) == [customer]

    def test_remove_absent_pair_is_noop(self):
        favorites = FavoriteProducts()
        customer, product, other = make_customer(), make_product("P-1"), make_product("P-2")
        favorites.add_favorite_product(customer, product)

        favorites.remove_favorite_product(customer, other)
        favorites.remove_favorite_product(make_customer("stranger"), product)

        assert list(favorites.get_favorite_products(customer)) == [product]
        assert list(favorites.get_customers(product)) == [customer]

    def test_persisted_copies_resolve_to_same_links(self):
        favorites = FavoriteProducts()
        favorites.add_favorite_product(make_customer("alice", 1), make_product("P-1", 10))

        loaded_again = make_customer("alice", 1)
        assert favorites.is_favorite(loaded_again, make_product("P-1", 10))

        favorites.remove_favorite_product(loaded_again, make_product("P-1", 10))
        assert len(favorites) == 0

    def test_favorites_keep_insertion_order(self):
        favorites = FavoriteProducts()
        customer = make_customer()
        products = [make_product(f"P-{n}") for n in range(3)]
        for product in reversed(products):
            favorites.add_favorite_product(customer, product)

        assert list(favorites.get_favorite_products(customer)) == list(reversed(products))

    def test_view_is_live(self):
        favorites = FavoriteProducts()
        customer, product = make_customer(), make_product()
        view = favorites.get_favorite_products(customer)

        favorites.add_favorite_product(customer, product)

        assert len(view) == 1
        assert view[0] is product

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda view, item: view.append(item),
            lambda view, item: view.extend([item]),
            lambda view, item: view.insert(0, item),
            lambda view, item: view.remove(item),
            lambda view, item: view.pop(),
            lambda view, item: view.clear(),
            lambda view, item: view.sort(),
            lambda view, item: view.reverse(),
            lambda view, item: view.__setitem__(0, item),
            lambda view, item: view.__delitem__(0),
        ],
    )
    def test_view_rejects_mutation(self, mutate):
        favorites = FavoriteProducts()
        customer, product = make_customer(), make_product()
        favorites.add_favorite_product(customer, product)
        view = favorites.get_favorite_products(customer)

        with pytest.raises(ReadOnlyCollectionError):
            mutate(view, product)

        assert list(view) == [product]
        assert list(favorites.get_customers(product)) == [customer]

    def test_view_rejects_augmented_assignment(self):
        favorites = FavoriteProducts()
        view = favorites.get_favorite_products(make_customer())
        with pytest.raises(TypeError):
            view += [make_product()]

    def test_view_compares_to_sequences(self):
        favorites = FavoriteProducts()
        customer, product = make_customer(), make_product()
        favorites.add_favorite_product(customer, product)
        view = favorites.get_favorite_products(customer)

        assert isinstance(view, ReadOnlyView)
        assert view == [product]
        assert view == (product,)
        assert product in view
        assert view.index(product) == 0

    def test_replace_favorite_products(self):
        favorites = FavoriteProducts()
        customer = make_customer()
        old, new = make_product("P-1"), make_product("P-2")
        favorites.add_favorite_product(customer, old)

        favorites.replace_favorite_products(customer, [new])

        assert list(favorites.get_favorite_products(customer)) == [new]
        assert list(favorites.get_customers(old)) == []
        assert list(favorites.get_customers(new)) == [customer]

    def test_pairs(self):
        favorites = FavoriteProducts()
        alice, bob = make_customer("alice"), make_customer("bob")
        phone, tablet = make_product("P-1"), make_product("P-2")
        favorites.add_favorite_product(alice, phone)
        favorites.add_favorite_product(bob, tablet)
        favorites.add_favorite_product(alice, tablet)

        assert favorites.pairs() == [(alice, phone), (alice, tablet), (bob, tablet)]
        assert len(favorites) == 3
