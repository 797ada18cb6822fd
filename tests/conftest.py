import itertools
from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from products.models import Product
from users.models import User

_sequence = itertools.count(1)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make_user(role=User.Role.USER, password="s3cret-pass", **kwargs):
        n = next(_sequence)
        kwargs.setdefault("email", f"user{n}@example.com")
        kwargs.setdefault("username", f"user{n}")
        return User.objects.create_user(password=password, role=role, **kwargs)
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def admin_user(make_user):
    return make_user(role=User.Role.ADMIN)


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def make_product(db):
    def _make_product(**kwargs):
        n = next(_sequence)
        kwargs.setdefault("name", f"Product {n}")
        kwargs.setdefault("category", "accessories")
        kwargs.setdefault("subcategory", "")
        kwargs.setdefault("price", Decimal("25.00"))
        kwargs.setdefault("stock_quantity", 10)
        return Product.objects.create(**kwargs)
    return _make_product


@pytest.fixture
def product(make_product):
    return make_product(name="Classic Black Leather Belt", subcategory="belts", price=Decimal("45.00"))
