from decimal import Decimal

import pytest

pytestmark = pytest.mark.django_db

LIST_URL = "/api/products/"


def test_defaults(api_client, make_product):
    for _ in range(12):
        make_product()

    body = api_client.get(LIST_URL).json()

    assert body["success"] is True
    assert len(body["products"]) == 10
    assert body["totalProducts"] == 12
    assert body["totalPages"] == 2
    assert body["currentPage"] == 1


def test_last_page_holds_the_remainder(api_client, make_product):
    for _ in range(23):
        make_product()

    body = api_client.get(LIST_URL, {"page": 3, "limit": 10}).json()

    assert body["totalProducts"] == 23
    assert body["totalPages"] == 3
    assert body["currentPage"] == 3
    assert len(body["products"]) == 3


def test_pages_do_not_overlap(api_client, make_product):
    for _ in range(15):
        make_product(price=Decimal("10"))

    seen = []
    for page in (1, 2):
        body = api_client.get(LIST_URL, {"page": page, "limit": 10, "sort": "price"}).json()
        seen.extend(p["id"] for p in body["products"])

    assert len(seen) == 15
    assert len(set(seen)) == 15


def test_limit_is_capped(api_client, make_product, settings):
    settings.PRODUCTS_MAX_PAGE_SIZE = 2
    for _ in range(3):
        make_product()

    body = api_client.get(LIST_URL, {"limit": 5000}).json()

    assert len(body["products"]) == 2
    assert body["totalPages"] == 2


@pytest.mark.parametrize("name, value", [
    ("page", "0"),
    ("page", "-2"),
    ("page", "two"),
    ("limit", "0"),
    ("limit", "1.5"),
])
def test_bad_paging_values_are_rejected(api_client, name, value):
    response = api_client.get(LIST_URL, {name: value})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert name in body["error"]


def test_page_past_the_end_is_empty(api_client, make_product):
    make_product()

    body = api_client.get(LIST_URL, {"page": 5}).json()

    assert body["products"] == []
    assert body["totalProducts"] == 1
    assert body["currentPage"] == 5


def test_huge_page_number_is_an_empty_page(api_client, make_product):
    make_product()

    response = api_client.get(LIST_URL, {"page": str(10 ** 30)})

    assert response.status_code == 200
    body = response.json()
    assert body["products"] == []
    assert body["totalProducts"] == 1


def test_unknown_sort_is_a_bad_request(api_client):
    response = api_client.get(LIST_URL, {"sort": "secret"})

    assert response.status_code == 400
    assert "sort" in response.json()["error"]


def test_unknown_category_is_a_bad_request(api_client):
    response = api_client.get(LIST_URL, {"category": "furniture"})

    assert response.status_code == 400
    assert "category" in response.json()["error"]


def test_filters_and_paging_combine(api_client, make_product):
    for _ in range(4):
        make_product(category="fragrance", subcategory="testers", price=Decimal("80"))
    make_product(category="accessories", price=Decimal("80"))

    body = api_client.get(LIST_URL, {"category": "fragrance", "minPrice": "50", "limit": 3, "page": 2}).json()

    assert body["totalProducts"] == 4
    assert body["totalPages"] == 2
    assert len(body["products"]) == 1


def test_empty_catalog(api_client):
    body = api_client.get(LIST_URL).json()

    assert body["products"] == []
    assert body["totalProducts"] == 0
    assert body["totalPages"] == 0
