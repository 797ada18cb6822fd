import pytest
from rest_framework.exceptions import NotFound

from products.related import find_related_products, name_pattern, name_tokens

pytestmark = pytest.mark.django_db


def test_name_tokens_drop_single_characters():
    assert name_tokens("Classic  Black Leather Belt x") == ["Classic", "Black", "Leather", "Belt"]


def test_name_pattern_escapes_regex_metacharacters():
    assert name_pattern(["C++", "(Gold)"]) == r"C\+\+|\(Gold\)"
    assert name_pattern([]) is None


def test_matches_category_or_shared_name_token(product, make_product):
    same_category = make_product(name="Gold Bangle", category="accessories")
    shared_word = make_product(name="black oud mist", category="fragrance", subcategory="mist")
    make_product(name="Rose Diffuser", category="fragrance", subcategory="diffuser")

    related = find_related_products(product.pk)

    assert {p.pk for p in related} == {same_category.pk, shared_word.pk}


def test_excludes_the_product_itself(product):
    assert find_related_products(product.pk) == []


def test_is_capped(product, make_product, settings):
    settings.RELATED_PRODUCTS_LIMIT = 5
    for _ in range(8):
        make_product(category="accessories")

    assert len(find_related_products(product.pk)) == 5
    assert len(find_related_products(product.pk, limit=2)) == 2


def test_name_with_regex_characters_does_not_break_matching(make_product):
    source = make_product(name="Oud (Limited) 50ml+", category="fragrance")
    sibling = make_product(name="Travel Tote (Limited)", category="bags")
    make_product(name="Limited Tote", category="bags")

    assert [p.pk for p in find_related_products(source.pk)] == [sibling.pk]


def test_missing_product_raises_not_found():
    with pytest.raises(NotFound):
        find_related_products(424242)


def test_related_endpoint(api_client, product, make_product):
    other = make_product(name="Tan Leather Wallet", category="bags")

    response = api_client.get(f"/api/products/{product.pk}/related/")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["products"]] == [other.pk]


def test_related_endpoint_unknown_product(api_client):
    response = api_client.get("/api/products/424242/related/")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Product not found"}
