from decimal import Decimal

import pytest

from products.models import Product
from reviews.models import Review
from reviews.services import ReviewService

pytestmark = pytest.mark.django_db

LIST_URL = "/api/products/"


def _payload(**overrides):
    payload = {
        "name": "  Classic Black Leather Belt ",
        "category": "Accessories",
        "subcategory": "Belts",
        "description": "Full-grain leather belt.",
        "price": "45.00",
        "image": "belt-black.jpg",
        "gallery": ["belt-side.jpg", "https://cdn.example.com/belt-top.jpg"],
        "stock_status": "in-stock",
        "stock_quantity": 12,
    }
    payload.update(overrides)
    return payload


def test_admin_creates_product(admin_client, admin_user):
    response = admin_client.post(LIST_URL, _payload(), format="json")

    assert response.status_code == 201
    product = response.json()["product"]
    assert product["name"] == "Classic Black Leather Belt"
    assert product["category"] == "accessories"
    assert product["subcategory"] == "belts"
    assert product["image"] == "/images/belt-black.jpg"
    assert product["gallery"] == ["/images/belt-side.jpg", "https://cdn.example.com/belt-top.jpg"]
    assert product["rating"] == 0
    assert product["review_count"] == 0
    assert product["author"]["id"] == admin_user.pk


def test_client_cannot_set_rating(admin_client):
    response = admin_client.post(LIST_URL, _payload(rating=5, review_count=99), format="json")

    assert response.status_code == 201
    product = Product.objects.get(pk=response.json()["product"]["id"])
    assert product.rating == 0
    assert product.review_count == 0


def test_anonymous_cannot_create(api_client):
    response = api_client.post(LIST_URL, _payload(), format="json")

    assert response.status_code == 401
    assert not Product.objects.exists()


def test_non_admin_cannot_create(auth_client):
    response = auth_client.post(LIST_URL, _payload(), format="json")

    assert response.status_code == 403
    assert response.json() == {
        "success": False,
        "message": "You are not authorized to access this route",
    }


def test_subcategory_of_another_category_is_rejected(admin_client):
    response = admin_client.post(
        LIST_URL, _payload(category="fragrance", subcategory="belts"), format="json"
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "subcategory" in body["error"]
    assert not Product.objects.exists()


def test_unknown_category_is_rejected(admin_client):
    response = admin_client.post(LIST_URL, _payload(category="furniture", subcategory=""), format="json")

    assert response.status_code == 400
    assert "category" in response.json()["error"]


def test_inverted_delivery_window_is_rejected(admin_client):
    response = admin_client.post(
        LIST_URL, _payload(delivery_days_min=7, delivery_days_max=3), format="json"
    )

    assert response.status_code == 400
    assert "delivery_days_min" in response.json()["error"]


def test_partial_update_revalidates_against_stored_category(admin_client, product):
    url = f"{LIST_URL}{product.pk}/"

    response = admin_client.patch(url, {"subcategory": "mist"}, format="json")
    assert response.status_code == 400
    product.refresh_from_db()
    assert product.subcategory == "belts"

    response = admin_client.patch(url, {"subcategory": "Sunglasses"}, format="json")
    assert response.status_code == 200
    assert response.json()["product"]["subcategory"] == "sunglasses"


def test_partial_update_of_category_checks_stored_subcategory(admin_client, product):
    response = admin_client.patch(f"{LIST_URL}{product.pk}/", {"category": "fragrance"}, format="json")

    assert response.status_code == 400


def test_update_keeps_derived_fields(admin_client, product, user):
    ReviewService.submit(user, product.pk, 4, "Nice")

    response = admin_client.patch(
        f"{LIST_URL}{product.pk}/", {"price": "50.00", "rating": 1}, format="json"
    )

    assert response.status_code == 200
    product.refresh_from_db()
    assert product.price == Decimal("50.00")
    assert product.rating == pytest.approx(4.0)
    assert product.review_count == 1


def test_retrieve_includes_active_reviews(api_client, product, user):
    ReviewService.submit(user, product.pk, 5, "Lovely")

    response = api_client.get(f"{LIST_URL}{product.pk}/")

    assert response.status_code == 200
    body = response.json()
    assert body["product"]["id"] == product.pk
    assert [r["comment"] for r in body["reviews"]] == ["Lovely"]


def test_retrieve_missing_product(api_client):
    response = api_client.get(f"{LIST_URL}999999/")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_delete_cascades_reviews(admin_client, product, make_user):
    ReviewService.submit(make_user(), product.pk, 5, "Great")
    ReviewService.submit(make_user(), product.pk, 3, "Ok")

    response = admin_client.delete(f"{LIST_URL}{product.pk}/")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert not Product.objects.filter(pk=product.pk).exists()
    assert not Review.objects.filter(product_id=product.pk).exists()


def test_non_admin_cannot_delete(auth_client, product):
    assert auth_client.delete(f"{LIST_URL}{product.pk}/").status_code == 403
    assert Product.objects.filter(pk=product.pk).exists()


def test_search_is_bounded(api_client, make_product, settings):
    settings.PRODUCTS_SEARCH_LIMIT = 3
    for n in range(5):
        make_product(name=f"Silk Scarf {n}")
    make_product(name="Pearl Necklace")

    body = api_client.get(f"{LIST_URL}search/", {"q": "scarf"}).json()

    assert len(body["products"]) == 3
    assert all("Scarf" in p["name"] for p in body["products"])


def test_search_without_query_returns_nothing(api_client, product):
    assert api_client.get(f"{LIST_URL}search/").json()["products"] == []


def test_categories_endpoint(api_client):
    body = api_client.get(f"{LIST_URL}categories/").json()

    assert "belts" in body["categories"]["accessories"]
    assert body["categories"]["bags"] == []
