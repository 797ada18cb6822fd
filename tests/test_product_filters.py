from decimal import Decimal

import pytest
from rest_framework.exceptions import ValidationError

from products.filters import ProductFilter, parse_price
from products.models import Product
from products.taxonomy import CategoryTaxonomy

pytestmark = pytest.mark.django_db


@pytest.fixture
def taxonomy():
    return CategoryTaxonomy({
        "accessories": ["belts", "sunglasses"],
        "fragrance": ["testers"],
    })


@pytest.fixture
def run_filter(taxonomy):
    def _run(params):
        filterset = ProductFilter(params, queryset=Product.objects.all(), taxonomy=taxonomy)
        assert filterset.is_valid(), filterset.errors
        return list(filterset.qs)
    return _run


@pytest.mark.parametrize("raw, expected", [
    ("10", 10.0),
    ("12.5", 12.5),
    ("abc", None),
    ("", None),
    ("nan", None),
    ("inf", None),
])
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected


def test_default_ordering_is_newest_first(make_product, run_filter):
    first, second, third = make_product(), make_product(), make_product()

    assert [p.pk for p in run_filter({})] == [third.pk, second.pk, first.pk]


def test_sort_by_price_ascending_and_descending(make_product, run_filter):
    for price in ("30", "10", "20"):
        make_product(price=Decimal(price))

    assert [p.price for p in run_filter({"sort": "price"})] == [Decimal("10"), Decimal("20"), Decimal("30")]
    assert [p.price for p in run_filter({"sort": "-price"})] == [Decimal("30"), Decimal("20"), Decimal("10")]


def test_sort_by_review_count(make_product, run_filter):
    quiet = make_product()
    popular = make_product()
    Product.objects.filter(pk=popular.pk).update(review_count=7)

    assert [p.pk for p in run_filter({"sort": "-reviewCount"})] == [popular.pk, quiet.pk]


@pytest.mark.parametrize("sort", ["-password", "author", "created_at;drop"])
def test_unknown_sort_field_is_rejected(taxonomy, sort):
    filterset = ProductFilter({"sort": sort}, queryset=Product.objects.all(), taxonomy=taxonomy)

    assert not filterset.is_valid()
    assert "sort" in filterset.errors


def test_unknown_category_is_rejected(taxonomy):
    filterset = ProductFilter({"category": "furniture"}, queryset=Product.objects.all(), taxonomy=taxonomy)

    with pytest.raises(ValidationError) as excinfo:
        list(filterset.qs)
    assert "category" in excinfo.value.detail


def test_all_category_adds_no_filter(make_product, run_filter):
    make_product(category="accessories")
    make_product(category="fragrance")

    assert len(run_filter({"category": "All"})) == 2


def test_price_range_is_inclusive(make_product, run_filter):
    for price in ("5", "10", "30", "50", "60"):
        make_product(price=Decimal(price))

    products = run_filter({"minPrice": "10", "maxPrice": "50", "sort": "price"})

    assert [p.price for p in products] == [Decimal("10"), Decimal("30"), Decimal("50")]


def test_unparsable_price_bound_is_ignored(make_product, run_filter):
    make_product(price=Decimal("5"))
    make_product(price=Decimal("500"))

    products = run_filter({"minPrice": "abc", "maxPrice": "100"})

    assert [p.price for p in products] == [Decimal("5")]


def test_free_text_search_covers_name_description_and_category(make_product, run_filter):
    by_name = make_product(name="Aviator Sunglasses")
    by_description = make_product(name="Shades", description="Polarized AVIATOR lenses")
    by_category = make_product(name="Eau de Parfum", category="fragrance", subcategory="testers")
    make_product(name="Leather Belt")

    assert {p.pk for p in run_filter({"q": "aviator"})} == {by_name.pk, by_description.pk}
    assert [p.pk for p in run_filter({"q": "TESTER"})] == [by_category.pk]


def test_category_and_subcategory_are_normalized(make_product, run_filter):
    belt = make_product(category="accessories", subcategory="belts")
    make_product(category="accessories", subcategory="sunglasses")
    make_product(category="fragrance", subcategory="testers")

    assert [p.pk for p in run_filter({"category": "Accessories", "subcategory": " Belts "})] == [belt.pk]
