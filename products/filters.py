"""
Catalog list filters.

``ProductFilter`` turns the raw (untrusted) query-string parameters of the
product list into a filtered, ordered queryset:

- ``category``      taxonomy category; ``all`` or empty means no constraint
- ``subcategory``   normalized, applied as is (no taxonomy cross-check on reads)
- ``minPrice`` / ``maxPrice``  floats; a value that fails to parse is ignored
- ``q``             case-insensitive substring over name, description,
                    category and subcategory
- ``sort``          field name, ``-`` prefix for descending (default ``-createdAt``)

Paging (``page`` / ``limit``) is handled by ``products.pagination``.
"""
import math

import django_filters
from django.db.models import Q
from rest_framework.exceptions import ValidationError

from .models import Product
from .taxonomy import ALL_CATEGORIES, get_taxonomy, normalize_slug

TEXT_SEARCH_FIELDS = ("name", "description", "category", "subcategory")


def parse_price(raw):
    """Parse a price bound; anything that is not a finite float yields ``None``."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def text_search_filter(text):
    """OR of case-insensitive substring matches over the searchable fields."""
    condition = Q()
    for field_name in TEXT_SEARCH_FIELDS:
        condition |= Q(**{f"{field_name}__icontains": text})
    return condition


class ProductOrderingFilter(django_filters.OrderingFilter):
    """
    ``sort`` parameter. Newest first when absent; ``-created_at``/``-id``
    tie-breakers are appended so consecutive pages never overlap.
    """

    def filter(self, qs, value):
        ordering = [self.get_ordering_value(param) for param in value or []]
        if not ordering:
            ordering = ["-created_at"]
        if not any(field.lstrip("-") == "created_at" for field in ordering):
            ordering.append("-created_at")
        ordering.append("-id")
        return qs.order_by(*ordering)


class ProductFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(method='filter_by_category')
    subcategory = django_filters.CharFilter(method='filter_by_subcategory')
    minPrice = django_filters.CharFilter(method='filter_min_price')
    maxPrice = django_filters.CharFilter(method='filter_max_price')
    q = django_filters.CharFilter(method='filter_search')

    sort = ProductOrderingFilter(
        fields=(
            ('created_at', 'createdAt'),
            ('price', 'price'),
            ('name', 'name'),
            ('rating', 'rating'),
            ('review_count', 'reviewCount'),
        )
    )

    class Meta:
        model = Product
        fields = ['category', 'subcategory', 'minPrice', 'maxPrice', 'q', 'sort']

    def __init__(self, data=None, queryset=None, *, request=None, prefix=None, taxonomy=None):
        super().__init__(data, queryset, request=request, prefix=prefix)
        self.taxonomy = taxonomy or get_taxonomy()

    def filter_by_category(self, queryset, name, value):
        category = normalize_slug(value)
        if not category or category == ALL_CATEGORIES:
            return queryset
        if not self.taxonomy.is_category(category):
            allowed = ", ".join(self.taxonomy.categories)
            raise ValidationError({"category": f"Invalid category '{category}'. Allowed: {allowed}."})
        return queryset.filter(category=category)

    def filter_by_subcategory(self, queryset, name, value):
        return queryset.filter(subcategory=normalize_slug(value))

    def filter_min_price(self, queryset, name, value):
        price = parse_price(value)
        if price is None:
            return queryset
        return queryset.filter(price__gte=price)

    def filter_max_price(self, queryset, name, value):
        price = parse_price(value)
        if price is None:
            return queryset
        return queryset.filter(price__lte=price)

    def filter_search(self, queryset, name, value):
        return queryset.filter(text_search_filter(value))
