from django.db.models import Avg, Count, FloatField, IntegerField, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce

from products.models import Product
from .models import Review

import logging

logger = logging.getLogger("rest_framework")


def _active_reviews_of_outer_product():
    return (
        Review.objects
        .filter(product_id=OuterRef('pk'), status=Review.Status.ACTIVE)
        .order_by()
        .values('product_id')
    )


def recompute_product_rating(product_id) -> int:
    """
    Write the mean rating and the number of active reviews onto a product.

    Both values are computed by correlated sub-queries inside a single UPDATE,
    so the database recomputes them from the review table at write time and
    concurrent review mutations cannot leave a stale aggregate behind.
    A product without active reviews gets ``rating=0`` and ``review_count=0``.

    Returns the number of updated products (0 when the product is gone).
    """
    active = _active_reviews_of_outer_product()
    average = Subquery(
        active.annotate(avg_rating=Avg('rating')).values('avg_rating')[:1],
        output_field=FloatField(),
    )
    total = Subquery(
        active.annotate(total_reviews=Count('pk')).values('total_reviews')[:1],
        output_field=IntegerField(),
    )

    updated = Product.objects.filter(pk=product_id).update(
        rating=Coalesce(average, Value(0.0), output_field=FloatField()),
        review_count=Coalesce(total, Value(0), output_field=IntegerField()),
    )
    logger.debug(f"Rating recomputed for product {product_id} ({updated} row(s))")
    return updated
