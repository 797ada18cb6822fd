import re
from typing import List, Optional

from django.conf import settings
from django.db.models import Q
from rest_framework.exceptions import NotFound

from .models import Product


def name_tokens(name: str) -> List[str]:
    """Whitespace tokens of a product name, single characters dropped."""
    return [token for token in name.split() if len(token) > 1]


def name_pattern(tokens: List[str]) -> Optional[str]:
    """
    Alternation regex over the tokens (matched case-insensitively by the
    caller). ``None`` when there is nothing to match on.
    """
    if not tokens:
        return None
    return "|".join(re.escape(token) for token in tokens)


def find_related_products(product_id, limit: Optional[int] = None) -> List[Product]:
    """
    Products sharing the source product's category or at least one name token.

    The source product itself is never part of the result. The list is capped
    at ``limit`` (``RELATED_PRODUCTS_LIMIT`` by default).
    """
    try:
        product = Product.objects.get(pk=product_id)
    except (Product.DoesNotExist, ValueError):
        raise NotFound("Product not found")

    if limit is None:
        limit = settings.RELATED_PRODUCTS_LIMIT

    condition = Q(category=product.category)
    pattern = name_pattern(name_tokens(product.name))
    if pattern:
        condition |= Q(name__iregex=pattern)

    return list(
        Product.objects.filter(condition)
        .exclude(pk=product.pk)
        .order_by('-created_at', '-id')[:limit]
    )
