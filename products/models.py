from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator
from django.db.models import Q, F


class Product(models.Model):

    class StockStatus(models.TextChoices):
        IN_STOCK = 'in-stock', 'In stock'
        OUT_OF_STOCK = 'out-of-stock', 'Out of stock'
        PRE_ORDER = 'pre-order', 'Pre-order'

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )
    name = models.CharField(max_length=200, db_index=True)
    # Values are normalized and checked against the category taxonomy by the
    # write serializer; the taxonomy is configuration, not a DB enum.
    category = models.CharField(max_length=60, db_index=True)
    subcategory = models.CharField(max_length=60, blank=True, db_index=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        db_index=True,
    )
    old_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        null=True,
        blank=True,
    )
    image = models.CharField(max_length=500, blank=True)
    gallery = models.JSONField(default=list, blank=True)

    # Derived from active reviews, written only by reviews.aggregation.
    rating = models.FloatField(default=0)
    review_count = models.PositiveIntegerField(default=0)

    stock_status = models.CharField(
        max_length=20, choices=StockStatus.choices, default=StockStatus.IN_STOCK
    )
    stock_quantity = models.PositiveIntegerField(default=0)
    delivery_days_min = models.PositiveSmallIntegerField(null=True, blank=True)
    delivery_days_max = models.PositiveSmallIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.CheckConstraint(
                condition=Q(delivery_days_min__isnull=True)
                | Q(delivery_days_max__isnull=True)
                | Q(delivery_days_min__lte=F('delivery_days_max')),
                name='product_delivery_window_ordered',
            ),
        ]

    def __str__(self):
        return self.name
