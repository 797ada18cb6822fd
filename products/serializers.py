from rest_framework import serializers
from rest_framework.exceptions import ValidationError

from users.serializers import UserSummarySerializer
from utils.image_url import get_image_url, normalize_image_url
from .models import Product
from .taxonomy import get_taxonomy

import logging

logger = logging.getLogger("rest_framework")


# ---------------------------
# Product Write Serializer
# ---------------------------

class ProductWriteSerializer(serializers.ModelSerializer):
    """
    Create/update serializer. Category and subcategory are normalized and the
    pair is checked against the taxonomy on every write, partial updates
    included (missing values are taken from the stored product).
    """
    category = serializers.CharField(max_length=60)
    subcategory = serializers.CharField(max_length=60, required=False, allow_blank=True)
    gallery = serializers.ListField(
        child=serializers.CharField(max_length=500), required=False
    )

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'category', 'subcategory', 'description', 'price',
            'old_price', 'image', 'gallery', 'stock_status', 'stock_quantity',
            'delivery_days_min', 'delivery_days_max', 'rating', 'review_count',
            'author', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'rating', 'review_count', 'author', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Product name cannot be empty.")
        return value

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Price cannot be negative.")
        return value

    def validate_image(self, value):
        return normalize_image_url(value) or ""

    def validate_gallery(self, value):
        return [normalize_image_url(item) for item in value if item and item.strip()]

    def _current(self, attrs, name):
        if name in attrs:
            return attrs[name]
        if self.instance is not None:
            return getattr(self.instance, name)
        return None

    def validate(self, attrs):
        taxonomy = self.context.get('taxonomy') or get_taxonomy()

        if 'category' in attrs or 'subcategory' in attrs or self.instance is None:
            category, subcategory = taxonomy.validate(
                self._current(attrs, 'category'),
                self._current(attrs, 'subcategory'),
            )
            attrs['category'] = category
            attrs['subcategory'] = subcategory

        delivery_min = self._current(attrs, 'delivery_days_min')
        delivery_max = self._current(attrs, 'delivery_days_max')
        if delivery_min is not None and delivery_max is not None and delivery_min > delivery_max:
            raise ValidationError({
                "delivery_days_min": "Delivery window start must not be after its end."
            })

        return attrs


# ---------------------------
# Product Read Serializers
# ---------------------------

class ProductSerializer(serializers.ModelSerializer):
    author = UserSummarySerializer(read_only=True)
    image = serializers.SerializerMethodField()
    gallery = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'category', 'subcategory', 'description', 'price',
            'old_price', 'image', 'gallery', 'rating', 'review_count',
            'stock_status', 'stock_quantity', 'delivery_days_min',
            'delivery_days_max', 'author', 'created_at', 'updated_at',
        ]

    def get_image(self, obj: Product) -> str:
        return get_image_url(obj.image)

    def get_gallery(self, obj: Product) -> list:
        return [get_image_url(item) for item in obj.gallery or []]

