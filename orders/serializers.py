from rest_framework import serializers
from .models import Order, OrderItem

MAX_RECEIPT_SIZE = 5 * 1024 * 1024  # 5MB


class OrderItemInputSerializer(serializers.Serializer):
    product = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=100)


class OrderCreateSerializer(serializers.Serializer):
    items = OrderItemInputSerializer(many=True, allow_empty=False)
    customer_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    street = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100, required=False, allow_blank=True)
    postal_code = serializers.CharField(max_length=20, required=False, allow_blank=True)

    def validate_items(self, items):
        seen = set()
        for item in items:
            if item['product'] in seen:
                raise serializers.ValidationError("Each product may appear only once per order.")
            seen.add(item['product'])
        return items


class OrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItem
        fields = ['product', 'product_name', 'quantity', 'unit_price', 'subtotal']


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'status', 'customer_name', 'email', 'phone', 'street', 'city',
            'state', 'postal_code', 'total_amount', 'items', 'created_at', 'updated_at'
        ]


class ReceiptEmailSerializer(serializers.Serializer):
    receipt = serializers.FileField(
        error_messages={'required': 'Receipt file is required'}
    )
    receiptNumber = serializers.CharField(max_length=100)
    customerEmail = serializers.EmailField()
    customerName = serializers.CharField(required=False, allow_blank=True, default='Valued Customer')
    orderDate = serializers.CharField(required=False, allow_blank=True, default='')
    deliveryDate = serializers.CharField(required=False, allow_blank=True, default='To be confirmed')
    totalAmount = serializers.CharField(required=False, allow_blank=True, default='0.00')
    adminEmails = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_receipt(self, value):
        if value.size > MAX_RECEIPT_SIZE:
            raise serializers.ValidationError("Receipt file must not exceed 5MB.")
        return value
