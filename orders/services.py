from decimal import Decimal

from django.db import transaction
from django.db.models import F
from rest_framework.exceptions import NotFound, ValidationError

from .models import Order, OrderItem
from products.models import Product

import logging
logger = logging.getLogger("rest_framework")

class OrderService:
    @staticmethod
    @transaction.atomic
    def create(user, items, shipping):
        """
        Create a pending order for ``user``.

        ``items`` is a list of ``{"product": id, "quantity": n}``; prices are taken
        from the catalog, never from the client. In-stock products have their
        quantity reserved; pre-order products are not stock-limited.
        """
        product_ids = [item['product'] for item in items]
        products = Product.objects.select_for_update().in_bulk(product_ids)

        missing = [pid for pid in product_ids if pid not in products]
        if missing:
            raise NotFound(f"Product not found: {', '.join(str(pid) for pid in missing)}")

        order = Order(user=user, **shipping)

        order_items = []
        total = Decimal('0')
        for item in items:
            product = products[item['product']]
            quantity = item['quantity']

            if product.stock_status == Product.StockStatus.OUT_OF_STOCK:
                raise ValidationError({"items": f"'{product.name}' is out of stock."})
            if product.stock_status == Product.StockStatus.IN_STOCK and quantity > product.stock_quantity:
                raise ValidationError({
                    "items": f"Only {product.stock_quantity} of '{product.name}' left in stock."
                })

            subtotal = product.price * quantity
            order_items.append(OrderItem(
                order=order,
                product=product,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,
                subtotal=subtotal,
            ))
            total += subtotal

        order.total_amount = total
        order.save()
        OrderItem.objects.bulk_create(order_items)

        for item in items:
            product = products[item['product']]
            if product.stock_status == Product.StockStatus.IN_STOCK:
                Product.objects.filter(pk=product.pk).update(
                    stock_quantity=F('stock_quantity') - item['quantity']
                )

        logger.info(f"Order {order.id} placed by {user.email} for {total}")
        return order

    @staticmethod
    @transaction.atomic
    def cancel(user, order_id):
        """Cancel one of the user's own orders while it is still pending."""
        order = (
            Order.objects.select_for_update()
            .filter(pk=order_id, user=user, status=Order.Status.PENDING)
            .first()
        )
        if order is None:
            raise NotFound("Order not found or cannot be cancelled")

        order.status = Order.Status.CANCELLED
        order.save(update_fields=['status', 'updated_at'])

        for item in order.items.select_related('product'):
            if item.product and item.product.stock_status == Product.StockStatus.IN_STOCK:
                Product.objects.filter(pk=item.product_id).update(
                    stock_quantity=F('stock_quantity') + item.quantity
                )

        logger.info(f"Order {order.id} cancelled by {user.email}")
        return order
