import logging
from django.db import transaction
from django.dispatch import receiver
from django.db.models.signals import post_save

from .models import Order
from .tasks import send_order_placed_email

logger = logging.getLogger("rest_framework")

@receiver(post_save, sender=Order)
def on_order_created(sender, instance, created, raw=False, **kwargs):
    if not created or raw:
        return

    transaction.on_commit(lambda: send_order_placed_email.delay(
        str(instance.id),
        instance.email,
        instance.customer_name,
        str(instance.total_amount),
    ))
