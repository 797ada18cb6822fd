import logging
from celery import shared_task
from django.core.mail import send_mail
from django.conf import settings

logger = logging.getLogger("rest_framework")

@shared_task
def send_order_placed_email(order_id, user_email, user_name, total_amount):
    subject = f"Your {settings.STORE_NAME} order {order_id} has been placed"
    message = (
        f"Hello {user_name},\n"
        f"Your order {order_id} has been successfully placed.\n"
        f"Total: {total_amount}.\n"
        f"We will let you know as soon as it ships.\n"
    )
    send_mail(subject, message, settings.DEFAULT_FROM_EMAIL, [user_email])
    logger.info(f"Sent 'placed' email for order {order_id}")
