from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .aggregation import recompute_product_rating
from .models import Review

@receiver([post_save, post_delete], sender=Review)
def update_product_rating(sender, instance, raw=False, **kwargs):
    """
    Keep the product's rating/review_count in sync on review creation, edit,
    soft delete and hard delete (author removed, admin delete). Likes live in
    an M2M table and never reach this receiver.
    """
    if raw:
        return
    recompute_product_rating(instance.product_id)
