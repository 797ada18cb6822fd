from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound

from products.models import Product
from .models import Review

import logging

logger = logging.getLogger("rest_framework")


class ReviewService:
    """
    Review mutations. Every write goes through ``Review.save()`` so the
    ``post_save`` receiver recomputes the product's rating afterwards.
    """

    @staticmethod
    @transaction.atomic
    def submit(user, product_id, rating, comment):
        """
        Create the user's review of a product, or edit it in place when one
        already exists (one review per user and product).

        The lookup and the write are a single ``update_or_create`` on the
        (user, product) pair: the existing row is locked, and a concurrent first
        submission that loses the race on the unique constraint is turned into an
        update of the winner's row by Django. Resubmitting a soft-deleted review
        brings it back.

        Returns ``(review, created)``.
        """
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound("Product not found")

        review, created = Review.objects.update_or_create(
            user=user,
            product=product,
            create_defaults={
                'comment': comment,
                'rating': rating,
                'status': Review.Status.ACTIVE,
            },
            defaults={
                'comment': comment,
                'rating': rating,
                'is_edited': True,
                'edited_at': timezone.now(),
            },
        )

        if not created and review.status == Review.Status.DELETED:
            review.status = Review.Status.ACTIVE
            review.save(update_fields=['status', 'updated_at'])

        if created:
            logger.info(f"Review {review.id} created by {user.email} for product {product.id}")
        else:
            logger.info(f"Review {review.id} edited by {user.email} for product {product.id}")
        return review, created

    @staticmethod
    @transaction.atomic
    def soft_delete(user, review_id):
        """Mark the author's own review as deleted. Anyone else gets a 404."""
        review = (
            Review.objects.select_for_update()
            .filter(pk=review_id, user=user)
            .exclude(status=Review.Status.DELETED)
            .first()
        )
        if review is None:
            raise NotFound("Review not found or unauthorized")

        review.status = Review.Status.DELETED
        review.save(update_fields=['status', 'updated_at'])
        logger.info(f"Review {review.id} deleted by {user.email}")
        return review

    @staticmethod
    def toggle_like(user, review_id):
        """
        Like the review, or remove the like when the user already liked it.
        Returns ``(liked, liker_ids)``.
        """
        review = Review.objects.filter(pk=review_id).first()
        if review is None:
            raise NotFound("Review not found")

        if review.likes.filter(pk=user.pk).exists():
            review.likes.remove(user)
            liked = False
        else:
            review.likes.add(user)
            liked = True

        return liked, list(review.likes.values_list('pk', flat=True))
