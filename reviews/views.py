from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiTypes

from .models import Review
from .serializers import ReviewSerializer, ReviewSubmitSerializer
from .services import ReviewService

import logging

logger = logging.getLogger("rest_framework")


def active_reviews_for_product(product_id):
    return (
        Review.objects.filter(product_id=product_id, status=Review.Status.ACTIVE)
        .select_related('user')
        .prefetch_related('likes')
        .order_by('-created_at')
    )


class ProductReviewListAPIView(APIView):
    """
    Active reviews of a product, newest first.
    """
    permission_classes = [AllowAny]

    @extend_schema(summary="List Product Reviews", responses={200: ReviewSerializer(many=True)})
    def get(self, request, product_id):
        reviews = active_reviews_for_product(product_id)
        return Response({'success': True, 'reviews': ReviewSerializer(reviews, many=True).data})


class PostReviewAPIView(APIView):
    """
    Create or edit the caller's review of a product.

    A user has at most one review per product: a second submission replaces the
    comment and rating of the existing review and marks it as edited. The product's
    rating is recomputed afterwards.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Post Review",
        request=ReviewSubmitSerializer,
        responses={200: ReviewSerializer(many=True)},
        examples=[
            OpenApiExample(
                name="Post Review Example",
                value={"productId": 1, "rating": 4, "comment": "Lovely finish, runs a bit small."},
                request_only=True,
            )
        ],
    )
    def post(self, request):
        serializer = ReviewSubmitSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Rejected review submission from {request.user.email}: {serializer.errors}")
            raise ValidationError(serializer.errors)
        data = serializer.validated_data

        review, created = ReviewService.submit(
            request.user, data['productId'], data['rating'], data['comment']
        )

        return Response({
            'success': True,
            'message': 'Review processed successfully',
            'created': created,
            'review': ReviewSerializer(review).data,
            'reviews': ReviewSerializer(active_reviews_for_product(review.product_id), many=True).data,
        }, status=status.HTTP_201_CREATED if created else status.HTTP_200_OK)


class ReviewDeleteAPIView(APIView):
    """
    Soft-delete the caller's own review (its status becomes ``deleted``).
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Delete Review", responses={200: OpenApiTypes.OBJECT})
    def delete(self, request, review_id):
        ReviewService.soft_delete(request.user, review_id)
        return Response({'success': True, 'message': 'Review deleted successfully'})


class ReviewLikeAPIView(APIView):
    """
    Toggle the caller's like on a review.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Like/Unlike Review", request=None, responses={200: OpenApiTypes.OBJECT})
    def post(self, request, review_id):
        liked, likes = ReviewService.toggle_like(request.user, review_id)
        return Response({'success': True, 'liked': liked, 'likes': likes})


class TotalReviewsAPIView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(summary="Total Reviews", responses={200: OpenApiTypes.OBJECT})
    def get(self, request):
        total = Review.objects.filter(status=Review.Status.ACTIVE).count()
        return Response({'success': True, 'totalReviews': total})


class UserReviewsAPIView(APIView):
    """
    Active reviews written by a user, newest first.
    """
    permission_classes = [AllowAny]

    @extend_schema(summary="Reviews By User", responses={200: ReviewSerializer(many=True)})
    def get(self, request, user_id):
        reviews = (
            Review.objects.filter(user_id=user_id, status=Review.Status.ACTIVE)
            .select_related('user')
            .prefetch_related('likes')
            .order_by('-created_at')
        )
        return Response({'success': True, 'reviews': ReviewSerializer(reviews, many=True).data})


class UserReviewActivityAPIView(APIView):
    """
    A user's own active reviews plus the active reviews they liked.
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="User Review Activity", responses={200: OpenApiTypes.OBJECT})
    def get(self, request, user_id):
        user = get_object_or_404(get_user_model(), pk=user_id)
        base = Review.objects.filter(status=Review.Status.ACTIVE).select_related('user', 'product')
        reviews = base.filter(user=user).prefetch_related('likes').order_by('-created_at')
        liked_reviews = base.filter(likes=user).prefetch_related('likes').order_by('-created_at')
        return Response({
            'success': True,
            'reviews': ReviewSerializer(reviews, many=True).data,
            'likedReviews': ReviewSerializer(liked_reviews, many=True).data,
        })
