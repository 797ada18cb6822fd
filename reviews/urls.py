from django.urls import path
from .views import (
    ProductReviewListAPIView,
    PostReviewAPIView,
    ReviewDeleteAPIView,
    ReviewLikeAPIView,
    TotalReviewsAPIView,
    UserReviewsAPIView,
    UserReviewActivityAPIView,
)

urlpatterns = [
    path('product/<int:product_id>/', ProductReviewListAPIView.as_view(), name='product-reviews'),
    path('post-review/', PostReviewAPIView.as_view(), name='post-review'),
    path('total-reviews/', TotalReviewsAPIView.as_view(), name='total-reviews'),
    path('user/<int:user_id>/', UserReviewsAPIView.as_view(), name='user-reviews'),
    path('user/<int:user_id>/activity/', UserReviewActivityAPIView.as_view(), name='user-review-activity'),
    path('<int:review_id>/like/', ReviewLikeAPIView.as_view(), name='review-like'),
    path('<int:review_id>/', ReviewDeleteAPIView.as_view(), name='review-delete'),
]
