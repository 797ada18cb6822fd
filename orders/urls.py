from django.urls import path
from rest_framework.routers import SimpleRouter
from .views import OrderViewSet, ReceiptEmailView

router = SimpleRouter()
router.register(r'orders', OrderViewSet, basename='orders')

urlpatterns = [
    path('send-receipt-email/', ReceiptEmailView.as_view(), name='send-receipt-email'),
] + router.urls
