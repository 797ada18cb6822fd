import smtplib

from django.utils import timezone

from rest_framework import permissions, viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.exceptions import APIException
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiTypes, extend_schema_view
from utils.send_mail_custom import send_receipt_email
from .serializers import OrderSerializer, OrderCreateSerializer, ReceiptEmailSerializer
from .models import Order
from .services import OrderService
from .ord_utils import get_pagination_params, build_page_urls, parse_admin_emails

import logging
logger = logging.getLogger("rest_framework")


class ReceiptEmailFailed(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Failed to send receipt email'
    default_code = 'receipt_email_failed'


@extend_schema_view(
    list=extend_schema(
        summary="List Orders",
        description="Retrieve a paginated list of your orders (`page`, `page_size`).",
        parameters=[
            OpenApiParameter(name="page", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="page_size", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY),
        ],
        responses={200: OrderSerializer(many=True)}
    ),
    retrieve=extend_schema(
        summary="Retrieve Order",
        description="Retrieve one of your orders with its items.",
        parameters=[
            OpenApiParameter(
                name="id",
                location=OpenApiParameter.PATH,
                description="UUID of the order",
                required=True,
                type=OpenApiTypes.UUID,
            )
        ],
        responses={200: OrderSerializer}
    ),
    create=extend_schema(
        summary="Place Order",
        description=(
            "Place an order for one or more products. Prices are taken from the catalog; "
            "in-stock products have their stock reserved, out-of-stock products are rejected."
        ),
        request=OrderCreateSerializer,
        responses={201: OrderSerializer, 400: OpenApiTypes.OBJECT}
    ),
    cancel=extend_schema(
        summary="Cancel Order",
        description="Cancel one of your orders while it is still pending. Reserved stock is released.",
        request=None,
        responses={200: OrderSerializer, 404: OpenApiTypes.OBJECT}
    ),
)
class OrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet
):
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = OrderSerializer
    lookup_value_regex = r'[0-9a-fA-F-]{36}'

    def get_queryset(self):
        return Order.objects.filter(user=self.request.user).prefetch_related('items')

    def list(self, request, *args, **kwargs):
        base_qs = self.get_queryset()
        total = base_qs.count()

        page, page_size = get_pagination_params(request)
        start, end = (page - 1) * page_size, page * page_size
        page_qs = base_qs[start:end]

        data = self.get_serializer(page_qs, many=True).data
        next_url, prev_url = build_page_urls(request, page, page_size, total)

        return Response({
            'success': True,
            'count': total,
            'next': next_url,
            'previous': prev_url,
            'orders': data,
        })

    def retrieve(self, request, *args, **kwargs):
        order = self.get_object()
        return Response({'success': True, 'order': self.get_serializer(order).data})

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        items = data.pop('items')

        order = OrderService.create(request.user, items, data)
        order = self.get_queryset().get(pk=order.pk)
        return Response(
            {'success': True, 'order': OrderSerializer(order).data},
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['patch'], url_path='cancel')
    def cancel(self, request, pk=None):
        order = OrderService.cancel(request.user, pk)
        order = self.get_queryset().get(pk=order.pk)
        return Response({
            'success': True,
            'message': 'Order cancelled successfully',
            'order': OrderSerializer(order).data,
        })


class ReceiptEmailView(APIView):
    """
    Public endpoint: email a customer their PDF receipt (multipart upload,
    field ``receipt``), copying in any admin recipients.
    """
    permission_classes = [permissions.AllowAny]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        summary="Send Receipt Email",
        request=ReceiptEmailSerializer,
        responses={200: OpenApiTypes.OBJECT, 400: OpenApiTypes.OBJECT, 500: OpenApiTypes.OBJECT},
    )
    def post(self, request):
        serializer = ReceiptEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        receipt = data['receipt']
        try:
            result = send_receipt_email(
                to=data['customerEmail'],
                receipt_number=data['receiptNumber'],
                attachment=receipt.read(),
                customer_name=data['customerName'] or 'Valued Customer',
                order_date=data['orderDate'] or timezone.localdate().strftime('%d/%m/%Y'),
                delivery_date=data['deliveryDate'] or 'To be confirmed',
                total_amount=data['totalAmount'] or '0.00',
                admin_emails=parse_admin_emails(data['adminEmails']),
            )
        except (smtplib.SMTPException, OSError) as e:
            logger.exception(f"Error sending receipt email for {data['receiptNumber']}: {e}")
            raise ReceiptEmailFailed()

        logger.info(f"Receipt {data['receiptNumber']} emailed to {data['customerEmail']}")
        return Response({
            'success': True,
            'message': 'Receipt email sent successfully',
            'data': result,
        })
