from django.db import transaction
from django.conf import settings

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.exceptions import APIException
from rest_framework.permissions import AllowAny
from django_filters.rest_framework import DjangoFilterBackend

from drf_spectacular.utils import (
    extend_schema, extend_schema_view, OpenApiParameter, OpenApiExample, OpenApiTypes
)
import logging

from reviews.models import Review
from reviews.serializers import ReviewSerializer
from users.permissions import IsAdminRoleOrReadOnly
from .models import Product
from .serializers import ProductWriteSerializer, ProductSerializer
from .filters import ProductFilter, text_search_filter
from .pagination import ProductPagination
from .related import find_related_products
from .taxonomy import get_taxonomy

logger = logging.getLogger("rest_framework")

# -------------------------------------------------
# Product CRUD viewSet
# -------------------------------------------------
@extend_schema_view(
    list=extend_schema(
        summary="List Products",
        description=(
            "Paginated product list. Supports filtering by `category` (or `all`), `subcategory`, "
            "a `minPrice`/`maxPrice` range (unparsable bounds are ignored), free-text `q` "
            "(case-insensitive substring over name, description, category and subcategory), "
            "`sort` (a field name, `-` prefix for descending, default `-createdAt`) and "
            "`page`/`limit` pagination."
        ),
        parameters=[
            OpenApiParameter(name="category", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="subcategory", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="minPrice", type=OpenApiTypes.NUMBER, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="maxPrice", type=OpenApiTypes.NUMBER, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="q", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY),
            OpenApiParameter(
                name="sort",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="One of createdAt, price, name, rating, reviewCount; prefix with '-' for descending."
            ),
            OpenApiParameter(name="page", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="limit", type=OpenApiTypes.INT, location=OpenApiParameter.QUERY),
        ]
    ),
    retrieve=extend_schema(
        summary="Retrieve Product",
        description="Retrieve a single product together with its active reviews."
    ),
    create=extend_schema(
        summary="Create Product",
        description=(
            "Create a new product (admin only). The category must belong to the configured taxonomy "
            "and the subcategory, when given, must be registered under that category. Both are "
            "lowercased and spaces are turned into hyphens before the check."
        ),
        examples=[
            OpenApiExample(
                name="Create Product Example",
                value={
                    "name": "Classic Black Leather Belt",
                    "category": "accessories",
                    "subcategory": "belts",
                    "description": "Full-grain leather belt with a brushed buckle.",
                    "price": 45.0,
                    "image": "belt-black.jpg",
                    "stock_status": "in-stock",
                    "stock_quantity": 12,
                },
                request_only=True,
            )
        ]
    ),
    update=extend_schema(summary="Update Product", description="Replace a product (admin only)."),
    partial_update=extend_schema(
        summary="Partial Update Product",
        description="Partially update a product (admin only). The category/subcategory pair is re-validated."
    ),
    destroy=extend_schema(
        summary="Delete Product",
        description="Delete a product (admin only). All of its reviews are deleted with it."
    ),
)
class ProductViewSet(viewsets.ModelViewSet):
    """
    API endpoint for the product catalog.

    GET requests are public. POST/PUT/PATCH/DELETE require a JWT of a user with the
    ``admin`` role. ``rating`` and ``review_count`` are read-only here; they are kept in
    sync with the active reviews by the rating aggregator.
    """

    queryset = Product.objects.select_related('author')
    permission_classes = [IsAdminRoleOrReadOnly]
    lookup_value_regex = r'\d+'
    filter_backends = [DjangoFilterBackend]
    filterset_class = ProductFilter
    pagination_class = ProductPagination

    def get_serializer_class(self):
        if self.request and self.request.method in ('GET', 'HEAD', 'OPTIONS'):
            return ProductSerializer
        return ProductWriteSerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['taxonomy'] = get_taxonomy()
        return context

    def retrieve(self, request, *args, **kwargs):
        product = self.get_object()
        reviews = (
            Review.objects.filter(product=product, status=Review.Status.ACTIVE)
            .select_related('user')
            .prefetch_related('likes')
            .order_by('-created_at')
        )
        return Response({
            'success': True,
            'product': ProductSerializer(product).data,
            'reviews': ReviewSerializer(reviews, many=True).data,
        })

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save(author=request.user)
        logger.info(f"Product {product.id} '{product.name}' created by {request.user.email}")
        return Response(
            {'success': True, 'product': ProductSerializer(product).data},
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        logger.info(f"Product {product.id} updated by {request.user.email}")
        return Response({
            'success': True,
            'message': 'Product updated successfully',
            'product': ProductSerializer(product).data,
        })

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        product_id = instance.pk
        try:
            with transaction.atomic():
                # reviews go with the product (FK cascade)
                _, per_model = instance.delete()
        except Exception as e:
            logger.exception(f"Error occurred during product deletion: {str(e)}")
            raise APIException("Failed to delete the product")

        logger.info(
            f"Product {product_id} deleted together with "
            f"{per_model.get(Review._meta.label, 0)} review(s)"
        )
        return Response({'success': True, 'message': 'Product deleted successfully'})

    @extend_schema(
        summary="Related Products",
        description=(
            "Products sharing the category of the given product or at least one word of its name "
            "(case-insensitive). The product itself is excluded; the list is capped."
        ),
        responses={200: ProductSerializer(many=True)},
    )
    @action(detail=True, methods=['get'], url_path='related', permission_classes=[AllowAny])
    def related(self, request, pk=None):
        products = find_related_products(pk)
        return Response({
            'success': True,
            'products': ProductSerializer(products, many=True).data,
        })

    @extend_schema(
        summary="Search Products",
        description="Quick case-insensitive substring search; returns a bounded list, newest first.",
        parameters=[OpenApiParameter(name="q", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY)],
        responses={200: ProductSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], url_path='search', permission_classes=[AllowAny])
    def search(self, request):
        text = request.query_params.get('q', '').strip()
        if not text:
            return Response({'success': True, 'products': []})

        products = (
            self.get_queryset()
            .filter(text_search_filter(text))
            .order_by('-created_at', '-id')[:settings.PRODUCTS_SEARCH_LIMIT]
        )
        return Response({
            'success': True,
            'products': ProductSerializer(products, many=True).data,
        })

    @extend_schema(
        summary="Category Taxonomy",
        description="The configured categories with their allowed subcategories.",
        responses={200: OpenApiTypes.OBJECT},
    )
    @action(detail=False, methods=['get'], url_path='categories', permission_classes=[AllowAny])
    def categories(self, request):
        return Response({'success': True, 'categories': get_taxonomy().as_dict()})
