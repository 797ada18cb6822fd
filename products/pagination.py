import math

from django.conf import settings
from django.core.paginator import Page
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def positive_int_param(raw, name):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError({name: f"'{name}' must be a positive integer."})
    if value < 1:
        raise ValidationError({name: f"'{name}' must be a positive integer."})
    return value


class ProductPagination(PageNumberPagination):
    """
    ``page``/``limit`` paging for the catalog list.

    Non-integer or non-positive values are a 400. ``limit`` is capped at
    ``PRODUCTS_MAX_PAGE_SIZE``.
    A page past the end is returned empty without touching the database.
    """
    page_query_param = 'page'
    page_size_query_param = 'limit'

    def __init__(self):
        self.page_size = settings.PRODUCTS_DEFAULT_PAGE_SIZE
        self.max_page_size = settings.PRODUCTS_MAX_PAGE_SIZE

    def get_page_size(self, request):
        raw = request.query_params.get(self.page_size_query_param, '').strip()
        if not raw:
            return self.page_size
        return min(positive_int_param(raw, self.page_size_query_param), self.max_page_size)

    def get_page_number(self, request, paginator):
        raw = request.query_params.get(self.page_query_param, '').strip()
        if not raw:
            return 1
        return positive_int_param(raw, self.page_query_param)

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        paginator = self.django_paginator_class(queryset, self.get_page_size(request))
        page_number = self.get_page_number(request, paginator)

        if page_number > paginator.num_pages:
            self.page = Page([], page_number, paginator)
        else:
            self.page = paginator.page(page_number)
        return list(self.page)

    def get_paginated_response(self, data):
        paginator = self.page.paginator
        return Response({
            'success': True,
            'products': data,
            'totalProducts': paginator.count,
            'totalPages': math.ceil(paginator.count / paginator.per_page),
            'currentPage': self.page.number,
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'success': {'type': 'boolean'},
                'products': schema,
                'totalProducts': {'type': 'integer'},
                'totalPages': {'type': 'integer'},
                'currentPage': {'type': 'integer'},
            },
        }
