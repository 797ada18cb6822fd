from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        'id', 'name', 'category', 'subcategory', 'price', 'rating',
        'review_count', 'stock_status', 'created_at'
    )
    list_filter = ('category', 'stock_status', 'created_at')
    search_fields = ('name', 'description', 'author__email')
    ordering = ('-created_at',)
    # derived from reviews
    readonly_fields = ('rating', 'review_count', 'created_at', 'updated_at')
