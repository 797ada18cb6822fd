from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'product', 'user', 'rating', 'status', 'is_edited', 'created_at')
    list_filter = ('status', 'is_edited', 'created_at')
    search_fields = ('comment', 'product__name', 'user__email')
    raw_id_fields = ('product', 'user', 'likes')
