from django.contrib import admin
from .models import User
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _


class CustomUserAdmin(BaseUserAdmin):
    model = User

    list_display = (
        "id", "email", "username", "role", "is_active", "is_staff"
    )
    list_filter = ("role", "is_active", "is_staff")

    readonly_fields = ("id", "created_at")

    fieldsets = (
        (None, {
            "fields": ("id", "username", "email", "password")
        }),
        (_("Profile"), {
            "fields": ("profile_image", "bio")
        }),
        (_("Permissions"), {
            "fields": ("role", "is_active", "is_staff", "is_superuser", "groups", "user_permissions"),
        }),
        (_("Important dates"), {
            "fields": ("last_login", "date_joined", "created_at"),
        }),
    )

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "username", "role", "password1", "password2"),
        }),
    )

    search_fields = ("email", "username")
    ordering = ("email",)


admin.site.register(User, CustomUserAdmin)
