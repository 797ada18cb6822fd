from rest_framework.permissions import BasePermission, SAFE_METHODS


class IsAdminRole(BasePermission):
    """
    Grants access to users whose ``role`` is ``admin``.
    """
    message = "You are not authorized to access this route"

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)


class IsAdminRoleOrReadOnly(IsAdminRole):
    """
    Safe methods are public; writes require the admin role.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
