from rest_framework.authentication import BaseAuthentication
from rest_framework_simplejwt.tokens import AccessToken
from rest_framework_simplejwt.exceptions import TokenError, AuthenticationFailed
from django.core.exceptions import ObjectDoesNotExist
import logging
from .models import User


logger = logging.getLogger("django")

class JWTAuthentication(BaseAuthentication):
    """
    JWT authentication reading the access token from the ``Authorization: Bearer``
    header first, then from the ``access_token`` HTTP-only cookie.

    Requests without any token stay anonymous, so public endpoints keep working
    and protected ones answer 401 through their permission classes.
    """
    keyword = "Bearer"

    def get_raw_token(self, request):
        header = request.headers.get("Authorization", "")
        if header.startswith(f"{self.keyword} "):
            return header.split(" ", 1)[1].strip()
        return request.COOKIES.get("access_token")

    def authenticate(self, request):
        raw_token = self.get_raw_token(request)

        if not raw_token:
            return None

        try:
            token = AccessToken(raw_token)
        except TokenError:
            logger.debug("Access token expired or malformed.")
            raise AuthenticationFailed(
                detail={"code": "token_expired", "message": "Your session has expired. Please login again."}
            )

        user_id = token.get("user_id")
        if not user_id:
            raise AuthenticationFailed(
                detail={"code": "invalid_token", "message": "Invalid token. Please login again."}
            )

        try:
            user = User.objects.get(id=user_id)
        except (ObjectDoesNotExist, ValueError):
            raise AuthenticationFailed(
                detail={"code": "invalid_token", "message": "Invalid token. Please login again."}
            )

        if not user.is_active:
            raise AuthenticationFailed(
                detail={"code": "user_inactive", "message": "This account is disabled."}
            )

        return (user, token)

    def authenticate_header(self, request):
        return self.keyword
