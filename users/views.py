import logging

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.exceptions import ValidationError

from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.exceptions import TokenError

from drf_spectacular.utils import extend_schema

from .serializers import RegisterSerializer, LoginUserSerializer, UserProfileSerializer
from .throttles import LoginRateThrottle
from utils import set_jwt_token

logger = logging.getLogger("rest_framework")


class RegisterView(generics.CreateAPIView):
    """
    RegisterView

    Registers a new user. Upon successful registration, JWT access and refresh
    tokens are issued as secure cookies and the access token is returned in the body.

    **Responses:**
      - **201 Created:** User registration successful.
      - **400 Bad Request:** Registration validation errors (e.g. email already registered).
    """

    serializer_class = RegisterSerializer
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        access_token, refresh_token = set_jwt_token.generate_tokens_for_user(user)

        logger.info(f"User {user.email} registered successfully.")

        response = Response({
            'success': True,
            'message': 'User registered successfully.',
            'token': access_token,
            'user': UserProfileSerializer(user).data,
        }, status=status.HTTP_201_CREATED)

        set_jwt_token.set_secure_jwt_cookie(response, access_token, refresh_token)

        return response


class LoginUser(APIView):
    """
    LoginUser

    Authenticates a user using email and password credentials. On success the
    access token is returned in the body and both tokens are set as cookies.

    **Responses:**
      - **200 OK:** Login successful with JWT tokens issued.
      - **400 Bad Request:** Invalid credentials or validation errors.
    """

    permission_classes = [AllowAny]
    serializer_class = LoginUserSerializer
    throttle_classes = [LoginRateThrottle]

    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Login failed for email {request.data.get('email')}")
            raise ValidationError(serializer.errors)

        user = serializer.validated_data['user']
        access_token, refresh_token = set_jwt_token.generate_tokens_for_user(user)

        logger.info(f"User {user.email} logged in successfully.")

        response = Response({
            'success': True,
            'message': 'Login successful',
            'token': access_token,
            'user': UserProfileSerializer(user).data,
        }, status=status.HTTP_200_OK)

        set_jwt_token.set_secure_jwt_cookie(response, access_token, refresh_token)

        return response


@extend_schema(request=None, responses={200: None})
class LogoutUser(APIView):
    """
    LogoutUser

    Blacklists the refresh token cookie (when present) and removes both JWT cookies.
    """

    permission_classes = [AllowAny]

    def post(self, request):
        refresh_token = request.COOKIES.get("refresh_token")
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                logger.warning(f"Logout with unusable refresh token: {e}")

        response = Response(
            {"success": True, "message": "Logout successful"},
            status=status.HTTP_200_OK,
        )
        set_jwt_token.clear_jwt_cookies(response)
        return response
