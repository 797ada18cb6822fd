from rest_framework import serializers
from django.contrib.auth import authenticate
from django.db import IntegrityError

from .models import User

import logging

logger = logging.getLogger("rest_framework")

class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        required=True,
        error_messages={
            "min_length": "Password must be at least 8 characters long.",
        }
    )
    
    class Meta:
        model = User
        fields = ('username', 'email', 'password', 'profile_image', 'bio')
    
    def validate_email(self, value):
        value = value.lower()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("This email is already registered.")
        return value

    def create(self, validated_data):
        try:
            user = User.objects.create_user(**validated_data)
        except IntegrityError as ie:
            logger.error(f"Integrity error for {validated_data.get('email')}: {str(ie)}")
            raise serializers.ValidationError({"detail": "This email or username already exists."})
        logger.info(f"User {user.email} created successfully.")
        return user
    
class LoginUserSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    password = serializers.CharField(write_only=True, required=True)

    def validate(self, attrs):
        email = attrs.get('email').lower()
        password = attrs.get('password')

        user = authenticate(email=email, password=password)
        if not user:
            raise serializers.ValidationError(
                {"detail": "Invalid email or password."}
            )
        attrs['user'] = user  # Pass the authenticated user to the view
        return attrs


class UserProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = (
            'id', 'email', 'username', 'role', 'profile_image', 'bio', 'created_at'
        )


class UserSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'username', 'email')
