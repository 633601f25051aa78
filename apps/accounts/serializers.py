from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Compact user representation returned after signup/login."""

    user_id = serializers.UUIDField(source='id', read_only=True)

    class Meta:
        model = User
        fields = ['user_id', 'email', 'first_name', 'last_name']
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    """Profile of the authenticated user."""

    user_id = serializers.UUIDField(source='id', read_only=True)

    class Meta:
        model = User
        fields = [
            'user_id',
            'email',
            'first_name',
            'last_name',
            'status',
            'avg_rating',
            'total_reviews',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class PublicProfileSerializer(serializers.ModelSerializer):
    """What other users can see about someone."""

    user_id = serializers.UUIDField(source='id', read_only=True)

    class Meta:
        model = User
        fields = ['user_id', 'first_name', 'last_name', 'avg_rating', 'total_reviews', 'created_at']
        read_only_fields = fields


class SignupSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')

    def validate(self, attrs):
        """Run Django's password validators against the would-be user."""
        candidate = User(
            email=attrs['email'],
            first_name=attrs.get('first_name', ''),
            last_name=attrs.get('last_name', ''),
        )
        try:
            validate_password(attrs['password'], user=candidate)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({'password': list(exc.messages)})
        return attrs


class LoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class RefreshSerializer(serializers.Serializer):
    refresh_token = serializers.CharField(required=True, allow_blank=False)


class ProfileUpdateSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
