"""
Accounts app serializers

Serializers for User model and authentication requests.
"""
from django.contrib.auth import password_validation
from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Public view of a portfolio user.
    """

    name = serializers.CharField(source='display_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role']
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    """Email/password pair posted to the login endpoint."""

    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs):
        if not attrs.get('email') or not attrs.get('password'):
            raise serializers.ValidationError('Email and password are required')
        return attrs


class RegisterSerializer(serializers.Serializer):
    """
    Sign-up payload.

    Email is the login identifier and must be unique (case-insensitive).
    """

    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)
    name = serializers.CharField(required=False, allow_blank=True, max_length=150)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('A user with that email already exists.')
        return value

    def validate_password(self, value):
        password_validation.validate_password(value)
        return value
