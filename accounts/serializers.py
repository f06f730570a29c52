"""
Accounts app serializers

Serializers for User model and authentication.
"""
from rest_framework import serializers
from .models import User
from .utils import gravatar_url


class UserSummarySerializer(serializers.ModelSerializer):
    """Owner fields joined onto public profile payloads."""

    class Meta:
        model = User
        fields = ['id', 'name', 'avatar']


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for the authenticated user's own record.

    Password is never exposed.
    """

    date = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'avatar', 'date']
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Validate sign-up input and create the user with a hashed password."""

    name = serializers.CharField(
        error_messages={
            'required': 'Name is required',
            'blank': 'Name is required',
        },
    )
    # The email doubles as the username, which is limited to 150 characters.
    email = serializers.EmailField(
        max_length=150,
        error_messages={
            'required': 'Please include a valid email',
            'blank': 'Please include a valid email',
            'invalid': 'Please include a valid email',
            'max_length': 'Email must be at most 150 characters',
        },
    )
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        error_messages={
            'required': 'Please enter a password with 6 or more characters',
            'blank': 'Please enter a password with 6 or more characters',
            'min_length': 'Please enter a password with 6 or more characters',
        },
    )

    def create(self, validated_data):
        """Create user with hashed password and Gravatar avatar."""
        email = validated_data['email'].lower()
        user = User(
            username=email,
            email=email,
            name=validated_data['name'],
            avatar=gravatar_url(email),
        )
        user.set_password(validated_data['password'])
        user.save()
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            'required': 'Please include a valid email',
            'blank': 'Please include a valid email',
            'invalid': 'Please include a valid email',
        },
    )
    password = serializers.CharField(
        write_only=True,
        error_messages={
            'required': 'Password is required',
            'blank': 'Password is required',
        },
    )
