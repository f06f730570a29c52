"""
Accounts app views

Endpoints for registration, login and the current user.
"""
import logging

from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from devconnect.api import message_response, server_error_response, validation_error_response
from .models import User
from .serializers import LoginSerializer, RegisterSerializer, UserSerializer
from .utils import issue_token

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    """
    Register a new user.

    POST /api/users - Create account, return API token
    """

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        email = serializer.validated_data['email'].lower()
        try:
            if User.objects.filter(email=email).exists():
                return Response(
                    {'errors': [{'msg': 'User already exists'}]},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            try:
                with transaction.atomic():
                    user = serializer.save()
            except IntegrityError:
                logger.info("Concurrent registration for %s", email)
                return Response(
                    {'errors': [{'msg': 'User already exists'}]},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            token = issue_token(user)
        except Exception as e:
            return server_error_response(e)

        logger.info("Registered user %s", user.id)
        return Response({'token': token})


class AuthView(APIView):
    """
    Login and current-user lookup.

    GET /api/auth - Return the authenticated user
    POST /api/auth - Exchange email/password for an API token
    """

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.request.method == 'GET':
            permission_classes = [IsAuthenticated]
        else:
            permission_classes = [AllowAny]
        return [permission() for permission in permission_classes]

    def get(self, request):
        try:
            user = User.objects.filter(pk=request.user.id).first()
        except Exception as e:
            return server_error_response(e)
        if user is None:
            return message_response('User not found', status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(user).data)

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        invalid = Response(
            {'errors': [{'msg': 'Invalid Credentials'}]},
            status=status.HTTP_400_BAD_REQUEST,
        )
        try:
            user = User.objects.filter(
                email=serializer.validated_data['email'].lower()
            ).first()
            if user is None or not user.check_password(serializer.validated_data['password']):
                return invalid
            token = issue_token(user)
        except Exception as e:
            return server_error_response(e)

        return Response({'token': token})
