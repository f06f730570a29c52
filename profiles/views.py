"""
Profiles app views

Endpoints for profiles, their experience/education entries and the GitHub
repository lookup.
"""
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from devconnect.api import message_response, server_error_response, validation_error_response
from .serializers import (
    EducationInputSerializer,
    ExperienceInputSerializer,
    ProfileInputSerializer,
    ProfileSerializer,
)
from .services import NO_PROFILE_MESSAGE, GitHubService, ProfileService

logger = logging.getLogger(__name__)


class ProfileView(APIView):
    """
    Profile collection endpoints.

    GET /api/profile - List all profiles (public)
    POST /api/profile - Create or update the current user's profile
    DELETE /api/profile - Delete the current user's profile and account
    """

    def get_permissions(self):
        """
        Instantiate and return the list of permissions that this view requires.
        """
        if self.request.method == 'GET':
            permission_classes = [AllowAny]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    def get(self, request):
        try:
            profiles = ProfileService.list_profiles()
        except Exception as e:
            return server_error_response(e)
        return Response({'profiles': ProfileSerializer(profiles, many=True).data})

    def post(self, request):
        serializer = ProfileInputSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            profile = ProfileService.upsert_profile(request.user, serializer.validated_data)
        except Exception as e:
            return server_error_response(e)
        return Response({'profile': ProfileSerializer(profile).data})

    def delete(self, request):
        try:
            ProfileService.delete_profile_and_user(request.user)
        except Exception as e:
            return server_error_response(e)
        return Response({'msg': 'User deleted'})


class MyProfileView(APIView):
    """
    GET /api/profile/me - Current user's profile
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        try:
            profile = ProfileService.get_profile(request.user.id)
        except Exception as e:
            return server_error_response(e)
        if profile is None:
            return message_response(NO_PROFILE_MESSAGE)
        return Response({'profile': ProfileSerializer(profile).data})


class UserProfileView(APIView):
    """
    GET /api/profile/user/<user_id> - Profile by owner id (public)

    A malformed id answers like a missing profile rather than a server error.
    """

    permission_classes = [AllowAny]

    def get(self, request, user_id):
        try:
            user_pk = int(user_id)
        except (TypeError, ValueError):
            logger.info("Malformed user id in profile lookup: %r", user_id)
            return message_response('Profile not found')

        try:
            profile = ProfileService.get_profile(user_pk)
        except Exception as e:
            return server_error_response(e)
        if profile is None:
            return message_response(NO_PROFILE_MESSAGE)
        return Response(ProfileSerializer(profile).data)


class ProfileEntryView(APIView):
    """
    Base view for adding entries to one of the profile's sub-lists.

    Subclasses set ``list_name`` and ``input_serializer_class``.
    """

    permission_classes = [IsAuthenticated]
    list_name = None
    input_serializer_class = None

    def put(self, request):
        serializer = self.input_serializer_class(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(serializer.errors)

        try:
            profile = ProfileService.get_profile(request.user.id)
            if profile is None:
                return message_response(NO_PROFILE_MESSAGE)
            ProfileService.add_entry(profile, self.list_name, serializer.validated_data)
        except Exception as e:
            return server_error_response(e)
        return Response(ProfileSerializer(profile).data)


class ProfileEntryDetailView(APIView):
    """
    Base view for removing a sub-list entry by id.

    An unknown id is not an error; the unchanged profile is returned.
    """

    permission_classes = [IsAuthenticated]
    list_name = None

    def delete(self, request, entry_id):
        try:
            profile = ProfileService.get_profile(request.user.id)
            if profile is None:
                return message_response(NO_PROFILE_MESSAGE)
            ProfileService.remove_entry(profile, self.list_name, entry_id)
        except Exception as e:
            return server_error_response(e)
        return Response(ProfileSerializer(profile).data)


class ExperienceView(ProfileEntryView):
    """PUT /api/profile/experience - Add an experience entry"""

    list_name = 'experience'
    input_serializer_class = ExperienceInputSerializer


class ExperienceDetailView(ProfileEntryDetailView):
    """DELETE /api/profile/experience/<exp_id> - Remove an experience entry"""

    list_name = 'experience'


class EducationView(ProfileEntryView):
    """PUT /api/profile/education - Add an education entry"""

    list_name = 'education'
    input_serializer_class = EducationInputSerializer


class EducationDetailView(ProfileEntryDetailView):
    """DELETE /api/profile/education/<edu_id> - Remove an education entry"""

    list_name = 'education'


class GitHubReposView(APIView):
    """
    GET /api/profile/github/<username> - Newest public repositories (public)
    """

    permission_classes = [AllowAny]

    def get(self, request, username):
        try:
            repos = GitHubService.fetch_repositories(username)
        except Exception as e:
            return server_error_response(e)
        if repos is None:
            return message_response('No Github profile found', status.HTTP_404_NOT_FOUND)
        return Response(repos)
