"""
Profile Service Layer
Handles persistence steps for profiles and the GitHub repository lookup.
"""
import logging
import uuid
from typing import Dict, List, Optional
from urllib.parse import quote

import requests
from django.conf import settings

from accounts.models import User
from .models import Profile

logger = logging.getLogger(__name__)

NO_PROFILE_MESSAGE = 'There is no profile for this user'


class ProfileService:
    """Service for reading and writing user profiles."""

    SCALAR_FIELDS = ['company', 'location', 'website', 'bio', 'status', 'githubusername']

    @staticmethod
    def build_profile_fields(data: Dict) -> Dict:
        """
        Build a sparse update document from validated input.

        Only present, non-empty values are included so an update leaves
        every omitted field untouched. Social links are collected into a
        nested ``social`` mapping.

        Args:
            data: Validated ProfileInputSerializer data

        Returns:
            Dictionary of profile fields to write
        """
        fields = {}
        for field in ProfileService.SCALAR_FIELDS:
            if data.get(field):
                fields[field] = data[field]
        if data.get('skills'):
            fields['skills'] = list(data['skills'])

        social = {
            platform: data[platform]
            for platform in Profile.SOCIAL_PLATFORMS
            if data.get(platform)
        }
        if social:
            fields['social'] = social
        return fields

    @staticmethod
    def get_profile(user_id) -> Optional[Profile]:
        """Get the profile owned by ``user_id`` with its user joined, or None."""
        return (
            Profile.objects.select_related('user')
            .filter(user_id=user_id)
            .first()
        )

    @staticmethod
    def list_profiles() -> List[Profile]:
        return list(Profile.objects.select_related('user').order_by('id'))

    @staticmethod
    def upsert_profile(user, data: Dict) -> Profile:
        """
        Create the user's profile, or merge the sparse fields into it.

        Args:
            user: Authenticated user (only ``id`` is read)
            data: Validated ProfileInputSerializer data

        Returns:
            The stored profile
        """
        fields = ProfileService.build_profile_fields(data)
        social = fields.pop('social', {})

        profile = ProfileService.get_profile(user.id)
        if profile is None:
            profile = Profile.objects.create(user_id=user.id, social=social, **fields)
            logger.info("Created profile %s for user %s", profile.id, user.id)
            return profile

        for attr, value in fields.items():
            setattr(profile, attr, value)
        if social:
            profile.social = {**(profile.social or {}), **social}
        profile.save()
        logger.info("Updated profile %s for user %s", profile.id, user.id)
        return profile

    @staticmethod
    def delete_profile_and_user(user) -> None:
        """
        Remove the user's profile and then the user record.

        The two deletes run as separate statements.
        """
        Profile.objects.filter(user_id=user.id).delete()
        User.objects.filter(pk=user.id).delete()
        logger.info("Deleted profile and user %s", user.id)

    @staticmethod
    def build_entry(data: Dict) -> Dict:
        """
        Turn validated entry input into a stored experience/education entry.

        Assigns a fresh id and stores dates as ISO strings.
        """
        entry = {'id': str(uuid.uuid4())}
        for key, value in data.items():
            if key in ('from', 'to'):
                value = value.isoformat() if value else None
            elif key == 'current':
                value = bool(value)
            elif value is None:
                value = ''
            entry[key] = value
        return entry

    @staticmethod
    def add_entry(profile: Profile, list_name: str, data: Dict) -> Dict:
        """
        Prepend a new entry to one of the profile's sub-lists.

        Args:
            profile: Profile instance
            list_name: 'experience' or 'education'
            data: Validated entry input

        Returns:
            The stored entry with its generated id
        """
        entry = ProfileService.build_entry(data)
        entries = list(getattr(profile, list_name) or [])
        entries.insert(0, entry)
        setattr(profile, list_name, entries)
        profile.save(update_fields=[list_name, 'updated_at'])
        return entry

    @staticmethod
    def remove_entry(profile: Profile, list_name: str, entry_id: str) -> bool:
        """
        Remove the entry with ``entry_id`` from one of the profile's sub-lists.

        An unknown id leaves the list unchanged.

        Returns:
            True if an entry was removed, False if not found
        """
        entries = list(getattr(profile, list_name) or [])
        index = next(
            (i for i, entry in enumerate(entries) if entry.get('id') == entry_id),
            -1,
        )
        if index < 0:
            logger.debug("No %s entry %s on profile %s", list_name, entry_id, profile.id)
            return False

        entries.pop(index)
        setattr(profile, list_name, entries)
        profile.save(update_fields=[list_name, 'updated_at'])
        return True


class GitHubService:
    """Client for the public GitHub repository listing."""

    @staticmethod
    def fetch_repositories(username: str) -> Optional[List[Dict]]:
        """
        Fetch a GitHub user's newest public repositories.

        Args:
            username: GitHub login

        Returns:
            The decoded JSON list, or None if GitHub answered with a
            non-success status

        Raises:
            requests.RequestException: On network failure or timeout
        """
        url = f"{settings.GITHUB_API_URL.rstrip('/')}/users/{quote(username, safe='')}/repos"
        auth = None
        if settings.GITHUB_CLIENT_ID and settings.GITHUB_CLIENT_SECRET:
            auth = (settings.GITHUB_CLIENT_ID, settings.GITHUB_CLIENT_SECRET)

        response = requests.get(
            url,
            params={
                'per_page': settings.GITHUB_REPO_LIMIT,
                'sort': 'created',
                'direction': 'desc',
            },
            headers={
                'Accept': 'application/vnd.github+json',
                'User-Agent': 'devconnect',
            },
            auth=auth,
            timeout=settings.GITHUB_TIMEOUT,
        )
        if response.status_code != 200:
            logger.warning(
                "GitHub repository lookup for '%s' returned %s",
                username,
                response.status_code,
            )
            return None
        return response.json()
