"""
Accounts app utility functions

Helper functions for avatars and API tokens.
"""
import hashlib
from urllib.parse import urlencode

from rest_framework_simplejwt.tokens import AccessToken


def gravatar_url(email: str, size: int = 200) -> str:
    """
    Build the Gravatar URL for an email address.

    Falls back to Gravatar's "mystery person" image when the address has
    no registered avatar.
    """
    digest = hashlib.md5(email.strip().lower().encode('utf-8')).hexdigest()
    query = urlencode({'s': size, 'r': 'pg', 'd': 'mm'})
    return f"https://www.gravatar.com/avatar/{digest}?{query}"


def issue_token(user) -> str:
    """Return a signed access token carrying the user id claim."""
    return str(AccessToken.for_user(user))
