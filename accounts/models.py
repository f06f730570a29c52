"""
Accounts app models

Custom User model extending AbstractUser with display name and avatar.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model for DevConnect members.

    Extends Django's AbstractUser to add:
    - name: Display name shown on profiles
    - avatar: Gravatar URL derived from the email at registration
    """

    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    avatar = models.URLField(max_length=500, blank=True)

    def __str__(self):
        return f"{self.name} <{self.email}>"

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
