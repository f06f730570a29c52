"""
Profiles app models

Profile model for a member's professional details.

Experience and education entries are stored as JSON lists, most recent
insertion first:
{
  "experience": [
    {
      "id": "6f1c...",
      "title": "Backend Developer",
      "company": "Acme Co",
      "location": "Berlin",
      "from": "2021-03-01",
      "to": null,
      "current": true,
      "description": "APIs and data pipelines"
    }
  ],
  "education": [
    {
      "id": "0b7e...",
      "school": "TU Berlin",
      "degree": "BSc",
      "fieldofstudy": "Computer Science",
      "from": "2016-10-01",
      "to": "2020-09-30",
      "current": false,
      "description": ""
    }
  ]
}
"""
from django.conf import settings
from django.db import models


class Profile(models.Model):
    """
    Professional profile, one per user.

    The OneToOneField enforces the single-profile-per-user invariant and
    cascades when the owning user is removed.
    """

    SOCIAL_PLATFORMS = ['youtube', 'twitter', 'facebook', 'linkedin', 'instagram']

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
    )
    company = models.CharField(max_length=255, blank=True)
    website = models.CharField(max_length=500, blank=True)
    location = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=255)
    skills = models.JSONField(default=list)
    bio = models.TextField(blank=True)
    githubusername = models.CharField(max_length=100, blank=True)
    social = models.JSONField(default=dict)
    experience = models.JSONField(default=list)
    education = models.JSONField(default=list)

    date = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile for {self.user.name}"

    class Meta:
        verbose_name = 'Profile'
        verbose_name_plural = 'Profiles'
