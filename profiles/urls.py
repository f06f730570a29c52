"""
Profiles app URLs

Mounted under ``api/``; trailing slashes are optional.
"""
from django.urls import re_path
from . import views

urlpatterns = [
    re_path(r'^profile/?$', views.ProfileView.as_view(), name='profile'),
    re_path(r'^profile/me/?$', views.MyProfileView.as_view(), name='profile-me'),
    re_path(r'^profile/user/(?P<user_id>[^/]+)/?$', views.UserProfileView.as_view(), name='profile-by-user'),
    re_path(r'^profile/experience/?$', views.ExperienceView.as_view(), name='profile-experience'),
    re_path(
        r'^profile/experience/(?P<entry_id>[^/]+)/?$',
        views.ExperienceDetailView.as_view(),
        name='profile-experience-detail',
    ),
    re_path(r'^profile/education/?$', views.EducationView.as_view(), name='profile-education'),
    re_path(
        r'^profile/education/(?P<entry_id>[^/]+)/?$',
        views.EducationDetailView.as_view(),
        name='profile-education-detail',
    ),
    re_path(r'^profile/github/(?P<username>[^/]+)/?$', views.GitHubReposView.as_view(), name='profile-github'),
]
