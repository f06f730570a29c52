"""
Accounts app URLs
"""
from django.urls import re_path
from .views import AuthView, RegisterView

urlpatterns = [
    re_path(r'^users/?$', RegisterView.as_view(), name='register'),
    re_path(r'^auth/?$', AuthView.as_view(), name='auth'),
]
