from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    """Admin interface for Profile."""

    list_display = ['user', 'status', 'company', 'location', 'date', 'updated_at']
    list_filter = ['date', 'updated_at']
    search_fields = ['user__name', 'user__email', 'company', 'location', 'githubusername']
    readonly_fields = ['date', 'updated_at']
