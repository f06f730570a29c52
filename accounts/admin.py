from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for custom User model."""

    list_display = [
        'username',
        'name',
        'email',
        'is_staff',
        'date_joined',
    ]
    list_filter = ['is_staff', 'is_superuser']
    search_fields = ['username', 'name', 'email']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile Fields', {'fields': ('name', 'avatar')}),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Profile Fields', {'fields': ('name', 'email')}),
    )
