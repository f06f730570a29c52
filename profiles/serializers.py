"""
Profiles app serializers

Output serializer for Profile plus input serializers for the profile,
experience and education endpoints.
"""
from rest_framework import serializers

from accounts.serializers import UserSummarySerializer
from .models import Profile


def _required(message):
    return {'required': message, 'blank': message, 'null': message}


class SkillsField(serializers.Field):
    """
    Accept skills as a comma separated string or a list of strings.

    Elements are trimmed and empty elements dropped, order is kept.
    """

    default_error_messages = {
        'invalid': 'Skills must be a comma separated string or a list of strings',
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            items = data.split(',')
        elif isinstance(data, (list, tuple)):
            items = data
        else:
            self.fail('invalid')
        skills = []
        for item in items:
            if not isinstance(item, str):
                self.fail('invalid')
            item = item.strip()
            if item:
                skills.append(item)
        if not skills:
            self.fail('required')
        return skills

    def to_representation(self, value):
        return list(value)

    def validate_empty_values(self, data):
        if data == '':
            data = None
        return super().validate_empty_values(data)


class OptionalBlankDateField(serializers.DateField):
    """DateField that treats an empty string like a missing value."""

    def validate_empty_values(self, data):
        if data == '':
            data = None
        return super().validate_empty_values(data)


class ProfileSerializer(serializers.ModelSerializer):
    """
    Serializer for Profile responses.

    The owning user is joined in with name and avatar only.
    """

    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Profile
        fields = [
            'id',
            'user',
            'company',
            'website',
            'location',
            'status',
            'skills',
            'bio',
            'githubusername',
            'social',
            'experience',
            'education',
            'date',
        ]
        read_only_fields = fields


class ProfileInputSerializer(serializers.Serializer):
    """Create-or-update input. Only status and skills are required."""

    status = serializers.CharField(error_messages=_required('Status is required'))
    skills = SkillsField(error_messages=_required('Skills is required'))
    company = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    website = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    bio = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    githubusername = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    youtube = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    twitter = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    facebook = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    linkedin = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    instagram = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class EntryInputSerializer(serializers.Serializer):
    """
    Shared fields for experience and education entries.

    ``from`` is a Python keyword, so the date range fields are added in
    ``get_fields`` rather than declared on the class.
    """

    from_required_message = 'from date is required'

    current = serializers.BooleanField(required=False, allow_null=True, default=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')

    def get_fields(self):
        fields = super().get_fields()
        fields['from'] = OptionalBlankDateField(
            error_messages=_required(self.from_required_message),
        )
        fields['to'] = OptionalBlankDateField(
            required=False,
            allow_null=True,
            default=None,
        )
        return fields


class ExperienceInputSerializer(EntryInputSerializer):
    title = serializers.CharField(error_messages=_required('Title is required'))
    company = serializers.CharField(error_messages=_required('Company is required'))
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')


class EducationInputSerializer(EntryInputSerializer):
    school = serializers.CharField(error_messages=_required('School is required'))
    degree = serializers.CharField(error_messages=_required('Degree is required'))
    fieldofstudy = serializers.CharField(error_messages=_required('Field of study is required'))
