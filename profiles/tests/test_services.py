import datetime

from django.test import SimpleTestCase, TestCase

from accounts.models import User
from profiles.models import Profile
from profiles.serializers import ProfileInputSerializer
from profiles.services import ProfileService


class BuildProfileFieldsTests(SimpleTestCase):
    """Sparse update construction without touching the database."""

    def test_only_present_fields_are_included(self) -> None:
        fields = ProfileService.build_profile_fields(
            {
                "status": "Developer",
                "skills": ["python"],
                "company": "",
                "bio": "Backend work",
            }
        )
        self.assertEqual(
            fields,
            {"status": "Developer", "skills": ["python"], "bio": "Backend work"},
        )

    def test_social_links_are_nested(self) -> None:
        fields = ProfileService.build_profile_fields(
            {
                "status": "Developer",
                "skills": ["python"],
                "youtube": "https://youtube.com/ada",
                "facebook": "",
            }
        )
        self.assertEqual(fields["social"], {"youtube": "https://youtube.com/ada"})

    def test_no_social_key_without_links(self) -> None:
        fields = ProfileService.build_profile_fields({"status": "Developer", "skills": ["go"]})
        self.assertNotIn("social", fields)

    def test_skills_list_input_is_trimmed(self) -> None:
        serializer = ProfileInputSerializer(
            data={"status": "Developer", "skills": [" python ", "", "go"]}
        )
        self.assertTrue(serializer.is_valid(), serializer.errors)
        self.assertEqual(serializer.validated_data["skills"], ["python", "go"])

    def test_build_entry_assigns_id_and_iso_dates(self) -> None:
        entry = ProfileService.build_entry(
            {
                "title": "Dev",
                "from": datetime.date(2020, 1, 15),
                "to": None,
                "current": True,
            }
        )
        self.assertEqual(entry["from"], "2020-01-15")
        self.assertIsNone(entry["to"])
        self.assertEqual(len(entry["id"]), 36)


class ProfileEntryTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            username="ada@example.com",
            email="ada@example.com",
            password="secret123",
            name="Ada Lovelace",
        )
        self.profile = Profile.objects.create(user=self.user, status="Developer", skills=["python"])

    def test_add_entry_prepends_and_persists(self) -> None:
        first = ProfileService.add_entry(
            self.profile, "experience", {"title": "A", "from": datetime.date(2018, 1, 1)}
        )
        second = ProfileService.add_entry(
            self.profile, "experience", {"title": "B", "from": datetime.date(2020, 1, 1)}
        )

        self.profile.refresh_from_db()
        self.assertEqual(
            [entry["id"] for entry in self.profile.experience],
            [second["id"], first["id"]],
        )

    def test_remove_entry_reports_whether_anything_was_removed(self) -> None:
        entry = ProfileService.add_entry(
            self.profile, "education", {"school": "TU", "from": datetime.date(2016, 10, 1)}
        )

        self.assertFalse(ProfileService.remove_entry(self.profile, "education", "unknown"))
        self.assertEqual(len(self.profile.education), 1)

        self.assertTrue(ProfileService.remove_entry(self.profile, "education", entry["id"]))
        self.profile.refresh_from_db()
        self.assertEqual(self.profile.education, [])

    def test_upsert_merges_social_links(self) -> None:
        self.profile.social = {"twitter": "https://twitter.com/ada"}
        self.profile.save()

        profile = ProfileService.upsert_profile(
            self.user,
            {"status": "Lead", "skills": ["python"], "youtube": "https://youtube.com/ada"},
        )

        self.assertEqual(profile.pk, self.profile.pk)
        self.assertEqual(
            profile.social,
            {"twitter": "https://twitter.com/ada", "youtube": "https://youtube.com/ada"},
        )
        self.assertEqual(profile.status, "Lead")
