from django.test import TestCase

from accounts.models import User
from projects.models import Project
from skills.services import SkillCategoryService


class HomePageTests(TestCase):

    def setUp(self) -> None:
        Project.objects.create(title="Portfolio", technologies=["Django"])
        SkillCategoryService.create({"title": "Languages", "skills": [{"name": "Python", "level": 90}]})

    def test_renders_content_for_visitors(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.context["is_admin"])
        self.assertContains(response, "Portfolio")
        self.assertContains(response, "Python")

    def test_admin_capability_flag(self) -> None:
        admin = User.objects.create_user(
            username="owner", email="owner@example.com", password="pw-123456", role=User.ADMIN,
        )
        self.client.force_login(admin)
        response = self.client.get("/")
        self.assertTrue(response.context["is_admin"])

    def test_viewer_gets_no_edit_affordances(self) -> None:
        viewer = User.objects.create_user(username="viewer", email="viewer@example.com", password="pw-123456")
        self.client.force_login(viewer)
        response = self.client.get("/")
        self.assertFalse(response.context["is_admin"])
