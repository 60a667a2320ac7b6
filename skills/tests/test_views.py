from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from accounts.models import User
from skills.models import Skill, SkillCategory


class SkillCategoryAPITests(APITestCase):
    """End-to-end scenarios over /api/skills."""

    def setUp(self) -> None:
        admin = User.objects.create_user(
            username="owner", email="owner@example.com", password="pw-123456", role=User.ADMIN,
        )
        token = Token.objects.create(user=admin)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

    def _create_languages(self):
        response = self.client.post(
            "/api/skills",
            {"title": "Languages", "skills": [{"name": "Go", "level": 80}, {"name": "Rust", "level": 80}]},
            format="json",
        )
        self.assertEqual(response.status_code, 200)
        return response.json()["data"]

    def test_create_then_list(self) -> None:
        created = self._create_languages()
        self.assertEqual(created["title"], "Languages")

        response = self.client.get("/api/skills")
        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["title"], "Languages")
        self.assertEqual(len(data[0]["skills"]), 2)
        for skill in data[0]["skills"]:
            self.assertEqual(skill["level"], 80)
            self.assertIsInstance(skill["id"], int)

    def test_update_drops_omitted_skill(self) -> None:
        created = self._create_languages()
        go = next(s for s in created["skills"] if s["name"] == "Go")

        response = self.client.put(
            "/api/skills",
            {"id": created["id"], "skills": [{"id": go["id"], "name": "Go", "level": 90}]},
            format="json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True})

        data = self.client.get("/api/skills").json()["data"]
        self.assertEqual(data[0]["skills"], [{"id": go["id"], "name": "Go", "level": 90}])
        self.assertFalse(Skill.objects.filter(name="Rust").exists())

    def test_new_skill_defaults_to_level_80(self) -> None:
        created = self._create_languages()
        skills = created["skills"] + [{"name": "Zig"}]

        self.client.put("/api/skills", {"id": created["id"], "skills": skills}, format="json")

        self.assertEqual(Skill.objects.get(name="Zig").level, 80)

    def test_level_out_of_range_is_rejected(self) -> None:
        created = self._create_languages()
        response = self.client.put(
            "/api/skills",
            {"id": created["id"], "skills": [{"name": "Go", "level": 101}]},
            format="json",
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("skills", response.json()["error"])
        self.assertEqual(Skill.objects.count(), 2)

    def test_bulk_names_path(self) -> None:
        response = self.client.post(
            "/api/skills", {"title": "Cloud", "names": "AWS, GCP, Azure"}, format="json",
        )
        self.assertEqual(response.status_code, 200)
        skills = response.json()["data"]["skills"]
        self.assertEqual([s["name"] for s in skills], ["AWS", "GCP", "Azure"])
        self.assertEqual({s["level"] for s in skills}, {80})

    def test_delete_category_removes_skills(self) -> None:
        created = self._create_languages()
        response = self.client.delete(f"/api/skills?id={created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertFalse(SkillCategory.objects.exists())
        self.assertFalse(Skill.objects.exists())

        data = self.client.get("/api/skills").json()["data"]
        self.assertEqual(data, [])

    def test_delete_without_id(self) -> None:
        response = self.client.delete("/api/skills")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Category ID required"})

    def test_put_without_id(self) -> None:
        response = self.client.put("/api/skills", {"title": "x"}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Category ID required"})

    def test_array_body_is_rejected(self) -> None:
        for method in (self.client.post, self.client.put):
            response = method("/api/skills", [{"id": 1}], format="json")
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.json(), {"error": "Request body must be a JSON object"})
        self.assertFalse(SkillCategory.objects.exists())
