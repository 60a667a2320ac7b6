from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from accounts.models import User
from projects.models import Project


class WriteAccessTests(APITestCase):
    """Writes fail closed whatever the page chose to render."""

    def test_anonymous_write_is_unauthorized(self) -> None:
        response = self.client.post("/api/projects", {"title": "Sneaky"}, format="json")
        self.assertEqual(response.status_code, 401)
        self.assertIn("error", response.json())
        self.assertFalse(Project.objects.exists())

    def test_invalid_token_is_unauthorized(self) -> None:
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")
        response = self.client.delete("/api/projects?id=1")
        self.assertEqual(response.status_code, 401)

    def test_invalid_token_can_still_read(self) -> None:
        self.client.credentials(HTTP_AUTHORIZATION="Bearer deadbeef")
        response = self.client.get("/api/projects")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "data": []})

    def test_viewer_cannot_write(self) -> None:
        viewer = User.objects.create_user(username="viewer", email="viewer@example.com", password="pw-123456")
        token = Token.objects.create(user=viewer)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

        response = self.client.post("/api/projects", {"title": "Nope"}, format="json")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"error": "Admin access required."})

    def test_superuser_can_write(self) -> None:
        root = User.objects.create_superuser(username="root", email="root@example.com", password="pw-123456")
        token = Token.objects.create(user=root)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

        response = self.client.post("/api/projects", {"title": "Allowed"}, format="json")
        self.assertEqual(response.status_code, 200)

    def test_reads_are_public(self) -> None:
        for path in ("/api/projects", "/api/experience", "/api/skills"):
            response = self.client.get(path)
            self.assertEqual(response.status_code, 200, path)
            self.assertEqual(response.json(), {"success": True, "data": []})
