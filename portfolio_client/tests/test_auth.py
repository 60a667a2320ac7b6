from unittest import TestCase, mock

from portfolio_client.api import APIError
from portfolio_client.auth import AuthSession

USER = {"id": 1, "email": "admin@portfolio.com", "name": "Admin", "role": "ADMIN"}


class AuthSessionTests(TestCase):

    def setUp(self) -> None:
        self.client = mock.Mock()
        self.client.token = None
        self.session = AuthSession(self.client)

    def test_login_success_stores_token(self) -> None:
        self.client.login.return_value = {"success": True, "user": USER, "token": "tok"}

        self.assertTrue(self.session.login("admin@portfolio.com", "secret"))
        self.assertEqual(self.session.user, USER)
        self.assertEqual(self.client.token, "tok")
        self.assertTrue(self.session.is_admin)
        self.assertFalse(self.session.is_loading)
        self.assertIsNone(self.session.error)

    def test_login_failure_returns_false(self) -> None:
        self.client.login.side_effect = APIError("Invalid credentials", status=401)

        self.assertFalse(self.session.login("admin@portfolio.com", "wrong"))
        self.assertEqual(self.session.error, "Invalid credentials")
        self.assertIsNone(self.session.user)
        self.assertFalse(self.session.is_admin)
        self.assertFalse(self.session.is_loading)

    def test_register_reports_result(self) -> None:
        self.client.register.side_effect = APIError("Registration is disabled", status=403)

        result = self.session.register("a@b.com", "pw")
        self.assertFalse(result.success)
        self.assertEqual(result.error, "Registration is disabled")

    def test_restore_rejected_token(self) -> None:
        self.client.me.side_effect = APIError("Invalid token.", status=401)

        self.assertFalse(self.session.restore("stale"))
        self.assertIsNone(self.client.token)
        self.assertIsNone(self.session.error)

    def test_logout_clears_state_even_if_request_fails(self) -> None:
        self.client.login.return_value = {"success": True, "user": USER, "token": "tok"}
        self.session.login("admin@portfolio.com", "secret")
        self.client.logout.side_effect = APIError("boom", status=500)

        self.session.logout()

        self.assertIsNone(self.session.user)
        self.assertIsNone(self.client.token)
