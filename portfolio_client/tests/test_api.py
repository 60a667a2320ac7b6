from unittest import TestCase, mock

import requests

from portfolio_client.api import APIError, PortfolioClient


def _response(status, payload):
    response = mock.Mock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.json.return_value = payload
    return response


class PortfolioClientTests(TestCase):

    def setUp(self) -> None:
        self.session = mock.Mock()
        self.client = PortfolioClient("https://example.com/api/", session=self.session)

    def test_list_unwraps_data(self) -> None:
        self.session.request.return_value = _response(200, {"success": True, "data": [{"id": 1}]})

        self.assertEqual(self.client.projects.list(), [{"id": 1}])
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("GET", "https://example.com/api/projects"))
        self.assertNotIn("Authorization", kwargs["headers"])

    def test_update_puts_id_in_body(self) -> None:
        self.client.token = "abc"
        self.session.request.return_value = _response(200, {"success": True})

        self.client.skills.update(7, {"title": "Languages"})

        args, kwargs = self.session.request.call_args
        self.assertEqual(args[0], "PUT")
        self.assertEqual(kwargs["json"], {"title": "Languages", "id": 7})
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer abc")

    def test_delete_puts_id_in_query(self) -> None:
        self.session.request.return_value = _response(200, {"success": True})
        self.client.experience.delete(3)
        _, kwargs = self.session.request.call_args
        self.assertEqual(kwargs["params"], {"id": 3})

    def test_error_message_is_raised(self) -> None:
        self.session.request.return_value = _response(400, {"error": "Project ID required"})

        with self.assertRaises(APIError) as ctx:
            self.client.projects.delete(None)
        self.assertEqual(str(ctx.exception), "Project ID required")
        self.assertEqual(ctx.exception.status, 400)

    def test_network_error(self) -> None:
        self.session.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(APIError) as ctx:
            self.client.projects.list()
        self.assertIsNone(ctx.exception.status)
