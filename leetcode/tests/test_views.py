from unittest import mock

import requests
from django.core.cache import cache
from django.test import TestCase
from rest_framework.test import APIClient

from leetcode.services import LeetCodeService

SAMPLE_RESPONSE = {
    "data": {
        "matchedUser": {
            "submitStats": {
                "acSubmissionNum": [
                    {"difficulty": "All", "count": 321},
                    {"difficulty": "Easy", "count": 150},
                    {"difficulty": "Medium", "count": 140},
                    {"difficulty": "Hard", "count": 31},
                ]
            }
        }
    }
}


class LeetCodeSummaryTests(TestCase):

    def test_summarize_counts(self) -> None:
        self.assertEqual(
            LeetCodeService.summarize(SAMPLE_RESPONSE),
            {"totalSolved": 321, "easy": 150, "medium": 140, "hard": 31},
        )

    def test_summarize_missing_user(self) -> None:
        self.assertIsNone(LeetCodeService.summarize({"data": {"matchedUser": None}}))

    def test_summarize_missing_difficulty_defaults_to_zero(self) -> None:
        payload = {"data": {"matchedUser": {"submitStats": {"acSubmissionNum": [
            {"difficulty": "All", "count": 5},
        ]}}}}
        self.assertEqual(
            LeetCodeService.summarize(payload),
            {"totalSolved": 5, "easy": 0, "medium": 0, "hard": 0},
        )


class LeetCodeStatsViewTests(TestCase):
    """GET /api/leetcode with the upstream call mocked."""

    def setUp(self) -> None:
        cache.clear()
        self.client = APIClient()

    def _response(self, payload):
        response = mock.Mock()
        response.json.return_value = payload
        response.raise_for_status.return_value = None
        return response

    def test_missing_username(self) -> None:
        response = self.client.get("/api/leetcode")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Missing username parameter"})

    @mock.patch("leetcode.services.requests.post")
    def test_returns_stats(self, mock_post) -> None:
        mock_post.return_value = self._response(SAMPLE_RESPONSE)

        response = self.client.get("/api/leetcode?username=alice")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"totalSolved": 321, "easy": 150, "medium": 140, "hard": 31})
        call_kwargs = mock_post.call_args.kwargs
        self.assertEqual(call_kwargs["json"]["variables"], {"username": "alice"})

    @mock.patch("leetcode.services.requests.post")
    def test_results_are_cached(self, mock_post) -> None:
        mock_post.return_value = self._response(SAMPLE_RESPONSE)

        self.client.get("/api/leetcode?username=alice")
        self.client.get("/api/leetcode?username=ALICE")

        mock_post.assert_called_once()

    @mock.patch("leetcode.services.requests.post")
    def test_unknown_user(self, mock_post) -> None:
        mock_post.return_value = self._response({"data": {"matchedUser": None}})

        response = self.client.get("/api/leetcode?username=nobody")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "No data found for user"})

    @mock.patch("leetcode.services.requests.post")
    def test_non_object_response_is_a_failure(self, mock_post) -> None:
        mock_post.return_value = self._response(["unexpected"])

        response = self.client.get("/api/leetcode?username=alice")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to fetch LeetCode stats"})
        self.assertIsNone(cache.get(f"{LeetCodeService.CACHE_PREFIX}alice"))

    @mock.patch("leetcode.services.requests.post")
    def test_upstream_failure(self, mock_post) -> None:
        mock_post.side_effect = requests.ConnectionError("dns failure")

        response = self.client.get("/api/leetcode?username=alice")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to fetch LeetCode stats"})
