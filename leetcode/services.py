"""
LeetCode stats service
Fetches public solved-problem counts from LeetCode's GraphQL endpoint.
"""
import logging
from typing import Dict, Optional

import requests
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

STATS_QUERY = """
query getUserProfile($username: String!) {
  matchedUser(username: $username) {
    submitStats {
      acSubmissionNum {
        difficulty
        count
      }
    }
  }
}
"""


class LeetCodeError(Exception):
    """Raised when LeetCode cannot be reached or returns garbage."""


class LeetCodeService:
    """Thin client for the subset of LeetCode's API the site displays."""

    CACHE_PREFIX = 'leetcode:stats:'

    @staticmethod
    def summarize(payload: Dict) -> Optional[Dict[str, int]]:
        """
        Reduce a GraphQL response to ``{totalSolved, easy, medium, hard}``.

        Returns None when the user does not exist.
        """
        user = (payload.get('data') or {}).get('matchedUser') or {}
        stats = (user.get('submitStats') or {}).get('acSubmissionNum')
        if not stats:
            return None

        counts = {entry.get('difficulty'): entry.get('count') or 0 for entry in stats}
        return {
            'totalSolved': counts.get('All', 0),
            'easy': counts.get('Easy', 0),
            'medium': counts.get('Medium', 0),
            'hard': counts.get('Hard', 0),
        }

    @classmethod
    def fetch_stats(cls, username: str) -> Optional[Dict[str, int]]:
        """
        Return solved counts for ``username``, or None if there are none.

        Results (including "no such user") are cached for
        LEETCODE_CACHE_SECONDS.

        Raises:
            LeetCodeError: On network failure or a response that is not a
                JSON object
        """
        cache_key = f"{cls.CACHE_PREFIX}{username.lower()}"
        cached = cache.get(cache_key)
        if cached is not None:
            return cached or None

        try:
            response = requests.post(
                settings.LEETCODE_GRAPHQL_URL,
                json={'query': STATS_QUERY, 'variables': {'username': username}},
                headers={'Content-Type': 'application/json'},
                timeout=settings.LEETCODE_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Failed to fetch LeetCode stats for '%s': %s", username, exc)
            raise LeetCodeError(str(exc)) from exc

        if not isinstance(payload, dict):
            logger.warning("Unexpected LeetCode response for '%s': %r", username, payload)
            raise LeetCodeError("Response is not a JSON object")

        summary = cls.summarize(payload)
        cache.set(cache_key, summary or {}, settings.LEETCODE_CACHE_SECONDS)
        return summary
