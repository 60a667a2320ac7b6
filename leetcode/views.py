"""
LeetCode app views
"""
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import LeetCodeError, LeetCodeService


class LeetCodeStatsView(APIView):
    """
    GET /api/leetcode?username= - Solved-problem counts for a public profile.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        username = (request.query_params.get('username') or '').strip()
        if not username:
            return Response(
                {'error': 'Missing username parameter'},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            stats = LeetCodeService.fetch_stats(username)
        except LeetCodeError:
            return Response(
                {'error': 'Failed to fetch LeetCode stats'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if stats is None:
            return Response(
                {'error': 'No data found for user'},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(stats)
