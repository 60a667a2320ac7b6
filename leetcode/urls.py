"""
LeetCode app URLs
"""
from django.urls import path
from .views import LeetCodeStatsView

urlpatterns = [
    path('', LeetCodeStatsView.as_view(), name='leetcode-stats'),
]
