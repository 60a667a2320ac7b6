"""
Main project views for frontend pages.
"""
from django.conf import settings
from django.shortcuts import render

from accounts.permissions import has_admin_capability
from experience.services import ExperienceService
from projects.services import ProjectService
from skills.services import SkillCategoryService


def home(request):
    """
    Single-page portfolio.

    ``is_admin`` tells the page whether to show edit affordances; the API
    checks the caller's token again on every write.
    """
    context = {
        'projects': ProjectService.list(),
        'experience': ExperienceService.list(),
        'skill_categories': SkillCategoryService.list(),
        'leetcode_username': settings.LEETCODE_USERNAME,
        'is_admin': has_admin_capability(request.user),
    }
    return render(request, 'home.html', context)
