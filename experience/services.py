"""
Experience Service Layer
"""
from portfolio_site.services import EntityService
from .models import Experience


class ExperienceService(EntityService):
    """CRUD for work-history entries."""

    model = Experience
