"""
Projects Service Layer
"""
from portfolio_site.services import EntityService
from .models import Project


class ProjectService(EntityService):
    """CRUD for portfolio projects."""

    model = Project
