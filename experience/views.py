"""
Experience app views
"""
from portfolio_site.api import EntityCollectionView

from .serializers import ExperienceSerializer
from .services import ExperienceService


class ExperienceCollectionView(EntityCollectionView):
    """
    GET/POST/PUT/DELETE /api/experience
    """

    service = ExperienceService
    serializer_class = ExperienceSerializer
    kind = 'Experience'
