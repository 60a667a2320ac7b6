"""
Projects app views
"""
from portfolio_site.api import EntityCollectionView

from .serializers import ProjectSerializer
from .services import ProjectService


class ProjectCollectionView(EntityCollectionView):
    """
    GET/POST/PUT/DELETE /api/projects

    Reads are public; writes need an admin token.
    """

    service = ProjectService
    serializer_class = ProjectSerializer
    kind = 'Project'
