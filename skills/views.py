"""
Skills app views
"""
from rest_framework.response import Response

from portfolio_site.api import EntityCollectionView

from .serializers import (
    SkillCategoryCreateSerializer,
    SkillCategorySerializer,
    SkillCategoryUpdateSerializer,
)
from .services import SkillCategoryService


class SkillCategoryCollectionView(EntityCollectionView):
    """
    GET/POST/PUT/DELETE /api/skills

    - POST {title, skills?}: create a category with initial skills
    - POST {title, names}: bulk-add comma-separated names, merging into an
      existing category with the same title
    - PUT {id, title?, skills?}: skills replaces the category's whole set
    - DELETE ?id=: removes the category and all of its skills
    """

    service = SkillCategoryService
    serializer_class = SkillCategorySerializer
    kind = 'Category'

    def post(self, request):
        serializer = SkillCategoryCreateSerializer(data=self.request_body(request))
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if 'names' in data:
            category = SkillCategoryService.add_from_names(data['title'], data['names'])
        else:
            category = SkillCategoryService.create(data)
        return Response({'success': True, 'data': SkillCategorySerializer(category).data})

    def put(self, request):
        data = self.request_body(request)
        pk = self.parse_id(data.get('id'))
        serializer = SkillCategoryUpdateSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        SkillCategoryService.update(pk, serializer.validated_data)
        return Response({'success': True})
