"""
Skills app URLs
"""
from django.urls import path
from .views import SkillCategoryCollectionView

urlpatterns = [
    path('', SkillCategoryCollectionView.as_view(), name='skills'),
]
