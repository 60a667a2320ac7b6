"""
Experience app URLs
"""
from django.urls import path
from .views import ExperienceCollectionView

urlpatterns = [
    path('', ExperienceCollectionView.as_view(), name='experience'),
]
