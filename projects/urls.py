"""
Projects app URLs
"""
from django.urls import path
from .views import ProjectCollectionView

urlpatterns = [
    path('', ProjectCollectionView.as_view(), name='projects'),
]
