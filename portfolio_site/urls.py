"""
URL configuration for portfolio_site project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include

from portfolio_site.views import home

urlpatterns = [
    # Frontend views
    path('', home, name='home'),

    # API views
    path('admin/', admin.site.urls),
    path('api/projects', include('projects.urls')),
    path('api/experience', include('experience.urls')),
    path('api/skills', include('skills.urls')),
    path('api/leetcode', include('leetcode.urls')),
    path('api/auth/', include('accounts.urls')),
]
