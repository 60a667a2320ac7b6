from django.contrib import admin
from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin interface for Project."""

    list_display = ['title', 'link', 'github', 'created_at']
    search_fields = ['title', 'description']
    readonly_fields = ['created_at']
