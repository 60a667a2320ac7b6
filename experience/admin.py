from django.contrib import admin
from .models import Experience


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    """Admin interface for Experience."""

    list_display = ['title', 'company', 'start_date', 'end_date', 'created_at']
    search_fields = ['title', 'company', 'description']
    readonly_fields = ['created_at']
