from django.contrib import admin
from .models import Skill, SkillCategory


class SkillInline(admin.TabularInline):
    model = Skill
    extra = 1


@admin.register(SkillCategory)
class SkillCategoryAdmin(admin.ModelAdmin):
    """Admin interface for SkillCategory with its skills inline."""

    list_display = ['title', 'created_at']
    search_fields = ['title', 'skills__name']
    readonly_fields = ['created_at']
    inlines = [SkillInline]
