"""
Projects app models

Project model for portfolio showcase entries.
"""
from django.db import models


class Project(models.Model):
    """
    A showcased project.

    ``technologies`` is an ordered list of tag strings; order is kept as
    entered and duplicates are allowed.
    """

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    image = models.URLField(max_length=500, blank=True)
    technologies = models.JSONField(default=list, blank=True)
    link = models.URLField(max_length=500, blank=True)
    github = models.URLField(max_length=500, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.title or "Untitled Project"

    class Meta:
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
        ordering = ['-created_at', '-id']
