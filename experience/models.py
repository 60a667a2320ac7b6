"""
Experience app models

Experience model for the work-history timeline.
"""
from django.db import models


class Experience(models.Model):
    """
    One entry of the work-history timeline.

    Dates are free-form strings ("Jan 2023", "Present") and are never parsed.
    """

    title = models.CharField(max_length=255)
    company = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=255, blank=True)
    start_date = models.CharField(max_length=50, blank=True)
    end_date = models.CharField(max_length=50, blank=True)
    period = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    achievements = models.JSONField(default=list, blank=True)
    icon_url = models.URLField(max_length=500, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        company = self.company or "Unknown Company"
        return f"{self.title} at {company}"

    class Meta:
        verbose_name = 'Experience'
        verbose_name_plural = 'Experience'
        ordering = ['-created_at', '-id']
