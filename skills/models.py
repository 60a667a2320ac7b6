"""
Skills app models

SkillCategory owns its Skills; a skill never moves between categories.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from portfolio_site.text import DEFAULT_SKILL_LEVEL


class SkillCategory(models.Model):
    """A titled group of skills, e.g. "Languages" or "Cloud"."""

    title = models.CharField(max_length=255)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.title

    class Meta:
        verbose_name = 'Skill Category'
        verbose_name_plural = 'Skill Categories'
        ordering = ['-created_at', '-id']


class Skill(models.Model):
    """
    One skill with a proficiency level from 0 to 100.

    Two skills in a category may share a name; identity is the id only.
    """

    category = models.ForeignKey(
        SkillCategory,
        on_delete=models.CASCADE,
        related_name='skills',
    )
    name = models.CharField(max_length=100)
    level = models.PositiveSmallIntegerField(
        default=DEFAULT_SKILL_LEVEL,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )

    def __str__(self):
        return f"{self.name} ({self.level})"

    class Meta:
        verbose_name = 'Skill'
        verbose_name_plural = 'Skills'
        ordering = ['id']
