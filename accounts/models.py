"""
Accounts app models

Custom User model extending AbstractUser with a portfolio role.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Portfolio user.

    Only users with the ADMIN role (or superusers) may change portfolio
    content. Everyone else, including anonymous visitors, is read-only.
    Users sign in with their email address.
    """

    ADMIN = 'ADMIN'
    VIEWER = 'VIEWER'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (VIEWER, 'Viewer'),
    ]

    email = models.EmailField(unique=True)
    display_name = models.CharField(max_length=150, blank=True)
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=VIEWER,
    )

    def __str__(self):
        return f"{self.email} ({self.role})"

    @property
    def is_portfolio_admin(self) -> bool:
        """True when this user may edit portfolio content."""
        return self.is_active and (self.role == self.ADMIN or self.is_superuser)

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
