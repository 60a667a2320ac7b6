"""
Accounts app permissions

Capability checks gating writes to portfolio content.
"""
from rest_framework import permissions


def has_admin_capability(user) -> bool:
    """
    Return True when ``user`` may see and use edit affordances.
    """
    if user is None or not getattr(user, 'is_authenticated', False):
        return False
    return bool(getattr(user, 'is_portfolio_admin', False))


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Permission that allows:
    - Anyone to read (GET/HEAD/OPTIONS)
    - Portfolio admins to write
    """

    message = 'Admin access required.'

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return has_admin_capability(request.user)
