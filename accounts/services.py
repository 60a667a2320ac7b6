"""
Accounts Service Layer
Credential checks and token issuance for the portfolio API.
"""
import logging
from typing import Optional

from rest_framework.authtoken.models import Token

from portfolio_site.exceptions import store_errors
from .models import User

logger = logging.getLogger(__name__)


class AuthService:
    """Single source of truth for who may sign in."""

    @staticmethod
    def authenticate_credentials(email: str, password: str) -> Optional[User]:
        """
        Return the active user matching ``email``/``password``, or None.

        The password hasher still runs for unknown emails so response time
        does not reveal which addresses are registered.
        """
        with store_errors():
            user = User.objects.filter(email__iexact=email.strip()).first()
        if user is None:
            User().set_password(password)
            return None
        if not user.is_active or not user.check_password(password):
            return None
        return user

    @staticmethod
    def issue_token(user: User) -> str:
        """Return the user's API token, creating it on first login."""
        with store_errors():
            token, created = Token.objects.get_or_create(user=user)
        if created:
            logger.info("Issued API token for user %s", user.pk)
        return token.key

    @staticmethod
    def revoke_token(user: User) -> None:
        """Delete the user's API token; later requests with it get 401."""
        with store_errors():
            Token.objects.filter(user=user).delete()
        logger.info("Revoked API token for user %s", user.pk)

    @staticmethod
    def register(email: str, password: str, name: str = '') -> User:
        """
        Create a portfolio admin account.

        The site has a single owner, so registered accounts get the ADMIN
        role. Callers must check that registration is enabled.
        """
        with store_errors():
            user = User(
                username=email,
                email=email,
                display_name=name,
                role=User.ADMIN,
            )
            user.set_password(password)
            user.save()
        logger.info("Registered portfolio user %s", user.pk)
        return user
