"""
Signed-in session state for the admin editing mode.

``AuthSession`` is the one object UI code consults for "who is signed in"
and "may they edit". Its operations report failure through return values
and the ``error`` attribute instead of raising.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .api import APIError, PortfolioClient

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    success: bool
    error: Optional[str] = None


class AuthSession:
    """
    State: ``user`` (dict or None), ``is_loading``, ``error``.

    A successful login or register stores the returned token on the client,
    so later resource calls are authenticated.
    """

    def __init__(self, client: PortfolioClient):
        self.client = client
        self.user: Optional[Dict[str, Any]] = None
        self.is_loading = False
        self.error: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get('role') == 'ADMIN'

    def _start(self):
        self.is_loading = True
        self.error = None

    def _signed_in(self, payload: Dict[str, Any]):
        self.client.token = payload.get('token')
        self.user = payload.get('user')

    def login(self, email: str, password: str) -> bool:
        self._start()
        try:
            self._signed_in(self.client.login(email, password))
            return True
        except APIError as exc:
            self.error = str(exc)
            return False
        finally:
            self.is_loading = False

    def register(self, email: str, password: str, name: Optional[str] = None) -> AuthResult:
        self._start()
        try:
            self._signed_in(self.client.register(email, password, name))
            return AuthResult(success=True)
        except APIError as exc:
            self.error = str(exc)
            return AuthResult(success=False, error=self.error)
        finally:
            self.is_loading = False

    def restore(self, token: str) -> bool:
        """Resume a session from a stored token; clears it if rejected."""
        self._start()
        self.client.token = token
        try:
            self.user = self.client.me().get('user')
            return True
        except APIError as exc:
            self.client.token = None
            self.user = None
            if exc.status != 401:
                self.error = str(exc)
            return False
        finally:
            self.is_loading = False

    def logout(self) -> None:
        """Forget the user locally even if the server call fails."""
        if self.client.token:
            try:
                self.client.logout()
            except APIError as exc:
                logger.warning("Logout request failed: %s", exc)
        self.client.token = None
        self.user = None
        self.error = None
