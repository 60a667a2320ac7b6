"""
HTTP client for the portfolio API.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class APIError(Exception):
    """A request failed; ``status`` is None for network errors."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class Resource:
    """
    One collection endpoint (``/projects``, ``/experience``, ``/skills``).

    The target id travels in the PUT body and the DELETE query string.
    """

    def __init__(self, client: 'PortfolioClient', path: str):
        self.client = client
        self.path = path

    def list(self) -> List[Dict[str, Any]]:
        return self.client.request('GET', self.path).get('data') or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.client.request('POST', self.path, json=data).get('data')

    def update(self, entity_id, data: Dict[str, Any]) -> Dict[str, Any]:
        body = dict(data)
        body['id'] = entity_id
        return self.client.request('PUT', self.path, json=body)

    def delete(self, entity_id) -> Dict[str, Any]:
        return self.client.request('DELETE', self.path, params={'id': entity_id})


class PortfolioClient:
    """
    Talks to the API rooted at ``base_url`` (e.g. "https://example.com/api").

    ``token`` is sent as a bearer credential when set.
    """

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

        self.projects = Resource(self, '/projects')
        self.experience = Resource(self, '/experience')
        self.skills = Resource(self, '/skills')

    def request(self, method: str, endpoint: str, params=None, json=None) -> Dict[str, Any]:
        """
        Send one request and return the decoded JSON body.

        Raises:
            APIError: On network failure or any non-2xx response, carrying
                the server's ``error`` message when it sent one
        """
        headers = {'Content-Type': 'application/json'}
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"

        try:
            response = self.session.request(
                method,
                f"{self.base_url}{endpoint}",
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request %s %s failed: %s", method, endpoint, exc)
            raise APIError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not response.ok:
            message = payload.get('error') if isinstance(payload, dict) else None
            message = message or f"HTTP {response.status_code}"
            logger.error("API error on %s %s: %s", method, endpoint, message)
            raise APIError(message, status=response.status_code)
        return payload

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self.request('POST', '/auth/login', json={'email': email, 'password': password})

    def register(self, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
        body = {'email': email, 'password': password}
        if name:
            body['name'] = name
        return self.request('POST', '/auth/register', json=body)

    def logout(self) -> Dict[str, Any]:
        return self.request('POST', '/auth/logout')

    def me(self) -> Dict[str, Any]:
        return self.request('GET', '/auth/me')

    def leetcode_stats(self, username: str) -> Dict[str, int]:
        return self.request('GET', '/leetcode', params={'username': username})
