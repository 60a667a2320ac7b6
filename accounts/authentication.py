"""
Accounts app authentication

Bearer tokens issued by the login endpoint are the only API credential.
"""
from rest_framework import exceptions
from rest_framework.authentication import TokenAuthentication
from rest_framework.permissions import SAFE_METHODS


class BearerTokenAuthentication(TokenAuthentication):
    """
    Accepts ``Authorization: Bearer <key>`` headers.

    On reads a bad token leaves the caller anonymous instead of failing,
    since public content needs no credential. Writes still get 401.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except exceptions.AuthenticationFailed:
            if request.method in SAFE_METHODS:
                return None
            raise
