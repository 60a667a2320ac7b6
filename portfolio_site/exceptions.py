"""
API error handling

Every failure leaving the JSON API is rendered as a flat ``{"error": "..."}``
envelope. Store failures keep the underlying database message.
"""
import logging
from contextlib import contextmanager

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class StoreError(exceptions.APIException):
    """The backing store rejected or could not serve a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Store unavailable.'
    default_code = 'store_error'


@contextmanager
def store_errors():
    """
    Convert database exceptions raised inside the block into StoreError.

    Used by the entity services around every ORM call so callers see one
    error type for "the store failed", whatever the driver raised.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Store operation failed: %s", exc)
        raise StoreError(str(exc)) from exc


def _flatten(detail):
    """Collapse DRF error detail (dict/list/str) into a single message."""
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            message = _flatten(value)
            if field in ('non_field_errors', 'detail'):
                parts.append(message)
            else:
                parts.append(f"{field}: {message}")
        return '; '.join(parts)
    if isinstance(detail, (list, tuple)):
        return ' '.join(_flatten(item) for item in detail)
    return str(detail)


def portfolio_exception_handler(exc, context):
    """
    DRF exception handler producing ``{"error": message}`` bodies.
    """
    if isinstance(exc, DatabaseError):
        logger.exception("Unhandled store failure: %s", exc)
        return Response({'error': str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = exception_handler(exc, context)
    if response is None:
        return None

    response.data = {'error': _flatten(response.data)}
    return response
