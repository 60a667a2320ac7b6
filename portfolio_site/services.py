"""
Entity Service Layer
Create/read/update/delete for flat portfolio entities (no nested children).
"""
import logging
from typing import Dict, List

from .exceptions import store_errors

logger = logging.getLogger(__name__)


class EntityService:
    """
    Base service for one entity kind.

    Subclasses set ``model``. Updates are field-level merges: only the keys
    handed in are written, and ``id`` is never writable. An update or delete
    matching no row is not an error.
    """

    model = None

    @classmethod
    def get_queryset(cls):
        return cls.model.objects.order_by('-created_at', '-id')

    @classmethod
    def list(cls) -> List:
        """Return every row, newest first."""
        with store_errors():
            return list(cls.get_queryset())

    @classmethod
    def create(cls, data: Dict):
        """Insert one row and return it with its assigned id."""
        data = {k: v for k, v in data.items() if k != 'id'}
        with store_errors():
            instance = cls.model.objects.create(**data)
        logger.info("Created %s %s", cls.model.__name__, instance.pk)
        return instance

    @classmethod
    def update(cls, pk: int, data: Dict) -> int:
        """
        Merge ``data`` into the row with primary key ``pk``.

        Returns the number of rows written (0 or 1).
        """
        fields = {k: v for k, v in data.items() if k != 'id'}
        if not fields:
            return 0
        with store_errors():
            updated = cls.model.objects.filter(pk=pk).update(**fields)
        if not updated:
            logger.debug("Update of %s %s matched no rows", cls.model.__name__, pk)
        return updated

    @classmethod
    def delete(cls, pk: int) -> int:
        """Remove the row with primary key ``pk``; returns rows deleted."""
        with store_errors():
            deleted, _ = cls.model.objects.filter(pk=pk).delete()
        logger.info("Deleted %s %s", cls.model.__name__, pk)
        return deleted
