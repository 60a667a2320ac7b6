"""
Skills Service Layer
Category CRUD plus reconciliation of a category's nested skills.

Updating a category with a ``skills`` collection replaces the persisted set:
skills whose id is not sent are deleted, skills with a known id are updated
in place, and skills without an id are inserted under the category.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from django.db import transaction

from portfolio_site.exceptions import store_errors
from portfolio_site.services import EntityService
from portfolio_site.text import DEFAULT_SKILL_LEVEL, split_tags
from .models import Skill, SkillCategory

logger = logging.getLogger(__name__)


@dataclass
class ReconcileResult:
    """Skill ids touched by one reconciliation, per kind of write."""

    deleted: List[int] = field(default_factory=list)
    updated: List[int] = field(default_factory=list)
    inserted: List[int] = field(default_factory=list)


class SkillCategoryService(EntityService):
    """
    CRUD for skill categories.

    Multi-row writes (create with skills, update with skills, delete) run in
    one transaction, so a failure part-way leaves the store unchanged.
    """

    model = SkillCategory

    @classmethod
    def get_queryset(cls):
        return super().get_queryset().prefetch_related('skills')

    @classmethod
    def create(cls, data: Dict) -> SkillCategory:
        """
        Insert a category and, if given, its initial skills.

        Ids on the initial skills are ignored; every one is a new row.
        """
        skills = data.get('skills') or []
        with store_errors(), transaction.atomic():
            category = SkillCategory.objects.create(title=data['title'])
            Skill.objects.bulk_create([
                Skill(
                    category=category,
                    name=skill['name'],
                    level=skill.get('level', DEFAULT_SKILL_LEVEL),
                )
                for skill in skills
            ])
        logger.info("Created skill category %s with %d skills", category.pk, len(skills))
        return category

    @classmethod
    def update(cls, pk: int, data: Dict) -> Optional[ReconcileResult]:
        """
        Apply ``title`` if present and reconcile ``skills`` if present.

        Returns the reconciliation result, or None when no skills were sent
        or the category does not exist.
        """
        result = None
        with store_errors(), transaction.atomic():
            if not SkillCategory.objects.filter(pk=pk).exists():
                logger.debug("Update of skill category %s matched no rows", pk)
                return None
            if 'title' in data:
                SkillCategory.objects.filter(pk=pk).update(title=data['title'])
            if 'skills' in data:
                result = cls.reconcile_skills(pk, data['skills'])
        return result

    @classmethod
    def reconcile_skills(
        cls,
        category_id: int,
        incoming: Iterable[Dict],
        existing_ids: Optional[Iterable[int]] = None,
    ) -> ReconcileResult:
        """
        Make the category's persisted skills match ``incoming``.

        Args:
            category_id: Category whose skills are replaced
            incoming: Skill dicts with ``name``, ``level`` and optional ``id``
            existing_ids: Snapshot of the category's persisted skill ids;
                fetched from the store when omitted

        Returns:
            ReconcileResult listing deleted, updated and inserted ids

        A claimed id that is not among the category's persisted ids (deleted
        meanwhile, missing despite being in ``existing_ids``, or owned by
        another category) is inserted as a new skill
        here; the other category's row is never modified. Repeated ids after
        the first occurrence are dropped.
        """
        incoming = list(incoming)
        result = ReconcileResult()

        with store_errors():
            if existing_ids is None:
                existing_ids = Skill.objects.filter(category_id=category_id).values_list('id', flat=True)
            existing_ids = set(existing_ids)

            claimed_ids = {skill['id'] for skill in incoming if skill.get('id') is not None}
            result.deleted = sorted(existing_ids - claimed_ids)
            if result.deleted:
                Skill.objects.filter(category_id=category_id, id__in=result.deleted).delete()

            seen = set()
            for skill in incoming:
                skill_id = skill.get('id')
                level = skill.get('level', DEFAULT_SKILL_LEVEL)

                if skill_id is not None and skill_id in seen:
                    logger.warning(
                        "Skill %s sent twice for category %s; keeping the first entry",
                        skill_id, category_id,
                    )
                    continue

                if skill_id is not None and skill_id in existing_ids:
                    seen.add(skill_id)
                    written = Skill.objects.filter(pk=skill_id, category_id=category_id).update(
                        name=skill['name'],
                        level=level,
                    )
                    if written:
                        result.updated.append(skill_id)
                        continue
                    # Snapshot was stale; the row is gone.
                    logger.warning(
                        "Skill %s no longer exists in category %s; inserting it as a new skill",
                        skill_id, category_id,
                    )
                elif skill_id is not None:
                    seen.add(skill_id)
                    logger.warning(
                        "Skill %s is not part of category %s; inserting it as a new skill",
                        skill_id, category_id,
                    )

                created = Skill.objects.create(
                    category_id=category_id,
                    name=skill['name'],
                    level=level,
                )
                result.inserted.append(created.pk)

        logger.info(
            "Reconciled skills for category %s: %d deleted, %d updated, %d inserted",
            category_id, len(result.deleted), len(result.updated), len(result.inserted),
        )
        return result

    @classmethod
    def delete(cls, pk: int) -> int:
        """Delete the category's skills, then the category itself."""
        with store_errors(), transaction.atomic():
            skills_deleted, _ = Skill.objects.filter(category_id=pk).delete()
            deleted, _ = SkillCategory.objects.filter(pk=pk).delete()
        logger.info("Deleted skill category %s and %d skills", pk, skills_deleted)
        return deleted

    @classmethod
    def add_from_names(cls, title: str, names: str) -> SkillCategory:
        """
        Bulk-add comma-separated skill names at the default level.

        If a category with the same title exists (case-insensitive), the
        skills are appended to it; otherwise a new category is created.
        """
        title = title.strip()
        skills = [{'name': name, 'level': DEFAULT_SKILL_LEVEL} for name in split_tags(names)]

        with store_errors(), transaction.atomic():
            category = (
                SkillCategory.objects.filter(title__iexact=title)
                .order_by('created_at', 'id')
                .first()
            )
            if category is None:
                return cls.create({'title': title, 'skills': skills})

            Skill.objects.bulk_create([
                Skill(category=category, name=skill['name'], level=skill['level'])
                for skill in skills
            ])
        logger.info("Appended %d skills to existing category %s", len(skills), category.pk)
        return category
