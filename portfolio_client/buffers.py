"""
Edit buffers

An edit buffer is the local working copy behind one open edit dialog. All
mutations stay in memory; nothing reaches the API until ``flush()``.
``discard()`` makes no request at all. After either, the buffer is closed.

After a flush, re-list the resource to see the authoritative state; the
buffer's contents are only what was sent.
"""
import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from portfolio_site.text import DEFAULT_SKILL_LEVEL, join_lines, join_tags, split_lines, split_tags

logger = logging.getLogger(__name__)


class BufferClosed(Exception):
    """The buffer was already flushed or discarded."""


class EditBuffer:
    """
    Working copy of one entity.

    Seeded with an existing entity, ``flush()`` sends an update carrying the
    whole working copy; seeded with nothing, it sends a create.
    """

    read_only_fields = ('id', 'created_at')

    def __init__(self, resource, entity: Optional[Dict[str, Any]] = None):
        self.resource = resource
        self.entity_id = (entity or {}).get('id')
        self.fields: Dict[str, Any] = {
            key: copy.deepcopy(value)
            for key, value in (entity or {}).items()
            if key not in self.read_only_fields
        }
        self.closed = False

    @property
    def is_new(self) -> bool:
        return self.entity_id is None

    def _check_open(self):
        if self.closed:
            raise BufferClosed("Edit buffer is closed")

    def get(self, name: str, default=None):
        return self.fields.get(name, default)

    def set(self, name: str, value) -> None:
        self._check_open()
        if name in self.read_only_fields:
            raise KeyError(f"{name} is read-only")
        self.fields[name] = value

    def payload(self) -> Dict[str, Any]:
        """The request body ``flush()`` would send (without the id)."""
        return copy.deepcopy(self.fields)

    def flush(self):
        """Send the working copy; one request, no retries."""
        self._check_open()
        payload = self.payload()
        if self.is_new:
            result = self.resource.create(payload)
        else:
            result = self.resource.update(self.entity_id, payload)
        self.closed = True
        return result

    def discard(self) -> None:
        self.closed = True


class ProjectBuffer(EditBuffer):
    """Project buffer; technologies are edited as comma-separated text."""

    def technologies_text(self) -> str:
        return join_tags(self.fields.get('technologies'))

    def set_technologies_text(self, text: str) -> None:
        self.set('technologies', split_tags(text))


class ExperienceBuffer(EditBuffer):
    """Experience buffer; achievements are edited one per line."""

    def achievements_text(self) -> str:
        return join_lines(self.fields.get('achievements'))

    def set_achievements_text(self, text: str) -> None:
        self.set('achievements', split_lines(text))


@dataclass
class SkillDraft:
    """Staged skill; ``id`` is None until the server has stored it."""

    name: str = ''
    level: int = DEFAULT_SKILL_LEVEL
    id: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        data = {'name': self.name, 'level': self.level}
        if self.id is not None:
            data['id'] = self.id
        return data


class SkillCategoryBuffer(EditBuffer):
    """
    Category buffer holding an ordered list of skill drafts.

    Flushing always sends the complete ``skills`` list, which the server
    treats as a full replacement: drafts removed here are deleted there.
    """

    def __init__(self, resource, entity: Optional[Dict[str, Any]] = None):
        entity = dict(entity or {})
        skills = entity.pop('skills', None) or []
        super().__init__(resource, entity)
        self.skills: List[SkillDraft] = [
            SkillDraft(
                name=skill.get('name', ''),
                level=skill.get('level', DEFAULT_SKILL_LEVEL),
                id=skill.get('id'),
            )
            for skill in skills
        ]

    def add_skill(self, name: str = '', level: int = DEFAULT_SKILL_LEVEL) -> SkillDraft:
        self._check_open()
        draft = SkillDraft(name=name, level=level)
        self.skills.append(draft)
        return draft

    def add_skills_text(self, text: str) -> List[SkillDraft]:
        """Append one default-level draft per comma-separated name."""
        return [self.add_skill(name) for name in split_tags(text)]

    def remove_skill(self, index: int) -> SkillDraft:
        self._check_open()
        return self.skills.pop(index)

    def update_skill(self, index: int, name: Optional[str] = None, level: Optional[int] = None) -> SkillDraft:
        self._check_open()
        draft = self.skills[index]
        if level is not None:
            if not 0 <= level <= 100:
                raise ValueError("Skill level must be between 0 and 100")
            draft.level = level
        if name is not None:
            draft.name = name
        return draft

    def payload(self) -> Dict[str, Any]:
        data = super().payload()
        data['skills'] = [draft.to_payload() for draft in self.skills]
        return data


class DeleteConfirmation:
    """
    Two-step delete: ``request(id)`` arms, ``confirm()`` deletes.

    Nothing is sent until confirm; ``cancel()`` disarms.
    """

    def __init__(self, resource):
        self.resource = resource
        self.pending_id = None

    @property
    def armed(self) -> bool:
        return self.pending_id is not None

    def request(self, entity_id) -> None:
        self.pending_id = entity_id

    def cancel(self) -> None:
        self.pending_id = None

    def confirm(self):
        if self.pending_id is None:
            raise RuntimeError("No delete has been requested")
        entity_id, self.pending_id = self.pending_id, None
        logger.info("Deleting %s %s", self.resource.path, entity_id)
        return self.resource.delete(entity_id)
