"""
Helpers for the free-text list inputs used by the editing forms.

Kept free of Django imports so the API client can share them.
"""

DEFAULT_SKILL_LEVEL = 80


def split_tags(text):
    """
    Turn "Django, React ,  Docker" into ["Django", "React", "Docker"].

    Order and duplicates are kept; empty entries are dropped.
    """
    return [tag.strip() for tag in (text or '').split(',') if tag.strip()]


def split_lines(text):
    """One entry per non-blank line, trimmed."""
    return [line.strip() for line in (text or '').splitlines() if line.strip()]


def join_tags(tags):
    return ', '.join(tags or [])


def join_lines(lines):
    return '\n'.join(lines or [])
