"""
Serializer fields shared by the portfolio apps.
"""
from rest_framework import serializers

from .text import split_lines, split_tags


class TextListField(serializers.ListField):
    """
    List of strings that also accepts the raw text typed into an edit form.

    With ``separator='comma'`` the string "a, b" becomes ["a", "b"]; with
    ``separator='line'`` each non-blank line is one entry.
    """

    def __init__(self, separator='comma', **kwargs):
        self.separator = separator
        kwargs.setdefault('child', serializers.CharField(max_length=500))
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = split_lines(data) if self.separator == 'line' else split_tags(data)
        return super().to_internal_value(data)
