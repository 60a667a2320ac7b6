"""
Skills app serializers

Read serializers embed each category's skills; write serializers describe
the payloads accepted by POST and PUT.
"""
from rest_framework import serializers

from portfolio_site.text import DEFAULT_SKILL_LEVEL

from .models import Skill, SkillCategory


class SkillSerializer(serializers.ModelSerializer):
    class Meta:
        model = Skill
        fields = ['id', 'name', 'level']
        read_only_fields = fields


class SkillCategorySerializer(serializers.ModelSerializer):
    """Category with its skills in insertion order."""

    skills = SkillSerializer(many=True, read_only=True)

    class Meta:
        model = SkillCategory
        fields = ['id', 'title', 'skills', 'created_at']
        read_only_fields = fields


class SkillInputSerializer(serializers.Serializer):
    """
    One entry of an incoming skills collection.

    An entry without ``id`` is a new skill. ``category_id`` may be echoed
    back by clients but is ignored; affiliation comes from the category
    being written.
    """

    id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    name = serializers.CharField(max_length=100)
    level = serializers.IntegerField(min_value=0, max_value=100, default=DEFAULT_SKILL_LEVEL)


class SkillCategoryCreateSerializer(serializers.Serializer):
    """
    POST body: ``{title, skills?}`` or the bulk form ``{title, names}`` where
    ``names`` is a comma-separated string of skill names.
    """

    title = serializers.CharField(max_length=255)
    skills = SkillInputSerializer(many=True, required=False)
    names = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        if 'skills' in attrs and 'names' in attrs:
            raise serializers.ValidationError('Send either skills or names, not both.')
        return attrs


class SkillCategoryUpdateSerializer(serializers.Serializer):
    """PUT body: ``{id, title?, skills?}``; skills is a full replacement."""

    title = serializers.CharField(max_length=255, required=False)
    skills = SkillInputSerializer(many=True, required=False)
