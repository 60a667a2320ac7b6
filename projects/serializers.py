"""
Projects app serializers

Serializers for Project model.
"""
from rest_framework import serializers

from portfolio_site.fields import TextListField
from .models import Project


class ProjectSerializer(serializers.ModelSerializer):
    """
    Serializer for Project.

    Optional URLs accept null/empty and are stored as empty strings.
    """

    image = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    link = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    github = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    technologies = TextListField(
        separator='comma',
        child=serializers.CharField(max_length=100),
        required=False,
    )

    class Meta:
        model = Project
        fields = [
            'id',
            'title',
            'description',
            'image',
            'technologies',
            'link',
            'github',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate(self, attrs):
        for field in ('image', 'link', 'github'):
            if field in attrs and attrs[field] is None:
                attrs[field] = ''
        return attrs
