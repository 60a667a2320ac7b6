"""
Experience app serializers

Serializers for Experience model. Wire names for dates and the icon are
camelCase (startDate, endDate, iconUrl).
"""
from rest_framework import serializers

from portfolio_site.fields import TextListField
from .models import Experience


class ExperienceSerializer(serializers.ModelSerializer):
    """
    Serializer for Experience.

    ``achievements`` accepts a list or newline-separated text.
    """

    startDate = serializers.CharField(source='start_date', max_length=50, required=False, allow_blank=True)
    endDate = serializers.CharField(source='end_date', max_length=50, required=False, allow_blank=True)
    iconUrl = serializers.URLField(
        source='icon_url', max_length=500, required=False, allow_blank=True, allow_null=True,
    )
    achievements = TextListField(separator='line', required=False)

    class Meta:
        model = Experience
        fields = [
            'id',
            'title',
            'company',
            'location',
            'startDate',
            'endDate',
            'period',
            'description',
            'achievements',
            'iconUrl',
            'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate(self, attrs):
        if 'icon_url' in attrs and attrs['icon_url'] is None:
            attrs['icon_url'] = ''
        return attrs
