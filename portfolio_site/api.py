"""
Shared API views

Collection-style endpoints: one URL per entity kind, the target id carried
in the PUT body or the DELETE query string, and every success wrapped in a
``{"success": true, ...}`` envelope.
"""
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView


class EntityCollectionView(APIView):
    """
    GET    - list all entities
    POST   - create one entity
    PUT    - merge fields into the entity named by body ``id``
    DELETE - delete the entity named by ``?id=``

    Subclasses set ``service``, ``serializer_class`` and ``kind`` (the
    label used in error messages, e.g. "Project").
    """

    service = None
    serializer_class = None
    kind = 'Entity'

    def request_body(self, request):
        """The parsed body, which must be a JSON object."""
        if not isinstance(request.data, dict):
            raise serializers.ValidationError('Request body must be a JSON object')
        return request.data

    def parse_id(self, raw):
        """Validate a client-supplied identifier."""
        if raw is None or raw == '':
            raise serializers.ValidationError(f'{self.kind} ID required')
        if isinstance(raw, bool):
            raise serializers.ValidationError(f'Invalid {self.kind} ID')
        if isinstance(raw, float) and not raw.is_integer():
            raise serializers.ValidationError(f'Invalid {self.kind} ID')
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise serializers.ValidationError(f'Invalid {self.kind} ID')

    def get(self, request):
        items = self.service.list()
        serializer = self.serializer_class(items, many=True)
        return Response({'success': True, 'data': serializer.data})

    def post(self, request):
        serializer = self.serializer_class(data=self.request_body(request))
        serializer.is_valid(raise_exception=True)
        instance = self.service.create(serializer.validated_data)
        return Response({'success': True, 'data': self.serializer_class(instance).data})

    def put(self, request):
        data = self.request_body(request)
        pk = self.parse_id(data.get('id'))
        serializer = self.serializer_class(data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.service.update(pk, serializer.validated_data)
        return Response({'success': True})

    def delete(self, request):
        pk = self.parse_id(request.query_params.get('id'))
        self.service.delete(pk)
        return Response({'success': True})
