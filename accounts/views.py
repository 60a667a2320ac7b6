"""
Accounts app views

Endpoints for signing in and out of the admin editing mode.
"""
from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LoginSerializer, RegisterSerializer, UserSerializer
from .services import AuthService


class LoginView(APIView):
    """
    POST /api/auth/login - Exchange email/password for a bearer token.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AuthService.authenticate_credentials(
            serializer.validated_data['email'],
            serializer.validated_data['password'],
        )
        if user is None:
            return Response(
                {'error': 'Invalid credentials'},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        return Response({
            'success': True,
            'user': UserSerializer(user).data,
            'token': AuthService.issue_token(user),
        })


class LogoutView(APIView):
    """
    POST /api/auth/logout - Revoke the caller's token.
    """

    permission_classes = [IsAuthenticated]

    def post(self, request):
        AuthService.revoke_token(request.user)
        return Response({'success': True})


class MeView(APIView):
    """
    GET /api/auth/me - Return the user owning the presented token.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({'success': True, 'user': UserSerializer(request.user).data})


class RegisterView(APIView):
    """
    POST /api/auth/register - Create an admin account.

    Disabled unless PORTFOLIO_ALLOW_REGISTRATION is set.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        if not settings.PORTFOLIO_ALLOW_REGISTRATION:
            return Response(
                {'error': 'Registration is disabled'},
                status=status.HTTP_403_FORBIDDEN,
            )

        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AuthService.register(
            serializer.validated_data['email'],
            serializer.validated_data['password'],
            serializer.validated_data.get('name', ''),
        )
        return Response(
            {
                'success': True,
                'user': UserSerializer(user).data,
                'token': AuthService.issue_token(user),
            },
            status=status.HTTP_201_CREATED,
        )
