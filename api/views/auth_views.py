"""
API views for admin console authentication.

Session based: a successful login sets the Django session cookie that the
admin CRUD endpoints check.
"""

import logging

from django.contrib.auth import login, logout
from django.middleware.csrf import get_token
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from ..serializers import LoginSerializer, UserSerializer

logger = logging.getLogger(__name__)


@api_view(["POST"])
@permission_classes([AllowAny])
def login_view(request):
    """Log a user in and start a session."""
    serializer = LoginSerializer(data=request.data, context={"request": request})
    ip_address = request.META.get("REMOTE_ADDR", "127.0.0.1")

    if serializer.is_valid():
        user = serializer.validated_data["user"]
        login(request, user)
        logger.info(f"User {user.id} logged in successfully from {ip_address}")
        return Response(
            {"message": "Login successful", "user": UserSerializer(user).data},
            status=status.HTTP_200_OK,
        )

    username = request.data.get("username", "")
    logger.warning(f"Failed login attempt for '{username}' from {ip_address}")
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def logout_view(request):
    """Log the current user out."""
    user_id = request.user.id
    logout(request)
    logger.info(f"User {user_id} logged out successfully")
    return Response({"message": "Logout successful"}, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def user_info_view(request):
    """Get current user information."""
    return Response(
        {"user": UserSerializer(request.user).data}, status=status.HTTP_200_OK
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def csrf_token_view(request):
    """Hand the browser a CSRF token for session-authenticated writes."""
    return Response({"csrfToken": get_token(request)}, status=status.HTTP_200_OK)
