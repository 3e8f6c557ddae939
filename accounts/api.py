from __future__ import annotations

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from core.conf import get_navigation_settings
from core.permissions import HasRoutePermission, build_permission_set

from .serializers import UserPermissionsSerializer
from .services import get_user_permissions, set_user_permissions

User = get_user_model()


class UserPermissionsViewSet(ViewSet):
    """Leitura e gravação da lista de rotas permitidas de um usuário.

    O acesso exige que o solicitante tenha ``/users/<pk>`` concedido, por
    exemplo via ``/users/*`` ou ``*``.
    """

    permission_classes = [IsAuthenticated, HasRoutePermission]

    def get_required_route(self) -> str:
        return f"/users/{self.kwargs.get('pk', '')}"

    def _payload(self, user) -> dict:
        permissions = get_user_permissions(user)
        return {
            "permissions": permissions,
            "allow_all": build_permission_set(permissions).allow_all,
            "options": list(get_navigation_settings().permission_options),
        }

    @extend_schema(responses=UserPermissionsSerializer)
    def retrieve(self, request, pk=None) -> Response:
        user = get_object_or_404(User, pk=pk)
        return Response(UserPermissionsSerializer(self._payload(user)).data)

    @extend_schema(
        request=UserPermissionsSerializer,
        responses=UserPermissionsSerializer,
        examples=[
            OpenApiExample(
                "Acesso a reservas e usuários",
                request_only=True,
                value={"permissions": ["/reservations", "/users/*"]},
            ),
            OpenApiExample("Acesso total", request_only=True, value={"permissions": ["*"]}),
        ],
    )
    def update(self, request, pk=None) -> Response:
        user = get_object_or_404(User, pk=pk)
        serializer = UserPermissionsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        set_user_permissions(user, serializer.validated_data["permissions"])
        return Response(UserPermissionsSerializer(self._payload(user)).data)
