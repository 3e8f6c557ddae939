from __future__ import annotations

from django.http import Http404
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from .navigation import build_menu, toggle_section
from .paths import normalize
from .serializers import RenderedNodeSerializer, SectionToggleSerializer


class NavigationViewSet(ViewSet):
    """Árvore de navegação do usuário atual e alternância de seções.

    Visitantes anônimos recebem apenas o que o curinga global concederia,
    ou seja, nada.
    """

    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[OpenApiParameter("location", str, description="Página atual do cliente")],
        responses=RenderedNodeSerializer(many=True),
    )
    def list(self, request) -> Response:
        location = request.query_params.get("location")
        if location is not None:
            request.current_location = normalize(location)
        menu = build_menu(request)
        return Response(RenderedNodeSerializer(menu, many=True).data)

    @extend_schema(
        request=SectionToggleSerializer,
        examples=[
            OpenApiExample(
                "Alternar",
                value={"section_id": "admin", "location": "/users"},
                request_only=True,
            )
        ],
    )
    @action(detail=False, methods=["post"])
    def toggle(self, request) -> Response:
        serializer = SectionToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        section_id = serializer.validated_data["section_id"]
        is_open = toggle_section(
            request, section_id, location=serializer.validated_data.get("location")
        )
        if is_open is None:
            raise Http404
        return Response({"section_id": section_id, "open": is_open})
