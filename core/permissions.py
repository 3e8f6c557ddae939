from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Sequence

from django.contrib.auth.mixins import UserPassesTestMixin
from rest_framework.permissions import BasePermission

from .metrics import PERMISSION_ENTRIES_DROPPED
from .paths import normalize
from .patterns import is_global_wildcard, matches

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True)
class PermissionSet:
    """Conjunto canônico de padrões de rota concedidos a um usuário."""

    patterns: frozenset[str] = field(default_factory=frozenset)
    allow_all: bool = False

    def can_access(self, target_href: str) -> bool:
        if self.allow_all:
            return True
        return any(matches(pattern, target_href) for pattern in self.patterns)


EMPTY_PERMISSION_SET = PermissionSet()


def build_permission_set(
    raw_permissions: Sequence[object] | AbstractSet[object] | None,
) -> PermissionSet:
    """Constrói o ``PermissionSet`` a partir de uma lista não confiável.

    Só listas, tuplas e conjuntos são aceitos; qualquer outro valor (inclusive
    geradores) equivale a uma lista vazia. Entradas que não são strings são
    descartadas sem erro.
    """

    if not isinstance(raw_permissions, _SEQUENCE_TYPES):
        return EMPTY_PERMISSION_SET

    patterns: set[str] = set()
    for entry in raw_permissions:
        if not isinstance(entry, str):
            PERMISSION_ENTRIES_DROPPED.inc()
            continue
        patterns.add(normalize(entry))

    return PermissionSet(
        patterns=frozenset(patterns),
        allow_all=any(is_global_wildcard(pattern) for pattern in patterns),
    )


def can_access(permission_set: PermissionSet, target_href: str) -> bool:
    return permission_set.can_access(target_href)


def permission_set_for_user(user) -> PermissionSet:
    """Deriva o conjunto de permissões do registro do usuário (negação por padrão)."""
    from accounts.services import get_user_record

    record = get_user_record(user)
    if record is None:
        return EMPTY_PERMISSION_SET
    return build_permission_set(record.get("permissions"))


class RoutePermissionRequiredMixin(UserPassesTestMixin):
    """Exige que as permissões do usuário concedam o caminho requisitado."""

    raise_exception = True

    def get_required_route(self) -> str:
        return self.request.path

    def test_func(self):
        return permission_set_for_user(self.request.user).can_access(self.get_required_route())


class HasRoutePermission(BasePermission):
    """Versão DRF de ``RoutePermissionRequiredMixin``.

    A view pode definir ``get_required_route()``; caso contrário vale o
    caminho da requisição.
    """

    def has_permission(self, request, view) -> bool:
        get_route = getattr(view, "get_required_route", None)
        route = get_route() if callable(get_route) else request.path
        return permission_set_for_user(request.user).can_access(route)
