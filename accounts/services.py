from __future__ import annotations

import logging
from typing import Any, Iterable

import sentry_sdk

from core.patterns import is_global_wildcard

from .models import User

logger = logging.getLogger(__name__)

ALLOW_ALL = "*"


def get_user_record(user) -> dict[str, Any] | None:
    """Registro mínimo do usuário consumido pela navegação.

    Retorna ``None`` para visitantes anônimos ou contas inativas.
    """

    if user is None or not getattr(user, "is_authenticated", False):
        return None
    if not getattr(user, "is_active", True):
        return None
    return {"permissions": getattr(user, "permissions", None)}


def get_user_permissions(user) -> list[str]:
    """Lista gravada no usuário, como exibida no editor de permissões.

    Vale também para contas inativas. Entradas que não são texto são ignoradas.
    """

    stored = getattr(user, "permissions", None)
    if not isinstance(stored, list):
        return []
    return [entry for entry in stored if isinstance(entry, str)]


def clean_permission_list(raw: Iterable[Any] | None) -> list[str]:
    """Lista a ser gravada: ``["*"]`` quando tudo é concedido, senão sem repetições."""

    entries = [str(entry).strip() for entry in raw or [] if entry is not None]
    entries = [entry for entry in entries if entry]
    if any(is_global_wildcard(entry) for entry in entries):
        return [ALLOW_ALL]
    return list(dict.fromkeys(entries))


def set_user_permissions(user: User, raw: Iterable[Any] | None) -> list[str]:
    permissions = clean_permission_list(raw)
    try:
        user.permissions = permissions
        user.save(update_fields=["permissions", "updated_at"])
    except Exception as exc:  # pragma: no cover - falha de infraestrutura
        sentry_sdk.capture_exception(exc)
        raise
    logger.info("Permissões do usuário %s atualizadas: %s", user.pk, permissions)
    return permissions
