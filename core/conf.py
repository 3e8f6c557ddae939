from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from django.utils.module_loading import import_string

from .menu import MenuDefinition, menu_hrefs

DEFAULT_MENU_PATH = "core.menu.DEFAULT_MENU"
DEFAULT_EXPANSION_SESSION_KEY = "navigation_expanded"


@dataclass(frozen=True)
class NavigationSettings:
    menu: MenuDefinition
    expansion_session_key: str
    permission_options: tuple[str, ...]


def get_navigation_settings() -> NavigationSettings:
    """Retorna as configurações de navegação a partir do ``settings`` do Django.

    Sem ``NAVIGATION_PERMISSION_OPTIONS`` as opções oferecidas são o curinga
    global mais todos os ``href`` do menu configurado.
    """

    menu = import_string(getattr(settings, "NAVIGATION_MENU", DEFAULT_MENU_PATH))
    options = getattr(settings, "NAVIGATION_PERMISSION_OPTIONS", None)
    if options is None:
        options = ["*", *menu_hrefs(menu)]
    return NavigationSettings(
        menu=tuple(menu),
        expansion_session_key=getattr(
            settings, "NAVIGATION_EXPANSION_SESSION_KEY", DEFAULT_EXPANSION_SESSION_KEY
        ),
        permission_options=tuple(dict.fromkeys(str(option) for option in options)),
    )
