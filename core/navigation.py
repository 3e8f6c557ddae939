from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import ClassVar, Union

from .conf import get_navigation_settings
from .expansion import ExpansionState, load_expansion_state, save_expansion_state
from .menu import (
    MenuDefinition,
    MenuSection,
    collapsible_sections,
    filter_tree,
    is_active,
    section_is_active,
)
from .metrics import MENU_BUILD_LATENCY, SECTION_TOGGLES
from .paths import normalize
from .permissions import PermissionSet, permission_set_for_user

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedLeaf:
    href: str
    label: str
    icon: str
    is_active: bool


@dataclass(frozen=True)
class RenderedLink(RenderedLeaf):
    kind: ClassVar[str] = "link"


@dataclass(frozen=True)
class RenderedSection:
    kind: ClassVar[str] = "section"

    id: str
    title: str
    collapsible: bool
    items: tuple[RenderedLeaf, ...]
    is_active: bool
    is_open: bool
    is_heading: bool


RenderedNode = Union[RenderedSection, RenderedLink]


def _render_section(
    section: MenuSection, current_location: str, expansion: ExpansionState
) -> RenderedSection:
    if section.is_heading:
        return RenderedSection(
            id=section.id,
            title=section.title,
            collapsible=False,
            items=(),
            is_active=False,
            is_open=True,
            is_heading=True,
        )
    return RenderedSection(
        id=section.id,
        title=section.title,
        collapsible=section.collapsible,
        items=tuple(
            RenderedLeaf(item.href, item.label, item.icon, is_active(item.href, current_location))
            for item in section.items
        ),
        is_active=section_is_active(section, current_location),
        is_open=expansion.is_open(section),
        is_heading=False,
    )


def annotate_tree(
    menu: MenuDefinition, current_location: str, expansion: ExpansionState
) -> list[RenderedNode]:
    """Marca itens ativos e o estado de abertura de uma árvore já filtrada."""

    rendered: list[RenderedNode] = []
    for node in menu:
        if isinstance(node, MenuSection):
            rendered.append(_render_section(node, current_location, expansion))
        else:
            rendered.append(
                RenderedLink(node.href, node.label, node.icon, is_active(node.href, current_location))
            )
    return rendered


def resolve_navigation(
    menu: MenuDefinition,
    permission_set: PermissionSet,
    current_location: str,
    expansion: ExpansionState,
) -> list[RenderedNode]:
    """Recalcula a árvore visível inteira para as entradas informadas.

    ``expansion`` é atualizado com as transições dirigidas pela rota.
    """

    visible = filter_tree(menu, permission_set)
    expansion.sync(visible, current_location)
    return annotate_tree(visible, current_location, expansion)


def current_location(request) -> str:
    location = getattr(request, "current_location", None)
    if location is None:
        location = normalize(request.path)
    return location


def build_menu(request, menu: MenuDefinition | None = None) -> list[RenderedNode]:
    """Retorna o menu filtrado pelas permissões do usuário da requisição."""

    start = time.monotonic()
    nav_settings = get_navigation_settings()
    if menu is None:
        menu = nav_settings.menu

    expansion = load_expansion_state(request, nav_settings.expansion_session_key)
    evaluated_for = expansion.evaluated_for
    rendered = resolve_navigation(
        menu,
        permission_set_for_user(request.user),
        current_location(request),
        expansion,
    )
    if expansion.evaluated_for != evaluated_for:
        save_expansion_state(request, expansion, nav_settings.expansion_session_key)

    MENU_BUILD_LATENCY.observe(time.monotonic() - start)
    return rendered


def toggle_section(
    request,
    section_id: str,
    menu: MenuDefinition | None = None,
    location: str | None = None,
) -> bool | None:
    """Alterna uma seção recolhível visível para o usuário.

    Retorna o novo estado, ou ``None`` quando a seção não existe no menu
    visível ou não é recolhível. ``location`` é a página onde o usuário
    está; por padrão, a própria requisição.
    """

    nav_settings = get_navigation_settings()
    if menu is None:
        menu = nav_settings.menu

    visible = filter_tree(menu, permission_set_for_user(request.user))
    sections = {section.id: section for section in collapsible_sections(visible)}
    if section_id not in sections:
        logger.warning("Seção desconhecida ou fixa ignorada: %s", section_id)
        return None

    expansion = load_expansion_state(request, nav_settings.expansion_session_key)
    location = normalize(location) if location is not None else current_location(request)
    # aplica antes as transições da rota para que a próxima renderização
    # nesta mesma página não reabra a seção
    expansion.sync(visible, location)
    expansion.observe(sections[section_id], location)
    is_open = expansion.toggle(section_id)
    save_expansion_state(request, expansion, nav_settings.expansion_session_key)

    SECTION_TOGGLES.labels("open" if is_open else "closed").inc()
    logger.debug("Seção %s alternada para %s", section_id, "aberta" if is_open else "fechada")
    return is_open
