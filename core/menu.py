from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar, Iterable, Union

from .patterns import matches

if TYPE_CHECKING:
    from .permissions import PermissionSet


@dataclass(frozen=True)
class MenuLeaf:
    href: str
    label: str
    icon: str = ""


@dataclass(frozen=True)
class MenuLink(MenuLeaf):
    """Link de primeiro nível, fora de qualquer seção."""

    kind: ClassVar[str] = "link"


@dataclass(frozen=True)
class MenuSection:
    kind: ClassVar[str] = "section"

    id: str
    title: str
    collapsible: bool = True
    items: tuple[MenuLeaf, ...] | None = None

    def __post_init__(self) -> None:
        if self.items is not None and not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def is_heading(self) -> bool:
        """Seções sem itens são exibidas apenas como título."""
        return not self.items


MenuNode = Union[MenuSection, MenuLink]
MenuDefinition = tuple[MenuNode, ...]


DEFAULT_MENU: MenuDefinition = (
    MenuSection(
        id="operations",
        title="Operations",
        collapsible=False,
        items=(
            MenuLeaf(href="/vehicle-status", label="Vehicle Status"),
            MenuLeaf(href="/lot-manager", label="Lot manager"),
            MenuLeaf(href="/reservations", label="Reservations"),
        ),
    ),
    MenuSection(
        id="admin",
        title="Admin",
        collapsible=False,
        items=(MenuLeaf(href="/users", label="Users"),),
    ),
)


def menu_hrefs(menu: MenuDefinition) -> list[str]:
    """Todos os ``href`` do menu, na ordem de definição e sem repetição."""

    hrefs: dict[str, None] = {}
    for node in menu:
        if isinstance(node, MenuSection):
            for item in node.items or ():
                hrefs.setdefault(item.href)
        else:
            hrefs.setdefault(node.href)
    return list(hrefs)


def filter_tree(menu: MenuDefinition, permission_set: PermissionSet) -> MenuDefinition:
    """Remove links e itens que o conjunto de permissões não concede.

    A ordem de entrada é preservada e seções sem itens restantes são
    descartadas.
    """

    filtered: list[MenuNode] = []
    for node in menu:
        if isinstance(node, MenuSection):
            items = tuple(item for item in node.items or () if permission_set.can_access(item.href))
            if items:
                filtered.append(replace(node, items=items))
        elif permission_set.can_access(node.href):
            filtered.append(node)
    return tuple(filtered)


def is_active(href: str, current_location: str) -> bool:
    # o href do item atua como padrão, então pode conter segmentos parametrizados
    return matches(href, current_location)


def section_is_active(section: MenuSection, current_location: str) -> bool:
    return any(is_active(item.href, current_location) for item in section.items or ())


def collapsible_sections(menu: Iterable[MenuNode]) -> list[MenuSection]:
    return [
        node
        for node in menu
        if isinstance(node, MenuSection) and node.collapsible and not node.is_heading
    ]
