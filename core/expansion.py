"""Estado de abertura das seções recolhíveis do menu.

Cada seção recolhível passa por ``ausente -> aberta|fechada`` na primeira
avaliação, conforme contenha ou não o item ativo. Depois disso apenas duas
coisas mudam o estado: o clique do usuário (alterna sempre) e a navegação
para um item da seção, que força a abertura. A navegação nunca fecha uma
seção.

As transições dirigidas pela rota só disparam quando a página atual ou a
árvore visível mudam desde a última avaliação; recarregar a mesma página
mantém uma seção fechada manualmente.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Mapping

from .menu import MenuNode, MenuSection, collapsible_sections, section_is_active

logger = logging.getLogger(__name__)


def evaluation_key(sections: Iterable[MenuSection], current_location: str) -> str:
    """Identifica a combinação rota + seções recolhíveis visíveis."""
    return json.dumps(
        [current_location, [[section.id, [item.href for item in section.items]] for section in sections]],
        separators=(",", ":"),
    )


class ExpansionState:
    def __init__(
        self,
        initial: Mapping[str, bool] | None = None,
        evaluated_for: str | None = None,
    ) -> None:
        self._open: dict[str, bool] = {}
        for section_id, is_open in (initial or {}).items():
            if isinstance(section_id, str):
                self._open[section_id] = bool(is_open)
        self.evaluated_for = evaluated_for if isinstance(evaluated_for, str) else None

    def __contains__(self, section_id: object) -> bool:
        return section_id in self._open

    def __len__(self) -> int:
        return len(self._open)

    def get(self, section_id: str) -> bool | None:
        """``None`` enquanto a seção ainda não foi observada."""
        return self._open.get(section_id)

    def is_open(self, section: MenuSection) -> bool:
        if not section.collapsible or section.is_heading:
            return True
        return self._open.get(section.id, False)

    def observe(self, section: MenuSection, current_location: str) -> bool:
        """Cria a entrada de uma seção ainda ausente. Retorna ``True`` se criou."""
        if section.id in self._open:
            return False
        self._open[section.id] = section_is_active(section, current_location)
        return True

    def sync(self, menu: Iterable[MenuNode], current_location: str) -> bool:
        """Aplica as transições dirigidas pela rota. Retorna ``True`` se algo mudou."""

        sections = collapsible_sections(menu)
        key = evaluation_key(sections, current_location)
        if key == self.evaluated_for:
            return False

        self.evaluated_for = key
        changed = False
        for section in sections:
            if self.observe(section, current_location):
                changed = True
            elif not self._open[section.id] and section_is_active(section, current_location):
                logger.debug("Seção %s aberta pela rota %s", section.id, current_location)
                self._open[section.id] = True
                changed = True
        return changed

    def toggle(self, section_id: str) -> bool:
        is_open = not self._open.get(section_id, False)
        self._open[section_id] = is_open
        return is_open

    def as_dict(self) -> dict[str, bool]:
        return dict(self._open)


def load_expansion_state(request, session_key: str) -> ExpansionState:
    session = getattr(request, "session", None)
    stored = session.get(session_key) if session is not None else None
    if not isinstance(stored, dict):
        return ExpansionState()
    initial = stored.get("open")
    return ExpansionState(
        initial if isinstance(initial, dict) else None,
        evaluated_for=stored.get("evaluated_for"),
    )


def save_expansion_state(request, state: ExpansionState, session_key: str) -> None:
    # requisições sem sessão (p.ex. RequestFactory) não guardam estado
    session = getattr(request, "session", None)
    if session is not None:
        session[session_key] = {"open": state.as_dict(), "evaluated_for": state.evaluated_for}
