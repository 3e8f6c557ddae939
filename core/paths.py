"""Canonicalização de caminhos e padrões de rota."""

from __future__ import annotations

import re

ROOT = "/"

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize(raw: object = "") -> str:
    """Retorna a forma canônica de um caminho ou padrão.

    Remove query string e fragmento, colapsa barras repetidas e remove as
    barras finais, preservando a raiz. Entradas vazias ou ``None`` viram
    ``/``. A função é idempotente e nunca lança exceção.
    """

    if raw is None:
        return ROOT
    value = raw if isinstance(raw, str) else str(raw)
    value = value.split("#", 1)[0].split("?", 1)[0]
    value = _REPEATED_SLASHES.sub("/", value)
    if value == ROOT:
        return ROOT
    value = value.rstrip("/")
    return value or ROOT


def split_segments(path: str) -> list[str]:
    """Segmentos não vazios de um caminho já normalizado."""
    return [segment for segment in path.split("/") if segment]
