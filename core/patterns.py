"""Casamento de padrões de permissão com caminhos hierárquicos.

Gramáticas suportadas, avaliadas nesta ordem:

* ``*`` ou ``/*`` — curinga global;
* ``/base/*`` — o próprio ``/base`` e qualquer descendente;
* igualdade exata após normalização;
* segmentos parametrizados, ``/users/[user]`` ou ``/users/:user``.
"""

from __future__ import annotations

from .paths import ROOT, normalize, split_segments

GLOBAL_WILDCARDS = frozenset({"*", "/*"})
DESCENDANT_SUFFIX = "/*"


def is_global_wildcard(pattern: str) -> bool:
    return normalize(pattern) in GLOBAL_WILDCARDS


def is_parameter_segment(segment: str) -> bool:
    """Segmentos ``[nome]`` ou ``:nome`` aceitam qualquer valor."""
    return (segment.startswith("[") and segment.endswith("]")) or segment.startswith(":")


def _matches_segments(pattern: str, candidate: str) -> bool:
    pattern_segments = split_segments(pattern)
    candidate_segments = split_segments(candidate)
    if len(pattern_segments) != len(candidate_segments):
        return False
    for expected, actual in zip(pattern_segments, candidate_segments):
        if is_parameter_segment(expected):
            continue
        if expected != actual:
            return False
    return True


def matches(pattern: object, candidate: object) -> bool:
    """Indica se ``candidate`` satisfaz ``pattern``.

    Ambos os lados são normalizados antes da comparação. A função é pura e
    total: padrões desconhecidos simplesmente não casam.
    """

    pattern = normalize(pattern)
    candidate = normalize(candidate)

    if pattern in GLOBAL_WILDCARDS:
        return True

    if pattern.endswith(DESCENDANT_SUFFIX):
        base = normalize(pattern[: -len(DESCENDANT_SUFFIX)])
        if base == ROOT:
            return True
        return candidate == base or candidate.startswith(base + "/")

    if pattern == candidate:
        return True

    return _matches_segments(pattern, candidate)
