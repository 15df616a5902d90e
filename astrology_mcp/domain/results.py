"""Résultat étiqueté renvoyé par les backends astrologiques.

Un appel backend aboutit soit à `Success` (corps JSON désérialisé, transmis tel quel), soit à
`Failure` (erreur typée non levée, ex. endpoint inconnu du mock).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from astrology_mcp.core.errors import UnknownEndpointError


@dataclass(frozen=True)
class Success:
    """Variante succès: données renvoyées par le backend."""

    data: dict[str, Any]


@dataclass(frozen=True)
class Failure:
    """Variante échec: erreur typée transportée sans être levée."""

    error: UnknownEndpointError

    @property
    def payload(self) -> dict[str, str]:
        return self.error.to_payload()


BackendResult = Success | Failure
