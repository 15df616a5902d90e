"""
Fakes pour les tests unitaires.

Ce module fournit un transport httpx factice qui compte les requêtes sortantes, afin de vérifier
qu'aucun appel réseau n'est émis sur les chemins mock et validation.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

LIVE_CHART: dict[str, Any] = {
    "planets": {"sun": {"sign": "Taurus", "degree": 24.6, "retrograde": False}},
    "houses": {"1": {"sign": "Virgo", "degree": 1.2}},
    "angles": {
        "ascendant": {"sign": "Virgo", "degree": 1.2},
        "midheaven": {"sign": "Gemini", "degree": 28.9},
    },
    "aspects": [],
}


class RecordingTransport(httpx.MockTransport):
    """
    Transport httpx factice.

    Enregistre chaque requête reçue dans `requests`; la réponse est produite par `responder`
    (par défaut: 200 avec `LIVE_CHART`).
    """

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None):
        self.requests: list[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(200, json=LIVE_CHART))
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)
