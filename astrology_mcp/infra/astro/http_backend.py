"""Client HTTP du service astrologique externe.

Objectif du module
------------------
- Encapsuler l'appel réseau vers le backend astrologique configuré.
- Une requête = un client httpx: pas de pool partagé, pas de retry, pas d'état entre appels.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from astrology_mcp.app.metrics import BACKEND_REQUESTS
from astrology_mcp.core.errors import NetworkError, ProtocolError
from astrology_mcp.core.http_constants import (
    CONTENT_TYPE_JSON,
    HTTP_STATUS_SUCCESS_MAX,
    HTTP_STATUS_SUCCESS_MIN,
)
from astrology_mcp.domain.results import BackendResult, Success
from astrology_mcp.infra.astro.base import ChartBackend


class HttpBackend(ChartBackend):
    """Backend astrologique via API HTTP.

    Variables d'environnement utilisées (via `Settings`):
      - `ASTROLOGY_API_URL`: URL de base du service
      - `ASTROLOGY_API_KEY`: clé transmise en `Authorization: Bearer`
      - `ASTROLOGY_API_TIMEOUT`: timeout httpx (secondes)
    """

    mode = "live"

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialise le client avec l'URL de base et la clé d'API."""
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._log = structlog.get_logger(__name__).bind(component="http_backend")

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": CONTENT_TYPE_JSON,
            "Authorization": f"Bearer {self._api_key}",
        }

    async def invoke(self, endpoint: str, payload: dict[str, Any]) -> BackendResult:
        """POST `payload` sur `{base_url}{endpoint}` et renvoie le JSON tel quel.

        Raises:
            NetworkError: Échec de transport ou statut non-2xx (code et raison inclus).
            ProtocolError: Corps de réponse non JSON.
        """
        url = f"{self.base_url}{endpoint}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(url, json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            BACKEND_REQUESTS.labels(mode=self.mode, endpoint=endpoint, outcome="network_error").inc()
            raise NetworkError(f"Network error calling {url}: {exc}") from exc

        if not HTTP_STATUS_SUCCESS_MIN <= resp.status_code < HTTP_STATUS_SUCCESS_MAX:
            BACKEND_REQUESTS.labels(mode=self.mode, endpoint=endpoint, outcome="http_error").inc()
            self._log.warning(
                "backend_http_error", endpoint=endpoint, status_code=resp.status_code
            )
            raise NetworkError.from_status(resp.status_code, resp.reason_phrase)

        try:
            data = resp.json()
        except ValueError as exc:
            BACKEND_REQUESTS.labels(mode=self.mode, endpoint=endpoint, outcome="protocol_error").inc()
            raise ProtocolError(f"Invalid JSON response from {url}") from exc

        BACKEND_REQUESTS.labels(mode=self.mode, endpoint=endpoint, outcome="success").inc()
        return Success(data)
