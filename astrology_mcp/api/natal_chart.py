"""Outil MCP `calculate_natal_chart`.

Objectif du module
------------------
- Valider les arguments de l'outil et les convertir en `ChartRequest`.
- Appeler le backend astrologique et mettre en forme le résultat (succès ou erreur) dans
  l'enveloppe `CallToolResult` du protocole MCP.
- Ne jamais laisser une erreur d'appel remonter jusqu'à l'hôte.
"""

from __future__ import annotations

import json
import time
from typing import Any

import pydantic
import structlog
from mcp.types import CallToolResult, TextContent, Tool

from astrology_mcp.app.metrics import TOOL_CALLS, TOOL_LATENCY
from astrology_mcp.core.errors import ValidationError
from astrology_mcp.core.http_constants import NATAL_CHART_ENDPOINT
from astrology_mcp.domain.entities import ChartRequest
from astrology_mcp.domain.results import Failure
from astrology_mcp.infra.astro.base import ChartBackend

log = structlog.get_logger(__name__)

TOOL_NAME = "calculate_natal_chart"
TOOL_DESCRIPTION = (
    "Calculate a complete natal/birth chart with planetary positions, houses, and aspects. "
    "Provide the birth date, time, and location to get an accurate astrological chart."
)


def _format_validation_error(exc: pydantic.ValidationError) -> str:
    """Résume les erreurs Pydantic en une ligne lisible (`champ: message; ...`)."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def parse_request(arguments: dict[str, Any] | None) -> ChartRequest:
    """Valide les arguments de l'outil.

    Raises:
        ValidationError: Champ manquant, hors bornes ou système de maisons inconnu.
    """
    try:
        return ChartRequest.model_validate(arguments or {})
    except pydantic.ValidationError as exc:
        raise ValidationError(_format_validation_error(exc)) from exc


class NatalChartTool:
    """Passerelle de requêtes pour l'outil `calculate_natal_chart`.

    Responsabilités:
    - Publier la définition de l'outil (nom, description, schéma d'entrée).
    - Valider, appeler `backend`, mettre en forme la réponse.
    """

    name = TOOL_NAME

    def __init__(self, backend: ChartBackend):
        self.backend = backend

    @property
    def tool(self) -> Tool:
        """Définition MCP de l'outil, schéma dérivé de `ChartRequest`."""
        return Tool(
            name=TOOL_NAME,
            description=TOOL_DESCRIPTION,
            inputSchema=ChartRequest.model_json_schema(),
        )

    async def compute_natal_chart(self, arguments: dict[str, Any] | None) -> CallToolResult:
        """Calcule un thème natal et renvoie l'enveloppe MCP correspondante.

        Paramètres:
        - arguments: arguments bruts de l'appel d'outil.

        Retour: `CallToolResult` contenant le thème en JSON indenté, ou `isError=True` avec un
        message lisible.
        """
        started = time.perf_counter()
        try:
            request = parse_request(arguments)
        except ValidationError as exc:
            log.warning("natal_chart_invalid_arguments", error=exc.message)
            TOOL_CALLS.labels(tool=TOOL_NAME, status="invalid").inc()
            return _text_result(f"Invalid arguments for {TOOL_NAME}: {exc.message}", is_error=True)

        try:
            result = await self.backend.invoke(NATAL_CHART_ENDPOINT, request.to_payload())
        except Exception as exc:
            return self._error_result(exc)
        finally:
            TOOL_LATENCY.labels(tool=TOOL_NAME).observe(time.perf_counter() - started)

        if isinstance(result, Failure):
            return self._error_result(result.error)
        TOOL_CALLS.labels(tool=TOOL_NAME, status="ok").inc()
        return _text_result(json.dumps(result.data, indent=2, ensure_ascii=False))

    def _error_result(self, exc: Exception) -> CallToolResult:
        message = str(exc) or "Unknown error occurred"
        log.error(
            "natal_chart_error",
            backend=self.backend.mode,
            error_type=type(exc).__name__,
            error=message,
            exc_info=exc,
        )
        TOOL_CALLS.labels(tool=TOOL_NAME, status="error").inc()
        return _text_result(f"Error calculating natal chart: {message}", is_error=True)
