"""Backend astrologique factice pour les tests et le développement.

Ce module implémente un backend qui renvoie un thème natal fixe, sans aucun accès réseau, lorsque
aucun service astrologique n'est configuré. Les positions ne sont pas calculées: seules les
métadonnées reflètent la requête reçue.
"""

from datetime import UTC, datetime
from typing import Any

import structlog

from astrology_mcp.app.metrics import BACKEND_REQUESTS
from astrology_mcp.core.errors import UnknownEndpointError
from astrology_mcp.core.http_constants import NATAL_CHART_ENDPOINT
from astrology_mcp.domain.entities import PLANETS, ChartResult
from astrology_mcp.domain.results import BackendResult, Failure, Success
from astrology_mcp.infra.astro.base import ChartBackend

log = structlog.get_logger(__name__)

MOCK_NOTE = (
    "This is mock data. Configure ASTROLOGY_API_URL and ASTROLOGY_API_KEY for real calculations."
)

_PLANETS = {
    "sun": {"sign": "Aries", "degree": 15.5, "retrograde": False},
    "moon": {"sign": "Cancer", "degree": 22.3, "retrograde": False},
    "mercury": {"sign": "Pisces", "degree": 28.1, "retrograde": True},
    "venus": {"sign": "Taurus", "degree": 8.7, "retrograde": False},
    "mars": {"sign": "Gemini", "degree": 12.4, "retrograde": False},
    "jupiter": {"sign": "Sagittarius", "degree": 5.2, "retrograde": False},
    "saturn": {"sign": "Capricorn", "degree": 18.9, "retrograde": False},
    "uranus": {"sign": "Aquarius", "degree": 3.6, "retrograde": False},
    "neptune": {"sign": "Pisces", "degree": 21.8, "retrograde": False},
    "pluto": {"sign": "Capricorn", "degree": 25.4, "retrograde": False},
}

_HOUSE_SIGNS = [
    ("Leo", 10.0),
    ("Virgo", 5.0),
    ("Libra", 2.0),
    ("Scorpio", 3.0),
    ("Sagittarius", 7.0),
    ("Capricorn", 12.0),
    ("Aquarius", 10.0),
    ("Pisces", 5.0),
    ("Aries", 2.0),
    ("Taurus", 3.0),
    ("Gemini", 7.0),
    ("Cancer", 12.0),
]

_ASPECTS = [
    {"planet1": "sun", "planet2": "moon", "aspect": "square", "orb": 6.8},
    {"planet1": "sun", "planet2": "jupiter", "aspect": "trine", "orb": 1.7},
    {"planet1": "moon", "planet2": "venus", "aspect": "sextile", "orb": 3.4},
    {"planet1": "mars", "planet2": "saturn", "aspect": "opposition", "orb": 5.5},
    {"planet1": "venus", "planet2": "neptune", "aspect": "conjunction", "orb": 2.1},
]


def _iso_timestamp() -> str:
    """Horodatage UTC au format `2024-01-01T12:00:00.000Z` (millisecondes, suffixe Z)."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MockBackend(ChartBackend):
    """Backend factice déterministe.

    Produit le même thème à chaque appel; seul le bloc `_meta` (entrée, horodatage, système de
    maisons) dépend de la requête.
    """

    mode = "mock"

    async def invoke(self, endpoint: str, payload: dict[str, Any]) -> BackendResult:
        """Synthétise une réponse sans accès réseau.

        Args:
            endpoint: Endpoint demandé; seul `/v1/natal-chart` est connu.
            payload: Corps de requête, renvoyé dans les métadonnées.

        Returns:
            BackendResult: `Success` pour le thème natal, `Failure` pour tout autre endpoint.
        """
        log.warning("mock_backend_used", endpoint=endpoint, reason="astrology API not configured")
        if endpoint == NATAL_CHART_ENDPOINT:
            BACKEND_REQUESTS.labels(mode=self.mode, endpoint=endpoint, outcome="success").inc()
            return Success(self.natal_chart(payload).to_payload())
        BACKEND_REQUESTS.labels(mode=self.mode, endpoint=endpoint, outcome="unknown_endpoint").inc()
        return Failure(UnknownEndpointError(endpoint))

    def natal_chart(self, payload: dict[str, Any]) -> ChartResult:
        """Construit le thème fixe avec des métadonnées reflétant `payload`."""
        return ChartResult.model_validate(
            {
                "planets": {name: _PLANETS[name] for name in PLANETS},
                "houses": {
                    str(i): {"sign": sign, "degree": degree}
                    for i, (sign, degree) in enumerate(_HOUSE_SIGNS, start=1)
                },
                "angles": {
                    "ascendant": {"sign": "Leo", "degree": 10.0},
                    "midheaven": {"sign": "Taurus", "degree": 3.0},
                },
                "aspects": _ASPECTS,
                "_meta": {
                    "generated_at": _iso_timestamp(),
                    "input": dict(payload),
                    "house_system": payload.get("house_system", "placidus"),
                    "note": MOCK_NOTE,
                },
            }
        )
