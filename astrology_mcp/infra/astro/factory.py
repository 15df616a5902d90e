"""Sélection du backend astrologique à partir de la configuration."""

from __future__ import annotations

from astrology_mcp.core.settings import Settings
from astrology_mcp.infra.astro.base import ChartBackend
from astrology_mcp.infra.astro.http_backend import HttpBackend
from astrology_mcp.infra.astro.mock_backend import MockBackend


def build_backend(settings: Settings) -> ChartBackend:
    """Retourne `MockBackend` si aucune clé n'est configurée ou si l'URL est celle par défaut,
    sinon `HttpBackend`."""
    if settings.use_mock:
        return MockBackend()
    return HttpBackend(
        base_url=settings.ASTROLOGY_API_URL,
        api_key=settings.ASTROLOGY_API_KEY or "",
        timeout=settings.ASTROLOGY_API_TIMEOUT,
    )
