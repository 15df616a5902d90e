"""
Conteneur d'injection de dépendances du serveur MCP.

Instancie les composants centraux (settings, backend astrologique, outil natal) une seule fois
par processus. Le backend est choisi ici, à la construction, et n'est plus réévalué ensuite.
"""

from __future__ import annotations

from astrology_mcp.api.natal_chart import NatalChartTool
from astrology_mcp.core.settings import Settings, get_settings
from astrology_mcp.infra.astro.base import ChartBackend
from astrology_mcp.infra.astro.factory import build_backend


class Container:
    def __init__(self, settings: Settings | None = None, backend: ChartBackend | None = None):
        self.settings = settings or get_settings()
        self.astro = backend or build_backend(self.settings)
        self.natal_chart = NatalChartTool(self.astro)

    @property
    def backend_mode(self) -> str:
        """Mode du backend actif: "mock" ou "live"."""
        return self.astro.mode

    @property
    def tools(self) -> dict[str, NatalChartTool]:
        """Outils publiés, indexés par nom."""
        return {self.natal_chart.name: self.natal_chart}
