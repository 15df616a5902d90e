"""Interface commune des backends astrologiques.

Objectif du module
------------------
- Définir `ChartBackend`, la stratégie appelée par la passerelle de requêtes.
- Les implémentations (mock déterministe, client HTTP) sont choisies une seule fois à la
  construction du conteneur, jamais par une condition à l'exécution.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from astrology_mcp.domain.results import BackendResult


class ChartBackend(ABC):
    """Interface minimale d'un backend astrologique.

    Méthodes à implémenter :
      - invoke
    """

    mode: str = "abstract"

    @abstractmethod
    async def invoke(self, endpoint: str, payload: dict[str, Any]) -> BackendResult:
        """Appelle un endpoint du service astrologique.

        Args:
            endpoint: Chemin de l'endpoint (ex: "/v1/natal-chart").
            payload: Corps JSON de la requête.

        Returns:
            BackendResult: `Success` avec la réponse désérialisée, ou `Failure` typé.

        Raises:
            NetworkError: Échec de transport ou statut non-2xx.
            ProtocolError: Réponse illisible.
        """
        raise NotImplementedError
