"""Taxonomie des erreurs du serveur astrologique.

Ce module définit les erreurs levées ou transportées entre la passerelle de requêtes et le client
du backend astrologique. Toutes dérivent de `AstrologyError` afin d'être converties en enveloppe
d'erreur MCP à la frontière de la passerelle.
"""

from __future__ import annotations


class AstrologyError(Exception):
    """Erreur de base du domaine astrologique."""

    code = "ASTROLOGY_ERROR"

    def __init__(self, message: str) -> None:
        """Initialise l'erreur avec un message lisible."""
        super().__init__(message)
        self.message = message


class ValidationError(AstrologyError):
    """Entrée d'outil malformée ou hors bornes, détectée avant tout appel réseau."""

    code = "VALIDATION_ERROR"


class NetworkError(AstrologyError):
    """Échec de transport ou statut HTTP non-2xx renvoyé par le backend."""

    code = "NETWORK_ERROR"

    def __init__(
        self, message: str, status_code: int | None = None, reason: str | None = None
    ) -> None:
        """Initialise l'erreur réseau avec le statut HTTP éventuel."""
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> NetworkError:
        """Construit l'erreur correspondant à une réponse HTTP non-2xx."""
        return cls(f"API error: {status_code} {reason}".rstrip(), status_code, reason)


class ProtocolError(AstrologyError):
    """Réponse du backend illisible (corps non JSON)."""

    code = "PROTOCOL_ERROR"


class UnknownEndpointError(AstrologyError):
    """Endpoint inconnu du backend mock; transporté dans un résultat `Failure`."""

    code = "UNKNOWN_ENDPOINT"

    def __init__(self, endpoint: str) -> None:
        """Initialise l'erreur avec l'endpoint demandé."""
        super().__init__(f"Unknown endpoint: {endpoint}")
        self.endpoint = endpoint

    def to_payload(self) -> dict[str, str]:
        """Retourne la forme JSON historique de l'erreur."""
        return {"error": "Unknown endpoint", "endpoint": self.endpoint}


class FatalStartupError(AstrologyError):
    """Échec d'initialisation du processus ou du transport; termine le serveur."""

    code = "FATAL_STARTUP"
