"""Définition et chargement des paramètres de configuration du serveur MCP.

Objectif du module
------------------
- Centraliser les paramètres via Pydantic Settings, lus uniquement depuis l'environnement
  du processus (aucun fichier de configuration).
- Exposer le prédicat de sélection du backend astrologique (mock ou HTTP).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

# URL publique par défaut: tant qu'elle n'est pas surchargée, le backend mock est utilisé.
DEFAULT_ASTROLOGY_API_URL = "https://api.astrology-mcp.com"


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        case_sensitive=False,
    )
    APP_NAME: str = "astrology-mcp"
    APP_VERSION: str = "0.1.0"

    # Backend astrologique externe
    ASTROLOGY_API_URL: str = DEFAULT_ASTROLOGY_API_URL
    ASTROLOGY_API_KEY: str | None = None
    ASTROLOGY_API_TIMEOUT: float = 30.0

    # Observabilité
    LOG_LEVEL: str = "INFO"
    METRICS_PORT: int | None = None

    @property
    def use_mock(self) -> bool:
        """Vrai si aucune clé n'est configurée ou si l'URL est celle par défaut."""
        if not self.ASTROLOGY_API_KEY:
            return True
        return self.ASTROLOGY_API_URL.rstrip("/") == DEFAULT_ASTROLOGY_API_URL


def get_settings() -> Settings:
    """Construit et retourne la configuration du serveur."""
    return Settings()
