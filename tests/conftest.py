"""Configuration de test pour pytest avec gestion des chemins.

Ce module configure pytest pour résoudre les imports `astrology_mcp` en ajoutant la racine du
projet au sys.path, et isole les tests de la configuration réelle du backend astrologique.
"""

import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from astrology_mcp...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fakes import RecordingTransport  # noqa: E402


@pytest.fixture(autouse=True)
def clean_astrology_env(monkeypatch):
    """Retire la configuration du backend de l'environnement pour chaque test."""
    for key in (
        "ASTROLOGY_API_URL",
        "ASTROLOGY_API_KEY",
        "ASTROLOGY_API_TIMEOUT",
        "METRICS_PORT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def recording_transport():
    """Transport httpx factice qui enregistre les requêtes et répond 200 avec un thème vide."""
    return RecordingTransport()


@pytest.fixture
def natal_arguments():
    """Arguments de l'appel d'outil pour une naissance à New York."""
    return {
        "datetime": "1990-05-15T14:30:00",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "house_system": "placidus",
    }
