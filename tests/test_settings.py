"""
Tests pour le chargement des settings depuis l'environnement.

Ce module teste la lecture des variables d'environnement et le prédicat de sélection du backend
mock.
"""

from __future__ import annotations

from astrology_mcp.core.settings import DEFAULT_ASTROLOGY_API_URL, Settings, get_settings


def test_defaults_select_mock() -> None:
    """Teste que la configuration par défaut sélectionne le backend mock."""
    s = get_settings()
    assert s.APP_NAME == "astrology-mcp"
    assert s.APP_VERSION == "0.1.0"
    assert s.ASTROLOGY_API_URL == DEFAULT_ASTROLOGY_API_URL
    assert s.ASTROLOGY_API_KEY is None
    assert s.METRICS_PORT is None
    assert s.use_mock is True


def test_env_values_are_read(monkeypatch) -> None:
    """Teste que les variables d'environnement surchargent les valeurs par défaut."""
    monkeypatch.setenv("ASTROLOGY_API_URL", "https://astro.example.com")
    monkeypatch.setenv("ASTROLOGY_API_KEY", "secret")
    monkeypatch.setenv("ASTROLOGY_API_TIMEOUT", "2.5")
    monkeypatch.setenv("METRICS_PORT", "9109")
    s = get_settings()
    assert s.ASTROLOGY_API_URL == "https://astro.example.com"
    assert s.ASTROLOGY_API_KEY == "secret"
    assert s.ASTROLOGY_API_TIMEOUT == 2.5
    assert s.METRICS_PORT == 9109
    assert s.use_mock is False


def test_empty_key_is_ignored(monkeypatch) -> None:
    """Teste qu'une clé vide dans l'environnement équivaut à une clé absente."""
    monkeypatch.setenv("ASTROLOGY_API_URL", "https://astro.example.com")
    monkeypatch.setenv("ASTROLOGY_API_KEY", "")
    assert get_settings().use_mock is True


def test_key_with_default_url_stays_mock() -> None:
    """Teste que l'URL publique par défaut force le mock même avec une clé."""
    s = Settings(ASTROLOGY_API_KEY="secret")
    assert s.use_mock is True
    s = Settings(ASTROLOGY_API_KEY="secret", ASTROLOGY_API_URL=DEFAULT_ASTROLOGY_API_URL + "/")
    assert s.use_mock is True


def test_key_with_custom_url_is_live() -> None:
    """Teste qu'une clé et une URL personnalisée sélectionnent le backend HTTP."""
    s = Settings(ASTROLOGY_API_KEY="secret", ASTROLOGY_API_URL="http://localhost:8080")
    assert s.use_mock is False
