"""Tests pour les métriques Prometheus du serveur.

Ce module vérifie que les appels d'outils et les requêtes backend incrémentent les compteurs
attendus.
"""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY, generate_latest

import astrology_mcp.app.metrics as metrics_mod
from astrology_mcp.api.natal_chart import NatalChartTool
from astrology_mcp.infra.astro.mock_backend import MockBackend


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.asyncio
async def test_tool_and_backend_counters(natal_arguments) -> None:
    """Teste l'incrément des compteurs succès et validation."""
    ok_before = _sample("tool_calls_total", {"tool": "calculate_natal_chart", "status": "ok"})
    invalid_before = _sample(
        "tool_calls_total", {"tool": "calculate_natal_chart", "status": "invalid"}
    )
    backend_labels = {"mode": "mock", "endpoint": "/v1/natal-chart", "outcome": "success"}
    backend_before = _sample("backend_requests_total", backend_labels)

    tool = NatalChartTool(MockBackend())
    await tool.compute_natal_chart(natal_arguments)
    await tool.compute_natal_chart({**natal_arguments, "latitude": 91.0})

    assert _sample("tool_calls_total", {"tool": "calculate_natal_chart", "status": "ok"}) == (
        ok_before + 1
    )
    assert _sample(
        "tool_calls_total", {"tool": "calculate_natal_chart", "status": "invalid"}
    ) == (invalid_before + 1)
    assert _sample("backend_requests_total", backend_labels) == backend_before + 1


def test_metrics_are_exposed() -> None:
    """Teste que les métriques apparaissent dans l'exposition Prometheus."""
    content = generate_latest()
    assert b"tool_calls_total" in content
    assert b"tool_call_duration_seconds" in content
    assert b"backend_requests_total" in content


def test_start_metrics_server_binds_localhost(monkeypatch) -> None:
    """Teste que l'exposition transmet le port et écoute sur 127.0.0.1 par défaut."""
    calls = []
    monkeypatch.setattr(
        metrics_mod, "start_http_server", lambda port, addr: calls.append((port, addr))
    )

    metrics_mod.start_metrics_server(9109)

    assert calls == [(9109, "127.0.0.1")]
