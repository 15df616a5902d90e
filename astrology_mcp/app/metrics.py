"""
Métriques Prometheus du serveur MCP.

Ce module définit les métriques utilisées pour le suivi des appels d'outils et des requêtes vers
le backend astrologique, ainsi que l'exposition optionnelle via un petit serveur HTTP.
"""

from prometheus_client import Counter, Histogram, start_http_server

TOOL_CALLS = Counter(
    "tool_calls_total",
    "Total MCP tool invocations",
    ["tool", "status"],
)
TOOL_LATENCY = Histogram(
    "tool_call_duration_seconds",
    "Latency of MCP tool invocations",
    ["tool"],
)
BACKEND_REQUESTS = Counter(
    "backend_requests_total",
    "Total astrology backend requests",
    ["mode", "endpoint", "outcome"],
)


def start_metrics_server(port: int, addr: str = "127.0.0.1") -> None:
    """Expose /metrics sur `addr:port` dans un thread de fond."""
    start_http_server(port, addr=addr)
