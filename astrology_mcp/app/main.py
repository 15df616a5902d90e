"""
Application principale: serveur MCP sur stdio.

Ce module assemble les composants du serveur astrologique : logging, conteneur, outils MCP,
métriques et transport stdio.

Responsabilités du module:
- Initialiser le logging structuré (sur stderr)
- Construire le serveur MCP et enregistrer les handlers `list_tools` / `call_tool`
- Journaliser les erreurs asynchrones hors requête sans arrêter le processus
- Terminer avec un code non nul si l'initialisation échoue
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any

import pydantic
import structlog
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from astrology_mcp.app.metrics import TOOL_CALLS, start_metrics_server
from astrology_mcp.core.container import Container
from astrology_mcp.core.errors import FatalStartupError
from astrology_mcp.core.logging import setup_logging
from astrology_mcp.core.settings import Settings, get_settings

log = structlog.get_logger(__name__)


def create_server(container: Container) -> Server:
    """
    Construit et retourne le serveur MCP prêt à l'usage.

    Étapes:
    - Nomme le serveur d'après les settings (nom, version)
    - Publie la liste des outils du conteneur
    - Route chaque appel d'outil vers sa passerelle; un nom inconnu produit une erreur d'outil
    """
    settings = container.settings
    server = Server(settings.APP_NAME, version=settings.APP_VERSION)
    tools = container.tools

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [t.tool for t in tools.values()]

    # La validation des arguments est faite par la passerelle de chaque outil.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        handler = tools.get(name)
        if handler is None:
            log.warning("unknown_tool", tool=name)
            TOOL_CALLS.labels(tool="unknown", status="error").inc()
            return CallToolResult(
                content=[TextContent(type="text", text=f"Unknown tool: {name}")],
                isError=True,
            )
        return await handler.compute_natal_chart(arguments)

    return server


def _log_async_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """Journalise une erreur de tâche de fond; le processus continue."""
    exc = context.get("exception")
    log.error(
        "unhandled_async_error",
        message=context.get("message", "Unhandled exception in event loop"),
        exc_info=exc,
    )


async def serve(settings: Settings) -> None:
    """Initialise le conteneur puis sert les requêtes MCP sur stdio jusqu'à fermeture.

    Raises:
        FatalStartupError: si le conteneur, le serveur ou l'exposition des métriques ne peut
            pas être initialisé.
    """
    asyncio.get_running_loop().set_exception_handler(_log_async_exception)
    try:
        container = Container(settings)
        server = create_server(container)
        if settings.METRICS_PORT:
            start_metrics_server(settings.METRICS_PORT)
    except Exception as err:
        raise FatalStartupError(f"Server initialisation failed: {err}") from err

    log.info(
        "server_starting",
        name=settings.APP_NAME,
        version=settings.APP_VERSION,
        backend=container.backend_mode,
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> int:
    """Point d'entrée CLI `astrology-mcp`; retourne le code de sortie du processus."""
    try:
        settings = get_settings()
    except pydantic.ValidationError as err:
        setup_logging()
        log.critical("fatal_startup_error", error=str(err))
        return 1
    setup_logging(settings.LOG_LEVEL)

    try:
        asyncio.run(serve(settings))
    except FatalStartupError as err:
        log.critical("fatal_startup_error", error=err.message, exc_info=err)
        return 1
    except KeyboardInterrupt:
        log.info("server_stopped", reason="interrupted")
    return 0


if __name__ == "__main__":  # pragma: no cover - script entry
    sys.exit(main())
