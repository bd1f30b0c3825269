"""sshconf MCP FastMCP server.

Thin wrapper that wires the MCP server to the hosts resources and the
lookup tool. Parsing lives in sshconf_mcp.config.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from sshconf_mcp.config import Settings, SSHConfigError
from sshconf_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from sshconf_mcp.resources import host_resource, list_hosts_resource
from sshconf_mcp.services import get_config
from sshconf_mcp.tools import ssh_config
from sshconf_mcp.utils.console import MCPRequestFormatter


def configure_logging(settings: Settings) -> None:
    """Configure colorful logging for the sshconf_mcp package.

    Called at module load time so loggers are configured before use,
    regardless of how the server is started.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("sshconf_mcp")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add our handler once; other handlers (e.g. log capture) are left alone
    if not any(
        isinstance(h.formatter, MCPRequestFormatter) for h in package_logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(MCPRequestFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for noisy_logger in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "httpx",
        "httpcore",
        "fastmcp",
        "starlette",
        "anyio",
    ]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


configure_logging(get_config().settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Parse the SSH config once at startup and report what was found.

    A broken config does not stop the server; lookups report the error.
    """
    config = get_config()
    logger.info("sshconf MCP server starting (config=%s)", config.config_path)

    names: list[str] = []
    try:
        names = config.get_hosts().names
    except SSHConfigError as e:
        logger.error("Failed to load SSH config: %s", e)

    logger.info("sshconf MCP server ready with %d host(s)", len(names))
    try:
        yield {"hosts": names}
    finally:
        logger.info("sshconf MCP server shutting down")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware in order: ErrorHandling -> Logging (with timing).

    Args:
        server: The FastMCP server to configure.
        settings: Logging options (payloads, slow threshold, tracebacks).
    """
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP(
        "sshconf_mcp",
        lifespan=app_lifespan,
    )

    configure_middleware(server, get_config().settings)

    server.tool()(ssh_config)

    server.resource(
        "hosts://list",
        name="SSH hosts",
        description="Hosts defined in the SSH client config, in file order",
        mime_type="text/plain",
    )(list_hosts_resource)
    server.resource(
        "hosts://{name}",
        name="SSH host options",
        description="Options of one host from the SSH client config",
        mime_type="text/plain",
    )(host_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
