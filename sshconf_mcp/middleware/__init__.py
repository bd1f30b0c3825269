"""sshconf MCP middleware components."""

from sshconf_mcp.middleware.base import SSHConfMiddleware
from sshconf_mcp.middleware.errors import ErrorHandlingMiddleware
from sshconf_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "SSHConfMiddleware",
]
