"""Utilities for sshconf MCP."""

from sshconf_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter

__all__ = [
    "ColorfulFormatter",
    "MCPRequestFormatter",
]
