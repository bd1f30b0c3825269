"""Data models for sshconf MCP."""

from sshconf_mcp.models.host import Host, Hosts, Option

__all__ = [
    "Host",
    "Hosts",
    "Option",
]
