"""MCP resources for sshconf MCP."""

from sshconf_mcp.resources.hosts import (
    format_host,
    format_hosts,
    host_resource,
    list_hosts_resource,
)

__all__ = [
    "format_host",
    "format_hosts",
    "host_resource",
    "list_hosts_resource",
]
