"""MCP tools for sshconf MCP."""

from sshconf_mcp.tools.lookup import ssh_config

__all__ = ["ssh_config"]
