"""Lookup tool for querying parsed SSH config hosts."""

import logging

from sshconf_mcp.config import SSHConfigError
from sshconf_mcp.resources.hosts import format_host
from sshconf_mcp.services import get_config

logger = logging.getLogger(__name__)


async def ssh_config(host: str = "", option: str = "") -> str:
    """Look up hosts and options from the SSH client config.

    Args:
        host: Host name. Empty lists all host names.
        option: Option name (e.g. "HostName", "User"). Empty returns
            every option of the host.

    Returns:
        Host names, a host's options, or a single option value.
        Errors are returned as "Error: ..." strings.

    Examples:
        ssh_config()                         - List host names
        ssh_config("web1")                   - Show all options of web1
        ssh_config("web1", "IdentityFile")   - Show web1's IdentityFile
    """
    config = get_config()
    try:
        hosts = config.get_hosts()
    except SSHConfigError as e:
        logger.warning("Cannot load SSH config: %s", e)
        return f"Error: {e}"

    if not host:
        if not hosts:
            return "No SSH hosts configured."
        return "\n".join(hosts.names)

    found = hosts.find_host(host)
    if found is None:
        return f"Error: Unknown host '{host}'. Available: {', '.join(hosts.names)}"

    if not option:
        return format_host(found)

    value = found.get(option)
    if value is None:
        return f"Error: Host '{host}' has no option '{option}'"
    return value
