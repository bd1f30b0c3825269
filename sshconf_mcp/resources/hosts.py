"""Hosts resources for listing parsed SSH config hosts."""

from sshconf_mcp.models import Host, Hosts
from sshconf_mcp.services import get_config


def format_host(host: Host) -> str:
    """Format one host and its options as an indented block."""
    lines = [f"Host {host.name}"]
    if not host.options:
        lines.append("    (no options)")
    width = max((len(o.name) for o in host.options), default=0)
    for option in host.options:
        lines.append(f"    {option.name:<{width}}  {option.value}")
    return "\n".join(lines)


def format_hosts(hosts: Hosts) -> str:
    """Format all hosts in file order, separated by blank lines."""
    if not hosts:
        return "No SSH hosts configured."
    return "\n\n".join(format_host(host) for host in hosts)


async def list_hosts_resource() -> str:
    """List every host in the SSH config with its option count.

    Returns:
        Formatted host list in file order
    """
    config = get_config()
    hosts = config.get_hosts()

    if not hosts:
        return "No SSH hosts configured."

    lines = [f"SSH Hosts ({config.config_path})", "=" * 40, ""]
    for host in hosts:
        hostname = host.get("HostName")
        detail = f" -> {hostname}" if hostname else ""
        lines.append(f"{host.name}{detail} ({len(host.options)} option(s))")

    lines.append("")
    lines.append("Read hosts://<name> for a host's options.")
    return "\n".join(lines)


async def host_resource(name: str) -> str:
    """Show the options of one host.

    Args:
        name: Host name as written in the config

    Returns:
        Formatted host block, or an error message if the host is unknown
    """
    host = get_config().get_host(name)
    if host is None:
        return f"Error: Unknown host '{name}'"
    return format_host(host)
