"""Entry point for sshconf_mcp.

    python -m sshconf_mcp [--config PATH] [--ssh-dir DIR] [--json]
    python -m sshconf_mcp serve
"""

import argparse
import json
import logging
import sys

from sshconf_mcp.config import Config, SSHConfigError
from sshconf_mcp.resources import format_hosts
from sshconf_mcp.server import mcp  # This import also configures logging
from sshconf_mcp.services import get_config, set_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="sshconf-mcp",
        description="Parse an OpenSSH client config and show its hosts.",
    )
    parser.add_argument("command", nargs="?", choices=["show", "serve"], default="show")
    parser.add_argument("--config", help="SSH config file (default: ~/.ssh/config)")
    parser.add_argument("--ssh-dir", help="Base directory for Include patterns (default: ~/.ssh)")
    parser.add_argument("--json", action="store_true", help="Print hosts as JSON")
    return parser


def show_hosts(config: Config, as_json: bool = False) -> int:
    """Print every host and its options.

    Returns:
        Process exit status
    """
    try:
        hosts = config.get_hosts()
    except SSHConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(hosts.to_list(), indent=2))
    else:
        print(format_hosts(hosts))
    return 0


def run_server() -> None:
    """Run the MCP server with configured transport."""
    config = get_config()

    if config.transport == "http":
        logger.info(
            "Starting sshconf MCP server (transport=http, host=%s, port=%d)",
            config.http_host,
            config.http_port,
        )
        mcp.run(
            transport="http",
            host=config.http_host,
            port=config.http_port,
        )
    else:
        logger.info("Starting sshconf MCP server (transport=stdio)")
        mcp.run(transport="stdio")


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)

    if args.config or args.ssh_dir:
        set_config(Config.from_path(args.config, args.ssh_dir))

    if args.command == "serve":
        run_server()
        return 0
    return show_hosts(get_config(), as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
