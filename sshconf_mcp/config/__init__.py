"""Configuration module for sshconf MCP.

Provides focused pieces for different configuration concerns:
- parse: Parses SSH config text into hosts
- IncludeLoader / load_hosts: Reads config files and Include globs
- Settings: Environment variable configuration
- Config: Main configuration class (settings plus cached hosts)
"""

from sshconf_mcp.config.errors import (
    MalformedDirectiveError,
    SourceUnavailableError,
    SSHConfigError,
)
from sshconf_mcp.config.loader import (
    IncludeLoader,
    default_ssh_dir,
    load_hosts,
    read_config,
)
from sshconf_mcp.config.main import Config
from sshconf_mcp.config.parser import parse
from sshconf_mcp.config.settings import Settings

__all__ = [
    "Config",
    "IncludeLoader",
    "MalformedDirectiveError",
    "SSHConfigError",
    "Settings",
    "SourceUnavailableError",
    "default_ssh_dir",
    "load_hosts",
    "parse",
    "read_config",
]
