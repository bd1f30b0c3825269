"""Application configuration.

Combines environment settings with the parsed SSH config and caches
the parse result for repeated lookups.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sshconf_mcp.config.loader import load_hosts
from sshconf_mcp.config.settings import Settings
from sshconf_mcp.models import Host, Hosts

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration.

    Parses the SSH config lazily on first lookup. Parse errors are
    raised to the caller and are not cached.
    """

    settings: Settings = field(default_factory=Settings)
    _hosts_cache: Hosts | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from SSHCONF_* environment variables."""
        return cls(settings=Settings.from_env())

    @classmethod
    def from_path(
        cls,
        config_path: Path | str | None = None,
        ssh_dir: Path | str | None = None,
    ) -> "Config":
        """Create config for an explicit SSH config file.

        Args:
            config_path: Top-level config file (default: <ssh_dir>/config)
            ssh_dir: Include base directory (default: SSHCONF_SSH_DIR or ~/.ssh)

        Returns:
            Config using environment settings for everything else
        """
        settings = Settings.from_env()
        if ssh_dir is not None:
            settings.ssh_dir = Path(ssh_dir)
        if config_path is not None:
            settings.config_path = Path(config_path)
        return cls(settings=settings)

    @property
    def config_path(self) -> Path:
        """Top-level SSH config file."""
        return self.settings.resolved_config_path

    @property
    def ssh_dir(self) -> Path:
        """Base directory for Include patterns."""
        return self.settings.ssh_dir

    def get_hosts(self) -> Hosts:
        """Get parsed SSH hosts, parsing on first call.

        Raises:
            SSHConfigError: The config or an included file is unreadable or malformed
        """
        if self._hosts_cache is None:
            self._hosts_cache = load_hosts(self.config_path, self.ssh_dir)
        return self._hosts_cache

    def reload(self) -> Hosts:
        """Drop the cached hosts and parse again."""
        logger.info("Reloading SSH config from %s", self.config_path)
        self._hosts_cache = None
        return self.get_hosts()

    def get_host(self, name: str) -> Host | None:
        """Get the first host with the given name, or None."""
        return self.get_hosts().find_host(name)

    def get_option(self, host: str, option: str) -> str | None:
        """Get an option value for a host.

        Args:
            host: Host name
            option: Option name (e.g. "HostName")

        Returns:
            The option value, or None if the host or option is absent
        """
        found = self.get_host(host)
        if found is None:
            return None
        return found.get(option)

    # Delegate to settings for convenience
    @property
    def transport(self) -> str:
        """Transport type (stdio or http)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port
