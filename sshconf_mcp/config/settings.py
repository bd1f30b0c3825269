"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from sshconf_mcp.config.loader import default_ssh_dir

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # SSH config locations
    ssh_dir: Path = field(default_factory=default_ssh_dir)
    config_path: Path | None = field(default=None)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @property
    def resolved_config_path(self) -> Path:
        """Top-level config path, defaulting to <ssh_dir>/config."""
        if self.config_path is not None:
            return self.config_path
        return self.ssh_dir / "config"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SSHCONF_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        ssh_dir = os.getenv("SSHCONF_SSH_DIR")
        config_path = os.getenv("SSHCONF_CONFIG")
        return cls(
            ssh_dir=Path(ssh_dir).expanduser() if ssh_dir else default_ssh_dir(),
            config_path=Path(config_path).expanduser() if config_path else None,
            transport=cls._get_transport(),
            http_host=os.getenv("SSHCONF_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("SSHCONF_HTTP_PORT", 8000),
            log_level=os.getenv("SSHCONF_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("SSHCONF_LOG_COLORS", True),
            log_payloads=cls._get_bool("SSHCONF_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SSHCONF_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("SSHCONF_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport ("stdio" or "http"), defaulting to stdio."""
        transport = os.getenv("SSHCONF_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
