"""Global state management for sshconf MCP."""

from sshconf_mcp.config import Config

# Global state (initialized on first access)
_config: Config | None = None


def get_config() -> Config:
    """Get or create config from the environment."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_state() -> None:
    """Reset global state for testing.

    Clears the singleton instance so tests start with fresh state.
    Should only be used in test fixtures.
    """
    global _config
    _config = None


def set_config(config: Config) -> None:
    """Set the global config instance.

    Args:
        config: Config instance to use globally.
    """
    global _config
    _config = config
