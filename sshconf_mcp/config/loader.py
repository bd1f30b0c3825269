"""Filesystem side of SSH config parsing.

Reads the top-level config file and resolves Include globs. The home
directory is resolved here, once, and passed down explicitly.
"""

import glob
import logging
import os
from pathlib import Path

from sshconf_mcp.config.errors import SourceUnavailableError
from sshconf_mcp.config.parser import parse
from sshconf_mcp.models import Hosts

logger = logging.getLogger(__name__)


def default_ssh_dir() -> Path:
    """Return the user's SSH directory (~/.ssh)."""
    return Path.home() / ".ssh"


def read_config(path: Path | str) -> str:
    """Read a config file as text.

    Args:
        path: Config file to read

    Returns:
        File contents

    Raises:
        SourceUnavailableError: File is missing, unreadable, or not text
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(str(path), e) from e
    logger.debug("Read SSH config from %s (%d bytes)", path, len(content))
    return content


class IncludeLoader:
    """Resolves Include patterns against an SSH directory.

    Relative patterns are rooted at ``ssh_dir``; ``~`` is expanded and
    absolute patterns are used as-is. Matches are returned sorted.
    """

    def __init__(self, ssh_dir: Path | str):
        """Initialize include loader.

        Args:
            ssh_dir: Base directory for relative Include patterns
        """
        self.ssh_dir = Path(ssh_dir)

    def resolve(self, pattern: str) -> list[str]:
        """Expand a pattern to the sorted list of matching files."""
        expanded = os.path.expanduser(pattern)
        if os.path.isabs(expanded):
            full_pattern = expanded
        else:
            # Base directory is literal; only the Include pattern is a glob
            full_pattern = os.path.join(glob.escape(str(self.ssh_dir)), expanded)
        matches = sorted(glob.glob(full_pattern))
        return [m for m in matches if not os.path.isdir(m)]

    def __call__(self, pattern: str) -> list[tuple[str, str]]:
        """Load every file matched by pattern.

        Returns:
            (path, content) pairs; empty if nothing matches

        Raises:
            SourceUnavailableError: A matched file could not be read
        """
        paths = self.resolve(pattern)
        if not paths:
            logger.debug("Include pattern %s matched nothing in %s", pattern, self.ssh_dir)
        return [(path, read_config(path)) for path in paths]


def load_hosts(
    config_path: Path | str | None = None,
    ssh_dir: Path | str | None = None,
) -> Hosts:
    """Read and parse an SSH config file, following Includes.

    Args:
        config_path: Config file (default: <ssh_dir>/config)
        ssh_dir: Include base directory (default: ~/.ssh)

    Returns:
        Parsed hosts in file order

    Raises:
        SSHConfigError: The config or an included file is unreadable or malformed
    """
    base_dir = Path(ssh_dir) if ssh_dir is not None else default_ssh_dir()
    path = Path(config_path) if config_path is not None else base_dir / "config"

    hosts = parse(read_config(path), IncludeLoader(base_dir), source=str(path))
    logger.info("Parsed %d hosts from %s", len(hosts), path)
    return hosts
