"""Shared fixtures for sshconf MCP tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from sshconf_mcp.services import reset_state


@pytest.fixture(autouse=True)
def fresh_state() -> Iterator[None]:
    """Start and finish every test without a global Config."""
    reset_state()
    yield
    reset_state()


@pytest.fixture
def ssh_dir(tmp_path: Path) -> Path:
    """Create an SSH directory with a config that includes conf.d/*."""
    base = tmp_path / ".ssh"
    (base / "conf.d").mkdir(parents=True)
    (base / "config").write_text(
        "Host bastion\n"
        "    HostName 192.0.2.10\n"
        "    User jump\n"
        "\n"
        "Include conf.d/*\n"
        "\n"
        "Host db\n"
        "    HostName 192.0.2.30\n"
        "    User postgres\n"
        "    IdentityFile ~/.ssh/id_db\n"
    )
    (base / "conf.d" / "web").write_text(
        "Host web1\n"
        "    HostName 192.0.2.21\n"
        "Host web2\n"
        "    HostName 192.0.2.22\n"
    )
    return base
