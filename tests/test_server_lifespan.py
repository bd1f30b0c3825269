"""Tests for server creation and lifespan."""

from pathlib import Path
from unittest.mock import patch

import pytest

from sshconf_mcp.config import Config


@pytest.mark.asyncio
async def test_lifespan_reports_hosts(ssh_dir: Path) -> None:
    """Lifespan parses the config and yields host names."""
    from sshconf_mcp.server import app_lifespan, create_server

    config = Config.from_path(ssh_dir / "config", ssh_dir)

    with patch("sshconf_mcp.server.get_config", return_value=config):
        mcp = create_server()
        async with app_lifespan(mcp) as result:
            assert result["hosts"] == ["bastion", "web1", "web2", "db"]


@pytest.mark.asyncio
async def test_lifespan_survives_broken_config(tmp_path: Path) -> None:
    """A broken config is logged and the server still starts."""
    from sshconf_mcp.server import app_lifespan, create_server

    (tmp_path / "config").write_text("Host ok\n    Dangling\n")
    config = Config.from_path(tmp_path / "config", tmp_path)

    with (
        patch("sshconf_mcp.server.get_config", return_value=config),
        patch("sshconf_mcp.server.logger") as mock_logger,
    ):
        mcp = create_server()
        async with app_lifespan(mcp) as result:
            assert result["hosts"] == []

    mock_logger.error.assert_called_once()


def test_configure_logging_adds_single_handler() -> None:
    """Repeated configuration does not stack handlers."""
    import logging

    from sshconf_mcp.config import Settings
    from sshconf_mcp.server import configure_logging
    from sshconf_mcp.utils.console import MCPRequestFormatter

    configure_logging(Settings(log_level="DEBUG"))
    configure_logging(Settings(log_level="DEBUG"))

    # Test runners may attach their own capture handlers; count only ours
    package_logger = logging.getLogger("sshconf_mcp")
    console_handlers = [
        h
        for h in package_logger.handlers
        if type(h) is logging.StreamHandler
        and isinstance(h.formatter, MCPRequestFormatter)
    ]
    assert len(console_handlers) == 1
    assert package_logger.level == logging.DEBUG
    assert logging.getLogger("uvicorn").level == logging.WARNING


def test_configure_logging_ignores_foreign_handlers() -> None:
    """A pre-existing non-console handler does not block the console handler."""
    import logging

    from sshconf_mcp.config import Settings
    from sshconf_mcp.server import configure_logging
    from sshconf_mcp.utils.console import MCPRequestFormatter

    package_logger = logging.getLogger("sshconf_mcp")
    saved = list(package_logger.handlers)
    foreign = logging.NullHandler()
    package_logger.handlers = [foreign]
    try:
        configure_logging(Settings())

        assert foreign in package_logger.handlers
        assert any(
            isinstance(h.formatter, MCPRequestFormatter) for h in package_logger.handlers
        )
    finally:
        package_logger.handlers = saved
