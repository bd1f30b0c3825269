"""Tests for middleware base class."""

from unittest.mock import MagicMock

from sshconf_mcp.middleware.base import SSHConfMiddleware


class ConcreteMiddleware(SSHConfMiddleware):
    """Concrete implementation for testing."""

    async def on_message(self, context, call_next):
        return await call_next(context)


def test_middleware_has_logger() -> None:
    """SSHConfMiddleware provides a logger attribute."""
    middleware = ConcreteMiddleware()
    assert middleware.logger is not None
    assert middleware.logger.name == "sshconf_mcp.middleware.base"


def test_middleware_accepts_custom_logger() -> None:
    """SSHConfMiddleware accepts custom logger."""
    custom_logger = MagicMock()
    middleware = ConcreteMiddleware(logger=custom_logger)
    assert middleware.logger is custom_logger
