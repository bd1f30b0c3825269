"""Error handling middleware for consistent error logging."""

import logging
from collections import defaultdict
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from sshconf_mcp.middleware.base import SSHConfMiddleware


class ErrorHandlingMiddleware(SSHConfMiddleware):
    """Middleware that logs errors and counts them by exception type.

    Exceptions are always re-raised after logging.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback in logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error counts keyed by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log and count errors raised while handling a request.

        Raises:
            Exception: Re-raises the original exception after logging.
        """
        try:
            return await call_next(context)
        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1
            self.logger.error(
                "Error in %s: %s: %s",
                context.method,
                error_type,
                str(e),
                exc_info=self.include_traceback,
            )
            raise
