"""Errors raised while loading and parsing SSH config files."""


class SSHConfigError(Exception):
    """Base class for SSH config loading and parsing failures.

    Errors escaping an ``Include`` keep their type; every enclosing file
    appends a ``"<source>:<line>: Include <pattern>"`` entry to
    ``include_chain`` on the way up, innermost first.
    """

    def __init__(self, message: str, source: str | None = None):
        """Initialize SSH config error.

        Args:
            message: Description of the failure
            source: Path of the file being read or parsed (None for raw text)
        """
        self.message = message
        self.source = source
        self.include_chain: list[str] = []
        super().__init__(message)

    def __str__(self) -> str:
        text = self.message
        if self.source is not None:
            text = f"{self.source}: {text}"
        for entry in self.include_chain:
            text += f" (via {entry})"
        return text


class SourceUnavailableError(SSHConfigError):
    """A config file could not be opened or read."""

    def __init__(self, path: str, original_error: Exception):
        """Initialize source unavailable error.

        Args:
            path: Path of the config file that failed
            original_error: Original exception that caused the failure
        """
        self.path = path
        self.original_error = original_error
        super().__init__(f"cannot read config: {original_error}", source=path)


class MalformedDirectiveError(SSHConfigError):
    """A ``Host``/``Include`` line or an option line is missing its argument."""

    def __init__(self, message: str, lineno: int, source: str | None = None):
        """Initialize malformed directive error.

        Args:
            message: Description of the malformed line
            lineno: 1-based line number in the source
            source: Path of the file being parsed (None for raw text)
        """
        self.lineno = lineno
        super().__init__(f"line {lineno}: {message}", source=source)
