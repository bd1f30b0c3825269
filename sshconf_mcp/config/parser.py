"""SSH config text parser.

Turns OpenSSH client config text into an ordered list of Host blocks.
Only ``Host`` and ``Include`` are interpreted; every other indented
``Key Value`` line becomes an Option of the most recent host.

Include cycles are not detected: a file that includes itself recurses
until Python raises RecursionError.
"""

import logging
import re
from collections.abc import Callable, Iterable

from sshconf_mcp.config.errors import (
    MalformedDirectiveError,
    SourceUnavailableError,
    SSHConfigError,
)
from sshconf_mcp.models import Host, Hosts, Option

logger = logging.getLogger(__name__)

# Given a glob pattern, return (path, content) for every matching file
IncludeLoaderFunc = Callable[[str], Iterable[tuple[str, str]]]

LINE_SPLIT = re.compile(r"\r\n|\n")
DIRECTIVE_START = re.compile(r"[A-Za-z]")


def parse(
    text: str,
    load_include: IncludeLoaderFunc,
    source: str | None = None,
) -> Hosts:
    """Parse SSH config text into hosts.

    Args:
        text: Full contents of one config file (may be empty)
        load_include: Resolves an Include pattern to matched files
        source: Path the text was read from, used in error messages

    Returns:
        Hosts in file order, with included hosts spliced in at the
        position of their Include line

    Raises:
        MalformedDirectiveError: Host/Include without argument, or option
            line without value
        SourceUnavailableError: An included file could not be read
    """
    # Mutable (name, options) pairs; frozen into Host records at the end
    blocks: list[tuple[str, list[Option]]] = []

    for lineno, line in enumerate(LINE_SPLIT.split(text), start=1):
        if DIRECTIVE_START.match(line):
            tokens = line.split()
            if not tokens:
                continue

            keyword = tokens[0].lower()
            if keyword == "host":
                if len(tokens) < 2:
                    raise MalformedDirectiveError(
                        "Host directive requires a name", lineno, source
                    )
                blocks.append((tokens[1], []))
            elif keyword == "include":
                if len(tokens) < 2:
                    raise MalformedDirectiveError(
                        "Include directive requires a pattern", lineno, source
                    )
                pattern = tokens[1]
                via = f"{source or '<config>'}:{lineno}: Include {pattern}"
                try:
                    included = _parse_include(pattern, load_include)
                except (OSError, UnicodeDecodeError) as e:
                    # Raw read failures from a caller-supplied loader
                    error = SourceUnavailableError(pattern, e)
                    error.include_chain.append(via)
                    raise error from e
                except SSHConfigError as e:
                    e.include_chain.append(via)
                    raise
                blocks.extend((host.name, list(host.options)) for host in included)
            continue

        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        tokens = stripped.split()
        if not tokens:
            continue

        # Options before the first Host have nothing to attach to
        if not blocks:
            continue

        if len(tokens) < 2:
            raise MalformedDirectiveError(
                f"option {tokens[0]!r} requires a value", lineno, source
            )
        blocks[-1][1].append(Option(name=tokens[0], value=tokens[1]))

    return Hosts([Host(name=name, options=tuple(options)) for name, options in blocks])


def _parse_include(pattern: str, load_include: IncludeLoaderFunc) -> list[Host]:
    """Load and parse every file matched by an Include pattern, in order."""
    hosts: list[Host] = []
    matched = 0
    for path, content in load_include(pattern):
        matched += 1
        hosts.extend(parse(content, load_include, source=path))

    logger.debug(
        "Include %s matched %d file(s), %d host(s)",
        pattern,
        matched,
        len(hosts),
    )
    return hosts
