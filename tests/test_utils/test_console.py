"""Tests for the console log formatter."""

import logging

from sshconf_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter


def make_record(message: str, name: str = "sshconf_mcp.config.loader") -> logging.LogRecord:
    """Build a log record for formatting."""
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


def test_plain_format_has_level_component_and_message() -> None:
    """Without colors the line is plain text separated by pipes."""
    line = ColorfulFormatter(use_colors=False).format(make_record("Parsed 3 hosts"))

    assert "\033[" not in line
    parts = [p.strip() for p in line.split("|")]
    assert parts[1] == "INFO"
    assert parts[2] == "config.loader"
    assert parts[3] == "Parsed 3 hosts"


def test_colored_format_highlights_paths_and_uris() -> None:
    """With colors, paths and URIs are wrapped in ANSI codes."""
    formatter = ColorfulFormatter(use_colors=True)

    path_line = formatter.format(make_record("Parsed 3 hosts from /home/me/.ssh/config"))
    uri_line = formatter.format(make_record(">>> RESOURCE: hosts://list"))

    assert "\033[95m/home/me/.ssh/config\033[0m" in path_line
    assert "\033[94mhosts://list\033[0m" in uri_line


def test_request_formatter_marks_events() -> None:
    """MCPRequestFormatter prefixes notable events."""
    formatter = MCPRequestFormatter(use_colors=True)

    assert formatter.format(make_record("server starting")).startswith("\033[92m>>>")
    assert formatter.format(make_record("Failed to load")).startswith("\033[91m!!")
    assert formatter.format(make_record("nothing special")).startswith("    ")


def test_request_formatter_plain_without_colors() -> None:
    """Without colors no marker is added."""
    formatter = MCPRequestFormatter(use_colors=False)

    line = formatter.format(make_record("server starting"))

    assert not line.startswith(">>>")
    assert line.endswith("server starting")
