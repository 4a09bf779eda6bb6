"""
Parser for ``rustc --print cfg`` output.

Each line of output is either a bare identifier::

    debug_assertions

or an identifier bound to a double-quoted value with backslash escapes::

    target_os="linux"

Parsing is strict: the first line that does not follow this grammar aborts
the whole parse with MalformedEntryError. A partially parsed configuration is
never returned.
"""

import logging

from .core.exceptions import MalformedEntryError
from .entries import ConfigurationEntry, ConfigurationSet, Flag, KeyValue

logger = logging.getLogger(__name__)

QUOTE = '"'
ESCAPE = "\\"
SEPARATOR = "="


def parse_cfg(text: str) -> ConfigurationSet:
    """
    Parse the complete output of ``--print cfg``.

    Lines are separated by ``\\n``; a ``\\r`` left at the end of a line by
    CRLF output is dropped. One trailing empty line caused by a final newline
    is ignored, any other empty line is an error.

    Args:
        text: Captured standard output

    Returns:
        ConfigurationSet with one entry per line, in line order

    Raises:
        MalformedEntryError: On the first line that violates the grammar

    Example:
        >>> config = parse_cfg('debug_assertions\\ntarget_os="linux"\\n')
        >>> list(config)
        [Flag(name='debug_assertions'), KeyValue(key='target_os', value='linux')]
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    config = ConfigurationSet()
    for line_number, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        config.append(parse_line(line, line_number))

    logger.debug(f"Parsed {len(config)} cfg entries")
    return config


def parse_line(line: str, line_number: int = 1) -> ConfigurationEntry:
    """
    Parse a single line of ``--print cfg`` output.

    Args:
        line: Line content without its line terminator
        line_number: 1-based position of the line, used in error reports

    Returns:
        Flag for a bare identifier, KeyValue for ``key="value"``

    Raises:
        MalformedEntryError: If the line violates the grammar
    """
    if not line:
        raise MalformedEntryError(line_number, line, "empty line")

    separator = _find_unescaped(line, SEPARATOR)
    if separator < 0:
        _check_identifier(line, line, line_number)
        return Flag(line)

    key = line[:separator]
    _check_identifier(key, line, line_number)
    value = _unquote(line[separator + 1 :], line, line_number)
    return KeyValue(key, value)


def _find_unescaped(text: str, char: str) -> int:
    """Index of the first occurrence of char not preceded by an escape, or -1."""
    i = 0
    while i < len(text):
        if text[i] == ESCAPE:
            i += 2
            continue
        if text[i] == char:
            return i
        i += 1
    return -1


def _check_identifier(identifier: str, line: str, line_number: int) -> None:
    if not identifier:
        raise MalformedEntryError(line_number, line, "empty identifier")
    if any(ch.isspace() for ch in identifier):
        raise MalformedEntryError(
            line_number, line, f"identifier {identifier!r} contains whitespace"
        )


def _unquote(raw: str, line: str, line_number: int) -> str:
    """
    Strip the surrounding quotes from a value and resolve its escapes.

    ``\\"`` and ``\\\\`` are unescaped. Any other backslash sequence is kept
    as written.
    """
    if len(raw) < 2 or not raw.startswith(QUOTE) or not raw.endswith(QUOTE):
        raise MalformedEntryError(
            line_number, line, "value is not enclosed in a pair of double quotes"
        )

    inner = raw[1:-1]
    chars = []
    i = 0
    while i < len(inner):
        ch = inner[i]
        if ch == ESCAPE:
            if i + 1 >= len(inner):
                # the closing quote is escaped, so the value never ends
                raise MalformedEntryError(line_number, line, "missing closing quote")
            following = inner[i + 1]
            if following in (QUOTE, ESCAPE):
                chars.append(following)
            else:
                chars.append(ch + following)
            i += 2
            continue
        if ch == QUOTE:
            raise MalformedEntryError(
                line_number, line, "unescaped double quote inside value"
            )
        chars.append(ch)
        i += 1

    return "".join(chars)


__all__ = [
    "parse_cfg",
    "parse_line",
]
