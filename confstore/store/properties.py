"""Flat ``key=value`` properties codec.

Files consist of optional comment lines (``#`` or ``!``) followed by one
``key=value`` entry per line. The first unescaped ``=`` separates the key
from the value. Only the escapes needed to keep that rule and the line
structure intact are applied:

- backslash, newline, carriage return and tab in keys and values
- ``=`` in keys
- a leading ``#``, ``!`` or blank in keys

Example:
    >>> import io
    >>> buffer = io.StringIO()
    >>> dump_properties({"AppName": "My Application"}, buffer, header="App Configuration")
    1
    >>> buffer.getvalue()
    '#App Configuration\\nAppName=My Application\\n'
    >>> parse_properties(buffer.getvalue().splitlines())
    {'AppName': 'My Application'}
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, Mapping, Optional, TextIO, Tuple

from ..constants import COMMENT_PREFIXES, KEY_VALUE_SEPARATOR, TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t"}

# Characters that would change how a line is read if they started a key
_KEY_LEADING_SPECIALS = frozenset({"#", "!", " ", "\f"})
_LEADING_BLANKS = " \t\f"


def _escape(text: str, extra: str = "") -> str:
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch in extra:
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def escape_key(key: str) -> str:
    """Escape a key so it survives a write/read cycle intact."""
    escaped = _escape(key, extra=KEY_VALUE_SEPARATOR)
    if key and key[0] in _KEY_LEADING_SPECIALS:
        escaped = "\\" + escaped
    return escaped


def escape_value(value: str) -> str:
    """Escape a value so it stays on a single line."""
    return _escape(value)


def unescape(text: str) -> str:
    """Reverse ``escape_key`` / ``escape_value``.

    ``\\n``, ``\\r`` and ``\\t`` become control characters; any other
    escaped character stands for itself. A trailing lone backslash is dropped.
    """
    if "\\" not in text:
        return text
    out = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append(_UNESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


def split_entry(line: str) -> Optional[Tuple[str, str]]:
    """Split a raw entry at the first unescaped separator.

    Returns:
        The still-escaped ``(key, value)`` pair, or None when the line has
        no separator.
    """
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch == KEY_VALUE_SEPARATOR:
            return line[:i], line[i + 1:]
        i += 1
    return None


def parse_properties(lines: Iterable[str]) -> Dict[str, str]:
    """
    Parse properties lines into a dict.

    Blank lines and comments are ignored, leading blanks are stripped, and
    lines without a separator are skipped. Later entries win over earlier
    ones with the same key.

    Args:
        lines: Lines of text, with or without line terminators

    Returns:
        Mapping of unescaped keys to unescaped values
    """
    entries: Dict[str, str] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n").lstrip(_LEADING_BLANKS)
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        parts = split_entry(line)
        if parts is None:
            logger.debug(f"Skipping line {lineno}: no '{KEY_VALUE_SEPARATOR}' separator")
            continue

        key, value = parts
        entries[unescape(key)] = unescape(value)
    return entries


def dump_properties(
    settings: Mapping[str, str],
    stream: TextIO,
    header: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> int:
    """
    Write settings to a text stream in properties format.

    Args:
        settings: Mapping to serialize; values are formatted with str()
        stream: Writable text stream
        header: Comment written first; each of its lines gets a '#' prefix
        timestamp: Written as a second comment line when given

    Returns:
        Number of entries written
    """
    if header is not None:
        for line in header.splitlines() or [""]:
            stream.write(f"#{line}\n")
    if timestamp is not None:
        stream.write(f"#{timestamp.strftime(TIMESTAMP_FORMAT)}\n")

    for key in sorted(settings):
        value = str(settings[key])
        stream.write(f"{escape_key(key)}{KEY_VALUE_SEPARATOR}{escape_value(value)}\n")
    return len(settings)


__all__ = [
    "escape_key",
    "escape_value",
    "unescape",
    "split_entry",
    "parse_properties",
    "dump_properties",
]
