"""Quoting of values so they split back into the same tokens."""

from __future__ import annotations

from collections.abc import Iterable

from argsplit.core.tokenizer import NAMED_ESCAPES, QUOTE_CHARS, normalize_separators

_REVERSE_ESCAPES = {char: name for name, char in NAMED_ESCAPES.items()}


def _escape_char(char: str) -> str:
    if char == "\\" or char in QUOTE_CHARS:
        return "\\" + char
    if char in _REVERSE_ESCAPES:
        return "\\" + _REVERSE_ESCAPES[char]
    if not char.isprintable() and ord(char) <= 0xFF:
        return f"\\x{ord(char):02x}"
    return char


def needs_quoting(value: str, separators: str | Iterable[str] | None = None) -> bool:
    """Check if a value must be quoted or escaped to survive splitting."""
    if not value:
        return True
    seps = normalize_separators(separators)
    return any(
        c in seps or c in QUOTE_CHARS or c == "\\" or not c.isprintable()
        for c in value
    )


def quote(value: str, separators: str | Iterable[str] | None = None) -> str:
    """Quote a value for use in a line split with the same separators.

    Backslashes, quotes and control characters are escaped. Values that
    contain a separator are wrapped in double quotes.

    Args:
        value: The token value
        separators: Separator characters the line will be split on

    Returns:
        The quoted value
    """
    if not value:
        return '""'
    if not needs_quoting(value, separators):
        return value

    seps = normalize_separators(separators)
    escaped = "".join(_escape_char(c) for c in value)
    if any(c in seps for c in value):
        return f'"{escaped}"'
    return escaped


def join(
    values: Iterable[str],
    separator: str = " ",
    separators: str | Iterable[str] | None = None,
) -> str:
    """Join values into a single line, quoting as needed.

    Args:
        values: Token values
        separator: Character placed between values
        separators: Separator set the line will be split on (default: whitespace)

    Returns:
        A line that splits back into ``values``

    Examples:
        >>> join(["gcc", "-DNAME=hello world", "main.c"])
        'gcc "-DNAME=hello world" main.c'
    """
    seps = normalize_separators(separators) | normalize_separators([separator])
    return separator.join(quote(value, seps) for value in values)
