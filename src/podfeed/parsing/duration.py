"""Colon-delimited time token parsing (``SS``, ``MM:SS``, ``HH:MM:SS``, ``D:HH:MM:SS``)."""

import re

_LEADING_DIGITS = re.compile(r"\s*(\d+)")

# Seconds per unit, least significant first.
_UNIT_WEIGHTS = (1, 60, 60 * 60, 60 * 60 * 24)


def parse_int(text: str | None) -> int | None:
    """Parse the leading decimal digits of a string.

    Trailing garbage is ignored (``"60 min"`` is 60). Returns None when the
    string does not start with a digit.
    """
    if not text:
        return None
    match = _LEADING_DIGITS.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_duration(text: str | None) -> int:
    """Convert a duration token into whole seconds.

    Segments that are not numeric contribute zero instead of failing the
    whole value, so ``"abc:30"`` is 30 and ``"abc"`` is 0. Segments more
    significant than days are ignored.

    Args:
        text: Duration such as ``"45"``, ``"1:30"`` or ``"1:30:45"``.

    Returns:
        Non-negative number of seconds.
    """
    if not text:
        return 0

    total = 0
    for weight, token in zip(_UNIT_WEIGHTS, reversed(text.split(":"))):
        value = parse_int(token)
        if value is not None:
            total += value * weight
    return total


def parse_chapter_start(text: str) -> int:
    """Parse a chapter start offset, discarding sub-second precision."""
    return parse_duration(text.split(".", 1)[0])
