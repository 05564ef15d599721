"""Whitespace skipping and numeric literal recognition."""

from __future__ import annotations

import math
from typing import Optional

from cocalc.models import Cursor, ErrorKind

# C-locale isspace() set; str.isspace() would also accept Unicode spaces.
WHITESPACE = frozenset(" \t\n\v\f\r")
DIGITS = frozenset("0123456789")


def skip_whitespace(cursor: Cursor) -> None:
    while not cursor.at_end and cursor.peek() in WHITESPACE:
        cursor.advance()


def _skip_digits(cursor: Cursor) -> bool:
    """Advance past a run of ASCII digits. Returns True if any were consumed."""
    start = cursor.pos
    while not cursor.at_end and cursor.peek() in DIGITS:
        cursor.advance()
    return cursor.pos > start


def parse_number(cursor: Cursor) -> tuple[float, Optional[ErrorKind]]:
    """Read a decimal literal such as ``12``, ``3.``, ``.5`` or ``0.25``.

    Leading whitespace is skipped. On success the cursor sits just past the
    literal and the error is None.

    Returns:
        (value, error) tuple. ``SYNTAX_ERROR`` when no literal can start
        here (end of input, operator, letter), ``MALFORMED_LITERAL`` for a
        bare ``.`` or a digit string too large for a float.
    """
    skip_whitespace(cursor)
    if cursor.at_end:
        return 0.0, ErrorKind.SYNTAX_ERROR

    first = cursor.peek()
    if first not in DIGITS and first != ".":
        return 0.0, ErrorKind.SYNTAX_ERROR

    start = cursor.pos
    has_digit = _skip_digits(cursor)
    if cursor.peek() == ".":
        cursor.advance()
        has_digit = _skip_digits(cursor) or has_digit

    if not has_digit:
        return 0.0, ErrorKind.MALFORMED_LITERAL

    value = float(cursor.text[start:cursor.pos])
    if not math.isfinite(value):
        return 0.0, ErrorKind.MALFORMED_LITERAL
    return value, None
