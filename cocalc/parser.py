"""Recursive-descent parser that evaluates while it parses.

Grammar, loosest to tightest binding:

    expr   := term ( ('+'|'-') term )*
    term   := factor ( ('*'|'/') factor )*
    factor := ( ('+'|'-') factor | '(' expr ')' | number ) '%'*

No tree is built: every rule returns its float directly, so parsing is
O(n) with stack depth proportional to paren/sign nesting.

Every rule returns a ``(value, error)`` pair. A non-None error is a hard
stop; callers return it unchanged and never resume from the cursor.
"""

from __future__ import annotations

from typing import Optional

from cocalc.models import Cursor, ErrorKind
from cocalc.scanner import parse_number, skip_whitespace

# Divisors closer to zero than this are treated as zero.
DIVISION_EPSILON = 1e-12

Result = tuple[float, Optional[ErrorKind]]


def parse_factor(cursor: Cursor) -> Result:
    """Signed value, parenthesized expr or literal, then any postfix ``%``."""
    skip_whitespace(cursor)
    if cursor.at_end:
        return 0.0, ErrorKind.SYNTAX_ERROR

    char = cursor.peek()
    if char in ("+", "-"):
        cursor.advance()
        value, error = parse_factor(cursor)
        if error:
            return 0.0, error
        if char == "-":
            value = -value
    elif char == "(":
        cursor.advance()
        value, error = parse_expr(cursor)
        if error:
            return 0.0, error
        skip_whitespace(cursor)
        if cursor.peek() != ")":
            return 0.0, ErrorKind.SYNTAX_ERROR
        cursor.advance()
    else:
        value, error = parse_number(cursor)
        if error:
            return 0.0, error

    # Postfix percent, left to right: 50%% == 50 / 100 / 100
    while True:
        skip_whitespace(cursor)
        if cursor.peek() != "%":
            break
        cursor.advance()
        value /= 100.0

    return value, None


def parse_term(cursor: Cursor) -> Result:
    left, error = parse_factor(cursor)
    if error:
        return 0.0, error

    while True:
        skip_whitespace(cursor)
        op = cursor.peek()
        if op not in ("*", "/"):
            break
        cursor.advance()

        right, error = parse_factor(cursor)
        if error:
            return 0.0, error

        if op == "*":
            left *= right
        else:
            if abs(right) < DIVISION_EPSILON:
                return 0.0, ErrorKind.DIVISION_BY_ZERO
            left /= right

    return left, None


def parse_expr(cursor: Cursor) -> Result:
    left, error = parse_term(cursor)
    if error:
        return 0.0, error

    while True:
        skip_whitespace(cursor)
        op = cursor.peek()
        if op not in ("+", "-"):
            break
        cursor.advance()

        right, error = parse_term(cursor)
        if error:
            return 0.0, error

        if op == "+":
            left += right
        else:
            left -= right

    return left, None


def parse(text: str) -> Result:
    """Parse and evaluate a whole expression.

    The expression must consume the entire input; anything left after the
    last term (other than whitespace) is ``TRAILING_GARBAGE``.
    """
    cursor = Cursor(text)
    value, error = parse_expr(cursor)
    if error:
        return 0.0, error

    skip_whitespace(cursor)
    if not cursor.at_end:
        return 0.0, ErrorKind.TRAILING_GARBAGE
    return value, None
