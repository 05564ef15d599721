"""Bracket balancing pass run before parsing.

Missing trailing closers are repaired by appending ``)``; a closer that
appears before its opener is rejected outright.
"""

from __future__ import annotations


def paren_balance(text: str) -> tuple[int, bool]:
    """Return (open_count_remaining, ok).

    ``ok`` is False as soon as the running balance drops below zero; the
    count returned in that case is the balance at the failing position.
    """
    balance = 0
    for char in text:
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
            if balance < 0:
                return balance, False
    return balance, True


def normalize_parens(text: str) -> tuple[str, bool]:
    """Close any unmatched ``(`` at the end of the text.

    Returns (normalized_text, ok). On failure the original text is returned
    unchanged.

    Examples:
        "(((1+1"  → ("(((1+1)))", True)
        ")1"      → (")1", False)
    """
    balance, ok = paren_balance(text)
    if not ok:
        return text, False
    return text + ")" * balance, True
