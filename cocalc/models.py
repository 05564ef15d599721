"""Data models for the cocalc evaluation pipeline.

ErrorKind, Cursor, Evaluation — the typed structures that flow through
normalizer → parser → formatter → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# The only failure shape callers of evaluate() ever see.
SENTINEL = "ERR"


class ErrorKind(str, Enum):
    """Why an evaluation failed. Collapsed to SENTINEL at the boundary."""

    PAREN_IMBALANCE = "paren-imbalance"
    MALFORMED_LITERAL = "malformed-literal"
    SYNTAX_ERROR = "syntax-error"
    TRAILING_GARBAGE = "trailing-garbage"
    DIVISION_BY_ZERO = "division-by-zero"
    NON_FINITE = "non-finite"
    NESTING_TOO_DEEP = "nesting-too-deep"


@dataclass
class Cursor:
    """Read position into one expression buffer.

    Created per evaluation and passed explicitly to every parsing function.
    ``pos`` only moves forward while parsing succeeds; after a failure its
    value is meaningless.
    """

    text: str
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Current character, or '' at end of input."""
        if self.at_end:
            return ""
        return self.text[self.pos]

    def advance(self) -> None:
        if not self.at_end:
            self.pos += 1


@dataclass
class Evaluation:
    """Complete result of a single evaluate_detailed() call."""

    expression: str
    normalized: str = ""
    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    output: str = SENTINEL

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def verdict(self) -> str:
        if self.error is None:
            return "ok"
        return self.error.value

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "normalized": self.normalized,
            "value": self.value,
            "error": self.error.value if self.error else None,
            "output": self.output,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Evaluation:
        """Deserialize from a dict produced by to_dict()."""
        error = d.get("error")
        return cls(
            expression=d.get("expression", ""),
            normalized=d.get("normalized", ""),
            value=d.get("value"),
            error=ErrorKind(error) if error else None,
            output=d.get("output", SENTINEL),
        )
