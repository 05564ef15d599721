"""Running calculator state for the interactive REPL.

Mirrors a pocket calculator's "=" behaviour: after a successful result, a
line that starts with an operator continues from that result
("+ 1" → "<result>+ 1"), while anything else starts a fresh expression.
A failed line leaves the previous result in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from cocalc.evaluator import evaluate_detailed
from cocalc.models import Evaluation

# Operators that continue from the previous result when they lead a line.
CONTINUATION_OPERATORS = ("+", "-", "*", "/", "%")


def operand_text(value: float) -> str:
    """Render ``value`` as a literal the parser reads back exactly.

    The display string can be in exponent form ("1e-05"), which is not a
    valid literal, so the shortest repr is expanded to plain fixed-point.
    Negative values are parenthesized so "-" never merges with a following
    operator.
    """
    text = format(Decimal(repr(abs(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if value < 0:
        return f"(-{text})"
    return text


@dataclass
class Session:
    """Last result plus the evaluations submitted so far."""

    last_output: Optional[str] = None
    last_value: Optional[float] = None
    history: list[Evaluation] = field(default_factory=list)

    def expand(self, line: str) -> str:
        """Return the expression actually evaluated for ``line``."""
        stripped = line.strip()
        if self.last_value is not None and stripped.startswith(CONTINUATION_OPERATORS):
            return operand_text(self.last_value) + stripped
        return stripped

    def submit(self, line: str) -> Evaluation:
        result = evaluate_detailed(self.expand(line))
        self.history.append(result)
        if result.ok:
            self.last_output = result.output
            self.last_value = result.value
        return result

    def clear(self) -> None:
        self.last_output = None
        self.last_value = None
        self.history.clear()
