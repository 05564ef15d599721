"""cocalc — arithmetic expression evaluator for a calculator front-end.

Turns a line of text into a display string: a formatted number, or "ERR"
for anything malformed. Supports + - * /, unary signs, postfix percent and
parentheses, with missing trailing ")" closed automatically.

Usage:
    >>> from cocalc import evaluate
    >>> evaluate("(1+2)*3")
    '9'
    >>> evaluate("1+")
    'ERR'
"""

from cocalc.evaluator import evaluate, evaluate_detailed
from cocalc.models import SENTINEL, ErrorKind, Evaluation

__all__ = ["SENTINEL", "ErrorKind", "Evaluation", "evaluate", "evaluate_detailed"]
