"""Evaluate entry point — normalize → parse → format.

Data flow per call:
1. Normalize paren balance (append missing closers, reject early ones)
2. Parse and evaluate the normalized text
3. Reject non-finite results
4. Format the float for display

Any failure short-circuits to SENTINEL. evaluate() only ever returns the
formatted number or SENTINEL; evaluate_detailed() also reports which
ErrorKind stopped the pipeline.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from cocalc.formatter import format_value
from cocalc.models import SENTINEL, ErrorKind, Evaluation
from cocalc.parens import normalize_parens
from cocalc.parser import parse

logger = logging.getLogger(__name__)


def evaluate_detailed(text: Optional[str]) -> Evaluation:
    """Run the full pipeline and keep the failure reason.

    Args:
        text: Raw expression text. None is treated as "".

    Returns:
        Evaluation with ``output`` set to the formatted number, or to
        SENTINEL with ``error`` naming the failing stage.
    """
    expression = text or ""
    result = Evaluation(expression=expression)

    normalized, ok = normalize_parens(expression)
    if not ok:
        return _fail(result, ErrorKind.PAREN_IMBALANCE)
    result.normalized = normalized

    try:
        value, error = parse(normalized)
    except RecursionError:
        logger.warning("Expression nesting exceeds recursion limit (%d chars)", len(normalized))
        return _fail(result, ErrorKind.NESTING_TOO_DEEP)
    if error:
        return _fail(result, error)

    if not math.isfinite(value):
        return _fail(result, ErrorKind.NON_FINITE)

    result.value = value
    result.output = format_value(value)
    logger.debug("Evaluated %r → %s", expression, result.output)
    return result


def evaluate(text: Optional[str]) -> str:
    """Evaluate an arithmetic expression to its display string.

    Examples:
        >>> evaluate("1+2*3")
        '7'
        >>> evaluate("50%")
        '0.5'
        >>> evaluate("3/(2-2)")
        'ERR'
    """
    return evaluate_detailed(text).output


def _fail(result: Evaluation, error: ErrorKind) -> Evaluation:
    logger.debug("Evaluation of %r failed: %s", result.expression, error.value)
    result.error = error
    result.output = SENTINEL
    return result
