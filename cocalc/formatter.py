"""Render evaluation results as short display strings."""

from __future__ import annotations

# Values this close to an integer print without a fractional part.
INTEGER_TOLERANCE = 1e-10
SIGNIFICANT_DIGITS = 10


def format_value(value: float) -> str:
    """Format a finite float for display.

    Near-integers print as plain integers ("42", "-3"); anything else uses
    %g with 10 significant digits ("0.5", "3.1415926536", "1.234e-05").
    Lossy by design: parse → format → parse is only value-close.
    """
    nearest = round(value)
    if abs(value - nearest) < INTEGER_TOLERANCE:
        return str(int(nearest))
    return f"{value:.{SIGNIFICANT_DIGITS}g}"
