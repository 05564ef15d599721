"""Tests for the evaluate() entry point.

evaluate() must be total: every input yields either a formatted number or
"ERR". evaluate_detailed() is used to check which failure produced ERR.
"""

import sys
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cocalc import SENTINEL, ErrorKind, evaluate, evaluate_detailed


# --- Reference cases ---

@pytest.mark.parametrize(
    "text, expected",
    [
        ("1+2*3", "7"),
        ("(1+2)*3", "9"),
        ("50%", "0.5"),
        ("--5", "5"),
        ("3/(2-2)", "ERR"),
        ("(((1+1", "2"),
        ("1+", "ERR"),
        (")1", "ERR"),
    ],
)
def test_reference_cases(text, expected):
    assert evaluate(text) == expected


# --- Successful evaluations ---

@pytest.mark.parametrize(
    "text, expected",
    [
        ("15 / 4", "3.75"),
        ("10/3", "3.333333333"),
        ("-7*3", "-21"),
        ("0.1+0.2", "0.3"),
        ("((2 + 3) * (4 - 1))", "15"),
        ("2*(3+4", "14"),
        ("  42  ", "42"),
        ("50%%", "0.005"),
        ("1/3*3", "1"),
        (".5+.5", "1"),
    ],
)
def test_evaluates(text, expected):
    assert evaluate(text) == expected


# --- Failure kinds ---

@pytest.mark.parametrize(
    "text, kind",
    [
        (")1", ErrorKind.PAREN_IMBALANCE),
        ("(1))", ErrorKind.PAREN_IMBALANCE),
        ("1+.", ErrorKind.MALFORMED_LITERAL),
        ("1+", ErrorKind.SYNTAX_ERROR),
        ("", ErrorKind.SYNTAX_ERROR),
        ("(", ErrorKind.SYNTAX_ERROR),
        ("2 + + * 3", ErrorKind.SYNTAX_ERROR),
        ("2x", ErrorKind.TRAILING_GARBAGE),
        ("3/(2-2)", ErrorKind.DIVISION_BY_ZERO),
        ("1" + "0" * 200 + "*" + "1" + "0" * 200, ErrorKind.NON_FINITE),
    ],
)
def test_failure_kind(text, kind):
    result = evaluate_detailed(text)
    assert result.error is kind
    assert result.output == SENTINEL
    assert result.value is None
    assert evaluate(text) == SENTINEL


def test_none_treated_as_empty():
    assert evaluate(None) == SENTINEL
    assert evaluate_detailed(None).expression == ""


def test_detailed_success_fields():
    result = evaluate_detailed("((1+1")
    assert result.ok
    assert result.normalized == "((1+1))"
    assert result.value == pytest.approx(2.0)
    assert result.output == "2"
    assert result.verdict == "ok"


def test_paren_failure_keeps_normalized_empty():
    result = evaluate_detailed(")(")
    assert result.error is ErrorKind.PAREN_IMBALANCE
    assert result.normalized == ""


def test_deep_nesting_reports_sentinel():
    depth = sys.getrecursionlimit() * 2
    result = evaluate_detailed("(" * depth + "1")
    assert result.error is ErrorKind.NESTING_TOO_DEEP
    assert result.output == SENTINEL


def test_deep_unary_chain_reports_sentinel():
    assert evaluate("-" * (sys.getrecursionlimit() * 2) + "1") == SENTINEL


def test_to_dict_round_trip():
    from cocalc.models import Evaluation

    result = evaluate_detailed("3/0")
    restored = Evaluation.from_dict(result.to_dict())
    assert restored == result


# --- Properties ---

_SAFE_DIVISOR = st.floats(min_value=1e-6, max_value=1e6).map(lambda f: round(f, 4)).filter(lambda f: f >= 1e-4)
_OPERAND = st.integers(min_value=0, max_value=10_000)


@given(st.text(max_size=120))
@settings(max_examples=300)
def test_never_raises(text: str) -> None:
    """Invariant: arbitrary text yields a string, never an exception."""
    out = evaluate(text)
    assert isinstance(out, str)
    assert out == SENTINEL or out.lstrip("-")[:1].isdigit()


@given(st.text(alphabet=st.sampled_from("0123456789.+-*/%() "), max_size=40))
@settings(max_examples=300)
def test_never_emits_inf_or_nan(text: str) -> None:
    out = evaluate(text)
    assert "inf" not in out
    assert "nan" not in out


@given(_OPERAND, _OPERAND, _OPERAND)
@settings(max_examples=200)
def test_precedence_matches_python(a: int, b: int, c: int) -> None:
    assert evaluate(f"{a}+{b}*{c}") == str(a + b * c)
    assert evaluate(f"({a}+{b})*{c}") == str((a + b) * c)
    assert evaluate(f"{a}-{b}-{c}") == str(a - b - c)
    assert evaluate(f"-{a}*-{b}") == str(a * b)


@given(_OPERAND, _SAFE_DIVISOR)
@settings(max_examples=200)
def test_division_close_to_python(a: int, d: float) -> None:
    result = evaluate_detailed(f"{a}/{d}")
    assert result.ok
    assert result.value == pytest.approx(a / d)


@given(st.floats(min_value=0, max_value=1e-13, exclude_max=False))
@settings(max_examples=100)
def test_division_guard(tiny: float) -> None:
    """Invariant: a divisor below 1e-12 is always ERR, never inf."""
    expr = f"1/{tiny:.20f}"
    assert evaluate_detailed(expr).error is ErrorKind.DIVISION_BY_ZERO


# --- Independence between calls ---

_MIXED_INPUTS = ["1+2*3", "(((1+1", ")1", "50%%", "3/(2-2)", "2x", "-7*3", "1+", "10/3", ".5+.5"]


def test_interleaved_calls_match_one_off_results():
    expected = {text: evaluate(text) for text in _MIXED_INPUTS}
    interleaved = _MIXED_INPUTS[::-1] + _MIXED_INPUTS + _MIXED_INPUTS[::2]
    for text in interleaved:
        assert evaluate(text) == expected[text]


def test_concurrent_calls_match_one_off_results():
    expected = {text: evaluate_detailed(text) for text in _MIXED_INPUTS}
    workload = _MIXED_INPUTS * 50
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(evaluate_detailed, workload))
    for text, result in zip(workload, results):
        assert result == expected[text]
