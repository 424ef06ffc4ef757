"""Unit tests for the power-rule integrator.

Run:  uv run pytest tests/test_power_rule.py
"""

import math

import pytest

from antideriv.tools.postfix import to_postfix
from antideriv.tools.power_rule import (
    Monomial, MalformedTermError,
    evaluate_term, integrate_term, integrate_expression, integrate_terms, signed, stitch,
    format_number, safe_divide,
)
from antideriv.tools.render import render
from antideriv.tools.tokenizer import tokenize
from antideriv.tools.tokens import TokenKind, ZERO


def evaluate(expression, variable="x"):
    return evaluate_term(to_postfix(tokenize(expression)), variable)


def integrate(expression, variable="x"):
    return render(integrate_expression(tokenize(expression), variable))


# ── Number formatting ──────────────────────────────────

def test_format_number():
    assert format_number(0.5) == "0.5"
    assert format_number(3.0) == "3"
    assert format_number(100.0) == "100"
    assert format_number(-2.5) == "-2.5"
    assert format_number(1 / 3) == "0.333333"
    assert format_number(2 / 3) == "0.666667"
    assert format_number(1e-7) == "0"
    assert format_number(math.inf) == "inf"
    assert format_number(math.nan) == "nan"


def test_safe_divide_follows_ieee():
    assert safe_divide(1.0, 4.0) == 0.25
    assert safe_divide(1.0, 0.0) == math.inf
    assert safe_divide(-1.0, 0.0) == -math.inf
    assert safe_divide(1.0, -0.0) == -math.inf
    assert math.isnan(safe_divide(0.0, 0.0))


# ── Term evaluation ────────────────────────────────────

def test_evaluate_monomials():
    assert evaluate("2*x^4") == Monomial(2.0, 4.0, True)
    assert evaluate("x") == Monomial(1.0, 1.0, True)
    assert evaluate("7") == Monomial(7.0, 0.0, False)
    assert evaluate("x*x") == Monomial(1.0, 2.0, True)
    assert evaluate("x/2") == Monomial(0.5, 1.0, True)
    assert evaluate("-4*x^2") == Monomial(-4.0, 2.0, True)
    assert evaluate("+x") == Monomial(1.0, 1.0, True)


def test_division_keeps_numerator_exponent():
    assert evaluate("x/x") == Monomial(1.0, 1.0, True)


def test_power_always_marks_variable():
    assert evaluate("2^3") == Monomial(2.0, 3.0, True)
    assert integrate("2^3") == "0.5*(x^4)"


def test_number_prefix_parsing():
    assert evaluate("1.2.3") == Monomial(1.2, 0.0, False)
    assert evaluate("5.") == Monomial(5.0, 0.0, False)


def test_malformed_terms_raise():
    for expression in ("*", "x*", "-", "", ".", "3*y"):
        with pytest.raises(MalformedTermError):
            evaluate(expression)


# ── Single terms ───────────────────────────────────────

def test_constant_term_is_one_literal_token():
    tokens = integrate_term(to_postfix(tokenize("7")), "x")
    assert len(tokens) == 1
    assert tokens[0].kind is TokenKind.LITERAL
    assert tokens[0].text == "7*x"


def test_monomial_term_tokens():
    tokens = integrate_term(to_postfix(tokenize("6*x")), "x")
    assert [t.text for t in tokens] == ["3", "*", "(", "x", "^", "2", ")"]


@pytest.mark.parametrize("c", [2.0, 3.5, -4.0, 0.25])
@pytest.mark.parametrize("n", [0.0, 2.0, 5.0, 0.5])
def test_power_rule_coefficients(c, n):
    tokens = integrate_term(to_postfix(tokenize(f"{c}*x^{n}")), "x")
    coeff, exponent = float(tokens[0].text), float(tokens[5].text)
    assert exponent == n + 1
    assert abs(coeff - c / (n + 1)) < 5e-7
    assert abs(coeff - float(format_number(c / (n + 1)))) < 1e-9


def test_malformed_term_degrades_to_zero():
    assert integrate_term(to_postfix(tokenize("*")), "x") == [ZERO]
    with pytest.raises(MalformedTermError):
        integrate_term(to_postfix(tokenize("*")), "x", strict=True)


def test_other_variables_ignored():
    assert integrate("y*y*x", "x") == "0"
    assert integrate("3*y", "y") == "1.5*(y^2)"


# ── Whole expressions ──────────────────────────────────

def test_examples():
    assert integrate("6*x") == "3*(x^2)"
    assert integrate("6*(x^1/2)") == "1.5*(x^2)"
    assert integrate("2*(x^3)-6*x+7") == "0.5*(x^4)-3*(x^2)+7*x"
    assert integrate("2*x^4-5*x+3") == "0.4*(x^5)-2.5*(x^2)+3*x"
    assert integrate("4*x^5-2*x^3+x-8") == "0.666667*(x^6)-0.5*(x^4)+0.5*(x^2)-8*x"


def test_leading_sign():
    assert integrate("-6*x") == "-3*(x^2)"
    assert integrate("+6*x") == "3*(x^2)"
    assert integrate("3 - -x") == "3*x--0.5*(x^2)"


def test_constants():
    assert integrate("5") == "5*x"
    assert integrate("2.5") == "2.5*x"
    assert integrate("-8") == "-8*x"


def test_empty_is_zero():
    assert integrate("") == "0"
    assert integrate("   ") == "0"


def test_undefined_coefficients_propagate():
    assert integrate("x^-1") == "inf*(x^0)"
    assert integrate("1/0") == "inf*x"
    assert integrate("0/0") == "nan*x"


def test_strict_expression():
    with pytest.raises(MalformedTermError):
        integrate_expression(tokenize("x+*"), "x", strict=True)
    assert integrate("x+*") == "0.5*(x^2)+0"


def test_integrate_terms_single_pass():
    parts = list(integrate_terms(tokenize("2*(x^3)-6*x+7"), "x"))
    assert [negative for _, negative, _ in parts] == [False, True, False]
    assert [render(signed(n, t)) for _, n, t in parts] == ["0.5*(x^4)", "-3*(x^2)", "7*x"]
    assert render(stitch((n, t) for _, n, t in parts)) == "0.5*(x^4)-3*(x^2)+7*x"
    assert stitch([]) == [ZERO]
