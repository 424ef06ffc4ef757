"""SymPy cross-check for power-rule results.

Parses expressions with SymPy's parse_expr (^ → **, implicit multiplication),
differentiates the computed antiderivative and compares it numerically with the
integrand. Verification is advisory only: it never changes a result.
"""

import logging
import string
from tokenize import TokenError

import sympy
from sympy.parsing.sympy_parser import (
    parse_expr,
    standard_transformations,
    implicit_multiplication,
    convert_xor,
)

logger = logging.getLogger(__name__)

_TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication,
    convert_xor,
)

# Results are rounded to 6 decimals, so exact comparison is not possible
SAMPLE_POINTS = (0.5, 1.25, 2.0, 3.5)
REL_TOL = 1e-5
ABS_TOL = 1e-6
PRECISION = 15

_BLOCKED = (
    "exec", "eval", "__import__", "open", "compile",
    "globals", "locals", "getattr", "setattr", "delattr",
    "breakpoint", "exit", "quit", "input", "print",
)


def _namespace():
    ns = {name: None for name in _BLOCKED}
    # Every single letter is a plain symbol, never E, I, S, N, ...
    ns.update({ch: sympy.Symbol(ch) for ch in string.ascii_letters})
    return ns


def parse(expression: str, evaluate: bool = False):
    """Parse surface syntax ('2*x^3-1') into a SymPy expression.

    Left unevaluated by default so integer towers like 9^9^9 are never
    computed exactly.
    """
    return parse_expr(expression.strip() or "0", local_dict=_namespace(),
                      transformations=_TRANSFORMATIONS, evaluate=evaluate)


def _numeric(expr, sym, point):
    """Value of expr at sym=point as an mpmath-backed Float, or None if not a finite real."""
    value = expr.evalf(PRECISION, subs={sym: point})
    if not (value.is_Number and value.is_finite and value.is_real):
        return None
    return value


def _close(a, b) -> bool:
    return bool(abs(a - b) <= max(REL_TOL * max(abs(a), abs(b)), ABS_TOL))


def check_antiderivative(expression: str, result: str, variable: str = "x") -> bool:
    """True when d/dvar(result) matches expression at every sample point."""
    try:
        sym = sympy.Symbol(variable)
        integrand = parse(expression)
        derivative = sympy.diff(parse(result), sym)
        for point in SAMPLE_POINTS:
            expected = _numeric(integrand, sym, point)
            actual = _numeric(derivative, sym, point)
            if expected is None or actual is None or not _close(expected, actual):
                return False
        return True
    except (sympy.SympifyError, SyntaxError, TokenError, TypeError, ValueError, ZeroDivisionError) as e:
        logger.debug("Could not verify %r against %r: %s", result, expression, e)
        return False


def reference_integral(expression: str, variable: str = "x") -> str:
    """SymPy's own antiderivative, for comparison."""
    return str(sympy.integrate(parse(expression, evaluate=True), sympy.Symbol(variable)))
