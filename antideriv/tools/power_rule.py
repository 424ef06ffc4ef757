"""Power-rule integrator.

Evaluates a term's postfix tokens to a single monomial c*x^n and integrates it:

    ∫ c dx     = c*x
    ∫ c*x^n dx = c/(n+1)*(x^(n+1))

Only monomials are handled. Division keeps the numerator's exponent, and '^'
always marks its result as containing the variable, so terms like 'x/x' or
'2^3' integrate as if they were 'x' and '2*x^3'. Both behaviours are kept as-is.
"""

import logging
import math
import re
from dataclasses import dataclass

from .postfix import to_postfix
from .terms import split_terms
from .tokens import (
    Token, TokenKind, ZERO, UNARY_MINUS, UNARY_PLUS,
    number, operator, variable as variable_token,
)

logger = logging.getLogger(__name__)

PRECISION = 6

_NUMBER_RE = re.compile(r"\d+\.?\d*|\.\d+")


class IntegrationError(Exception):
    pass


class MalformedTermError(IntegrationError):
    def __init__(self, message, term=None):
        super().__init__(message)
        self.term = term


@dataclass(frozen=True)
class Monomial:
    coefficient: float
    exponent: float = 0.0
    has_variable: bool = False

    def negated(self) -> "Monomial":
        return Monomial(-self.coefficient, self.exponent, self.has_variable)


def safe_divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 gives ±inf, 0/0 and nan/0 give nan."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def format_number(value: float) -> str:
    """Fixed 6-decimal rendering with trailing zeros and a trailing '.' removed."""
    text = f"{value:.{PRECISION}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_number(text: str) -> float:
    # Longest numeric prefix, so '1.2.3' reads as 1.2
    match = _NUMBER_RE.match(text)
    if match is None:
        raise MalformedTermError(f"Invalid number literal: {text!r}")
    return float(match.group())


def _pop(stack, token, term):
    if not stack:
        raise MalformedTermError(f"Not enough operands for {token.display}", term)
    return stack.pop()


def evaluate_term(postfix: list[Token], variable: str) -> Monomial:
    """Reduce a term's postfix tokens to its monomial state.

    Raises MalformedTermError when an operator lacks operands or nothing is left
    on the stack. Variables other than ``variable`` are ignored.
    """
    stack = []

    for token in postfix:
        if token.kind is TokenKind.NUMBER:
            stack.append(Monomial(_parse_number(token.text)))
        elif token.kind is TokenKind.VARIABLE:
            if token.text == variable:
                stack.append(Monomial(1.0, 1.0, True))
            else:
                logger.debug("Ignoring variable %r while integrating over %r", token.text, variable)
        elif token.kind is not TokenKind.OPERATOR:
            continue
        elif token.text == UNARY_MINUS:
            stack.append(_pop(stack, token, postfix).negated())
        elif token.text == UNARY_PLUS:
            continue
        elif token.text == "*":
            right, left = _pop(stack, token, postfix), _pop(stack, token, postfix)
            stack.append(Monomial(
                left.coefficient * right.coefficient,
                left.exponent + right.exponent,
                left.has_variable or right.has_variable,
            ))
        elif token.text == "/":
            den, num = _pop(stack, token, postfix), _pop(stack, token, postfix)
            stack.append(Monomial(
                safe_divide(num.coefficient, den.coefficient),
                num.exponent,
                num.has_variable,
            ))
        elif token.text == "^":
            power, base = _pop(stack, token, postfix), _pop(stack, token, postfix)
            stack.append(Monomial(base.coefficient, power.coefficient, True))

    if not stack:
        raise MalformedTermError("Term has no value", postfix)
    return stack[-1]


def antiderivative(state: Monomial, variable: str) -> list[Token]:
    """Apply the power rule to an evaluated monomial."""
    if not state.has_variable:
        return [Token(TokenKind.LITERAL, f"{format_number(state.coefficient)}*{variable}")]

    new_exp = state.exponent + 1.0
    new_coeff = safe_divide(state.coefficient, new_exp)
    return [
        number(format_number(new_coeff)),
        operator("*"),
        operator("("),
        variable_token(variable),
        operator("^"),
        number(format_number(new_exp)),
        operator(")"),
    ]


def integrate_term(postfix: list[Token], variable: str, strict: bool = False) -> list[Token]:
    """Integrate one term given in postfix order.

    A malformed term integrates to ``0`` unless ``strict`` is set, in which case
    the MalformedTermError is raised.
    """
    try:
        state = evaluate_term(postfix, variable)
    except MalformedTermError as e:
        if strict:
            raise
        logger.debug("Malformed term, using 0: %s", e)
        return [ZERO]
    return antiderivative(state, variable)


def integrate_terms(tokens: list[Token], variable: str, strict: bool = False):
    """Yield (term, negative, antiderivative) for each top-level term.

    ``term`` keeps its leading 'u-'; ``antiderivative`` is unsigned.
    """
    for term in split_terms(tokens):
        negative = bool(term) and term[0].is_op(UNARY_MINUS)
        body = term[1:] if negative else term
        yield term, negative, integrate_term(to_postfix(body), variable, strict=strict)


def signed(negative: bool, integrated: list[Token]) -> list[Token]:
    return [operator("-")] + integrated if negative else integrated


def stitch(parts) -> list[Token]:
    """Join (negative, antiderivative) pairs with '+'/'-' separators."""
    result = []

    for negative, integrated in parts:
        if not integrated:
            continue
        if negative:
            result.append(operator("-"))
        elif result:
            result.append(operator("+"))
        result.extend(integrated)

    return result or [ZERO]


def integrate_expression(tokens: list[Token], variable: str, strict: bool = False) -> list[Token]:
    """Integrate an infix token list term by term and stitch the signs back in."""
    return stitch((negative, integrated)
                  for _, negative, integrated in integrate_terms(tokens, variable, strict))
