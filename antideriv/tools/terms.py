"""Term splitter.

Splits an infix token list at every binary '+'/'-'. Parenthesis depth is not
tracked, so '(x+1)' is split into '(x' and '1)'. A negative term is returned
with a leading 'u-' token carrying its sign.
"""

from .tokens import Token, UNARY_MINUS, operator


def split_terms(tokens: list[Token]) -> list[list[Token]]:
    terms = []
    current = []
    sign = []

    for token in tokens:
        if token.is_op("+", "-"):
            if current:
                terms.append(sign + current)
                current = []
            sign = [operator(UNARY_MINUS)] if token.text == "-" else []
        else:
            current.append(token)

    if current:
        terms.append(sign + current)

    return terms
