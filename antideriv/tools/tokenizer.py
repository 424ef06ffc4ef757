"""Tokenizer — splits an expression string into Number, Variable and Operator tokens.

A leading '+'/'-' (at the start, after another operator or after '(') is a sign,
emitted as the synthetic 'u+'/'u-' operators. Unknown characters are dropped.
"""

from .tokens import Token, OPERATORS, UNARY_MINUS, UNARY_PLUS, number, operator, variable

_NUMBER_CHARS = set("0123456789.")


def tokenize(expression: str) -> list[Token]:
    tokens = []
    expect_unary = True
    i, n = 0, len(expression)

    while i < n:
        ch = expression[i]

        if ch.isspace():
            i += 1
            continue

        if expect_unary and ch in "+-":
            tokens.append(operator(UNARY_MINUS if ch == "-" else UNARY_PLUS))
            expect_unary = False
            i += 1
            continue

        if ch in _NUMBER_CHARS:
            start = i
            while i < n and expression[i] in _NUMBER_CHARS:
                i += 1
            tokens.append(number(expression[start:i]))
            expect_unary = False
            continue

        if ch.isascii() and ch.isalpha():
            tokens.append(variable(ch))
            expect_unary = False
            i += 1
            continue

        if ch in OPERATORS:
            tokens.append(operator(ch))
            expect_unary = ch != ")"

        i += 1

    return tokens
