"""Infix → postfix conversion (shunting-yard).

Unbalanced parentheses are tolerated: a stray ')' is ignored and an unclosed
'(' is dropped when the operator stack is drained.
"""

from .tokens import Token, TokenKind, UNARY_MINUS, UNARY_PLUS

PRECEDENCE = {
    UNARY_MINUS: 5, UNARY_PLUS: 5,
    "^": 4,
    "*": 3, "/": 3,
    "+": 2, "-": 2,
}

RIGHT_ASSOC = {"^"}


def precedence(symbol: str) -> int:
    return PRECEDENCE.get(symbol, 0)


def is_right_assoc(symbol: str) -> bool:
    return symbol in RIGHT_ASSOC


def _should_pop(top: Token, current: Token) -> bool:
    if top.text == "(":
        return False
    p_top, p_cur = precedence(top.text), precedence(current.text)
    return p_top > p_cur or (p_top == p_cur and not is_right_assoc(current.text))


def to_postfix(tokens: list[Token]) -> list[Token]:
    output = []
    stack = []

    for token in tokens:
        if token.kind is not TokenKind.OPERATOR:
            output.append(token)
        elif token.text == "(":
            stack.append(token)
        elif token.text == ")":
            while stack and stack[-1].text != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        token = stack.pop()
        if token.text != "(":
            output.append(token)

    return output
