"""Token model shared by the tokenizer, converter, integrator and renderer."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    OPERATOR = "operator"
    LITERAL = "literal"  # pre-rendered text such as "7*x"


UNARY_MINUS = "u-"
UNARY_PLUS = "u+"
UNARY = {UNARY_MINUS: "-", UNARY_PLUS: "+"}

OPERATORS = set("^*/+-()")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def display(self) -> str:
        """Surface text, with synthetic unary symbols shown as plain signs."""
        return UNARY.get(self.text, self.text)

    def is_op(self, *symbols) -> bool:
        return self.kind is TokenKind.OPERATOR and self.text in symbols


def number(text: str) -> Token:
    return Token(TokenKind.NUMBER, text)


def variable(name: str) -> Token:
    return Token(TokenKind.VARIABLE, name)


def operator(symbol: str) -> Token:
    return Token(TokenKind.OPERATOR, symbol)


ZERO = number("0")
