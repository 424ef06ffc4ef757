"""Serializer — turns a token list back into infix text."""

from .tokens import Token, TokenKind


def render(tokens: list[Token]) -> str:
    """Concatenate token text, inserting '*' where a variable is followed by a number."""
    parts = []
    prev = None
    for token in tokens:
        if prev is not None and prev.kind is TokenKind.VARIABLE and token.kind is TokenKind.NUMBER:
            parts.append("*")
        parts.append(token.display)
        prev = token
    return "".join(parts)
