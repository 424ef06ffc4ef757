from .integral import integral_tool
from .power_rule import integrate_expression, integrate_term, MalformedTermError
from .postfix import to_postfix
from .render import render
from .terms import split_terms
from .tokenizer import tokenize

__all__ = [
    "integral_tool", "integrate_expression", "integrate_term", "MalformedTermError",
    "to_postfix", "render", "split_terms", "tokenize",
]
