"""Console driver — reads one expression and prints its antiderivative.

Run:  uv run python -m antideriv.cli
"""

import logging

from antideriv.tools.integral import DEFAULT_VARIABLE, display
from antideriv.tools.power_rule import integrate_expression
from antideriv.tools.render import render
from antideriv.tools.tokenizer import tokenize


def main():
    try:
        expression = input("Enter algebraic expression: ")
    except EOFError:
        expression = ""
    result = render(integrate_expression(tokenize(expression), DEFAULT_VARIABLE))
    print(f"\nResult: {display(expression, result, DEFAULT_VARIABLE)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
