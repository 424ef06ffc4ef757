"""Integral tool — power-rule antiderivatives of single-variable polynomials.

Operations: integrate, tokenize, postfix, terms, verify.
Each top-level term is integrated as a monomial c*x^n; the result is
cross-checked with SymPy and reported under "verified".
"""

import logging
from functools import lru_cache

from .postfix import to_postfix
from .power_rule import integrate_expression, integrate_terms, signed, stitch
from .render import render
from .terms import split_terms
from .tokenizer import tokenize
from .verify import check_antiderivative, reference_integral

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE = "x"

OPERATIONS = {"integrate", "tokenize", "postfix", "terms", "verify"}


def display(expression: str, result: str, variable: str = DEFAULT_VARIABLE) -> str:
    return f"∫({expression}) d{variable} = {result} + C"


def _integrate_with_terms(tokens, variable, strict):
    """Integrate once, returning the stitched result and a row per term."""
    parts = list(integrate_terms(tokens, variable, strict))
    rows = [{"term": render(term), "integral": render(signed(negative, integrated))}
            for term, negative, integrated in parts]
    result = stitch((negative, integrated) for _, negative, integrated in parts)
    return render(result), rows


@lru_cache(maxsize=256)
def integral_tool(expression: str, operation: str = "integrate",
                  variable: str = DEFAULT_VARIABLE, strict: bool = False) -> dict:
    """Power-rule integration tool.

    Use for indefinite integrals of polynomials in one variable written with numbers,
    + - * / ^ and parentheses, e.g. 2*x^4-5*x+3. Operations: integrate, tokenize,
    postfix, terms, verify (compares with SymPy's antiderivative). Set strict=True to
    get an error instead of 0 for malformed terms.
    """
    try:
        if len(variable) != 1 or not variable.isalpha():
            return {"error": f"variable must be a single letter, got {variable!r}"}

        tokens = tokenize(expression)
        cleaned = render(tokens)

        if operation == "integrate":
            result, rows = _integrate_with_terms(tokens, variable, strict)
            return {
                "input": cleaned, "operation": f"indefinite integral d{variable}",
                "result": result, "display": display(expression, result, variable),
                "terms": rows,
                "verified": check_antiderivative(cleaned, result, variable),
            }

        elif operation == "tokenize":
            return {"input": expression,
                    "tokens": [{"kind": t.kind.value, "text": t.text} for t in tokens]}

        elif operation == "postfix":
            return {"input": cleaned,
                    "postfix": " ".join(t.text for t in to_postfix(tokens))}

        elif operation == "terms":
            return {"input": cleaned,
                    "terms": [render(term) for term in split_terms(tokens)]}

        elif operation == "verify":
            result = render(integrate_expression(tokens, variable, strict=strict))
            return {
                "input": cleaned, "result": result,
                "reference": reference_integral(cleaned, variable),
                "verified": check_antiderivative(cleaned, result, variable),
            }

        else:
            return {"error": f"Unknown operation '{operation}'. Use: {', '.join(sorted(OPERATIONS))}"}

    except Exception as e:
        logger.warning("%s failed for %r: %s", operation, expression, e)
        return {"error": str(e), "expression": expression, "operation": operation}
