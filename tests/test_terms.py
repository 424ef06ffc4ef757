"""Unit tests for the term splitter.

Run:  uv run pytest tests/test_terms.py
"""

from antideriv.tools.render import render
from antideriv.tools.terms import split_terms
from antideriv.tools.tokenizer import tokenize
from antideriv.tools.tokens import operator


def rendered(expression):
    return [render(term) for term in split_terms(tokenize(expression))]


def test_signs_recorded_as_unary_minus():
    terms = split_terms(tokenize("2*(x^3)-6*x+7"))
    assert [t.text for t in terms[1]] == ["u-", "6", "*", "x"]
    assert rendered("2*(x^3)-6*x+7") == ["2*(x^3)", "-6*x", "7"]


def test_single_term():
    assert rendered("5") == ["5"]
    assert rendered("-6*x") == ["-6*x"]


def test_parenthesis_depth_ignored():
    assert rendered("(x+1)") == ["(x", "1)"]


def test_dangling_signs():
    assert rendered("x-") == ["x"]
    assert rendered("x - + 3") == ["x", "-+3"]


def test_empty():
    assert split_terms([]) == []


def test_rejoined_terms_match_original():
    for expression in ("2*x^4-5*x+3", "-x+2", "4*x^5-2*x^3+x-8", "x/2"):
        tokens = tokenize(expression)
        rebuilt = []
        for i, term in enumerate(split_terms(tokens)):
            if i == 0:
                rebuilt.extend(term)
            elif term[0].text == "u-":
                rebuilt.extend([operator("-")] + term[1:])
            else:
                rebuilt.extend([operator("+")] + term)
        assert rebuilt == tokens, expression
