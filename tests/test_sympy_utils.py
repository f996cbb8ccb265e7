import math

import pytest
import sympy as sp

from symbolic_taylor import (
    to_sympy, from_sympy, derivative, constant, multiply, sin, cos, exp, ln, tan,
)
from symbolic_taylor.expression_tree.utils import latex_representation
from symbolic_taylor.expression_tree.utils.sympy_utils import X


def test_to_sympy(x):
    assert to_sympy(x ** 2 + sin(x)) == X ** 2 + sp.sin(X)
    assert to_sympy(exp(x) / x) == sp.exp(X) / X
    assert to_sympy(2 ** x) == 2 ** X


def test_to_sympy_with_custom_symbol(x):
    t = sp.Symbol('t')
    assert to_sympy(ln(x) - x, t) == sp.log(t) - t


def test_derivative_agrees_with_sympy(x):
    f = sin(x) * x ** 2 + tan(x) / (x + 1)
    difference = to_sympy(derivative(f)) - sp.diff(to_sympy(f), X)
    for value in (0.3, 0.9, 1.4):
        assert abs(float(difference.subs(X, value))) < 1e-12


def test_from_sympy(x):
    f = from_sympy(X ** 2 + sp.sin(X))
    assert f.evaluate(0.5) == pytest.approx(0.25 + math.sin(0.5))
    assert from_sympy(sp.Rational(1, 2) * X) == multiply(constant(0.5), x)
    assert from_sympy(sp.exp(sp.cos(X))) == exp(cos(x))
    assert from_sympy(sp.Integer(3)) == constant(3.0)


def test_from_sympy_folds_through_constructors(x):
    assert from_sympy(X + 0) is x
    assert from_sympy(sp.log(X) * 1) == ln(x)


def test_any_single_symbol_is_the_variable(x):
    assert from_sympy(sp.sin(sp.Symbol('y'))) == sin(x)


def test_round_trip(x):
    f = exp(sin(x)) * x ** 3
    g = from_sympy(to_sympy(f))
    for value in (0.2, 1.1):
        assert g.evaluate(value) == pytest.approx(f.evaluate(value))


@pytest.mark.parametrize("expression", [
    sp.Symbol('a') + sp.Symbol('b'),
    sp.Abs(X),
    sp.I * X,
    sp.floor(X),
])
def test_from_sympy_rejects_unsupported(expression):
    with pytest.raises(ValueError):
        from_sympy(expression)


def test_latex(x):
    assert latex_representation(sin(x)) == sp.latex(sp.sin(X))
