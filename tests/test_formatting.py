import math

import pytest

from symbolic_taylor import (
    format_expression, constant, divide, power, exp, ln, sin, cos, tan,
)


@pytest.mark.parametrize("value, text", [
    (2.0, "2"),
    (0.5, "0.5"),
    (-3.0, "-3"),
    (0.1, "0.1"),
    (-0.0, "-0"),
    (1e-7, "0.0000001"),
    (1e21, "1000000000000000000000"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "NaN"),
])
def test_constants(value, text):
    assert format_expression(constant(value)) == text


def test_variable(x):
    assert format_expression(x) == "x"


def test_binary_operators(x):
    assert format_expression(x + 2) == "(x + 2)"
    assert format_expression(x - 2) == "(x - 2)"
    assert format_expression(2 * x) == "(2 * x)"
    assert format_expression(x / 2) == "(x / 2)"


def test_power_variants(x):
    assert format_expression(x ** 3) == "(x ^ 3)"
    assert format_expression(x ** 0.5) == "(x ^ 0.5)"
    assert format_expression(2 ** x) == "(2 ^ x)"
    assert format_expression(x ** sin(x)) == "(x ^ sin(x))"


def test_unary_functions(x):
    assert format_expression(exp(x)) == "(e ^ x)"
    assert format_expression(ln(x)) == "ln(x)"
    assert format_expression(sin(x)) == "sin(x)"
    assert format_expression(cos(x)) == "cos(x)"
    assert format_expression(tan(x)) == "tan(x)"


def test_nested_expression_is_fully_parenthesized(x):
    f = divide(sin(x) + 1, cos(x) ** 2)
    assert format_expression(f) == "((sin(x) + 1) / (cos(x) ^ 2))"


def test_str_and_repr(x):
    f = cos(x) ** 2
    assert str(f) == "(cos(x) ^ 2)"
    assert repr(sin(x)) == "UnaryOpNode(sin(x))"
    assert repr(constant(1.5)) == "ConstantNode(1.5)"
