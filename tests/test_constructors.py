import math

import numpy as np
import pytest

from symbolic_taylor import (
    configure, constant, variable, add, subtract, multiply, divide, power,
    exp, ln, sin, cos, tan,
    ConstantNode, BinaryOpNode, PowConstNode, ConstPowNode, UnaryOpNode,
)


def test_constant_folding_addition():
    """2 + 3 folds to the constant 5"""
    result = constant(2.0) + constant(3.0)
    assert isinstance(result, ConstantNode)
    assert result == constant(5.0)
    for value in (-3.0, 0.0, 10.0):
        assert result.evaluate(value) == 5.0


def test_identity_elimination(x):
    f = sin(x) * x
    assert (f + constant(0.0)) is f
    assert (constant(0.0) + f) is f
    assert (f * constant(1.0)) is f
    assert (constant(1.0) * f) is f
    assert (f - constant(0.0)) is f
    assert (f / constant(1.0)) is f
    assert f * constant(0.0) == constant(0.0)
    assert constant(0.0) * f == constant(0.0)
    assert constant(0.0) / f == constant(0.0)


def test_zero_minuend_keeps_subtrahend_by_default(x):
    """0 - b collapses to b, not -b (historical rule)"""
    f = sin(x)
    assert subtract(constant(0.0), f) is f
    assert subtract(constant(0.0), constant(3.0)) == constant(3.0)


def test_zero_minuend_negates_when_configured(x):
    configure(negate_zero_minuend=True)
    x = variable()
    result = subtract(constant(0.0), sin(x))
    assert result == multiply(constant(-1.0), sin(x))
    assert result.evaluate(1.0) == pytest.approx(-math.sin(1.0))
    assert subtract(constant(0.0), constant(3.0)) == constant(-3.0)


def test_subtraction_folds_constants():
    assert constant(5.0) - constant(2.0) == constant(3.0)


def test_multiplication_zero_short_circuits_before_one():
    assert multiply(constant(0.0), constant(1.0)) == constant(0.0)
    assert multiply(constant(1.0), constant(0.0)) == constant(0.0)


def test_multiplication_folds_constants():
    assert constant(4.0) * constant(2.5) == constant(10.0)


def test_negative_zero_counts_as_zero(x):
    assert multiply(x, constant(-0.0)) == constant(0.0)
    assert add(x, constant(-0.0)) is x


def test_division_by_constant_zero_is_not_an_error(x):
    assert divide(constant(1.0), constant(0.0)).value == math.inf
    assert divide(constant(-1.0), constant(0.0)).value == -math.inf
    quotient = divide(sin(x), constant(0.0))
    assert isinstance(quotient, BinaryOpNode) and quotient.operator == '/'
    assert quotient.evaluate(1.0) == math.inf
    assert math.isnan(quotient.evaluate(0.0))


def test_zero_over_zero_takes_the_zero_numerator_rule():
    assert divide(constant(0.0), constant(0.0)) == constant(0.0)


def test_division_folds_constants():
    assert constant(1.0) / constant(4.0) == constant(0.25)


def test_power_rules_in_order(x):
    assert power(constant(0.0), x) == constant(0.0)
    assert power(constant(0.0), constant(0.0)) == constant(0.0)
    assert power(constant(1.0), x) == constant(1.0)
    assert power(x, constant(0.0)) == constant(1.0)
    assert power(x, constant(1.0)) is x
    assert power(constant(2.0), constant(3.0)) == constant(8.0)


def test_power_variants(x):
    pow_const = power(sin(x), constant(3.0))
    assert isinstance(pow_const, PowConstNode)
    assert pow_const.exponent == 3.0 and pow_const.base == sin(x)

    const_pow = power(constant(2.0), x)
    assert isinstance(const_pow, ConstPowNode)
    assert const_pow.base == 2.0 and const_pow.exponent is x

    general = power(x, sin(x))
    assert isinstance(general, BinaryOpNode) and general.operator == '^'


def test_power_folding_uses_real_exponentiation():
    assert math.isnan(power(constant(-8.0), constant(1.0 / 3.0)).value)
    assert power(constant(0.5), constant(-1.0)) == constant(2.0)


@pytest.mark.parametrize("func, value, expected", [
    (exp, 0.0, 1.0),
    (ln, 1.0, 0.0),
    (sin, 0.0, 0.0),
    (cos, 0.0, 1.0),
    (tan, 0.0, 0.0),
    (exp, 2.0, math.exp(2.0)),
    (sin, 1.0, math.sin(1.0)),
])
def test_unary_constant_folding(func, value, expected):
    result = func(constant(value))
    assert isinstance(result, ConstantNode)
    assert result.value == pytest.approx(expected)


def test_unary_folding_follows_ieee():
    assert ln(constant(0.0)).value == -math.inf
    assert math.isnan(ln(constant(-1.0)).value)
    assert exp(constant(1000.0)).value == math.inf


@pytest.mark.parametrize("func, operator", [
    (exp, 'exp'), (ln, 'ln'), (sin, 'sin'), (cos, 'cos'), (tan, 'tan'),
])
def test_unary_wraps_non_constants(x, func, operator):
    result = func(x)
    assert isinstance(result, UnaryOpNode)
    assert result.operator == operator and result.operand is x


def test_literal_operands_route_through_constructors(x):
    assert x + 2 == add(x, constant(2.0))
    assert 2 + x == add(constant(2.0), x)
    assert x - 2 == subtract(x, constant(2.0))
    assert 2 - x == subtract(constant(2.0), x)
    assert 3 * x == multiply(constant(3.0), x)
    assert x * 3 == multiply(x, constant(3.0))
    assert x / 2 == divide(x, constant(2.0))
    assert 2 / x == divide(constant(2.0), x)
    assert x ** 2 == power(x, constant(2.0))
    assert 2 ** x == power(constant(2.0), x)
    assert x + 0 is x
    assert 1 * x is x
    assert 0 - x is x


def test_numpy_scalars_as_operands(x):
    assert np.float64(2.0) * x == multiply(constant(2.0), x)
    assert x + np.float64(0.0) is x


def test_negation_is_multiplication_by_minus_one(x):
    assert -x == multiply(constant(-1.0), x)
    assert -constant(2.0) == constant(-2.0)


def test_method_forms(x):
    assert x.sin() == sin(x)
    assert x.cos().powf(2.0) == power(cos(x), constant(2.0))
    assert x.exp() == exp(x)
    assert x.ln() == ln(x)
    assert x.tan() == tan(x)


def test_non_numeric_operands_are_rejected(x):
    with pytest.raises(TypeError):
        x + "1"
    with pytest.raises(TypeError):
        x * True
    with pytest.raises(TypeError):
        add(x, None)
