"""
Taylor polynomial construction.

Repeatedly differentiates an expression, evaluates each derivative at the
center and assembles ``sum f^(n)(c) / n! * (x - c)^n`` through the smart
constructors.
"""

import math
import numbers
import numba
import numpy as np
from typing import Iterator, Tuple, Union

from .expression_tree import Expression, constant, variable, add, subtract, multiply, power, derivative
from .expression_tree.utils.tree_utils import count_distinct_nodes
from .logging_system import LogLevel, log_debug, log_enabled, log_info, log_warning


def factorial(n: int) -> int:
    """Product of ``2..n``; the empty product gives ``factorial(0) == factorial(1) == 1``"""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def _validate(order: int, center: float) -> None:
    if not isinstance(order, numbers.Integral) or isinstance(order, bool):
        raise TypeError(f"Order must be an integer, got {type(order).__name__}")
    if order < 0:
        raise ValueError(f"Order must be a non-negative integer, got {order}")
    if not isinstance(center, numbers.Real) or isinstance(center, bool):
        raise TypeError(f"Center must be a real number, got {type(center).__name__}")
    if not math.isfinite(center):
        raise ValueError(f"Center must be finite, got {center}")


def _scaled_by_factorial(value: float, n: int) -> float:
    try:
        divisor = float(factorial(n))
    except OverflowError:
        divisor = math.inf
    return value / divisor


def _iter_coefficients(order: int, center: float, f: Expression) -> Iterator[Tuple[int, float]]:
    nth_derivative = f
    for n in range(order + 1):
        raw = nth_derivative.evaluate(center)
        coefficient = _scaled_by_factorial(raw, n)
        if not math.isfinite(coefficient):
            log_warning(f"term {n}: coefficient is {coefficient}, "
                        f"f^({n}) is not finite at {center}")
        if log_enabled(LogLevel.VERBOSE):
            log_debug(f"term {n}: f^({n})({center}) = {raw}, coefficient = {coefficient}, "
                      f"derivative size = {nth_derivative.size()} "
                      f"({count_distinct_nodes(nth_derivative)} distinct)")
        yield n, coefficient
        if n < order:
            nth_derivative = derivative(nth_derivative)


def taylor_series(order: int, center: float, f: Expression) -> Expression:
    """Degree-``order`` Taylor polynomial of ``f`` about ``center``.

    Args:
        order: Non-negative number of derivatives to take
        center: Finite expansion point
        f: Expression to approximate (not modified)

    Returns:
        Expression for ``sum_{n=0}^{order} f^(n)(center) / n! * (x - center)^n``

    Raises:
        TypeError: ``order`` is not an integer or ``center`` is not a real number
        ValueError: ``order`` is negative or ``center`` is not finite
    """
    _validate(order, center)
    center = float(center)

    shifted = subtract(variable(), constant(center))
    polynomial = constant(0.0)
    for n, coefficient in _iter_coefficients(order, center, f):
        nth_term = multiply(constant(coefficient), power(shifted, constant(float(n))))
        polynomial = add(polynomial, nth_term)

    if log_enabled(LogLevel.DETAILED):
        log_info(f"T<{order}, {center}> of {f.to_string()}: {polynomial.size()} nodes",
                 LogLevel.DETAILED)
    return polynomial


def taylor_coefficients(order: int, center: float, f: Expression) -> np.ndarray:
    """Coefficients ``f^(n)(center) / n!`` for ``n = 0..order``"""
    _validate(order, center)
    center = float(center)
    coefficients = np.empty(order + 1, dtype=np.float64)
    for n, coefficient in _iter_coefficients(order, center, f):
        coefficients[n] = coefficient
    return coefficients


@numba.njit(cache=True)
def _horner(coefficients, center, x):
    out = np.empty_like(x)
    for i in range(x.shape[0]):
        dx = x[i] - center
        acc = 0.0
        for k in range(coefficients.shape[0] - 1, -1, -1):
            acc = acc * dx + coefficients[k]
        out[i] = acc
    return out


def evaluate_taylor_coefficients(coefficients: np.ndarray, center: float,
                                 x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Evaluate ``sum c_n (x - center)^n`` by Horner's scheme.

    Scalar ``x`` returns a float, array ``x`` an array of the same shape.
    """
    coefficients = np.ascontiguousarray(coefficients, dtype=np.float64)
    values = np.asarray(x, dtype=np.float64)
    flat = np.ascontiguousarray(values.reshape(-1))
    with np.errstate(all='ignore'):
        result = _horner(coefficients, float(center), flat)
    if values.ndim == 0:
        return float(result[0])
    return result.reshape(values.shape)
