"""Smart constructors.

The only path that builds operator nodes. Each rule list is checked in
order before a generic node is allocated; ``0.0`` and ``1.0`` are matched by
float equality of the constant payload.
"""

from typing import Union
from .node import Node, ConstantNode, is_constant, is_number
from .operators import fold_binary_op, fold_unary_op
from ..optimization.memory_pool import get_global_pool
from ...config import get_config

Operand = Union[Node, int, float]


def constant(value: Union[int, float]) -> ConstantNode:
  return get_global_pool().get_constant_node(value)


def variable() -> Node:
  return get_global_pool().get_variable_node()


def as_node(value):
  """Wrap a real number as a constant; NotImplemented for anything else"""
  if isinstance(value, Node):
    return value
  if is_number(value):
    return constant(value)
  return NotImplemented


def _coerce(value: Operand) -> Node:
  node = as_node(value)
  if node is NotImplemented:
    raise TypeError(f"Cannot build an expression from {type(value).__name__}")
  return node


def add(a: Operand, b: Operand) -> Node:
  a, b = _coerce(a), _coerce(b)
  if is_constant(b, 0.0):
    return a
  if is_constant(a, 0.0):
    return b
  if isinstance(a, ConstantNode) and isinstance(b, ConstantNode):
    return constant(fold_binary_op(a.value, b.value, '+'))
  return get_global_pool().get_binary_node('+', a, b)


def subtract(a: Operand, b: Operand) -> Node:
  a, b = _coerce(a), _coerce(b)
  if is_constant(b, 0.0):
    return a
  if is_constant(a, 0.0):
    # Historical rule drops the sign; see SymbolicConfig.negate_zero_minuend
    if get_config().negate_zero_minuend:
      return multiply(constant(-1.0), b)
    return b
  if isinstance(a, ConstantNode) and isinstance(b, ConstantNode):
    return constant(fold_binary_op(a.value, b.value, '-'))
  return get_global_pool().get_binary_node('-', a, b)


def multiply(a: Operand, b: Operand) -> Node:
  a, b = _coerce(a), _coerce(b)
  if is_constant(a, 0.0) or is_constant(b, 0.0):
    return constant(0.0)
  if is_constant(b, 1.0):
    return a
  if is_constant(a, 1.0):
    return b
  if isinstance(a, ConstantNode) and isinstance(b, ConstantNode):
    return constant(fold_binary_op(a.value, b.value, '*'))
  return get_global_pool().get_binary_node('*', a, b)


def divide(a: Operand, b: Operand) -> Node:
  a, b = _coerce(a), _coerce(b)
  if is_constant(b, 1.0):
    return a
  if is_constant(a, 0.0):
    return constant(0.0)
  # A zero denominator is left to IEEE folding/evaluation
  if isinstance(a, ConstantNode) and isinstance(b, ConstantNode):
    return constant(fold_binary_op(a.value, b.value, '/'))
  return get_global_pool().get_binary_node('/', a, b)


def power(base: Operand, exponent: Operand) -> Node:
  base, exponent = _coerce(base), _coerce(exponent)
  if is_constant(base, 0.0):
    return constant(0.0)
  if is_constant(base, 1.0):
    return constant(1.0)
  if is_constant(exponent, 0.0):
    return constant(1.0)
  if is_constant(exponent, 1.0):
    return base

  base_const = isinstance(base, ConstantNode)
  exponent_const = isinstance(exponent, ConstantNode)
  pool = get_global_pool()
  if base_const and exponent_const:
    return constant(fold_binary_op(base.value, exponent.value, '^'))
  if exponent_const:
    return pool.get_pow_const_node(base, exponent.value)
  if base_const:
    return pool.get_const_pow_node(base.value, exponent)
  return pool.get_binary_node('^', base, exponent)


def _unary(operator: str, operand: Operand) -> Node:
  operand = _coerce(operand)
  if isinstance(operand, ConstantNode):
    return constant(fold_unary_op(operand.value, operator))
  return get_global_pool().get_unary_node(operator, operand)


def exp(operand: Operand) -> Node:
  return _unary('exp', operand)


def ln(operand: Operand) -> Node:
  return _unary('ln', operand)


def sin(operand: Operand) -> Node:
  return _unary('sin', operand)


def cos(operand: Operand) -> Node:
  return _unary('cos', operand)


def tan(operand: Operand) -> Node:
  return _unary('tan', operand)
