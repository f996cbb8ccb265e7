"""Symbolic differentiation with respect to ``x``.

Every result is assembled through the smart constructors, so the derivative
comes out simplified rather than needing a cleanup pass. Nodes from the
input that reappear in the result (``f`` and ``g`` in the product rule,
``exp(f)`` in its own derivative, ...) are shared, not rebuilt.
"""

from typing import Callable, Dict
from .core.node import (
  Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  PowConstNode, ConstPowNode
)
from .core.constructors import (
  constant, add, subtract, multiply, divide, power, ln, sin, cos
)


def derivative(node: Node) -> Node:
  """Return d(node)/dx. Total over every node variant; never evaluates."""
  if isinstance(node, ConstantNode):
    return constant(0.0)
  if isinstance(node, VariableNode):
    return constant(1.0)
  if isinstance(node, BinaryOpNode):
    return _BINARY_RULES[node.operator](node)
  if isinstance(node, UnaryOpNode):
    return _UNARY_RULES[node.operator](node)
  if isinstance(node, PowConstNode):
    return _power_rule(node)
  if isinstance(node, ConstPowNode):
    return _exponential_rule(node)
  raise TypeError(f"Cannot differentiate {type(node).__name__}")


def nth_derivative(node: Node, n: int) -> Node:
  """Differentiate ``n`` times (``n = 0`` returns ``node``)"""
  if n < 0:
    raise ValueError("Derivative order must be non-negative")
  for _ in range(n):
    node = derivative(node)
  return node


def _sum_rule(node: BinaryOpNode) -> Node:
  return add(derivative(node.left), derivative(node.right))


def _difference_rule(node: BinaryOpNode) -> Node:
  return subtract(derivative(node.left), derivative(node.right))


def _product_rule(node: BinaryOpNode) -> Node:
  f, g = node.left, node.right
  if isinstance(f, ConstantNode):
    return multiply(f, derivative(g))
  if isinstance(g, ConstantNode):
    return multiply(g, derivative(f))
  return add(multiply(derivative(f), g), multiply(f, derivative(g)))


def _quotient_rule(node: BinaryOpNode) -> Node:
  f, g = node.left, node.right
  if isinstance(g, ConstantNode):
    return divide(derivative(f), g)
  if isinstance(f, ConstantNode):
    # (c / g)' = -c * g' / g^2
    return divide(multiply(constant(-f.value), derivative(g)), power(g, constant(2.0)))
  numerator = subtract(multiply(g, derivative(f)), multiply(f, derivative(g)))
  return divide(numerator, power(g, constant(2.0)))


def _general_power_rule(node: BinaryOpNode) -> Node:
  # (f^g)' = f^g * (g' ln f + g f' / f)
  f, g = node.left, node.right
  inner = add(
    multiply(derivative(g), ln(f)),
    divide(multiply(g, derivative(f)), f),
  )
  return multiply(node, inner)


def _power_rule(node: PowConstNode) -> Node:
  a = node.exponent
  scaled = multiply(constant(a), power(node.base, constant(a - 1.0)))
  return multiply(scaled, derivative(node.base))


def _exponential_rule(node: ConstPowNode) -> Node:
  scaled = multiply(node, ln(constant(node.base)))
  return multiply(scaled, derivative(node.exponent))


def _exp_rule(node: UnaryOpNode) -> Node:
  return multiply(node, derivative(node.operand))


def _ln_rule(node: UnaryOpNode) -> Node:
  f = node.operand
  return divide(derivative(f), f)


def _sin_rule(node: UnaryOpNode) -> Node:
  f = node.operand
  return multiply(cos(f), derivative(f))


def _cos_rule(node: UnaryOpNode) -> Node:
  f = node.operand
  return multiply(multiply(constant(-1.0), sin(f)), derivative(f))


def _tan_rule(node: UnaryOpNode) -> Node:
  f = node.operand
  return divide(derivative(f), power(cos(f), constant(2.0)))


_BINARY_RULES: Dict[str, Callable[[BinaryOpNode], Node]] = {
  '+': _sum_rule,
  '-': _difference_rule,
  '*': _product_rule,
  '/': _quotient_rule,
  '^': _general_power_rule,
}

_UNARY_RULES: Dict[str, Callable[[UnaryOpNode], Node]] = {
  'exp': _exp_rule,
  'ln': _ln_rule,
  'sin': _sin_rule,
  'cos': _cos_rule,
  'tan': _tan_rule,
}
