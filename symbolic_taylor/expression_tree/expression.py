import numpy as np
from typing import Union
from .core.node import Node
from .core.constructors import constant, variable
from .differentiation import derivative, nth_derivative

# Public name for the expression type; every node is an expression.
Expression = Node

ArrayLike = Union[float, np.ndarray]


def evaluate(expression: Expression, x: ArrayLike) -> ArrayLike:
  """Evaluate ``expression`` at ``x`` with IEEE-754 semantics (never raises)"""
  return expression.evaluate(x)


def format_expression(expression: Expression) -> str:
  """Fully parenthesized infix text, for display only"""
  return expression.to_string()


__all__ = [
  'Expression', 'constant', 'variable', 'evaluate', 'derivative',
  'nth_derivative', 'format_expression',
]
