# Python

"""symbolic_taylor

Symbolic differentiation and Taylor polynomials for single-variable
real expressions.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  PowConstNode, ConstPowNode,
  constant, variable, add, subtract, multiply, divide, power,
  exp, ln, sin, cos, tan,
  evaluate, derivative, nth_derivative, format_expression,
  to_sympy, from_sympy
)
from .taylor import factorial, taylor_series, taylor_coefficients, evaluate_taylor_coefficients
from .config import SymbolicConfig, configure, get_config, reset_config
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode", "BinaryOpNode",
  "UnaryOpNode", "PowConstNode", "ConstPowNode",
  "constant", "variable", "add", "subtract", "multiply", "divide", "power",
  "exp", "ln", "sin", "cos", "tan",
  "evaluate", "derivative", "nth_derivative", "format_expression",
  "to_sympy", "from_sympy",
  "factorial", "taylor_series", "taylor_coefficients", "evaluate_taylor_coefficients",
  "SymbolicConfig", "configure", "get_config", "reset_config",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
