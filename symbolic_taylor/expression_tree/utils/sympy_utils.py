import sympy as sp
from typing import Optional
from ..core.node import Node
from ..core import constructors

X = sp.Symbol('x', real=True)


def to_sympy(node: Node, symbol: Optional[sp.Symbol] = None) -> sp.Expr:
  """Convert an expression tree to SymPy in the symbol ``x``"""
  return node.to_sympy(X if symbol is None else symbol)


def latex_representation(node: Node) -> str:
  """Get LaTeX representation of the expression"""
  return sp.latex(to_sympy(node))


def from_sympy(sympy_expr: sp.Expr) -> Node:
  """Convert a SymPy expression in a single symbol back to a tree.

  Rebuilt through the smart constructors, so the result is simplified the
  same way as a hand-built expression. n-ary sums and products are folded
  left to right.
  """
  sympy_expr = sp.sympify(sympy_expr)
  symbols = sympy_expr.free_symbols
  if len(symbols) > 1:
    names = ', '.join(sorted(str(s) for s in symbols))
    raise ValueError(f"Expected a single-variable expression, got symbols: {names}")
  return _convert(sympy_expr)


def _convert(sympy_expr) -> Node:
  if sympy_expr.is_Symbol:
    return constructors.variable()

  if sympy_expr.is_Number or sympy_expr.is_NumberSymbol:
    if not sympy_expr.is_extended_real:
      raise ValueError(f"Only real constants are supported: {sympy_expr}")
    return constructors.constant(float(sympy_expr))

  if isinstance(sympy_expr, sp.Add):
    result = _convert(sympy_expr.args[0])
    for arg in sympy_expr.args[1:]:
      result = constructors.add(result, _convert(arg))
    return result

  if isinstance(sympy_expr, sp.Mul):
    result = _convert(sympy_expr.args[0])
    for arg in sympy_expr.args[1:]:
      result = constructors.multiply(result, _convert(arg))
    return result

  if isinstance(sympy_expr, sp.Pow):
    base, exponent = sympy_expr.args
    return constructors.power(_convert(base), _convert(exponent))

  if isinstance(sympy_expr, sp.exp):
    return constructors.exp(_convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.log):
    return constructors.ln(_convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.sin):
    return constructors.sin(_convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.cos):
    return constructors.cos(_convert(sympy_expr.args[0]))
  if isinstance(sympy_expr, sp.tan):
    return constructors.tan(_convert(sympy_expr.args[0]))

  raise ValueError(f"Unsupported SymPy expression: {type(sympy_expr).__name__}")
