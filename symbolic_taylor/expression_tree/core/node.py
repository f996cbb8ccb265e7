import numbers
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union
from .operators import (
  NodeType, BINARY_OP_MAP, UNARY_OP_MAP,
  evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)

Number = Union[int, float]

SYMPY_UNARY_MAP = {
  'exp': sp.exp,
  'ln': sp.log,
  'sin': sp.sin,
  'cos': sp.cos,
  'tan': sp.tan,
}


def format_constant(value: float) -> str:
  """Shortest round-trip positional text; integral values drop the fraction"""
  if np.isnan(value):
    return "NaN"
  if np.isinf(value):
    return "inf" if value > 0 else "-inf"
  return np.format_float_positional(value, trim='-')


class Node(ABC):
  """Immutable expression node in one real variable ``x``.

  Children are shared by reference and never rewritten. Equality and hashing
  are structural, so sharing (or interning) is never observable. Numeric
  payloads compare by exact bit pattern: ``NaN`` equals ``NaN`` and ``-0.0``
  differs from ``0.0``, the same keys the node pool interns on.
  """

  __slots__ = ('_hash_cache', '_size_cache', '__weakref__')

  # Let numpy scalars on the left defer to our reflected operators
  __array_ufunc__ = None

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def _evaluate(self, x):
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self, symbol: sp.Symbol) -> sp.Expr:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def _same_structure(self, other: 'Node') -> bool:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def evaluate(self, x):
    """Evaluate at ``x`` (scalar or array) with IEEE-754 semantics.

    Never raises for domain errors: division by zero gives a signed infinity,
    ``ln`` of a negative number gives NaN, and so on. Scalar input returns a
    Python float, array input an array of the same shape.
    """
    values = np.asarray(x, dtype=np.float64)
    with np.errstate(all='ignore'):
      result = self._evaluate(values if values.ndim else np.float64(values))
    if np.ndim(result) == 0:
      return float(result)
    return np.array(result, dtype=np.float64)

  def derivative(self) -> 'Node':
    from ..differentiation import derivative
    return derivative(self)

  def size(self) -> int:
    """Node count, shared subtrees counted once per occurrence"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    if type(self) is not type(other) or hash(self) != hash(other):
      return False
    return self._same_structure(other)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"

  # Arithmetic: every operator routes through the smart constructors so
  # simplification is identical no matter how an expression is spelled.

  def __add__(self, other):
    from .constructors import add, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return add(self, other)

  def __radd__(self, other):
    from .constructors import add, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return add(other, self)

  def __sub__(self, other):
    from .constructors import subtract, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return subtract(self, other)

  def __rsub__(self, other):
    from .constructors import subtract, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return subtract(other, self)

  def __mul__(self, other):
    from .constructors import multiply, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return multiply(self, other)

  def __rmul__(self, other):
    from .constructors import multiply, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return multiply(other, self)

  def __truediv__(self, other):
    from .constructors import divide, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return divide(self, other)

  def __rtruediv__(self, other):
    from .constructors import divide, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return divide(other, self)

  def __pow__(self, other):
    from .constructors import power, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return power(self, other)

  def __rpow__(self, other):
    from .constructors import power, as_node
    other = as_node(other)
    if other is NotImplemented:
      return other
    return power(other, self)

  def __neg__(self):
    from .constructors import multiply, constant
    return multiply(constant(-1.0), self)

  def powf(self, exponent: Number) -> 'Node':
    from .constructors import power, constant
    return power(self, constant(exponent))

  def exp(self) -> 'Node':
    from .constructors import exp
    return exp(self)

  def ln(self) -> 'Node':
    from .constructors import ln
    return ln(self)

  def sin(self) -> 'Node':
    from .constructors import sin
    return sin(self)

  def cos(self) -> 'Node':
    from .constructors import cos
    return cos(self)

  def tan(self) -> 'Node':
    from .constructors import tan
    return tan(self)


class VariableNode(Node):
  __slots__ = ()

  def _evaluate(self, x):
    return evaluate_variable(x)

  def to_string(self) -> str:
    return "x"

  def to_sympy(self, symbol):
    return symbol

  def children(self):
    return ()

  def _same_structure(self, other) -> bool:
    return True

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE,))


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: Number):
    super().__init__()
    self.value = float(value)

  def _evaluate(self, x):
    return evaluate_constant(x, self.value)

  def to_string(self) -> str:
    return format_constant(self.value)

  def to_sympy(self, symbol):
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def children(self):
    return ()

  def _same_structure(self, other) -> bool:
    return self.value.hex() == other.value.hex()

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value.hex()))


class BinaryOpNode(Node):
  """``Add``, ``Subtract``, ``Multiply``, ``Divide`` and the general ``Pow``"""

  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator}")
    self.operator = operator
    self.left = left
    self.right = right

  def _evaluate(self, x):
    return evaluate_binary_op(self.left._evaluate(x), self.right._evaluate(x), self.operator)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_sympy(self, symbol):
    left = self.left.to_sympy(symbol)
    right = self.right.to_sympy(symbol)
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    return sp.Pow(left, right)

  def children(self):
    return (self.left, self.right)

  def _same_structure(self, other) -> bool:
    return (self.operator == other.operator and
            self.left == other.left and
            self.right == other.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))


class PowConstNode(Node):
  """Expression raised to a fixed numeric exponent"""

  __slots__ = ('base', 'exponent')

  def __init__(self, base: Node, exponent: Number):
    super().__init__()
    self.base = base
    self.exponent = float(exponent)

  def _evaluate(self, x):
    return evaluate_binary_op(self.base._evaluate(x), np.float64(self.exponent), '^')

  def to_string(self) -> str:
    return f"({self.base.to_string()} ^ {format_constant(self.exponent)})"

  def to_sympy(self, symbol):
    exponent = ConstantNode(self.exponent).to_sympy(symbol)
    return sp.Pow(self.base.to_sympy(symbol), exponent)

  def children(self):
    return (self.base,)

  def _same_structure(self, other) -> bool:
    return self.exponent.hex() == other.exponent.hex() and self.base == other.base

  def _compute_hash(self) -> int:
    return hash((NodeType.POW_CONST, self.exponent.hex(), hash(self.base)))


class ConstPowNode(Node):
  """Fixed numeric base raised to an expression"""

  __slots__ = ('base', 'exponent')

  def __init__(self, base: Number, exponent: Node):
    super().__init__()
    self.base = float(base)
    self.exponent = exponent

  def _evaluate(self, x):
    return evaluate_binary_op(np.float64(self.base), self.exponent._evaluate(x), '^')

  def to_string(self) -> str:
    return f"({format_constant(self.base)} ^ {self.exponent.to_string()})"

  def to_sympy(self, symbol):
    base = ConstantNode(self.base).to_sympy(symbol)
    return sp.Pow(base, self.exponent.to_sympy(symbol))

  def children(self):
    return (self.exponent,)

  def _same_structure(self, other) -> bool:
    return self.base.hex() == other.base.hex() and self.exponent == other.exponent

  def _compute_hash(self) -> int:
    return hash((NodeType.CONST_POW, self.base.hex(), hash(self.exponent)))


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown unary operator: {operator}")
    self.operator = operator
    self.operand = operand

  def _evaluate(self, x):
    return evaluate_unary_op(self.operand._evaluate(x), self.operator)

  def to_string(self) -> str:
    if self.operator == 'exp':
      return f"(e ^ {self.operand.to_string()})"
    return f"{self.operator}({self.operand.to_string()})"

  def to_sympy(self, symbol):
    return SYMPY_UNARY_MAP[self.operator](self.operand.to_sympy(symbol))

  def children(self):
    return (self.operand,)

  def _same_structure(self, other) -> bool:
    return self.operator == other.operator and self.operand == other.operand

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, hash(self.operand)))


def is_constant(node: Node, value: Optional[float] = None) -> bool:
  """True if ``node`` is a constant (equal to ``value`` when one is given)"""
  if not isinstance(node, ConstantNode):
    return False
  return value is None or node.value == value


def is_number(value) -> bool:
  return isinstance(value, numbers.Real) and not isinstance(value, bool)
