import numpy as np
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3
  POW_CONST = 4
  CONST_POW = 5

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  EXP = 5
  LN = 6
  SIN = 7
  COS = 8
  TAN = 9

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {
    'exp': OpType.EXP, 'ln': OpType.LN,
    'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN
}

_BINARY_UFUNCS = {
  OpType.ADD: np.add,
  OpType.SUB: np.subtract,
  OpType.MUL: np.multiply,
  OpType.DIV: np.divide,
  OpType.POW: np.power,
}

_UNARY_UFUNCS = {
  OpType.EXP: np.exp,
  OpType.LN: np.log,
  OpType.SIN: np.sin,
  OpType.COS: np.cos,
  OpType.TAN: np.tan,
}


def evaluate_variable(x):
  return x

def evaluate_constant(x, value):
  if np.ndim(x) == 0:
    return np.float64(value)
  return np.full(np.shape(x), value, dtype=np.float64)

def evaluate_binary_op(left_val, right_val, operator):
  """Apply a binary operator with IEEE-754 semantics.

  Callers are expected to run inside ``np.errstate(all='ignore')``; division
  by zero and invalid powers then produce inf/NaN silently.
  """
  return _BINARY_UFUNCS[BINARY_OP_MAP[operator]](left_val, right_val)

def evaluate_unary_op(operand_val, operator):
  return _UNARY_UFUNCS[UNARY_OP_MAP[operator]](operand_val)

def fold_binary_op(left: float, right: float, operator: str) -> float:
  """Constant-fold two floats, returning the IEEE result as a Python float"""
  with np.errstate(all='ignore'):
    return float(evaluate_binary_op(np.float64(left), np.float64(right), operator))

def fold_unary_op(value: float, operator: str) -> float:
  with np.errstate(all='ignore'):
    return float(evaluate_unary_op(np.float64(value), operator))
