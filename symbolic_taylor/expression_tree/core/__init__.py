"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    PowConstNode, ConstPowNode, format_constant, is_constant
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
    evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op,
    fold_binary_op, fold_unary_op
)
from .constructors import (
    constant, variable, add, subtract, multiply, divide, power,
    exp, ln, sin, cos, tan
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'PowConstNode', 'ConstPowNode', 'format_constant', 'is_constant',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'evaluate_variable', 'evaluate_constant', 'evaluate_binary_op', 'evaluate_unary_op',
    'fold_binary_op', 'fold_unary_op',
    'constant', 'variable', 'add', 'subtract', 'multiply', 'divide', 'power',
    'exp', 'ln', 'sin', 'cos', 'tan'
]
