"""Expression Tree Module

Immutable single-variable expression trees: smart constructors,
differentiation and evaluation.
"""

from .expression import Expression, evaluate, format_expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    PowConstNode,
    ConstPowNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP
)
from .core.constructors import (
    constant, variable, add, subtract, multiply, divide, power,
    exp, ln, sin, cos, tan
)
from .differentiation import derivative, nth_derivative
from .optimization import NodePool, get_global_pool, clear_global_pool
from .utils import to_sympy, from_sympy

__all__ = [
    "Expression", "evaluate", "format_expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "PowConstNode", "ConstPowNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "UNARY_OP_MAP",
    "constant", "variable", "add", "subtract", "multiply", "divide", "power",
    "exp", "ln", "sin", "cos", "tan",
    "derivative", "nth_derivative",
    "NodePool", "get_global_pool", "clear_global_pool",
    "to_sympy", "from_sympy"
]
