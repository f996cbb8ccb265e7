"""Utilities for expression trees."""

from .sympy_utils import to_sympy, from_sympy, latex_representation
from .tree_utils import (
    get_all_nodes, iter_distinct_nodes, count_distinct_nodes,
    calculate_tree_depth
)

__all__ = [
    'to_sympy', 'from_sympy', 'latex_representation',
    'get_all_nodes', 'iter_distinct_nodes', 'count_distinct_nodes',
    'calculate_tree_depth'
]
