"""
Tree Utility Functions

Traversal and analysis helpers for expression trees. Expressions are DAGs
once subtrees are shared, so helpers say whether they count occurrences or
distinct node objects.
"""

from typing import List, Dict

from ..core.node import Node


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get every node occurrence in the tree using the given traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of nodes; a shared subtree appears once per occurrence
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def iter_distinct_nodes(node: Node):
    """Yield each distinct node object once (shared subtrees are visited once)"""
    seen = set()
    stack = [node]
    while stack:
        current_node = stack.pop()
        if id(current_node) in seen:
            continue
        seen.add(id(current_node))
        yield current_node
        stack.extend(current_node.children())


def count_distinct_nodes(node: Node) -> int:
    """Number of node objects actually allocated for this expression"""
    return sum(1 for _ in iter_distinct_nodes(node))


def calculate_tree_depth(node: Node) -> int:
    """Longest root-to-leaf path, counted in nodes"""
    depths: Dict[int, int] = {}
    stack = [(node, False)]
    while stack:
        current_node, expanded = stack.pop()
        key = id(current_node)
        if key in depths:
            continue
        children = current_node.children()
        if expanded or not children:
            depths[key] = 1 + max((depths[id(c)] for c in children), default=0)
        else:
            stack.append((current_node, True))
            stack.extend((c, False) for c in children)
    return depths[id(node)]
