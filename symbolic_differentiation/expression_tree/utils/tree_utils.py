"""
Walks over expression trees.

Every walk here is iterative, so very deep trees (long chains of unary
signs, for instance) are handled without touching the recursion limit.
"""

from collections import deque
from typing import List, Set

from ..core.node import Node
from ..core.operators import OpType, TokenType
from ..core.tokens import VariableToken


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Collect every node of the subtree rooted at node.

    Args:
        node: Subtree root
        traversal_order: 'breadth_first' (level by level, the default) or
            'depth_first' (pre-order, children left to right)

    Returns:
        Nodes in visiting order, root first
    """
    if traversal_order == 'breadth_first':
        return _level_order(node)
    if traversal_order == 'depth_first':
        return _pre_order(node)
    raise ValueError(f"Unknown traversal order {traversal_order!r}")


def _level_order(root: Node) -> List[Node]:
    queue = deque([root])
    visited = []
    while queue:
        current = queue.popleft()
        visited.append(current)
        queue.extend(current.children)
    return visited


def _pre_order(root: Node) -> List[Node]:
    """Same order as Node.dump() and the DOT node numbering"""
    pending = [root]
    visited = []
    while pending:
        current = pending.pop()
        visited.append(current)
        pending.extend(reversed(current.children))
    return visited


def calculate_tree_depth(node: Node) -> int:
    """Number of nodes on the longest root-to-leaf path (a lone leaf is 1)"""
    deepest = 0
    pending = [(node, 1)]
    while pending:
        current, depth = pending.pop()
        deepest = max(deepest, depth)
        pending.extend((child, depth + 1) for child in current.children)
    return deepest


def count_nodes(node: Node) -> int:
    return len(_pre_order(node))


def find_nodes_by_token_type(node: Node, token_type: TokenType) -> List[Node]:
    """
    Find all nodes whose token is of the given kind.

    Args:
        node: Root node of the tree
        token_type: TokenType to look for (e.g. TokenType.VARIABLE)

    Returns:
        List of matching nodes in breadth-first order
    """
    return [n for n in get_all_nodes(node) if n.token.type == token_type]


def find_nodes_by_op_type(node: Node, op_type: OpType) -> List[Node]:
    """
    Find all operator and function nodes with a specific op_type.

    Args:
        node: Root node of the tree
        op_type: OpType to search for

    Returns:
        List of nodes with the specified op_type
    """
    return [n for n in get_all_nodes(node)
            if getattr(n.token, 'op_type', None) == op_type]


def get_variable_names(node: Node) -> List[str]:
    """Distinct variable names in first-seen (depth-first) order."""
    seen: Set[str] = set()
    names = []
    for n in _pre_order(node):
        if isinstance(n.token, VariableToken) and n.token.name not in seen:
            seen.add(n.token.name)
            names.append(n.token.name)
    return names


def contains_variable(node: Node) -> bool:
    """True when any node of the subtree is a variable."""
    return any(isinstance(n.token, VariableToken) for n in _pre_order(node))


def is_strict_tree(node: Node) -> bool:
    """
    Check that no node object is reachable along two different paths.

    Args:
        node: Root node of the tree

    Returns:
        True if every node has exactly one parent
    """
    seen: Set[int] = set()
    for n in _pre_order(node):
        if id(n) in seen:
            return False
        seen.add(id(n))
    return True
