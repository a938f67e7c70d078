from ..core.node import Node
from ..core.tokens import ParenthesisToken
from .tree_utils import get_all_nodes, is_strict_tree


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    """Arity invariant holds everywhere, no parentheses survived, no shared nodes"""
    if not isinstance(node, Node):
      return False
    if not is_strict_tree(node):
      return False
    return all(ExpressionValidator._is_node_valid(n) for n in get_all_nodes(node))

  @staticmethod
  def _is_node_valid(node: Node) -> bool:
    if isinstance(node.token, ParenthesisToken):
      return False
    if len(node.children) != node.token.arity:
      return False
    return all(isinstance(child, Node) for child in node.children)
