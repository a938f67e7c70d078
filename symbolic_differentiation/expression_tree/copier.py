from typing import Optional
from .core.node import Node
from .core.tokens import ConstantToken, VariableToken, OperatorToken, FunctionToken
from .core.visitor import TreeVisitor
from .optimization.variable_registry import VariableRegistry, resolve_registry


class TreeCopier(TreeVisitor):
  """Deep copy of a subtree. Variables resolve to the registry's canonical token."""

  def __init__(self, registry: Optional[VariableRegistry] = None):
    self.registry = resolve_registry(registry)

  def visit_constant(self, node: Node, token: ConstantToken) -> Node:
    return Node(ConstantToken(token.value))

  def visit_variable(self, node: Node, token: VariableToken) -> Node:
    return Node(self.registry.get(token.name))

  def visit_unary_operator(self, node: Node, token: OperatorToken) -> Node:
    return Node(token, self.visit(node.children[0]))

  def visit_binary_operator(self, node: Node, token: OperatorToken) -> Node:
    return Node(token, self.visit(node.children[0]), self.visit(node.children[1]))

  def visit_function(self, node: Node, token: FunctionToken) -> Node:
    return Node(token, self.visit(node.children[0]))


def copy_tree(node: Node, registry: Optional[VariableRegistry] = None) -> Node:
  return TreeCopier(registry).visit(node)
