from abc import ABC, abstractmethod
from typing import Any
from .node import Node
from .operators import BINARY_OPERATOR_TYPES, UNARY_OPERATOR_TYPES, FUNCTION_TYPES
from .tokens import ConstantToken, VariableToken, OperatorToken, FunctionToken
from ...errors import UnsupportedConstruct


class TreeVisitor(ABC):
  """Single dispatch point over token kinds.

  Every consumer that walks a tree by token kind (evaluation, copying,
  differentiation) subclasses this, so a new kind has to be handled by each
  of them before they can be instantiated.
  """

  def visit(self, node: Node) -> Any:
    token = node.token
    if isinstance(token, ConstantToken):
      return self.visit_constant(node, token)
    elif isinstance(token, VariableToken):
      return self.visit_variable(node, token)
    elif isinstance(token, OperatorToken):
      if token.arity == 1 and token.op_type in UNARY_OPERATOR_TYPES:
        return self.visit_unary_operator(node, token)
      elif token.arity == 2 and token.op_type in BINARY_OPERATOR_TYPES:
        return self.visit_binary_operator(node, token)
      elif token.arity not in (1, 2):
        raise UnsupportedConstruct(
          f"Unsupported arity of operator ({token.arity}). Only unary and binary are supported")
      raise UnsupportedConstruct(
        f"Unsupported {'unary' if token.arity == 1 else 'binary'} operator type: {token.op_type.name}")
    elif isinstance(token, FunctionToken):
      if token.op_type in FUNCTION_TYPES:
        return self.visit_function(node, token)
      raise UnsupportedConstruct(f"Unsupported function type: {token.op_type.name}")
    raise UnsupportedConstruct(f"Unsupported token type: {token.type.name}")

  @abstractmethod
  def visit_constant(self, node: Node, token: ConstantToken) -> Any:
    pass

  @abstractmethod
  def visit_variable(self, node: Node, token: VariableToken) -> Any:
    pass

  @abstractmethod
  def visit_unary_operator(self, node: Node, token: OperatorToken) -> Any:
    pass

  @abstractmethod
  def visit_binary_operator(self, node: Node, token: OperatorToken) -> Any:
    pass

  @abstractmethod
  def visit_function(self, node: Node, token: FunctionToken) -> Any:
    pass
