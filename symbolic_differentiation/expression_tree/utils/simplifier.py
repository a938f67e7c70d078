from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..core.node import Node
from ..core.operators import OpType
from ..core.tokens import OperatorToken
from ...logging_system import log_debug


class Optimizer(ABC):
  """Value-preserving rewrite pass.

  rewrite() returns the node to install in place of its argument: either the
  same object, when nothing changed, or a new tree. Input nodes are never
  modified.
  """

  @abstractmethod
  def rewrite(self, node: Node) -> Node:
    pass

  def __call__(self, node: Node) -> Node:
    return self.rewrite(node)


class CompositeOptimizer(Optimizer):
  """Runs its passes once each, in order, feeding each one the previous result"""

  def __init__(self, optimizers: Optional[Iterable[Optimizer]] = None):
    self.optimizers: List[Optimizer] = list(optimizers or [])

  def add_optimizer(self, optimizer: Optimizer):
    self.optimizers.append(optimizer)

  def rewrite(self, node: Node) -> Node:
    for optimizer in self.optimizers:
      before = node.size()
      node = optimizer.rewrite(node)
      log_debug(f"{type(optimizer).__name__} removed {before - node.size()} nodes")
    return node


def _is_unary(node: Node, op_type: OpType) -> bool:
  token = node.token
  return isinstance(token, OperatorToken) and token.arity == 1 and token.op_type == op_type


class UnaryPlusElimination(Optimizer):
  """Removes every unary plus node: +f becomes f"""

  def rewrite(self, node: Node) -> Node:
    while _is_unary(node, OpType.UNARY_ADDITION):
      node = node.children[0]
    return node.with_children(self.rewrite(child) for child in node.children)


class DoubleNegationCollapse(Optimizer):
  """Collapses adjacent negation pairs: --f becomes f, ---f becomes -f"""

  def rewrite(self, node: Node) -> Node:
    while (_is_unary(node, OpType.ARITHMETIC_NEGATION) and
           _is_unary(node.children[0], OpType.ARITHMETIC_NEGATION)):
      node = node.children[0].children[0]
    return node.with_children(self.rewrite(child) for child in node.children)


def default_pipeline() -> CompositeOptimizer:
  """Unary plus elimination followed by double negation collapse"""
  return CompositeOptimizer([UnaryPlusElimination(), DoubleNegationCollapse()])
