from typing import Iterable, Optional, Tuple
from .operators import OpType
from .tokens import (
  Token, ConstantToken, VariableToken, FunctionToken,
  operator_token, function_token
)


class Node:
  """Syntax tree node: a token plus exactly token.arity children.

  Nodes are never modified after construction. Rewrites build a replacement
  node and hand it back to the caller, who installs it in the parent.
  """

  __slots__ = ('token', 'children', '_hash_cache', '_size_cache')

  def __init__(self, token: Token, *children: 'Node'):
    if len(children) != token.arity:
      raise ValueError(
        f"{token!r} requires {token.arity} children, got {len(children)}")
    self.token = token
    self.children: Tuple['Node', ...] = children
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @property
  def arity(self) -> int:
    return self.token.arity

  def is_leaf(self) -> bool:
    return not self.children

  def with_children(self, children: Iterable['Node']) -> 'Node':
    """Return self when every child is unchanged, else a new node with the same token"""
    children = tuple(children)
    if all(new is old for new, old in zip(children, self.children)):
      return self
    return Node(self.token, *children)

  def evaluate(self) -> float:
    from ..evaluation import evaluate
    return evaluate(self)

  def to_string(self) -> str:
    token = self.token
    if not self.children:
      return token.text
    if isinstance(token, FunctionToken):
      inner = self.children[0].to_string()
      if _is_binary(self.children[0]):
        return f"{token.name}{inner}"
      return f"{token.name}({inner})"
    if len(self.children) == 1:
      return f"{token.label}{self.children[0].to_string()}"
    if len(self.children) == 2:
      return f"({self.children[0].to_string()} {token.label} {self.children[1].to_string()})"
    return f"{token.label}({', '.join(child.to_string() for child in self.children)})"

  def dump(self, depth: int = 0) -> str:
    """Depth-first listing, one token description per line, tab-indented by depth"""
    lines = []
    self._dump_lines(depth, lines)
    return '\n'.join(lines)

  def _dump_lines(self, depth: int, lines: list):
    lines.append('\t' * depth + self.token.describe())
    for child in self.children:
      child._dump_lines(depth + 1, lines)

  def size(self) -> int:
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children)
    return self._size_cache

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    if hash(self) != hash(other):
      return False
    return self.token == other.token and self.children == other.children

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash((self.token, tuple(hash(child) for child in self.children)))
    return self._hash_cache

  def __repr__(self) -> str:
    return f"Node({self.to_string()})"


def _is_binary(node: Node) -> bool:
  return len(node.children) == 2


def constant_node(value: float) -> Node:
  return Node(ConstantToken(value))


def variable_node(token: VariableToken) -> Node:
  return Node(token)


def operator_node(op_type: OpType, *children: Node) -> Node:
  return Node(operator_token(op_type), *children)


def function_node(op_type: OpType, argument: Node) -> Node:
  return Node(function_token(op_type), argument)
