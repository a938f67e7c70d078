from typing import List, Optional, Sequence
import sympy as sp
from .builder import build
from .copier import copy_tree
from .core.node import Node
from .core.tokens import Token
from .differentiation import differentiate
from .optimization.variable_registry import VariableRegistry, resolve_registry
from .tokenizer import tokenize
from .utils.simplifier import Optimizer, default_pipeline
from .utils.sympy_utils import to_sympy, latex_representation
from .utils.rendering import to_dot
from .utils.tree_utils import calculate_tree_depth, contains_variable, get_variable_names
from .utils.validator import ExpressionValidator


class Expression:
  """Root node plus the registry its variables were interned in"""

  __slots__ = ('root', 'registry', '_string_cache')

  def __init__(self, root: Node, registry: Optional[VariableRegistry] = None):
    self.root = root
    self.registry = resolve_registry(registry)
    self._string_cache: Optional[str] = None

  @classmethod
  def from_string(cls, expr_str: str, registry: Optional[VariableRegistry] = None) -> 'Expression':
    registry = resolve_registry(registry)
    return cls(build(tokenize(expr_str, registry)), registry)

  @classmethod
  def from_tokens(cls, tokens: Sequence[Token],
                  registry: Optional[VariableRegistry] = None) -> 'Expression':
    return cls(build(tokens), registry)

  def evaluate(self) -> float:
    return self.root.evaluate()

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(copy_tree(self.root, self.registry), self.registry)

  def differentiate(self, variable_name: str) -> 'Expression':
    return Expression(differentiate(self.root, variable_name, self.registry), self.registry)

  def optimize(self, pipeline: Optional[Optimizer] = None) -> 'Expression':
    if pipeline is None:
      pipeline = default_pipeline()
    root = pipeline.rewrite(self.root)
    if root is self.root:
      return self
    return Expression(root, self.registry)

  def to_sympy(self, evaluate: bool = False) -> sp.Expr:
    return to_sympy(self.root, evaluate)

  def latex(self) -> str:
    return latex_representation(self.root)

  def to_dot(self, title: str = 'AST') -> str:
    return to_dot(self.root, title)

  def dump(self) -> str:
    return self.root.dump()

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> List[str]:
    return get_variable_names(self.root)

  def is_constant(self) -> bool:
    return not contains_variable(self.root)

  def validate(self) -> bool:
    return ExpressionValidator.is_valid_expression(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"
