from abc import ABC, abstractmethod
from typing import Dict
from .operators import (
  TokenType, OpType, MAX_PRECEDENCE, OPERATOR_TABLE, FUNCTION_TABLE
)


class Token(ABC):
  """Lexical unit of an expression. Tokens are immutable once created."""

  __slots__ = ()

  type: TokenType
  arity = 0

  @abstractmethod
  def describe(self) -> str:
    """One-line description used by the indented tree dump"""

  @property
  @abstractmethod
  def label(self) -> str:
    """Short text shown for this token in rendered graphs"""

  @property
  def text(self) -> str:
    """Infix source form; parsing it back yields an equal token"""
    return self.label

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.label!r})"


class ConstantToken(Token):
  __slots__ = ('value',)

  type = TokenType.CONSTANT_VALUE

  def __init__(self, value: float):
    self.value = float(value)

  def describe(self) -> str:
    return f"{self.type.name} VALUE={self.value:f}"

  @property
  def label(self) -> str:
    return f"{self.value:g}"

  @property
  def text(self) -> str:
    if self.value.is_integer() and abs(self.value) < 1e16:
      return str(int(self.value))
    return repr(self.value)

  def __eq__(self, other) -> bool:
    return isinstance(other, ConstantToken) and self.value == other.value

  def __hash__(self) -> int:
    return hash((self.type, self.value))


class VariableToken(Token):
  """Named variable. Obtain instances through a VariableRegistry so names are interned."""

  __slots__ = ('name',)

  type = TokenType.VARIABLE

  def __init__(self, name: str):
    if not name:
      raise ValueError("Variable name must be a non-empty string")
    self.name = name

  def describe(self) -> str:
    return f"{self.type.name} NAME={self.name}"

  @property
  def label(self) -> str:
    return self.name

  def __eq__(self, other) -> bool:
    return isinstance(other, VariableToken) and self.name == other.name

  def __hash__(self) -> int:
    return hash((self.type, self.name))


class ParenthesisToken(Token):
  __slots__ = ('is_open',)

  type = TokenType.PARENTHESIS

  def __init__(self, is_open: bool):
    self.is_open = is_open

  @property
  def is_close(self) -> bool:
    return not self.is_open

  def describe(self) -> str:
    return f"{self.type.name} {'OPEN' if self.is_open else 'CLOSE'}"

  @property
  def label(self) -> str:
    return '(' if self.is_open else ')'

  def __eq__(self, other) -> bool:
    return isinstance(other, ParenthesisToken) and self.is_open == other.is_open

  def __hash__(self) -> int:
    return hash((self.type, self.is_open))


class OperatorToken(Token):
  __slots__ = ('op_type', 'arity', 'precedence', 'left_associative', 'symbol')

  type = TokenType.OPERATOR

  def __init__(self, op_type: OpType, arity: int, precedence: int,
               left_associative: bool, symbol: str):
    self.op_type = op_type
    self.arity = arity
    self.precedence = precedence
    self.left_associative = left_associative
    self.symbol = symbol

  @property
  def right_associative(self) -> bool:
    return not self.left_associative

  def describe(self) -> str:
    return (f"{self.type.name} ARITY={self.arity}, PRECEDENCE={self.precedence}, "
            f"TYPE={self.op_type.name}")

  @property
  def label(self) -> str:
    return self.symbol

  def __eq__(self, other) -> bool:
    return (isinstance(other, OperatorToken) and self.op_type == other.op_type
            and self.arity == other.arity)

  def __hash__(self) -> int:
    return hash((self.type, self.op_type, self.arity))


class FunctionToken(Token):
  """Prefix function of one argument, e.g. sin or ln"""

  __slots__ = ('op_type',)

  type = TokenType.FUNCTION
  arity = 1
  precedence = MAX_PRECEDENCE
  left_associative = False

  def __init__(self, op_type: OpType):
    if op_type not in FUNCTION_TABLE:
      raise ValueError(f"{op_type!r} is not a function")
    self.op_type = op_type

  @property
  def name(self) -> str:
    return FUNCTION_TABLE[self.op_type]

  def describe(self) -> str:
    return f"{self.type.name} TYPE={self.op_type.name}"

  @property
  def label(self) -> str:
    return self.name

  def __eq__(self, other) -> bool:
    return isinstance(other, FunctionToken) and self.op_type == other.op_type

  def __hash__(self) -> int:
    return hash((self.type, self.op_type))


_OPERATOR_TOKENS: Dict[OpType, OperatorToken] = {
  op_type: OperatorToken(op_type, arity, precedence, left_associative, symbol)
  for op_type, (symbol, arity, precedence, left_associative) in OPERATOR_TABLE.items()
}
_FUNCTION_TOKENS: Dict[OpType, FunctionToken] = {
  op_type: FunctionToken(op_type) for op_type in FUNCTION_TABLE
}
OPEN_PARENTHESIS = ParenthesisToken(True)
CLOSE_PARENTHESIS = ParenthesisToken(False)


def operator_token(op_type: OpType) -> OperatorToken:
  """Standard operator token for op_type (shared, since tokens never change)"""
  return _OPERATOR_TOKENS[op_type]


def function_token(op_type: OpType) -> FunctionToken:
  return _FUNCTION_TOKENS[op_type]
