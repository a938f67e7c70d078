import re
from typing import List, Optional
from .core.operators import BINARY_OP_MAP, UNARY_OP_MAP, FUNCTION_MAP
from .core.tokens import (
  Token, ConstantToken, VariableToken, ParenthesisToken,
  OPEN_PARENTHESIS, CLOSE_PARENTHESIS, operator_token, function_token
)
from .optimization.variable_registry import VariableRegistry, resolve_registry
from ..errors import TokenizationError

_TOKEN_PATTERN = re.compile(r"""
    (?P<space>\s+)
  | (?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<name>[A-Za-z_][A-Za-z0-9_]*'*)
  | (?P<symbol>[-+*/^()])
""", re.VERBOSE)


def tokenize(expression: str, registry: Optional[VariableRegistry] = None) -> List[Token]:
  """Split an infix expression into tokens.

  A '+' or '-' is binary when the previous token can end a value (a constant,
  a variable or a closing parenthesis) and unary otherwise.

  Raises:
      TokenizationError: on a character that starts no token.
  """
  registry = resolve_registry(registry)
  tokens: List[Token] = []
  position = 0

  while position < len(expression):
    match = _TOKEN_PATTERN.match(expression, position)
    if match is None:
      raise TokenizationError(expression[position], position)
    position = match.end()
    kind = match.lastgroup
    text = match.group()

    if kind == 'space':
      continue
    elif kind == 'number':
      tokens.append(ConstantToken(float(text)))
    elif kind == 'name':
      if text in FUNCTION_MAP:
        tokens.append(function_token(FUNCTION_MAP[text]))
      else:
        tokens.append(registry.get(text))
    elif text == '(':
      tokens.append(OPEN_PARENTHESIS)
    elif text == ')':
      tokens.append(CLOSE_PARENTHESIS)
    elif text in UNARY_OP_MAP and not _ends_value(tokens):
      tokens.append(operator_token(UNARY_OP_MAP[text]))
    else:
      tokens.append(operator_token(BINARY_OP_MAP[text]))

  return tokens


def _ends_value(tokens: List[Token]) -> bool:
  if not tokens:
    return False
  previous = tokens[-1]
  if isinstance(previous, (ConstantToken, VariableToken)):
    return True
  return isinstance(previous, ParenthesisToken) and previous.is_close
