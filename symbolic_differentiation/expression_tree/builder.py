from typing import Iterable, List, Union
from .core.node import Node
from .core.tokens import (
  Token, ConstantToken, VariableToken, ParenthesisToken, OperatorToken, FunctionToken
)
from ..errors import MalformedExpression
from ..logging_system import log_debug

Operation = Union[OperatorToken, FunctionToken]


def build(tokens: Iterable[Token]) -> Node:
  """Build a syntax tree from infix tokens (operator-precedence reduction).

  Unary and binary signs must already be told apart by the token producer;
  the arity carried by each operator token is trusted as is.

  Raises:
      MalformedExpression: unbalanced parentheses, too few operands for an
          operator, or operands left over after every operator is applied.
  """
  stack: List[Token] = []
  operands: List[Node] = []
  token_count = 0

  for token in tokens:
    token_count += 1
    if isinstance(token, (ConstantToken, VariableToken)):
      operands.append(Node(token))
    elif isinstance(token, ParenthesisToken):
      if token.is_open:
        stack.append(token)
      else:
        while stack and not isinstance(stack[-1], ParenthesisToken):
          _connect_with_operands(operands, stack.pop())
        if not stack:
          raise MalformedExpression("Missing open parenthesis")
        stack.pop()
    elif isinstance(token, (OperatorToken, FunctionToken)):
      while stack and isinstance(stack[-1], (OperatorToken, FunctionToken)):
        top = stack[-1]
        if (top.precedence > token.precedence or
            (top.precedence == token.precedence and token.left_associative)):
          _connect_with_operands(operands, stack.pop())
        else:
          break
      stack.append(token)
    else:
      raise MalformedExpression(f"Unsupported token: {token!r}")

  while stack:
    token = stack.pop()
    if isinstance(token, ParenthesisToken):
      raise MalformedExpression("Unclosed parenthesis")
    _connect_with_operands(operands, token)

  if not operands:
    raise MalformedExpression("Empty expression")
  if len(operands) != 1:
    raise MalformedExpression(f"Too many operands ({len(operands)} trees left after reduction)")

  log_debug(f"Built tree of {operands[0].size()} nodes from {token_count} tokens")
  return operands[0]


def _connect_with_operands(operands: List[Node], token: Operation):
  arity = token.arity
  if len(operands) < arity:
    raise MalformedExpression(
      f"Too few operands for {token.label!r} (needs {arity}, has {len(operands)})")
  children = operands[len(operands) - arity:]
  del operands[len(operands) - arity:]
  operands.append(Node(token, *children))
