import sympy as sp
from ..core.node import Node
from ..core.operators import OpType
from ..core.tokens import ConstantToken, VariableToken, OperatorToken, FunctionToken
from ...errors import UnsupportedConstruct


def to_sympy(node: Node, evaluate: bool = False) -> sp.Expr:
  """Convert a tree to a SymPy expression.

  With evaluate=False the tree's shape is kept (1 * x stays 1 * x), which is
  what the LaTeX renderer wants. evaluate=True lets SymPy canonicalise, which
  is handy for comparing trees algebraically.
  """
  token = node.token

  if isinstance(token, ConstantToken):
    if token.value.is_integer():
      return sp.Integer(int(token.value))
    return sp.Float(token.value)

  if isinstance(token, VariableToken):
    return sp.Symbol(token.name)

  operands = [to_sympy(child, evaluate) for child in node.children]

  if isinstance(token, OperatorToken) and token.arity == 1:
    if token.op_type == OpType.ARITHMETIC_NEGATION:
      return sp.Mul(sp.Integer(-1), operands[0], evaluate=evaluate)
    elif token.op_type == OpType.UNARY_ADDITION:
      return operands[0]

  elif isinstance(token, OperatorToken) and token.arity == 2:
    left, right = operands
    if token.op_type == OpType.ADDITION:
      return sp.Add(left, right, evaluate=evaluate)
    elif token.op_type == OpType.SUBTRACTION:
      return sp.Add(left, sp.Mul(sp.Integer(-1), right, evaluate=evaluate), evaluate=evaluate)
    elif token.op_type == OpType.MULTIPLICATION:
      return sp.Mul(left, right, evaluate=evaluate)
    elif token.op_type == OpType.DIVISION:
      return sp.Mul(left, sp.Pow(right, sp.Integer(-1), evaluate=evaluate), evaluate=evaluate)
    elif token.op_type == OpType.POWER:
      return sp.Pow(left, right, evaluate=evaluate)

  elif isinstance(token, FunctionToken):
    operand = operands[0]
    if token.op_type == OpType.SINE:
      return sp.sin(operand, evaluate=evaluate)
    elif token.op_type == OpType.COSINE:
      return sp.cos(operand, evaluate=evaluate)
    elif token.op_type == OpType.TANGENT:
      return sp.tan(operand, evaluate=evaluate)
    elif token.op_type == OpType.COTANGENT:
      return sp.cot(operand, evaluate=evaluate)
    elif token.op_type == OpType.NATURAL_LOG:
      return sp.log(operand, evaluate=evaluate)

  raise UnsupportedConstruct(f"to_sympy reached unexpected token: {token!r}")


def latex_representation(node: Node) -> str:
  """LaTeX source for the tree, keeping its structure"""
  return sp.latex(to_sympy(node, evaluate=False))
