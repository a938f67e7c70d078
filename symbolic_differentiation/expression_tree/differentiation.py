from typing import Optional
from .core.node import Node, constant_node, operator_node, function_node
from .core.operators import OpType
from .core.tokens import ConstantToken, VariableToken, OperatorToken, FunctionToken
from .core.visitor import TreeVisitor
from .copier import TreeCopier
from .evaluation import evaluate
from .optimization.variable_registry import VariableRegistry, resolve_registry
from .utils.tree_utils import contains_variable
from ..errors import UnsupportedConstruct
from ..logging_system import log_debug

ADD = OpType.ADDITION
SUB = OpType.SUBTRACTION
MUL = OpType.MULTIPLICATION
DIV = OpType.DIVISION
POW = OpType.POWER
NEG = OpType.ARITHMETIC_NEGATION


class Differentiator(TreeVisitor):
  """Builds the formal derivative of a tree with respect to one variable.

  The input tree is never touched. Any source subtree that appears in the
  result is a fresh copy, so the output is a strict tree even when a rule
  uses the same subexpression twice.
  """

  def __init__(self, variable_name: str, registry: Optional[VariableRegistry] = None):
    self.variable_name = variable_name
    self.registry = resolve_registry(registry)
    self._copier = TreeCopier(self.registry)

  def copy(self, node: Node) -> Node:
    return self._copier.visit(node)

  # C' = 0
  def visit_constant(self, node: Node, token: ConstantToken) -> Node:
    return constant_node(0.0)

  # x' = 1, y' = y'
  def visit_variable(self, node: Node, token: VariableToken) -> Node:
    if token.name == self.variable_name:
      return constant_node(1.0)
    return Node(self.registry.get(token.name + "'"))

  # (-f)' = -(f'), (+f)' = +(f')
  def visit_unary_operator(self, node: Node, token: OperatorToken) -> Node:
    return Node(token, self.visit(node.children[0]))

  def visit_binary_operator(self, node: Node, token: OperatorToken) -> Node:
    f, g = node.children
    op_type = token.op_type

    if op_type == ADD:
      return operator_node(ADD, self.visit(f), self.visit(g))
    elif op_type == SUB:
      return operator_node(SUB, self.visit(f), self.visit(g))
    elif op_type == MUL:
      # (f * g)' = f' * g + f * g'
      return operator_node(
        ADD,
        operator_node(MUL, self.visit(f), self.copy(g)),
        operator_node(MUL, self.copy(f), self.visit(g)))
    elif op_type == DIV:
      # (f / g)' = (f' * g - f * g') / (g * g)
      numerator = operator_node(
        SUB,
        operator_node(MUL, self.visit(f), self.copy(g)),
        operator_node(MUL, self.copy(f), self.visit(g)))
      denominator = operator_node(MUL, self.copy(g), self.copy(g))
      return operator_node(DIV, numerator, denominator)
    elif op_type == POW:
      return self._differentiate_power(f, g)
    raise UnsupportedConstruct(f"Unsupported binary operator type: {op_type.name}")

  def _differentiate_power(self, base: Node, exponent: Node) -> Node:
    base_is_constant = not contains_variable(base)
    exponent_is_constant = not contains_variable(exponent)

    if base_is_constant and exponent_is_constant:
      return constant_node(0.0)

    if exponent_is_constant:
      # (f^C)' = C * f' * f^(C - 1)
      power = evaluate(exponent)
      return operator_node(
        MUL,
        operator_node(MUL, constant_node(power), self.visit(base)),
        operator_node(POW, self.copy(base), constant_node(power - 1.0)))

    if base_is_constant:
      # (C^f)' = ln(C) * C^f * f'
      return operator_node(
        MUL,
        operator_node(
          MUL,
          function_node(OpType.NATURAL_LOG, self.copy(base)),
          operator_node(POW, self.copy(base), self.copy(exponent))),
        self.visit(exponent))

    raise UnsupportedConstruct(
      "Derivative of power with non-constant base and exponent is not supported")

  def visit_function(self, node: Node, token: FunctionToken) -> Node:
    f = node.children[0]
    op_type = token.op_type
    derivative = self.visit(f)

    if op_type == OpType.SINE:
      # sin(f)' = f' * cos(f)
      return operator_node(MUL, derivative, function_node(OpType.COSINE, self.copy(f)))
    elif op_type == OpType.COSINE:
      # cos(f)' = f' * -sin(f)
      return operator_node(
        MUL, derivative,
        operator_node(NEG, function_node(OpType.SINE, self.copy(f))))
    elif op_type == OpType.TANGENT:
      # tan(f)' = f' / cos(f)^2
      return operator_node(
        DIV, derivative,
        operator_node(POW, function_node(OpType.COSINE, self.copy(f)), constant_node(2.0)))
    elif op_type == OpType.COTANGENT:
      # cot(f)' = f' / -(sin(f)^2)
      return operator_node(
        DIV, derivative,
        operator_node(
          NEG,
          operator_node(POW, function_node(OpType.SINE, self.copy(f)), constant_node(2.0))))
    elif op_type == OpType.NATURAL_LOG:
      # ln(f)' = f' / f
      return operator_node(DIV, derivative, self.copy(f))
    raise UnsupportedConstruct(f"Unsupported function type: {op_type.name}")


def differentiate(node: Node, variable_name: str,
                  registry: Optional[VariableRegistry] = None) -> Node:
  """Derivative of node with respect to variable_name as a new tree"""
  derivative = Differentiator(variable_name, registry).visit(node)
  log_debug(f"d/d{variable_name}: {node.size()} nodes -> {derivative.size()} nodes")
  return derivative
