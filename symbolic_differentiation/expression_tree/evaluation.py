from .core.node import Node
from .core.operators import evaluate_binary_op, evaluate_unary_op
from .core.tokens import ConstantToken, VariableToken, OperatorToken, FunctionToken
from .core.visitor import TreeVisitor
from ..errors import EvaluationError


class Evaluator(TreeVisitor):
  """Folds a variable-free tree to a float using IEEE double arithmetic.

  Division by zero and logs of non-positive numbers give inf/nan, they are
  not errors. Reaching a variable is.
  """

  def visit_constant(self, node: Node, token: ConstantToken) -> float:
    return token.value

  def visit_variable(self, node: Node, token: VariableToken) -> float:
    raise EvaluationError(f"Variable '{token.name}' has no numeric value")

  def visit_unary_operator(self, node: Node, token: OperatorToken) -> float:
    return float(evaluate_unary_op(self.visit(node.children[0]), token.op_type))

  def visit_binary_operator(self, node: Node, token: OperatorToken) -> float:
    left_val = self.visit(node.children[0])
    right_val = self.visit(node.children[1])
    return float(evaluate_binary_op(left_val, right_val, token.op_type))

  def visit_function(self, node: Node, token: FunctionToken) -> float:
    return float(evaluate_unary_op(self.visit(node.children[0]), token.op_type))


_EVALUATOR = Evaluator()


def evaluate(node: Node) -> float:
  return _EVALUATOR.visit(node)
