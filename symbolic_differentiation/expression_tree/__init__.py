"""Expression Tree Module

Token model, tree builder, evaluator, differentiator and rewrite passes.
"""

from .expression import Expression
from .builder import build
from .copier import TreeCopier, copy_tree
from .differentiation import Differentiator, differentiate
from .evaluation import Evaluator, evaluate
from .tokenizer import tokenize
from .core import (
    Node, constant_node, variable_node, operator_node, function_node,
    TokenType, OpType, MAX_PRECEDENCE,
    Token, ConstantToken, VariableToken, ParenthesisToken, OperatorToken, FunctionToken,
    OPEN_PARENTHESIS, CLOSE_PARENTHESIS, operator_token, function_token,
    TreeVisitor
)
from .optimization import VariableRegistry, get_global_registry, clear_global_registry
from .utils import (
    Optimizer, CompositeOptimizer, UnaryPlusElimination, DoubleNegationCollapse,
    default_pipeline, to_sympy, latex_representation,
    dump_tree, to_dot, to_latex_document, write_outputs, ExpressionValidator
)

__all__ = [
    "Expression", "build", "TreeCopier", "copy_tree", "Differentiator", "differentiate",
    "Evaluator", "evaluate", "tokenize",
    "Node", "constant_node", "variable_node", "operator_node", "function_node",
    "TokenType", "OpType", "MAX_PRECEDENCE",
    "Token", "ConstantToken", "VariableToken", "ParenthesisToken", "OperatorToken", "FunctionToken",
    "OPEN_PARENTHESIS", "CLOSE_PARENTHESIS", "operator_token", "function_token",
    "TreeVisitor",
    "VariableRegistry", "get_global_registry", "clear_global_registry",
    "Optimizer", "CompositeOptimizer", "UnaryPlusElimination", "DoubleNegationCollapse",
    "default_pipeline", "to_sympy", "latex_representation",
    "dump_tree", "to_dot", "to_latex_document", "write_outputs", "ExpressionValidator"
]
