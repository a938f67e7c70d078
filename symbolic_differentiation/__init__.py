"""Symbolic Differentiation Package

Builds syntax trees from infix expressions, differentiates them symbolically
and simplifies the result with value-preserving rewrite passes.
"""

from .errors import (
    ExpressionError, MalformedExpression, TokenizationError,
    UnsupportedConstruct, EvaluationError
)
from .expression_tree import (
    Expression, Node, Token, ConstantToken, VariableToken, ParenthesisToken,
    OperatorToken, FunctionToken, TokenType, OpType,
    VariableRegistry, get_global_registry, clear_global_registry,
    tokenize, build, evaluate, differentiate, copy_tree,
    Optimizer, CompositeOptimizer, UnaryPlusElimination, DoubleNegationCollapse,
    default_pipeline, to_sympy, latex_representation, dump_tree, to_dot
)
from .config import RunConfig
from .logging_system import LogLevel, configure_logging, get_logger

__version__ = "0.1.0"
__all__ = [
    "ExpressionError", "MalformedExpression", "TokenizationError",
    "UnsupportedConstruct", "EvaluationError",
    "Expression", "Node", "Token", "ConstantToken", "VariableToken", "ParenthesisToken",
    "OperatorToken", "FunctionToken", "TokenType", "OpType",
    "VariableRegistry", "get_global_registry", "clear_global_registry",
    "tokenize", "build", "evaluate", "differentiate", "copy_tree",
    "Optimizer", "CompositeOptimizer", "UnaryPlusElimination", "DoubleNegationCollapse",
    "default_pipeline", "to_sympy", "latex_representation", "dump_tree", "to_dot",
    "RunConfig", "LogLevel", "configure_logging", "get_logger"
]
