"""Core expression tree components."""

from .node import Node, constant_node, variable_node, operator_node, function_node
from .operators import (
    TokenType, OpType, MAX_PRECEDENCE, OPERATOR_TABLE, FUNCTION_TABLE,
    BINARY_OP_MAP, UNARY_OP_MAP, FUNCTION_MAP,
    BINARY_OPERATOR_TYPES, UNARY_OPERATOR_TYPES, FUNCTION_TYPES,
    evaluate_binary_op, evaluate_unary_op
)
from .tokens import (
    Token, ConstantToken, VariableToken, ParenthesisToken, OperatorToken, FunctionToken,
    OPEN_PARENTHESIS, CLOSE_PARENTHESIS, operator_token, function_token
)
from .visitor import TreeVisitor

__all__ = [
    'Node', 'constant_node', 'variable_node', 'operator_node', 'function_node',
    'TokenType', 'OpType', 'MAX_PRECEDENCE', 'OPERATOR_TABLE', 'FUNCTION_TABLE',
    'BINARY_OP_MAP', 'UNARY_OP_MAP', 'FUNCTION_MAP',
    'BINARY_OPERATOR_TYPES', 'UNARY_OPERATOR_TYPES', 'FUNCTION_TYPES',
    'evaluate_binary_op', 'evaluate_unary_op',
    'Token', 'ConstantToken', 'VariableToken', 'ParenthesisToken', 'OperatorToken', 'FunctionToken',
    'OPEN_PARENTHESIS', 'CLOSE_PARENTHESIS', 'operator_token', 'function_token',
    'TreeVisitor'
]
