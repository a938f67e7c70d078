"""Utilities for expression trees."""

from .simplifier import (
    Optimizer, CompositeOptimizer, UnaryPlusElimination, DoubleNegationCollapse,
    default_pipeline
)
from .sympy_utils import to_sympy, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, count_nodes,
    find_nodes_by_token_type, find_nodes_by_op_type,
    get_variable_names, contains_variable, is_strict_tree
)
from .rendering import dump_tree, to_dot, to_latex_document, write_outputs
from .validator import ExpressionValidator

__all__ = [
    'Optimizer', 'CompositeOptimizer', 'UnaryPlusElimination', 'DoubleNegationCollapse',
    'default_pipeline',
    'to_sympy', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'count_nodes',
    'find_nodes_by_token_type', 'find_nodes_by_op_type',
    'get_variable_names', 'contains_variable', 'is_strict_tree',
    'dump_tree', 'to_dot', 'to_latex_document', 'write_outputs',
    'ExpressionValidator'
]
