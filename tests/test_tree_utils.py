import pytest

from symbolic_differentiation import OpType
from symbolic_differentiation.expression_tree import Node, constant_node, operator_token
from symbolic_differentiation.expression_tree.utils import (
    calculate_tree_depth, count_nodes, get_all_nodes, get_variable_names
)


def negation_chain(length):
    node = constant_node(1)
    negation = operator_token(OpType.ARITHMETIC_NEGATION)
    for _ in range(length):
        node = Node(negation, node)
    return node


def test_counts_and_depth(parse):
    tree = parse("x*sin(y) + 2")

    assert count_nodes(tree) == 6
    assert calculate_tree_depth(tree) == 4
    assert get_variable_names(tree) == ["x", "y"]


def test_traversal_orders(parse):
    tree = parse("(1 + 2) * 3")

    breadth = [node.token.label for node in get_all_nodes(tree)]
    depth = [node.token.label for node in get_all_nodes(tree, 'depth_first')]
    assert breadth == ["*", "+", "3", "1", "2"]
    assert depth == ["*", "+", "1", "2", "3"]

    with pytest.raises(ValueError):
        get_all_nodes(tree, 'sideways')


def test_deep_chain_does_not_recurse():
    tree = negation_chain(5000)

    assert count_nodes(tree) == 5001
    assert calculate_tree_depth(tree) == 5001
