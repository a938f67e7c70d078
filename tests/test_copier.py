from symbolic_differentiation import VariableRegistry, copy_tree
from symbolic_differentiation.expression_tree import TreeCopier
from symbolic_differentiation.expression_tree.utils import get_all_nodes


def test_copy_is_equal_but_disjoint(parse):
    tree = parse("x*sin(y) - 2^-x")
    copy = copy_tree(tree)

    assert copy == tree
    assert copy.to_string() == tree.to_string()
    original_ids = {id(node) for node in get_all_nodes(tree)}
    assert not original_ids & {id(node) for node in get_all_nodes(copy)}


def test_constants_get_fresh_tokens(parse):
    tree = parse("3")
    copy = copy_tree(tree)

    assert copy.token == tree.token
    assert copy.token is not tree.token


def test_variables_resolve_through_registry(parse, registry):
    tree = parse("x + y")
    copy = TreeCopier(registry).visit(tree)

    assert copy.children[0].token is registry.get("x")
    assert copy.children[1].token is registry.get("y")


def test_copy_into_another_registry(parse):
    other = VariableRegistry()
    copy = copy_tree(parse("z * 2"), other)

    assert copy.children[0].token is other.get("z")
    assert len(other) == 1


def test_operator_tokens_are_shared(parse):
    tree = parse("-x + 1")
    copy = copy_tree(tree)

    assert copy.token is tree.token
    assert copy.children[0].token is tree.children[0].token
