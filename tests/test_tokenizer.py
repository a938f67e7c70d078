import pytest

from symbolic_differentiation import (
    ConstantToken, FunctionToken, MalformedExpression, OperatorToken, OpType,
    ParenthesisToken, TokenizationError, VariableToken, tokenize
)


def assert_constant(token, value):
    assert isinstance(token, ConstantToken)
    assert token.value == pytest.approx(value)


def assert_parenthesis(token, is_open):
    assert isinstance(token, ParenthesisToken)
    assert token.is_open == is_open


def assert_operator(token, arity, precedence, op_type):
    assert isinstance(token, OperatorToken)
    assert token.arity == arity
    assert token.precedence == precedence
    assert token.op_type == op_type


@pytest.mark.parametrize("text", ["1*(2+3)", "    1* ( 2  +        3  )    "])
def test_simple_expression(text, registry):
    tokens = tokenize(text, registry)

    assert len(tokens) == 7
    assert_constant(tokens[0], 1)
    assert_operator(tokens[1], 2, 2, OpType.MULTIPLICATION)
    assert_parenthesis(tokens[2], True)
    assert_constant(tokens[3], 2)
    assert_operator(tokens[4], 2, 1, OpType.ADDITION)
    assert_constant(tokens[5], 3)
    assert_parenthesis(tokens[6], False)


def test_multiple_arithmetic_negation_operators(registry):
    tokens = tokenize("-1 * -2 / --(4 --5)", registry)

    assert len(tokens) == 14
    assert_operator(tokens[0], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_constant(tokens[1], 1)
    assert_operator(tokens[2], 2, 2, OpType.MULTIPLICATION)
    assert_operator(tokens[3], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_constant(tokens[4], 2)
    assert_operator(tokens[5], 2, 2, OpType.DIVISION)
    assert_operator(tokens[6], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_operator(tokens[7], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_parenthesis(tokens[8], True)
    assert_constant(tokens[9], 4)
    assert_operator(tokens[10], 2, 1, OpType.SUBTRACTION)
    assert_operator(tokens[11], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_constant(tokens[12], 5)
    assert_parenthesis(tokens[13], False)


def test_unary_plus_chain(registry):
    tokens = tokenize("-+-5", registry)

    assert_operator(tokens[0], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_operator(tokens[1], 1, 1000, OpType.UNARY_ADDITION)
    assert_operator(tokens[2], 1, 1000, OpType.ARITHMETIC_NEGATION)
    assert_constant(tokens[3], 5)


def test_sign_after_close_parenthesis_and_variable_is_binary(registry):
    tokens = tokenize("(1)-2 + x-3", registry)

    assert_operator(tokens[3], 2, 1, OpType.SUBTRACTION)
    assert_operator(tokens[5], 2, 1, OpType.ADDITION)
    assert_operator(tokens[7], 2, 1, OpType.SUBTRACTION)


def test_functions_and_power(registry):
    tokens = tokenize("sin(x)^2", registry)

    assert isinstance(tokens[0], FunctionToken)
    assert tokens[0].op_type == OpType.SINE
    assert_parenthesis(tokens[1], True)
    assert isinstance(tokens[2], VariableToken)
    assert_parenthesis(tokens[3], False)
    assert_operator(tokens[4], 2, 3, OpType.POWER)
    assert tokens[4].right_associative
    assert_constant(tokens[5], 2)


@pytest.mark.parametrize("name, op_type", [
    ("sin", OpType.SINE),
    ("cos", OpType.COSINE),
    ("tan", OpType.TANGENT),
    ("cot", OpType.COTANGENT),
    ("ln", OpType.NATURAL_LOG),
    ("log", OpType.NATURAL_LOG),
])
def test_function_names(name, op_type, registry):
    token = tokenize(f"{name}(1)", registry)[0]
    assert isinstance(token, FunctionToken)
    assert token.op_type == op_type


@pytest.mark.parametrize("text, value", [
    ("12", 12.0),
    ("1.5", 1.5),
    (".5", 0.5),
    ("2e-3", 0.002),
    ("3.E2", 300.0),
])
def test_number_formats(text, value, registry):
    tokens = tokenize(text, registry)
    assert len(tokens) == 1
    assert_constant(tokens[0], value)


def test_variables_are_interned(registry):
    tokens = tokenize("x + x * y'", registry)

    assert tokens[0] is tokens[2]
    assert tokens[0] is registry.get("x")
    assert tokens[4].name == "y'"
    assert "y'" in registry


def test_invalid_symbol():
    with pytest.raises(TokenizationError) as excinfo:
        tokenize("2 & 3")

    assert excinfo.value.symbol == "&"
    assert excinfo.value.position == 2
    assert isinstance(excinfo.value, MalformedExpression)


def test_empty_input(registry):
    assert tokenize("   ", registry) == []
