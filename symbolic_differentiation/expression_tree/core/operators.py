import numpy as np
import numba
from enum import IntEnum
from typing import Dict, Tuple

class TokenType(IntEnum):
  CONSTANT_VALUE = 0
  VARIABLE = 1
  PARENTHESIS = 2
  OPERATOR = 3
  FUNCTION = 4

class OpType(IntEnum):
  # Binary operators
  ADDITION = 0
  SUBTRACTION = 1
  MULTIPLICATION = 2
  DIVISION = 3
  POWER = 4
  # Unary operators
  ARITHMETIC_NEGATION = 5
  UNARY_ADDITION = 6
  # Functions
  SINE = 7
  COSINE = 8
  TANGENT = 9
  COTANGENT = 10
  NATURAL_LOG = 11

# Prefix operators and functions bind tighter than anything else
MAX_PRECEDENCE = 1000

# op_type -> (symbol, arity, precedence, left associative)
OPERATOR_TABLE: Dict[OpType, Tuple[str, int, int, bool]] = {
  OpType.ADDITION: ('+', 2, 1, True),
  OpType.SUBTRACTION: ('-', 2, 1, True),
  OpType.MULTIPLICATION: ('*', 2, 2, True),
  OpType.DIVISION: ('/', 2, 2, True),
  OpType.POWER: ('^', 2, 3, False),
  OpType.ARITHMETIC_NEGATION: ('-', 1, MAX_PRECEDENCE, False),
  OpType.UNARY_ADDITION: ('+', 1, MAX_PRECEDENCE, False),
}

FUNCTION_TABLE: Dict[OpType, str] = {
  OpType.SINE: 'sin',
  OpType.COSINE: 'cos',
  OpType.TANGENT: 'tan',
  OpType.COTANGENT: 'cot',
  OpType.NATURAL_LOG: 'ln',
}

# Lexer-facing mappings
BINARY_OP_MAP = {'+': OpType.ADDITION, '-': OpType.SUBTRACTION, '*': OpType.MULTIPLICATION,
                 '/': OpType.DIVISION, '^': OpType.POWER}
UNARY_OP_MAP = {'-': OpType.ARITHMETIC_NEGATION, '+': OpType.UNARY_ADDITION}
FUNCTION_MAP = {
    'sin': OpType.SINE, 'cos': OpType.COSINE, 'tan': OpType.TANGENT,
    'cot': OpType.COTANGENT, 'ln': OpType.NATURAL_LOG, 'log': OpType.NATURAL_LOG
}

BINARY_OPERATOR_TYPES = frozenset(op for op, entry in OPERATOR_TABLE.items() if entry[1] == 2)
UNARY_OPERATOR_TYPES = frozenset(op for op, entry in OPERATOR_TABLE.items() if entry[1] == 1)
FUNCTION_TYPES = frozenset(FUNCTION_TABLE)

# error_model='numpy' keeps IEEE semantics: x / 0 gives inf or nan instead of raising

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op(left_val, right_val, op_type):
  if op_type == OpType.ADDITION:
    return left_val + right_val
  elif op_type == OpType.SUBTRACTION:
    return left_val - right_val
  elif op_type == OpType.MULTIPLICATION:
    return left_val * right_val
  elif op_type == OpType.DIVISION:
    return left_val / right_val
  elif op_type == OpType.POWER:
    return np.power(left_val, right_val)
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op(operand_val, op_type):
  if op_type == OpType.ARITHMETIC_NEGATION:
    return -operand_val
  elif op_type == OpType.UNARY_ADDITION:
    return operand_val
  elif op_type == OpType.SINE:
    return np.sin(operand_val)
  elif op_type == OpType.COSINE:
    return np.cos(operand_val)
  elif op_type == OpType.TANGENT:
    return np.tan(operand_val)
  elif op_type == OpType.COTANGENT:
    return 1.0 / np.tan(operand_val)
  elif op_type == OpType.NATURAL_LOG:
    return np.log(operand_val)
  return np.nan
