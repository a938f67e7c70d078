"""
Error types raised by the expression pipeline.

Every error aborts only the current top-level call (tokenize, build,
differentiate or evaluate). No partial tree is ever returned.
"""


class ExpressionError(Exception):
    """Base class for all expression pipeline failures"""


class MalformedExpression(ExpressionError, ValueError):
    """The token sequence cannot be reduced to exactly one tree"""


class TokenizationError(MalformedExpression):
    """The input text contains a character the scanner does not accept"""

    def __init__(self, symbol: str, position: int):
        super().__init__(f"Invalid symbol found: '{symbol}' at position {position}")
        self.symbol = symbol
        self.position = position


class UnsupportedConstruct(ExpressionError, NotImplementedError):
    """The tree contains a token, operator or arity with no derivative rule"""


class EvaluationError(ExpressionError, ArithmeticError):
    """The tree cannot be folded to a number (it still contains a variable)"""
