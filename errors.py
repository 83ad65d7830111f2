"""
Error Types for Expression Tokenization

Every error raised while lexing an expression is an ExpressionSyntaxError.
Each one carries the offending substring and its 0-based character position
so that a caller can point at the exact character(s) at fault.
"""


ERR_UNKNOWN_SYMBOL = "unknown symbol '{token}' at index {position}"
ERR_MULTIPLE_DECIMAL = "cannot allow multiple decimal points in a single number"
ERR_LONE_DECIMAL = "something must be on either side of a '.' at index {position}"
ERR_UNMATCHED_RIGHT_PAREN = "the ')' at index {position} is missing a matching '('"
ERR_UNMATCHED_LEFT_PAREN = "the '(' at index {position} is missing a matching ')'"
ERR_EMPTY_PAREN = "cannot allow an empty parentheses on index {position}"
ERR_NO_RIGHT_OPERAND = "operator '{token}' at index {position} expects a right operand"
ERR_NO_LEFT_OPERAND = "operator '{token}' at index {position} requires a left operand"
ERR_NOT_A_NUMBER = "'{symbol}' is not a number"


class ExpressionSyntaxError(ValueError):
    """
    Base class for all lexing errors.

    Attributes:
        message: Human-readable description, includes token and position
        token: The offending substring
        position: Character index of the offending substring (may be -1)
    """

    template = "{token} at index {position}"

    def __init__(self, token: str, position: int, message: str = None):
        if message is None:
            message = self.template.format(token=token, position=position)
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position

    def pointer(self, expression: str) -> str:
        """
        Render the expression with a caret under the offending character.

        Example:
            >>> err = UnknownSymbolError('#', 1)
            >>> print(err.pointer('5###'))
            5###
             ^
        """
        column = max(self.position, 0)
        return f"{expression}\n{' ' * column}^"

    def __eq__(self, other):
        if not isinstance(other, ExpressionSyntaxError):
            return NotImplemented
        return (type(self) is type(other) and
                self.message == other.message and
                self.token == other.token and
                self.position == other.position)

    def __hash__(self):
        return hash((type(self), self.message, self.token, self.position))

    def __repr__(self):
        return f"{type(self).__name__}({self.token!r}, {self.position})"


class UnknownSymbolError(ExpressionSyntaxError):
    """A character that is not a digit, point, bracket, operator or whitespace."""
    template = ERR_UNKNOWN_SYMBOL


class MultipleDecimalPointsError(ExpressionSyntaxError):
    template = ERR_MULTIPLE_DECIMAL

    def __init__(self, position: int):
        super().__init__('.', position)


class TrailingDecimalPointError(ExpressionSyntaxError):
    """A '.' with no digit after it."""
    template = ERR_LONE_DECIMAL

    def __init__(self, position: int):
        super().__init__('.', position)


class UnmatchedRightParenError(ExpressionSyntaxError):
    template = ERR_UNMATCHED_RIGHT_PAREN

    def __init__(self, position: int):
        super().__init__(')', position)


class UnmatchedLeftParenError(ExpressionSyntaxError):
    template = ERR_UNMATCHED_LEFT_PAREN

    def __init__(self, position: int):
        super().__init__('(', position)


class EmptyParenthesesError(ExpressionSyntaxError):
    template = ERR_EMPTY_PAREN

    def __init__(self, position: int):
        super().__init__(')', position)


class MissingRightOperandError(ExpressionSyntaxError):
    template = ERR_NO_RIGHT_OPERAND


class MissingLeftOperandError(ExpressionSyntaxError):
    template = ERR_NO_LEFT_OPERAND


class NotANumberError(ValueError):
    """Raised by Number.value() when its symbol cannot be parsed as a float."""

    def __init__(self, symbol: str):
        super().__init__(ERR_NOT_A_NUMBER.format(symbol=symbol))
        self.symbol = symbol
