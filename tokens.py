"""
Token Model for Arithmetic Expressions

A token is one of three closed variants:
1. Number   - the exact digit/point substring that produced it ("3.14")
2. Operator - one of the eight operator types, with precedence,
              associativity and arity
3. Bracket  - a left or right parenthesis

Every variant renders back to its canonical symbol with str(token).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from config import PRECEDENCE_NAME
from errors import NotANumberError


# =============================================================================
# OPERATOR ATTRIBUTES
# =============================================================================

class OperatorType(Enum):
    ADDITION = "addition"              # binary +
    SUBTRACTION = "subtraction"        # binary -
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    POWER = "power"
    PLUS = "plus"                      # unary + sign
    MINUS = "minus"                    # unary - sign
    FACTORIAL = "factorial"            # postfix !


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Arity(Enum):
    UNARY = 1
    BINARY = 2


OPERATOR_SYMBOLS = {
    OperatorType.ADDITION: '+',
    OperatorType.SUBTRACTION: '-',
    OperatorType.MULTIPLICATION: '*',
    OperatorType.DIVISION: '/',
    OperatorType.POWER: '^',
    OperatorType.PLUS: '+',
    OperatorType.MINUS: '-',
    OperatorType.FACTORIAL: '!',
}

RIGHT_ASSOCIATIVE = {OperatorType.PLUS, OperatorType.MINUS, OperatorType.POWER}

UNARY_OPERATORS = {OperatorType.PLUS, OperatorType.MINUS, OperatorType.FACTORIAL}


# =============================================================================
# PRECEDENCE MAPS - Conventions for how tightly operators bind
# =============================================================================

PRECEDENCE_STANDARD = {
    OperatorType.ADDITION: 2,
    OperatorType.SUBTRACTION: 2,
    OperatorType.MULTIPLICATION: 3,
    OperatorType.DIVISION: 3,
    OperatorType.PLUS: 4,
    OperatorType.MINUS: 4,
    OperatorType.POWER: 5,
    OperatorType.FACTORIAL: 6,
}

PRECEDENCE_SIGN_FIRST = {
    # Signs bind tighter than power, so -2^2 groups as (-2)^2
    OperatorType.ADDITION: 2,
    OperatorType.SUBTRACTION: 2,
    OperatorType.MULTIPLICATION: 3,
    OperatorType.DIVISION: 3,
    OperatorType.POWER: 4,
    OperatorType.PLUS: 5,
    OperatorType.MINUS: 5,
    OperatorType.FACTORIAL: 6,
}

PRECEDENCE_MAPS = {
    'standard': PRECEDENCE_STANDARD,
    'sign_first': PRECEDENCE_SIGN_FIRST,
}

# Precedence used by Operator.precedence
PRECEDENCE = PRECEDENCE_MAPS[PRECEDENCE_NAME]


def get_precedence(operator: 'Operator', precedence_name: str = PRECEDENCE_NAME) -> int:
    """Look up an operator's precedence under a named convention."""
    if precedence_name not in PRECEDENCE_MAPS:
        raise ValueError(f"Unknown precedence: {precedence_name}. "
                         f"Available: {list(PRECEDENCE_MAPS.keys())}")
    return PRECEDENCE_MAPS[precedence_name][operator.op_type]


def list_precedence_maps() -> Dict[str, Dict[str, int]]:
    """Return every precedence convention with operator types as plain strings."""
    return {
        name: {op_type.value: level for op_type, level in precedence_map.items()}
        for name, precedence_map in PRECEDENCE_MAPS.items()
    }


# =============================================================================
# TOKENS
# =============================================================================

@dataclass(frozen=True)
class Number:
    """
    A numeric literal, kept as the substring that produced it.

    The tokenizer only ever builds symbols of digits with at most one
    decimal point; the value is parsed on demand.
    """
    symbol: str

    def value(self) -> float:
        """
        Parse the symbol as a float.

        Magnitudes beyond float range come back as +inf/-inf.

        Raises:
            NotANumberError: if the symbol is not a valid decimal number
        """
        # float() also tolerates padding whitespace and digit underscores
        if '_' in self.symbol or any(char.isspace() for char in self.symbol):
            raise NotANumberError(self.symbol)
        try:
            return float(self.symbol)
        except ValueError:
            raise NotANumberError(self.symbol) from None

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return f"Number({self.symbol!r})"


@dataclass(frozen=True)
class Operator:
    """An arithmetic operator; all attributes derive from its type."""
    op_type: OperatorType

    @property
    def symbol(self) -> str:
        return OPERATOR_SYMBOLS[self.op_type]

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self.op_type]

    @property
    def associativity(self) -> Associativity:
        if self.op_type in RIGHT_ASSOCIATIVE:
            return Associativity.RIGHT
        return Associativity.LEFT

    @property
    def arity(self) -> Arity:
        if self.op_type in UNARY_OPERATORS:
            return Arity.UNARY
        return Arity.BINARY

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return f"Operator({self.op_type.name})"


class BracketKind(Enum):
    LEFT = "("
    RIGHT = ")"


@dataclass(frozen=True)
class Bracket:
    kind: BracketKind

    @property
    def symbol(self) -> str:
        return self.kind.value

    @property
    def is_left(self) -> bool:
        return self.kind is BracketKind.LEFT

    @property
    def is_right(self) -> bool:
        return self.kind is BracketKind.RIGHT

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return "LEFT_PAREN" if self.is_left else "RIGHT_PAREN"


LEFT_PAREN = Bracket(BracketKind.LEFT)
RIGHT_PAREN = Bracket(BracketKind.RIGHT)

Token = Union[Number, Operator, Bracket]


# Operator instances
ADDITION = Operator(OperatorType.ADDITION)
SUBTRACTION = Operator(OperatorType.SUBTRACTION)
MULTIPLICATION = Operator(OperatorType.MULTIPLICATION)
DIVISION = Operator(OperatorType.DIVISION)
POWER = Operator(OperatorType.POWER)
PLUS = Operator(OperatorType.PLUS)
MINUS = Operator(OperatorType.MINUS)
FACTORIAL = Operator(OperatorType.FACTORIAL)
