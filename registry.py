"""
Operator Registry

Maps a single character to the operator variants it may denote. Several
variants may share one character ('-' is both the unary minus sign and
binary subtraction); callers pick one with predicate filters:

    registry.lookup('-', is_unary, is_right_assoc)  -> MINUS
    registry.lookup('-', is_binary)                 -> SUBTRACTION

Filters combine with AND. The first registered variant satisfying all of
them wins, so registration order only matters when no filter narrows the
match.
"""

from typing import Callable, Dict, List, Optional

from tokens import (
    Operator, Arity, Associativity,
    PLUS, ADDITION, MINUS, SUBTRACTION, MULTIPLICATION, DIVISION, POWER, FACTORIAL
)


OperatorFilter = Callable[[Operator], bool]


# =============================================================================
# PREDICATES
# =============================================================================

def is_unary(op: Operator) -> bool:
    return op.arity is Arity.UNARY


def is_binary(op: Operator) -> bool:
    return op.arity is Arity.BINARY


def is_left_assoc(op: Operator) -> bool:
    return op.associativity is Associativity.LEFT


def is_right_assoc(op: Operator) -> bool:
    return op.associativity is Associativity.RIGHT


# =============================================================================
# CHARACTER CLASSES
# =============================================================================

DECIMAL_POINT = '.'
LEFT_BRACKETS = ['(']
RIGHT_BRACKETS = [')']


def is_digit(char: str) -> bool:
    # Unicode decimal digits, which float() also accepts
    return char.isdecimal()


def is_decimal_point(char: str) -> bool:
    return char == DECIMAL_POINT


def is_left_bracket(char: str) -> bool:
    return char in LEFT_BRACKETS


def is_right_bracket(char: str) -> bool:
    return char in RIGHT_BRACKETS


def is_whitespace(char: str) -> bool:
    return char.isspace()


# =============================================================================
# REGISTRY
# =============================================================================

class OperatorRegistry:
    """Character -> ordered list of candidate operators."""

    def __init__(self, entries: Dict[str, List[Operator]] = None):
        self._entries: Dict[str, List[Operator]] = {}
        for char, operators in (entries or {}).items():
            for op in operators:
                self.register(char, op)

    def register(self, char: str, op: Operator):
        """Append an operator variant under a character."""
        if len(char) != 1:
            raise ValueError(f"Operator symbol must be a single character, got {char!r}")
        self._entries.setdefault(char, []).append(op)

    def lookup(self, char: str, *filters: Optional[OperatorFilter]) -> Optional[Operator]:
        """
        Find the first operator registered for char that passes every filter.

        Args:
            char: Operator character
            *filters: Predicates over Operator; None entries are skipped

        Returns:
            The matching Operator, or None if the character is unregistered
            or no variant matches
        """
        active = [f for f in filters if f is not None]
        for op in self._entries.get(char, []):
            if all(f(op) for f in active):
                return op
        return None

    def is_operator(self, char: str) -> bool:
        return bool(self._entries.get(char))

    def characters(self) -> List[str]:
        return list(self._entries.keys())

    def variants(self, char: str) -> List[Operator]:
        return list(self._entries.get(char, []))

    def copy(self) -> 'OperatorRegistry':
        """Independent registry with the same entries, safe to extend."""
        return OperatorRegistry(self._entries)

    def __contains__(self, char):
        return self.is_operator(char)

    def __repr__(self):
        return f"OperatorRegistry({self._entries!r})"


class _FrozenOperatorRegistry(OperatorRegistry):
    """Registry that refuses registrations once built."""

    def __init__(self, entries: Dict[str, List[Operator]]):
        super().__init__(entries)
        self._frozen = True

    def register(self, char: str, op: Operator):
        if getattr(self, '_frozen', False):
            raise TypeError("The default operator registry is read-only; "
                            "use DEFAULT_REGISTRY.copy() to customize it")
        super().register(char, op)


DEFAULT_REGISTRY = _FrozenOperatorRegistry({
    '+': [PLUS, ADDITION],
    '-': [MINUS, SUBTRACTION],
    '*': [MULTIPLICATION],
    '/': [DIVISION],
    '^': [POWER],
    '!': [FACTORIAL],
})


def get_operator(char: str, *filters: Optional[OperatorFilter]) -> Operator:
    """Look up an operator in the default registry, raising if absent."""
    op = DEFAULT_REGISTRY.lookup(char, *filters)
    if op is None:
        raise KeyError(f"No operator for {char!r}. "
                       f"Available: {DEFAULT_REGISTRY.characters()}")
    return op


def list_operators() -> Dict[str, List[str]]:
    """Return the default registry as {char: [operator type names]}."""
    return {
        char: [op.op_type.name for op in DEFAULT_REGISTRY.variants(char)]
        for char in DEFAULT_REGISTRY.characters()
    }
