"""
Tokenizer for arithmetic expressions
Supports: numbers with an optional decimal point, the operators + - * / ^ !,
unary signs, parentheses and implicit multiplication ("2(3)" -> 2 * (3))
"""

import logging
from enum import Enum, auto
from typing import List, Optional

from brackets import BracketDepthLog
from errors import (
    UnknownSymbolError, MultipleDecimalPointsError, TrailingDecimalPointError,
    UnmatchedRightParenError, UnmatchedLeftParenError, EmptyParenthesesError,
    MissingRightOperandError, MissingLeftOperandError, ExpressionSyntaxError
)
from registry import (
    OperatorRegistry, DEFAULT_REGISTRY,
    is_unary, is_binary, is_left_assoc, is_right_assoc,
    is_digit, is_decimal_point, is_left_bracket, is_right_bracket, is_whitespace
)
from tokens import Token, Number, Operator, Bracket, LEFT_PAREN, RIGHT_PAREN, MULTIPLICATION

logger = logging.getLogger(__name__)


class TokenizerState(Enum):
    """Kind of lexeme currently held in the accumulator."""
    EMPTY = auto()
    INTEGER = auto()
    DECIMAL = auto()
    LONE_DECIMAL_POINT = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    BINARY_OP = auto()
    LEFT_UNARY_OP = auto()
    RIGHT_UNARY_OP = auto()


# Lexemes that close an operand; a following number starts a new operand
CLOSES_OPERAND = {TokenizerState.RIGHT_PAREN, TokenizerState.RIGHT_UNARY_OP}

# Lexemes after which '(' implies multiplication
PRECEDES_IMPLICIT_GROUP = {
    TokenizerState.INTEGER, TokenizerState.DECIMAL,
    TokenizerState.RIGHT_PAREN, TokenizerState.RIGHT_UNARY_OP,
}

# Lexemes after which + or - is a sign rather than a binary operator
SIGN_POSITIONS = {
    TokenizerState.EMPTY, TokenizerState.LEFT_PAREN,
    TokenizerState.BINARY_OP, TokenizerState.LEFT_UNARY_OP,
}

# Lexemes that leave no left operand for a binary or postfix operator
NO_LEFT_OPERAND = {
    TokenizerState.EMPTY, TokenizerState.LEFT_PAREN,
    TokenizerState.LEFT_UNARY_OP, TokenizerState.BINARY_OP,
}

PENDING_OPERATOR = {TokenizerState.LEFT_UNARY_OP, TokenizerState.BINARY_OP}


class Tokenizer:
    """
    Character-level state machine turning an expression into tokens.

    One lexeme is built at a time. When a character cannot extend it, the
    lexeme is committed as a token and a new one starts. All per-call state
    is reset at the start of tokenize(), so an instance can be reused
    sequentially but must not be shared between threads.
    """

    def __init__(self, registry: OperatorRegistry = None):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.depth_log = BracketDepthLog()
        self.reset()

    def reset(self):
        self.tokens: List[Token] = []
        self.implicit_indices: List[int] = []  # indices of synthesized '*' tokens
        self.state = TokenizerState.EMPTY
        self.symbol = ""
        self.position = 0
        self.depth_log.clear()

    def tokenize(self, expression: str) -> List[Token]:
        """
        Tokenize an arithmetic expression.

        Args:
            expression: String like "2+3*5" or "(10 +- 7.5) / ((-5)7)"

        Returns:
            List of tokens, e.g. [Number('2'), Operator(ADDITION), Number('3')]

        Raises:
            ExpressionSyntaxError: describing the first violation found
        """
        self.reset()
        logger.debug("Tokenizing %r", expression)

        try:
            for char in expression:
                self._dispatch(char)
                self.position += 1
            self._validate_final_state()
        except ExpressionSyntaxError as e:
            logger.debug("Rejected %r: %s", expression, e)
            self.tokens = []
            self.implicit_indices = []
            raise

        self._commit()
        logger.debug("Produced %d tokens (%d implicit '*')",
                     len(self.tokens), len(self.implicit_indices))
        return list(self.tokens)

    def _dispatch(self, char: str):
        if is_digit(char):
            self._handle_digit(char)
        elif is_decimal_point(char):
            self._handle_decimal_point(char)
        elif is_left_bracket(char):
            self._handle_left_paren(char)
        elif is_right_bracket(char):
            self._handle_right_paren(char)
        elif self.registry.is_operator(char):
            self._handle_operator(char)
        elif is_whitespace(char):
            pass
        else:
            raise UnknownSymbolError(char, self.position)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _handle_digit(self, char: str):
        # "." => ".5"
        if self.state == TokenizerState.LONE_DECIMAL_POINT:
            self.symbol += char
            self.state = TokenizerState.DECIMAL
            return
        # "1" => "12", "1.2" => "1.23"
        if self.state in (TokenizerState.INTEGER, TokenizerState.DECIMAL):
            self.symbol += char
            return

        committed = self._commit()
        # "(5)3" => "(5)*3", "5!3" => "5!*3"
        if committed in CLOSES_OPERAND:
            self._insert_implicit_multiplication()
        self._start(char, TokenizerState.INTEGER)

    def _handle_decimal_point(self, char: str):
        if self.state in (TokenizerState.DECIMAL, TokenizerState.LONE_DECIMAL_POINT):
            raise MultipleDecimalPointsError(self.position)

        # "5" => "5."
        if self.state == TokenizerState.INTEGER:
            self.symbol += char
            self.state = TokenizerState.DECIMAL
            return

        committed = self._commit()
        # "(5)." => "(5)*.", "5!." => "5!*."
        if committed in CLOSES_OPERAND:
            self._insert_implicit_multiplication()
        self._start(char, TokenizerState.LONE_DECIMAL_POINT)

    def _handle_left_paren(self, char: str):
        if self.state == TokenizerState.LONE_DECIMAL_POINT:
            raise TrailingDecimalPointError(self.position - 1)

        committed = self._commit()
        # "5(" => "5*(", "(5)(" => "(5)*(", "5!(" => "5!*("
        if committed in PRECEDES_IMPLICIT_GROUP:
            self._insert_implicit_multiplication()
        self._start(char, TokenizerState.LEFT_PAREN)
        self.depth_log.open(self.position)

    def _handle_right_paren(self, char: str):
        if self.depth_log.depth() == 0:
            raise UnmatchedRightParenError(self.position)
        if self.state == TokenizerState.LONE_DECIMAL_POINT:
            raise TrailingDecimalPointError(self.position - 1)
        if self.state == TokenizerState.LEFT_PAREN:
            raise EmptyParenthesesError(self.position)
        if self.state in PENDING_OPERATOR:
            raise MissingRightOperandError(self.symbol, self.position - 1)

        self._commit()
        self._start(char, TokenizerState.RIGHT_PAREN)
        self.depth_log.close(self.position)

    def _handle_operator(self, char: str):
        if self.state == TokenizerState.LONE_DECIMAL_POINT:
            raise TrailingDecimalPointError(self.position - 1)

        # Leading sign: start of input, after '(', after an operator or another sign
        sign = self.registry.lookup(char, is_unary, is_right_assoc)
        if sign is not None and self.state in SIGN_POSITIONS:
            self._commit()
            self._start(char, TokenizerState.LEFT_UNARY_OP)
            return

        binary = self.registry.lookup(char, is_binary)
        postfix = self.registry.lookup(char, is_unary, is_left_assoc)
        if binary is None and postfix is None:
            # Only usable as a sign, and a sign is not allowed here
            raise MissingRightOperandError(char, self.position)

        if self.state in NO_LEFT_OPERAND:
            raise MissingLeftOperandError(char, self.position)

        self._commit()
        if postfix is not None:
            self._start(char, TokenizerState.RIGHT_UNARY_OP)
        else:
            self._start(char, TokenizerState.BINARY_OP)

    # -------------------------------------------------------------------------
    # Lexeme bookkeeping
    # -------------------------------------------------------------------------

    def _start(self, char: str, state: TokenizerState):
        self.symbol = char
        self.state = state

    def _commit(self) -> TokenizerState:
        """
        Turn the pending lexeme into a token and clear the accumulator.

        Returns:
            The state that was committed, used to decide implicit
            multiplication
        """
        committed = self.state
        token = self._lexeme_to_token(committed, self.symbol)
        if token is not None:
            self.tokens.append(token)
        self.symbol = ""
        self.state = TokenizerState.EMPTY
        return committed

    def _lexeme_to_token(self, state: TokenizerState, symbol: str) -> Optional[Token]:
        if state in (TokenizerState.INTEGER, TokenizerState.DECIMAL):
            return Number(symbol)
        if state == TokenizerState.LEFT_PAREN:
            return LEFT_PAREN
        if state == TokenizerState.RIGHT_PAREN:
            return RIGHT_PAREN
        if state == TokenizerState.LEFT_UNARY_OP:
            return self.registry.lookup(symbol, is_unary, is_right_assoc)
        if state == TokenizerState.BINARY_OP:
            return self.registry.lookup(symbol, is_binary)
        if state == TokenizerState.RIGHT_UNARY_OP:
            return self.registry.lookup(symbol, is_unary, is_left_assoc)
        # EMPTY, LONE_DECIMAL_POINT
        return None

    def _insert_implicit_multiplication(self):
        self.implicit_indices.append(len(self.tokens))
        self.tokens.append(MULTIPLICATION)
        logger.debug("Implicit '*' inserted before index %d", self.position)

    def _validate_final_state(self):
        if self.state == TokenizerState.LONE_DECIMAL_POINT:
            raise TrailingDecimalPointError(self.position - 1)
        if self.state in PENDING_OPERATOR:
            raise MissingRightOperandError(self.symbol, self.position - 1)
        if self.depth_log.depth() > 0:
            raise UnmatchedLeftParenError(self.depth_log.find_unmatched_open_position())


def tokenize(expression: str, registry: OperatorRegistry = None) -> List[Token]:
    """
    Tokenize an arithmetic expression into a list of tokens.

    Examples:
        >>> tokenize("2+3*5")
        [Number('2'), Operator(ADDITION), Number('3'), Operator(MULTIPLICATION), Number('5')]
        >>> tokenize("-3(4)")
        [Operator(MINUS), Number('3'), Operator(MULTIPLICATION), LEFT_PAREN, Number('4'), RIGHT_PAREN]
    """
    return Tokenizer(registry).tokenize(expression)


def render_tokens(tokens: List[Token], separator: str = "") -> str:
    """Join the canonical symbols of tokens, e.g. "(5)*3"."""
    return separator.join(str(token) for token in tokens)


def _ends_operand(token: Token) -> bool:
    if isinstance(token, Number):
        return True
    if isinstance(token, Bracket):
        return token.is_right
    return is_unary(token) and is_left_assoc(token)


def _starts_operand(token: Token) -> bool:
    if isinstance(token, Number):
        return True
    if isinstance(token, Bracket):
        return token.is_left
    return is_unary(token) and is_right_assoc(token)


def validate_tokens(tokens: List[Token]) -> bool:
    """
    Validate that tokens form a well-formed expression for an evaluator.

    Args:
        tokens: List of tokens

    Returns:
        True if valid, raises ValueError if invalid
    """
    if not tokens:
        raise ValueError("Empty token list")

    paren_depth = 0

    for i, token in enumerate(tokens):
        prev = tokens[i - 1] if i > 0 else None
        next_token = tokens[i + 1] if i < len(tokens) - 1 else None

        if isinstance(token, Bracket):
            # Check balanced parentheses
            if token.is_left:
                paren_depth += 1
            else:
                paren_depth -= 1
                if paren_depth < 0:
                    raise ValueError(f"Unmatched closing parenthesis at position {i}")
                if prev == LEFT_PAREN:
                    raise ValueError(f"Empty parentheses at position {i}")
            continue

        if not isinstance(token, Operator):
            continue

        # Operators that take a left operand need one directly before them
        if not (is_unary(token) and is_right_assoc(token)):
            if prev is None or not _ends_operand(prev):
                raise ValueError(f"Operator {token} at position {i} follows invalid token: {prev}")
        # Operators that take a right operand need one directly after them
        if not (is_unary(token) and is_left_assoc(token)):
            if next_token is None or not _starts_operand(next_token):
                raise ValueError(f"Operator {token} at position {i} precedes invalid token: {next_token}")

    if paren_depth != 0:
        raise ValueError(f"Unmatched opening parenthesis ({paren_depth} unclosed)")

    return True
