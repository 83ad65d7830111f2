"""Tests for the operator registry and character classes."""

import pytest

from registry import (
    OperatorRegistry, DEFAULT_REGISTRY, get_operator, list_operators,
    is_unary, is_binary, is_left_assoc, is_right_assoc,
    is_digit, is_decimal_point, is_left_bracket, is_right_bracket, is_whitespace
)
from tokens import (
    Operator, OperatorType, ADDITION, SUBTRACTION, MULTIPLICATION, DIVISION,
    POWER, PLUS, MINUS, FACTORIAL
)


@pytest.mark.parametrize("char, filters, expected", [
    ('+', (is_unary, is_right_assoc), PLUS),
    ('+', (is_binary,), ADDITION),
    ('-', (is_unary, is_right_assoc), MINUS),
    ('-', (is_binary,), SUBTRACTION),
    ('*', (is_binary,), MULTIPLICATION),
    ('/', (is_binary,), DIVISION),
    ('^', (is_binary,), POWER),
    ('!', (is_unary, is_left_assoc), FACTORIAL),
])
def test_default_lookup(char, filters, expected):
    assert DEFAULT_REGISTRY.lookup(char, *filters) == expected


def test_lookup_without_filters_returns_first_registered():
    assert DEFAULT_REGISTRY.lookup('-') == MINUS
    assert DEFAULT_REGISTRY.lookup('*') == MULTIPLICATION


def test_lookup_misses():
    assert DEFAULT_REGISTRY.lookup('#') is None
    assert DEFAULT_REGISTRY.lookup('*', is_unary) is None
    assert DEFAULT_REGISTRY.lookup('!', is_binary) is None
    assert DEFAULT_REGISTRY.lookup('^', is_unary, is_left_assoc) is None


def test_none_filters_are_ignored():
    assert DEFAULT_REGISTRY.lookup('+', None, is_binary) == ADDITION


def test_register_preserves_insertion_order():
    reg = OperatorRegistry()
    reg.register('~', FACTORIAL)
    reg.register('~', MINUS)
    assert reg.variants('~') == [FACTORIAL, MINUS]
    assert reg.lookup('~') == FACTORIAL
    assert reg.lookup('~', is_right_assoc) == MINUS
    assert '~' in reg


def test_register_rejects_multi_character_symbols():
    with pytest.raises(ValueError):
        OperatorRegistry().register('**', POWER)


def test_default_registry_is_read_only(custom_registry):
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.register('%', DIVISION)

    custom_registry.register('%', DIVISION)
    assert custom_registry.lookup('%') == DIVISION
    assert DEFAULT_REGISTRY.lookup('%') is None


def test_get_operator():
    assert get_operator('^') == POWER
    with pytest.raises(KeyError):
        get_operator('#')


def test_list_operators():
    assert list_operators() == {
        '+': ['PLUS', 'ADDITION'],
        '-': ['MINUS', 'SUBTRACTION'],
        '*': ['MULTIPLICATION'],
        '/': ['DIVISION'],
        '^': ['POWER'],
        '!': ['FACTORIAL'],
    }


def test_predicates():
    assert is_unary(Operator(OperatorType.FACTORIAL))
    assert is_binary(ADDITION)
    assert is_left_assoc(DIVISION)
    assert is_right_assoc(POWER)


def test_character_classes():
    assert is_digit('7')
    assert is_digit('٣')  # ARABIC-INDIC DIGIT THREE
    assert not is_digit('.')
    assert is_decimal_point('.')
    assert not is_decimal_point(',')
    assert is_left_bracket('(') and not is_left_bracket('[')
    assert is_right_bracket(')') and not is_right_bracket(']')
    assert is_whitespace(' ') and is_whitespace('\t') and is_whitespace('\n')
    assert not is_whitespace('_')
