"""Shared pytest fixtures."""

import pytest

from registry import DEFAULT_REGISTRY
from tokenizer import Tokenizer


@pytest.fixture
def tokenizer():
    """A fresh tokenizer over the default registry."""
    return Tokenizer()


@pytest.fixture
def custom_registry():
    """A writable copy of the default registry."""
    return DEFAULT_REGISTRY.copy()
