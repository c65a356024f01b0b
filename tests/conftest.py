"""Shared fixtures for the mvlogic tests."""

import pytest

from mvlogic.syntax import ExplicitAlphabet, NEGATION, CONJUNCTION, DISJUNCTION, IMPLICATION


@pytest.fixture
def numeric_alphabet():
    return ExplicitAlphabet([1, 2])


@pytest.fixture
def letter_alphabet():
    return ExplicitAlphabet(["a", "b"])


@pytest.fixture
def base_operators():
    return [NEGATION, CONJUNCTION]


@pytest.fixture
def classical_operators():
    return [NEGATION, CONJUNCTION, DISJUNCTION, IMPLICATION]
