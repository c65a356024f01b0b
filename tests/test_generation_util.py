"""Tests for batch generation and tabular export."""

import pandas as pd
import pytest

from mvlogic.errors import ConfigurationError
from mvlogic.generation_util import (
    BASE_OPERATORS,
    CLASSICAL_OPERATORS,
    NULLARY_OPERATORS,
    formulas_to_frame,
    generate_formulas,
)
from mvlogic.generators import generate
from mvlogic.syntax import AlphabetOfAny, ExplicitAlphabet, Proposition, SyntaxTree, CONJUNCTION, NEGATION


def test_catalogs():
    assert [op.arity for op in CLASSICAL_OPERATORS] == [1, 2, 2, 2]
    assert BASE_OPERATORS == [NEGATION, CONJUNCTION]
    assert all(op.is_nullary for op in NULLARY_OPERATORS)


def test_generate_formulas_is_reproducible():
    alphabet = ExplicitAlphabet(["p", "q", "r"])
    trees = generate_formulas(10, 3, alphabet, CLASSICAL_OPERATORS, seed=7)

    assert len(trees) == 10
    assert all(t.height == 3 for t in trees)
    assert trees == generate_formulas(10, 3, alphabet, CLASSICAL_OPERATORS, seed=7)
    # the first formula of a batch is the one a single call with the same seed produces
    assert trees[0] == generate(3, alphabet, CLASSICAL_OPERATORS, rng=7)


def test_generate_formulas_propagates_errors():
    with pytest.raises(ConfigurationError):
        generate_formulas(3, 2, AlphabetOfAny(), BASE_OPERATORS)
    with pytest.raises(ValueError):
        generate_formulas(-1, 2, ExplicitAlphabet([1]), BASE_OPERATORS)


def test_generate_formulas_with_nullary_operators():
    trees = generate_formulas(5, 2, ExplicitAlphabet([1]), NULLARY_OPERATORS, allow_nullary=True)
    assert all(t.height == 0 and not t.is_leaf for t in trees)


def test_formulas_to_frame():
    trees = [
        SyntaxTree(CONJUNCTION, [SyntaxTree(Proposition("p")), SyntaxTree(Proposition("p"))]),
        SyntaxTree(NEGATION, [SyntaxTree(Proposition("q"))]),
    ]
    frame = formulas_to_frame(trees)

    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["formula", "height", "size", "n_propositions", "operators"]
    assert list(frame["formula"]) == ["(p ∧ p)", "¬q"]
    assert list(frame["height"]) == [1, 1]
    assert list(frame["size"]) == [3, 2]
    assert list(frame["n_propositions"]) == [1, 1]
    assert list(frame["operators"]) == ["∧", "¬"]


def test_formulas_to_frame_empty():
    frame = formulas_to_frame([])
    assert frame.empty
    assert list(frame.columns) == ["formula", "height", "size", "n_propositions", "operators"]
