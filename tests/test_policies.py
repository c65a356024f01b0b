"""Tests for the operator sampling policies."""

import random

import pytest

from mvlogic.errors import ConfigurationError
from mvlogic.generators import RandomTreeGenerator, UniformPolicy, WeightedPolicy, generate
from mvlogic.syntax import CONJUNCTION, DISJUNCTION, IMPLICATION, NEGATION


def test_uniform_probabilities(classical_operators):
    probs = UniformPolicy().get_probs(classical_operators, height=3)
    assert probs == {op: 0.25 for op in classical_operators}


def test_uniform_policy_is_the_default(numeric_alphabet, classical_operators):
    for seed in range(5):
        assert generate(3, numeric_alphabet, classical_operators, rng=seed, policy=UniformPolicy()) == \
            generate(3, numeric_alphabet, classical_operators, rng=seed)


def test_uniform_sample_covers_all_operators(classical_operators):
    rng = random.Random(0)
    drawn = {UniformPolicy().sample(classical_operators, 1, rng) for _ in range(200)}
    assert drawn == set(classical_operators)


def test_weighted_probabilities_are_normalized():
    policy = WeightedPolicy({NEGATION: 1.0, CONJUNCTION: 3.0})
    probs = policy.get_probs([NEGATION, CONJUNCTION, DISJUNCTION], height=1)
    assert probs[NEGATION] == pytest.approx(0.25)
    assert probs[CONJUNCTION] == pytest.approx(0.75)
    assert probs[DISJUNCTION] == 0.0


def test_weighted_policy_default_weight():
    policy = WeightedPolicy({NEGATION: 2.0}, default_weight=1.0)
    probs = policy.get_probs([NEGATION, IMPLICATION], height=1)
    assert probs[NEGATION] == pytest.approx(2 / 3)
    assert probs[IMPLICATION] == pytest.approx(1 / 3)


def test_weighted_policy_never_draws_zero_weight(numeric_alphabet, classical_operators):
    generator = RandomTreeGenerator(numeric_alphabet, classical_operators, policy=WeightedPolicy({CONJUNCTION: 1.0, DISJUNCTION: 1.0}))
    for seed in range(20):
        tree = generator.generate(3, rng=seed)
        assert set(tree.operators) <= {CONJUNCTION, DISJUNCTION}
        assert tree.height == 3


def test_weighted_policy_is_reproducible(numeric_alphabet, classical_operators):
    policy = WeightedPolicy({NEGATION: 1.0, CONJUNCTION: 2.0, IMPLICATION: 0.5})
    assert generate(4, numeric_alphabet, classical_operators, rng=3, policy=policy) == \
        generate(4, numeric_alphabet, classical_operators, rng=3, policy=policy)


def test_weighted_policy_without_positive_weight(numeric_alphabet, base_operators):
    policy = WeightedPolicy({DISJUNCTION: 1.0})
    with pytest.raises(ConfigurationError):
        generate(2, numeric_alphabet, base_operators, rng=0, policy=policy)


def test_weighted_policy_rejects_negative_weights():
    with pytest.raises(ValueError):
        WeightedPolicy({NEGATION: -1.0})
    with pytest.raises(ValueError):
        WeightedPolicy({}, default_weight=-0.5)
