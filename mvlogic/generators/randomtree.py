from typing import List, Sequence
import logging
import numbers
import random

from mvlogic.errors import ConfigurationError, EmptyOperatorSetError, NullaryOperatorError
from mvlogic.generators.generator import Generator
from mvlogic.generators.policies import OperatorSamplingPolicy, UniformPolicy
from mvlogic.syntax import Alphabet, EnumerableAlphabet, Operator, SyntaxTree

logger = logging.getLogger(__name__)

def generate(height: int, alphabet: Alphabet, operators: Sequence[Operator], rng: int | random.Random | None = None,
             policy: OperatorSamplingPolicy = None, allow_nullary: bool = False) -> SyntaxTree:
    """
        Generates a random syntax tree whose leaves are all at depth `height`.
        - height: target height of the tree (number of edges from the root to each leaf)
        - alphabet: where the leaves are drawn from, must be enumerable
        - operators: the operators that internal nodes are drawn from
        - rng: a seed (same seed => same tree), an existing random.Random (used as is, its state advances)
            or None (a fresh generator seeded from system entropy)
        - policy: how operators are drawn, uniformly by default
        - allow_nullary: whether operators of arity 0 may be drawn for internal nodes,
            in which case that branch ends early with a childless internal node

        All inputs are validated before the first random draw, nothing is consumed from rng on failure.
    """
    if not isinstance(alphabet, EnumerableAlphabet) or not alphabet.is_enumerable:
        raise ConfigurationError(f"Alphabet of type {type(alphabet).__name__} cannot be enumerated: "
                                 f"provide a way to enumerate propositions for this alphabet type (implement EnumerableAlphabet)")

    if isinstance(height, bool) or not isinstance(height, int):
        raise TypeError(f"Height must be an int but got {type(height).__name__}")
    if height < 0:
        raise ValueError(f"Height must be non-negative but got {height}")

    if len(alphabet) == 0:
        raise ConfigurationError("Cannot draw propositions from an empty alphabet")

    operators = list(operators)
    for op in operators:
        if not isinstance(op, Operator):
            raise TypeError(f"Expected operators but got {type(op).__name__}")
    if height > 0:
        if len(operators) == 0:
            raise EmptyOperatorSetError(f"No operators available to build a tree of height {height}")
        nullary = [op.symbol for op in operators if op.is_nullary]
        if len(nullary) > 0 and not allow_nullary:
            raise NullaryOperatorError(f"Operators {nullary} have arity 0 and cannot be placed at internal nodes (pass allow_nullary=True to allow)")

    rng = _make_rng(rng)
    policy = UniformPolicy() if policy is None else policy

    logger.debug("Generating tree of height %d over %d propositions and %d operators", height, len(alphabet), len(operators))
    tree = _generate(height, alphabet, operators, rng, policy)
    logger.debug("Generated tree of size %d", tree.size)
    return tree

def _generate(height: int, alphabet: EnumerableAlphabet, operators: List[Operator], rng: random.Random, policy: OperatorSamplingPolicy) -> SyntaxTree:
    """ 
        Builds the tree depth-first with an explicit stack, `height` is the height still remaining below the root.
        Draws happen in the order of a recursive expansion: an operator first, then its children from left to right.
    """
    if height == 0:
        return SyntaxTree(alphabet.sample(rng))

    # each frame: [operator, remaining height of its children, children built so far]
    stack = [[policy.sample(operators, height, rng), height - 1, []]]
    while True:
        op, child_height, children = stack[-1]
        if len(children) < op.arity:
            if child_height == 0:
                children.append(SyntaxTree(alphabet.sample(rng)))
            else:
                stack.append([policy.sample(operators, child_height, rng), child_height - 1, []])
            continue

        stack.pop(-1)
        node = SyntaxTree(op, children)
        if len(stack) == 0:
            return node
        stack[-1][2].append(node)

def _make_rng(rng: int | random.Random | None) -> random.Random:
    if rng is None:
        logger.debug("No random source given, seeding a new generator from system entropy")
        return random.Random()
    if isinstance(rng, random.Random):
        return rng
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        return random.Random(int(rng))
    raise TypeError(f"Expected a seed (int), a random.Random or None but got {type(rng).__name__}")

class RandomTreeGenerator(Generator):
    def __init__(self, alphabet: Alphabet, operators: Sequence[Operator], policy: OperatorSamplingPolicy = None, allow_nullary: bool = False) -> None:
        """
            Generates random syntax trees of a requested height:
            - alphabet: the propositions the leaves are drawn from (must be enumerable)
            - operators: the operators the internal nodes are drawn from
            - policy: specifies how an operator is sampled whenever a node is expanded, uniform by default
            - allow_nullary: whether operators of arity 0 may end a branch early
        """
        self.alphabet = alphabet
        self.operators = list(operators)
        self.policy = UniformPolicy() if policy is None else policy
        self.allow_nullary = allow_nullary

    def generate(self, height: int, rng: int | random.Random | None = None) -> SyntaxTree:
        return generate(height, self.alphabet, self.operators, rng=rng, policy=self.policy, allow_nullary=self.allow_nullary)
