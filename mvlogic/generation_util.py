from typing import List, Sequence
import logging
import random

import pandas as pd

from mvlogic.generators import generate
from mvlogic.generators.policies import OperatorSamplingPolicy
from mvlogic.renderers import TEXT_RENDERER
from mvlogic.syntax import Alphabet, Operator, SyntaxTree, NEGATION, CONJUNCTION, DISJUNCTION, IMPLICATION, TOP, BOTTOM

logger = logging.getLogger(__name__)

BASE_OPERATORS = [
    NEGATION,
    CONJUNCTION,
]

CLASSICAL_OPERATORS = [
    NEGATION,
    CONJUNCTION,
    DISJUNCTION,
    IMPLICATION,
]

NULLARY_OPERATORS = [
    TOP,
    BOTTOM,
]

def generate_formulas(n: int, height: int, alphabet: Alphabet, operators: Sequence[Operator], seed: int = 14, 
                      policy: OperatorSamplingPolicy = None, allow_nullary: bool = False) -> List[SyntaxTree]:
    """ 
        Generates n formulas of the same height.
        All formulas draw from a single generator seeded with seed, so the whole batch is reproducible
        (but the i-th formula differs from generate(height, ..., rng=seed) for i > 0).
    """
    if n < 0:
        raise ValueError(f"Cannot generate a negative number of formulas ({n})")

    rng = random.Random(seed)
    trees = [generate(height, alphabet, operators, rng=rng, policy=policy, allow_nullary=allow_nullary) for _ in range(n)]
    logger.info("Generated %d formulas of height %d (seed=%d)", n, height, seed)
    return trees

def formulas_to_frame(trees: Sequence[SyntaxTree]) -> pd.DataFrame:
    """ Summarizes formulas as a table with one row per formula """
    return pd.DataFrame(
        [
            {
                "formula": TEXT_RENDERER(tree),
                "height": tree.height,
                "size": tree.size,
                "n_propositions": len(set(tree.propositions)),
                "operators": " ".join(op.symbol for op in tree.operators),
            }
            for tree in trees
        ],
        columns=["formula", "height", "size", "n_propositions", "operators"],
    )
