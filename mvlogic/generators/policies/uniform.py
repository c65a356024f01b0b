from typing import Dict, List
import random

from mvlogic.generators.policies.operatorsamplingpolicy import OperatorSamplingPolicy
from mvlogic.syntax import Operator

class UniformPolicy(OperatorSamplingPolicy):
    def get_probs(self, operators: List[Operator], height: int) -> Dict[Operator, float]:
        return {op: 1.0 / len(operators) for op in operators}

    def sample(self, operators: List[Operator], height: int, rng: random.Random) -> Operator:
        # NOTE: a single rng.choice per node, duplicates in operators therefore count twice
        return rng.choice(operators)
