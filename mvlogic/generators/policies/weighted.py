from typing import Dict, List

from mvlogic.errors import ConfigurationError
from mvlogic.generators.policies.operatorsamplingpolicy import OperatorSamplingPolicy
from mvlogic.syntax import Operator

class WeightedPolicy(OperatorSamplingPolicy):
    def __init__(self, weights_by_operator: Dict[Operator, float], default_weight: float = 0.0) -> None:
        """ 
            Samples operators proportionally to a relative weight
            - weights_by_operator: relative weight of each operator (need not sum to 1)
            - default_weight: weight of operators that are not listed
        """
        for op, weight in weights_by_operator.items():
            if weight < 0:
                raise ValueError(f"Weight of {op} must not be negative (got {weight})")
        if default_weight < 0:
            raise ValueError(f"Default weight must not be negative (got {default_weight})")

        self.weights_by_operator = weights_by_operator
        self.default_weight = default_weight

    def get_probs(self, operators: List[Operator], height: int) -> Dict[Operator, float]:
        weights = {op: self.weights_by_operator.get(op, self.default_weight) for op in operators}
        total = sum(weights.values())
        if total <= 0:
            raise ConfigurationError(f"None of the operators {[op.symbol for op in operators]} has a positive weight")
        return {op: w / total for op, w in weights.items()}
