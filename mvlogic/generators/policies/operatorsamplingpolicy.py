from typing import Dict, List
import random

from mvlogic.syntax import Operator

class OperatorSamplingPolicy:
    def get_probs(self, operators: List[Operator], height: int) -> Dict[Operator, float]:
        """ 
            Returns the probabilities with which each operator should be selected for a node
            - operators: the operators to choose from
            - height: the remaining height below the node that is being expanded
        """
        ...

    def sample(self, operators: List[Operator], height: int, rng: random.Random) -> Operator:
        """ Samples an operator according to its probability, consuming draws from rng """
        ops_and_probs = self.get_probs(operators, height)
        return rng.choices(list(ops_and_probs.keys()), weights=list(ops_and_probs.values()), k=1)[0]
