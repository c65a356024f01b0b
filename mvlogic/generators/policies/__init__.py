from mvlogic.generators.policies.operatorsamplingpolicy import OperatorSamplingPolicy
from mvlogic.generators.policies.uniform import UniformPolicy
from mvlogic.generators.policies.weighted import WeightedPolicy
