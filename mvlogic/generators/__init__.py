from mvlogic.generators.generator import Generator
from mvlogic.generators.randomtree import RandomTreeGenerator, generate

from mvlogic.generators.policies import OperatorSamplingPolicy, UniformPolicy, WeightedPolicy
