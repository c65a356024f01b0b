from mvlogic.errors import MVLogicError, ConfigurationError, EmptyOperatorSetError, NullaryOperatorError, ArityError
from mvlogic.syntax import Proposition, Alphabet, EnumerableAlphabet, ExplicitAlphabet, AlphabetOfAny, Operator, SyntaxTree, TraversalOrder
from mvlogic.generators import generate, RandomTreeGenerator
