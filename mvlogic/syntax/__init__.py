from mvlogic.syntax.propositions import Proposition
from mvlogic.syntax.alphabets import Alphabet, EnumerableAlphabet, ExplicitAlphabet, AlphabetOfAny
from mvlogic.syntax.operators import Operator, NEGATION, CONJUNCTION, DISJUNCTION, IMPLICATION, TOP, BOTTOM
from mvlogic.syntax.syntaxtree import SyntaxTree, TraversalOrder
