import random

from mvlogic.syntax import SyntaxTree

class Generator:
    def generate(self, height: int, rng: int | random.Random | None = None) -> SyntaxTree:
        """ 
            Generates a syntax tree of the requested height
            - height: target height of the tree
            - rng: a seed, an existing random generator or None (fresh generator seeded from system entropy)
        """
        ...
