from typing import Any, Iterable, Iterator, List, Optional, Type
import logging
import random

from mvlogic.syntax.propositions import Proposition

logger = logging.getLogger(__name__)

class Alphabet:
    """
        The universe of atomic propositions that the leaves of a formula may be drawn from.
        A plain alphabet only knows membership, it cannot necessarily list its propositions
        (see EnumerableAlphabet for that capability).
    """
    @property
    def is_enumerable(self) -> bool:
        return False

    def __contains__(self, proposition: Any) -> bool:
        ...

class EnumerableAlphabet(Alphabet):
    """ An alphabet whose propositions can be listed (and therefore sampled from) """
    @property
    def is_enumerable(self) -> bool:
        return True

    def propositions(self) -> List[Proposition]:
        """ All the propositions of this alphabet in a fixed order """
        ...

    def sample(self, rng: random.Random) -> Proposition:
        """ Draws one proposition uniformly at random """
        return rng.choice(self.propositions())

    def __contains__(self, proposition: Any) -> bool:
        if not isinstance(proposition, Proposition):
            proposition = Proposition(proposition)
        return proposition in self.propositions()

    def __iter__(self) -> Iterator[Proposition]:
        return iter(self.propositions())

    def __len__(self) -> int:
        return len(self.propositions())

class ExplicitAlphabet(EnumerableAlphabet):
    def __init__(self, atoms: Iterable[Any]) -> None:
        """
            Finite alphabet listing its propositions explicitly.
            - atoms: propositions or raw atoms (which will be wrapped as propositions).
                Duplicates are dropped, the first occurrence determines the order.
        """
        self._propositions: List[Proposition] = []
        seen = set()
        for atom in atoms:
            proposition = atom if isinstance(atom, Proposition) else Proposition(atom)
            if proposition in seen:
                logger.warning("Dropping duplicate proposition %s from alphabet", proposition)
                continue
            seen.add(proposition)
            self._propositions.append(proposition)
        self._proposition_set = seen

    def propositions(self) -> List[Proposition]:
        return list(self._propositions)

    def __contains__(self, proposition: Any) -> bool:
        if not isinstance(proposition, Proposition):
            proposition = Proposition(proposition)
        return proposition in self._proposition_set

    def __len__(self) -> int:
        return len(self._propositions)

    def __repr__(self):
        from mvlogic.renderers import TEXT_RENDERER
        return f"ExplicitAlphabet({TEXT_RENDERER(self._propositions)})"

class AlphabetOfAny(Alphabet):
    def __init__(self, atom_type: Optional[Type] = None) -> None:
        """
            The (infinite) alphabet of all propositions whose atom is of a given type.
            - atom_type: restricts the atoms, None means that any atom is accepted
        """
        self.atom_type = atom_type

    def __contains__(self, proposition: Any) -> bool:
        atom = proposition.atom if isinstance(proposition, Proposition) else proposition
        return self.atom_type is None or isinstance(atom, self.atom_type)

    def __repr__(self):
        type_name = "Any" if self.atom_type is None else self.atom_type.__name__
        return f"AlphabetOfAny({type_name})"
