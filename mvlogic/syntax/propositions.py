from typing import Any

from pydantic import BaseModel

class Proposition(BaseModel):
    """ An atomic proposition, wrapping an arbitrary hashable atom (e.g. 1, "p", ("x", 2)) """
    atom: Any

    def __init__(self, atom: Any):
        super().__init__(atom=atom)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Proposition): return False
        return self.atom == other.atom

    def __hash__(self) -> int:
        return hash(("proposition", self.atom))

    def __str__(self) -> str:
        return str(self.atom)

    def __repr__(self):
        from mvlogic.renderers import TEXT_RENDERER
        return f"Proposition({TEXT_RENDERER(self)})"
