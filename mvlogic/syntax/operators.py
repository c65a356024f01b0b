from pydantic import BaseModel, Field

class Operator(BaseModel):
    """ A logical connective combining a fixed number (arity) of subformulas """
    symbol: str
    arity: int = Field(ge=0)

    def __init__(self, symbol: str, arity: int):
        super().__init__(symbol=symbol, arity=arity)

    @property
    def is_nullary(self) -> bool:
        return self.arity == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operator): return False
        return self.symbol == other.symbol and self.arity == other.arity

    def __hash__(self) -> int:
        return hash(("operator", self.symbol, self.arity))

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self):
        return f"Operator({self.symbol}/{self.arity})"

NEGATION = Operator("¬", 1)
CONJUNCTION = Operator("∧", 2)
DISJUNCTION = Operator("∨", 2)
IMPLICATION = Operator("→", 2)

# truth constants, i.e. operators without operands
TOP = Operator("⊤", 0)
BOTTOM = Operator("⊥", 0)
