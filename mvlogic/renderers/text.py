from typing import Dict, List, Set

from mvlogic.renderers.renderer import Renderer, PerTypeRenderer
from mvlogic.syntax import SyntaxTree, Proposition, Operator, TraversalOrder

class ToStrRenderer(Renderer):
    def render(self, obj: object) -> str:
        return str(obj)

class ListRenderer(Renderer):
    def render(self, l: List) -> str:
        return f"[{', '.join(R(e) for e in l)}]"

class SetRenderer(Renderer):
    def render(self, l: Set) -> str:
        return f"{{{', '.join(R(e) for e in l)}}}"

class DictRenderer(Renderer):
    def render(self, dct: Dict) -> str:
        return f"{{{', '.join([R(k) + ': ' + R(v) for k,v in dct.items()])}}}"

class SyntaxTreeRenderer(Renderer):
    def render(self, tree: SyntaxTree) -> str:
        """ 
            Renders the formula in infix notation, e.g. (¬p ∧ (q → r)).
            Operators with more than two operands are rendered as op(a, b, c).
        """
        # post-order: the operands of a node are the last rendered strings on the stack
        rendered = []
        for node in tree.traverse(TraversalOrder.POST):
            if node.is_leaf:
                rendered.append(R(node.token))
                continue

            op = node.token
            operands = rendered[len(rendered) - op.arity:]
            del rendered[len(rendered) - op.arity:]
            if op.arity == 0:
                rendered.append(op.symbol)
            elif op.arity == 1:
                rendered.append(f"{op.symbol}{operands[0]}")
            elif op.arity == 2:
                rendered.append(f"({operands[0]} {op.symbol} {operands[1]})")
            else:
                rendered.append(f"{op.symbol}({', '.join(operands)})")
        return rendered[0]

class PropositionRenderer(Renderer):
    def render(self, proposition: Proposition) -> str:
        return str(proposition.atom)

class OperatorRenderer(Renderer):
    def render(self, op: Operator) -> str:
        return op.symbol

R = PerTypeRenderer(
        renderers={
            SyntaxTree: SyntaxTreeRenderer(),
            Proposition: PropositionRenderer(),
            Operator: OperatorRenderer(),
            list: ListRenderer(),
            set: SetRenderer(),
            dict: DictRenderer(),
        },
        default_renderer=ToStrRenderer()
)
