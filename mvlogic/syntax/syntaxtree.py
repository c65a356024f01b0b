from typing import Generator, List, Sequence, Tuple
from enum import Enum

import networkx as nx

from mvlogic.errors import ArityError
from mvlogic.syntax.propositions import Proposition
from mvlogic.syntax.operators import Operator

class TraversalOrder(Enum):
    DFS = "depth-first-search"
    POST = "post-order-traversal"
    BFS = "breadth-first-search"

class SyntaxTree:
    """
        The structural (unevaluated) representation of a formula.
        Either a leaf wrapping a proposition or an internal node wrapping an operator
        with exactly as many children as the operator's arity.
    """
    def __init__(self, token: Proposition | Operator, children: Sequence['SyntaxTree'] = None) -> None:
        children = [] if children is None else list(children)
        if isinstance(token, Operator):
            if len(children) != token.arity:
                raise ArityError(f"Operator {token.symbol} has arity {token.arity} but got {len(children)} children!")
        elif isinstance(token, Proposition):
            if len(children) > 0:
                raise ArityError(f"Leaf {token} cannot have children (got {len(children)})!")
        else:
            raise TypeError(f"A syntax tree wraps a Proposition or an Operator, not {type(token).__name__}")

        for child in children:
            if not isinstance(child, SyntaxTree):
                raise TypeError(f"Children must be syntax trees but got {type(child).__name__}")

        self.token = token
        self.children: List[SyntaxTree] = children

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.token, Proposition)

    @property
    def height(self) -> int:
        """ Number of edges on the longest path from this node to a leaf """
        return max(depth for _, depth in self.traverse_with_depth(TraversalOrder.DFS))

    @property
    def size(self) -> int:
        return sum(1 for _ in self.traverse(TraversalOrder.DFS))

    @property
    def propositions(self) -> List[Proposition]:
        """ The propositions at the leaves from left to right (with repetitions) """
        return [n.token for n in self.traverse(TraversalOrder.DFS) if n.is_leaf]

    @property
    def operators(self) -> List[Operator]:
        """ The operators of all internal nodes in pre-order """
        return [n.token for n in self.traverse(TraversalOrder.DFS) if not n.is_leaf]

    def traverse(self, order: TraversalOrder = TraversalOrder.DFS) -> Generator['SyntaxTree', None, None]:
        """ Visits all the nodes of this tree (including itself) in the requested order """
        for node, _ in self.traverse_with_depth(order):
            yield node

    def traverse_with_depth(self, order: TraversalOrder = TraversalOrder.DFS) -> Generator[Tuple['SyntaxTree', int], None, None]:
        """ Same as traverse but also yields the depth of each node relative to this one """
        if order == TraversalOrder.DFS:
            stack = [(self, 0)]
            while len(stack) > 0:
                node, depth = stack.pop(-1)
                yield (node, depth)

                stack.extend((c, depth + 1) for c in reversed(node.children))
        elif order == TraversalOrder.POST:
            # a node is yielded once all of its children have been
            stack = [(self, 0, False)]
            while len(stack) > 0:
                node, depth, children_done = stack.pop(-1)
                if children_done or len(node.children) == 0:
                    yield (node, depth)
                    continue

                stack.append((node, depth, True))
                stack.extend((c, depth + 1, False) for c in reversed(node.children))
        elif order == TraversalOrder.BFS:
            queue = [(self, 0)]
            while len(queue) > 0:
                node, depth = queue.pop(0)
                yield (node, depth)

                queue.extend((c, depth + 1) for c in node.children)
        else:
            raise ValueError(f"Traversal order {order} not supported!")

    def to_graph(self) -> nx.DiGraph:
        """
            Converts the tree into a directed graph with edges pointing from parent to child.
            Nodes are numbered in pre-order (root = 0) and carry the attributes `token` and `depth`.
        """
        graph = nx.DiGraph()

        # NOTE: the same subtree object may occur more than once, so ids are handed out per visit
        next_id = 0
        stack = [(self, None, 0)]
        while len(stack) > 0:
            node, parent_id, depth = stack.pop(-1)
            node_id = next_id
            next_id += 1

            graph.add_node(node_id, token=node.token, depth=depth)
            if parent_id is not None:
                graph.add_edge(parent_id, node_id)

            stack.extend((c, node_id, depth + 1) for c in reversed(node.children))

        return graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyntaxTree): return False

        pairs = [(self, other)]
        while len(pairs) > 0:
            left, right = pairs.pop(-1)
            if left is right: continue
            if left.token != right.token or len(left.children) != len(right.children): return False
            pairs.extend(zip(left.children, right.children))
        return True

    def __hash__(self) -> int:
        # the pre-order sequence of (token, child count) determines the structure
        return hash(tuple((n.token, len(n.children)) for n in self.traverse(TraversalOrder.DFS)))

    def __repr__(self):
        from mvlogic.renderers import TEXT_RENDERER
        return TEXT_RENDERER(self)
