# Renders a syntax tree as an interactive graph (html)
import webbrowser

from pyvis.network import Network, check_html

from mvlogic.renderers.renderer import Renderer
from mvlogic.renderers import TEXT_RENDERER
from mvlogic.syntax import SyntaxTree

def save_network(network: Network, filename: str, notebook: bool = False, open_browser: bool = False):
    """ Writes the network as a self-contained utf-8 html file """
    check_html(filename)
    network.html = network.generate_html(notebook=notebook)

    with open(filename, "w+", encoding="utf-8") as out:
        out.write(network.html)

    if open_browser: # open the saved file in a new browser window.
        webbrowser.open(filename)

class SyntaxTreeGraphRenderer(Renderer):
    def __init__(self, distance_x: int = 120, distance_y: int = 120) -> None:
        self.distance_x = distance_x
        self.distance_y = distance_y

    def render(self, tree: SyntaxTree) -> Network:
        """
            Renders the tree as a network with the root at the top.
            Nodes are numbered in pre-order, each edge points from an operator to one of its operands.
        """
        net = Network(notebook=False, cdn_resources="in_line", directed=True)
        net.toggle_physics(False)

        width_per_depth = {}
        depth_by_node_id = {}
        next_id = 0
        stack = [(tree, None, 0)]
        while len(stack) > 0:
            node, parent_id, depth = stack.pop(-1)
            node_id = next_id
            next_id += 1

            width_of_depth = width_per_depth.get(depth, 0)
            net.add_node(node_id, label=TEXT_RENDERER(node.token), title=TEXT_RENDERER(node),
                         shape="box" if node.is_leaf else "ellipse",
                         x=self.distance_x*width_of_depth, y=self.distance_y*depth)
            width_per_depth[depth] = width_of_depth + 1
            depth_by_node_id[node_id] = depth

            if parent_id is not None:
                net.add_edge(parent_id, node_id, color="blue")

            stack.extend((c, node_id, depth + 1) for c in reversed(node.children))

        # center each level
        max_width = max(width_per_depth.values())
        for node_id, depth in depth_by_node_id.items():
            net_node = net.get_node(node_id)
            net_node["x"] = net_node["x"] + self.distance_x*(max_width - width_per_depth[depth]) / 2

        return net
