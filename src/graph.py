"""
Graph container for the editor.

The Graph owns every Node and Edge. Edges refer to their endpoints by node
id and the adjacency lives in a networkx MultiGraph, so neither side keeps a
raw reference to the other: removing an edge or a node goes through the
container, which detaches everything that points at it.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional

import networkx as nx

from src.edge.constants import DEFAULT_COST
from src.edge.geometry import Point
from src.edge.item import Edge
from src.edge.observer import EdgeObserver

logger = logging.getLogger(__name__)


class Node:
    """
    Positionable vertex.

    Moving a node re-runs adjust() on every incident edge; edges never poll
    for movement themselves.
    """

    def __init__(self, graph: 'Graph', node_id: str, x: float = 0.0, y: float = 0.0, label: str = ""):
        self._graph = graph
        self.id = node_id
        self.label = label
        self._pos = Point(x, y)

    def __repr__(self) -> str:
        return f"Node({self.label or str(self.id)[:8]} @ {self._pos.x:.1f},{self._pos.y:.1f})"

    def pos(self) -> Point:
        return self._pos

    def set_pos(self, x: float, y: float) -> None:
        self._pos = Point(x, y)
        for edge in self.edges():
            edge.adjust()

    def edges(self) -> List[Edge]:
        return self._graph.incident_edges(self.id)


class Graph:
    """
    Arena owning nodes and edges.

    Usage:
        graph = Graph()
        a = graph.add_node(x=0, y=0, label="A")
        b = graph.add_node(x=100, y=0, label="B")
        edge = graph.add_edge(observer, a.id, b.id, cost=3)
        graph.move_node(b.id, 200, 50)   # edge.adjust() runs here
    """

    def __init__(self):
        self.G = nx.MultiGraph()
        # edge id -> Edge, in insertion order
        self._edges: Dict[str, Edge] = {}

    # --- Nodes ---

    def add_node(self, x: float = 0.0, y: float = 0.0, label: str = "",
                 node_id: Optional[str] = None) -> Node:
        if node_id is None:
            node_id = str(uuid.uuid4())
        if node_id in self.G:
            raise ValueError(f"Duplicate node id: {node_id}")
        node = Node(self, node_id, x, y, label)
        self.G.add_node(node_id, node=node)
        logger.info(f"Added node {node!r}")
        return node

    def node(self, node_id: str) -> Node:
        if node_id not in self.G:
            raise KeyError(f"Unknown node id: {node_id}")
        return self.G.nodes[node_id]['node']

    def has_node(self, node_id: str) -> bool:
        return node_id in self.G

    def nodes(self) -> List[Node]:
        return [attrs['node'] for _, attrs in self.G.nodes(data=True)]

    def move_node(self, node_id: str, x: float, y: float) -> None:
        self.node(node_id).set_pos(x, y)

    def remove_node(self, node_id: str) -> List[Edge]:
        """
        Remove a node after detaching all of its incident edges.

        Returns the detached edges so the caller can drop them from the scene.
        """
        node = self.node(node_id)
        removed = node.edges()
        for edge in removed:
            self.detach_edge(edge)
        self.G.remove_node(node_id)
        logger.info(f"Removed node {node!r} and {len(removed)} incident edge(s)")
        return removed

    # --- Edges ---

    def add_edge(self, observer: EdgeObserver, source_id: str, destination_id: str,
                 cost: int = DEFAULT_COST, edge_id: Optional[str] = None) -> Edge:
        """Create an edge; the Edge registers itself through attach_edge()."""
        return Edge(observer, self, source_id, destination_id, cost=cost, edge_id=edge_id)

    def attach_edge(self, edge: Edge) -> None:
        """Record the edge as incident to both of its nodes."""
        for node_id in (edge.source_id, edge.destination_id):
            if node_id not in self.G:
                raise KeyError(f"Unknown node id: {node_id}")
        if edge.id in self._edges:
            raise ValueError(f"Duplicate edge id: {edge.id}")

        self.G.add_edge(edge.source_id, edge.destination_id, key=edge.id, edge=edge)
        self._edges[edge.id] = edge
        logger.info(f"Attached {edge!r}")

    def detach_edge(self, edge: Edge) -> None:
        """Drop the edge from both nodes' incident sets."""
        if edge.id not in self._edges:
            raise KeyError(f"Unknown edge id: {edge.id}")
        self.G.remove_edge(edge.source_id, edge.destination_id, key=edge.id)
        del self._edges[edge.id]
        logger.info(f"Detached {edge!r}")

    def edge(self, edge_id: str) -> Edge:
        if edge_id not in self._edges:
            raise KeyError(f"Unknown edge id: {edge_id}")
        return self._edges[edge_id]

    def has_edge(self, edge: Edge) -> bool:
        return self._edges.get(edge.id) is edge

    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def incident_edges(self, node_id: str) -> List[Edge]:
        if node_id not in self.G:
            raise KeyError(f"Unknown node id: {node_id}")
        return [attrs['edge'] for _, _, attrs in self.G.edges(node_id, data=True)]

    def highlight_edges(self, edge_ids: Iterable[str]) -> None:
        """
        Mark exactly the given edges as in-tree and clear the flag on the rest.

        The ids come from whatever algorithm computed the subgraph; this is
        the one place that writes the in-tree flag.
        """
        wanted = set(edge_ids)
        unknown = wanted - set(self._edges)
        if unknown:
            raise KeyError(f"Unknown edge id(s): {sorted(unknown)}")

        for edge_id, edge in self._edges.items():
            edge.set_in_tree(edge_id in wanted)
            edge.update()

    # --- Snapshots ---

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nodes': [
                {'id': n.id, 'label': n.label, 'x': n.pos().x, 'y': n.pos().y}
                for n in self.nodes()
            ],
            'edges': [
                {
                    'id': e.id,
                    'source': e.source_id,
                    'target': e.destination_id,
                    'cost': e.cost(),
                    'in_tree': e.is_in_tree(),
                }
                for e in self.edges()
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], observer: EdgeObserver) -> 'Graph':
        """Rebuild a graph from to_dict() output; edges are bound to `observer`."""
        graph = cls()
        for nd in data.get('nodes', []):
            graph.add_node(nd.get('x', 0.0), nd.get('y', 0.0), nd.get('label', ''), node_id=nd.get('id'))
        in_tree = []
        for ed in data.get('edges', []):
            edge = graph.add_edge(observer, ed['source'], ed['target'],
                                  cost=ed.get('cost', DEFAULT_COST), edge_id=ed.get('id'))
            if ed.get('in_tree', False):
                in_tree.append(edge.id)
        graph.highlight_edges(in_tree)
        return graph
