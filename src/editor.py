"""
Graph Editor - the application side of the edge observer contract.

Edges report what the user did to them (remove me, edit my cost); the
editor decides what that means for the graph and the scene. It is the only
EdgeObserver the application uses.

The cost dialog itself lives in the UI layer; the editor just hands the edge
to whatever callback was registered and commits the value it gets back.
"""

import logging
from typing import Any, Callable, Dict, Optional

from src.edge.constants import DEFAULT_COST
from src.edge.events import PointerEvent
from src.edge.item import Edge
from src.edge.style import EdgeStyle
from src.graph import Graph, Node
from src.scene import GraphScene

logger = logging.getLogger(__name__)


class GraphEditor:
    """Owns a Graph and its GraphScene and implements EdgeObserver for both."""

    def __init__(self, graph: Optional[Graph] = None, oriented: bool = False,
                 style: Optional[EdgeStyle] = None):
        self.graph = graph or Graph()
        self.scene = GraphScene(self.graph, style)
        self._oriented = oriented
        self._on_cost_dialog: Optional[Callable[[Edge], None]] = None
        self._on_change: Optional[Callable[[], None]] = None
        self.scene.sync()

    def set_on_cost_dialog(self, callback: Callable[[Edge], None]):
        self._on_cost_dialog = callback

    def set_on_change(self, callback: Callable[[], None]):
        self._on_change = callback

    def _notify_change(self):
        if self._on_change:
            self._on_change()

    # --- EdgeObserver ---

    def is_oriented(self) -> bool:
        return self._oriented

    def remove_edge(self, edge: Edge) -> None:
        if self.scene.has_item(edge):
            self.scene.remove_edge(edge)
        if self.graph.has_edge(edge):
            self.graph.detach_edge(edge)
        logger.info(f"Removed {edge!r}")
        self._notify_change()

    def display_cost_dialog(self, edge: Edge) -> None:
        if not self._on_cost_dialog:
            logger.warning(f"No cost dialog registered, ignoring edit request for {edge!r}")
            return
        self._on_cost_dialog(edge)

    # --- Editing operations ---

    def set_oriented(self, oriented: bool) -> None:
        self._oriented = bool(oriented)
        for edge in self.scene.items():
            edge.update()
        self._notify_change()

    def add_node(self, x: float, y: float, label: str = "") -> Node:
        node = self.graph.add_node(x, y, label)
        self._notify_change()
        return node

    def connect(self, source_id: str, destination_id: str, cost: int = DEFAULT_COST) -> Edge:
        edge = self.graph.add_edge(self, source_id, destination_id, cost=cost)
        self.scene.add_edge(edge)
        self._notify_change()
        return edge

    def apply_cost(self, edge: Edge, value: Any) -> None:
        """
        Commit a value coming back from the cost dialog.

        Raises:
            ValueError if the value is not an integer.
        """
        if isinstance(value, bool):
            raise ValueError(f"Invalid cost: {value!r}")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Cost must be an integer, got {value}")
            value = int(value)
        try:
            cost = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid cost: {value!r}")

        # a shorter label leaves its old text behind unless both areas repaint
        edge.update()
        edge.set_cost(cost)
        edge.update()
        logger.info(f"Set cost of {edge!r}")
        self._notify_change()

    def move_node(self, node_id: str, x: float, y: float) -> None:
        self.graph.move_node(node_id, x, y)
        self._notify_change()

    def remove_node(self, node_id: str) -> None:
        for edge in self.graph.remove_node(node_id):
            if self.scene.has_item(edge):
                self.scene.remove_edge(edge)
        self._notify_change()

    def handle_pointer(self, event: PointerEvent) -> bool:
        return self.scene.dispatch(event)

    # --- Snapshots ---

    def to_dict(self) -> Dict[str, Any]:
        data = self.graph.to_dict()
        data['oriented'] = self._oriented
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], style: Optional[EdgeStyle] = None) -> 'GraphEditor':
        editor = cls(oriented=data.get('oriented', False), style=style)
        editor.graph = Graph.from_dict(data, editor)
        editor.scene = GraphScene(editor.graph, style)
        editor.scene.sync()
        return editor
