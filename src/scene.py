"""
Graph scene - binds edge items to a drawing surface and to pointer input.

The scene keeps the edge items in z-order (last added is on top), routes
pointer events to the item under the pointer using each item's hit region,
and collects the areas items ask to have repainted.
"""

import logging
from typing import List, Optional

from src.edge.events import PointerEvent
from src.edge.geometry import Point, Rect, distance
from src.edge.item import Edge
from src.edge.style import EdgeStyle
from src.edge.surface import RecordingSurface, Surface, SvgSurface
from src.graph import Graph, Node

logger = logging.getLogger(__name__)

# Radius used to draw nodes and to pick them for dragging
NODE_RADIUS = 12


class GraphScene:
    """Holds the edge items of a Graph and drives their rendering and input."""

    def __init__(self, graph: Graph, style: Optional[EdgeStyle] = None):
        self.graph = graph
        self.style = style or EdgeStyle()
        self._items: List[Edge] = []
        self._dirty: List[Rect] = []
        # item that received the last press; it also gets the matching release
        self._grabber: Optional[Edge] = None

    # --- Items ---

    def add_edge(self, edge: Edge) -> None:
        if edge in self._items:
            return
        edge.set_pen_width(self.style.line_width)
        edge.set_font_size(self.style.font_size)
        edge.set_on_update(self.invalidate)
        self._items.append(edge)
        edge.update()

    def remove_edge(self, edge: Edge) -> None:
        """Take the edge off the scene; its last area is repainted."""
        if edge not in self._items:
            raise KeyError(f"Edge not in scene: {edge!r}")
        edge.update()
        edge.set_on_update(None)
        self._items.remove(edge)
        if self._grabber is edge:
            self._grabber = None
        logger.debug(f"Removed {edge!r} from scene")

    def items(self) -> List[Edge]:
        return list(self._items)

    def has_item(self, edge: Edge) -> bool:
        return edge in self._items

    def sync(self) -> None:
        """Add graph edges missing from the scene and drop items the graph no longer has."""
        for edge in self.items():
            if not self.graph.has_edge(edge):
                self.remove_edge(edge)
        for edge in self.graph.edges():
            if edge not in self._items:
                self.add_edge(edge)

    # --- Hit testing and input ---

    def hit_test(self, x: float, y: float) -> Optional[Edge]:
        point = Point(x, y)
        for edge in reversed(self._items):
            if edge.contains(point):
                return edge
        return None

    def node_at(self, x: float, y: float) -> Optional[Node]:
        point = Point(x, y)
        for node in reversed(self.graph.nodes()):
            if distance(point, node.pos()) <= NODE_RADIUS:
                return node
        return None

    def dispatch(self, event: PointerEvent) -> bool:
        """
        Deliver a pointer event to an edge item.

        A press goes to the topmost item whose hit region contains the
        pointer. A release goes to the item that took the press. Returns True
        if some item received the event.
        """
        if event.is_press:
            target = self.hit_test(event.x, event.y)
            if target is None:
                return False
            self._grabber = target
            logger.debug(f"{event.button.value} press at ({event.x}, {event.y}) -> {target!r}")
            # the observer may remove the target while it handles the press
            target.handle_pointer(event)
            return True

        target = self._grabber
        self._grabber = None
        if target is None or target not in self._items:
            return False
        target.handle_pointer(event)
        return True

    # --- Repaint bookkeeping ---

    def invalidate(self, rect: Rect) -> None:
        self._dirty.append(rect)

    def take_dirty(self) -> Optional[Rect]:
        """Return the union of all invalidated areas since the last call, then reset."""
        if not self._dirty:
            return None
        area = self._dirty[0]
        for rect in self._dirty[1:]:
            area = area.united(rect)
        self._dirty = []
        return area

    # --- Rendering ---

    def render(self, surface: Surface) -> None:
        for edge in self._items:
            surface.set_origin(edge.pos())
            edge.render(surface, self.style)
        surface.set_origin(Point())

    def display_list(self) -> list:
        surface = RecordingSurface()
        self.render(surface)
        return surface.commands

    def render_svg(self, width: float, height: float, background: str = '#ffffff') -> str:
        """Nodes first, then edges on top so labels and arrowheads stay visible."""
        surface = SvgSurface(width, height, background=background)
        for node in self.graph.nodes():
            surface.draw_node(node.pos(), NODE_RADIUS, node.label)
        self.render(surface)
        return surface.as_svg()
