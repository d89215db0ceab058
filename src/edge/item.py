"""
Edge item - a weighted connection between two graph nodes.

The edge keeps a cached copy of its endpoint coordinates which is only
refreshed by adjust(). Bounding box, hit region and rendering all read that
cache, so drawing and hit testing never disagree within a frame.

Pointer input is translated into observer calls; the edge never mutates the
graph on its own.
"""

import logging
import uuid
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

from src.edge.constants import ARROW_SIZE, DEFAULT_COST, DEGENERATE_DISTANCE, LABEL_FONT_SIZE, LINE_WIDTH
from src.edge.events import Button, PointerEvent
from src.edge.geometry import HitRegion, Point, Rect, distance, midpoint
from src.edge.observer import EdgeObserver
from src.edge.renderer import render_edge

if TYPE_CHECKING:
    from src.edge.style import EdgeStyle
    from src.edge.surface import Surface
    from src.graph import Graph, Node

logger = logging.getLogger(__name__)


class InteractionState(Enum):
    IDLE = 'idle'
    PRESSED = 'pressed'


class Edge:
    """
    Weighted edge between two nodes of a Graph.

    Endpoints are stored as node handles (ids) and resolved through the graph
    that owns both the nodes and the edge. Creating an edge registers it with
    the graph, which is what makes it an incident edge of both nodes.
    """

    def __init__(self, observer: EdgeObserver, graph: 'Graph',
                 source_id: Optional[str], destination_id: Optional[str],
                 cost: int = DEFAULT_COST, edge_id: Optional[str] = None):
        if source_id is None or destination_id is None:
            raise ValueError("An edge needs both a source and a destination node")

        self.id = edge_id if edge_id is not None else str(uuid.uuid4())
        self.observer = observer
        self._graph = graph
        self._source_id = source_id
        self._destination_id = destination_id
        self._cost = int(cost)
        self._in_tree = False

        self._pos = Point()
        self._pen_width = LINE_WIDTH
        self._font_size = LABEL_FONT_SIZE
        self._source_point = Point()
        self._destination_point = Point()
        self._state = InteractionState.IDLE
        self._on_update: Optional[Callable[[Rect], None]] = None

        graph.attach_edge(self)
        self.adjust()

    def __repr__(self) -> str:
        return f"Edge({str(self._source_id)[:8]}->{str(self._destination_id)[:8]}, cost={self._cost})"

    # --- Endpoints ---

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def destination_id(self) -> str:
        return self._destination_id

    def source_node(self) -> 'Node':
        return self._graph.node(self._source_id)

    def destination_node(self) -> 'Node':
        return self._graph.node(self._destination_id)

    # --- Weight and highlight ---

    def cost(self) -> int:
        return self._cost

    def cost_link(self) -> int:
        return self._cost

    def set_cost(self, cost: int) -> None:
        self._cost = int(cost)

    def is_in_tree(self) -> bool:
        return self._in_tree

    def set_in_tree(self, in_tree: bool) -> None:
        """
        Switch the in-tree highlight.

        Graph.highlight_edges is the collaborator expected to call this.
        """
        self._in_tree = bool(in_tree)

    # --- Item placement ---

    def pos(self) -> Point:
        return self._pos

    def set_pos(self, x: float, y: float) -> None:
        """Move the item origin; call adjust() afterwards to refresh the endpoints."""
        self._pos = Point(x, y)

    def map_from_scene(self, point: Point) -> Point:
        return point - self._pos

    def pen_width(self) -> float:
        return self._pen_width

    def set_pen_width(self, width: float) -> None:
        self._pen_width = width

    def set_font_size(self, font_size: float) -> None:
        """Label font size, used to size the repaint area."""
        self._font_size = font_size

    def set_on_update(self, callback: Optional[Callable[[Rect], None]]) -> None:
        """Register the redraw callback; it receives the dirty area in scene coordinates."""
        self._on_update = callback

    # --- Geometry ---

    @property
    def source_point(self) -> Point:
        return self._source_point

    @property
    def destination_point(self) -> Point:
        return self._destination_point

    def is_degenerate(self) -> bool:
        return self._source_point == self._destination_point

    def adjust(self) -> None:
        """
        Recompute the cached endpoints from the current node positions.

        Must be called whenever either node may have moved. Nodes closer than
        DEGENERATE_DISTANCE collapse both endpoints onto the source.
        """
        p1 = self.map_from_scene(self.source_node().pos())
        p2 = self.map_from_scene(self.destination_node().pos())

        # old area needs repainting as well as the new one
        self.update()

        if distance(p1, p2) > DEGENERATE_DISTANCE:
            self._source_point = p1
            self._destination_point = p2
        else:
            self._source_point = self._destination_point = p1

        logger.debug(f"Adjusted {self!r}: {self._source_point} -> {self._destination_point}")
        self.update()

    def bounding_rect(self) -> Rect:
        return Rect.spanning(self._source_point, self._destination_point)

    def shape(self) -> HitRegion:
        return HitRegion.around_segment(self._source_point, self._destination_point, self._pen_width)

    def contains(self, scene_point: Point) -> bool:
        return self.shape().contains(self.map_from_scene(scene_point))

    # --- Rendering ---

    def render(self, surface: 'Surface', style: Optional['EdgeStyle'] = None) -> None:
        render_edge(self, surface, style)

    def update(self) -> None:
        """Ask the scene to repaint the area covered by this edge."""
        if self._on_update:
            self._on_update(self._dirty_rect())

    def _label_rect(self) -> Rect:
        # text starts at the midpoint baseline; a digit is never wider than one em
        mid = midpoint(self._source_point, self._destination_point)
        width = len(str(self._cost)) * self._font_size
        return Rect(mid.x, mid.y - self._font_size, width, self._font_size * 1.5)

    def _dirty_rect(self) -> Rect:
        # arrowhead reaches beyond the endpoint rectangle
        margin = ARROW_SIZE + self._pen_width
        r = self.bounding_rect()
        r = Rect(r.x - margin, r.y - margin, r.width + 2 * margin, r.height + 2 * margin)
        return r.united(self._label_rect()).translated(self._pos.x, self._pos.y)

    # --- Interaction ---

    @property
    def interaction_state(self) -> InteractionState:
        return self._state

    def handle_pointer(self, event: PointerEvent) -> None:
        """
        Single entry point for pointer button events on the hit region.

        Primary press asks the observer for the cost dialog, secondary press
        asks it to remove the edge. Every event ends with a redraw request.
        The redraw target is captured up front: remove_edge may detach this
        edge, and nothing reads edge state once it returns.
        """
        redraw = self._on_update
        dirty = self._dirty_rect()

        if event.is_press:
            self._state = InteractionState.PRESSED
            if event.button is Button.SECONDARY:
                logger.info(f"Remove requested for {self!r}")
                self.observer.remove_edge(self)
            elif event.button is Button.PRIMARY:
                logger.debug(f"Cost dialog requested for {self!r}")
                self.observer.display_cost_dialog(self)
            else:
                logger.warning(f"Ignoring {event.button.value} button press on {self!r}")
        else:
            self._state = InteractionState.IDLE

        if redraw:
            redraw(dirty)
