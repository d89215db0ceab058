"""
Edge core for the graph editor.

This package provides the weighted edge item and everything it needs:
- Edge: cached geometry, hit region and pointer handling
- render_edge: line, cost label, in-tree color and arrowhead
- EdgeObserver: capability interface the owning application implements
- Surfaces: RecordingSurface and SvgSurface

Usage:
    from src.edge import Edge, EdgeObserver, EdgeStyle
    from src.edge.events import PointerEvent, Button, Phase
"""

from src.edge.constants import (
    ARROW_SIZE,
    DEFAULT_COST,
    DEGENERATE_DISTANCE,
    LINE_WIDTH,
)
from src.edge.events import Button, Phase, PointerEvent
from src.edge.geometry import HitRegion, Point, Rect
from src.edge.item import Edge, InteractionState
from src.edge.observer import CallbackObserver, EdgeObserver
from src.edge.renderer import render_edge
from src.edge.style import EdgeStyle
from src.edge.surface import RecordingSurface, Surface, SvgSurface

__all__ = [
    'Edge',
    'InteractionState',
    'EdgeObserver',
    'CallbackObserver',
    'EdgeStyle',
    'render_edge',
    'Surface',
    'RecordingSurface',
    'SvgSurface',
    'PointerEvent',
    'Button',
    'Phase',
    'Point',
    'Rect',
    'HitRegion',
    'ARROW_SIZE',
    'DEFAULT_COST',
    'DEGENERATE_DISTANCE',
    'LINE_WIDTH',
]
