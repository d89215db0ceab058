"""
Drawing surfaces for edge rendering.

The renderer only talks to the Surface protocol. Two implementations ship:
- RecordingSurface keeps a plain list of draw commands (handy for tests and
  for shipping a display list to a client)
- SvgSurface draws with drawsvg and produces SVG markup for the UI
"""

from typing import Any, Dict, List, Protocol, runtime_checkable

import drawsvg as draw

from src.edge.geometry import Point


@runtime_checkable
class Surface(Protocol):
    """Minimal painter interface the edge renderer needs."""

    def set_origin(self, origin: Point) -> None:
        """Offset applied to every following coordinate (item to scene mapping)."""
        ...

    def draw_line(self, start: Point, end: Point, color: str, width: float) -> None:
        ...

    def draw_text(self, position: Point, text: str, color: str, font_size: float) -> None:
        ...

    def draw_polygon(self, points: List[Point], color: str, width: float, fill: str) -> None:
        ...


class RecordingSurface:
    """Surface that records draw calls as dicts, in scene coordinates."""

    def __init__(self):
        self.commands: List[Dict[str, Any]] = []
        self._origin = Point()

    def set_origin(self, origin: Point) -> None:
        self._origin = origin

    def _map(self, point: Point):
        return (point.x + self._origin.x, point.y + self._origin.y)

    def draw_line(self, start: Point, end: Point, color: str, width: float) -> None:
        self.commands.append({
            'op': 'line',
            'start': self._map(start),
            'end': self._map(end),
            'color': color,
            'width': width,
        })

    def draw_text(self, position: Point, text: str, color: str, font_size: float) -> None:
        self.commands.append({
            'op': 'text',
            'position': self._map(position),
            'text': text,
            'color': color,
            'font_size': font_size,
        })

    def draw_polygon(self, points: List[Point], color: str, width: float, fill: str) -> None:
        self.commands.append({
            'op': 'polygon',
            'points': [self._map(p) for p in points],
            'color': color,
            'width': width,
            'fill': fill,
        })

    def of_kind(self, op: str) -> List[Dict[str, Any]]:
        return [c for c in self.commands if c['op'] == op]

    def clear(self) -> None:
        self.commands = []


class SvgSurface:
    """Surface backed by a drawsvg Drawing (y axis pointing down)."""

    def __init__(self, width: float, height: float, background: str = None):
        self.drawing = draw.Drawing(width, height)
        self._origin = Point()
        if background:
            self.drawing.append(draw.Rectangle(0, 0, width, height, fill=background))

    def set_origin(self, origin: Point) -> None:
        self._origin = origin

    def draw_line(self, start: Point, end: Point, color: str, width: float) -> None:
        o = self._origin
        self.drawing.append(
            draw.Line(
                start.x + o.x, start.y + o.y,
                end.x + o.x, end.y + o.y,
                stroke=color,
                stroke_width=width,
                stroke_linecap='round',
                stroke_linejoin='round',
            )
        )

    def draw_text(self, position: Point, text: str, color: str, font_size: float) -> None:
        o = self._origin
        self.drawing.append(
            draw.Text(
                text,
                font_size,
                position.x + o.x, position.y + o.y,
                fill=color,
                font_family='sans-serif',
            )
        )

    def draw_polygon(self, points: List[Point], color: str, width: float, fill: str) -> None:
        o = self._origin
        coords = []
        for p in points:
            coords.extend((p.x + o.x, p.y + o.y))
        self.drawing.append(
            draw.Lines(
                *coords,
                close=True,
                fill=fill,
                stroke=color,
                stroke_width=width,
                stroke_linejoin='round',
            )
        )

    def draw_node(self, center: Point, radius: float, label: str = '',
                  fill: str = '#e2e8f0', stroke: str = '#475569') -> None:
        """Nodes are not edge items, but the scene draws them on the same surface."""
        self.drawing.append(draw.Circle(center.x, center.y, radius, fill=fill, stroke=stroke, stroke_width=1.5))
        if label:
            self.drawing.append(
                draw.Text(label, 11, center.x, center.y, fill='#1e293b',
                          text_anchor='middle', dominant_baseline='middle', font_family='sans-serif')
            )

    def as_svg(self) -> str:
        return self.drawing.as_svg()
