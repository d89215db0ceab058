"""
Edge renderer.

Draws an edge onto any Surface: the line in the normal or in-tree color,
the cost label at the midpoint, and an arrowhead at the destination when the
observer reports an oriented graph. A degenerate edge draws nothing.
"""

import math
from typing import Optional, TYPE_CHECKING

from src.edge.geometry import arrow_head, distance, midpoint
from src.edge.style import EdgeStyle

if TYPE_CHECKING:
    from src.edge.item import Edge
    from src.edge.surface import Surface

DEFAULT_STYLE = EdgeStyle()


def render_edge(edge: 'Edge', surface: 'Surface', style: Optional[EdgeStyle] = None) -> None:
    style = style or DEFAULT_STYLE
    start, end = edge.source_point, edge.destination_point

    if math.isclose(distance(start, end), 0.0, abs_tol=1e-12):
        return

    stroke = style.stroke_color(edge.is_in_tree())
    surface.draw_line(start, end, color=stroke, width=style.line_width)
    surface.draw_text(midpoint(start, end), str(edge.cost()),
                      color=style.text_color, font_size=style.font_size)

    if edge.observer.is_oriented():
        surface.draw_polygon(arrow_head(start, end, style.arrow_size),
                             color=stroke, width=style.line_width, fill=style.arrow_fill)
