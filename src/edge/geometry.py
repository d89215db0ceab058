"""
Plain 2D geometry used by the edge core.

Coordinates follow the screen convention: x grows to the right, y grows
downwards. Everything here is pure arithmetic on floats; nothing keeps state.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from src.edge.constants import ARROW_SIZE, CAP_SEGMENTS, PEN_WIDTH_ZERO


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def contains(self, point: Point) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def translated(self, dx: float, dy: float) -> 'Rect':
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def united(self, other: 'Rect') -> 'Rect':
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    @classmethod
    def spanning(cls, p1: Point, p2: Point) -> 'Rect':
        """Smallest rectangle holding both points."""
        lx, rx = min(p1.x, p2.x), max(p1.x, p2.x)
        ty, by = min(p1.y, p2.y), max(p1.y, p2.y)
        return cls(lx, ty, rx - lx, by - ty)


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def midpoint(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def point_to_segment_distance(point: Point, start: Point, end: Point) -> Tuple[float, float]:
    """
    Distance from point to the segment start-end.

    Returns (distance, t) where t in [0, 1] is the position of the closest
    point along the segment.
    """
    dx, dy = end.x - start.x, end.y - start.y

    if dx == 0 and dy == 0:
        return distance(point, start), 0.0

    t = max(0.0, min(1.0, ((point.x - start.x) * dx + (point.y - start.y) * dy) / (dx * dx + dy * dy)))
    closest = Point(start.x + t * dx, start.y + t * dy)
    return distance(point, closest), t


def direction_angle(start: Point, end: Point) -> float:
    """
    Direction of the segment in [0, 2*pi), measured from the +x axis.

    Uses acos of the horizontal component and mirrors the result when the
    segment points down the screen, so a segment pointing right is 0, one pointing
    straight up is pi/2 and one pointing straight down is 3*pi/2.
    """
    length = distance(start, end)
    angle = math.acos((end.x - start.x) / length)
    if end.y - start.y >= 0:
        angle = 2 * math.pi - angle
    # acos(1) == 0 maps onto 2*pi for a rightward segment
    return angle % (2 * math.pi)


def arrow_head(start: Point, end: Point, size: float = ARROW_SIZE) -> List[Point]:
    """Triangle [tip, wing1, wing2] with its tip on `end`."""
    angle = direction_angle(start, end)
    wing1 = end + Point(math.sin(angle - math.pi / 3) * size,
                        math.cos(angle - math.pi / 3) * size)
    wing2 = end + Point(math.sin(angle - math.pi + math.pi / 3) * size,
                        math.cos(angle - math.pi + math.pi / 3) * size)
    return [end, wing1, wing2]


def polygon_area(points: List[Point]) -> float:
    """Shoelace area of a simple polygon."""
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - q.x * p.y
    return abs(total) / 2


def point_in_polygon(point: Point, polygon: List[Point]) -> bool:
    """Even-odd ray casting test."""
    inside = False
    count = len(polygon)
    j = count - 1
    for i in range(count):
        a, b = polygon[i], polygon[j]
        if (a.y > point.y) != (b.y > point.y):
            cross_x = b.x + (point.y - b.y) * (a.x - b.x) / (a.y - b.y)
            if point.x < cross_x:
                inside = not inside
        j = i
    return inside


def stroke_segment(start: Point, end: Point, width: float,
                   segments: int = CAP_SEGMENTS) -> List[Point]:
    """
    Outline of a segment stroked with a round-capped pen.

    The polygon runs along one side of the segment, around a half circle at
    `end`, back along the other side and around a half circle at `start`.
    A zero-length segment yields a full circle.
    """
    if width <= 0:
        width = PEN_WIDTH_ZERO
    radius = width / 2

    if start == end:
        heading = 0.0
    else:
        heading = math.atan2(end.y - start.y, end.x - start.x)

    outline: List[Point] = []
    # cap around `end`: from the left normal, sweeping through the heading
    for i in range(segments + 1):
        a = heading - math.pi / 2 + math.pi * i / segments
        outline.append(Point(end.x + radius * math.cos(a), end.y + radius * math.sin(a)))
    # cap around `start`: continues on the opposite side
    for i in range(segments + 1):
        a = heading + math.pi / 2 + math.pi * i / segments
        outline.append(Point(start.x + radius * math.cos(a), start.y + radius * math.sin(a)))
    return outline


@dataclass
class HitRegion:
    """
    Stroked outline of a segment united with the segment itself.

    This is the area a pointer has to land in to hit the edge, much tighter
    than the bounding rectangle for a thin diagonal line. A zero-length
    segment gives an empty region: collapsed edges cannot be hit.
    """
    start: Point
    end: Point
    pen_width: float
    outline: List[Point] = field(default_factory=list)

    @classmethod
    def around_segment(cls, start: Point, end: Point, pen_width: float) -> 'HitRegion':
        if start == end:
            return cls(start, end, pen_width)
        return cls(start, end, pen_width, stroke_segment(start, end, pen_width))

    def is_empty(self) -> bool:
        return not self.outline

    def area(self) -> float:
        return polygon_area(self.outline)

    def contains(self, point: Point) -> bool:
        if self.is_empty():
            return False
        if point_in_polygon(point, self.outline):
            return True
        # the raw segment path is part of the region even where the outline is thinner
        dist, _ = point_to_segment_distance(point, self.start, self.end)
        return dist <= 1e-9

    def bounding_rect(self) -> Rect:
        if self.is_empty():
            return Rect(self.start.x, self.start.y, 0, 0)
        xs = [p.x for p in self.outline]
        ys = [p.y for p in self.outline]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
