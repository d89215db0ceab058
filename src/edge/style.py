"""
Style context handed to the edge renderer.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from src.edge.constants import (
    ARROW_FILL,
    ARROW_SIZE,
    EDGE_COLOR,
    LABEL_COLOR,
    LABEL_FONT_SIZE,
    LINE_WIDTH,
    TREE_EDGE_COLOR,
)


@dataclass(frozen=True)
class EdgeStyle:
    line_width: float = LINE_WIDTH
    color: str = EDGE_COLOR
    tree_color: str = TREE_EDGE_COLOR
    arrow_fill: str = ARROW_FILL
    arrow_size: float = ARROW_SIZE
    font_size: int = LABEL_FONT_SIZE
    text_color: str = LABEL_COLOR

    def stroke_color(self, in_tree: bool) -> str:
        return self.tree_color if in_tree else self.color

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EdgeStyle':
        """Build a style from a (possibly partial) dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})
