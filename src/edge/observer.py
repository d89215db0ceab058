"""
EdgeObserver Protocol Definition.

An edge never changes the graph by itself. Whatever owns the graph implements
this capability interface and is handed to each edge at construction.
"""

from dataclasses import dataclass
from typing import Callable, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from src.edge.item import Edge


@runtime_checkable
class EdgeObserver(Protocol):
    """Capabilities an edge needs from the application that owns it."""

    def is_oriented(self) -> bool:
        """Return True if edges are directional and should carry an arrowhead."""
        ...

    def remove_edge(self, edge: 'Edge') -> None:
        """
        Detach the edge from its nodes and from the scene.

        The edge may be disposed of during this call; callers must not touch
        it afterwards.
        """
        ...

    def display_cost_dialog(self, edge: 'Edge') -> None:
        """Start editing the weight of the edge."""
        ...


@dataclass
class CallbackObserver:
    """EdgeObserver built from plain function references."""
    is_oriented_fn: Callable[[], bool]
    remove_edge_fn: Callable[['Edge'], None]
    display_cost_dialog_fn: Callable[['Edge'], None]

    def is_oriented(self) -> bool:
        return self.is_oriented_fn()

    def remove_edge(self, edge: 'Edge') -> None:
        self.remove_edge_fn(edge)

    def display_cost_dialog(self, edge: 'Edge') -> None:
        self.display_cost_dialog_fn(edge)
