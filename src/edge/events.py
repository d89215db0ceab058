"""
Pointer events as seen by edge items.

The scene converts whatever the UI toolkit delivers into a PointerEvent and
hands it to the item under the pointer.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Button(Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    MIDDLE = 'middle'


class Phase(Enum):
    PRESS = 'press'
    RELEASE = 'release'


# DOM MouseEvent.button numbering
_DOM_BUTTONS = {0: Button.PRIMARY, 1: Button.MIDDLE, 2: Button.SECONDARY}

_DOM_PHASES = {'mousedown': Phase.PRESS, 'mouseup': Phase.RELEASE}


@dataclass(frozen=True)
class PointerEvent:
    """Immutable snapshot of a single button press or release."""
    button: Button
    phase: Phase
    x: float = 0.0
    y: float = 0.0

    @property
    def is_press(self) -> bool:
        return self.phase is Phase.PRESS


def from_dom(event_type: str, button: int, x: float, y: float) -> Optional[PointerEvent]:
    """
    Build a PointerEvent from DOM-style mouse data.

    Returns None for event types that are not a press or a release
    (mousemove, click, ...) and for unknown buttons.
    """
    phase = _DOM_PHASES.get(event_type)
    if phase is None:
        return None
    btn = _DOM_BUTTONS.get(button)
    if btn is None:
        logger.warning(f"Ignoring {event_type} from unknown mouse button {button}")
        return None
    return PointerEvent(button=btn, phase=phase, x=x, y=y)
