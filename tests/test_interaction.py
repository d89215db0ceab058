"""
Tests for pointer handling on edges and the observer callbacks it triggers.
"""

import logging

import pytest

from src.edge import Button, InteractionState, Phase, PointerEvent
from src.edge.events import from_dom
from src.graph import Graph


class RecordingObserver:
    def __init__(self):
        self.removed = []
        self.dialogs = []

    def is_oriented(self):
        return False

    def remove_edge(self, edge):
        self.removed.append(edge)

    def display_cost_dialog(self, edge):
        self.dialogs.append(edge)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def edge(observer):
    graph = Graph()
    a = graph.add_node(0, 0)
    b = graph.add_node(100, 0)
    return graph.add_edge(observer, a.id, b.id)


def press(button):
    return PointerEvent(button=button, phase=Phase.PRESS, x=50, y=0)


def release(button):
    return PointerEvent(button=button, phase=Phase.RELEASE, x=50, y=0)


class TestObserverCallbacks:

    def test_primary_press_opens_cost_dialog(self, edge, observer):
        edge.handle_pointer(press(Button.PRIMARY))
        assert observer.dialogs == [edge]
        assert observer.removed == []

    def test_secondary_press_requests_removal(self, edge, observer):
        edge.handle_pointer(press(Button.SECONDARY))
        assert observer.removed == [edge]
        assert observer.dialogs == []

    def test_middle_press_is_ignored(self, edge, observer):
        edge.handle_pointer(press(Button.MIDDLE))
        assert observer.removed == []
        assert observer.dialogs == []

    def test_middle_press_logs_warning(self, edge, caplog):
        with caplog.at_level(logging.WARNING, logger='src.edge.item'):
            edge.handle_pointer(press(Button.MIDDLE))
        assert 'Ignoring middle button press' in caplog.text

    def test_release_calls_nothing(self, edge, observer):
        edge.handle_pointer(release(Button.PRIMARY))
        edge.handle_pointer(release(Button.SECONDARY))
        assert observer.removed == []
        assert observer.dialogs == []


class TestRedrawAndState:

    def test_every_event_requests_redraw(self, edge):
        dirty = []
        edge.set_on_update(dirty.append)
        edge.handle_pointer(press(Button.MIDDLE))
        edge.handle_pointer(release(Button.MIDDLE))
        assert len(dirty) == 2
        assert dirty[0].contains(edge.source_point)
        assert dirty[0].contains(edge.destination_point)

    def test_press_then_release_returns_to_idle(self, edge):
        assert edge.interaction_state is InteractionState.IDLE
        edge.handle_pointer(press(Button.PRIMARY))
        assert edge.interaction_state is InteractionState.PRESSED
        edge.handle_pointer(release(Button.PRIMARY))
        assert edge.interaction_state is InteractionState.IDLE

    def test_redraw_uses_callback_captured_before_removal(self, observer):
        graph = Graph()
        a = graph.add_node(0, 0)
        b = graph.add_node(100, 0)
        dirty = []

        def remove(edge):
            # what an owner does: detach and drop the redraw hook
            edge.set_on_update(None)
            graph.detach_edge(edge)

        observer.remove_edge = remove
        edge = graph.add_edge(observer, a.id, b.id)
        edge.set_on_update(dirty.append)

        edge.handle_pointer(press(Button.SECONDARY))

        assert graph.edges() == []
        assert len(dirty) == 1


class TestEventConversion:

    def test_dom_buttons(self):
        assert from_dom('mousedown', 0, 1, 2) == PointerEvent(Button.PRIMARY, Phase.PRESS, 1, 2)
        assert from_dom('mouseup', 2, 3, 4) == PointerEvent(Button.SECONDARY, Phase.RELEASE, 3, 4)
        assert from_dom('mousedown', 1, 0, 0).button is Button.MIDDLE

    def test_unhandled_dom_events(self):
        assert from_dom('mousemove', 0, 0, 0) is None
        assert from_dom('mousedown', 4, 0, 0) is None

    def test_unknown_dom_button_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger='src.edge.events'):
            assert from_dom('mouseup', 3, 0, 0) is None
        assert 'unknown mouse button 3' in caplog.text
