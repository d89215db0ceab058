"""
Tests for GraphScene: hit testing, event routing, repaint tracking, SVG.
"""

import pytest

from src.edge import Button, EdgeStyle, Phase, PointerEvent, Rect
from src.graph import Graph
from src.scene import GraphScene


class RecordingObserver:
    def __init__(self):
        self.calls = []

    def is_oriented(self):
        return True

    def remove_edge(self, edge):
        self.calls.append(('remove', edge))

    def display_cost_dialog(self, edge):
        self.calls.append(('dialog', edge))


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def scene(observer):
    graph = Graph()
    a = graph.add_node(0, 0, 'A', node_id='a')
    b = graph.add_node(200, 0, 'B', node_id='b')
    c = graph.add_node(0, 200, 'C', node_id='c')
    graph.add_edge(observer, a.id, b.id, edge_id='ab')
    graph.add_edge(observer, a.id, c.id, edge_id='ac')
    scene = GraphScene(graph)
    scene.sync()
    return scene


def event(button, phase, x, y):
    return PointerEvent(button=button, phase=phase, x=x, y=y)


class TestHitTest:

    def test_hits_edge_under_pointer(self, scene):
        assert scene.hit_test(100, 0).id == 'ab'
        assert scene.hit_test(0, 100).id == 'ac'

    def test_misses_off_the_line(self, scene):
        assert scene.hit_test(100, 10) is None
        assert scene.hit_test(100, 100) is None

    def test_topmost_item_wins(self, scene, observer):
        top = scene.graph.add_edge(observer, 'a', 'b', edge_id='ab2')
        scene.add_edge(top)
        assert scene.hit_test(100, 0) is top

    def test_collapsed_edge_cannot_be_hit(self, scene):
        scene.graph.move_node('b', 5, 5)
        assert scene.hit_test(2, 2) is None

    def test_node_at(self, scene):
        assert scene.node_at(3, 4).id == 'a'
        assert scene.node_at(100, 100) is None


class TestDispatch:

    def test_press_reaches_observer(self, scene, observer):
        assert scene.dispatch(event(Button.PRIMARY, Phase.PRESS, 100, 0.5))
        assert observer.calls == [('dialog', scene.graph.edge('ab'))]

    def test_press_on_empty_space(self, scene, observer):
        assert not scene.dispatch(event(Button.PRIMARY, Phase.PRESS, 150, 150))
        assert observer.calls == []

    def test_release_goes_to_pressed_item(self, scene):
        edge = scene.graph.edge('ac')
        scene.dispatch(event(Button.PRIMARY, Phase.PRESS, 0, 100))
        # pointer moved off the line before release
        assert scene.dispatch(event(Button.PRIMARY, Phase.RELEASE, 150, 150))
        assert edge.interaction_state.value == 'idle'

    def test_release_without_press(self, scene):
        assert not scene.dispatch(event(Button.PRIMARY, Phase.RELEASE, 100, 0))


class TestRepaint:

    def test_take_dirty_unions_and_resets(self, scene):
        scene.take_dirty()
        scene.invalidate(Rect(0, 0, 10, 10))
        scene.invalidate(Rect(20, 20, 10, 10))
        assert scene.take_dirty() == Rect(0, 0, 30, 30)
        assert scene.take_dirty() is None

    def test_moving_a_node_marks_scene_dirty(self, scene):
        scene.take_dirty()
        scene.graph.move_node('b', 300, 0)
        assert scene.take_dirty() is not None

    def test_remove_edge_repaints_and_unhooks(self, scene):
        edge = scene.graph.edge('ab')
        scene.take_dirty()
        scene.remove_edge(edge)
        assert scene.take_dirty() is not None
        edge.update()
        assert scene.take_dirty() is None
        with pytest.raises(KeyError):
            scene.remove_edge(edge)

    def test_sync_drops_detached_edges(self, scene):
        edge = scene.graph.edge('ab')
        scene.graph.detach_edge(edge)
        scene.sync()
        assert [e.id for e in scene.items()] == ['ac']


class TestRendering:

    def test_scene_style_sets_pen_width(self, observer):
        graph = Graph()
        graph.add_node(0, 0, node_id='a')
        graph.add_node(100, 0, node_id='b')
        edge = graph.add_edge(observer, 'a', 'b')
        scene = GraphScene(graph, EdgeStyle(line_width=8))
        scene.add_edge(edge)
        assert edge.pen_width() == 8
        assert scene.hit_test(50, 3.5) is edge

    def test_display_list(self, scene):
        ops = [c['op'] for c in scene.display_list()]
        # two oriented edges: line, label, arrow each
        assert ops == ['line', 'text', 'polygon'] * 2

    def test_render_svg_includes_nodes_and_labels(self, scene):
        svg = scene.render_svg(300, 300)
        assert svg.count('<circle') == 3
        assert 'A</text>' in svg
        assert '1</text>' in svg
