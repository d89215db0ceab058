"""
Main NiceGUI application for the weighted graph editor.

Renders the GraphScene as SVG inside ui.interactive_image and feeds mouse
events back into it:
- left click on an edge: edit its cost
- right click on an edge: delete it
- drag a node: move it (incident edges follow)
- shift + drag from a node onto another node: connect them
- shift + click on empty space: add a node
"""

import logging
import sys

from dotenv import load_dotenv
from nicegui import ui

load_dotenv()

from src.components import render_cost_dialog
from src.config import get_edge_style, is_oriented_default
from src.edge.events import from_dom
from src.editor import GraphEditor

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

CANVAS_WIDTH = 900
CANVAS_HEIGHT = 600


def seed_demo_graph(editor: GraphEditor) -> None:
    """Small weighted graph to start from."""
    a = editor.add_node(150, 150, 'A')
    b = editor.add_node(450, 120, 'B')
    c = editor.add_node(300, 400, 'C')
    d = editor.add_node(650, 350, 'D')
    editor.connect(a.id, b.id, 4)
    editor.connect(b.id, c.id, 2)
    editor.connect(a.id, c.id, 7)
    editor.connect(b.id, d.id, 5)
    editor.connect(c.id, d.id, 1)


def svg_content(editor: GraphEditor) -> str:
    """Scene SVG without the XML declaration, so it can be nested in the image overlay."""
    svg = editor.scene.render_svg(CANVAS_WIDTH, CANVAS_HEIGHT)
    if svg.startswith('<?xml'):
        svg = svg.split('?>', 1)[1]
    return svg.strip()


@ui.page('/')
def main_page():
    editor = GraphEditor(oriented=is_oriented_default(), style=get_edge_style())
    seed_demo_graph(editor)

    state = {
        'dragging_node_id': None,
        'connect_from': None,
    }

    def refresh():
        editor.scene.take_dirty()
        canvas.set_content(svg_content(editor))

    def open_cost_dialog(edge):
        title = f"{edge.source_node().label or '?'} → {edge.destination_node().label or '?'}"

        def on_save(value):
            try:
                editor.apply_cost(edge, value)
            except ValueError as e:
                ui.notify(f'Cost not changed: {e}', type='negative', position='bottom')

        render_cost_dialog(title, edge.cost(), on_save).open()

    editor.set_on_cost_dialog(open_cost_dialog)

    def handle_mouse(e):
        x, y = e.image_x, e.image_y

        if e.type == 'mousedown':
            node = editor.scene.node_at(x, y)
            if e.button == 0 and node is not None:
                if e.shift:
                    state['connect_from'] = node.id
                else:
                    state['dragging_node_id'] = node.id
                return
            if e.button == 0 and e.shift:
                editor.add_node(x, y, f'N{len(editor.graph.nodes()) + 1}')
                return

        elif e.type == 'mousemove':
            if state['dragging_node_id']:
                editor.move_node(state['dragging_node_id'], x, y)
            return

        elif e.type == 'mouseup':
            if state['dragging_node_id']:
                state['dragging_node_id'] = None
                return
            if state['connect_from']:
                source_id = state['connect_from']
                state['connect_from'] = None
                target = editor.scene.node_at(x, y)
                if target is not None and target.id != source_id:
                    editor.connect(source_id, target.id)
                return

        event = from_dom(e.type, e.button, x, y)
        if event is None:
            return
        try:
            editor.handle_pointer(event)
        except Exception as ex:
            logger.error(f"Pointer handling failed: {ex}")
            ui.notify(f'Edit failed: {ex}', type='negative', position='bottom')
        if editor.scene.take_dirty() is not None:
            canvas.set_content(svg_content(editor))

    def toggle_oriented(e):
        editor.set_oriented(e.value)

    with ui.column().classes('w-full items-center gap-2 p-4'):
        with ui.row().classes('items-center gap-4'):
            ui.label('Weighted Graph Editor').classes('text-xl font-bold')
            ui.switch('Oriented', value=editor.is_oriented(), on_change=toggle_oriented)
        ui.label('Left click edge: edit cost · Right click edge: delete · '
                 'Drag node: move · Shift+drag node→node: connect · Shift+click: add node').classes('text-xs text-gray-500')

        canvas = ui.interactive_image(
            size=(CANVAS_WIDTH, CANVAS_HEIGHT),
            content=svg_content(editor),
            on_mouse=handle_mouse,
            events=['mousedown', 'mouseup', 'mousemove'],
            cross=False,
        ).classes('border border-slate-300')
        canvas.on('contextmenu.prevent', lambda: None)

    editor.set_on_change(refresh)


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='Graph Editor',
        port=8081,
        reload=not getattr(sys, 'frozen', False),
    )
