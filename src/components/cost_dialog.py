"""
Cost Dialog Component

A small modal for editing the weight of an edge:
- Shows which nodes the edge connects
- Integer input prefilled with the current cost
- Save/Cancel buttons
"""

from nicegui import ui
from typing import Any, Callable


def render_cost_dialog(
    title: str,
    initial_cost: int,
    on_save: Callable[[Any], None],
) -> 'ui.dialog':
    """
    Create and return a cost edit dialog.

    Args:
        title: Header text, e.g. "A → B"
        initial_cost: Current cost of the edge
        on_save: Called with the entered value when the user saves

    Returns:
        The dialog instance (call dialog.open() to show)
    """
    dialog = ui.dialog()

    with dialog:
        with ui.card().classes('w-72'):
            ui.label('Edge cost').classes('text-sm text-gray-400')
            ui.label(title).classes('text-lg font-bold')

            cost_input = ui.number(value=initial_cost, step=1, format='%d').props('dense outlined autofocus').classes('w-full')

            def save():
                on_save(cost_input.value)
                dialog.close()

            cost_input.on('keydown.enter', save)

            with ui.row().classes('w-full justify-end gap-2'):
                ui.button('Cancel', on_click=dialog.close).props('flat color=grey')
                ui.button('Save', on_click=save).props('color=primary')

    return dialog
