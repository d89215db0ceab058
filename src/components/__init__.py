"""
Reusable UI Components
"""

from .cost_dialog import render_cost_dialog

__all__ = ['render_cost_dialog']
