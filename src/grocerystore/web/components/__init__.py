"""UI components for GroceryStore."""
from .navbar import render_navbar
from .home import render_home
from .inventory_list import render_inventory_list
from .inventory_form import render_inventory_form
from .feedback import render_feedback, render_flash

__all__ = [
    'render_navbar',
    'render_home',
    'render_inventory_list',
    'render_inventory_form',
    'render_feedback',
    'render_flash'
]
