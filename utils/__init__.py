"""utils package – Reusable drawing helpers."""

from .helpers import draw_text, draw_world, draw_end_screen
