"""Text front end: board renderer and console game loop."""

from .console import ConsoleGame, State
from .render import render_board

__all__ = [
    'ConsoleGame',
    'State',
    'render_board',
]
