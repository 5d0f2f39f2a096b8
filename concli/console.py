# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Concli CLI applications."""
from rich.console import Console

from concli.themes import get_concli_theme

console = Console(color_system="truecolor", theme=get_concli_theme())


def get_console(no_color: bool = False) -> Console:
    """Return the shared console, or a colorless one when `no_color` is set."""
    if no_color:
        return Console(no_color=True, highlight=False, theme=get_concli_theme())
    return console
