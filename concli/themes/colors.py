# Concli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and Rich theme used by Concli help and error output.

`OneColors` exposes hex colors (plus `_b` bold variants) that can be dropped
straight into Rich markup, e.g. `f"[{OneColors.DARK_RED}]error[/]"`.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette with bold variants."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    DARK_RED_b = f"bold {DARK_RED}"
    LIGHT_RED_b = f"bold {LIGHT_RED}"
    GREEN_b = f"bold {GREEN}"
    DARK_YELLOW_b = f"bold {DARK_YELLOW}"
    LIGHT_YELLOW_b = f"bold {LIGHT_YELLOW}"
    BLUE_b = f"bold {BLUE}"
    MAGENTA_b = f"bold {MAGENTA}"
    CYAN_b = f"bold {CYAN}"


def get_concli_theme() -> Theme:
    """Named styles referenced from help and error markup."""
    return Theme(
        {
            "concli.usage": OneColors.WHITE,
            "concli.heading": OneColors.CYAN_b,
            "concli.flag": OneColors.BLUE,
            "concli.argument": OneColors.GREEN,
            "concli.error": OneColors.DARK_RED_b,
            "concli.hint": OneColors.COMMENT_GREY,
        }
    )
