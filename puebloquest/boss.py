"""The final boss's sprite and the attacks it throws at the hero."""

from __future__ import annotations

from typing import Iterable

from .canvas import Canvas, Color, Glyph, Style
from .state import GameState

FRAME_MS = 80
ARROWS_START = (6, 45)
LAVA_START = (6, 35)
ATTACK_STOP_X = 10

_RED_BOLD = Style(color=Color.RED, bold=True)
_GREEN_BOLD = Style(color=Color.GREEN, bold=True)
_YELLOW_BOLD = Style(color=Color.YELLOW, bold=True)
_RED_STANDOUT = Style(color=Color.RED, standout=True)

ALIVE_EYES = "   (0)   (0)"
DEAD_EYES = "    X     X "

# (dy, dx, text) lines grouped by colour, in drawing order.
_FANGS = (
    (3, 0, " /\\         /\\ "),
    (4, 0, "/__\\/\\___/\\/__\\ "),
)

_HEAD = (
    (0, 0, "  /\\_______/\\ "),
    (1, 0, "  |___   ___|"),
    (5, 0, "\\_____________/"),
    (6, -3, "/\\/____\\______/___\\/\\"),
)

_CLAWS = (
    (7, -4, "( ` \\              / ' )"),
    (8, -4, "( `  )____________(  ' )"),
)

# One arrow per row: a shaft of dashes between a double head and a single tail.
_ARROW = ((0, "-"), (-1, "-"), (-2, "-"), (-3, "-"), (-4, "-"),
          (-5, "<"), (-6, "<"), (1, "<"))
_ARROWS = tuple((dy, dx, ch) for dy in range(4) for dx, ch in _ARROW)

_LAVA = (
    (2, -1),
    (1, 0), (2, 0), (3, 0), (4, 0),
    *((dy, dx) for dx in range(1, 11) for dy in range(5)),
)


def _stamp(canvas: Canvas, y: int, x: int, cells: Iterable[tuple],
           style: Style) -> None:
    for dy, dx, ch in cells:
        canvas.put(y + dy, x + dx, ch, style)


def _blank(canvas: Canvas, y: int, x: int, cells: Iterable[tuple]) -> None:
    for dy, dx, *_ in cells:
        canvas.put(y + dy, x + dx, " ")


def draw_boss(canvas: Canvas, y: int, x: int, dead: bool = False) -> None:
    """Draw the beast; its eyes become crosses once it is dead."""
    canvas.text(y + 2, x, DEAD_EYES if dead else ALIVE_EYES, _RED_BOLD)
    for dy, dx, line in _FANGS:
        canvas.text(y + dy, x + dx, line, _RED_BOLD)
    for dy, dx, line in _HEAD:
        canvas.text(y + dy, x + dx, line, _GREEN_BOLD)
    for dy, dx, line in _CLAWS:
        canvas.text(y + dy, x + dx, line, _YELLOW_BOLD)


def draw_cursed_arrows(canvas: Canvas, y: int, x: int) -> None:
    """Draw a volley of four arrows flying left, the top one on row y."""
    _stamp(canvas, y, x, _ARROWS, _RED_BOLD)


def erase_cursed_arrows(canvas: Canvas, y: int, x: int) -> None:
    """Blank a volley of arrows drawn at (y, x)."""
    _blank(canvas, y, x, _ARROWS)


def _fly_left(canvas: Canvas, start: tuple[int, int], draw, erase) -> None:
    y, x = start
    while True:
        draw(canvas, y, x)
        canvas.refresh()
        canvas.pause(FRAME_MS)
        erase(canvas, y, x)
        canvas.refresh()
        x -= 1
        if x == ATTACK_STOP_X:
            break


def attack_cursed_arrows(canvas: Canvas, state: GameState) -> int:
    """Shoot the arrows at the hero and return the hero's remaining life."""
    _fly_left(canvas, ARROWS_START, draw_cursed_arrows, erase_cursed_arrows)
    return state.cursed_arrows_hit()


def draw_lava_breath(canvas: Canvas, y: int, x: int) -> None:
    """Draw a blast of lava whose left tip is at (y + 2, x - 1)."""
    for dy, dx in _LAVA:
        canvas.put(y + dy, x + dx, Glyph.DIAMOND, _RED_STANDOUT)


def erase_lava_breath(canvas: Canvas, y: int, x: int) -> None:
    """Blank a lava blast drawn at (y, x)."""
    _blank(canvas, y, x, _LAVA)


def lava_breath_attack(canvas: Canvas, state: GameState) -> int:
    """Breathe lava at the hero and return the hero's remaining life."""
    _fly_left(canvas, LAVA_START, draw_lava_breath, erase_lava_breath)
    return state.lava_breath_hit()