"""The hero's sprite and the hero's attacks against the boss."""

from __future__ import annotations

from typing import Iterable

from .canvas import KEY_LEFT, KEY_RIGHT, PLAIN, Canvas, Color, Glyph, Style
from .state import GameState

UL = Glyph.ULCORNER
UR = Glyph.URCORNER
LL = Glyph.LLCORNER
LR = Glyph.LRCORNER
H = Glyph.HLINE
V = Glyph.VLINE
BTEE = Glyph.BTEE
DIAMOND = Glyph.DIAMOND

STATIC = "static"
DYNAMIC = "dynamic"

MIN_X = 2
MAX_X = 70
FRAME_MS = 80
ATTACK_FRAMES = 30

SWORD_START = (9, 20)
FIRE_BALL_START = (6, 20)

_GREEN = Style(color=Color.GREEN)
_GREEN_STANDOUT = Style(color=Color.GREEN, standout=True)
_YELLOW = Style(color=Color.YELLOW)
_RED_STANDOUT = Style(color=Color.RED, standout=True)

Cell = tuple  # (dy, dx, char)

_HAT = (
    (0, 0, UL), (0, 1, H), (0, 2, H), (0, 3, H), (0, 4, H), (0, 5, UR),
    (1, -1, LL), *((1, dx, H) for dx in range(6)), (1, 6, LR),
)

_HEAD = (
    (2, 0, V), (2, 3, "_"), (2, 5, V),
    (3, 0, LL), (3, 5, LR),
)

_TORSO = (
    (3, 6, H), (3, -1, H),
    (5, 0, LL), (5, 1, H), (5, 2, H), (5, 3, H), (5, 4, H), (5, 5, LR),
    (4, -2, V), (4, 0, V), (5, -2, LL),
    (4, 5, V), (4, 7, V), (5, 7, LR),
)

_LEGS = (
    (6, 0, V), (6, 5, V), (7, 0, V), (7, 5, V),
    (8, 0, LL), (8, 1, H), (8, 2, H), (7, 2, "_"), (7, 3, V),
    (8, 3, BTEE), (7, 4, "_"), (8, 5, "_"), (8, 4, H), (8, 5, H),
    (8, 6, LR),
)

_EYES = ((2, 2, "0"), (2, 4, "0"))

_SWORD_HAND = (
    (5, 7, " "), (4, 8, UR), (5, 7, H), (5, 8, H), (5, 9, LR),
    (4, 8, UR), (4, 9, UL),
)

_BLADE = (
    (3, 8, V), (2, 8, V), (1, 8, V), (0, 8, UL),
    (3, 9, V), (2, 9, V), (1, 9, V), (0, 9, UR),
)

_SHIELD_BODY = ((5, 0, " "), (7, 0, " "), (6, 0, " "))

_SHIELD_SHOULDER = ((4, -2, " "), (5, -2, " "), (3, -2, UL))

_SHIELD_FRAME = (
    (4, -2, H), (4, -1, H), (4, -3, H), (4, -4, UL), (4, 0, H), (4, 1, UR),
    (5, 1, V), (6, 1, V), (7, 1, "/"),
    (5, -4, V), (6, -4, V), (7, -4, "\\"),
    (7, 0, H), (7, -2, H), (7, -1, H), (7, -3, H),
)

_SHIELD_FACE = (
    (5, -1, DIAMOND), (5, -2, DIAMOND), (6, -1, DIAMOND), (6, -2, DIAMOND),
)

_SWORD = (
    (0, 0, UL), (-1, 0, LL), (0, -1, H), (-1, -1, H), (0, 0, V), (-1, 0, V),
    *((-1, dx, H) for dx in range(1, 8)),
    *((0, dx, H) for dx in range(1, 8)),
    (-1, 8, UR), (0, 8, LR),
)

_BALL = (
    (2, -1, DIAMOND),
    (1, 0, DIAMOND), (2, 0, DIAMOND), (3, 0, DIAMOND),
    *((dy, dx, DIAMOND) for dx in range(1, 5) for dy in range(5)),
    *((dy, dx, DIAMOND) for dx in (5, 6) for dy in range(1, 4)),
)


def _parts(has_sword: bool, has_shield: bool) -> list[tuple[tuple[Cell, ...], Style]]:
    parts = [
        (_HAT, _GREEN_STANDOUT),
        (_HEAD, PLAIN),
        (_TORSO, _YELLOW),
        (_LEGS, PLAIN),
        (_EYES, _YELLOW),
    ]
    if has_sword:
        parts += [(_SWORD_HAND, PLAIN), (_BLADE, _GREEN)]
    if has_shield:
        parts += [
            (_SHIELD_BODY, PLAIN),
            (_SHIELD_SHOULDER, PLAIN),
            (_SHIELD_FRAME, _GREEN_STANDOUT),
            (_SHIELD_FACE, _GREEN),
        ]
    return parts


def _stamp(canvas: Canvas, y: int, x: int, cells: Iterable[Cell],
           style: Style = PLAIN) -> None:
    for dy, dx, ch in cells:
        canvas.put(y + dy, x + dx, ch, style)


def _blank(ch) -> str:
    # Erasing the hero leaves the underscores of mouth and feet and the
    # shield's slash behind, as the sprite always has.
    return ch if ch in ("_", "/") else " "


def _erase(canvas: Canvas, y: int, x: int, cells: Iterable[Cell]) -> None:
    _stamp(canvas, y, x, ((dy, dx, _blank(ch)) for dy, dx, ch in cells))


def draw_player(canvas: Canvas, y: int, x: int, has_sword: bool,
                has_shield: bool) -> None:
    """Draw the hero with the hat's top-left corner at (y, x)."""
    for cells, style in _parts(has_sword, has_shield):
        _stamp(canvas, y, x, cells, style)


def erase_player(canvas: Canvas, y: int, x: int, has_sword: bool,
                 has_shield: bool) -> None:
    """Blank the cells the hero occupies at (y, x)."""
    for cells, _ in _parts(has_sword, has_shield):
        _erase(canvas, y, x, cells)


def player(canvas: Canvas, state: GameState, y: int, x: int,
           mode: str = STATIC) -> int:
    """Show the hero, or let the arrow keys walk it until 'q'; return its column."""
    if mode == STATIC:
        draw_player(canvas, y, x, state.has_sword, state.has_shield)
        return x
    if mode != DYNAMIC:
        raise ValueError(f"unknown player mode {mode!r}")
    while (key := canvas.get_key()) != ord("q"):
        if key == KEY_RIGHT and x != MAX_X:
            erase_player(canvas, y, x - 1, state.has_sword, state.has_shield)
            draw_player(canvas, y, x, state.has_sword, state.has_shield)
            x += 1
            canvas.refresh()
        elif key == KEY_LEFT and x != MIN_X:
            erase_player(canvas, y, x + 1, state.has_sword, state.has_shield)
            draw_player(canvas, y, x, state.has_sword, state.has_shield)
            x -= 1
            canvas.refresh()
    return x


def draw_sword(canvas: Canvas, y: int, x: int) -> None:
    """Draw a flying sword whose hilt is at (y, x)."""
    _stamp(canvas, y, x, _SWORD)


def erase_sword(canvas: Canvas, y: int, x: int) -> None:
    """Blank a flying sword drawn at (y, x)."""
    _stamp(canvas, y, x, ((dy, dx, " ") for dy, dx, _ in _SWORD))


def draw_ball(canvas: Canvas, y: int, x: int) -> None:
    """Draw a fire ball at (y, x)."""
    _stamp(canvas, y, x, _BALL, _RED_STANDOUT)


def erase_ball(canvas: Canvas, y: int, x: int) -> None:
    """Blank a fire ball drawn at (y, x)."""
    _stamp(canvas, y, x, ((dy, dx, " ") for dy, dx, _ in _BALL))


def _fly(canvas: Canvas, start: tuple[int, int], draw, erase) -> None:
    y, x = start
    for step in range(ATTACK_FRAMES):
        draw(canvas, y, x + step)
        canvas.refresh()
        canvas.pause(FRAME_MS)
        erase(canvas, y, x + step)
        canvas.refresh()


def sword_stroke(canvas: Canvas, state: GameState) -> int:
    """Throw the sword across the screen and return the boss's remaining life."""
    _fly(canvas, SWORD_START, draw_sword, erase_sword)
    return state.sword_stroke_hit()


def fire_ball(canvas: Canvas, state: GameState) -> int:
    """Cast a fire ball across the screen and return the boss's remaining life."""
    _fly(canvas, FIRE_BALL_START, draw_ball, erase_ball)
    return state.fire_ball_hit()