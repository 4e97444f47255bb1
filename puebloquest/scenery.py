"""Scenery and supporting characters drawn onto a canvas."""

from __future__ import annotations

from typing import Iterable, Sequence

from .canvas import PLAIN, Canvas, Color, Glyph, Style

UL = Glyph.ULCORNER
UR = Glyph.URCORNER
LL = Glyph.LLCORNER
LR = Glyph.LRCORNER
H = Glyph.HLINE
V = Glyph.VLINE
BTEE = Glyph.BTEE
DIAMOND = Glyph.DIAMOND

Cell = tuple  # (dy, dx, char)

TREE = (
    "        ^",
    "       ^^^",
    "      ^^^^^",
    "     ^^^^^^^",
    "    ^^^^^^^^^",
    "   ^^^^^^^^^^^",
    "       |||",
    "       |||",
)

CASTLE = (
    "        T~~            T~~",
    "        |              |",
    "       / \\            / \\",
    "      /   \\          /   \\",
    "     /     \\        /     \\",
    "    /_______\\      /_______\\",
    "    |       |      |       |",
    "    |  []   |      |  []   |",
    "    |       |      |       |",
    "    |_______|      |_______|",
    "    |   |   |      |   |   |",
    "    |   |   |      |   |   |",
    "    |___|___|      |___|___|",
)

HOUSE = (
    "      /\\",
    "     /  \\",
    "    /    \\",
    "   /______\\",
    "  |        |",
    "  |  [] [] |",
    "  |   __   |",
    "  |__|__|__|",
)


def _shift(cells: Iterable[Cell], dy: int) -> tuple[Cell, ...]:
    return tuple((y + dy, x, ch) for y, x, ch in cells)


_BODY = (
    (5, 6, H), (5, -1, H),
    (7, 0, LL), (7, 1, H), (7, 2, H), (7, 3, H), (7, 4, H), (7, 5, LR),
)

_LEGS = (
    (8, 0, V), (8, 5, V), (9, 0, V), (9, 5, V),
    (10, 0, LL), (10, 1, H), (10, 2, H), (9, 2, "_"), (9, 3, V),
    (10, 3, BTEE), (9, 4, "_"), (10, 5, "_"), (10, 4, H), (10, 5, H),
    (10, 6, LR),
)

_SHIELD = (
    (4, -2, H), (4, -1, H), (4, -3, H), (4, -4, UL), (4, 0, H), (4, 1, UR),
    (5, 1, V), (6, 1, V), (7, 1, "/"),
    (5, -4, V), (6, -4, V), (7, -4, "\\"),
    (7, 0, H), (7, -2, H), (7, -1, H), (7, -3, H),
    (5, -1, DIAMOND), (5, -2, DIAMOND), (6, -1, DIAMOND), (6, -2, DIAMOND),
)

_TROLL = (
    (0, 2, UL), (0, 4, H), (0, 5, H), (0, 6, H),
    (1, 1, V), (1, 8, V), (2, 0, LL), (2, 9, LR),
    (0, 3, "\\"), (0, 7, "/"),
    (1, 3, "O"), (1, 7, "O"),
    (1, 4, UL), (1, 5, H), (1, 6, H), (1, 6, UR),
    (2, 1, LL), (2, 8, LR),
    (3, 1, V), (3, 8, V), (4, 0, LL), (4, 9, LR),
    *((4, dx, H) for dx in range(1, 9)),
    (5, 2, V), (5, 7, V), (6, 1, LL), (6, 3, LR), (6, 6, LL), (6, 8, LR),
    (3, -1, V), (3, 10, V), (4, -1, LL), (4, 10, LR),
)

_SOLDIER = (
    (0, 2, "O"),
    (1, 1, "/"), (1, 4, "\\"), (1, 2, "|"),
    (2, 0, "/"), (2, 1, " "), (2, 2, "_"), (2, 3, "_"), (2, 4, "_"), (2, 5, "\\"),
    (3, 2, "0"), (3, 4, "0"),
    (4, 0, LL), (4, 5, LR),
    *_BODY,
    *_LEGS,
    *_SHIELD,
    (5, 7, " "), (4, 8, UR), (5, 7, H), (5, 8, H), (5, 9, LR),
    (4, 8, UR), (4, 9, UL),
    (3, 8, V), (2, 8, V), (1, 8, V), (0, 8, UL),
    (3, 9, V), (2, 9, V), (1, 9, V), (0, 9, UR),
)

_BLACKSMITH = (
    (0, 0, UL), (0, 1, H), (0, 2, H), (0, 3, H), (0, 4, H), (0, 5, UR),
    (1, 0, V), (1, 5, V),
    (1, 1, H), (1, 2, H), (1, 3, H), (1, 4, H),
    (2, 2, "0"), (2, 4, "0"),
    (3, 1, H), (3, 2, H), (3, 3, "_"), (3, 4, H), (3, 5, H),
    (4, 0, LL), (4, 5, LR),
    *_BODY,
    (6, 5, V), (6, 7, V), (7, 7, LR),
    *_LEGS,
    *_SHIELD,
)

_WIZARD_ROBE = (
    (2, 2, "/"), (2, 3, H), (2, 4, "\\"), (1, 3, "^"),
    *((3, dx, H) for dx in range(8)),
    (7, 8, V), (6, 8, V), (5, 8, DIAMOND),
    *_shift(_BODY, 2),
    *_shift(_LEGS, 2),
    (4, 2, "@"), (4, 4, "@"),
)

_WIZARD_SKIN = (
    (5, 1, H), (5, 2, H), (5, 3, "_"), (5, 4, H), (5, 5, H),
    (8, 5, V), (8, 7, V), (9, 7, LR),
    (8, -2, V), (8, 0, V), (9, -2, LL),
    (6, 0, LL), (6, 5, LR),
)

_CARD_FRAME = (
    (0, -2, H), (0, -1, H), (0, -3, H), (0, -4, UL), (0, 0, H), (0, 1, UR),
    (1, 1, V), (2, 1, V), (3, 1, LR),
    (1, -4, V), (2, -4, V), (3, -4, LL),
    (3, 0, H), (3, -2, H), (3, -1, H), (3, -3, H),
)

_CARD_FACE = (
    (1, -1, DIAMOND), (1, -2, DIAMOND), (2, -1, DIAMOND), (2, -2, DIAMOND),
)


def _stamp(canvas: Canvas, y: int, x: int, cells: Iterable[Cell],
           style: Style = PLAIN) -> None:
    for dy, dx, ch in cells:
        canvas.put(y + dy, x + dx, ch, style)


def _lines(canvas: Canvas, y: int, x: int, lines: Sequence[str]) -> None:
    for dy, line in enumerate(lines):
        canvas.text(y + dy, x, line)


def draw_tree(canvas: Canvas, y: int, x: int) -> None:
    """Draw a pine tree with its top-left corner at (y, x)."""
    _lines(canvas, y, x, TREE)


def draw_castle(canvas: Canvas, y: int, x: int) -> None:
    """Draw a castle of two towers."""
    _lines(canvas, y, x, CASTLE)


def draw_house(canvas: Canvas, y: int, x: int) -> None:
    """Draw a small house."""
    _lines(canvas, y, x, HOUSE)


def draw_troll(canvas: Canvas, y: int, x: int) -> None:
    """Draw the bridge troll."""
    _stamp(canvas, y, x, _TROLL)


def draw_soldier(canvas: Canvas, y: int, x: int) -> None:
    """Draw a soldier with shield and sword."""
    _stamp(canvas, y, x, _SOLDIER)


def draw_wizard(canvas: Canvas, y: int, x: int) -> None:
    """Draw the wizard in magenta robes with a yellow face and hands."""
    _stamp(canvas, y, x, _WIZARD_ROBE, Style(color=Color.MAGENTA))
    _stamp(canvas, y, x, _WIZARD_SKIN, Style(color=Color.YELLOW))


def draw_card(canvas: Canvas, y: int, x: int) -> None:
    """Draw a face-down card with a red centre."""
    _stamp(canvas, y, x, _CARD_FRAME)
    _stamp(canvas, y, x, _CARD_FACE, Style(color=Color.RED))


def draw_blacksmith(canvas: Canvas, y: int, x: int) -> None:
    """Draw the bare-headed blacksmith holding a shield."""
    _stamp(canvas, y, x, _BLACKSMITH)