"""Drawing surfaces: an in-memory grid and a curses-backed terminal."""

from __future__ import annotations

import curses
import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

KEY_ENTER = 10
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261


class Color(Enum):
    """Foreground colours; the background is always black."""

    DEFAULT = "default"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"


class Glyph(Enum):
    """Line-drawing characters, valued by their Unicode look-alikes."""

    ULCORNER = "┌"
    URCORNER = "┐"
    LLCORNER = "└"
    LRCORNER = "┘"
    HLINE = "─"
    VLINE = "│"
    BTEE = "┴"
    DIAMOND = "◆"


@dataclass(frozen=True)
class Style:
    """How a cell is shown."""

    color: Color = Color.DEFAULT
    bold: bool = False
    standout: bool = False
    reverse: bool = False


PLAIN = Style()

Char = Union[str, Glyph]


class Canvas(ABC):
    """A rectangular surface that screens draw on and read keys from."""

    @property
    @abstractmethod
    def height(self) -> int: ...

    @property
    @abstractmethod
    def width(self) -> int: ...

    @abstractmethod
    def put(self, y: int, x: int, ch: Char, style: Style = PLAIN) -> None:
        """Write one character; positions outside the surface are ignored."""

    def text(self, y: int, x: int, s: str, style: Style = PLAIN) -> None:
        """Write a string starting at (y, x)."""
        for offset, ch in enumerate(s):
            self.put(y, x + offset, ch, style)

    def box(self) -> None:
        """Draw a border around the surface."""
        bottom, right = self.height - 1, self.width - 1
        for x in range(1, right):
            self.put(0, x, Glyph.HLINE)
            self.put(bottom, x, Glyph.HLINE)
        for y in range(1, bottom):
            self.put(y, 0, Glyph.VLINE)
            self.put(y, right, Glyph.VLINE)
        self.put(0, 0, Glyph.ULCORNER)
        self.put(0, right, Glyph.URCORNER)
        self.put(bottom, 0, Glyph.LLCORNER)
        self.put(bottom, right, Glyph.LRCORNER)

    @abstractmethod
    def clear(self) -> None:
        """Blank the whole surface."""

    @abstractmethod
    def refresh(self) -> None:
        """Show what has been drawn."""

    @abstractmethod
    def get_key(self) -> int:
        """Wait for a key and return its code."""

    @abstractmethod
    def pause(self, ms: int) -> None:
        """Wait for the given number of milliseconds."""

    @abstractmethod
    def window(self, height: int, width: int, y: int, x: int) -> "Canvas":
        """Open a new surface of the given size at (y, x)."""


def _keycode(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"a key must be a single character, got {key!r}")
        return ord(key)
    return key


class GridCanvas(Canvas):
    """An in-memory surface fed by a scripted sequence of keys."""

    def __init__(self, height: int, width: int, keys: Iterable[int | str] = ()):
        if height <= 0 or width <= 0:
            raise ValueError("a canvas needs a positive height and width")
        self._height = height
        self._width = width
        self._cells = [[(" ", PLAIN)] * width for _ in range(height)]
        self._keys = deque(_keycode(k) for k in keys)
        self._parent: GridCanvas | None = None
        self._origin = (0, 0)
        self.paused_ms = 0
        self.refreshes = 0

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    def put(self, y: int, x: int, ch: Char, style: Style = PLAIN) -> None:
        shown = ch.value if isinstance(ch, Glyph) else ch
        if len(shown) != 1:
            raise ValueError(f"put writes one character, got {ch!r}")
        if not (0 <= y < self._height and 0 <= x < self._width):
            return
        self._cells[y][x] = (shown, style)
        if self._parent is not None:
            oy, ox = self._origin
            self._parent.put(y + oy, x + ox, shown, style)

    def clear(self) -> None:
        for y in range(self._height):
            for x in range(self._width):
                self.put(y, x, " ")

    def refresh(self) -> None:
        self.refreshes += 1

    def get_key(self) -> int:
        if not self._keys:
            raise EOFError("no more keys to read")
        return self._keys.popleft()

    def pause(self, ms: int) -> None:
        self.paused_ms += ms
        if self._parent is not None:
            self._parent.pause(ms)

    def window(self, height: int, width: int, y: int, x: int) -> "GridCanvas":
        child = GridCanvas(height, width)
        child._keys = self._keys
        child._parent = self
        child._origin = (y, x)
        return child

    def _cell(self, y: int, x: int) -> tuple[str, Style]:
        if not (0 <= y < self._height and 0 <= x < self._width):
            raise IndexError(f"({y}, {x}) is outside the canvas")
        return self._cells[y][x]

    def char_at(self, y: int, x: int) -> str:
        """Return the character shown at (y, x)."""
        return self._cell(y, x)[0]

    def style_at(self, y: int, x: int) -> Style:
        """Return the style of the cell at (y, x)."""
        return self._cell(y, x)[1]

    def row(self, y: int) -> str:
        """Return a whole row as a string."""
        if not 0 <= y < self._height:
            raise IndexError(f"row {y} is outside the canvas")
        return "".join(ch for ch, _ in self._cells[y])


def _curses_color(color: Color) -> int:
    return {
        Color.GREEN: curses.COLOR_GREEN,
        Color.YELLOW: curses.COLOR_YELLOW,
        Color.RED: curses.COLOR_RED,
        Color.CYAN: curses.COLOR_CYAN,
        Color.MAGENTA: curses.COLOR_MAGENTA,
    }[color]


def _acs(glyph: Glyph) -> int:
    return {
        Glyph.ULCORNER: curses.ACS_ULCORNER,
        Glyph.URCORNER: curses.ACS_URCORNER,
        Glyph.LLCORNER: curses.ACS_LLCORNER,
        Glyph.LRCORNER: curses.ACS_LRCORNER,
        Glyph.HLINE: curses.ACS_HLINE,
        Glyph.VLINE: curses.ACS_VLINE,
        Glyph.BTEE: curses.ACS_BTEE,
        Glyph.DIAMOND: curses.ACS_DIAMOND,
    }[glyph]


class CursesCanvas(Canvas):
    """A surface backed by a curses window."""

    _pairs: dict[Color, int] = {}

    def __init__(self, window):
        self._win = window
        window.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    @property
    def height(self) -> int:
        return self._win.getmaxyx()[0]

    @property
    def width(self) -> int:
        return self._win.getmaxyx()[1]

    def _attr(self, style: Style) -> int:
        attr = 0
        if style.color is not Color.DEFAULT and curses.has_colors():
            pair = self._pairs.get(style.color)
            if pair is None:
                pair = len(self._pairs) + 1
                curses.init_pair(pair, _curses_color(style.color), curses.COLOR_BLACK)
                self._pairs[style.color] = pair
            attr |= curses.color_pair(pair)
        if style.bold:
            attr |= curses.A_BOLD
        if style.standout:
            attr |= curses.A_STANDOUT
        if style.reverse:
            attr |= curses.A_REVERSE
        return attr

    def put(self, y: int, x: int, ch: Char, style: Style = PLAIN) -> None:
        if y < 0 or x < 0:
            return
        try:
            if isinstance(ch, Glyph):
                self._win.addch(y, x, _acs(ch), self._attr(style))
            else:
                self._win.addstr(y, x, ch, self._attr(style))
        except curses.error:
            pass

    def text(self, y: int, x: int, s: str, style: Style = PLAIN) -> None:
        if y < 0 or x < 0:
            return
        try:
            self._win.addstr(y, x, s, self._attr(style))
        except curses.error:
            pass

    def box(self) -> None:
        self._win.box()

    def clear(self) -> None:
        self._win.clear()

    def refresh(self) -> None:
        self._win.refresh()

    def get_key(self) -> int:
        return self._win.getch()

    def pause(self, ms: int) -> None:
        time.sleep(ms / 1000)

    def window(self, height: int, width: int, y: int, x: int) -> "CursesCanvas":
        return CursesCanvas(curses.newwin(height, width, y, x))