"""The game loop that moves from screen to screen, and the command entry."""

from __future__ import annotations

import argparse
import curses
from typing import Callable

from .canvas import Canvas, CursesCanvas
from .challenges import blacksmith_screen, troll_bridge_screen, wizard_screen
from .fight import credits_screen, final_fight_screen
from .screens import (
    error_screen,
    home_screen,
    menu_game_screen,
    menu_screen,
    story_start_screen,
)
from .state import GameState, Route

Screen = Callable[[Canvas, GameState], None]

_SCREENS: dict[Route, Screen] = {
    Route.MENU: menu_screen,
    # No account store is kept, so signing in leads straight home.
    Route.LOGIN: home_screen,
    Route.HOME: home_screen,
    Route.HOME_AFTER_LOGIN: home_screen,
    Route.STORY_START: story_start_screen,
    Route.GAME_MENU: menu_game_screen,
    Route.BLACKSMITH: blacksmith_screen,
    Route.WIZARD: wizard_screen,
    Route.TROLL_BRIDGE: troll_bridge_screen,
    Route.FINAL_FIGHT: final_fight_screen,
    Route.CREDITS: credits_screen,
}


def next_screen(state: GameState) -> Screen | None:
    """Return the screen for the current route, or None once the game is over."""
    if state.route < 0:
        return None
    route = Route(state.route)
    if route is Route.BLACKSMITH and state.passed_blacksmith:
        return error_screen
    if route is Route.WIZARD and state.passed_wizard:
        return error_screen
    return _SCREENS[route]


def run(canvas: Canvas, state: GameState) -> None:
    """Show screens one after another until a screen ends the game."""
    while (screen := next_screen(state)) is not None:
        canvas.clear()
        canvas.refresh()
        screen(canvas, state)


def _play(stdscr) -> None:
    run(CursesCanvas(stdscr), GameState())


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="puebloquest",
        description="A terminal role-playing adventure to free the village.",
    )
    parser.parse_args(argv)
    curses.wrapper(_play)
    return 0