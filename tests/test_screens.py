import pytest

from puebloquest.canvas import KEY_DOWN, KEY_ENTER, KEY_UP, Color, Glyph, GridCanvas
from puebloquest.screens import (
    ALREADY_VISITED,
    START_OPTION,
    USER_SAVED,
    create_user_screen,
    error_screen,
    home_screen,
    menu_game_screen,
    menu_screen,
    save_prompt,
    story_start_screen,
    warning_popup,
)
from puebloquest.state import GameState, Route


def make(keys=()):
    return GridCanvas(30, 120, keys)


def test_menu_select_login_then_enter():
    state = GameState()
    menu_screen(make(["i", KEY_ENTER]), state)
    assert state.route == Route.LOGIN


def test_menu_enter_without_selection_keeps_route():
    state = GameState()
    menu_screen(make([KEY_ENTER]), state)
    assert state.route == Route.MENU


def test_menu_selection_survives_other_keys():
    state = GameState()
    menu_screen(make(["x", "i", "x", KEY_ENTER]), state)
    assert state.route == Route.LOGIN


def test_menu_quit_clears_canvas():
    state = GameState()
    canvas = make(["q"])
    menu_screen(canvas, state)
    assert state.route == Route.MENU
    assert canvas.row(3).strip() == ""


def test_home_starts_story_and_waits():
    state = GameState()
    canvas = make(["1"])
    home_screen(canvas, state)
    assert state.route == Route.STORY_START
    assert canvas.paused_ms == 2500


def test_home_highlights_start_option():
    canvas = make(["1"])
    home_screen(canvas, GameState())
    assert canvas.row(15)[40:40 + len(START_OPTION)] == START_OPTION
    assert canvas.style_at(15, 40).standout


def test_home_any_other_key_also_starts():
    state = GameState()
    home_screen(make(["z"]), state)
    assert state.route == Route.STORY_START


def test_home_quit_keeps_route():
    state = GameState()
    canvas = make(["q"])
    home_screen(canvas, state)
    assert state.route == Route.MENU
    assert canvas.paused_ms == 1500


def test_story_start_leads_to_game_menu():
    state = GameState()
    canvas = make(["a", "b", "c", "d"])
    story_start_screen(canvas, state)
    assert state.route == Route.GAME_MENU
    assert "ACEPTAR" in canvas.row(13)
    assert "Aceptas esta mision?" in canvas.row(11)
    assert "En ese caso ven conmigo y enfrentate tu..." in canvas.row(5)
    assert canvas.style_at(5, 10).color is Color.CYAN


def test_story_start_needs_a_key_per_page():
    state = GameState()
    with pytest.raises(EOFError):
        story_start_screen(make(["a", "b", "c"]), state)
    assert state.route == Route.MENU


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([KEY_ENTER], Route.BLACKSMITH),
        ([KEY_DOWN, KEY_ENTER], Route.WIZARD),
        ([KEY_DOWN, KEY_DOWN, KEY_ENTER], Route.TROLL_BRIDGE),
        ([KEY_DOWN, KEY_DOWN, KEY_DOWN, KEY_ENTER], Route.TROLL_BRIDGE),
        ([KEY_UP, KEY_ENTER], Route.BLACKSMITH),
        ([KEY_DOWN, "x", KEY_ENTER], Route.WIZARD),
    ],
)
def test_menu_game_choices(keys, expected):
    state = GameState(route=Route.GAME_MENU)
    menu_game_screen(make(keys), state)
    assert state.route == expected


def test_menu_game_highlights_current_choice():
    canvas = make([KEY_DOWN, KEY_ENTER])
    menu_game_screen(canvas, GameState())
    assert canvas.style_at(5, 26).reverse
    assert not canvas.style_at(4, 26).reverse
    assert "Ir donde el mago" in canvas.row(5)


def test_error_screen_returns_to_game_menu():
    state = GameState(route=Route.BLACKSMITH)
    canvas = make(["x"])
    error_screen(canvas, state)
    assert state.route == Route.GAME_MENU
    assert ALREADY_VISITED in canvas.row(15)
    style = canvas.style_at(15, 8)
    assert style.color is Color.YELLOW and style.bold


def test_create_user_shows_saved_popup():
    canvas = make(["u", "x", 0, KEY_ENTER])
    create_user_screen(canvas, GameState())
    assert USER_SAVED in canvas.row(14)
    assert canvas.style_at(6, 10).standout


def test_create_user_runs_until_zero_key():
    with pytest.raises(EOFError):
        create_user_screen(make(["u", "x"]), GameState())


def test_warning_popup_touches_right_edge_and_consumes_one_key():
    canvas = make(["x", "y"])
    warning_popup(canvas, "hola")
    assert "hola" in canvas.row(14)
    assert canvas.char_at(11, 119) == Glyph.URCORNER.value
    assert canvas.get_key() == ord("y")


@pytest.mark.parametrize(
    "keys, expected",
    [
        (["1", 0, "x"], True),
        (["2", 0, "x"], False),
        ([0, "x"], None),
        (["1", "2", 0, "x"], False),
        (["1", "z", 0, "x"], None),
    ],
)
def test_save_prompt_answers(keys, expected):
    assert save_prompt(make(keys)) is expected


def test_save_prompt_highlights_yes():
    canvas = make(["1", 0, "x"])
    save_prompt(canvas)
    assert canvas.style_at(12, 12).standout
    assert not canvas.style_at(13, 12).standout