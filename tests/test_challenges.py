import pytest

from puebloquest.canvas import KEY_ENTER, Color, GridCanvas
from puebloquest.challenges import (
    HAND_NAMES,
    LOSE,
    PAPER,
    ROCK,
    SCISSORS,
    TIE,
    WIN,
    blacksmith_outcome,
    blacksmith_screen,
    read_card_choice,
    troll_bridge_screen,
    wizard_screen,
)
from puebloquest.state import GameState, Route


class _ScriptedRng:
    def __init__(self, *values):
        self._values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self._values.pop(0)


def _canvas(keys):
    return GridCanvas(24, 80, keys=keys)


@pytest.mark.parametrize(
    "player, smith, expected",
    [
        (ROCK, SCISSORS, WIN),
        (PAPER, ROCK, WIN),
        (SCISSORS, PAPER, WIN),
        (SCISSORS, ROCK, LOSE),
        (ROCK, PAPER, LOSE),
        (PAPER, SCISSORS, LOSE),
        (ROCK, ROCK, TIE),
        (PAPER, PAPER, TIE),
        (SCISSORS, SCISSORS, TIE),
    ],
)
def test_blacksmith_outcome(player, smith, expected):
    assert blacksmith_outcome(player, smith) == expected


def test_blacksmith_outcome_is_antisymmetric():
    for a in HAND_NAMES:
        for b in HAND_NAMES:
            if a != b:
                assert (blacksmith_outcome(a, b) == WIN) == (
                    blacksmith_outcome(b, a) == LOSE
                )


@pytest.mark.parametrize("player, smith", [(0, 1), (1, 4), (4, 2)])
def test_blacksmith_outcome_rejects_bad_hands(player, smith):
    with pytest.raises(ValueError):
        blacksmith_outcome(player, smith)


def test_blacksmith_win_grants_shield():
    state = GameState()
    rng = _ScriptedRng(SCISSORS)
    canvas = _canvas(["1", "z"])
    blacksmith_screen(canvas, state, rng)
    assert state.has_shield is True
    assert state.passed_blacksmith is True
    assert state.route == Route.GAME_MENU
    assert rng.calls == [(1, 3)]
    assert canvas.row(11)[22:28] == "Piedra"
    assert canvas.row(13)[22:28] == "Tijera"
    assert canvas.style_at(8, 17).color == Color.CYAN


def test_blacksmith_loss_keeps_player_without_shield():
    state = GameState()
    canvas = _canvas(["1", "z"])
    blacksmith_screen(canvas, state, _ScriptedRng(PAPER))
    assert state.has_shield is False
    assert state.passed_blacksmith is True
    assert "próxima. Buena suerte!" in canvas.row(9)


def test_blacksmith_tie_plays_again():
    state = GameState()
    rng = _ScriptedRng(ROCK, ROCK)
    canvas = _canvas(["1", "2", "z"])
    blacksmith_screen(canvas, state, rng)
    assert len(rng.calls) == 2
    assert state.has_shield is True
    assert "¡Es un empate!" in canvas.row(7)


def test_blacksmith_invalid_key_then_quit():
    state = GameState()
    rng = _ScriptedRng(ROCK)
    canvas = _canvas(["x", "q", "z"])
    blacksmith_screen(canvas, state, rng)
    assert canvas.paused_ms == 1000
    assert rng.calls == [(1, 3)]
    assert state.has_shield is False
    assert state.passed_blacksmith is True
    assert state.route == Route.GAME_MENU


def test_read_card_choice_returns_column_and_clears_error():
    canvas = _canvas(["x", "2"])
    assert read_card_choice(canvas) == 2
    assert "Elegiste la columna 2." in canvas.row(19)
    assert canvas.row(16)[22:56].strip() == ""


def test_read_card_choice_quit_returns_none():
    canvas = _canvas(["q"])
    assert read_card_choice(canvas) is None


def test_read_card_choice_shows_invalid_message():
    canvas = _canvas(["9", "1"])
    assert read_card_choice(canvas) == 1
    assert canvas.refreshes == 1


def test_wizard_right_card_grants_sword():
    state = GameState()
    canvas = _canvas(["2", "z"])
    wizard_screen(canvas, state)
    assert state.has_sword is True
    assert state.passed_wizard is True
    assert state.route == Route.GAME_MENU
    assert "¡Felicidades!" in canvas.row(17)
    assert "Hasta la próxima, Aventurero." in canvas.row(20)


@pytest.mark.parametrize("keys", [["1", "z"], ["3", "z"], ["q", "z"]])
def test_wizard_wrong_card_or_quit(keys):
    state = GameState()
    canvas = _canvas(keys)
    wizard_screen(canvas, state)
    assert state.has_sword is False
    assert state.passed_wizard is True
    assert "Lo siento, pero has fallado." in canvas.row(17)


def test_troll_correct_answer_opens_final_fight():
    state = GameState()
    canvas = _canvas(["x", KEY_ENTER, "1"])
    troll_bridge_screen(canvas, state)
    assert state.route == Route.FINAL_FIGHT
    assert canvas.paused_ms == 3000
    assert "¡Maldito! Has acertado mi acertijo!" in canvas.row(21)


def test_troll_two_wrong_answers_send_back():
    state = GameState()
    canvas = _canvas([KEY_ENTER, "2", KEY_ENTER, KEY_ENTER, "z"])
    troll_bridge_screen(canvas, state)
    assert state.route == Route.GAME_MENU
    assert "Tu oportunidad se acabo." in canvas.row(21)
    assert "Ahora lo unico que te espera es la muerte!" in canvas.row(22)


def test_troll_highlights_chosen_option_and_quit():
    state = GameState()
    canvas = _canvas([KEY_ENTER, "3", "q"])
    troll_bridge_screen(canvas, state)
    assert state.route == Route.GAME_MENU
    assert canvas.style_at(21, 45).standout is True
    assert canvas.style_at(21, 20).standout is False


def test_troll_runs_out_of_keys_while_waiting_for_enter():
    canvas = _canvas(["a", "b"])
    with pytest.raises(EOFError):
        troll_bridge_screen(canvas, GameState())