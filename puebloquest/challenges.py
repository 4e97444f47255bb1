"""The three trials on the way to the boss: blacksmith, wizard and troll."""

from __future__ import annotations

import random
from typing import Protocol

from .canvas import KEY_ENTER, Canvas, Color, Style
from .player_sprites import player
from .scenery import draw_blacksmith, draw_card, draw_troll, draw_wizard
from .state import GameState, Route

WIN = "win"
LOSE = "lose"
TIE = "tie"

ROCK, PAPER, SCISSORS = 1, 2, 3
HAND_NAMES = {ROCK: "Piedra", PAPER: "Papel", SCISSORS: "Tijera"}
_BEATS = {(ROCK, SCISSORS), (PAPER, ROCK), (SCISSORS, PAPER)}

WINNING_CARD = 2
RIDDLE_ANSWER = 1
RIDDLE_ATTEMPTS = 2

_QUIT = ord("q")
_CYAN = Style(color=Color.CYAN)
_CYAN_BOLD = Style(color=Color.CYAN, bold=True)
_GREEN_BOLD = Style(color=Color.GREEN, bold=True)
_STANDOUT = Style(standout=True)

TIE_MESSAGE = "'¡Es un empate! Juguemos otra vez.'"
INVALID_HAND_MESSAGE = "Opcion invalida ingresa un numero entre 1 y 3."

_OPTION_MENU = (
    (8, "*********************************"),
    (9, "Piedra - Papel - Tijera"),
    (10, "*********************************"),
    (12, "Elige tu opción:"),
    (14, "Seleccione '1' para elegir Piedra"),
    (16, "Seleccione '2' para elegir Papel"),
    (18, "Seleccione '3' para elegir Tijera"),
)

_RIDDLE_OPTIONS = (
    (5, "Un eco(1)"),
    (15, "Un espejo(2)"),
    (30, "Un reflejo(3)"),
    (45, "Una sombra(4)"),
)


class _Rng(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def blacksmith_outcome(player: int, smith: int) -> str:
    """Return WIN, LOSE or TIE for the player's hand against the smith's."""
    for hand in (player, smith):
        if hand not in HAND_NAMES:
            raise ValueError(f"a hand must be 1, 2 or 3, got {hand!r}")
    if player == smith:
        return TIE
    return WIN if (player, smith) in _BEATS else LOSE


def _show_instructions(win: Canvas) -> None:
    win.text(2, 10, "----------------------------------------------------", _CYAN_BOLD)
    for row in (3, 4, 5):
        win.text(row, 10, "|", _CYAN_BOLD)
        win.text(row, 62, "|", _CYAN_BOLD)
    win.text(3, 11, "Bienvenido a mi tienda, enfrentate conmigo en un", _CYAN_BOLD)
    win.text(4, 11, "juego de piedra papel y tijera y consigue un escudo", _CYAN_BOLD)
    win.text(5, 11, "... solo si me ganas :D", _CYAN_BOLD)
    win.text(6, 10, "--------------------------------------------------", _CYAN_BOLD)
    win.text(6, 60, "\\ |", _CYAN_BOLD)
    win.text(7, 61, "\\|", _CYAN_BOLD)


def _show_option_menu(win: Canvas) -> None:
    win.text(7, 18, " " * len(INVALID_HAND_MESSAGE))
    for row, line in _OPTION_MENU:
        win.text(row, 20, line)


def _erase_option_menu(win: Canvas) -> None:
    for row, line in _OPTION_MENU:
        win.text(row, 20, " " * len(line))


def _show_election(win: Canvas, state: GameState, choice: int, smith: int,
                   outcome: str) -> None:
    win.text(10, 20, "Has elegido: ")
    win.text(11, 22, HAND_NAMES[choice])
    win.text(12, 20, "El Herrero eligió: ")
    win.text(13, 22, HAND_NAMES[smith])
    if outcome == WIN:
        win.text(8, 17, "'¡Rayos, me has vencido! Te he ", _CYAN)
        win.text(9, 17, "otorgado un escudo.'", _CYAN)
        state.grant_shield()
    else:
        win.text(8, 17, "'¡Te he vencido esta vez... será a la", _CYAN)
        win.text(9, 17, "  próxima. Buena suerte!'", _CYAN)
    win.text(15, 17, "Presiona cualquier tecla para continuar...")
    win.refresh()


def _erase_election(win: Canvas, choice: int, smith: int) -> None:
    win.text(10, 20, " " * 13)
    win.text(11, 22, " " * len(HAND_NAMES[choice]))
    win.text(12, 20, " " * 19)
    win.text(13, 22, " " * len(HAND_NAMES[smith]))
    win.text(8, 17, " " * 37)
    win.text(9, 17, " " * 25)


def blacksmith_screen(canvas: Canvas, state: GameState,
                      rng: _Rng | None = None) -> None:
    """Play rock-paper-scissors with the blacksmith for his shield."""
    rng = rng if rng is not None else random.Random()
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    win.box()
    player(win, state, 8, 8)
    draw_blacksmith(win, 7, 65)
    _show_instructions(win)
    _show_option_menu(win)
    win.refresh()

    while (key := win.get_key()) != _QUIT:
        smith = rng.randint(1, 3)
        if ord("1") <= key <= ord("3"):
            choice = key - ord("0")
            outcome = blacksmith_outcome(choice, smith)
            if outcome == TIE:
                win.text(7, 20, TIE_MESSAGE, _CYAN)
                _erase_election(win, choice, smith)
                win.refresh()
                continue
            _erase_option_menu(win)
            win.refresh()
            _show_election(win, state, choice, smith, outcome)
            break
        _erase_option_menu(win)
        win.text(7, 18, INVALID_HAND_MESSAGE)
        win.refresh()
        win.pause(1000)
        _show_option_menu(win)

    win.get_key()
    state.route = Route.GAME_MENU
    state.passed_blacksmith = True


def read_card_choice(canvas: Canvas) -> int | None:
    """Read a card number 1-3 from the keyboard; None if 'q' is pressed."""
    while (key := canvas.get_key()) != _QUIT:
        if ord("1") <= key <= ord("3"):
            column = key - ord("0")
            canvas.text(16, 22, " " * 34)
            canvas.text(17, 22, " " * 20)
            canvas.text(19, 24, f"Elegiste la columna {column}.", _GREEN_BOLD)
            return column
        canvas.text(16, 22, "Opción inválida. Debes elegir un")
        canvas.text(17, 22, "número entre 1 y 3.")
        canvas.refresh()
    return None


def _play_cards(win: Canvas, state: GameState) -> None:
    win.text(2, 3, "Bienvenido a mis aposentos. Se que viniste en busca de mi poder para",
             _CYAN)
    win.text(3, 3, "cumplir tu aventura.Te tengo una propuesta. Qué tal si jugamos un juego",
             _CYAN)
    choice = read_card_choice(win)
    win.box()
    if choice == WINNING_CARD:
        win.text(17, 24, "¡Felicidades! Has ganado. Por lo tanto te")
        win.text(18, 24, "entrego mi poder para que puedas continuar.")
        state.grant_sword()
    else:
        win.text(17, 24, "Lo siento, pero has fallado. No has ")
        win.text(18, 24, "mostrado ser digno de mi poder.")
    win.text(20, 24, "Hasta la próxima, Aventurero.")


def wizard_screen(canvas: Canvas, state: GameState) -> None:
    """Guess which of three cards hides the wizard's power."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    win.box()
    draw_wizard(win, 10, 65)
    player(win, state, 14, 10)
    for x in (32, 38, 44):
        draw_card(win, 10, x)
    win.text(14, 29, " 1     2     3")
    win.text(7, 20, "Introduce el número de la carta donde")
    win.text(8, 20, " crees que está el poder (1, 2 o 3):")
    win.refresh()

    _play_cards(win, state)

    win.get_key()
    state.route = Route.GAME_MENU
    state.passed_wizard = True


def _show_riddle_options(win: Canvas, highlight: int | None = None) -> None:
    for number, (x, label) in enumerate(_RIDDLE_OPTIONS, start=1):
        win.text(2, x, label, _STANDOUT if number == highlight else Style())


def _clear_riddle_options(win: Canvas) -> None:
    for x, label in _RIDDLE_OPTIONS:
        win.text(2, x, " " * (len(label) + (2 if x == 45 else 0)))


def troll_bridge_screen(canvas: Canvas, state: GameState) -> None:
    """Answer the troll's riddle to cross the bridge; two tries are allowed."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    draw_troll(win, 11, 66)
    win.box()
    player(win, state, 10, 8)
    win.text(1, 5, "Troll: ")
    win.text(2, 5, "Has llegado a mi puente, todo aquel que quiera pasar, tendra que resolver ")
    win.text(3, 5, "mi acertijo. Si lo logras acertar te dejare pasar, sino, lo unico que te ")
    win.text(4, 5, "espera es la muerte! JAJA!")
    win.text(9, 20, "Troll: ")
    win.text(10, 20, "No tengo boca, pero puedo hablar.")
    win.text(11, 20, "No tengo ojos, pero puedo ver.")
    win.text(12, 20, "No tengo cuerpo, pero te sigo a todas partes.")
    win.text(13, 20, "¿Qué soy?")
    win.refresh()

    options = canvas.window(5, 60, 19, 15)
    options.box()
    options.refresh()
    options.text(2, 5, "Presiona ENTER para continuar")
    options.refresh()

    while win.get_key() != KEY_ENTER:
        pass

    options.text(2, 5, " " * 29)
    _show_riddle_options(options)

    answered = False
    attempts = RIDDLE_ATTEMPTS
    while (key := options.get_key()) != _QUIT and attempts > 0:
        options.text(2, 5, " " * 44)
        options.text(3, 5, " " * 42)
        _show_riddle_options(options)

        if ord("1") <= key <= ord("4"):
            number = key - ord("0")
            _show_riddle_options(options, highlight=number)
            if number == RIDDLE_ANSWER:
                answered = True
        elif key == KEY_ENTER:
            _clear_riddle_options(options)
            if attempts > 1 and not answered:
                options.text(2, 5, "JAJAJA! Te queda un intento, insecto.")
            elif attempts > 0 and not answered:
                options.text(2, 5, "Tu oportunidad se acabo.")
                options.text(3, 5, "Ahora lo unico que te espera es la muerte!")
            attempts -= 1

        if answered:
            options.text(2, 5, "Un eco(1)", _STANDOUT)
            options.refresh()
            options.pause(1000)
            for x, label in _RIDDLE_OPTIONS[1:]:
                options.text(2, x, " " * (len(label) + (2 if x == 45 else 0)))
            options.text(2, 5, "¡Maldito! Has acertado mi acertijo!")
            options.refresh()
            options.pause(2000)
            break
        options.refresh()

    state.route = Route.FINAL_FIGHT if answered else Route.GAME_MENU