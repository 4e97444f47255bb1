"""Menus, story pages and pop-ups that lead the hero between trials."""

from __future__ import annotations

from .canvas import KEY_DOWN, KEY_ENTER, KEY_UP, PLAIN, Canvas, Color, Style
from .player_sprites import player
from .scenery import (
    draw_blacksmith,
    draw_castle,
    draw_house,
    draw_soldier,
    draw_tree,
    draw_wizard,
)
from .state import GameState, Route

_QUIT = ord("q")

_STANDOUT = Style(standout=True)
_GREEN = Style(color=Color.GREEN)
_GREEN_STANDOUT = Style(color=Color.GREEN, standout=True)
_CYAN = Style(color=Color.CYAN)
_YELLOW = Style(color=Color.YELLOW)
_YELLOW_BOLD = Style(color=Color.YELLOW, bold=True)
_BOLD = Style(bold=True)
_REVERSE = Style(reverse=True)

TITLE = "AQUI TIENE QUE IR EL TITULO DEL VIDEOJUEGO"
LOGIN_OPTION = "Iniciar sesion (i)."
START_OPTION = "Iniciar partida(1)"
ALREADY_VISITED = "Ya has pasado por aqui, continua tu camino por otro lado..."
USER_SAVED = "Usuario guardado exitosamente!"

STORY_PAGES = (
    (
        "Tu padre ha sido seleccionado para una mision importante",
        "contra la bestia.",
    ),
    ("No, no puedo peritir que vaya. El no aguantaria esa mision.",),
    ("En ese caso ven conmigo y enfrentate tu...",),
)

GAME_MENU_CHOICES = (
    ("Ir donde el herrero", Route.BLACKSMITH),
    ("Ir donde el mago", Route.WIZARD),
    ("Ir con el troll", Route.TROLL_BRIDGE),
)

USERNAME_PROMPT = "Ingrese usuario"
HIDDEN_FIELD_PROMPT = "Ingrese contraseña"


def menu_screen(canvas: Canvas, state: GameState) -> None:
    """Title screen: 'i' selects sign-in, ENTER confirms, 'q' leaves the menu."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    win.box()
    win.text(3, 5, TITLE, _STANDOUT)
    win.text(10, 10, LOGIN_OPTION)
    draw_tree(win, 15, 2)
    draw_castle(win, 10, 51)
    draw_tree(win, 15, 42)

    login_selected = False
    while (key := win.get_key()) != _QUIT:
        if key == ord("i"):
            win.text(10, 10, LOGIN_OPTION, _GREEN_STANDOUT)
            login_selected = True
        elif key == KEY_ENTER:
            if login_selected:
                state.route = Route.LOGIN
        else:
            win.text(10, 10, LOGIN_OPTION)
        win.refresh()
        if key == KEY_ENTER:
            break

    canvas.clear()


def home_screen(canvas: Canvas, state: GameState) -> None:
    """Offer to start the game; any key but 'q' begins the story."""
    height, width = canvas.height, canvas.width
    win = canvas.window(height // 2, width // 2, height // 4, width // 4)
    win.box()
    win.text(8, 10, START_OPTION)

    key = win.get_key()
    if key != _QUIT:
        win.text(8, 10, START_OPTION, _STANDOUT if key == ord("1") else PLAIN)
        win.refresh()
        win.pause(1000)
        state.route = Route.STORY_START
    win.pause(1500)


def story_start_screen(canvas: Canvas, state: GameState) -> None:
    """Tell the opening story page by page and ask the hero to accept."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    for page in STORY_PAGES:
        win.clear()
        win.box()
        for offset, line in enumerate(page):
            win.text(5 + offset, 10, line, _CYAN)
        player(win, state, 12, 10)
        draw_soldier(win, 10, 70)
        win.refresh()
        win.get_key()

    accept = canvas.window(5, 30, 10, 25)
    accept.box()
    accept.refresh()
    accept.text(1, 2, "Aceptas esta mision?")
    accept.text(3, 4, "ACEPTAR", _YELLOW)
    accept.refresh()
    accept.get_key()

    state.route = Route.GAME_MENU


def menu_game_screen(canvas: Canvas, state: GameState) -> None:
    """Let the hero pick the next trial with the arrow keys and ENTER."""
    height, width = canvas.height, canvas.width
    win = canvas.window(height, width, 0, 0)
    win.box()
    win.refresh()
    win.text(2, 20, "Elige adonde comenzaras tu aventura.", _BOLD)
    draw_blacksmith(win, 9, 35)
    draw_wizard(win, 8, 45)
    player(win, state, 12, 15)
    draw_tree(win, 5, 2)
    draw_tree(win, 12, 60)
    draw_house(win, 3, 65)
    win.refresh()

    menu = canvas.window(height // 4, width // 3, 3, 25)
    menu.box()
    menu.refresh()

    highlight = 0
    last = len(GAME_MENU_CHOICES) - 1
    while True:
        for row, (label, _) in enumerate(GAME_MENU_CHOICES, start=1):
            menu.text(row, 1, label, _REVERSE if row - 1 == highlight else PLAIN)
        key = menu.get_key()
        if key == KEY_UP:
            highlight = max(highlight - 1, 0)
        elif key == KEY_DOWN:
            highlight = min(highlight + 1, last)
        elif key == KEY_ENTER:
            state.route = GAME_MENU_CHOICES[highlight][1]
            break

    win.pause(400)


def error_screen(canvas: Canvas, state: GameState) -> None:
    """Tell the hero this place was already visited and go back to the map."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    win.box()
    win.text(15, 8, ALREADY_VISITED, _YELLOW_BOLD)
    win.refresh()
    state.route = Route.GAME_MENU
    win.get_key()


def create_user_screen(canvas: Canvas, state: GameState) -> None:
    """Sign-up form: 'u' and 'p' highlight their fields; a zero key finishes."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    win.box()
    draw_tree(win, 15, 2)
    draw_house(win, 15, 51)
    draw_tree(win, 15, 42)
    draw_house(win, 15, 63)
    win.text(3, 10, "Bienvenido para continuar cree un usuario.", _STANDOUT)
    win.text(8, 10, HIDDEN_FIELD_PROMPT)

    while (key := win.get_key()) != 0:
        if key == ord("u"):
            win.text(6, 10, USERNAME_PROMPT, _STANDOUT)
            win.get_key()
        elif key == ord("p"):
            win.text(8, 10, HIDDEN_FIELD_PROMPT, _STANDOUT)
            win.get_key()
        else:
            win.text(6, 10, USERNAME_PROMPT)
            win.text(8, 10, HIDDEN_FIELD_PROMPT)

    warning_popup(canvas, USER_SAVED)


def warning_popup(canvas: Canvas, message: str) -> None:
    """Show a message against the right edge and wait for a key."""
    height, width = 7, len(message) + 4
    popup = canvas.window(height, width, (canvas.height - height) // 2,
                          canvas.width - width)
    popup.box()
    popup.text(height // 2, 2, message)
    popup.text(height - 2, 2, "ENTER para continuar")
    popup.refresh()
    canvas.get_key()


def save_prompt(canvas: Canvas) -> bool | None:
    """Ask whether to save; '1' picks yes, '2' no, a zero key confirms.

    Returns True or False for the highlighted answer, None if none is.
    """
    popup = canvas.window(5, 30, 10, 10)
    popup.box()
    popup.text(1, 2, "Deseas guardar partida?")
    popup.text(2, 2, "SI(1)")
    popup.text(3, 2, "NO(2)")
    popup.refresh()

    answer: bool | None = None
    while (key := popup.get_key()) != 0:
        if key == ord("1"):
            answer = True
        elif key == ord("2"):
            answer = False
        else:
            answer = None
        popup.text(2, 2, "SI(1)", _STANDOUT if answer is True else PLAIN)
        popup.text(3, 2, "NO(2)", _STANDOUT if answer is False else PLAIN)
        if answer is not None:
            popup.refresh()

    popup.get_key()
    return answer