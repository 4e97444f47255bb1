"""The battle against the boss and the closing credits."""

from __future__ import annotations

from .boss import attack_cursed_arrows, draw_boss, lava_breath_attack
from .canvas import Canvas, Color, Style
from .player_sprites import player, fire_ball, sword_stroke
from .scenery import draw_tree
from .state import GameState, Route

PLAYER_POS = (4, 8)
BOSS_POS = (3, 50)
PLAYER_LIFE_POS = (13, 10)
BOSS_LIFE_POS = (13, 55)
BOSS_TURN_MS = 800
VICTORY_MS = 2000

_GREEN_BOLD = Style(color=Color.GREEN, bold=True)
_RED_BOLD = Style(color=Color.RED, bold=True)

CREDITS = (
    "                   PROYECTO FINAL                                 ",
    "                                                                  ",
    " Creadores:                                                       ",
    " *El equipo del proyecto                                          ",
    "                                                                  ",
    " Agradecimiento:                                                  ",
    " Agradezco a mis compañeros por su dedicacion y trabajo en equipo ",
    " Gracias a nuestro catedratico por su apoyo y colaboración        ",
    "                                                                  ",
    " Presiona una tecla para salir. Nos vemos pronto......",
)


def _show_life(canvas: Canvas, pos: tuple[int, int], life: int,
               style: Style) -> None:
    y, x = pos
    canvas.text(y, x, "    ", style)
    canvas.text(y, x, str(life), style)


def final_fight_screen(canvas: Canvas, state: GameState) -> None:
    """Fight the boss with 'e' (sword) or 'f' (fire ball); 'q' leaves."""
    win = canvas.window(canvas.height, canvas.width, 0, 0)
    win.box()
    player(win, state, *PLAYER_POS)
    draw_boss(win, *BOSS_POS, state.boss_dead)

    draw_tree(win, 5, 70)
    win.text(*PLAYER_LIFE_POS, str(state.player_life + state.plus_life), _GREEN_BOLD)
    win.text(*BOSS_LIFE_POS, str(state.boss_life + state.plus_life), _RED_BOLD)
    win.text(15, 4, "Espadazo(e) \t Bola de fuejo(f)")

    while (key := win.get_key()) != ord("q"):
        if key in (ord("e"), ord("f")):
            if key == ord("e"):
                sword_stroke(win, state)
            else:
                fire_ball(win, state)
            draw_boss(win, *BOSS_POS, state.boss_dead)
            _show_life(win, BOSS_LIFE_POS, state.boss_life, _RED_BOLD)
            win.refresh()

        if state.boss_life > 0:
            win.pause(BOSS_TURN_MS)
            if key == ord("f"):
                attack_cursed_arrows(win, state)
            elif key == ord("e"):
                lava_breath_attack(win, state)
            player(win, state, *PLAYER_POS)
            _show_life(win, PLAYER_LIFE_POS, state.player_life, _GREEN_BOLD)
            draw_boss(win, *BOSS_POS, state.boss_dead)
        else:
            state.defeat_boss()
            win.text(*BOSS_LIFE_POS, "0  ")
            win.text(5, 50, "    X     X ")
            break
        win.refresh()

    win.text(18, 20, "Has ganado, Has liberado a nuestro pueblo.")
    win.refresh()
    win.pause(VICTORY_MS)
    state.route = Route.CREDITS


def credits_screen(canvas: Canvas, state: GameState) -> None:
    """Show the credits until a key is pressed, then end the game."""
    win = canvas.window(20, 110, 1, 1)
    player(win, state, 8, 80)
    win.box()
    for offset, line in enumerate(CREDITS, start=1):
        win.text(offset, 1, line)
    win.refresh()
    win.get_key()
    win.clear()
    state.route = Route.EXIT