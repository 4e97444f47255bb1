# puebloquest

A short adventure played in the terminal. A soldier comes for your father and
you go in his place. Before you face the beast you can:

- play rock, paper, scissors against the blacksmith to win a shield,
- pick the right card from the wizard to earn a sword,
- answer the troll's riddle to be let across his bridge.

Get across the bridge and the final fight begins. Strike with the sword (`e`)
or throw a fireball (`f`) until the boss falls, then read the credits.

All in-game text is in Spanish.

## Installing

```
pip install .
```

The game draws with the standard `curses` module, so it needs a terminal
that `curses` supports (Linux, macOS, or another POSIX system). A terminal of
at least 110 columns by 24 rows shows every scene in full.

## Playing

```
puebloquest
```

The command takes no options besides `--help`. The game runs until the
credits have been shown.

Keys used along the way:

| Screen         | Keys                                                              |
|----------------|-------------------------------------------------------------------|
| Title          | `i` to select "Iniciar sesion", then Enter to go on               |
| Start game     | any key but `q` to begin (`1` highlights the option first)        |
| Story          | any key to move on                                                |
| Where to go    | arrow keys up and down, Enter to choose                           |
| Blacksmith     | `1` rock, `2` paper, `3` scissors; a tie is played again          |
| Wizard         | `1`, `2` or `3` to pick a card                                    |
| Troll bridge   | Enter to see the answers, `1` to `4` to pick one, Enter to confirm |
| Final fight    | `e` sword stroke, `f` fireball                                    |
| Credits        | any key to end the game                                           |

Pressing Enter on the title screen without selecting the option, or `q`
there or on the start screen, shows the same screen again.

Winning against the blacksmith gives you a shield and the right card from
the wizard gives you a sword; both show on your character. The troll allows
two tries: a wrong answer sends you back to the map, the right one leads to
the final fight. You visit the blacksmith and the wizard once each; if you
come back, you are told to keep going.

## What it does not do

- There are no accounts. Selecting "Iniciar sesion" goes straight to the
  start screen; no user name or password is asked for or checked.
- Games are not saved. Progress lives only as long as the program runs.
  `puebloquest.screens` has a sign-up form (`create_user_screen`) and a
  "save game?" prompt (`save_prompt`), but the game never shows them and
  nothing is stored.

## Using the pieces

The screens draw on a `Canvas` from `puebloquest.canvas`. `CursesCanvas`
draws on the real terminal. `GridCanvas` keeps the drawing in memory and
reads keys from a list you give it, which makes the scenes easy to look at
or test:

```python
from puebloquest.canvas import GridCanvas
from puebloquest.scenery import draw_castle

canvas = GridCanvas(24, 80)
draw_castle(canvas, 2, 10)
print(canvas.row(2))
```

`GridCanvas` also has `char_at` and `style_at` for single cells; it raises
`EOFError` when a screen asks for a key after the list has run out.

Game progress lives in `puebloquest.state.GameState`: the current `Route`,
the player's and the boss's life, and whether the shield and sword have
been won. `puebloquest.router.next_screen` picks the screen for the current
route, and `puebloquest.router.run` shows screens one after another until
the credits end the game:

```python
from puebloquest.canvas import GridCanvas
from puebloquest.challenges import blacksmith_outcome

print(blacksmith_outcome(1, 3))  # "win": rock beats scissors
```

Other modules: `scenery` (trees, castle, house, troll, soldier, wizard,
cards, blacksmith), `player_sprites` (the hero and the hero's attacks),
`boss` (the beast and its attacks), `challenges` (the three trials),
`fight` (the final fight and the credits) and `screens` (menus and story
pages).

## Running the tests

```
pip install ".[test]"
pytest
```