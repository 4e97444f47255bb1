"""Game state shared by every screen: routing, player and boss figures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

PROGRESS_STEPS = (0, 25, 50, 75, 100)

SWORD_STROKE_DAMAGE = 70
FIRE_BALL_DAMAGE = 170
CURSED_ARROWS_DAMAGE = 300
LAVA_BREATH_DAMAGE = 50
SHIELD_LIFE_BONUS = 500
SWORD_ATTACK_BONUS = 850


class Route(IntEnum):
    """Screens the router can show; EXIT ends the game loop."""

    EXIT = -1
    MENU = 0
    LOGIN = 1
    HOME = 2
    HOME_AFTER_LOGIN = 3
    STORY_START = 4
    GAME_MENU = 5
    BLACKSMITH = 6
    WIZARD = 7
    TROLL_BRIDGE = 8
    FINAL_FIGHT = 9
    CREDITS = 10


@dataclass
class User:
    """A player account."""

    username: str


@dataclass
class SavedGame:
    """A stored game belonging to a user."""

    id: int = 0
    user_belonging: str = ""
    progress: int = 0
    is_saved: bool = False

    def __post_init__(self) -> None:
        if self.progress not in PROGRESS_STEPS:
            raise ValueError(
                f"progress must be one of {PROGRESS_STEPS}, got {self.progress}"
            )


@dataclass
class GameState:
    """Everything the screens read and change while the game runs."""

    route: Route = Route.MENU
    authenticated: bool = False
    active: bool = False
    progress: int = 0
    user: User | None = None

    player_name: str = "Steve"
    player_max_damage: int = 300
    player_life: int = 1200
    plus_life: int = SHIELD_LIFE_BONUS
    plus_attack: int = SWORD_ATTACK_BONUS
    description: str = ""

    has_shield: bool = False
    has_sword: bool = False
    passed_blacksmith: bool = False
    passed_wizard: bool = False

    boss_name: str = ""
    boss_max_damage: int = 0
    boss_life: int = 3000

    boss_dead: bool = False
    player_dead: bool = False

    saved_games: list[SavedGame] = field(default_factory=list)

    def sword_stroke_hit(self) -> int:
        """Apply a sword stroke to the boss and return its remaining life."""
        self.boss_life -= SWORD_STROKE_DAMAGE + self.plus_attack
        return self.boss_life

    def fire_ball_hit(self) -> int:
        """Apply a fire ball to the boss and return its remaining life."""
        self.boss_life -= FIRE_BALL_DAMAGE + self.plus_attack
        return self.boss_life

    def cursed_arrows_hit(self) -> int:
        """Apply the boss's cursed arrows and return the player's life."""
        self.player_life -= CURSED_ARROWS_DAMAGE
        return self.player_life

    def lava_breath_hit(self) -> int:
        """Apply the boss's lava breath and return the player's life."""
        self.player_life -= LAVA_BREATH_DAMAGE
        return self.player_life

    def grant_shield(self) -> None:
        """Give the player the blacksmith's shield."""
        self.has_shield = True
        self.plus_life = SHIELD_LIFE_BONUS

    def grant_sword(self) -> None:
        """Give the player the wizard's power."""
        self.has_sword = True
        self.plus_attack = SWORD_ATTACK_BONUS

    def defeat_boss(self) -> None:
        """Mark the boss as beaten."""
        self.boss_dead = True
        self.boss_life = 0