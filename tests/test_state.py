import pytest

from puebloquest.state import GameState, Route, SavedGame, User


def test_defaults_match_starting_figures():
    state = GameState()
    assert state.player_name == "Steve"
    assert state.player_life == 1200
    assert state.boss_life == 3000
    assert state.plus_life == 500
    assert state.plus_attack == 850
    assert state.route is Route.MENU
    assert not state.has_shield and not state.has_sword


def test_route_values():
    assert Route(5) is Route.GAME_MENU
    assert Route(10) is Route.CREDITS
    assert Route.EXIT < Route.MENU


def test_sword_stroke_lowers_boss_life_and_returns_it():
    state = GameState()
    start = state.boss_life
    remaining = state.sword_stroke_hit()
    assert remaining == state.boss_life
    assert remaining < start


def test_repeated_strokes_deal_equal_damage():
    state = GameState()
    start = state.boss_life
    first = start - state.sword_stroke_hit()
    before = state.boss_life
    second = before - state.sword_stroke_hit()
    assert first == second


def test_attack_bonus_adds_to_damage():
    strong = GameState(plus_attack=850)
    weak = GameState(plus_attack=0)
    strong_damage = strong.boss_life - strong.sword_stroke_hit()
    weak_damage = weak.boss_life - weak.sword_stroke_hit()
    assert strong_damage - weak_damage == 850


def test_fire_ball_stronger_than_sword_by_fixed_margin():
    for bonus in (0, 850):
        a = GameState(plus_attack=bonus)
        b = GameState(plus_attack=bonus)
        sword = a.boss_life - a.sword_stroke_hit()
        fire = b.boss_life - b.fire_ball_hit()
        assert fire - sword == 170 - 70


def test_cursed_arrows_kill_after_four_hits():
    state = GameState()
    for _ in range(4):
        state.cursed_arrows_hit()
    assert state.player_life == 1200 - 4 * 300


def test_lava_breath_weaker_than_arrows():
    a = GameState()
    b = GameState()
    assert a.lava_breath_hit() > b.cursed_arrows_hit()


def test_grant_items():
    state = GameState(plus_life=0, plus_attack=0)
    state.grant_shield()
    state.grant_sword()
    assert state.has_shield and state.has_sword
    assert state.plus_life == 500
    assert state.plus_attack == 850


def test_defeat_boss():
    state = GameState()
    state.fire_ball_hit()
    state.defeat_boss()
    assert state.boss_dead
    assert state.boss_life == 0


def test_saved_game_defaults_and_validation():
    game = SavedGame(user_belonging=User("alice").username, progress=75)
    assert game.user_belonging == "alice"
    assert game.is_saved is False
    with pytest.raises(ValueError):
        SavedGame(progress=30)