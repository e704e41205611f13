from collections import defaultdict

import pygame
import pytest

from artillery.app import (
    FIELD_COLOR,
    SKY_COLOR,
    Game,
    _action_for_key,
    _controls_from_keys,
    _to_rgb,
    main,
)
from artillery.world import Action


def _surface(game):
    return pygame.Surface((game.width, game.height))


def test_controls_from_keys():
    pressed = defaultdict(bool, {pygame.K_a: True, pygame.K_SPACE: True,
                                 pygame.K_UP: True})
    controls = _controls_from_keys(pressed)
    assert controls.left1 and controls.fire1 and controls.aim_ccw2
    assert not (controls.right1 or controls.fire2 or controls.left2)


def test_key_actions():
    assert _action_for_key(pygame.K_u) is Action.AUTOMATIC_1
    assert _action_for_key(pygame.K_RETURN) is Action.FIRE_2
    assert _action_for_key(pygame.K_r) is Action.RESET
    assert _action_for_key(pygame.K_z) is None


def test_game_places_second_tank_near_right_edge():
    game = Game(800, 600, 1)
    assert game.world.field_width == 1600
    assert game.world.tanks[2].x == pytest.approx(700)
    assert len(game.clouds) == 30


def test_game_rejects_bad_size():
    with pytest.raises(ValueError):
        Game(0, 600, 1)


def test_draw_shows_sky_and_field():
    game = Game(1280, 720, 2)
    game.clouds = []
    surface = _surface(game)
    game.draw(surface)
    assert tuple(surface.get_at((900, 719)))[:3] == _to_rgb(FIELD_COLOR)
    assert tuple(surface.get_at((1200, 5)))[:3] == _to_rgb(SKY_COLOR)


def test_draw_shows_cup_when_tank_destroyed():
    game = Game(1280, 720, 4)
    game.clouds = []
    surface = _surface(game)
    game.draw(surface)
    cup_pixel = (535, 720 - 372)
    before = tuple(surface.get_at(cup_pixel))[:3]
    game.world.tanks[2].hits = 5
    game.draw(surface)
    after = tuple(surface.get_at(cup_pixel))[:3]
    assert before == _to_rgb(SKY_COLOR)
    assert after == _to_rgb(game.meshes["cupBase"].color)


def test_run_stops_after_frames(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    game = Game(320, 240, 5)
    game.max_frames = 3
    game.run()
    assert game.frames == 3


def test_main_runs_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--width", "320", "--height", "240", "--seed", "1",
                 "--frames", "2"]) == 0