"""Interactive two-player artillery game drawn with pygame."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from typing import Any

import numpy as np
import pygame

from artillery.meshes import DrawMode, Mesh
from artillery.scenery import (
    CLOUD_COUNT,
    CLOUD_OFFSETS,
    CUP_POSITION,
    CUP_RAYS_POSITION,
    SUN_CENTER,
    SUN_RAY_COUNT,
    SUN_RAY_THICKNESS,
    build_scene_meshes,
    cloud_positions,
    cup_parts,
    cup_ray_angles,
    cup_ray_origin,
    sun_ray_transforms,
)
from artillery.transforms import identity, rotate, scale, translate
from artillery.world import (
    MAX_HITS,
    MUZZLE_VELOCITY,
    Action,
    Controls,
    Tank,
    World,
)

SKY_COLOR = (0.5, 0.8, 1.0)
FIELD_COLOR = (0.5, 0.32, 0.2)
TRAJECTORY_COLOR = (1.0, 1.0, 1.0)
FIELD_HEIGHT = 100.0
HEALTH_BAR_WIDTH = 30.0
FPS = 60
MAX_DT = 0.05
FIRE_PARTICLE_RADIUS = 5

_TANK_PARTS = {1: ("t1", "t2", "c1", "r1"), 2: ("t3", "t4", "c2", "r2")}
_WRECK_PARTS = ("t5", "t6", "c3", "r3")

_KEY_ACTIONS = {
    pygame.K_SPACE: Action.FIRE_1,
    pygame.K_RETURN: Action.FIRE_2,
    pygame.K_u: Action.AUTOMATIC_1,
    pygame.K_p: Action.SINGLE_SHOT_1,
    pygame.K_1: Action.AUTOMATIC_2,
    pygame.K_2: Action.SINGLE_SHOT_2,
    pygame.K_r: Action.RESET,
}


def _to_rgb(color: Sequence[float]) -> tuple[int, int, int]:
    r, g, b = (int(round(min(max(c, 0.0), 1.0) * 255)) for c in color)
    return (r, g, b)


def _action_for_key(key: int) -> Action | None:
    return _KEY_ACTIONS.get(key)


def _controls_from_keys(pressed: Any) -> Controls:
    """Read the held keys of one frame into a Controls record."""
    return Controls(
        left1=bool(pressed[pygame.K_a]),
        right1=bool(pressed[pygame.K_d]),
        aim_ccw1=bool(pressed[pygame.K_s]),
        aim_cw1=bool(pressed[pygame.K_w]),
        fire1=bool(pressed[pygame.K_SPACE]),
        left2=bool(pressed[pygame.K_LEFT]),
        right2=bool(pressed[pygame.K_RIGHT]),
        aim_ccw2=bool(pressed[pygame.K_UP]),
        aim_cw2=bool(pressed[pygame.K_DOWN]),
        fire2=bool(pressed[pygame.K_RETURN]),
    )


class Game:
    """The window, input handling and rendering around a World."""

    def __init__(self, width: int = 1280, height: int = 720,
                 seed: int | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.width = int(width)
        self.height = int(height)
        self.rng = random.Random(seed)
        self.world = World(2.0 * self.width, FIELD_HEIGHT, None, self.rng)
        self.meshes = build_scene_meshes()
        self.clouds = cloud_positions(self.rng, CLOUD_COUNT)
        self.frames = 0
        self.max_frames: int | None = None
        self._vertex_cache: dict[str, np.ndarray] = {}
        for tank in self.world.tanks.values():
            self.world.settle_tank(tank)

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        ox, oy = self.world.camera_shake_offset
        return (x - ox, self.height - (y - oy))

    def _project(self, mesh: Mesh, matrix: np.ndarray) -> list[tuple[float, float]]:
        verts = self._vertex_cache.get(mesh.name)
        if verts is None:
            verts = np.array([(x, y, 1.0) for x, y, _ in mesh.vertices]).T
            self._vertex_cache[mesh.name] = verts
        world = np.asarray(matrix, dtype=float) @ verts
        ox, oy = self.world.camera_shake_offset
        xs = (world[0] - ox).tolist()
        ys = (self.height - (world[1] - oy)).tolist()
        return list(zip(xs, ys))

    def _render(self, surface: pygame.Surface, name: str,
                matrix: np.ndarray) -> None:
        mesh = self.meshes[name]
        points = self._project(mesh, matrix)
        color = _to_rgb(mesh.color)
        if mesh.draw_mode is DrawMode.TRIANGLE_FAN:
            fan = [points[i] for i in mesh.indices]
            if len(fan) >= 3:
                pygame.draw.polygon(surface, color, fan)
        elif mesh.draw_mode is DrawMode.LINES:
            ends = iter(mesh.indices)
            for a, b in zip(ends, ends):
                pygame.draw.line(surface, color, points[a], points[b])
        else:
            corners = iter(mesh.indices)
            for a, b, c in zip(corners, corners, corners):
                pygame.draw.polygon(surface, color, (points[a], points[b], points[c]))

    def _draw_field(self, surface: pygame.Surface) -> None:
        heights = self.world.heights
        if not heights:
            return
        column = self.world.segment_width()
        outline = [self._to_screen(i * column, h) for i, h in enumerate(heights)]
        last_x = (len(heights) - 1) * column
        outline += [self._to_screen(last_x, 0.0), self._to_screen(0.0, 0.0)]
        pygame.draw.polygon(surface, _to_rgb(FIELD_COLOR), outline)

    def _draw_tank(self, surface: pygame.Surface, tank: Tank) -> None:
        body, turret, dome, barrel = (
            _TANK_PARTS[tank.tank_id] if tank.is_alive() else _WRECK_PARTS
        )
        base = translate(tank.x, tank.center_y) @ rotate(tank.angle)
        self._render(surface, body, base @ scale(2, 2))
        self._render(surface, turret, base @ translate(0, 12) @ scale(2, 2))
        self._render(surface, dome, base @ translate(0, 30) @ scale(2, 2))
        self._render(
            surface,
            barrel,
            base
            @ translate(18, 30)
            @ translate(-16, 0)
            @ rotate(tank.turret_angle - tank.angle)
            @ translate(16, 0)
            @ scale(2, 2),
        )

    def _draw_health(self, surface: pygame.Surface, tank: Tank) -> None:
        width = HEALTH_BAR_WIDTH * (1.0 - tank.hits / MAX_HITS)
        matrix = translate(tank.x, tank.center_y + 80) @ scale(width, 2)
        self._render(surface, "healthBar", matrix)

    def _draw_trajectory(self, surface: pygame.Surface, tank: Tank) -> None:
        start_x, start_y = tank.trajectory_start
        path = self.world.trajectory(
            start_x, start_y, tank.trajectory_angle, MUZZLE_VELOCITY
        )
        if len(path) >= 2:
            points = [self._to_screen(x, y) for x, y in path]
            pygame.draw.lines(surface, _to_rgb(TRAJECTORY_COLOR), False, points, 3)

    def _draw_fire(self, surface: pygame.Surface) -> None:
        for particle in self.world.fire_particles:
            pygame.draw.circle(
                surface,
                _to_rgb(particle.color),
                self._to_screen(particle.x, particle.y),
                FIRE_PARTICLE_RADIUS,
            )

    def _draw_cup(self, surface: pygame.Surface) -> None:
        for name, (x, y) in cup_parts(*CUP_POSITION):
            self._render(surface, name, translate(x, y))
        pivot = translate(*cup_ray_origin(*CUP_RAYS_POSITION))
        for name, angle in cup_ray_angles(0.0):
            self._render(surface, name, pivot @ rotate(angle))

    def _draw_clouds(self, surface: pygame.Surface) -> None:
        for i, (cx, cy) in enumerate(self.clouds):
            for ox, oy in CLOUD_OFFSETS[i % len(CLOUD_OFFSETS)]:
                self._render(surface, "cloudPart", translate(cx + ox, cy + oy))

    def _draw_sun(self, surface: pygame.Surface) -> None:
        self._render(surface, "sun", translate(*SUN_CENTER))
        for matrix in sun_ray_transforms(*SUN_CENTER, SUN_RAY_COUNT,
                                         SUN_RAY_THICKNESS):
            self._render(surface, "sunRay", matrix)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current world onto ``surface``."""
        surface.fill(_to_rgb(SKY_COLOR))
        self._draw_field(surface)
        tank1, tank2 = self.world.tanks[1], self.world.tanks[2]
        for tank in (tank1, tank2):
            self._draw_tank(surface, tank)
            if tank.is_alive():
                if tank is tank2:
                    self._draw_trajectory(surface, tank)
                self._draw_health(surface, tank)
            else:
                self._draw_fire(surface)
                self._draw_cup(surface)
        if tank1.is_alive():
            self._draw_trajectory(surface, tank1)
        for bullets in self.world.bullets.values():
            for bullet in bullets:
                matrix = (
                    translate(bullet.x, bullet.y) @ scale(bullet.radius, bullet.radius)
                )
                self._render(surface, "bullet", matrix)
        self._draw_clouds(surface)
        self._draw_sun(surface)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Artillery")
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        action = _action_for_key(event.key)
                        if action is not None:
                            self.world.handle_action(action)
                dt = min(clock.tick(FPS) / 1000.0, MAX_DT)
                self.world.apply_controls(
                    _controls_from_keys(pygame.key.get_pressed()), dt
                )
                self.world.update(dt)
                self.draw(screen)
                pygame.display.flip()
                self.frames += 1
                if self.max_frames is not None and self.frames >= self.max_frames:
                    running = False
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Two-player artillery duel.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    args = parser.parse_args(argv)
    game = Game(args.width, args.height, args.seed)
    game.max_frames = args.frames
    game.run()
    return 0