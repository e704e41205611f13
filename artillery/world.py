"""Game state for a two-tank artillery duel: terrain, tanks, shells and effects."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from artillery.meshes import Mesh, create_field
from artillery.transforms import apply, rotate, scale, translate

MAX_HITS = 5
GRAVITY = 250.0
MUZZLE_VELOCITY = 350.0
BULLET_RADIUS = 5.0
TANK_SPEED = 100.0
FIRE_RATE = 0.25
AIM_SPEED = 1.0
MAX_AIM = 3.14
INITIAL_AIM = 1.57
TANK_HALF_LENGTH = 15.0
SUBMERSION = 5.0
HIT_MARGIN_X = 20.0
HIT_MARGIN_Y = 30.0
CRATER_RADIUS = 50.0
CRATER_SMOOTHING = 0.7
SHAKE_DURATION = 0.5
SHAKE_DECAY = 0.9
TRAJECTORY_STEP = 0.01
TRAJECTORY_TIME = 10.0
TRAJECTORY_HEIGHT_SCALE = 1.01
FIRE_INTERVAL = 0.05
FIRE_LIFETIME = 1.5


class ShootingMode(enum.Enum):
    """Whether holding the trigger keeps firing."""

    SINGLE_SHOT = "single_shot"
    AUTOMATIC = "automatic"


class Action(enum.Enum):
    """One-off key presses."""

    FIRE_1 = "fire_1"
    FIRE_2 = "fire_2"
    AUTOMATIC_1 = "automatic_1"
    SINGLE_SHOT_1 = "single_shot_1"
    AUTOMATIC_2 = "automatic_2"
    SINGLE_SHOT_2 = "single_shot_2"
    RESET = "reset"


@dataclass
class Bullet:
    """A shell in flight."""

    x: float
    y: float
    vx: float
    vy: float
    radius: float
    tank_id: int


@dataclass
class FireParticle:
    """A short-lived flame particle rising from a destroyed tank."""

    x: float
    y: float
    vx: float
    vy: float
    lifetime: float
    color: tuple[float, float, float]


@dataclass
class ImpactPoint:
    """A crater's centre index in the height map and its smoothing reach."""

    index: int
    radius: int


@dataclass
class Tank:
    """A tank's position, orientation, aim and damage."""

    tank_id: int
    x: float
    angle: float = 0.0
    trajectory_angle: float = INITIAL_AIM
    turret_angle: float = INITIAL_AIM
    hits: int = 0
    mode: ShootingMode = ShootingMode.SINGLE_SHOT
    ground_y: float = 0.0
    center_y: float = 0.0
    trajectory_start: tuple[float, float] = (0.0, 0.0)

    def is_alive(self) -> bool:
        """True until the tank has taken the maximum number of hits."""
        return self.hits < MAX_HITS


@dataclass
class Controls:
    """Keys held during a frame; ``ccw`` raises the aim angle, ``cw`` lowers it."""

    left1: bool = False
    right1: bool = False
    aim_ccw1: bool = False
    aim_cw1: bool = False
    fire1: bool = False
    left2: bool = False
    right2: bool = False
    aim_ccw2: bool = False
    aim_cw2: bool = False
    fire2: bool = False


class World:
    """The whole simulated battlefield."""

    def __init__(
        self,
        field_width: float,
        field_height: float,
        height_map: Sequence[float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if field_width <= 0:
            raise ValueError("field_width must be positive")
        self.field_width = float(field_width)
        self.field_height = float(field_height)
        self.field_mesh: Mesh
        self.field_mesh, self.heights = create_field(
            self.field_width, self.field_height, height_map
        )
        self.rng = rng if rng is not None else random.Random()
        # The field is twice the window width; the second tank starts near
        # the right edge of the window.
        self.tanks = {
            1: Tank(1, 100.0),
            2: Tank(2, self.field_width / 2 - 100.0),
        }
        self.bullets: dict[int, list[Bullet]] = {1: [], 2: []}
        self.impacts: list[ImpactPoint] = []
        self.fire_particles: list[FireParticle] = []
        self.time_since_last_shot = 0.0
        self.camera_shake_duration = 0.0
        self.camera_shake_intensity = 0.0
        self.camera_shake_offset: tuple[float, float] = (0.0, 0.0)
        self._fire_timer = 0.0

    def segment_width(self) -> float:
        """Horizontal width of one height-map sample."""
        return self.field_width / len(self.heights) if self.heights else 1.0

    def ground_height(self, x: float) -> float:
        """Terrain height under ``x``; zero outside the field."""
        index = int(x / self.segment_width())
        if 0 <= index < len(self.heights):
            return self.heights[index]
        return 0.0

    def _tank(self, tank_id: int) -> Tank:
        try:
            return self.tanks[tank_id]
        except KeyError:
            raise ValueError(f"unknown tank {tank_id}") from None

    def settle_tank(self, tank: Tank) -> None:
        """Rest the tank on the terrain and place its muzzle."""
        front_x = tank.x + TANK_HALF_LENGTH
        back_x = tank.x - TANK_HALF_LENGTH
        front_y = self.ground_height(front_x)
        back_y = self.ground_height(back_x)
        tank.angle = math.atan2(front_y - back_y, front_x - back_x)
        tank.ground_y = (front_y + back_y) / 2
        tank.center_y = tank.ground_y - SUBMERSION
        if not tank.is_alive():
            return
        barrel = (
            translate(tank.x, tank.center_y)
            @ rotate(tank.angle)
            @ translate(18, 30)
            @ translate(-16, 0)
            @ rotate(tank.turret_angle - tank.angle)
            @ translate(16, 0)
            @ scale(2, 2)
        )
        tank.trajectory_start = apply(barrel, 12, 0.8)

    def _rebuild_field(self) -> None:
        self.field_mesh, self.heights = create_field(
            self.field_width, self.field_height, self.heights
        )

    def create_crater(self, impact_x: float, crater_radius: float) -> None:
        """Carve a circular crater centred on the terrain at ``impact_x``."""
        dx = self.segment_width()
        count = len(self.heights)
        index = int(impact_x / dx)
        if not 0 <= index < count:
            raise ValueError("impact lies outside the field")
        reach = int(crater_radius / dx)
        floor = self.heights[index]
        for i in range(max(0, index - reach), min(count - 1, index + reach) + 1):
            distance = abs(i - index) * dx
            if distance <= crater_radius:
                depth = math.sqrt(crater_radius**2 - distance**2)
                self.heights[i] = min(self.heights[i], floor - depth)
        self.impacts.append(ImpactPoint(index, int(crater_radius + 25 / dx)))
        self._rebuild_field()

    def smooth_craters(self) -> None:
        """Blend every crater region with its neighbours a little."""
        if not self.impacts:
            return
        last = len(self.heights) - 1
        original = self.heights
        smoothed = list(original)
        for impact in self.impacts:
            start = max(0, impact.index - impact.radius)
            end = min(last, impact.index + impact.radius)
            for i in range(start, end + 1):
                left = original[max(0, i - 1)]
                right = original[min(last, i + 1)]
                smoothed[i] = (
                    original[i] * (1 - CRATER_SMOOTHING)
                    + (left + right) * 0.5 * CRATER_SMOOTHING
                )
        self.heights = smoothed
        self._rebuild_field()

    def trajectory(
        self, start_x: float, start_y: float, angle: float, velocity: float
    ) -> list[tuple[float, float]]:
        """Predicted flight path of a shell until it meets the terrain."""
        points = [(float(start_x), float(start_y))]
        count = len(self.heights)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        for step in range(int(round(TRAJECTORY_TIME / TRAJECTORY_STEP))):
            t = step * TRAJECTORY_STEP
            x = start_x + velocity * t * cos_a
            y = start_y + (
                velocity * t * sin_a - 0.5 * GRAVITY * t * t
            ) * TRAJECTORY_HEIGHT_SCALE
            if 0 <= x < self.field_width and count:
                index = int(x / self.field_width * count)
                if y <= self.heights[index]:
                    break
            points.append((x, y))
        return points

    def fire(self, tank_id: int) -> Bullet:
        """Launch a shell from the tank's muzzle along its turret."""
        tank = self._tank(tank_id)
        x, y = tank.trajectory_start
        bullet = Bullet(
            x,
            y,
            MUZZLE_VELOCITY * math.cos(tank.turret_angle),
            MUZZLE_VELOCITY * math.sin(tank.turret_angle),
            BULLET_RADIUS,
            tank_id,
        )
        self.bullets[tank_id].append(bullet)
        return bullet

    def _steer(self, tank: Tank, left: bool, right: bool, ccw: bool, cw: bool,
               dt: float) -> None:
        alive = tank.is_alive()
        if left and alive:
            tank.x -= TANK_SPEED * dt
        if right and alive:
            tank.x += TANK_SPEED * dt
        tank.x = max(tank.x, 0.0)
        if ccw and alive:
            tank.trajectory_angle += AIM_SPEED * dt
        if cw and alive:
            tank.trajectory_angle -= AIM_SPEED * dt
        tank.trajectory_angle = min(
            max(tank.trajectory_angle, tank.angle), MAX_AIM + tank.angle
        )
        tank.turret_angle = tank.trajectory_angle

    def apply_controls(self, controls: Controls, dt: float) -> None:
        """Apply one frame of held keys: movement, aiming and automatic fire."""
        self.time_since_last_shot += dt
        tank1, tank2 = self.tanks[1], self.tanks[2]
        self._steer(tank1, controls.left1, controls.right1,
                    controls.aim_ccw1, controls.aim_cw1, dt)
        self._steer(tank2, controls.left2, controls.right2,
                    controls.aim_ccw2, controls.aim_cw2, dt)
        for tank, trigger in ((tank1, controls.fire1), (tank2, controls.fire2)):
            if (
                trigger
                and tank.is_alive()
                and tank.mode is ShootingMode.AUTOMATIC
                and self.time_since_last_shot >= FIRE_RATE
            ):
                self.fire(tank.tank_id)
                self.time_since_last_shot = 0.0

    def handle_action(self, action: Action) -> None:
        """React to a single key press."""
        if action in (Action.FIRE_1, Action.FIRE_2):
            tank = self.tanks[1 if action is Action.FIRE_1 else 2]
            if tank.is_alive() and tank.mode is ShootingMode.SINGLE_SHOT:
                self.fire(tank.tank_id)
        elif action is Action.AUTOMATIC_1:
            self.tanks[1].mode = ShootingMode.AUTOMATIC
        elif action is Action.SINGLE_SHOT_1:
            self.tanks[1].mode = ShootingMode.SINGLE_SHOT
        elif action is Action.AUTOMATIC_2:
            self.tanks[2].mode = ShootingMode.AUTOMATIC
        elif action is Action.SINGLE_SHOT_2:
            self.tanks[2].mode = ShootingMode.SINGLE_SHOT
        elif action is Action.RESET:
            for tank in self.tanks.values():
                if tank.hits == MAX_HITS:
                    tank.hits = 0

    def spawn_fire(self, dt: float, x: float, y: float) -> FireParticle | None:
        """Emit a flame particle near (x, y) once enough time has passed."""
        self._fire_timer += dt
        if self._fire_timer < FIRE_INTERVAL:
            return None
        self._fire_timer = 0.0
        rng = self.rng
        particle = FireParticle(
            x + rng.randrange(10) - 5,
            y + rng.randrange(5),
            float(rng.randrange(20) - 10),
            float(rng.randrange(20) + 30),
            FIRE_LIFETIME,
            (1.0, (rng.randrange(50) + 50) / 100, 0.0),
        )
        self.fire_particles.append(particle)
        return particle

    def update_fire(self, dt: float) -> None:
        """Move flame particles and drop the expired ones."""
        alive = []
        for particle in self.fire_particles:
            particle.x += particle.vx * dt
            particle.y += particle.vy * dt
            particle.lifetime -= dt
            if particle.lifetime > 0:
                alive.append(particle)
        self.fire_particles = alive

    def _shake(self, intensity: float) -> None:
        self.camera_shake_duration = SHAKE_DURATION
        self.camera_shake_intensity = intensity

    def _advance(self, bullets: Iterable[Bullet], target: Tank, intensity: float,
                 dt: float) -> list[Bullet]:
        seg = self.segment_width()
        survivors: list[Bullet] = []
        queue = iter(bullets)
        for bullet in queue:
            bullet.x += bullet.vx * dt
            bullet.y += bullet.vy * dt
            bullet.vy -= GRAVITY * dt

            index = int(bullet.x / seg)
            if 0 <= index < len(self.heights) and bullet.y <= self.heights[index]:
                self.create_crater(bullet.x, CRATER_RADIUS)
                self._shake(intensity)
                continue

            if target.is_alive() and bullet.tank_id != target.tank_id:
                reach = TANK_HALF_LENGTH + HIT_MARGIN_X
                if (
                    target.x - reach <= bullet.x <= target.x + reach
                    and target.ground_y - HIT_MARGIN_Y
                    <= bullet.y
                    <= target.ground_y + HIT_MARGIN_Y
                ):
                    if target.hits == MAX_HITS - 1:
                        self._shake(intensity)
                    target.hits += 1
                    if not target.is_alive():
                        survivors.extend(queue)
                        break
                    continue
            survivors.append(bullet)
        return survivors

    def step_bullets(self, dt: float) -> None:
        """Advance every shell, resolving terrain impacts and tank hits."""
        self.bullets[1] = self._advance(self.bullets[1], self.tanks[2], 1.0, dt)
        self.bullets[2] = self._advance(self.bullets[2], self.tanks[1], 2.0, dt)

    def _update_shake(self, dt: float) -> None:
        if self.camera_shake_duration > 0:
            self.camera_shake_offset = (
                float(self.rng.randrange(5) - 2),
                float(self.rng.randrange(5) - 2),
            )
            self.camera_shake_duration -= dt
            self.camera_shake_intensity = (
                self.camera_shake_intensity * SHAKE_DECAY
                if self.camera_shake_duration > 0
                else 0.0
            )
        else:
            self.camera_shake_offset = (0.0, 0.0)

    def update(self, dt: float) -> None:
        """Advance the whole world by one frame."""
        for tank in self.tanks.values():
            self.settle_tank(tank)
            if not tank.is_alive():
                self.spawn_fire(dt, tank.x, tank.center_y)
                self.update_fire(dt)
        self.step_bullets(dt)
        self.smooth_craters()
        self._update_shake(dt)