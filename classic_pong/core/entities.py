"""
Classic Pong game entities: ball, paddles, input and state snapshots
"""

from dataclasses import dataclass

import numpy as np

from classic_pong.utils.config import game_config


@dataclass
class Vector2D:
    """Simple 2D vector for positions and directions"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


def random_direction(rng: np.random.Generator, spread: int | None = None) -> Vector2D:
    """
    Draws a unit launch direction whose components are both non-zero.

    Integer offsets are sampled from [-spread, spread) and redrawn while
    either of them is zero, then normalized.
    """
    spread = spread if spread is not None else game_config.DIRECTION_SPREAD
    x = y = 0
    while x == 0 or y == 0:
        x, y = (int(v) for v in rng.integers(-spread, spread, size=2))
    return Vector2D(float(x), float(y)).normalize()


class Ball:
    """Game ball"""

    def __init__(
        self,
        x: float,
        y: float,
        rng: np.random.Generator,
        direction: Vector2D | None = None,
        speed: float | None = None,
    ):
        self.spawn = Vector2D(x, y)
        self.position = Vector2D(x, y)
        self.rng = rng
        if direction is None:
            direction = random_direction(rng)
        if direction.magnitude() == 0:
            raise ValueError("Ball direction must not be a zero vector")
        self.direction = direction.normalize()
        self.speed = speed if speed is not None else game_config.BALL_SPEED
        self.radius = game_config.BALL_RADIUS
        self.extent = Vector2D(self.radius, self.radius)

    def reset(self) -> None:
        """Puts the ball back at its spawn point with a fresh direction; speed is kept"""
        self.position = self.spawn.copy()
        self.direction = random_direction(self.rng)

    def advance(self, dt: float) -> None:
        """Updates the ball position"""
        self.position += self.direction * (self.speed * dt)

    def flip_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.direction.x = -self.direction.x

    def flip_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.direction.y = -self.direction.y


class Paddle:
    """Player paddle"""

    def __init__(
        self,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
        field_height: float | None = None,
    ):
        self.position = Vector2D(x, y)
        self.width = width if width is not None else game_config.PADDLE_WIDTH
        self.height = height if height is not None else game_config.PADDLE_HEIGHT
        self.speed = game_config.PADDLE_SPEED
        self.extent = Vector2D(self.width / 2, self.height / 2)
        self.moving_up = False
        self.moving_down = False
        self.score = 0

        # Vertical movement limits
        self.min_y = 0.0
        field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT
        self.max_y = field_height - self.height

    def set_input(self, moving_up: bool, moving_down: bool) -> None:
        """Overwrites the movement flags for this frame"""
        self.moving_up = moving_up
        self.moving_down = moving_down

    def advance(self, dt: float) -> None:
        """
        Moves the paddle, refusing any step that would leave the field.

        Both flags are checked against the position before the move, so
        pressing up and down together cancels out.
        """
        step = self.speed * dt
        dy = 0.0
        if self.moving_up and self.position.y - step >= self.min_y:
            dy -= step
        if self.moving_down and self.position.y + step <= self.max_y:
            dy += step
        self.position.y += dy

    def center(self) -> Vector2D:
        return Vector2D(self.position.x + self.width / 2, self.position.y + self.height / 2)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the paddle rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass(frozen=True)
class InputSnapshot:
    """Movement keys held during one frame"""

    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False


@dataclass(frozen=True)
class GameState:
    """Read-only view of the simulation handed to renderers"""

    ball_position: tuple[float, float]
    ball_radius: float
    ball_speed: float
    left_paddle_position: tuple[float, float]
    right_paddle_position: tuple[float, float]
    paddle_size: tuple[float, float]
    score: tuple[int, int]
    field_size: tuple[int, int]

    @property
    def score_text(self) -> str:
        return f"{self.score[0]}:{self.score[1]}"
