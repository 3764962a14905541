"""
Ping Pong game entities: ball, paddles and the render snapshot
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config


class Side(Enum):
    """Side of the surface, also identifies the player defending it"""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class ServeDirection(Enum):
    """Horizontal direction of a serve"""

    TOWARD_LEFT = -1
    TOWARD_RIGHT = 1
    RANDOM = 0

    @classmethod
    def toward(cls, side: Side) -> "ServeDirection":
        return cls.TOWARD_LEFT if side is Side.LEFT else cls.TOWARD_RIGHT


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Ball:
    """Game ball, positioned by its center"""

    def __init__(
        self, x: float, y: float, vx: float = 0.0, vy: float = 0.0, radius: float | None = None
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius if radius is not None else game_config.BALL_RADIUS

    def update(self, dt: float) -> None:
        """Updates the ball position"""
        self.position = self.position + self.velocity * dt

    def speed(self) -> float:
        return self.velocity.magnitude()

    def reset_to_center(
        self, center: tuple[float, float], direction: int, angle: float, speed: float
    ) -> None:
        """Puts the ball back at the center and launches it at the given angle"""
        self.position = Vector2D(*center)
        self.velocity = Vector2D(direction * speed * math.cos(angle), speed * math.sin(angle))

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the bounding box of the ball (x, y, width, height)"""
        return (
            self.position.x - self.radius,
            self.position.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )


class Paddle:
    """Player paddle, positioned by its top-left corner"""

    def __init__(self, side: Side, config: GameConfig | None = None):
        config = config or game_config
        self.side = side
        self.width = config.PADDLE_WIDTH
        self.height = config.PADDLE_HEIGHT
        self.margin = config.PADDLE_MARGIN
        self.velocity_y = 0.0

        self.min_y = 0.0
        self.max_y = config.FIELD_HEIGHT - self.height

        self.position = Vector2D(self._inset_x(config.FIELD_WIDTH), self.max_y / 2)

    def _inset_x(self, field_width: float) -> float:
        if self.side is Side.LEFT:
            return self.margin
        return field_width - self.margin - self.width

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    def constrain_position(self) -> None:
        """Ensures the paddle stays on the surface"""
        self.position.y = max(self.min_y, min(self.max_y, self.position.y))

    def move(self, dt: float) -> None:
        """Integrates the vertical velocity"""
        self.position.y += self.velocity_y * dt
        self.constrain_position()

    def move_to(self, y: float) -> None:
        """Places the paddle top edge at y, bypassing velocity"""
        self.position.y = y
        self.constrain_position()

    def fit_to_field(self, field_width: float, field_height: float) -> None:
        """Recomputes bounds after the surface has been resized"""
        self.max_y = max(0.0, field_height - self.height)
        self.position.x = self._inset_x(field_width)
        self.constrain_position()

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot handed to renderers between steps"""

    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    ball_radius: float
    left_paddle: tuple[float, float, float, float]
    right_paddle: tuple[float, float, float, float]
    score: tuple[int, int]
    paused: bool
    serving: bool
    running: bool
    winner: Side | None
    field_size: tuple[float, float]
    show_center_line: bool
