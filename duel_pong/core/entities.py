"""
Duel Pong game entities: ball, paddles, player input
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class Side(Enum):
    """Side of the playfield a paddle defends"""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass(frozen=True)
class PaddleInput:
    """Directional intent for one paddle during one frame"""

    up: bool = False
    down: bool = False

    @property
    def direction(self) -> int:
        """-1 to move up, 1 to move down, 0 to stay; down wins when both are held"""
        direction = 0
        if self.up:
            direction = -1
        if self.down:
            direction = 1
        return direction


class Paddle:
    """Player paddle, positioned by its center"""

    def __init__(self, side: Side, x: float, y: float, width: float, height: float, speed: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Paddle size must be positive, got ({width}, {height})")
        if speed <= 0:
            raise ValueError(f"Paddle speed must be positive, got {speed}")

        self._side = side
        self._size = Vector2D(width, height)
        self.position = Vector2D(x, y)
        self.speed = speed
        self.score = 0

    @classmethod
    def from_sprite(
        cls,
        side: Side,
        x: float,
        y: float,
        sprite_size: tuple[float, float],
        scale: float,
        speed: float,
    ) -> "Paddle":
        """Creates a paddle whose size is the sprite dimensions times the sprite scale"""
        sprite_width, sprite_height = sprite_size
        return cls(side, x, y, sprite_width * scale, sprite_height * scale, speed)

    @property
    def side(self) -> Side:
        return self._side

    @property
    def size(self) -> Vector2D:
        """Paddle extents (width, height); a copy, the paddle size never changes"""
        return self._size.copy()

    @property
    def width(self) -> float:
        return self._size.x

    @property
    def height(self) -> float:
        return self._size.y

    def vertical_bounds(self, viewport_height: float) -> tuple[float, float]:
        """Range the paddle center may occupy without leaving the playfield"""
        half_height = self.height / 2
        return (half_height, viewport_height - half_height)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height) from the top-left"""
        return (
            self.position.x - self.width / 2,
            self.position.y - self.height / 2,
            self.width,
            self.height,
        )

    def __repr__(self) -> str:
        return (
            f"Paddle(side={self.side.value}, position={self.position.to_tuple()}, "
            f"size={self._size.to_tuple()}, score={self.score})"
        )


class Ball:
    """Game ball"""

    def __init__(self, x: float, y: float, radius: float, speed: float):
        if radius <= 0:
            raise ValueError(f"Ball radius must be positive, got {radius}")
        if speed <= 0:
            raise ValueError(f"Ball speed must be positive, got {speed}")

        self.position = Vector2D(x, y)
        self.velocity = Vector2D(0.0, 0.0)
        self.radius = radius
        self.speed = speed

    def update(self, dt: float) -> None:
        """Updates the ball position"""
        self.position += self.velocity * dt

    def bounce_vertical(self) -> None:
        """Vertical bounce (top/bottom walls)"""
        self.velocity.y = -self.velocity.y

    def bounce_horizontal(self) -> None:
        """Horizontal bounce (paddles)"""
        self.velocity.x = -self.velocity.x

    def __repr__(self) -> str:
        return (
            f"Ball(position={self.position.to_tuple()}, "
            f"velocity={self.velocity.to_tuple()}, radius={self.radius})"
        )
