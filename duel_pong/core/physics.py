"""
Ball simulation for Duel Pong
"""

import logging
from collections.abc import Mapping

from duel_pong.core.collision import ball_touches_paddle
from duel_pong.core.entities import Ball, Paddle, Side, Vector2D

logger = logging.getLogger(__name__)


class BallSimulation:
    """Moves the ball, bounces it off walls and paddles, scores and serves"""

    def __init__(
        self,
        ball: Ball,
        paddles: Mapping[Side, Paddle],
        viewport_width: float,
        viewport_height: float,
        center: tuple[float, float] | None = None,
    ):
        if set(paddles) != set(Side):
            raise ValueError("BallSimulation needs exactly one paddle per side")
        for side, paddle in paddles.items():
            if paddle.side is not side:
                raise ValueError(f"Paddle registered for {side.value} defends {paddle.side.value}")
        if viewport_width <= 2 * ball.radius or viewport_height <= 2 * ball.radius:
            raise ValueError(
                f"Viewport ({viewport_width}x{viewport_height}) must exceed twice the ball "
                f"radius ({ball.radius})"
            )

        self.ball = ball
        self.paddles = dict(paddles)
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        if center is None:
            center = (viewport_width / 2, viewport_height / 2)
        self.center = Vector2D(*center)

    def serve(self, side: Side) -> None:
        """Puts the ball back at the center and sends it downwards towards ``side``"""
        self.ball.position = self.center.copy()
        direction = -1 if side is Side.LEFT else 1
        self.ball.velocity = Vector2D(direction * self.ball.speed, self.ball.speed)
        logger.debug("Serve towards %s", side.value)

    def update(self, dt: float) -> dict[str, list]:
        """
        Advances the ball by one frame

        Paddles must already be at their positions for this frame.

        Args:
            dt: Delta time in seconds

        Returns:
            Dictionary with the events of the frame:
            {"wall_bounces": [...], "paddle_hits": [...], "goals": [...]}
        """
        events: dict[str, list] = {"wall_bounces": [], "paddle_hits": [], "goals": []}
        ball = self.ball
        radius = ball.radius

        ball.update(dt)

        # Independent checks, the ball is clamped back inside before bouncing
        if ball.position.y <= radius:
            ball.position.y = radius
            ball.bounce_vertical()
            events["wall_bounces"].append("top")

        if ball.position.y >= self.viewport_height - radius:
            ball.position.y = self.viewport_height - radius
            ball.bounce_vertical()
            events["wall_bounces"].append("bottom")

        if ball.position.x <= radius:
            self._score(Side.RIGHT, events)
            self.serve(Side.LEFT)
        elif ball.position.x >= self.viewport_width - radius:
            self._score(Side.LEFT, events)
            self.serve(Side.RIGHT)

        # No positional correction here, the ball may overlap a paddle for a frame
        for side, paddle in self.paddles.items():
            if ball_touches_paddle(ball, paddle):
                ball.bounce_horizontal()
                events["paddle_hits"].append({"side": side.value})

        return events

    def _score(self, side: Side, events: dict[str, list]) -> None:
        """Credits a point to the paddle on ``side``"""
        self.paddles[side].score += 1
        score = self.score
        events["goals"].append({"side": side.value, "score": score})
        logger.debug("Point for %s, score is now %d-%d", side.value, *score)

    @property
    def score(self) -> tuple[int, int]:
        """Current score as (left, right)"""
        return (self.paddles[Side.LEFT].score, self.paddles[Side.RIGHT].score)
