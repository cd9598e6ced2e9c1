"""
Match scene for Duel Pong: builds the paddles and the ball and drives a frame
"""

import logging
from collections.abc import Mapping
from typing import Any

from duel_pong.core.entities import Ball, Paddle, PaddleInput, Side
from duel_pong.core.paddle_controller import PaddleController
from duel_pong.core.physics import BallSimulation
from duel_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)

NO_INPUT = PaddleInput()


class PongMatch:
    """Owns the ball and both paddles for a whole session"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config or game_config
        self.viewport_width = float(self.config.VIEWPORT_WIDTH)
        self.viewport_height = float(self.config.VIEWPORT_HEIGHT)

        self.paddles = {side: self._create_paddle(side) for side in Side}
        self.controllers = {side: PaddleController(paddle) for side, paddle in self.paddles.items()}

        center_x, center_y = self.config.center
        self.ball = Ball(center_x, center_y, self.config.BALL_RADIUS, self.config.BALL_SPEED)
        self.ball_simulation = BallSimulation(
            self.ball,
            self.paddles,
            self.viewport_width,
            self.viewport_height,
            center=self.config.center,
        )
        self.game_time = 0.0

        self.ball_simulation.serve(Side.RIGHT)
        logger.info(
            "Match started on a %dx%d viewport", self.viewport_width, self.viewport_height
        )

    def _create_paddle(self, side: Side) -> Paddle:
        paddle = Paddle.from_sprite(
            side,
            0.0,
            0.0,
            (self.config.PADDLE_SPRITE_WIDTH, self.config.PADDLE_SPRITE_HEIGHT),
            self.config.PADDLE_SCALE,
            self.config.PADDLE_SPEED,
        )
        self._place_paddle(paddle)
        return paddle

    def _place_paddle(self, paddle: Paddle) -> None:
        """Puts a paddle against its edge of the viewport, vertically centered"""
        half_width = paddle.width / 2
        if paddle.side is Side.LEFT:
            paddle.position.x = half_width
        else:
            paddle.position.x = self.viewport_width - half_width
        paddle.position.y = self.viewport_height / 2

    def step(self, dt: float, inputs: Mapping[Side, PaddleInput] | None = None) -> dict[str, list]:
        """
        Runs one frame: both paddles first, then the ball

        Args:
            dt: Delta time in seconds, strictly positive
            inputs: Up/down signals per side; a missing side holds still

        Returns:
            Events of the frame, see BallSimulation.update
        """
        inputs = inputs or {}
        for side, controller in self.controllers.items():
            controller.update(inputs.get(side, NO_INPUT), dt, self.viewport_height)

        self.game_time += dt
        return self.ball_simulation.update(dt)

    def reset(self) -> None:
        """Zeroes the scores, recenters the paddles and serves again"""
        for paddle in self.paddles.values():
            paddle.score = 0
            self._place_paddle(paddle)
        self.game_time = 0.0
        self.ball_simulation.serve(Side.RIGHT)
        logger.info("Match reset")

    @property
    def score(self) -> tuple[int, int]:
        """Current score as (left, right)"""
        return self.ball_simulation.score

    def get_game_state(self) -> dict[str, Any]:
        """Returns a snapshot of the match for a host"""
        left = self.paddles[Side.LEFT]
        right = self.paddles[Side.RIGHT]
        return {
            "ball_position": self.ball.position.to_tuple(),
            "ball_velocity": self.ball.velocity.to_tuple(),
            "ball_radius": self.ball.radius,
            "ball_speed": self.ball.velocity.magnitude(),
            "left_paddle_position": left.position.to_tuple(),
            "right_paddle_position": right.position.to_tuple(),
            "left_paddle_size": left.size.to_tuple(),
            "right_paddle_size": right.size.to_tuple(),
            "score": self.score,
            "time_elapsed": self.game_time,
            "field_bounds": (0.0, self.viewport_width, 0.0, self.viewport_height),
        }
