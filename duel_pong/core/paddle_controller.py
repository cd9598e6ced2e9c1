"""
Paddle motion for Duel Pong
"""

from duel_pong.core.entities import Paddle, PaddleInput, Side


class PaddleController:
    """Moves one paddle vertically from the directional input of its side"""

    def __init__(self, paddle: Paddle):
        self.paddle = paddle

    @property
    def side(self) -> Side:
        return self.paddle.side

    def velocity(self, paddle_input: PaddleInput) -> float:
        """Vertical velocity for this frame; screen y grows downwards"""
        return paddle_input.direction * self.paddle.speed

    def update(self, paddle_input: PaddleInput, dt: float, viewport_height: float) -> float:
        """
        Moves the paddle for one frame and returns its new vertical position

        Args:
            paddle_input: Up/down signals for this paddle's side
            dt: Delta time in seconds
            viewport_height: Height of the playfield

        Returns:
            float: New center y, clamped so the paddle stays inside the playfield
        """
        min_y, max_y = self.paddle.vertical_bounds(viewport_height)
        new_y = self.paddle.position.y + self.velocity(paddle_input) * dt
        self.paddle.position.y = max(min_y, min(max_y, new_y))
        return self.paddle.position.y
