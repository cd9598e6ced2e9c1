"""
Collision detection helpers for Duel Pong
"""

from duel_pong.core.entities import Ball, Paddle, Vector2D


def point_in_rect(point: Vector2D, rect: tuple[float, float, float, float]) -> bool:
    """Checks if a point is inside a rectangle (x, y, width, height), edges included"""
    x, y, width, height = rect
    return x <= point.x <= x + width and y <= point.y <= y + height


def expanded_paddle_rect(paddle: Paddle, radius: float) -> tuple[float, float, float, float]:
    """
    Paddle rectangle grown by ``radius`` on every side.

    Testing the ball center against this rectangle stands in for a
    circle-versus-rectangle test.
    """
    x, y, width, height = paddle.get_rect()
    return (x - radius, y - radius, width + 2 * radius, height + 2 * radius)


def ball_touches_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Detects contact between the ball and a paddle"""
    return point_in_rect(ball.position, expanded_paddle_rect(paddle, ball.radius))
