"""
Example of driving a Duel Pong match without a window

Both paddles follow the ball vertically; the match runs at a fixed time step
and prints every goal.
"""

import logging

from duel_pong.core.entities import PaddleInput, Side
from duel_pong.core.match import PongMatch


class BallFollower:
    """Input source that moves each paddle towards the ball"""

    def __init__(self, match: PongMatch, dead_zone: float = 10.0):
        self.match = match
        self.dead_zone = dead_zone

    def poll(self) -> dict[Side, PaddleInput]:
        ball_y = self.match.ball.position.y
        inputs = {}
        for side, paddle in self.match.paddles.items():
            offset = ball_y - paddle.position.y
            inputs[side] = PaddleInput(up=offset < -self.dead_zone, down=offset > self.dead_zone)
        return inputs


def main(frames: int = 60 * 60, dt: float = 1 / 60) -> None:
    logging.basicConfig(level=logging.INFO)

    match = PongMatch()
    follower = BallFollower(match)

    for _ in range(frames):
        events = match.step(dt, follower.poll())
        for goal in events["goals"]:
            print(f"{match.game_time:7.2f}s goal for {goal['side']}: {goal['score']}")

    left, right = match.score
    print(f"Final score after {match.game_time:.0f}s: {left}-{right}")


if __name__ == "__main__":
    main()
