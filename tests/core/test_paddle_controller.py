"""
Unit tests for paddle motion
"""

import random

import pytest

from duel_pong.core.entities import Paddle, PaddleInput, Side
from duel_pong.core.paddle_controller import PaddleController

VIEWPORT_HEIGHT = 400.0


def make_controller(y: float = 200.0, side: Side = Side.LEFT) -> PaddleController:
    return PaddleController(Paddle(side, 10.0, y, 20.0, 70.0, 500.0))


class TestPaddleController:
    """Test vertical paddle motion"""

    def test_move_up(self):
        """Test that holding up moves the paddle towards the top"""
        controller = make_controller()

        new_y = controller.update(PaddleInput(up=True), 0.016, VIEWPORT_HEIGHT)

        assert new_y == pytest.approx(192.0)
        assert controller.paddle.position.y == new_y

    def test_move_down(self):
        """Test that holding down moves the paddle towards the bottom"""
        controller = make_controller()

        controller.update(PaddleInput(down=True), 0.016, VIEWPORT_HEIGHT)

        assert controller.paddle.position.y == pytest.approx(208.0)

    def test_no_input_holds_still(self):
        """Test that the paddle stays put without input"""
        controller = make_controller()

        controller.update(PaddleInput(), 0.016, VIEWPORT_HEIGHT)

        assert controller.paddle.position.y == 200.0

    def test_both_held_moves_down(self):
        """Test the tie-break when up and down are both held"""
        controller = make_controller()

        controller.update(PaddleInput(up=True, down=True), 0.016, VIEWPORT_HEIGHT)

        assert controller.paddle.position.y == pytest.approx(208.0)

    def test_x_never_changes(self):
        """Test that only the vertical position moves"""
        controller = make_controller()

        controller.update(PaddleInput(down=True), 0.5, VIEWPORT_HEIGHT)

        assert controller.paddle.position.x == 10.0

    def test_clamped_at_top(self):
        """Test that the paddle cannot leave through the top"""
        controller = make_controller(y=40.0)

        controller.update(PaddleInput(up=True), 1.0, VIEWPORT_HEIGHT)

        assert controller.paddle.position.y == 35.0

    def test_clamped_at_bottom(self):
        """Test that the paddle cannot leave through the bottom"""
        controller = make_controller(y=360.0)

        controller.update(PaddleInput(down=True), 1.0, VIEWPORT_HEIGHT)

        assert controller.paddle.position.y == 365.0

    def test_score_untouched(self):
        """Test that moving never changes the score"""
        controller = make_controller()
        controller.paddle.score = 3

        controller.update(PaddleInput(up=True), 0.016, VIEWPORT_HEIGHT)

        assert controller.paddle.score == 3

    def test_side_follows_paddle(self):
        """Test that the controller reports the side of its paddle"""
        assert make_controller(side=Side.RIGHT).side is Side.RIGHT

    def test_stays_in_bounds_over_random_inputs(self):
        """Test the clamp invariant over many random frames"""
        rng = random.Random(1234)
        controller = make_controller()
        min_y, max_y = controller.paddle.vertical_bounds(VIEWPORT_HEIGHT)

        for _ in range(2000):
            paddle_input = PaddleInput(up=rng.random() < 0.5, down=rng.random() < 0.5)
            controller.update(paddle_input, rng.uniform(0.001, 0.2), VIEWPORT_HEIGHT)
            assert min_y <= controller.paddle.position.y <= max_y
