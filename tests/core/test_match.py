"""
Tests for the match scene: setup, frame order, reset
"""

import pytest

from duel_pong.core.entities import PaddleInput, Side, Vector2D
from duel_pong.core.match import PongMatch
from duel_pong.utils.config import GameConfig


@pytest.fixture
def match() -> PongMatch:
    return PongMatch(GameConfig())


class TestMatchSetup:
    """Test the initial layout of a match"""

    def test_paddles_against_edges(self, match):
        """Test that paddles start against their edge, vertically centered"""
        left = match.paddles[Side.LEFT]
        right = match.paddles[Side.RIGHT]

        assert left.size == Vector2D(21.0, 70.0)
        assert left.position == Vector2D(10.5, 200.0)
        assert right.position == Vector2D(589.5, 200.0)

    def test_ball_served_right(self, match):
        """Test that the opening serve goes to the right"""
        assert match.ball.position == Vector2D(300.0, 200.0)
        assert match.ball.velocity == Vector2D(300.0, 300.0)
        assert match.ball.radius == 12.5

    def test_scores_start_at_zero(self, match):
        """Test the opening score"""
        assert match.score == (0, 0)

    def test_custom_config(self):
        """Test that the viewport comes from the configuration"""
        match = PongMatch(GameConfig(VIEWPORT_WIDTH=800, VIEWPORT_HEIGHT=600, BALL_SPEED=200.0))

        assert match.ball.position == Vector2D(400.0, 300.0)
        assert match.ball.velocity == Vector2D(200.0, 200.0)
        assert match.paddles[Side.RIGHT].position == Vector2D(789.5, 300.0)


class TestMatchStep:
    """Test a frame of the match"""

    def test_inputs_move_paddles(self, match):
        """Test that each side follows its own input"""
        inputs = {Side.LEFT: PaddleInput(up=True), Side.RIGHT: PaddleInput(down=True)}

        match.step(0.016, inputs)

        assert match.paddles[Side.LEFT].position.y == pytest.approx(192.0)
        assert match.paddles[Side.RIGHT].position.y == pytest.approx(208.0)

    def test_missing_input_holds_still(self, match):
        """Test that a side without input does not move"""
        match.step(0.016, {Side.LEFT: PaddleInput(down=True)})
        match.step(0.016)

        assert match.paddles[Side.RIGHT].position.y == 200.0

    def test_paddles_move_before_ball(self, match):
        """Test that the ball collides with the paddle position of the same frame"""
        match.ball.position = Vector2D(25.0, 153.3)
        match.ball.velocity = Vector2D(-300.0, -300.0)

        events = match.step(0.016, {Side.LEFT: PaddleInput(up=True)})

        assert events["paddle_hits"] == [{"side": "left"}]
        assert match.ball.velocity.x == 300.0

    def test_goal_through_step(self, match):
        """Test that a goal is reported and the ball is served again"""
        match.ball.position = Vector2D(13.0, 300.0)
        match.ball.velocity = Vector2D(-300.0, 300.0)

        events = match.step(0.016)

        assert events["goals"] == [{"side": "right", "score": (0, 1)}]
        assert match.score == (0, 1)
        assert match.ball.position == Vector2D(300.0, 200.0)
        assert match.ball.velocity == Vector2D(-300.0, 300.0)

    def test_game_time_advances(self, match):
        """Test that elapsed time accumulates"""
        match.step(0.25)
        match.step(0.25)

        assert match.game_time == pytest.approx(0.5)


class TestMatchReset:
    """Test restarting a match"""

    def test_reset(self, match):
        """Test that reset restores the opening state"""
        match.paddles[Side.LEFT].score = 4
        match.paddles[Side.RIGHT].score = 2
        match.step(0.5, {Side.LEFT: PaddleInput(up=True)})

        match.reset()

        assert match.score == (0, 0)
        assert match.game_time == 0.0
        assert match.paddles[Side.LEFT].position == Vector2D(10.5, 200.0)
        assert match.ball.position == Vector2D(300.0, 200.0)
        assert match.ball.velocity == Vector2D(300.0, 300.0)

    def test_entities_are_kept(self, match):
        """Test that reset repositions entities instead of replacing them"""
        ball = match.ball
        left = match.paddles[Side.LEFT]

        match.reset()

        assert match.ball is ball
        assert match.paddles[Side.LEFT] is left


class TestGameState:
    """Test the snapshot handed to the host"""

    def test_get_game_state(self, match):
        """Test that the game state is returned correctly"""
        state = match.get_game_state()

        assert state["ball_position"] == (300.0, 200.0)
        assert state["ball_velocity"] == (300.0, 300.0)
        assert state["ball_speed"] == pytest.approx(300.0 * 2**0.5)
        assert state["left_paddle_position"] == (10.5, 200.0)
        assert state["right_paddle_size"] == (21.0, 70.0)
        assert state["score"] == (0, 0)
        assert state["field_bounds"] == (0.0, 600.0, 0.0, 400.0)
