"""
Tests for Ping Pong game entities
"""

import math

import pytest

from ping_pong.core.entities import Ball, Paddle, ServeDirection, Side, Vector2D
from ping_pong.utils.config import GameConfig, game_config


class TestVector2D:
    """Tests for Vector2D class"""

    def test_addition(self) -> None:
        """Test vector addition"""
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result.x == 4.0
        assert result.y == 6.0

    def test_scalar_multiplication(self) -> None:
        """Test scalar multiplication"""
        result = Vector2D(2.0, 3.0) * 2.5
        assert result.x == 5.0
        assert result.y == 7.5

    def test_magnitude(self) -> None:
        """Test magnitude calculation"""
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0

    def test_to_tuple(self) -> None:
        """Test tuple conversion"""
        assert Vector2D(1.5, 2.5).to_tuple() == (1.5, 2.5)


class TestSides:
    """Tests for Side and ServeDirection"""

    def test_opponent(self) -> None:
        assert Side.LEFT.opponent is Side.RIGHT
        assert Side.RIGHT.opponent is Side.LEFT

    def test_serve_toward(self) -> None:
        assert ServeDirection.toward(Side.LEFT) is ServeDirection.TOWARD_LEFT
        assert ServeDirection.toward(Side.RIGHT) is ServeDirection.TOWARD_RIGHT


class TestBall:
    """Tests for Ball class"""

    def test_creation_defaults(self) -> None:
        """Test a new ball is still until served"""
        ball = Ball(400.0, 250.0)
        assert ball.position.to_tuple() == (400.0, 250.0)
        assert ball.velocity.to_tuple() == (0.0, 0.0)
        assert ball.radius == game_config.BALL_RADIUS

    def test_update_position(self) -> None:
        """Test position update"""
        ball = Ball(0.0, 0.0, 100.0, 50.0)
        ball.update(0.1)
        assert ball.position.x == pytest.approx(10.0)
        assert ball.position.y == pytest.approx(5.0)

    def test_speed(self) -> None:
        assert Ball(0.0, 0.0, -30.0, 40.0).speed() == pytest.approx(50.0)

    def test_reset_to_center(self) -> None:
        """Test the ball is relaunched from the given center"""
        ball = Ball(10.0, 10.0, 5.0, 5.0)
        ball.reset_to_center((400.0, 250.0), -1, math.pi / 6, 300.0)

        assert ball.position.to_tuple() == (400.0, 250.0)
        assert ball.velocity.x == pytest.approx(-300.0 * math.cos(math.pi / 6))
        assert ball.velocity.y == pytest.approx(150.0)
        assert ball.speed() == pytest.approx(300.0)

    def test_get_rect(self) -> None:
        ball = Ball(100.0, 50.0, radius=8.0)
        assert ball.get_rect() == (92.0, 42.0, 16.0, 16.0)


class TestPaddle:
    """Tests for Paddle class"""

    def test_left_paddle_starts_centered(self) -> None:
        """Test the left paddle is inset from the left edge and vertically centered"""
        paddle = Paddle(Side.LEFT)
        assert paddle.position.x == game_config.PADDLE_MARGIN
        assert paddle.center_y == pytest.approx(game_config.FIELD_HEIGHT / 2)

    def test_right_paddle_starts_centered(self) -> None:
        """Test the right paddle is inset from the right edge"""
        paddle = Paddle(Side.RIGHT)
        expected_x = game_config.FIELD_WIDTH - game_config.PADDLE_MARGIN - game_config.PADDLE_WIDTH
        assert paddle.position.x == expected_x
        assert paddle.center_y == pytest.approx(game_config.FIELD_HEIGHT / 2)

    def test_uses_given_config(self) -> None:
        config = GameConfig(FIELD_HEIGHT=300, PADDLE_HEIGHT=60.0)
        paddle = Paddle(Side.LEFT, config)
        assert paddle.height == 60.0
        assert paddle.max_y == 240.0
        assert paddle.position.y == 120.0

    def test_move_integrates_velocity(self) -> None:
        paddle = Paddle(Side.LEFT)
        start_y = paddle.position.y
        paddle.velocity_y = -100.0
        paddle.move(0.5)
        assert paddle.position.y == pytest.approx(start_y - 50.0)

    def test_move_is_constrained(self) -> None:
        """Test the paddle never leaves the surface"""
        paddle = Paddle(Side.LEFT)
        paddle.velocity_y = 10000.0
        paddle.move(1.0)
        assert paddle.position.y == paddle.max_y

        paddle.velocity_y = -10000.0
        paddle.move(1.0)
        assert paddle.position.y == 0.0

    def test_move_to(self) -> None:
        paddle = Paddle(Side.RIGHT)
        paddle.move_to(123.0)
        assert paddle.position.y == 123.0
        paddle.move_to(-50.0)
        assert paddle.position.y == 0.0

    def test_fit_to_field(self) -> None:
        """Test bounds follow a surface resize"""
        paddle = Paddle(Side.RIGHT)
        paddle.move_to(paddle.max_y)
        paddle.fit_to_field(1000.0, 250.0)

        assert paddle.max_y == 250.0 - paddle.height
        assert paddle.position.y == paddle.max_y
        assert paddle.position.x == 1000.0 - paddle.margin - paddle.width

    def test_get_rect(self) -> None:
        """Test getting collision rectangle"""
        paddle = Paddle(Side.LEFT)
        x, y, width, height = paddle.get_rect()
        assert (x, y) == paddle.position.to_tuple()
        assert width == paddle.width
        assert height == paddle.height
