"""
Unit tests for the round controller

Tests round lifecycle functionality including:
- Serve direction, angle band and speed
- Serve delay countdown
- Scoring, notifications and match end
- Manual pause and reset
"""

import math

import numpy as np
import pytest

from ping_pong.core.entities import Ball, ServeDirection, Side
from ping_pong.core.round import RoundController, RoundPhase
from ping_pong.utils.config import GameConfig, game_config


def make_round(listener=None, config=None, seed=7):
    listeners = [listener] if listener is not None else None
    return RoundController(config, np.random.default_rng(seed), listeners)


class TestServe:
    """Test serving the ball"""

    def test_serve_toward_left(self):
        round_controller = make_round()
        ball = Ball(10.0, 10.0)

        round_controller.serve(ball, ServeDirection.TOWARD_LEFT)

        assert ball.position.to_tuple() == (
            game_config.FIELD_WIDTH / 2,
            game_config.FIELD_HEIGHT / 2,
        )
        assert ball.velocity.x < 0
        assert ball.speed() == pytest.approx(game_config.BALL_SPEED)

    def test_serve_toward_right(self):
        round_controller = make_round()
        ball = Ball(10.0, 10.0)

        round_controller.serve(ball, ServeDirection.TOWARD_RIGHT)

        assert ball.velocity.x > 0
        assert ball.speed() == pytest.approx(game_config.BALL_SPEED)

    def test_serve_angle_stays_in_band(self):
        """Test serves are never close to vertical"""
        round_controller = make_round()
        ball = Ball(0.0, 0.0)

        for _ in range(200):
            round_controller.serve(ball)
            angle = math.atan2(ball.velocity.y, abs(ball.velocity.x))
            assert abs(angle) <= game_config.SERVE_ANGLE_LIMIT + 1e-9

    def test_random_serve_goes_both_ways(self):
        round_controller = make_round()
        ball = Ball(0.0, 0.0)

        directions = set()
        for _ in range(100):
            round_controller.serve(ball, ServeDirection.RANDOM)
            directions.add(math.copysign(1.0, ball.velocity.x))

        assert directions == {-1.0, 1.0}

    def test_same_seed_same_serves(self):
        """Test serves are reproducible with a seeded generator"""
        ball_a, ball_b = Ball(0.0, 0.0), Ball(0.0, 0.0)
        round_a, round_b = make_round(seed=3), make_round(seed=3)

        for _ in range(5):
            round_a.serve(ball_a)
            round_b.serve(ball_b)
            assert ball_a.velocity.to_tuple() == ball_b.velocity.to_tuple()


class TestServeDelay:
    """Test the pause before each serve"""

    def test_start_new_round_pauses(self):
        round_controller = make_round()
        round_controller.start_new_round(Ball(0.0, 0.0), ServeDirection.TOWARD_LEFT)

        assert round_controller.paused
        assert round_controller.phase is RoundPhase.SERVING
        assert round_controller.serve_timer == game_config.SERVE_DELAY

    def test_countdown_resumes_play(self):
        """Test the delay is consumed by update and play resumes on the next frame"""
        round_controller = make_round(config=GameConfig(SERVE_DELAY=0.5))
        round_controller.start_new_round(Ball(0.0, 0.0), ServeDirection.TOWARD_RIGHT)

        assert round_controller.update(0.25) is False
        assert round_controller.phase is RoundPhase.SERVING

        assert round_controller.update(0.25) is False
        assert round_controller.phase is RoundPhase.RALLYING
        assert not round_controller.paused

        assert round_controller.update(0.25) is True

    def test_zero_delay_does_not_pause(self):
        round_controller = make_round(config=GameConfig(SERVE_DELAY=0.0))
        round_controller.start_new_round(Ball(0.0, 0.0), ServeDirection.TOWARD_RIGHT)

        assert not round_controller.paused
        assert round_controller.update(0.01) is True

    def test_toggle_pause_cancels_countdown(self):
        round_controller = make_round()
        round_controller.start_new_round(Ball(0.0, 0.0), ServeDirection.TOWARD_RIGHT)

        round_controller.toggle_pause()

        assert not round_controller.paused
        assert round_controller.serve_timer == 0.0
        assert round_controller.update(0.01) is True


class TestScoring:
    """Test points and match end"""

    def test_point_increments_and_notifies(self, listener):
        round_controller = make_round(listener)
        ended = round_controller.award_point(Side.LEFT, Ball(0.0, 0.0))

        assert ended is False
        assert round_controller.score == (1, 0)
        assert listener.scores == [(Side.LEFT, 1)]
        assert listener.winners == []

    def test_listener_added_later_is_notified(self, listener):
        round_controller = make_round()
        round_controller.add_listener(listener)

        round_controller.award_point(Side.RIGHT, Ball(0.0, 0.0))

        assert listener.scores == [(Side.RIGHT, 1)]

    def test_serve_goes_to_side_that_conceded(self):
        round_controller = make_round()
        ball = Ball(0.0, 0.0)

        round_controller.award_point(Side.RIGHT, ball)
        assert ball.velocity.x < 0, "Left conceded, serve toward the left"
        assert round_controller.phase is RoundPhase.SERVING

        round_controller.award_point(Side.LEFT, ball)
        assert ball.velocity.x > 0, "Right conceded, serve toward the right"

    def test_reaching_winning_score_ends_match(self, listener):
        round_controller = make_round(listener)
        ball = Ball(0.0, 0.0)

        for _ in range(game_config.WINNING_SCORE - 1):
            assert round_controller.award_point(Side.RIGHT, ball) is False

        assert round_controller.award_point(Side.RIGHT, ball) is True
        assert round_controller.score == (0, game_config.WINNING_SCORE)
        assert round_controller.running is False
        assert round_controller.paused is True
        assert round_controller.winner is Side.RIGHT
        assert round_controller.phase is RoundPhase.MATCH_ENDED
        assert listener.winners == [Side.RIGHT]

    def test_no_margin_rule(self):
        """Test the first side to the threshold wins even when the other is one behind"""
        round_controller = make_round(config=GameConfig(WINNING_SCORE=3))
        ball = Ball(0.0, 0.0)
        round_controller.scores = {Side.LEFT: 2, Side.RIGHT: 2}

        assert round_controller.award_point(Side.LEFT, ball) is True
        assert round_controller.winner is Side.LEFT

    def test_points_after_match_end_are_ignored(self, listener):
        round_controller = make_round(listener, config=GameConfig(WINNING_SCORE=1))
        ball = Ball(0.0, 0.0)
        round_controller.award_point(Side.LEFT, ball)

        assert round_controller.award_point(Side.RIGHT, ball) is False
        assert round_controller.score == (1, 0)
        assert listener.winners == [Side.LEFT]

    def test_update_after_match_end_never_runs_physics(self):
        round_controller = make_round(config=GameConfig(WINNING_SCORE=1))
        round_controller.award_point(Side.LEFT, Ball(0.0, 0.0))

        assert round_controller.update(0.016) is False
        round_controller.toggle_pause()
        assert round_controller.paused is True
        assert round_controller.update(0.016) is False


class TestReset:
    """Test restarting the match"""

    def test_reset_after_match_end(self, listener):
        round_controller = make_round(listener, config=GameConfig(WINNING_SCORE=1))
        ball = Ball(0.0, 0.0)
        round_controller.award_point(Side.RIGHT, ball)
        listener.scores.clear()

        round_controller.reset(ball)

        assert round_controller.score == (0, 0)
        assert round_controller.running is True
        assert round_controller.paused is False
        assert round_controller.winner is None
        assert round_controller.phase is RoundPhase.RALLYING
        assert ball.speed() == pytest.approx(game_config.BALL_SPEED)
        assert sorted(listener.scores, key=lambda s: s[0].value) == [
            (Side.LEFT, 0),
            (Side.RIGHT, 0),
        ]
