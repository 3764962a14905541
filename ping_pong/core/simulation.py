"""
Simulation step for Ping Pong
"""

import math
from typing import Any

import numpy as np

from ping_pong.ai.opponent import TrackingAI
from ping_pong.core.controls import Control
from ping_pong.core.controls import PaddleControls
from ping_pong.core.entities import Ball
from ping_pong.core.entities import GameState
from ping_pong.core.entities import Paddle
from ping_pong.core.entities import ServeDirection
from ping_pong.core.entities import Side
from ping_pong.core.geometry import circle_rect_collision
from ping_pong.core.geometry import clamp
from ping_pong.core.interfaces.listener import MatchListener
from ping_pong.core.round import RoundController
from ping_pong.core.round import RoundPhase
from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

# Gap left between the ball and a paddle face after a bounce
COLLISION_NUDGE = 0.5


class PongSimulation:
    """
    Complete state of one match and the per-frame transition.

    Every piece of mutable state lives on the instance, so several matches can run
    side by side and a test can drive one with any sequence of dt values.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        listeners: list[MatchListener] | None = None,
    ):
        self.config = config or game_config
        self.field_width = float(self.config.FIELD_WIDTH)
        self.field_height = float(self.config.FIELD_HEIGHT)

        self.left_paddle = Paddle(Side.LEFT, self.config)
        self.right_paddle = Paddle(Side.RIGHT, self.config)
        self.ball = Ball(
            self.field_width / 2, self.field_height / 2, radius=self.config.BALL_RADIUS
        )

        self.controls = PaddleControls()
        self.opponent = TrackingAI(self.config.AI_SPEED)
        self.round = RoundController(self.config, np.random.default_rng(seed), listeners)
        self.game_time = 0.0

        self.round.start_new_round(self.ball, ServeDirection.RANDOM)

    @property
    def paused(self) -> bool:
        return self.round.paused

    @property
    def running(self) -> bool:
        return self.round.running

    def advance(self, dt: float) -> dict[str, list]:
        """
        Advances the match by dt seconds.

        Args:
            dt: Elapsed time since the previous frame, already clamped by the caller

        Returns:
            Dict: Events that occurred during this frame
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        events: dict[str, list] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "goals": [],
            "match_over": [],
        }

        if not self.round.update(dt):
            return events

        self.game_time += dt

        # Move players
        self._move_human_paddle(dt)
        self.opponent.update(self.right_paddle, self.ball, dt)

        self.ball.update(dt)

        wall = self._check_walls()
        if wall is not None:
            events["wall_bounces"].append(wall)

        for paddle in (self.left_paddle, self.right_paddle):
            if self._check_paddle(paddle):
                events["paddle_hits"].append({"side": paddle.side, "speed": self.ball.speed()})

        self._check_goals(events)
        return events

    def _move_human_paddle(self, dt: float) -> None:
        paddle = self.left_paddle
        pointer_y = self.controls.consume_pointer()

        if pointer_y is not None:
            paddle.velocity_y = 0.0
            paddle.move_to(pointer_y - paddle.height / 2)
        else:
            paddle.velocity_y = self.controls.velocity(self.config.PADDLE_SPEED)
            paddle.move(dt)

    def _check_walls(self) -> str | None:
        """Reflects the ball on the top and bottom walls"""
        ball = self.ball
        if ball.position.y - ball.radius <= 0:
            ball.position.y = ball.radius
            ball.velocity.y = abs(ball.velocity.y)
            return "top"
        if ball.position.y + ball.radius >= self.field_height:
            ball.position.y = self.field_height - ball.radius
            ball.velocity.y = -abs(ball.velocity.y)
            return "bottom"
        return None

    def _check_paddle(self, paddle: Paddle) -> bool:
        """Bounces the ball off paddle if it is moving toward it and touching it"""
        ball = self.ball
        away = 1 if paddle.side is Side.LEFT else -1

        if ball.velocity.x * away >= 0:
            return False
        if not circle_rect_collision(ball, paddle.get_rect()):
            return False

        # -1 at the bottom edge, 1 at the top edge
        relative_intersect = (paddle.center_y - ball.position.y) / (paddle.height / 2)
        relative_intersect = clamp(relative_intersect, -1.0, 1.0)
        bounce_angle = relative_intersect * self.config.MAX_DEFLECTION_ANGLE

        speed = ball.speed() * self.config.BALL_SPEED_INCREASE
        ball.velocity.x = away * speed * math.cos(bounce_angle)
        ball.velocity.y = -speed * math.sin(bounce_angle)

        if paddle.side is Side.LEFT:
            ball.position.x = paddle.position.x + paddle.width + ball.radius + COLLISION_NUDGE
        else:
            ball.position.x = paddle.position.x - ball.radius - COLLISION_NUDGE
        return True

    def _check_goals(self, events: dict[str, list]) -> None:
        ball = self.ball
        if ball.position.x + ball.radius < 0:
            scorer = Side.RIGHT
        elif ball.position.x - ball.radius > self.field_width:
            scorer = Side.LEFT
        else:
            return

        match_over = self.round.award_point(scorer, ball)
        events["goals"].append({"side": scorer, "score": self.round.score})
        if match_over:
            events["match_over"].append({"winner": scorer})

    def key_down(self, key: int) -> None:
        """Handles a key press; unbound keys are ignored"""
        if key in self.config.PAUSE_KEYS:
            self.toggle_pause()
        elif key in self.config.UP_KEYS:
            self.controls.press(Control.UP)
        elif key in self.config.DOWN_KEYS:
            self.controls.press(Control.DOWN)

    def key_up(self, key: int) -> None:
        if key in self.config.UP_KEYS:
            self.controls.release(Control.UP)
        elif key in self.config.DOWN_KEYS:
            self.controls.release(Control.DOWN)

    def pointer_move(self, y: float) -> None:
        self.controls.pointer_move(y)

    def toggle_pause(self) -> None:
        self.round.toggle_pause()

    def reset(self) -> None:
        """Starts the match over without rebuilding the simulation"""
        self.round.reset(self.ball)

    def resize(self, width: float, height: float) -> None:
        """Adapts the playing surface to a new size, keeping paddles on it"""
        self.field_width = float(width)
        self.field_height = float(height)
        self.round.center = (self.field_width / 2, self.field_height / 2)
        self.left_paddle.fit_to_field(self.field_width, self.field_height)
        self.right_paddle.fit_to_field(self.field_width, self.field_height)

    def get_game_state(self) -> GameState:
        """Returns a read-only snapshot for renderers"""
        return GameState(
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            ball_radius=self.ball.radius,
            left_paddle=self.left_paddle.get_rect(),
            right_paddle=self.right_paddle.get_rect(),
            score=self.round.score,
            paused=self.round.paused,
            serving=self.round.phase is RoundPhase.SERVING,
            running=self.round.running,
            winner=self.round.winner,
            field_size=(self.field_width, self.field_height),
            show_center_line=self.config.SHOW_CENTER_LINE,
        )

    def get_debug_info(self) -> dict[str, Any]:
        return {
            "ball_speed": f"{self.ball.speed():.0f}",
            "phase": self.round.phase.value,
            "time": f"{self.game_time:.1f}",
        }


def step(simulation: PongSimulation, dt: float) -> PongSimulation:
    """Functional form of PongSimulation.advance for externally owned loops"""
    simulation.advance(dt)
    return simulation
