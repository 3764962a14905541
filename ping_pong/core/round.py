"""
Round lifecycle for Ping Pong: scores, serves, serve delay and match end
"""

import logging
from enum import Enum

import numpy as np

from ping_pong.core.entities import Ball
from ping_pong.core.entities import ServeDirection
from ping_pong.core.entities import Side
from ping_pong.core.interfaces.listener import MatchListener
from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class RoundPhase(Enum):
    """Lifecycle state of the current round"""

    SERVING = "serving"
    RALLYING = "rallying"
    MATCH_ENDED = "match_ended"


class RoundController:
    """
    Owns the scores, the serve-delay countdown and win detection.

    The serve delay is a countdown consumed by update(dt) rather than a timer
    callback, so the whole match runs off the simulation clock. The countdown
    and a manual pause share the paused flag.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        listeners: list[MatchListener] | None = None,
    ):
        self.config = config or game_config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.listeners: list[MatchListener] = list(listeners or [])

        self.scores: dict[Side, int] = {Side.LEFT: 0, Side.RIGHT: 0}
        self.paused = False
        self.running = True
        self.serve_timer = 0.0
        self.winner: Side | None = None
        self.center = (self.config.FIELD_WIDTH / 2, self.config.FIELD_HEIGHT / 2)

    def add_listener(self, listener: MatchListener) -> None:
        self.listeners.append(listener)

    @property
    def phase(self) -> RoundPhase:
        if not self.running:
            return RoundPhase.MATCH_ENDED
        if self.serve_timer > 0:
            return RoundPhase.SERVING
        return RoundPhase.RALLYING

    @property
    def score(self) -> tuple[int, int]:
        return (self.scores[Side.LEFT], self.scores[Side.RIGHT])

    def serve(self, ball: Ball, direction: ServeDirection = ServeDirection.RANDOM) -> None:
        """Puts the ball at the center and launches it at the initial speed"""
        if direction is ServeDirection.RANDOM:
            sign = -1 if self.rng.random() < 0.5 else 1
        else:
            sign = direction.value

        limit = self.config.SERVE_ANGLE_LIMIT
        angle = float(self.rng.uniform(-limit, limit))

        ball.reset_to_center(self.center, sign, angle, self.config.BALL_SPEED)
        logger.debug("Serve toward %s at %.3f rad", "left" if sign < 0 else "right", angle)

    def start_new_round(self, ball: Ball, direction: ServeDirection) -> None:
        """Serves and pauses the simulation for the serve delay"""
        self.serve(ball, direction)
        self.serve_timer = self.config.SERVE_DELAY
        self.paused = self.serve_timer > 0

    def update(self, dt: float) -> bool:
        """
        Advances the serve-delay countdown.

        Returns:
            bool: True when physics should run this frame
        """
        if self.serve_timer > 0:
            self.serve_timer -= dt
            if self.serve_timer <= 0:
                self.serve_timer = 0.0
                self.paused = False
            return False
        return self.running and not self.paused

    def toggle_pause(self) -> None:
        """Manual pause; ignored once the match is over"""
        if not self.running:
            return
        self.paused = not self.paused
        self.serve_timer = 0.0

    def award_point(self, side: Side, ball: Ball) -> bool:
        """
        Credits a point to side.

        Returns:
            bool: True if this point ended the match
        """
        if not self.running:
            return False

        self.scores[side] += 1
        score = self.scores[side]
        logger.info("Point for %s: %d - %d", side.value, *self.score)
        self._notify_score(side)

        if score >= self.config.WINNING_SCORE:
            self._end_match(side)
            return True

        # The side that conceded receives the next serve
        self.start_new_round(ball, ServeDirection.toward(side.opponent))
        return False

    def reset(self, ball: Ball) -> None:
        """Zeroes the scores and serves immediately, without serve delay"""
        self.scores = {Side.LEFT: 0, Side.RIGHT: 0}
        self.winner = None
        self.serve_timer = 0.0
        self.paused = False
        self.running = True
        for side in Side:
            self._notify_score(side)
        self.serve(ball)
        logger.info("Match reset")

    def _end_match(self, winner: Side) -> None:
        self.running = False
        self.paused = True
        self.serve_timer = 0.0
        self.winner = winner
        logger.info("Match over, %s wins %d - %d", winner.value, *self.score)
        for listener in self.listeners:
            listener.on_match_end(winner)

    def _notify_score(self, side: Side) -> None:
        for listener in self.listeners:
            listener.on_score_changed(side, self.scores[side])
