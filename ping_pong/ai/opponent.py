"""
Computer-controlled opponent for Ping Pong
"""

import math

from ping_pong.core.entities import Ball
from ping_pong.core.entities import Paddle


class TrackingAI:
    """Rate-limited AI that keeps its paddle centered on the ball"""

    def __init__(self, speed: float):
        self.speed = speed

    def target_y(self, paddle: Paddle, ball: Ball) -> float:
        """Top edge position that centers the paddle on the ball"""
        return ball.position.y - paddle.height / 2

    def update(self, paddle: Paddle, ball: Ball, dt: float) -> None:
        """Moves the paddle toward the ball by at most speed * dt"""
        target = self.target_y(paddle, ball)
        diff = target - paddle.position.y
        max_move = self.speed * dt

        if abs(diff) > max_move:
            paddle.move_to(paddle.position.y + math.copysign(max_move, diff))
        else:
            # Snap to avoid oscillating around the target
            paddle.move_to(target)
