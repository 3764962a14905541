"""
Geometry helpers for collision detection
"""

from ping_pong.core.entities import Ball


def clamp(value: float, lo: float, hi: float) -> float:
    """Bounds value to [lo, hi]"""
    return max(lo, min(hi, value))


def circle_intersects_rect(
    cx: float, cy: float, r: float, rx: float, ry: float, rw: float, rh: float
) -> bool:
    """
    Detects intersection between a circle and an axis-aligned rectangle.

    The nearest point of the rectangle to the circle center is found by clamping
    the center into the rectangle span on each axis. Tangency counts as a hit.
    """
    # Closest point on the rectangle to the circle center
    nearest_x = clamp(cx, rx, rx + rw)
    nearest_y = clamp(cy, ry, ry + rh)

    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy <= r * r


def circle_rect_collision(ball: Ball, rect: tuple[float, float, float, float]) -> bool:
    """Detects collision between the ball and a rectangle (x, y, width, height)"""
    x, y, width, height = rect
    return circle_intersects_rect(
        ball.position.x, ball.position.y, ball.radius, x, y, width, height
    )
