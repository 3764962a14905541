"""
Input state for the human-controlled paddle
"""

from enum import Enum


class Control(Enum):
    """Vertical movement controls"""

    UP = "up"
    DOWN = "down"


class PaddleControls:
    """
    Held keys and pending pointer position for one paddle.

    A pointer move received since the last frame is authoritative for that frame;
    otherwise the held keys drive the paddle velocity.
    """

    def __init__(self) -> None:
        self.held: dict[Control, bool] = {Control.UP: False, Control.DOWN: False}
        self.pointer_y: float | None = None

    def press(self, control: Control) -> None:
        self.held[control] = True

    def release(self, control: Control) -> None:
        self.held[control] = False

    def pointer_move(self, y: float) -> None:
        self.pointer_y = y

    def consume_pointer(self) -> float | None:
        """Returns the pending pointer position once, then forgets it"""
        y, self.pointer_y = self.pointer_y, None
        return y

    def velocity(self, paddle_speed: float) -> float:
        """Opposite held keys cancel each other"""
        direction = 0
        if self.held[Control.UP]:
            direction -= 1
        if self.held[Control.DOWN]:
            direction += 1
        return direction * paddle_speed
