"""
Frame driving for Ping Pong: real-time and fixed-step loops
"""

import logging
import time
from collections.abc import Callable

from ping_pong.core.entities import GameState
from ping_pong.core.geometry import clamp
from ping_pong.core.simulation import PongSimulation

logger = logging.getLogger(__name__)

FrameCallback = Callable[[GameState, dict[str, list]], None]


class FrameDriver:
    """
    Turns wall-clock time into clamped simulation steps.

    The driver owns no scheduling mechanism: the host calls tick() once per
    display refresh and stops calling it once tick() returns False.
    """

    def __init__(
        self,
        simulation: PongSimulation,
        on_frame: FrameCallback | None = None,
        clock: Callable[[], float] = time.perf_counter,
        max_dt: float | None = None,
    ):
        self.simulation = simulation
        self.on_frame = on_frame
        self.clock = clock
        self.max_dt = max_dt if max_dt is not None else simulation.config.MAX_FRAME_DT
        if self.max_dt <= 0:
            raise ValueError(f"max_dt must be positive, got {self.max_dt}")

        self.last_time: float | None = None
        self.active = True

    def start(self) -> None:
        """(Re)starts timing, e.g. after the match has been reset"""
        self.last_time = self.clock()
        self.active = self.simulation.running

    def tick(self, now: float | None = None) -> bool:
        """
        Runs one frame.

        Args:
            now: Current time in seconds. If None, read from the clock

        Returns:
            bool: True if another frame should be scheduled
        """
        if not self.active:
            return False

        now = self.clock() if now is None else now
        dt = 0.0 if self.last_time is None else now - self.last_time
        self.last_time = now

        if dt > self.max_dt:
            logger.debug("Frame delta %.3fs clamped to %.3fs", dt, self.max_dt)
        dt = clamp(dt, 0.0, self.max_dt)

        events = self.simulation.advance(dt)
        if self.on_frame is not None:
            self.on_frame(self.simulation.get_game_state(), events)

        self.active = self.simulation.running
        return self.active


def run_fixed_steps(simulation: PongSimulation, steps: int, dt: float) -> list[dict[str, list]]:
    """
    Advances a simulation with a fixed time step, without any clock.

    Stops early when the match ends.

    Returns:
        list: Events of each executed step
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    history = []
    for _ in range(steps):
        history.append(simulation.advance(dt))
        if not simulation.running:
            break
    return history
