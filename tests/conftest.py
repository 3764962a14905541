"""
Shared fixtures for Ping Pong tests
"""

import pytest

from ping_pong.core.entities import Side
from ping_pong.core.simulation import PongSimulation


class RecordingListener:
    """Match listener that remembers every notification"""

    def __init__(self) -> None:
        self.scores: list[tuple[Side, int]] = []
        self.winners: list[Side] = []

    def on_score_changed(self, side: Side, score: int) -> None:
        self.scores.append((side, score))

    def on_match_end(self, winner: Side) -> None:
        self.winners.append(winner)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def simulation(listener: RecordingListener) -> PongSimulation:
    """Simulation with a rally in progress (no serve delay pending)"""
    sim = PongSimulation(seed=1234, listeners=[listener])
    sim.reset()
    listener.scores.clear()
    return sim
