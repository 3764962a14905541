"""
Match listener protocol - defines how score and outcome changes are surfaced
"""

from typing import Protocol
from typing import runtime_checkable

from ping_pong.core.entities import Side


@runtime_checkable
class MatchListener(Protocol):
    """
    Protocol for presentation elements notified by the round controller.

    A score display only needs the score hook, an outcome dialog only the
    match end hook, but both are part of the contract.
    """

    def on_score_changed(self, side: Side, score: int) -> None:
        """
        Called each time a side's score is changed (including a reset to zero).

        Args:
            side: Side whose score changed
            score: New score of that side
        """
        ...

    def on_match_end(self, winner: Side) -> None:
        """
        Called exactly once when a side reaches the winning score.

        Args:
            winner: Side that won the match
        """
        ...
