"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any
from typing import Protocol
from typing import runtime_checkable

from ping_pong.core.entities import GameState


@runtime_checkable
class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Enables multiple rendering backends: Pygame, headless, terminal, etc.
    """

    def render_game_state(
        self, game_state: GameState, additional_info: dict[str, Any] | None = None
    ) -> None:
        """
        Render a single frame of the game.

        Args:
            game_state: Snapshot of paddles, ball and round flags
            additional_info: Optional extra data to display (FPS, debug info, etc.)
        """
        ...

    def present(self) -> None:
        """Show the frame that was just rendered"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
