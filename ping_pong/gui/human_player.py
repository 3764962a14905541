"""
Human player input for Ping Pong
"""

import pygame

from ping_pong.core.simulation import PongSimulation


class InputManager:
    """Translates pygame events into simulation input and application actions"""

    def __init__(self, simulation: PongSimulation) -> None:
        self.simulation = simulation

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (pause, quit, etc.) or None
        """
        config = self.simulation.config

        if event.type == pygame.KEYDOWN:
            # Global application controls
            if event.key == pygame.K_ESCAPE:
                return "quit"
            elif event.key in config.RESET_KEYS:
                return "restart"
            elif event.key == pygame.K_F2:
                return "toggle_fps"
            elif event.key == pygame.K_F3:
                return "toggle_debug"

            self.simulation.key_down(event.key)
            if event.key in config.PAUSE_KEYS:
                return "pause"

        elif event.type == pygame.KEYUP:
            self.simulation.key_up(event.key)

        elif event.type == pygame.MOUSEMOTION:
            self.simulation.pointer_move(event.pos[1])

        elif event.type == pygame.VIDEORESIZE:
            self.simulation.resize(event.w, event.h)
            return "resize"

        elif event.type == pygame.QUIT:
            return "quit"

        return None
