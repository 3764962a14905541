"""
Main game application with PyGame GUI
"""

import logging
from typing import Any

import pygame

from ping_pong.core.driver import FrameDriver
from ping_pong.core.entities import GameState
from ping_pong.core.simulation import PongSimulation
from ping_pong.gui.human_player import InputManager
from ping_pong.gui.pygame_renderer import PygameRenderer
from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PingPongApp:
    """Human vs. computer match in a PyGame window"""

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.config = config or game_config
        self.renderer = PygameRenderer(self.config)
        self.simulation = PongSimulation(self.config, seed=seed)
        self.simulation.round.add_listener(self.renderer)
        self.input_manager = InputManager(self.simulation)
        self.driver = FrameDriver(self.simulation, on_frame=self.render)
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route an input event to the simulation or the application"""
        action = self.input_manager.handle_event(event)

        if action == "quit":
            self.running = False
        elif action == "restart":
            self.restart_game()
        elif action == "toggle_fps":
            self.renderer.toggle_fps_display()
        elif action == "toggle_debug":
            self.renderer.toggle_debug_display()
        elif action == "resize":
            self.renderer.resize(event.w, event.h)
        elif action == "pause":
            logger.info("Paused" if self.simulation.paused else "Resumed")

    def restart_game(self) -> None:
        """Start the match over; the frame loop is rescheduled if it had stopped"""
        self.simulation.reset()
        self.renderer.clear_outcome()
        self.driver.start()

    def render(self, game_state: GameState, events: dict[str, list] | None = None) -> None:
        additional_info: dict[str, Any] = {}
        if self.renderer.show_debug:
            additional_info["debug_info"] = self.simulation.get_debug_info()

        self.renderer.render_game_state(game_state, additional_info)
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Ping Pong")
        self.driver.start()

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                if not self.driver.tick():
                    # No more simulation frames once the match is over, keep showing the result
                    self.render(self.simulation.get_game_state())

                self.renderer.update(self.config.FPS)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        self.renderer.cleanup()
        logger.info("Ping Pong closed properly.")


def main(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Main entry point"""
    app = PingPongApp(config, seed)
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
