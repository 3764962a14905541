"""
PyGame renderer for Ping Pong game
"""

from typing import Any

import pygame

from ping_pong.core.entities import GameState
from ping_pong.core.entities import Side
from ping_pong.utils.config import GameConfig
from ping_pong.utils.config import game_config

DASH_LENGTH = 10
OUTCOME_MESSAGES = {Side.LEFT: "You win!", Side.RIGHT: "Computer wins!"}


class PygameRenderer:
    """
    PyGame-based renderer for Ping Pong.

    Also acts as the score display and outcome dialog: the round controller
    notifies it of score changes and of the match end.
    """

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config or game_config
        self.width = self.config.FIELD_WIDTH
        self.height = self.config.FIELD_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption("Ping Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Colors
        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = self.config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = self.config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = self.config.LINE_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)

        # Font for text rendering
        self.font_large = pygame.font.Font(None, 74)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 36)

        # Score display and outcome dialog, driven by match notifications
        self.scores: dict[Side, int] = {Side.LEFT: 0, Side.RIGHT: 0}
        self.outcome_message: str | None = None

        # UI state
        self.show_fps = False
        self.show_debug = False

    def on_score_changed(self, side: Side, score: int) -> None:
        self.scores[side] = score

    def on_match_end(self, winner: Side) -> None:
        self.outcome_message = OUTCOME_MESSAGES[winner]

    def clear_outcome(self) -> None:
        self.outcome_message = None

    def resize(self, width: int, height: int) -> None:
        """Follow a window resize"""
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_center_line(self) -> None:
        """Draw the dashed center divider"""
        center_x = self.width // 2
        for y in range(0, self.height, 2 * DASH_LENGTH):
            pygame.draw.line(
                self.screen, self.line_color, (center_x, y), (center_x, y + DASH_LENGTH), 2
            )

    def draw_paddle(self, rect: tuple[float, float, float, float]) -> None:
        """Draw a player paddle"""
        x, y, width, height = rect
        pygame.draw.rect(self.screen, self.paddle_color, pygame.Rect(x, y, width, height))

    def draw_ball(self, position: tuple[float, float], radius: float) -> None:
        """Draw the game ball"""
        pos = (int(position[0]), int(position[1]))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(radius))

    def draw_score(self) -> None:
        """Draw the score of each side above its half"""
        for side, center_x in ((Side.LEFT, self.width // 4), (Side.RIGHT, self.width * 3 // 4)):
            text_surface = self.font_large.render(str(self.scores[side]), True, self.text_color)
            text_rect = text_surface.get_rect()
            text_rect.centerx = center_x
            text_rect.top = 20
            self.screen.blit(text_surface, text_rect)

    def draw_ui_info(self, info: dict[str, Any]) -> None:
        """Draw additional UI information"""
        y_offset = self.height - 40

        if self.show_fps:
            fps_text = f"FPS: {self.clock.get_fps():.0f}"
            fps_surface = self.font_small.render(fps_text, True, self.text_color)
            self.screen.blit(fps_surface, (10, y_offset))
            y_offset -= 30

        if self.show_debug and "debug_info" in info:
            for key, value in info["debug_info"].items():
                debug_surface = self.font_small.render(f"{key}: {value}", True, self.text_color)
                self.screen.blit(debug_surface, (10, y_offset))
                y_offset -= 25

    def draw_pause_screen(self) -> None:
        """Draw pause screen"""
        # Semi-transparent overlay
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        pause_surface = self.font_large.render("PAUSE", True, self.text_color)
        pause_rect = pause_surface.get_rect()
        pause_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(pause_surface, pause_rect)

        inst_surface = self.font_small.render("Press SPACE to continue", True, self.text_color)
        inst_rect = inst_surface.get_rect()
        inst_rect.center = (self.width // 2, self.height // 2 + 60)
        self.screen.blit(inst_surface, inst_rect)

    def draw_outcome_dialog(self, message: str) -> None:
        """Draw the end of match dialog"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(180)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        box_width = min(500, self.width - 100)
        box_height = 180
        box_x = (self.width - box_width) // 2
        box_y = (self.height - box_height) // 2

        dialog_box = pygame.Surface((box_width, box_height))
        dialog_box.fill((40, 40, 40))
        pygame.draw.rect(dialog_box, self.ball_color, dialog_box.get_rect(), 3)
        self.screen.blit(dialog_box, (box_x, box_y))

        title_surface = self.font_large.render(message, True, self.ball_color)
        title_rect = title_surface.get_rect()
        title_rect.center = (self.width // 2, box_y + 60)
        self.screen.blit(title_surface, title_rect)

        restart_text = "Press R to play again or ESC to quit"
        restart_surface = self.font_small.render(restart_text, True, (200, 200, 200))
        restart_rect = restart_surface.get_rect()
        restart_rect.center = (self.width // 2, box_y + box_height - 40)
        self.screen.blit(restart_surface, restart_rect)

    def render_game_state(
        self, game_state: GameState, additional_info: dict[str, Any] | None = None
    ) -> None:
        """Render the complete game state"""
        self.clear_screen()

        if game_state.show_center_line:
            self.draw_center_line()

        self.draw_paddle(game_state.left_paddle)
        self.draw_paddle(game_state.right_paddle)
        self.draw_ball(game_state.ball_position, game_state.ball_radius)
        self.draw_score()

        if additional_info:
            self.draw_ui_info(additional_info)

        if self.outcome_message is not None:
            self.draw_outcome_dialog(self.outcome_message)
        elif game_state.paused and not game_state.serving:
            self.draw_pause_screen()

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        self.clock.tick(fps or self.config.FPS)

    def toggle_fps_display(self) -> None:
        self.show_fps = not self.show_fps

    def toggle_debug_display(self) -> None:
        self.show_debug = not self.show_debug

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
