"""
PyGame renderer for Classic Pong game
"""

import pygame

from classic_pong.core.entities import GameState
from classic_pong.utils.config import game_config
from classic_pong.utils.logger import logger


class PygameRenderer:
    """
    PyGame-based renderer for Classic Pong.

    Everything is drawn on a surface the size of the field, in field units,
    and scaled up to the window when the frame is presented.
    """

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        scale: int | None = None,
        font_path: str | None = None,
        headless: bool = False,
    ):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.FIELD_WIDTH
        self.height = height or game_config.FIELD_HEIGHT
        self.scale = scale or game_config.WINDOW_SCALE
        self.headless = headless

        pygame.init()

        # Field-sized drawing surface
        self.surface = pygame.Surface((self.width, self.height))
        self.screen: pygame.Surface | None = None
        if not headless:
            window_size = (self.width * self.scale, self.height * self.scale)
            self.screen = pygame.display.set_mode(window_size)
            pygame.display.set_caption("Pong")

        # Colors
        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.line_color: tuple[int, int, int] = game_config.LINE_COLOR
        self.ball_color: tuple[int, int, int] = game_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = game_config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = game_config.TEXT_COLOR

        self.font = self._load_font(
            font_path or game_config.FONT_PATH, game_config.SCORE_FONT_SIZE
        )
        self.active = True

    @staticmethod
    def _load_font(font_path: str | None, size: int) -> pygame.font.Font:
        """Load the score font, falling back to pygame's default font"""
        if font_path:
            try:
                return pygame.font.Font(font_path, size)
            except (OSError, pygame.error) as e:
                logger.warning("Could not load font %s (%s), using default font", font_path, e)
        return pygame.font.Font(None, size)

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.surface.fill(self.background_color)

    def draw_field(self) -> None:
        """Draw the center line"""
        center_x = self.width // 2
        pygame.draw.line(self.surface, self.line_color, (center_x, 0), (center_x, self.height), 1)

    def draw_ball(self, position: tuple[float, float], radius: float) -> None:
        """Draw the game ball"""
        pos = (int(position[0]), int(position[1]))
        pygame.draw.circle(self.surface, self.ball_color, pos, int(radius))

    def draw_paddle(self, position: tuple[float, float], size: tuple[float, float]) -> None:
        """Draw a player paddle"""
        rect = pygame.Rect(int(position[0]), int(position[1]), int(size[0]), int(size[1]))
        pygame.draw.rect(self.surface, self.paddle_color, rect)

    def draw_score(self, score_text: str) -> None:
        """Draw the score, ending just right of the center line"""
        text_surface = self.font.render(score_text, True, self.text_color)
        text_rect = text_surface.get_rect()
        text_rect.left = int(self.width / 2 - text_rect.width + 6.5)
        text_rect.bottom = 25
        self.surface.blit(text_surface, text_rect)

    def render_frame(self, state: GameState) -> None:
        """Render a complete frame from a game state snapshot"""
        self.clear_screen()
        self.draw_field()
        self.draw_ball(state.ball_position, state.ball_radius)
        self.draw_paddle(state.left_paddle_position, state.paddle_size)
        self.draw_paddle(state.right_paddle_position, state.paddle_size)
        self.draw_score(state.score_text)
        self.present()

    def present(self) -> None:
        """Scale the field surface to the window and flip the display"""
        if self.screen is None:
            return
        pygame.transform.scale(self.surface, self.screen.get_size(), self.screen)
        pygame.display.flip()

    def handle_events(self) -> dict[str, bool]:
        """Process window events"""
        events = {"quit": False}
        if self.headless:
            return events

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events["quit"] = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                events["quit"] = True

        if events["quit"]:
            self.active = False
        return events

    def is_active(self) -> bool:
        """Check if renderer is still active"""
        return self.active

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        self.active = False
        pygame.quit()
