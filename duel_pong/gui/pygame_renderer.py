"""
PyGame renderer for Duel Pong
"""

import pygame

from duel_pong.core.entities import Ball, Paddle
from duel_pong.utils.config import GameConfig, game_config


class PygameRenderer:
    """Draws the match; reads entity state, never changes it"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config or game_config
        self.width = self.config.VIEWPORT_WIDTH
        self.height = self.config.VIEWPORT_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.config.WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = self.config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = self.config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = self.config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = (100, 100, 100)
        self.text_color: tuple[int, int, int] = (255, 255, 255)

        self.font = pygame.font.Font(None, 48)

    def draw_field(self) -> None:
        center_x = self.width // 2
        pygame.draw.line(self.screen, self.line_color, (center_x, 0), (center_x, self.height), 2)

    def draw_ball(self, ball: Ball) -> None:
        pos = (int(ball.position.x), int(ball.position.y))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(ball.radius))

    def draw_paddle(self, paddle: Paddle) -> None:
        rect = pygame.Rect(*(int(v) for v in paddle.get_rect()))
        pygame.draw.rect(self.screen, self.paddle_color, rect)

    def draw_score(self, score: tuple[int, int]) -> None:
        text = self.font.render(f"{score[0]}   {score[1]}", True, self.text_color)
        self.screen.blit(text, text.get_rect(center=(self.width // 2, 30)))

    def render(self, ball: Ball, paddles: list[Paddle], score: tuple[int, int]) -> None:
        """Render a single frame and flip the display"""
        self.screen.fill(self.background_color)
        self.draw_field()
        for paddle in paddles:
            self.draw_paddle(paddle)
        self.draw_ball(ball)
        self.draw_score(score)
        pygame.display.flip()

    def tick(self, fps: int | None = None) -> float:
        """Waits for the next frame and returns the elapsed time in seconds"""
        return self.clock.tick(fps or self.config.FPS) / 1000.0

    def cleanup(self) -> None:
        pygame.quit()
