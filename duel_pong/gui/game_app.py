"""
Main PyGame application for Duel Pong
"""

import logging
import sys

import pygame

from duel_pong.core.entities import Side
from duel_pong.core.interfaces import InputSource
from duel_pong.core.match import PongMatch
from duel_pong.gui.keyboard import KeyboardInput
from duel_pong.gui.pygame_renderer import PygameRenderer
from duel_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class PongApp:
    """Hosts a match in a PyGame window"""

    def __init__(self, config: GameConfig | None = None, input_source: InputSource | None = None):
        self.config = config or game_config
        self.match = PongMatch(self.config)
        self.renderer = PygameRenderer(self.config)
        self.input_source = input_source or KeyboardInput(self.config.get_keyboard_layout())
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                self.match.reset()

    def run(self) -> None:
        """Frame loop: input, paddles, ball, render"""
        self.running = True
        self.renderer.tick()
        try:
            while self.running:
                dt = self.renderer.tick()
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break

                events = self.match.step(dt, self.input_source.poll())
                for goal in events["goals"]:
                    logger.info("Goal for %s: %d-%d", goal["side"], *goal["score"])

                self.renderer.render(
                    self.match.ball,
                    [self.match.paddles[Side.LEFT], self.match.paddles[Side.RIGHT]],
                    self.match.score,
                )
        finally:
            self.renderer.cleanup()


def main() -> None:
    """Entry point of the graphical game"""
    logging_handler = logging.StreamHandler(sys.stdout)
    logging_handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    )
    root_logger = logging.getLogger()
    root_logger.addHandler(logging_handler)
    root_logger.setLevel(logging.INFO)

    app = PongApp()
    app.run()


if __name__ == "__main__":
    main()
