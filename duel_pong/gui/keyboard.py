"""
Keyboard input for the two human players
"""

from collections.abc import Mapping

import pygame

from duel_pong.core.entities import PaddleInput, Side
from duel_pong.utils.config import KeyboardLayout, game_config


class KeyboardInput:
    """Maps pressed keys to the up/down signals of both paddles"""

    def __init__(self, layout: KeyboardLayout | None = None):
        """
        Initialize keyboard input

        Args:
            layout: Key bindings to use, defaults to the configured layout
        """
        self.layout = layout or game_config.get_keyboard_layout()
        self.key_mapping: dict[Side, dict[str, int]] = {
            Side.LEFT: self.layout.left_keys.copy(),
            Side.RIGHT: self.layout.right_keys.copy(),
        }

    def inputs_from_keys(self, keys_pressed: Mapping[int, bool]) -> dict[Side, PaddleInput]:
        """Build the input snapshot from a key code -> pressed mapping"""
        return {
            side: PaddleInput(
                up=keys_pressed.get(keys["up"], False),
                down=keys_pressed.get(keys["down"], False),
            )
            for side, keys in self.key_mapping.items()
        }

    def poll(self) -> dict[Side, PaddleInput]:
        """Read the current keyboard state"""
        pygame_keys = pygame.key.get_pressed()
        keys_pressed = {
            key: bool(pygame_keys[key])
            for keys in self.key_mapping.values()
            for key in keys.values()
        }
        return self.inputs_from_keys(keys_pressed)

    def get_control_info(self) -> dict[Side, str]:
        """Human-readable controls for each side"""
        return {
            Side.LEFT: f"{self.layout.display_names['up']}/{self.layout.display_names['down']}",
            Side.RIGHT: "Up/Down",
        }
