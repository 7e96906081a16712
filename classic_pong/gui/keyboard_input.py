"""
Keyboard input for Classic Pong
"""

from collections.abc import Mapping, Sequence

import pygame

from classic_pong.core.entities import InputSnapshot
from classic_pong.utils.config import KeyBindings, game_config


class KeyboardInput:
    """Polls the keyboard and maps held keys to paddle movement"""

    def __init__(self, bindings: KeyBindings | None = None):
        self.bindings = bindings or game_config.get_key_bindings()

    def snapshot_from_keys(
        self, keys_pressed: Mapping[int, bool] | Sequence[bool]
    ) -> InputSnapshot:
        """Build an input snapshot from a pressed-keys table indexed by key code"""
        return InputSnapshot(
            left_up=bool(keys_pressed[self.bindings.left_up]),
            left_down=bool(keys_pressed[self.bindings.left_down]),
            right_up=bool(keys_pressed[self.bindings.right_up]),
            right_down=bool(keys_pressed[self.bindings.right_down]),
        )

    def poll(self) -> InputSnapshot:
        """Sample the movement keys currently held"""
        return self.snapshot_from_keys(pygame.key.get_pressed())

    def get_control_info(self) -> dict[str, str]:
        """Get the key names shown in the help line"""
        return self.bindings.display_names.copy()
