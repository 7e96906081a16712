"""
Input source protocol - defines interface for anything that drives the paddles
"""

from typing import Protocol

from classic_pong.core.entities import InputSnapshot


class InputSource(Protocol):
    """
    Protocol for per-frame input providers (keyboard, gamepad, scripted, etc.).

    The simulation only sees the four movement booleans, never the key codes
    behind them.
    """

    def poll(self) -> InputSnapshot:
        """
        Sample the movement keys currently held.

        Returns:
            InputSnapshot with left_up, left_down, right_up and right_down set
        """
        ...
