"""
PyGame front end for Classic Pong
"""

from classic_pong.gui.keyboard_input import KeyboardInput
from classic_pong.gui.pygame_renderer import PygameRenderer

__all__ = ["KeyboardInput", "PygameRenderer"]
