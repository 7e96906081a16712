"""
Core interfaces and protocols for Classic Pong

The simulation talks to its collaborators only through these protocols.
"""

from classic_pong.core.interfaces.input import InputSource
from classic_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["InputSource", "RendererProtocol"]
