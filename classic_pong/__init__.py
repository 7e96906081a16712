"""
Classic Pong: a two-player paddle-and-ball game
"""

__version__ = "0.1.0"
