"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

from classic_pong.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only ever receive a GameState snapshot and must not mutate the
    simulation.
    """

    def render_frame(self, state: GameState) -> None:
        """
        Render a single frame of the game.

        Args:
            state: Snapshot of ball, paddles and score for this frame
        """
        ...

    def handle_events(self) -> dict[str, bool]:
        """
        Process window events.

        Returns:
            Dictionary with event flags, e.g. {"quit": True}
        """
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...
