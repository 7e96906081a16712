"""
Tests for the PyGame renderer, drawn off-screen
"""

import pygame
import pytest

from classic_pong.core.entities import InputSnapshot
from classic_pong.core.physics import PhysicsEngine
from classic_pong.gui.pygame_renderer import PygameRenderer


@pytest.fixture
def renderer():
    renderer = PygameRenderer(headless=True)
    yield renderer
    renderer.cleanup()


class TestPygameRenderer:
    """Tests for PygameRenderer"""

    def test_surface_has_field_size(self, renderer):
        """Drawing happens on a field-sized surface"""
        assert renderer.surface.get_size() == (400, 300)
        assert renderer.screen is None

    def test_render_frame_draws_entities(self, renderer):
        """Ball, paddles and center line end up on the surface"""
        engine = PhysicsEngine(seed=0)
        state = engine.get_game_state()
        renderer.render_frame(state)

        surface = renderer.surface
        assert surface.get_at((200, 150))[:3] == renderer.ball_color
        assert surface.get_at((7, 175))[:3] == renderer.paddle_color
        assert surface.get_at((392, 175))[:3] == renderer.paddle_color
        assert surface.get_at((200, 290))[:3] == renderer.line_color
        assert surface.get_at((100, 280))[:3] == renderer.background_color

    def test_render_after_update(self, renderer):
        """Moved paddles are drawn at their new place"""
        engine = PhysicsEngine(seed=0)
        engine.update(0.5, InputSnapshot(left_up=True))
        renderer.render_frame(engine.get_game_state())
        assert renderer.surface.get_at((7, 120))[:3] == renderer.paddle_color

    def test_missing_font_falls_back(self):
        """An unreadable font path falls back to the default font"""
        renderer = PygameRenderer(headless=True, font_path="does/not/exist.ttf")
        try:
            assert isinstance(renderer.font, pygame.font.Font)
        finally:
            renderer.cleanup()

    def test_headless_events(self, renderer):
        """A headless renderer never asks to quit"""
        assert renderer.handle_events() == {"quit": False}
        assert renderer.is_active()

    def test_cleanup_deactivates(self):
        """Cleanup marks the renderer inactive"""
        renderer = PygameRenderer(headless=True)
        renderer.cleanup()
        assert not renderer.is_active()
