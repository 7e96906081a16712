"""
Unit tests for collision detection system

Tests the AABB overlap rules:
- Strict inequality on both axes (touching is not a hit)
- Ball-versus-paddle checks against the paddle center
- Border detection with inclusive edges
"""

import numpy as np
import pytest

from classic_pong.core.collision import (
    aabb_overlap,
    ball_hits_paddle,
    check_ball_borders,
)
from classic_pong.core.entities import Ball, Paddle, Vector2D


def make_ball(rng: np.random.Generator, x: float, y: float) -> Ball:
    return Ball(x, y, rng, direction=Vector2D(1.0, 1.0))


class TestAabbOverlap:
    """Test the raw box overlap predicate"""

    def test_overlapping_boxes(self):
        """Boxes whose centers are closer than their extents overlap"""
        assert aabb_overlap(Vector2D(0, 0), Vector2D(2, 2), Vector2D(3, 1), Vector2D(2, 2))

    def test_touching_on_x_is_not_overlap(self):
        """Exactly touching edges on x do not overlap"""
        assert not aabb_overlap(Vector2D(0, 0), Vector2D(2, 2), Vector2D(4, 0), Vector2D(2, 2))

    def test_touching_on_y_is_not_overlap(self):
        """Exactly touching edges on y do not overlap"""
        assert not aabb_overlap(Vector2D(0, 0), Vector2D(2, 2), Vector2D(0, -4), Vector2D(2, 2))

    def test_requires_both_axes(self):
        """Overlap on one axis only is not enough"""
        assert not aabb_overlap(Vector2D(0, 0), Vector2D(2, 2), Vector2D(1, 10), Vector2D(2, 2))

    def test_symmetric(self):
        """Argument order does not matter"""
        a, ea = Vector2D(1, 2), Vector2D(3, 1)
        b, eb = Vector2D(4, 2.5), Vector2D(1, 1)
        assert aabb_overlap(a, ea, b, eb) == aabb_overlap(b, eb, a, ea)


class TestBallPaddle:
    """Test ball against paddle checks"""

    def test_touching_paddle_does_not_hit(self, rng):
        """|dx| equal to the sum of half widths is not a collision"""
        paddle = Paddle(5.0, 150.0)  # center (7.5, 175)
        ball = make_ball(rng, 7.5 + 8.5, 175.0)
        assert not ball_hits_paddle(ball, paddle)

    def test_one_unit_closer_hits(self, rng):
        """One unit inside the touching distance is a collision"""
        paddle = Paddle(5.0, 150.0)
        ball = make_ball(rng, 7.5 + 7.5, 175.0)
        assert ball_hits_paddle(ball, paddle)

    def test_vertical_touching_does_not_hit(self, rng):
        """|dy| equal to the sum of half heights is not a collision"""
        paddle = Paddle(5.0, 150.0)
        ball = make_ball(rng, 7.5, 175.0 + 31.0)
        assert not ball_hits_paddle(ball, paddle)
        ball.position = Vector2D(7.5, 175.0 + 30.0)
        assert ball_hits_paddle(ball, paddle)

    def test_far_ball_misses(self, rng):
        """A ball in the middle of the field hits neither paddle"""
        ball = make_ball(rng, 200.0, 150.0)
        assert not ball_hits_paddle(ball, Paddle(5.0, 150.0))
        assert not ball_hits_paddle(ball, Paddle(390.0, 150.0))


class TestBorders:
    """Test border detection"""

    @pytest.mark.parametrize(
        "x,y,expected",
        [
            (200.0, 150.0, []),
            (200.0, 0.0, ["top"]),
            (200.0, -3.0, ["top"]),
            (200.0, 300.0, ["bottom"]),
            (0.0, 150.0, ["left"]),
            (-2.0, 150.0, ["left"]),
            (400.0, 150.0, ["right"]),
            (0.1, 0.1, []),
            (-1.0, -1.0, ["top", "left"]),
            (401.0, 305.0, ["bottom", "right"]),
        ],
    )
    def test_borders(self, rng, x, y, expected):
        """Each border is checked independently with inclusive edges"""
        ball = make_ball(rng, x, y)
        assert check_ball_borders(ball, 400, 300) == expected
