"""
Collision detection system for Classic Pong
"""

from classic_pong.core.entities import Ball, Paddle, Vector2D

BORDERS = ("top", "bottom", "left", "right")


def aabb_overlap(pos_a: Vector2D, extent_a: Vector2D, pos_b: Vector2D, extent_b: Vector2D) -> bool:
    """
    Checks whether two axis-aligned boxes given by center and half-extent overlap.

    Touching edges do not count as an overlap.
    """
    return (
        abs(pos_a.x - pos_b.x) < extent_a.x + extent_b.x
        and abs(pos_a.y - pos_b.y) < extent_a.y + extent_b.y
    )


def ball_hits_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Detects overlap between the ball's bounding box and a paddle"""
    return aabb_overlap(ball.position, ball.extent, paddle.center(), paddle.extent)


def check_ball_borders(ball: Ball, field_width: float, field_height: float) -> list[str]:
    """Returns every field border the ball center has reached, in BORDERS order"""
    x, y = ball.position.x, ball.position.y
    hits = {
        "top": y <= 0,
        "bottom": y >= field_height,
        "left": x <= 0,
        "right": x >= field_width,
    }
    return [border for border in BORDERS if hits[border]]
