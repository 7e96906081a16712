"""
Physics system for Classic Pong
"""

from typing import Any

import numpy as np

from classic_pong.core.collision import ball_hits_paddle, check_ball_borders
from classic_pong.core.entities import Ball, GameState, InputSnapshot, Paddle
from classic_pong.utils.config import game_config
from classic_pong.utils.logger import logger


class PhysicsEngine:
    """Owns the ball and both paddles and applies the game rules once per frame"""

    def __init__(
        self,
        field_width: float | None = None,
        field_height: float | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ):
        self.field_width = field_width if field_width is not None else game_config.FIELD_WIDTH
        self.field_height = field_height if field_height is not None else game_config.FIELD_HEIGHT
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        # Paddles start with their top edge on the horizontal midline
        paddle_width = game_config.PADDLE_WIDTH
        self.left = Paddle(paddle_width, self.field_height / 2, field_height=self.field_height)
        self.right = Paddle(
            self.field_width - 2 * paddle_width,
            self.field_height / 2,
            field_height=self.field_height,
        )
        self.ball = Ball(self.field_width / 2, self.field_height / 2, self.rng)

        self.game_time = 0.0

    @property
    def score(self) -> tuple[int, int]:
        return (self.left.score, self.right.score)

    def score_text(self) -> str:
        return f"{self.left.score}:{self.right.score}"

    def update(self, dt: float, inputs: InputSnapshot) -> dict[str, list]:
        """
        Advances the simulation by one frame.

        Borders are checked on the position reached at the end of the previous
        frame, before anything moves. Paddle collisions are checked on the new
        positions.

        Args:
            dt: Elapsed time since the previous frame, in seconds
            inputs: Movement keys held during this frame

        Returns:
            Dictionary with the events of this frame:
            {"wall_bounces": [...], "goals": [...], "paddle_hits": [...]}
        """
        events: dict[str, list] = {"wall_bounces": [], "goals": [], "paddle_hits": []}
        self.game_time += dt

        # Border hits on the pre-motion position
        borders = check_ball_borders(self.ball, self.field_width, self.field_height)
        for border in borders:
            if border in ("top", "bottom"):
                self.ball.flip_vertical()
                events["wall_bounces"].append(border)
            elif border == "left":
                self._award_point(self.right, "right", events)
            else:
                self._award_point(self.left, "left", events)

        if borders:
            self.ball.speed += game_config.BALL_SPEED_INCREASE

        self.left.set_input(inputs.left_up, inputs.left_down)
        self.right.set_input(inputs.right_up, inputs.right_down)

        self.left.advance(dt)
        self.right.advance(dt)
        self.ball.advance(dt)

        # A ball overlapping both paddles still bounces only once
        hit_left = ball_hits_paddle(self.ball, self.left)
        hit_right = ball_hits_paddle(self.ball, self.right)
        if hit_left:
            events["paddle_hits"].append("left")
        if hit_right:
            events["paddle_hits"].append("right")
        if hit_left or hit_right:
            self.ball.flip_horizontal()

        return events

    def _award_point(self, paddle: Paddle, side: str, events: dict[str, list]) -> None:
        paddle.score += 1
        events["goals"].append({"player": side, "score": self.score})
        logger.debug("Point for %s player, score %s", side, self.score_text())
        self.ball.reset()

    def get_game_state(self) -> GameState:
        """Returns a snapshot of everything a renderer may draw"""
        return GameState(
            ball_position=self.ball.position.to_tuple(),
            ball_radius=self.ball.radius,
            ball_speed=self.ball.speed,
            left_paddle_position=self.left.position.to_tuple(),
            right_paddle_position=self.right.position.to_tuple(),
            paddle_size=(self.left.width, self.left.height),
            score=self.score,
            field_size=(int(self.field_width), int(self.field_height)),
        )
