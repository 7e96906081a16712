"""
Run the Pong simulation without a window and print every point
"""

import sys

from classic_pong.core.entities import InputSnapshot
from classic_pong.core.physics import PhysicsEngine


def run_headless(seconds: float = 60.0, fps: int = 60, seed: int = 0) -> None:
    """Simulate a rally with idle paddles at a fixed frame rate"""
    engine = PhysicsEngine(seed=seed)
    dt = 1.0 / fps
    idle = InputSnapshot()

    for frame in range(int(seconds * fps)):
        events = engine.update(dt, idle)
        for goal in events["goals"]:
            print(f"[{frame * dt:6.2f}s] point for {goal['player']}: {engine.score_text()}")

    state = engine.get_game_state()
    print(f"Final score {state.score_text}, ball speed {state.ball_speed:.0f}")


if __name__ == "__main__":
    run_headless(float(sys.argv[1]) if len(sys.argv) > 1 else 60.0)
