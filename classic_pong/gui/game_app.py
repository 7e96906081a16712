"""
Main game application with PyGame GUI
"""

import argparse
import sys
import traceback

import pygame

from classic_pong.core.interfaces import InputSource, RendererProtocol
from classic_pong.core.physics import PhysicsEngine
from classic_pong.gui.keyboard_input import KeyboardInput
from classic_pong.gui.pygame_renderer import PygameRenderer
from classic_pong.utils.config import KEY_LAYOUTS, game_config, load_config_from_file
from classic_pong.utils.logger import logger, set_verbose


class PongApp:
    """Runs the frame loop: poll input, update the simulation, draw"""

    def __init__(
        self,
        engine: PhysicsEngine | None = None,
        renderer: RendererProtocol | None = None,
        input_source: InputSource | None = None,
        fps: int | None = None,
    ) -> None:
        self.engine = engine or PhysicsEngine()
        self.renderer = renderer or PygameRenderer()
        self.input_source = input_source or KeyboardInput()
        self.fps = fps or game_config.FPS
        self.clock = pygame.time.Clock()
        self.running = True

    def step(self, dt: float) -> dict[str, list]:
        """Runs one frame with an explicit time step"""
        events = self.engine.update(dt, self.input_source.poll())
        self.renderer.render_frame(self.engine.get_game_state())
        return events

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Pong at %d FPS", self.fps)

        try:
            while self.running:
                if self.renderer.handle_events().get("quit"):
                    self.running = False
                    continue

                dt = self.clock.tick(self.fps) / 1000.0
                self.step(dt)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        logger.info("Final score %s", self.engine.score_text())
        self.renderer.cleanup()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument("--scale", type=int, default=None, help="Window pixels per field unit")
    parser.add_argument("--font", type=str, default=None, help="TTF font for the score")
    parser.add_argument(
        "--layout", type=str, choices=sorted(KEY_LAYOUTS), default=None, help="Key layout"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for ball launch directions")
    parser.add_argument("--verbose", action="store_true", help="Log every point")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    set_verbose(args.verbose)

    if args.config and not load_config_from_file(args.config):
        logger.warning("Configuration file %s not found, using defaults", args.config)
    if args.fps is not None:
        game_config.FPS = args.fps
    if args.scale is not None:
        game_config.WINDOW_SCALE = args.scale
    if args.font is not None:
        game_config.FONT_PATH = args.font
    if args.layout is not None:
        game_config.KEYBOARD_LAYOUT = args.layout

    controls = game_config.get_key_bindings().display_names
    print("=== PONG ===")
    print(f"  Left player:  {controls['left_up']} / {controls['left_down']}")
    print(f"  Right player: {controls['right_up']} / {controls['right_down']}")
    print("  ESC: Quit")

    try:
        app = PongApp(engine=PhysicsEngine(seed=args.seed))
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
