"""
Headless Runner
===============

Run Rollerball without a display using a constant tilt, then report how
the round ended. Useful for checking tuning and for CI smoke runs.

Usage:
    python -m tools.run_headless [--ticks N] [--tilt-x X] [--tilt-y Y] [--seed SEED] [--save PATH]

For machines without a display, set:
    SDL_VIDEODRIVER=dummy
"""

from __future__ import annotations

import argparse
import os
import sys
import time

# Set SDL to dummy driver for headless rendering if no display
if os.environ.get("DISPLAY") is None and sys.platform != "darwin":
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from rollerball.config_loader import load_config
from rollerball.game_loop import GameLoop
from rollerball.render_target import OffscreenTarget


def main():
    parser = argparse.ArgumentParser(description="Run Rollerball headless with a constant tilt")
    parser.add_argument("--ticks", type=int, default=200, help="Frames to simulate (default: 200)")
    parser.add_argument("--tilt-x", type=float, default=0.0, help="Constant x tilt")
    parser.add_argument("--tilt-y", type=float, default=5.0, help="Constant y tilt")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for wall placement")
    parser.add_argument("--width", type=int, default=None, help="Surface width (default: from config)")
    parser.add_argument("--height", type=int, default=None, help="Surface height (default: from config)")
    parser.add_argument("--save", type=str, default=None, help="Save the last frame as an image")
    parser.add_argument("--debug", action="store_true", help="Print debug information")

    args = parser.parse_args()

    config = load_config()
    width = args.width or config.surface.width
    height = args.height or config.surface.height

    pygame.font.init()
    target = OffscreenTarget(width, height, max_frames=args.ticks + 1)
    loop = GameLoop.create(target, config=config, seed=args.seed, debug=args.debug)
    loop.change_acceleration(args.tilt_x, args.tilt_y)

    start = time.time()
    loop.run()
    elapsed = time.time() - start

    is_over, has_won = loop.state()
    info = loop.game.get_info()

    print(f"Frames:      {loop.frames}")
    print(f"Ball:        ({info['ball_center'][0]:.1f}, {info['ball_center'][1]:.1f})")
    if is_over and has_won:
        print("Outcome:     won")
    elif is_over:
        print("Outcome:     hit a wall")
    else:
        print("Outcome:     still playing")
    print(f"Time:        {elapsed:.3f}s")

    if args.save:
        pygame.image.save(target.surface, args.save)
        print(f"Frame saved to {args.save}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
