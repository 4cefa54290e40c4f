"""
Entrypoint for LumiSky, the interactive firework sky.

- Parse window / show options
- Initialize logging
- Run the pygame loop (clicks, preset keys, auto-fire, optional AI recipe)
"""
import argparse

from lumisky import config as C
from lumisky.game_loop import run
from lumisky.logger_setup import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Interactive firework simulation")
    parser.add_argument("--width", type=int, default=C.WIDTH, help="Initial window width")
    parser.add_argument("--height", type=int, default=C.HEIGHT, help="Initial window height")
    parser.add_argument("--fps", type=int, default=C.FPS, help="Frame rate cap")
    parser.add_argument("--autofire", action="store_true", help="Start with the show (auto-fire) running")
    parser.add_argument("--recipe", type=str, default=None, help="Describe a firework for the AI designer to build and launch")
    parser.add_argument("--no-hud", action="store_true", dest="no_hud", help="Hide the status overlay")
    parser.add_argument("--seed", type=int, default=None, help="Seed the simulation's random source")
    parser.add_argument("--log-level", type=str, default=C.LOG_LEVEL, dest="log_level", help="Logging level")
    parser.add_argument("--no-log-file", action="store_true", dest="no_log_file", help="Log to the console only")
    args = parser.parse_args()

    setup_logging(args.log_level, log_dir=None if args.no_log_file else C.RUNS_DIR)
    run(
        width=args.width,
        height=args.height,
        fps=args.fps,
        autofire=args.autofire,
        recipe_prompt=args.recipe,
        show_hud=not args.no_hud,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
