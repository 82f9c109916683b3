import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_walker' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_walker.algo.backtracker import BiasedBacktracker, generate
from maze_walker.core.complexity import MazeInspector
from maze_walker.core.grid import Grid, DimensionError
from maze_walker.game.session import Session
from maze_walker.viz.ascii import render, status_line
from maze_walker.viz.terminal import read_key, clear_screen

__version__ = "0.1.2"

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 10
ANIMATION_DELAY = 0.08 # seconds per carving step

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def dimension(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid dimension: {value!r}")
    if not 0 <= n <= Grid.MAX_DIMENSION:
        raise argparse.ArgumentTypeError(f"dimension {n} out of bounds (0..{Grid.MAX_DIMENSION})")
    return n

def build_parser() -> argparse.ArgumentParser:
    # -h is the height flag, so help is long-only
    parser = argparse.ArgumentParser(
        prog="maze-walker",
        description="Creates a maze and lets you walk out of it.",
        epilog="You can walk with the ijkl or wasd keys.",
        add_help=False,
    )
    parser.add_argument("-w", "-x", "--width", type=dimension, default=DEFAULT_WIDTH, help=f"width of maze's grid (default {DEFAULT_WIDTH})")
    parser.add_argument("-h", "-y", "--height", type=dimension, default=DEFAULT_HEIGHT, help=f"height of maze's grid (default {DEFAULT_HEIGHT})")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--animate", action="store_true", help="Show the maze being carved")
    parser.add_argument("--window", action="store_true", help="Walk in a pygame window instead of the terminal")
    parser.add_argument("--record", action="store_true", help="Record the window to recordings/ (needs --window)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--help", action="help", help="print this help")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}", help="print version of program")
    parser.add_argument("files", nargs="*", help=argparse.SUPPRESS)
    return parser

def show(session: Session):
    clear_screen()
    print(render(session.grid, session.cell, session.facing))
    print(status_line(session.cell, session.facing))

def animate(generator: BiasedBacktracker):
    grid = generator.grid
    for _ in generator.run():
        clear_screen()
        print(render(grid, generator.cursor, generator.facing))
        time.sleep(ANIMATION_DELAY)

def run_window(args, grid: Grid, cell: int, facing) -> bool:
    from maze_walker.viz.window import WindowRenderer
    if args.animate:
        renderer = WindowRenderer(grid, generator=BiasedBacktracker(grid, seed=args.seed), record=args.record)
    else:
        renderer = WindowRenderer(grid, cell, facing, record=args.record)

    if args.record:
        import datetime
        ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        fname = f"walk_{grid.width}x{grid.height}_{ts}.mp4"

        renderer.recorder.output_file = os.path.join("recordings", fname)
        logging.getLogger("maze_walker").info(f"Recording video to {renderer.recorder.output_file}")

    renderer.init_window()
    return renderer.run_loop()

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.files:
        parser.error("No file needed")
    if args.record and not args.window:
        parser.error("--record needs --window")

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_walker")

    cell, facing = None, None
    try:
        if args.animate:
            grid = Grid(args.width, args.height)
        else:
            grid, cell, facing = generate(args.width, args.height, seed=args.seed)
    except DimensionError as e:
        parser.error(str(e))

    logger.info(f"Maze {grid.width}x{grid.height} (seed={args.seed})")

    try:
        if args.window:
            if not run_window(args, grid, cell, facing):
                logger.info("Window closed before leaving the maze")
                return 0
        else:
            if args.animate:
                generator = BiasedBacktracker(grid, seed=args.seed)
                animate(generator)
                cell, facing = generator.cursor, generator.facing
            logger.debug(f"Stats: {MazeInspector.calculate_stats(grid)}")

            session = Session(grid, cell, facing)
            moves = session.play(read_key, show)
            logger.info(f"Left the maze after {moves} steps")
    except KeyboardInterrupt:
        return 130
    except EOFError as e:
        logger.error(str(e))
        return 1

    print("Finished!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
