"""Main entry point for the Recursive Division Maze Generator."""

import argparse
import logging
import os
import sys

from .domain.types import GenerationConfig, MAX_DIMENSION, MIN_DIMENSION, clamp_dimension
from .utils.log_utils import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate mazes with recursive division")
    parser.add_argument("--width", type=int, default=MIN_DIMENSION,
                        help=f"Maze width, clamped to [{MIN_DIMENSION}, {MAX_DIMENSION}]")
    parser.add_argument("--height", type=int, default=MIN_DIMENSION,
                        help=f"Maze height, clamped to [{MIN_DIMENSION}, {MAX_DIMENSION}]")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible mazes")
    parser.add_argument("--debug-visual", action="store_true",
                        help="Color walls per chamber and paint chamber corners")
    parser.add_argument("--immediate", action="store_true", help="Paint the maze without a staggered reveal")
    parser.add_argument("--interval-ms", type=int, default=10, help="Reveal timer interval in milliseconds")
    parser.add_argument("--ascii", action="store_true", help="Print one maze to stdout and exit")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser.parse_args(argv)


def run_ascii(config: GenerationConfig) -> int:
    """Generate a single maze and print it."""
    from .domain.assembler import MazeAssembler
    from .utils.grid_factory import find_floor_regions, render_ascii
    from .utils.rng import SeededRNG

    assembler = MazeAssembler(SeededRNG(config.seed), config.debug_visual)
    description = assembler.generate(config.width, config.height)

    print(render_ascii(description))
    print(f"Chambers: {len(description.chambers)}  Walls: {len(description.wall_cells)}  "
          f"Openings: {len(description.opening_cells)}  Regions: {len(find_floor_regions(description))}")
    return 0


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = GenerationConfig(
        width=clamp_dimension(args.width),
        height=clamp_dimension(args.height),
        debug_visual=args.debug_visual,
        seed=args.seed,
    )

    if args.ascii:
        return run_ascii(config)

    # Set comprehensive environment variables to fix DPI scaling issues on macOS
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_SCALE_FACTOR', '1')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    from PySide6.QtCore import Qt
    from PySide6.QtWidgets import QApplication

    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.Floor)

    # Create Qt application
    app = QApplication(sys.argv[:1])
    app.setApplicationName("Recursive Division Maze Generator")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .app.controller import MazeController
    from .ui.main_window import MainWindow

    controller = MazeController(config)
    controller.immediate = args.immediate
    controller.speed = args.interval_ms

    try:
        window = MainWindow(controller)
        window.show()
        controller.generate()
        return app.exec()
    finally:
        controller.cleanup()


if __name__ == "__main__":
    sys.exit(main())
