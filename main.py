"""
Crucible Solver - Entry Point

Parses a heat-loss grid, runs the configured puzzle variants and prints
the minimal heat loss for each.

Example:
    python main.py inputs/day_17.txt
    python main.py --sample --variant part2 --show-path
    python main.py inputs/day_17.txt --min-run 2 --max-run 5 --strategy dijkstra
"""

import sys
import logging
import argparse
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from crucible.errors import InvalidConfigError, ParseError
from crucible.parsing import DEBUG_DIR, create_parser, render_path_text, save_debug_image
from crucible.samples import SAMPLE_GRID
from crucible.settings import get_variant_bounds, get_variant_names, load_settings
from crucible.solver import (
    CostGrid,
    RunBounds,
    Solution,
    SolutionContext,
    create_strategy,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = "crucible.log"

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_PATH = 2


def setup_logging(level: int, log_file: Optional[str] = None) -> None:
    """
    Configure logging - output to console and, optionally, a file.

    Args:
        level: Root logging level
        log_file: Extra file to log to (debug mode)
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]  # Console output
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


class Application:
    """
    Main application controller.

    Loads the grid once, then runs every requested variant against it
    with its own search context.
    """

    def __init__(self, settings: Dict, strategy_name: str, debug_mode: bool = False,
                 show_path: bool = False):
        """
        Initialize the application.

        Args:
            settings: Loaded settings dictionary
            strategy_name: Registered strategy to run
            debug_mode: Save a debug image per variant
            show_path: Print the path overlay after each result
        """
        self.settings = settings
        self.strategy = create_strategy(strategy_name)
        self.debug_mode = debug_mode
        self.show_path = show_path
        self.grid: Optional[CostGrid] = None

    def load_grid(self, source: Optional[str]) -> CostGrid:
        """
        Read and parse the puzzle input.

        Args:
            source: File path, "-" for stdin, or None for the embedded sample

        Returns:
            Parsed CostGrid
        """
        parser = create_parser("digits")
        if source is None:
            result = parser.parse(SAMPLE_GRID, source="<sample>")
        elif source == "-":
            result = parser.parse(sys.stdin.read(), source="<stdin>")
        else:
            result = parser.parse_file(source)

        logger.info(f"Loaded {result.rows}x{result.cols} grid from {result.source}")
        self.grid = result.grid
        return self.grid

    def run_variant(self, name: str, bounds: RunBounds) -> Solution:
        """
        Solve one variant and print its result line.

        Args:
            name: Label for the output line
            bounds: Run bounds for this variant

        Returns:
            Solution from the strategy
        """
        context = SolutionContext(grid=self.grid, bounds=bounds)
        solution = self.strategy.solve(context)

        if solution.found:
            print(f"{name}: {solution.cost}")
        else:
            print(f"{name}: no path")

        logger.info(
            f"{name} ({bounds.min_run}..{bounds.max_run}) solved by {self.strategy.name} "
            f"in {solution.metrics.computation_time_ms:.1f}ms, "
            f"{solution.metrics.states_expanded} states expanded"
        )

        if self.show_path and solution.found:
            print(render_path_text(self.grid, solution))

        if self.debug_mode:
            stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
            path = DEBUG_DIR / f"debug_{stamp}_{name}.png"
            try:
                save_debug_image(self.grid, solution, str(path))
                logger.info(f"Debug image saved: {path}")
            except OSError as e:
                logger.warning(f"Failed to save debug image {path}: {e}")

        return solution

    def run(self, variants: List[Tuple[str, RunBounds]]) -> int:
        """
        Run the application.

        Returns:
            Exit code
        """
        exit_code = EXIT_OK
        for name, bounds in variants:
            solution = self.run_variant(name, bounds)
            if not solution.found:
                exit_code = EXIT_NO_PATH
        return exit_code


def parse_args(argv: Optional[List[str]], settings: Dict) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crucible Solver - Minimal heat loss through a run-constrained grid"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Grid file to solve ('-' for stdin, omit for the embedded sample)"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Solve the embedded sample grid"
    )
    parser.add_argument(
        "--variant",
        choices=get_variant_names(settings) + ["all"],
        default=settings.get("default_variant", "all"),
        help="Puzzle variant to solve (default: %(default)s)"
    )
    parser.add_argument("--min-run", type=int, help="Custom minimum run (requires --max-run)")
    parser.add_argument("--max-run", type=int, help="Custom maximum run (requires --min-run)")
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        default=settings.get("strategy_name", get_default_strategy_name()),
        help="Search strategy (default: %(default)s)"
    )
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Print the grid with the chosen path drawn as arrows"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log search statistics"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug mode (debug logging, log file and debug images)"
    )
    args = parser.parse_args(argv)

    if (args.min_run is None) != (args.max_run is None):
        parser.error("--min-run and --max-run must be given together")
    if args.sample and args.input:
        parser.error("--sample cannot be combined with an input file")
    return args


def select_variants(args: argparse.Namespace, settings: Dict) -> List[Tuple[str, RunBounds]]:
    """
    Resolve the (label, bounds) pairs requested on the command line.

    Raises:
        InvalidConfigError: If custom or configured bounds are invalid
    """
    if args.min_run is not None:
        return [("custom", RunBounds(min_run=args.min_run, max_run=args.max_run))]
    if args.variant == "all":
        return [(name, get_variant_bounds(settings, name))
                for name in get_variant_names(settings)]
    return [(args.variant, get_variant_bounds(settings, args.variant))]


def main(argv: Optional[List[str]] = None) -> int:
    """Parse input, solve the requested variants and return an exit code."""
    settings = load_settings()
    args = parse_args(argv, settings)

    # CLI flag overrides saved setting
    debug_mode = args.debug or settings.get("debug_enabled", False)
    if debug_mode:
        setup_logging(logging.DEBUG, LOG_FILE)
    elif args.verbose:
        setup_logging(logging.INFO)
    else:
        setup_logging(logging.WARNING)

    if args.list_strategies:
        for info in get_strategy_info():
            print(f"{info['name']:<10} {info['description']}")
        return EXIT_OK

    try:
        application = Application(
            settings,
            strategy_name=args.strategy,
            debug_mode=debug_mode,
            show_path=args.show_path,
        )
        variants = select_variants(args, settings)
        application.load_grid(None if args.sample else args.input)
    # Unknown strategy names from the settings file surface as ValueError
    except (ParseError, InvalidConfigError, ValueError) as e:
        logger.debug("Input rejected", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except OSError as e:
        print(f"error: cannot read input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    return application.run(variants)


if __name__ == "__main__":
    sys.exit(main())
