#!/usr/bin/env python
"""
Simple CLI for running grid path searches
Usage: python pathfind.py run [config_file] [--start R C] [--goal R C]
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional

from grid_astar import AStar, PathfindConfig, GridAStarError
from grid_astar.cli import (
    setup_argument_parser,
    discover_config,
    run_init_command,
    print_result,
)
from grid_astar.exporters import export_to_json, export_to_csv, ExporterError

EXIT_FOUND = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2

# Handlers added by setup_logging, removed again on the next call
_installed_handlers: List[logging.Handler] = []


def setup_logging(log_file: Optional[Path] = None, log_level: str = 'WARNING') -> None:
    """
    Configure logging to output to console and optionally a file

    Args:
        log_file: Optional path to log file
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler (stderr keeps stdout clean for --json)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)


def load_config(args) -> PathfindConfig:
    """Discover and load the config, applying command-line overrides"""
    config_file = discover_config(args.config_file)
    config = PathfindConfig.from_yaml(config_file)

    if args.heuristic:
        config = config.with_overrides(heuristic=args.heuristic)
    if args.start:
        config.start = tuple(args.start)
    if args.goal:
        config.goal = tuple(args.goal)

    return config


def export_result(config: PathfindConfig, path, stats, logger: logging.Logger) -> None:
    """Write json/csv exports configured in the output section"""
    if 'json' in config.output_formats:
        json_file = config.output_dir / f"{config.file_prefix}.json"
        export_to_json(path, stats, str(json_file))
        print(f"📄 JSON saved to: {json_file}")

    if 'csv' in config.output_formats:
        csv_file = config.output_dir / f"{config.file_prefix}.csv"
        export_to_csv(path, str(csv_file))
        print(f"📄 CSV saved to: {csv_file}")

    logger.debug(f"Exports written for formats: {config.output_formats}")


def run_command(args) -> int:
    """Run a search from the config and print the result"""
    logger = logging.getLogger(__name__)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        grid = config.load_grid()
        engine = AStar(grid, config.search)

        waypoints: List = [config.start, *config.waypoints, config.goal]
        logger.info(f"Searching {config.start} -> {config.goal} on {grid!r}")
        if len(waypoints) > 2:
            path = engine.find_route(waypoints)
        else:
            path = engine.find_path(*config.start, *config.goal)
    except (GridAStarError, OSError) as e:
        logger.error(f"Search failed: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    stats = engine.last_stats

    if args.json:
        print(export_to_json(path, stats))
    elif 'text' in config.output_formats:
        print_result(grid, path, stats, marker=config.path_marker, show_grid=config.show_grid)

    try:
        export_result(config, path, stats, logger)
    except ExporterError as e:
        logger.error(f"Export failed: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_FOUND if path is not None else EXIT_NO_PATH


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the grid-astar CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        return run_init_command(force=args.force, path=args.path)

    log_file = Path(args.log_file) if args.log_file else None
    setup_logging(log_file, log_level=args.log_level)

    return run_command(args)


if __name__ == '__main__':
    sys.exit(main())
