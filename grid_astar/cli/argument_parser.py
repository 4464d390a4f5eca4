"""
Command-line argument parser configuration with subcommands
"""

import argparse

from ..core.heuristics import list_heuristics


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, run)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='grid-astar',
        description='A* shortest paths on passable/blocked grids',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Initialize configuration
  grid-astar init                           # Create ./pathfind_config.yaml with a sample maze
  grid-astar init --force                   # Overwrite existing config
  grid-astar init --path ./maze.yaml        # Create in custom location

  # Run searches
  grid-astar run                            # Auto-discover config and run
  grid-astar run maze.yaml                  # Use specific config file
  grid-astar run --start 0 0 --goal 9 9     # Override endpoints
  grid-astar run --heuristic octile         # Admissible heuristic (shortest paths)
  grid-astar run --json                     # Print the result as JSON
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new configuration file',
        description='Initialize grid-astar by creating a configuration file'
    )

    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing configuration file'
    )

    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for config file (default: ./pathfind_config.yaml)'
    )

    # ========================================================================
    # RUN SUBCOMMAND
    # ========================================================================
    run_parser = subparsers.add_parser(
        'run',
        help='Run a path search',
        description='Load a grid from the config and search for a path'
    )

    run_parser.add_argument(
        'config_file',
        nargs='?',
        help='Path to YAML configuration file (optional, will auto-discover)'
    )

    run_parser.add_argument(
        '--start',
        nargs=2,
        type=int,
        metavar=('ROW', 'COL'),
        help='Override the start cell'
    )

    run_parser.add_argument(
        '--goal',
        nargs=2,
        type=int,
        metavar=('ROW', 'COL'),
        help='Override the goal cell'
    )

    run_parser.add_argument(
        '--heuristic',
        choices=list_heuristics(),
        help='Override the heuristic'
    )

    run_parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON instead of text'
    )

    run_parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Set logging level (default: WARNING). Use DEBUG to see search statistics.'
    )

    run_parser.add_argument(
        '--log-file',
        type=str,
        help='Also write logs to this file'
    )

    return parser
