"""
CLI utilities for pathfind.py
"""

from .argument_parser import setup_argument_parser
from .output import print_result, render_overlay, format_path
from .init_command import run_init_command
from .config_discovery import discover_config

__all__ = [
    'setup_argument_parser',
    'print_result',
    'render_overlay',
    'format_path',
    'run_init_command',
    'discover_config'
]
