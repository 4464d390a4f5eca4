"""
Config file discovery logic
"""

from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

DEFAULT_CONFIG_FILENAME = 'pathfind_config.yaml'


def discover_config(explicit_path: Optional[str] = None) -> str:
    """
    Discover configuration file from various locations

    Priority order:
    1. Explicit path provided by user
    2. Current directory (./pathfind_config.yaml)
    3. OS-native config location (~/.config/grid_astar/config.yaml on Linux)

    Args:
        explicit_path: Optional explicit path to config file

    Returns:
        Absolute path to config file as string

    Raises:
        FileNotFoundError: If no config file is found in any location
    """
    if explicit_path:
        path = Path(explicit_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {explicit_path}")
        return str(path)

    local_config = Path(DEFAULT_CONFIG_FILENAME).resolve()
    if local_config.exists():
        return str(local_config)

    os_config = Path(user_config_dir('grid_astar', appauthor=False)) / 'config.yaml'
    if os_config.exists():
        return str(os_config)

    raise FileNotFoundError(
        "No config file found.\n"
        "Run 'grid-astar init' to create one, or specify a config file path."
    )
