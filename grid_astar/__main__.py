"""
Entry point for grid_astar CLI
"""
import sys
from pathlib import Path

# Add parent directory to path to import pathfind module
sys.path.insert(0, str(Path(__file__).parent.parent))

from pathfind import main

if __name__ == '__main__':
    sys.exit(main())
