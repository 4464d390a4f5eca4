"""
Starter configuration template for grid-astar
"""

MINIMAL_CONFIG_TEMPLATE = """# Grid A* Configuration
# ============================================================================
# 0 = passable, anything else = blocked (see search.passable_value)

# Grid
# ----------------------------------------------------------------------------
grid:
  rows:
    - [0, 0, 0, 0, 0, 1, 0, 0, 0, 0]
    - [0, 1, 1, 0, 0, 1, 0, 0, 0, 0]
    - [0, 1, 1, 0, 0, 1, 0, 0, 0, 0]
    - [0, 1, 0, 0, 0, 1, 0, 0, 0, 0]
    - [0, 1, 0, 1, 1, 1, 0, 0, 1, 0]
    - [0, 1, 0, 1, 0, 0, 0, 0, 1, 0]
    - [0, 1, 0, 1, 0, 1, 1, 1, 1, 0]
    - [0, 1, 0, 1, 0, 1, 0, 0, 0, 0]
    - [0, 1, 0, 1, 0, 1, 0, 0, 0, 0]
    - [0, 1, 0, 0, 0, 1, 0, 0, 0, 0]
  # Or load a header-less CSV instead of inline rows (relative to this file):
  # csv_path: "${GRID_DIR:-.}/maze.csv"

# Endpoints ([row, col])
# ----------------------------------------------------------------------------
start: [9, 0]
goal: [9, 9]
# waypoints: [[0, 0]]   # Optional cells to visit between start and goal

# Search
# ----------------------------------------------------------------------------
search:
  passable_value: 0
  orthogonal_cost: 1.0
  diagonal_cost: 1.4
  heuristic: "manhattan"   # Options: manhattan, octile, chebyshev, euclidean
  decrease_key: true       # Re-order the open set when a node's cost improves

# Output
# ----------------------------------------------------------------------------
output:
  path_marker: "."
  show_grid: true
  formats: ["text"]        # Options: text, json, csv
  directory: "pathfind_results"
  file_prefix: "path"
"""
