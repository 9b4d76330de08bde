"""
Configuration constants for pathgraph.

Graph defaults, snapshot settings and logging level live here.
Environment overrides are read once at import time.
"""

import math
import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathgraph/
PROJECT_ROOT = Path(__file__).parent.parent

# Default directory for graph snapshots (JSON / msgpack)
DATA_DIR = Path(os.environ.get("PATHGRAPH_DATA_DIR", PROJECT_ROOT / "data"))

# =============================================================================
# Graph Configuration
# =============================================================================

# Name given to graphs created without one
DEFAULT_GRAPH_NAME = "Unnamed graph"

# Weight of an edge when none is given (and of every edge in unweighted graphs)
DEFAULT_WEIGHT = 1

# Cost of a vertex not yet reached by Dijkstra
INF = math.inf

# =============================================================================
# Snapshot Configuration
# =============================================================================

# Indentation for JSON snapshots (None = compact)
JSON_INDENT = 2

# Recognised snapshot file suffixes and their format names
SNAPSHOT_SUFFIXES = {
    ".json": "json",
    ".msgpack": "msgpack",
    ".mpk": "msgpack",
}

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("PATHGRAPH_LOG_LEVEL", "INFO")
