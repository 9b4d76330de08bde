"""
Data module - graph snapshots on disk (JSON and msgpack).
"""

from pathgraph.data.loader import (
    dumps_json,
    dumps_msgpack,
    load_graph,
    loads_json,
    loads_msgpack,
    save_graph,
)

__all__ = [
    "save_graph",
    "load_graph",
    "dumps_json",
    "loads_json",
    "dumps_msgpack",
    "loads_msgpack",
]
