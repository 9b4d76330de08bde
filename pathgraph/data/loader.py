"""
Graph snapshots: save and load graphs as JSON or msgpack files.

Both formats store the same document (see GraphRecords.to_dict):

    {"type": "UNDIRECTED_GRAPH", "name": "maze",
     "vertices": [[0, 0], [0, 1]],
     "edges": [[[0, 0], [0, 1]], [[0, 1], [0, 0]]]}

Neither format has tuples, so list payloads are restored as tuples on load
to keep them hashable.

Usage:
    from pathgraph.data import load_graph, save_graph

    save_graph(graph, "maze.msgpack")
    graph = load_graph("maze.msgpack")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import msgpack

from pathgraph.config import DATA_DIR, JSON_INDENT, SNAPSHOT_SUFFIXES
from pathgraph.exceptions import ErroneousFileFormatError, GraphDataMissingError
from pathgraph.graph import Graph, GraphRecords, export_records

logger = logging.getLogger(__name__)


def _hashable(value: Any) -> Any:
    """Turn (nested) lists into tuples."""
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    return value


def _restore(document: Any) -> GraphRecords:
    """Parse a decoded document back into records."""
    if not isinstance(document, dict):
        raise GraphDataMissingError(f"Snapshot must be a mapping, got {type(document).__name__}")

    records = GraphRecords.from_dict(document)
    records.vertices = [_hashable(data) for data in records.vertices]
    for edge in records.edges:
        edge.source = _hashable(edge.source)
        edge.target = _hashable(edge.target)
    endpoints = [payload for edge in records.edges for payload in (edge.source, edge.target)]
    for data in records.vertices + endpoints:
        if not isinstance(data, Hashable):
            raise ErroneousFileFormatError(f"Vertex payload must be hashable, got {type(data).__name__}: {data!r}")
    return records


def _format_for(path: Path) -> str:
    fmt = SNAPSHOT_SUFFIXES.get(path.suffix.lower())
    if fmt is None:
        available = ", ".join(SNAPSHOT_SUFFIXES)
        raise ErroneousFileFormatError(f"Unsupported snapshot suffix '{path.suffix}'. Available: {available}")
    return fmt


# =============================================================================
# In-memory codecs
# =============================================================================


def dumps_json(graph: Graph) -> str:
    return json.dumps(export_records(graph).to_dict(), indent=JSON_INDENT)


def loads_json(text: str | bytes) -> Graph:
    """
    Rebuild a graph from a JSON document.

    Raises:
        ErroneousFileFormatError: If text is not valid UTF-8 JSON
        GraphDataMissingError: If a section is missing
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ErroneousFileFormatError(f"Invalid JSON snapshot: {e}") from e
    return _restore(document).build()


def dumps_msgpack(graph: Graph) -> bytes:
    return msgpack.packb(export_records(graph).to_dict(), use_bin_type=True)


def loads_msgpack(raw: bytes) -> Graph:
    """
    Rebuild a graph from a msgpack document.

    Raises:
        ErroneousFileFormatError: If raw is not valid msgpack
        GraphDataMissingError: If a section is missing
    """
    try:
        document = msgpack.unpackb(raw, raw=False)
    except (msgpack.ExtraData, msgpack.FormatError, msgpack.StackError, ValueError) as e:
        raise ErroneousFileFormatError(f"Invalid msgpack snapshot: {e}") from e
    return _restore(document).build()


# =============================================================================
# Files
# =============================================================================


def save_graph(graph: Graph, path: str | Path) -> Path:
    """
    Write graph to path, picking the format from the suffix.

    Relative paths without a directory part land in DATA_DIR.

    Returns:
        The path written

    Raises:
        ErroneousFileFormatError: If the suffix is not a known snapshot format
    """
    path = _resolve_path(path)
    fmt = _format_for(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "json":
        with open(path, "w", encoding="utf-8") as f:
            f.write(dumps_json(graph))
    else:
        with open(path, "wb") as f:
            f.write(dumps_msgpack(graph))

    logger.info(f"Saved {graph!r} to {path}")
    return path


def load_graph(path: str | Path) -> Graph:
    """
    Read a graph snapshot, picking the format from the suffix.

    Raises:
        FileNotFoundError: If the file does not exist
        ErroneousFileFormatError: If the suffix or the content is not a valid snapshot
        GraphDataMissingError: If a section is missing
    """
    path = _resolve_path(path)
    fmt = _format_for(path)
    logger.info(f"Loading graph from {path}...")

    if fmt == "json":
        with open(path, "rb") as f:
            graph = loads_json(f.read())
    else:
        with open(path, "rb") as f:
            graph = loads_msgpack(f.read())

    logger.info(f"Loaded {graph!r}")
    return graph


def _resolve_path(path: str | Path) -> Path:
    path = Path(path)
    if not path.is_absolute() and path.parent == Path("."):
        return DATA_DIR / path
    return path
