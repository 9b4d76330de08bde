"""
Execution statistics dataclasses for graph algorithm runs.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field


def _now_ms() -> float:
    return time.time() * 1000


@dataclass
class AlgorithmExecutionStats:
    """
    Statistics for one algorithm run.

    Created fresh at the start of every search call and only mutated by the
    algorithm performing that call.

    Attributes:
        algorithm_name: Name of the algorithm that produced these stats
        exec_start_ms: Wall-clock start (epoch milliseconds)
        exec_time_ms: Elapsed time once stopped (milliseconds)
        nodes_visited: Number of nodes the algorithm visited
    """

    algorithm_name: str | None = None
    exec_start_ms: float = field(default_factory=_now_ms)
    exec_time_ms: float = 0.0
    nodes_visited: int = 0

    def reset(self) -> None:
        """Restart the timer and zero the counters."""
        self.exec_start_ms = _now_ms()
        self.exec_time_ms = 0.0
        self.nodes_visited = 0

    def stop_execution(self) -> None:
        """Fix the elapsed time."""
        self.exec_time_ms = _now_ms() - self.exec_start_ms

    def inc_nodes_visited(self) -> None:
        self.nodes_visited += 1

    @property
    def exec_time_readable(self) -> str:
        """Elapsed time as "N ms", or "H h, M min, S sec" from one second up."""
        total_ms = int(self.exec_time_ms)
        if total_ms < 1000:
            return f"{total_ms} ms"
        seconds = (total_ms // 1000) % 60
        minutes = (total_ms // (1000 * 60)) % 60
        hours = total_ms // (1000 * 60 * 60)
        return f"{hours} h, {minutes} min, {seconds} sec"

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        header = "Execution statistics"
        if self.algorithm_name:
            header += f" for {self.algorithm_name}"
        return (
            f"{header}:\n"
            f"Execution time: {self.exec_time_readable}\n"
            f"Nodes visited: {self.nodes_visited}\n"
        )


@dataclass
class FindPathAlgorithmExecutionStats(AlgorithmExecutionStats):
    """
    Statistics for a single-destination path search.

    Attributes:
        path_length: Number of vertices in the returned path (0 if none)
        solution_found: Whether the destination was reached
    """

    path_length: int = 0
    solution_found: bool = False

    def reset(self) -> None:
        super().reset()
        self.path_length = 0
        self.solution_found = False

    def record_solution(self, path_length: int) -> None:
        """Stop the timer and record the outcome (path_length 0 = not found)."""
        self.stop_execution()
        self.path_length = path_length
        self.solution_found = path_length > 0

    def __str__(self) -> str:
        text = super().__str__()
        text += f"Solution was found: {'Yes' if self.solution_found else 'No'}\n"
        if self.path_length > 0:
            text += f"Path length: {self.path_length}\n"
        return text
