"""Run statistics for a triangulation call."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class TriangulationStats:
    points: int = 0
    iterations: int = 0
    hull_edges: int = 0
    triangles: int = 0
    # new edges not pushed back to the frontier because they were finalized
    skipped_reopens: int = 0
    early_exit: bool = False
    time_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'points': self.points,
            'iterations': self.iterations,
            'hull_edges': self.hull_edges,
            'triangles': self.triangles,
            'skipped_reopens': self.skipped_reopens,
            'early_exit': self.early_exit,
            'time_total': self.time_total,
            'time_per_iteration': (self.time_total / self.iterations) if self.iterations else 0.0,
        }


def format_stats(stats: TriangulationStats) -> str:
    """Return a human readable two-column summary."""
    d = stats.to_dict()
    width = max(len(k) for k in d)
    lines = []
    for k, v in d.items():
        if k.startswith('time'):
            lines.append(f"{k:<{width}}  {v * 1000.0:10.3f} ms")
        else:
            lines.append(f"{k:<{width}}  {v!s:>10}")
    return "\n".join(lines)


__all__ = ['TriangulationStats', 'format_stats']
