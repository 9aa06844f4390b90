import bisect
from typing import Iterator, List, Optional, Tuple
import numpy as np
from .errors import InsufficientPoints
from .linear import Linear

class Polyline:
    """
    Ordered, index-addressable run of Linear segments built from consecutive points.

    sections holds the cumulative length at the start of every segment plus the
    total, so sections[i] is the arc-length position of points[i].
    """
    def __init__(self, points: np.ndarray):
        points = np.array(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 2:
            raise InsufficientPoints(f"Polyline points must be a (k, 2) array, got shape {points.shape}")
        if len(points) < 2:
            raise InsufficientPoints(f"A polyline needs at least 2 points, got {len(points)}")

        points.flags.writeable = False
        self.points = points
        self.lines: List[Linear] = [Linear(points[i], points[i + 1]) for i in range(len(points) - 1)]

        self.lengths = np.array([line.length for line in self.lines])
        self.sections = np.zeros(len(self.lines) + 1)
        self.sections[1:] = np.cumsum(self.lengths)
        self.lengths.flags.writeable = False
        self.sections.flags.writeable = False

        self.total_length = float(np.sum(self.lengths))

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> Linear:
        return self.lines[index]

    def __iter__(self) -> Iterator[Linear]:
        return iter(self.lines)

    @property
    def first_point(self) -> np.ndarray:
        return self.points[0]

    @property
    def last_point(self) -> np.ndarray:
        return self.points[-1]

    def point_at(self, t: float) -> np.ndarray:
        """Point at arc-length fraction t of the polyline"""
        if self.total_length == 0:
            return self.first_point.copy()

        desired_width = self.total_length * max(0.0, min(1.0, t))
        index = bisect.bisect_left(self.sections[1:], desired_width)
        index = min(index, len(self.lines) - 1)

        if self.lengths[index] == 0:
            return self.lines[index].point1.copy()

        return self.lines[index].point_at((desired_width - self.sections[index]) / self.lengths[index])

    def locate(self, point: np.ndarray, tolerance: float = 1e-9, start: int = 0) -> Optional[Tuple[int, float]]:
        """(segment index, fraction) of the first segment from start on that the point lies on, or None"""
        for index in range(start, len(self.lines)):
            t = self.lines[index].fraction_of(point, tolerance)
            if t is not None:
                return index, t
        return None

    def arc_length_at(self, point: np.ndarray, tolerance: float = 1e-9, start: int = 0) -> float:
        location = self.locate(point, tolerance, start)
        if location is None:
            raise ValueError(f"Point {np.asarray(point).tolist()} is not on the polyline")
        index, t = location
        return float(self.sections[index] + t * self.lengths[index])

    def __repr__(self) -> str:
        return f"Polyline(segments={len(self.lines)}, total_length={self.total_length:.6g})"

def build_polyline(points) -> Polyline:
    return Polyline(points)
