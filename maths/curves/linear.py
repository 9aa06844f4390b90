from dataclasses import dataclass, field
import numpy as np

@dataclass(frozen=True, eq=False)
class Linear:
    """Directed segment from point1 (A) to point2 (B)"""
    point1: np.ndarray
    point2: np.ndarray
    length: float = field(init=False)

    def __post_init__(self):
        point1 = np.array(self.point1, dtype=np.float64)
        point2 = np.array(self.point2, dtype=np.float64)
        point1.flags.writeable = False
        point2.flags.writeable = False
        object.__setattr__(self, "point1", point1)
        object.__setattr__(self, "point2", point2)
        object.__setattr__(self, "length", float(np.sqrt(np.sum((point2 - point1)**2))))

    def point_at(self, t: float) -> np.ndarray:
        return self.point1 + (self.point2 - self.point1) * t

    def fraction_of(self, point: np.ndarray, tolerance: float):
        """Fraction along the segment at which point lies, or None if it is farther than tolerance"""
        point = np.asarray(point, dtype=np.float64)
        if self.length == 0:
            return 0.0 if np.sqrt(np.sum((point - self.point1)**2)) <= tolerance else None

        direction = self.point2 - self.point1
        t = float(np.dot(point - self.point1, direction)) / (self.length ** 2)
        t = min(1.0, max(0.0, t))
        if np.sqrt(np.sum((self.point_at(t) - point)**2)) > tolerance:
            return None
        return t

    def __repr__(self) -> str:
        return f"Linear({self.point1.tolist()} -> {self.point2.tolist()}, length={self.length:.6g})"
