import logging
from typing import Callable, Optional
import numpy as np
from .errors import InvalidCurveDefinition, InvalidSampleCount

CUBIC_POINT_COUNT = 4

PointTransform = Callable[[np.ndarray], np.ndarray]

def step_count_for(dt: float, domain: float = 100.0) -> int:
    """Number of sample steps when t runs over [0, domain] in increments of dt"""
    if dt <= 0 or domain <= 0:
        raise InvalidSampleCount(f"dt and domain must be positive, got dt={dt}, domain={domain}")
    return max(1, int(round(domain / dt)))

class Bezier:
    def __init__(self, points):
        points = np.array(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidCurveDefinition("Control points must be 2D")
        if len(points) != CUBIC_POINT_COUNT:
            raise InvalidCurveDefinition(
                f"A cubic Bezier needs {CUBIC_POINT_COUNT} control points, got {len(points)}"
            )
        if not np.all(np.isfinite(points)):
            raise InvalidCurveDefinition("Control points must be finite")

        points.flags.writeable = False
        self.points = points

    def point_at(self, t: float) -> np.ndarray:
        """Calculate point on Bezier curve at parameter t using Bernstein polynomials"""
        if not 0.0 <= t <= 1.0:
            raise ValueError(f"t must be within [0, 1], got {t}")
        n = len(self.points) - 1
        point = np.zeros(2)

        for i in range(n + 1):
            b = self._bernstein(i, n, t)
            point += self.points[i] * b

        return point

    def sample(self, step_count: int, transform: Optional[PointTransform] = None) -> np.ndarray:
        """
        Evaluate the curve at step_count + 1 evenly spaced values of t covering [0, 1].

        The optional transform maps the whole sample from curve space into another
        coordinate space (see utils.utils.to_presentation_coords); the curve itself
        never knows about it.
        """
        if isinstance(step_count, bool) or not isinstance(step_count, (int, np.integer)):
            raise InvalidSampleCount(f"Sample step count must be an integer, got {step_count!r}")
        if step_count < 1:
            raise InvalidSampleCount(f"Sample step count must be at least 1, got {step_count}")

        t = np.linspace(0, 1, step_count + 1)
        points = np.empty((step_count + 1, 2))
        for i, ti in enumerate(t):
            points[i] = self.point_at(ti)

        logging.debug(f"Sampled Bezier at {step_count + 1} points")
        if transform is not None:
            points = np.asarray(transform(points), dtype=np.float64)
        return points

    @staticmethod
    def _binomial_coefficient(n: int, k: int) -> int:
        """Calculate binomial coefficient C(n,k) using multiplicative formula"""
        if k < 0 or k > n:
            return 0

        if k == 0 or k == n:
            return 1

        k = min(k, n - k)
        c = 1

        for i in range(1, k + 1):
            c = c * (n + 1 - i) // i

        return c

    def _bernstein(self, i: int, n: int, t: float) -> float:
        """Calculate Bernstein polynomial B(i,n,t)"""
        return self._binomial_coefficient(n, i) * (t ** i) * ((1.0 - t) ** (n - i))

def sample_bezier(control_points, step_count: int, transform: Optional[PointTransform] = None) -> np.ndarray:
    return Bezier(control_points).sample(step_count, transform)
