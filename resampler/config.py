from dataclasses import dataclass
import numpy as np
from maths.curves.bezier import step_count_for
from utils.utils import to_presentation_coords

@dataclass(frozen=True)
class CurveConfig:
    """Curve sampling and segmentation parameters"""
    segments: int = 10
    epsilon: float = 0.001

    # t runs over [0, domain] in increments of dt and is divided by domain
    dt: float = 0.5
    domain: float = 100.0

    @property
    def step_count(self) -> int:
        return step_count_for(self.dt, self.domain)

@dataclass(frozen=True)
class PresentationConfig:
    """Mapping from curve space to the coordinate space of whatever draws the result"""
    scale_x: float = 300.0
    scale_y: float = 300.0
    offset_x: float = 400.0
    offset_y: float = 300.0

    width: int = 1280
    height: int = 720

    @classmethod
    def identity(cls) -> 'PresentationConfig':
        return cls(scale_x=1.0, scale_y=1.0, offset_x=0.0, offset_y=0.0)

    def transform(self, points) -> np.ndarray:
        return to_presentation_coords(points, self.scale_x, self.scale_y, self.offset_x, self.offset_y)

    def contains(self, points) -> bool:
        """Whether every point falls inside the width x height viewport"""
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return bool(np.all((points[:, 0] >= 0) & (points[:, 0] <= self.width) &
                           (points[:, 1] >= 0) & (points[:, 1] <= self.height)))
