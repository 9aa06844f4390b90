from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import numpy as np
from maths.curves.bezier import Bezier
from maths.curves.polyline import Polyline, build_polyline
from maths.curves.segmenter import segment_polyline
from .config import CurveConfig, PresentationConfig

DEFAULT_CONTROL_POINTS = (
    (0.45, 0.328),
    (1.403, 0.12),
    (0.62, 1.255),
    (1.521, 0.593),
)

@dataclass(frozen=True)
class ResampledCurve:
    """Everything an external renderer needs to draw one curve"""
    control_points: np.ndarray
    sample: np.ndarray
    polyline: Polyline
    breakpoints: np.ndarray
    presentation: Optional[PresentationConfig] = None

    @property
    def control_markers(self) -> np.ndarray:
        """Control points in the same coordinate space as sample and breakpoints"""
        if self.presentation is None:
            return self.control_points.copy()
        return self.presentation.transform(self.control_points)

    @property
    def total_length(self) -> float:
        return self.polyline.total_length

    def to_dict(self, include_sample: bool = True) -> Dict[str, Any]:
        data = {
            "control_points": self.control_points.tolist(),
            "control_markers": self.control_markers.tolist(),
            "total_length": self.total_length,
            "breakpoints": self.breakpoints.tolist(),
        }
        if include_sample:
            data["sample"] = self.sample.tolist()
        return data

def resample(control_points=DEFAULT_CONTROL_POINTS, config: Optional[CurveConfig] = None,
             presentation: Optional[PresentationConfig] = None) -> ResampledCurve:
    """
    Sample the cubic Bezier defined by control_points, build its polyline and split it
    into config.segments pieces of equal arc length.

    When a presentation config is given the sample is mapped into presentation space
    before the polyline is built, so segmentation happens in that space.
    """
    config = config or CurveConfig()
    curve = Bezier(control_points)
    transform = presentation.transform if presentation is not None else None

    sample = curve.sample(config.step_count, transform)
    polyline = build_polyline(sample)
    breakpoints = segment_polyline(polyline, config.segments, config.epsilon)

    logging.info(
        f"Resampled curve of length {polyline.total_length:.4f} into {config.segments} segments "
        f"from {len(sample)} samples"
    )
    return ResampledCurve(
        control_points=curve.points,
        sample=sample,
        polyline=polyline,
        breakpoints=breakpoints,
        presentation=presentation,
    )
