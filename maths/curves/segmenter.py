import logging
import math
import numpy as np
from .errors import ArcLengthOverrun, DegenerateCurve, InvalidSegmentCount, InvalidTolerance
from .polyline import Polyline

def _validate(polyline: Polyline, segments: int, epsilon: float):
    if isinstance(segments, bool) or not isinstance(segments, (int, np.integer)):
        raise InvalidSegmentCount(f"Segment count must be an integer, got {segments!r}")
    if segments < 1:
        raise InvalidSegmentCount(f"Segment count must be at least 1, got {segments}")
    if not math.isfinite(epsilon) or epsilon <= 0:
        raise InvalidTolerance(f"Tolerance must be a positive finite number, got {epsilon}")
    if not polyline.total_length > epsilon * segments:
        raise DegenerateCurve(
            f"Polyline length {polyline.total_length} is too small for {segments} segments "
            f"with tolerance {epsilon}"
        )

def segment_polyline(polyline: Polyline, segments: int, epsilon: float) -> np.ndarray:
    """
    Split the polyline into `segments` pieces of equal arc length.

    Walks the polyline once. For every breakpoint the length from the cursor to the
    end of its segment is accumulated, whole segments are added while the target
    step is still more than epsilon away, and the breakpoint is then either placed
    inside the current segment (overshoot larger than epsilon) or snapped onto the
    segment's end point.

    Returns a (segments + 1, 2) array whose first row is the polyline's first point.
    Raises ArcLengthOverrun instead of reading past the last segment.
    """
    _validate(polyline, segments, epsilon)

    segment_count = len(polyline)
    step = polyline.total_length / segments
    breakpoints = np.empty((segments + 1, 2))

    cursor = polyline.first_point
    seg_idx = 0
    breakpoints[0] = cursor

    for i in range(1, segments + 1):
        if seg_idx >= segment_count:
            raise ArcLengthOverrun(i, segment_count)

        line = polyline[seg_idx]
        acc = float(np.sqrt(np.sum((line.point2 - cursor)**2)))

        while step - acc > epsilon:
            if seg_idx + 1 >= segment_count:
                raise ArcLengthOverrun(i, segment_count)
            seg_idx += 1
            line = polyline[seg_idx]
            acc += line.length

        overshoot = acc - step
        if overshoot > epsilon:
            # point sits `overshoot` back from point2 towards point1
            t = overshoot / line.length
            cursor = t * line.point1 + (1 - t) * line.point2
        else:
            cursor = line.point2
            seg_idx += 1

        breakpoints[i] = cursor

    logging.debug(
        f"Split polyline of length {polyline.total_length:.6g} into {segments} segments "
        f"(step {step:.6g}, epsilon {epsilon})"
    )
    return breakpoints

def breakpoint_spacing(polyline: Polyline, breakpoints: np.ndarray, tolerance: float = 1e-9) -> np.ndarray:
    """Arc-length distances along the polyline between consecutive breakpoints"""
    positions = np.empty(len(breakpoints))
    start = 0
    for i, point in enumerate(breakpoints):
        location = polyline.locate(point, tolerance, start)
        if location is None:
            raise ValueError(f"Breakpoint {i} {np.asarray(point).tolist()} is not on the polyline")
        start, t = location
        positions[i] = polyline.sections[start] + t * polyline.lengths[start]
    return np.diff(positions)
