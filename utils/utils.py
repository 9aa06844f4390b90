import numpy as np

def to_presentation_coords(points, scale_x: float, scale_y: float, offset_x: float, offset_y: float) -> np.ndarray:
    """Map curve-space points into presentation space: p * scale + offset, per axis"""
    points = np.asarray(points, dtype=np.float64)
    scale = np.array([scale_x, scale_y], dtype=np.float64)
    offset = np.array([offset_x, offset_y], dtype=np.float64)
    return points * scale + offset
