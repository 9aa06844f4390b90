from .config import CurveConfig, PresentationConfig
from .pipeline import ResampledCurve, resample, DEFAULT_CONTROL_POINTS

__all__ = [
    'CurveConfig',
    'PresentationConfig',
    'ResampledCurve',
    'resample',
    'DEFAULT_CONTROL_POINTS'
]
