class CurveError(ValueError):
    """Base class for every input or precondition failure of the curve maths"""


class InvalidCurveDefinition(CurveError):
    """A cubic Bezier needs exactly four finite 2D control points"""


class InvalidSampleCount(CurveError):
    """The requested number of sample steps is below one"""


class InsufficientPoints(CurveError):
    """A polyline needs at least two points"""


class DegenerateCurve(CurveError):
    """The polyline is too short to be split with the given tolerance"""


class InvalidTolerance(CurveError):
    pass


class InvalidSegmentCount(CurveError):
    pass


class ArcLengthOverrun(CurveError):
    """The walk along the polyline ran past its last segment"""
    def __init__(self, iteration: int, segment_count: int):
        self.iteration = iteration
        self.segment_count = segment_count
        super().__init__(
            f"Ran out of polyline segments at breakpoint {iteration} "
            f"(polyline has {segment_count} segments)"
        )
