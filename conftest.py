import numpy as np
import pytest

from resampler.pipeline import DEFAULT_CONTROL_POINTS


@pytest.fixture
def arch_points():
    """Symmetric arch from (0, 0) to (0, 1) bulging towards +x"""
    return np.array([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)])


@pytest.fixture
def demo_points():
    return np.array(DEFAULT_CONTROL_POINTS)


@pytest.fixture
def line_points():
    return np.array([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)])
