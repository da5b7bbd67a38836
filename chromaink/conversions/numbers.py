import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp
from ..types.constants import MAX_COMPONENT


def clamp01(value: float) -> float:
    """Clamp a float to the inclusive range ``[0, 1]``. NaN maps to 0.0."""
    if math.isnan(value):
        return 0.0
    return float(clamp(value, 0.0, 1.0))


def clamp_component(value: float) -> float:
    """Clamp a channel to ``[0, 255]``. NaN maps to 0."""
    if math.isnan(value):
        return 0.0
    return clamp(value, 0, MAX_COMPONENT)


def np_clamp(values: NDArray, upper: float = 1.0) -> NDArray:
    """Vectorized clamp to ``[0, upper]`` as floats; NaN maps to 0."""
    values = np.nan_to_num(np.asarray(values, dtype=float), nan=0.0)
    return np.clip(values, 0.0, upper)


def int_to_unit(value: int) -> float:
    """Convert a 0-255 channel to the 0.0-1.0 domain."""
    return value / MAX_COMPONENT


def unit_to_int(value: float) -> int:
    """
    Convert a 0.0-1.0 channel to a 0-255 integer.

    Rounds half up and clamps to ``[0, 255]``. NaN maps to 0.
    """
    if math.isnan(value):
        return 0
    scaled = value * MAX_COMPONENT
    if scaled >= MAX_COMPONENT:
        return MAX_COMPONENT
    if scaled <= 0:
        return 0
    return min(math.floor(scaled + 0.5), MAX_COMPONENT)
