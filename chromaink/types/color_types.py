from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
IntVector = Tuple[int, ...]
ScalarVector = Tuple[Scalar, ...]
IntElement = Union[int, IntVector]
FloatElement = Union[float, Tuple[float, ...]]
ColorElement = Union[IntElement, FloatElement]
ColorValue = Union[ColorElement, ndarray]  # Includes array support
RGBTriple = Tuple[int, int, int]
HexTokens = Tuple[str, ...]


class ColorSpace(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    GRAY = "gray"
    BITMAP = "bitmap"
    CMYK = "cmyk"
    HSB = "hsb"


ALPHA_SPACES = {ColorSpace.RGBA}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a numpy array.
    
    Args:
        element: Scalar, tuple, or already an ndarray
        
    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element
    if isinstance(element, (int, float)):
        return np.array([element])
    return np.array(element)


def base_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """Strip the alpha channel from a color space name ("rgba" -> "rgb")."""
    space = ColorSpace(space.lower())
    if space in ALPHA_SPACES:
        return ColorSpace(space.value[:-1])
    return space
