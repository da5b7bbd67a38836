from typing import ClassVar
from numpy import ndarray
import numpy as np
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..types.constants import BITMAP_THRESHOLD
from .color_base import ColorBase, build_registry


class UnitGray(ColorBase):
    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace] = ColorSpace.GRAY
    _type:      ClassVar[type] = float
    maxima:     ClassVar[float] = 1.0
    null_value: ClassVar[float] = 0.0
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class UnitBitmap(ColorBase):
    """
    A 1-bit value: exactly 0.0 (black) or 1.0 (white).

    Anything in between snaps to black below 0.5 and to white otherwise, so an
    instance never holds an intermediate gray.
    """
    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace] = ColorSpace.BITMAP
    _type:      ClassVar[type] = float
    maxima:     ClassVar[float] = 1.0
    null_value: ClassVar[float] = 0.0
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    def _coerce_scalar(self, value: float) -> float:
        return 0.0 if value < BITMAP_THRESHOLD else 1.0

    def _coerce_array(self, arr: ndarray) -> ndarray:
        return np.where(arr < BITMAP_THRESHOLD, 0.0, 1.0)


gray_tuple_to_class = build_registry(
    UnitGray,
    UnitBitmap,
)
