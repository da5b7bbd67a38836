from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..types.constants import CMYK_CYAN_INDEX, CMYK_MAGENTA_INDEX, CMYK_YELLOW_INDEX, CMYK_BLACK_INDEX
from .color_base import ColorBase, build_registry


class UnitCMYK(ColorBase):
    num_channels: ClassVar[int] = 4
    mode:       ClassVar[ColorSpace] = ColorSpace.CMYK
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    @property
    def cyan(self):
        return self._channel(CMYK_CYAN_INDEX)

    @property
    def magenta(self):
        return self._channel(CMYK_MAGENTA_INDEX)

    @property
    def yellow(self):
        return self._channel(CMYK_YELLOW_INDEX)

    @property
    def black(self):
        return self._channel(CMYK_BLACK_INDEX)

    def _channel(self, index: int):
        if self.is_array:
            return self.value[..., index]
        return self.value[index]


cmyk_tuple_to_class = build_registry(
    UnitCMYK,
)
