from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..types.constants import HSB_HUE_INDEX, HSB_SATURATION_INDEX, HSB_BRIGHTNESS_INDEX
from .color_base import ColorBase, build_registry


class UnitHSB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace] = ColorSpace.HSB
    _type:      ClassVar[type] = float
    # hue is a fraction of a full turn
    maxima:     ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    @property
    def hue(self):
        return self._channel(HSB_HUE_INDEX)

    @property
    def saturation(self):
        return self._channel(HSB_SATURATION_INDEX)

    @property
    def brightness(self):
        return self._channel(HSB_BRIGHTNESS_INDEX)

    def _channel(self, index: int):
        if self.is_array:
            return self.value[..., index]
        return self.value[index]

hsb_tuple_to_class = build_registry(
    UnitHSB,
)
