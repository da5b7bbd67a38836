from __future__ import annotations
from .color_base import ColorBase
from .rgb import rgb_tuple_to_class
from .gray import gray_tuple_to_class
from .cmyk import cmyk_tuple_to_class
from .hsb import hsb_tuple_to_class
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace, HexTokens
from ..types.color_mode import ColorMode
from ..conversions import convert, np_convert, to_hex
from numpy import ndarray

unified_tuple_to_class: dict[tuple[ColorSpace, FormatType], type[ColorBase]] = {
    **rgb_tuple_to_class,
    **gray_tuple_to_class,
    **cmyk_tuple_to_class,
    **hsb_tuple_to_class,
}


def get_color_class(color_space: ColorSpace | str, format_type: FormatType) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((ColorSpace(color_space.lower()), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None, to_format: FormatType | None = None) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Automatically detects whether the value is a scalar or array and uses
    the appropriate conversion function (convert for scalars, np_convert for arrays).

    Args:
        to_space: Target color space (e.g., "rgb", "gray", "cmyk"). Defaults to current space.
        to_format: Target format type. Defaults to the current format for RGB
            targets and to FLOAT for every other space.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = ColorSpace((to_space or self.mode).lower())
    if to_format is None:
        rgb_target = to_space in (ColorSpace.RGB, ColorSpace.RGBA)
        to_format = self.format_type if rgb_target else FormatType.FLOAT

    cls = get_color_class(to_space, to_format)

    if isinstance(self.value, ndarray):
        result = np_convert(
            color=self.value,
            from_space=self.mode,
            to_space=to_space,
            input_type=self.format_type,
            output_type=to_format,
        )
    else:
        result = convert(
            color=self.value,
            from_space=self.mode,
            to_space=to_space,
            input_type=self.format_type,
            output_type=to_format,
        )
    return cls(result)


def color_to_hex(self: ColorBase, color_mode: ColorMode | str | None = None) -> HexTokens:
    """Hex tokens for this color in the given export color mode (default RGB)."""
    return to_hex(self, color_mode)


ColorBase.convert = color_convert
ColorBase.to_hex = color_to_hex
