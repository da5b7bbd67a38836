"""
Export-facing enumerations.

``ColorMode`` selects how colors are written by vector/print exporters
(PostScript, EPS, SVG, PDF). HSB is absent: exporters convert it
back to RGB anyway, so it is not a mode of its own.

``DrawMode`` selects how a shape is applied to a graphics context.
"""
from __future__ import annotations
import warnings
from enum import Enum
from typing import Optional

from .color_types import ColorSpace


class _CanonicalEnum(Enum):

    @classmethod
    def default_value(cls):
        return _default_members[cls]

    @classmethod
    def from_canonical_string(cls, canonical: Optional[str]):
        """
        Look up a member by its case-insensitive name.

        ``None`` maps to the default member. Unknown names warn and fall back
        to the default member as well.
        """
        if canonical is None:
            return cls.default_value()
        try:
            return cls[canonical.strip().upper()]
        except KeyError:
            warnings.warn(
                f"Unknown {cls.__name__} {canonical!r}, defaulting to {cls.default_value().name}"
            )
            return cls.default_value()

    def to_canonical_string(self) -> str:
        return self.name.lower()


class ColorMode(_CanonicalEnum):
    BITMAP = ColorSpace.BITMAP
    GRAYSCALE = ColorSpace.GRAY
    RGB = ColorSpace.RGB
    CMYK = ColorSpace.CMYK

    @property
    def space(self) -> ColorSpace:
        return self.value

    @property
    def num_channels(self) -> int:
        return _mode_channels[self]


_mode_channels = {
    ColorMode.BITMAP: 1,
    ColorMode.GRAYSCALE: 1,
    ColorMode.RGB: 3,
    ColorMode.CMYK: 4,
}


class DrawMode(_CanonicalEnum):
    STROKE = "stroke"
    FILL = "fill"
    CLIP = "clip"


_default_members = {
    ColorMode: ColorMode.RGB,
    DrawMode: DrawMode.STROKE,
}
