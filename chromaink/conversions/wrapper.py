import numpy as np
from typing import Callable, Dict, Tuple, Union, cast

from ..types.format_type import FormatType, max_value
from ..types.color_types import ColorElement, ColorSpace, ALPHA_SPACES, base_space, element_to_array
from ..types.constants import NUMBER_OF_RGB_COMPONENTS, NUMBER_OF_HSB_COMPONENTS, NUMBER_OF_CMYK_COMPONENTS

from .numbers import int_to_unit, unit_to_int
from .to_gray import rgb_to_gray, rgb_to_bitmap, np_rgb_to_gray, np_rgb_to_bitmap
from .to_cmyk import rgb_to_cmyk, cmyk_to_rgb, np_rgb_to_cmyk, np_cmyk_to_rgb
from .to_hsb import unit_rgb_to_hsb, hsb_to_rgb, np_rgb_to_hsb, np_hsb_to_rgb

SpaceLike = Union[ColorSpace, str]

# Spaces other than RGB only exist as unit floats.
FLOAT_ONLY_SPACES = {ColorSpace.GRAY, ColorSpace.BITMAP, ColorSpace.CMYK, ColorSpace.HSB}

SPACE_CHANNELS: Dict[ColorSpace, int] = {
    ColorSpace.RGB: NUMBER_OF_RGB_COMPONENTS,
    ColorSpace.GRAY: 1,
    ColorSpace.BITMAP: 1,
    ColorSpace.CMYK: NUMBER_OF_CMYK_COMPONENTS,
    ColorSpace.HSB: NUMBER_OF_HSB_COMPONENTS,
}


def _hsb_to_unit_rgb(h: float, s: float, b: float) -> Tuple[float, ...]:
    return tuple(int_to_unit(c) for c in hsb_to_rgb(h, s, b))


# Scalar conversions on unit-float channels.
CONVERT_SCALAR: Dict[Tuple[ColorSpace, ColorSpace], Callable[..., Tuple[float, ...]]] = {
    (ColorSpace.RGB, ColorSpace.GRAY): lambda r, g, b: (rgb_to_gray(r, g, b),),
    (ColorSpace.RGB, ColorSpace.BITMAP): lambda r, g, b: (rgb_to_bitmap(r, g, b),),
    (ColorSpace.RGB, ColorSpace.CMYK): rgb_to_cmyk,
    (ColorSpace.RGB, ColorSpace.HSB): unit_rgb_to_hsb,
    (ColorSpace.GRAY, ColorSpace.RGB): lambda v: (v, v, v),
    (ColorSpace.BITMAP, ColorSpace.RGB): lambda v: (v, v, v),
    (ColorSpace.CMYK, ColorSpace.RGB): cmyk_to_rgb,
    (ColorSpace.HSB, ColorSpace.RGB): _hsb_to_unit_rgb,
}

# Vectorized conversions on unit-float channel arrays; outputs are (..., n).
CONVERT_NUMPY: Dict[Tuple[ColorSpace, ColorSpace], Callable[..., np.ndarray]] = {
    (ColorSpace.RGB, ColorSpace.GRAY): lambda r, g, b: np_rgb_to_gray(r, g, b)[..., None],
    (ColorSpace.RGB, ColorSpace.BITMAP): lambda r, g, b: np_rgb_to_bitmap(r, g, b)[..., None],
    (ColorSpace.RGB, ColorSpace.CMYK): np_rgb_to_cmyk,
    (ColorSpace.RGB, ColorSpace.HSB): lambda r, g, b: np_rgb_to_hsb(r * 255, g * 255, b * 255),
    (ColorSpace.GRAY, ColorSpace.RGB): lambda v: np.stack([v, v, v], axis=-1),
    (ColorSpace.BITMAP, ColorSpace.RGB): lambda v: np.stack([v, v, v], axis=-1),
    (ColorSpace.CMYK, ColorSpace.RGB): np_cmyk_to_rgb,
    (ColorSpace.HSB, ColorSpace.RGB): lambda h, s, b: np_hsb_to_rgb(h, s, b) / 255,
}


def _check_format(space: ColorSpace, fmt: FormatType) -> None:
    if space in FLOAT_ONLY_SPACES and fmt != FormatType.FLOAT:
        raise ValueError(f"{space.value} only supports {FormatType.FLOAT.value} format, got {fmt.value}")


def _route(from_space: ColorSpace, to_space: ColorSpace) -> Tuple[Tuple[ColorSpace, ColorSpace], ...]:
    """Conversion steps from one base space to another, going through RGB if needed."""
    if from_space == to_space:
        return ()
    if (from_space, to_space) in CONVERT_SCALAR:
        return ((from_space, to_space),)
    return ((from_space, ColorSpace.RGB), (ColorSpace.RGB, to_space))


# ---------------------------------------------------------------------------
# Scalar path
# ---------------------------------------------------------------------------

def _normalize_scalar(channels: Tuple, fmt: FormatType) -> Tuple[float, ...]:
    if fmt == FormatType.INT:
        return tuple(int_to_unit(c) for c in channels)
    return tuple(float(c) for c in channels)


def _scale_scalar(channels: Tuple[float, ...], fmt: FormatType) -> Tuple:
    if fmt == FormatType.INT:
        return tuple(unit_to_int(c) for c in channels)
    return tuple(channels)


def convert(
    color: ColorElement,
    from_space: SpaceLike,
    to_space: SpaceLike,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    """
    Convert a single color between spaces and formats.

    Args:
        color: Channel tuple, or a bare float for single-channel spaces
        from_space: Source space ("rgb", "rgba", "gray", "bitmap", "cmyk", "hsb")
        to_space: Target space
        input_type: Format of ``color``; must be FLOAT for non-RGB spaces
        output_type: Format of the result; must be FLOAT for non-RGB spaces

    Returns:
        Channel tuple, or a bare float when the target space has one channel
    """
    input_type, output_type = FormatType(input_type), FormatType(output_type)
    fs, ts = base_space(from_space), base_space(to_space)
    has_alpha_in = ColorSpace(from_space.lower()) in ALPHA_SPACES
    has_alpha_out = ColorSpace(to_space.lower()) in ALPHA_SPACES
    _check_format(fs, input_type)
    _check_format(ts, output_type)

    channels = tuple(color) if isinstance(color, (tuple, list)) else (color,)
    expected = SPACE_CHANNELS[fs] + (1 if has_alpha_in else 0)
    if len(channels) != expected:
        raise ValueError(f"{from_space} expects {expected} channels, got {len(channels)}")

    alpha = channels[-1] if has_alpha_in else None
    base = _normalize_scalar(channels[:SPACE_CHANNELS[fs]], input_type)

    for step in _route(fs, ts):
        base = CONVERT_SCALAR[step](*base)

    out = _scale_scalar(base, output_type)

    if has_alpha_out:
        if alpha is None:
            new_alpha = max_value[output_type]
        else:
            new_alpha = _scale_scalar(_normalize_scalar((alpha,), input_type), output_type)[0]
        return out + (new_alpha,)

    return out[0] if len(out) == 1 else out


# ---------------------------------------------------------------------------
# Vectorized path
# ---------------------------------------------------------------------------

def normalize(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    return color / max_value[fmt]


def scale(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    if fmt == FormatType.INT:
        return np.clip(np.floor(color * 255 + 0.5), 0, 255).astype(int)
    return color


def np_convert(
    color: np.ndarray,
    from_space: SpaceLike,
    to_space: SpaceLike,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> np.ndarray:
    """
    Vectorized ``convert`` for arrays whose last axis holds the channels.

    Single-channel spaces keep a trailing axis of length 1.
    """
    input_type, output_type = FormatType(input_type), FormatType(output_type)
    fs, ts = base_space(from_space), base_space(to_space)
    has_alpha_in = ColorSpace(from_space.lower()) in ALPHA_SPACES
    has_alpha_out = ColorSpace(to_space.lower()) in ALPHA_SPACES
    _check_format(fs, input_type)
    _check_format(ts, output_type)

    color = np.asarray(element_to_array(color), dtype=float)
    n = SPACE_CHANNELS[fs]
    expected = n + (1 if has_alpha_in else 0)
    if color.shape[-1] != expected:
        raise ValueError(f"{from_space} expects last dimension {expected}, got shape {color.shape}")

    alpha = color[..., -1] if has_alpha_in else None
    base = normalize(color[..., :n], input_type)

    for step in _route(fs, ts):
        base = CONVERT_NUMPY[step](*(base[..., i] for i in range(base.shape[-1])))

    out = scale(base, output_type)

    if has_alpha_out:
        if alpha is None:
            alpha_array = np.full(out.shape[:-1] + (1,), max_value[output_type])
        else:
            alpha_array = scale(normalize(alpha, input_type), output_type)[..., None]
        return np.concatenate([out, alpha_array], axis=-1)

    return cast(np.ndarray, out)
