"""
RGB <-> HSB (hue, saturation, brightness; also known as HSV).

Implements A. R. Smith's 1978 hexcone transform, the same algorithm behind
AWT's ``Color.RGBtoHSB``/``Color.HSBtoRGB``. All three HSB components are
unit floats; hue is a fraction of a full turn in ``[0, 1)``.
"""
import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray
from .numbers import clamp01, clamp_component, np_clamp
from ..types.constants import MAX_COMPONENT

HSBTuple = Tuple[float, float, float]


def rgb_to_hsb(r: float, g: float, b: float) -> HSBTuple:
    """
    Convert 0-255 RGB to unit HSB.

    Channels outside 0-255 are clamped first; NaN counts as 0.

    Returns:
        (hue, saturation, brightness), each in [0, 1]
    """
    r, g, b = clamp_component(r), clamp_component(g), clamp_component(b)

    cmax = max(r, g, b)
    cmin = min(r, g, b)

    brightness = cmax / MAX_COMPONENT
    saturation = (cmax - cmin) / cmax if cmax != 0 else 0.0

    if saturation == 0:
        return 0.0, saturation, brightness

    span = cmax - cmin
    redc = (cmax - r) / span
    greenc = (cmax - g) / span
    bluec = (cmax - b) / span
    if r == cmax:
        hue = bluec - greenc
    elif g == cmax:
        hue = 2.0 + redc - bluec
    else:
        hue = 4.0 + greenc - redc
    hue /= 6.0
    if hue < 0:
        hue += 1.0
    return hue, saturation, brightness


def unit_rgb_to_hsb(r: float, g: float, b: float) -> HSBTuple:
    """Convert unit RGB (0..1) to unit HSB."""
    return rgb_to_hsb(r * MAX_COMPONENT, g * MAX_COMPONENT, b * MAX_COMPONENT)


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> Tuple[int, int, int]:
    """
    Convert unit HSB to 0-255 RGB.

    Hue wraps around (only its fractional part is used) and a non-finite hue
    reads as 0. Saturation and brightness are clamped to [0, 1].
    """
    saturation = clamp01(saturation)
    brightness = clamp01(brightness)
    if not math.isfinite(hue):
        hue = 0.0

    if saturation == 0:
        v = int(brightness * MAX_COMPONENT + 0.5)
        return v, v, v

    h = (hue - math.floor(hue)) * 6.0
    f = h - math.floor(h)
    p = brightness * (1.0 - saturation)
    q = brightness * (1.0 - saturation * f)
    t = brightness * (1.0 - saturation * (1.0 - f))

    sector = int(h)
    if sector == 0:
        rgb = (brightness, t, p)
    elif sector == 1:
        rgb = (q, brightness, p)
    elif sector == 2:
        rgb = (p, brightness, t)
    elif sector == 3:
        rgb = (p, q, brightness)
    elif sector == 4:
        rgb = (t, p, brightness)
    else:
        rgb = (brightness, p, q)
    r, g, b = (int(c * MAX_COMPONENT + 0.5) for c in rgb)
    return r, g, b


def np_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: 0-255 RGB to unit HSB.

    Returns:
        array of shape (..., 3): (hue, saturation, brightness)
    """
    r = np_clamp(r, MAX_COMPONENT)
    g = np_clamp(g, MAX_COMPONENT)
    b = np_clamp(b, MAX_COMPONENT)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    span = cmax - cmin

    brightness = cmax / MAX_COMPONENT
    saturation = np.divide(span, cmax, out=np.zeros(out_shape), where=cmax != 0)

    chromatic = span != 0
    safe_span = np.where(chromatic, span, 1.0)
    redc = (cmax - r) / safe_span
    greenc = (cmax - g) / safe_span
    bluec = (cmax - b) / safe_span

    hue = np.where(
        r == cmax,
        bluec - greenc,
        np.where(g == cmax, 2.0 + redc - bluec, 4.0 + greenc - redc),
    ) / 6.0
    hue = np.where(hue < 0, hue + 1.0, hue)
    hue = np.where(chromatic, hue, 0.0)

    return np.stack([hue, saturation, brightness], axis=-1)


def np_hsb_to_rgb(hue: NDArray, saturation: NDArray, brightness: NDArray) -> NDArray:
    """
    Vectorized: unit HSB to 0-255 RGB.

    Returns:
        int array of shape (..., 3)
    """
    hue = np.asarray(hue, dtype=float)
    hue = np.where(np.isfinite(hue), hue, 0.0)
    s = np_clamp(saturation)
    v = np_clamp(brightness)

    out_shape = np.broadcast(hue, s, v).shape
    hue = np.broadcast_to(hue, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    h = (hue - np.floor(hue)) * 6.0
    f = h - np.floor(h)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    sector = np.minimum(h.astype(int), 5)
    choices_r = [v, q, p, p, t, v]
    choices_g = [t, v, v, q, p, p]
    choices_b = [p, p, t, v, v, q]
    r = np.choose(sector, choices_r)
    g = np.choose(sector, choices_g)
    b = np.choose(sector, choices_b)

    rgb = np.stack([r, g, b], axis=-1)
    # zero saturation is gray at the brightness level
    gray = np.stack([v, v, v], axis=-1)
    rgb = np.where((s == 0)[..., None], gray, rgb)
    return (rgb * MAX_COMPONENT + 0.5).astype(int)
