from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Self, Callable, Union
from ..conversions import convert, np_convert
from ..types.format_type import FormatType, format_classes, format_valid_dtypes, default_format_dtypes
from ..types.color_types import ColorElement, ColorValue, ColorSpace, HexTokens, Scalar, ScalarVector, ALPHA_SPACES
from ..utils import get_dimension
from abc import ABC
from numpy import ndarray
import numpy as np


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[ColorSpace]
    _type:      ClassVar[type]
    maxima:     ClassVar[ColorElement]
    null_value: ClassVar[ColorElement]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)
    convert: Callable[..., ColorBase]
    with_alpha: Callable[[ColorBase, Union[Scalar, ndarray]], ColorBase]
    to_hex: Callable[..., HexTokens]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        maxima_dim = get_dimension(self.maxima)

        if self.num_channels != maxima_dim:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        is_array = isinstance(value, ndarray)

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            input_is_array = isinstance(value.value, ndarray)

            if value.mode == self.mode and value.format_type == self.format_type:
                value = value.value
                is_array = input_is_array
            elif input_is_array:
                value = np_convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )
                is_array = True
            else:
                value = convert(
                    color=value.value,
                    from_space=value.mode,
                    to_space=self.mode,
                    input_type=value.format_type,
                    output_type=self.format_type,
                )
                is_array = False

        # ---- Handle array input ----
        if is_array:
            arr = cast(ndarray, value)

            valid_types = format_valid_dtypes[self.format_type]
            if not isinstance(arr.dtype.type(0), valid_types):
                raise TypeError(
                    f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                    f"got {arr.dtype}"
                )

            if arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.mode} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )

            # Clamp values to maxima
            arr = np.clip(arr, 0, np.array(self.maxima))

            target_dtype = default_format_dtypes[self.format_type]
            if arr.dtype != target_dtype:
                arr = arr.astype(target_dtype)

            value = self._coerce_array(arr)

        # ---- Handle scalar/tuple input ----
        else:
            value_dim = get_dimension(value)
            if maxima_dim != value_dim:
                raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value")

            # type enforcement
            if isinstance(self.maxima, tuple):
                value = tuple(
                    format_classes[self.format_type](v) for v in cast(Tuple[Any, ...], value)
                )
                value = tuple(
                    max(0, min(v, m)) for v, m in zip(value, cast(Tuple[Scalar, ...], self.maxima))
                )
            else:
                value = format_classes[self.format_type](value)
                value = max(0, min(value, self.maxima))

            value = self._coerce_scalar(value)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ HOOKS ------------------
    def _coerce_scalar(self, value: ColorElement) -> ColorElement:
        """Final adjustment of a clamped scalar/tuple value."""
        return value

    def _coerce_array(self, arr: ndarray) -> ndarray:
        """Final adjustment of a clamped array value."""
        return arr

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    num_channels: ClassVar[int]
    maxima: ClassVar[ColorElement]
    mode: ClassVar[ColorSpace]
    value: ColorValue
    is_array: bool

    alpha_index: ClassVar[int] = -1

    @property
    def alpha_max(self) -> Scalar:
        return cast(Tuple[Scalar, ...], self.maxima)[self.alpha_index]

    @property
    def alpha(self) -> Union[Scalar, ndarray]:
        """
        Get alpha channel value.

        Returns:
            Scalar if value is a tuple, ndarray if value is an array.
        """
        if isinstance(self.value, ndarray):
            return self.value[..., self.alpha_index]
        return cast(Tuple[Scalar, ...], self.value)[self.alpha_index]

    def with_alpha(self, alpha: Union[Scalar, ndarray]) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value(s). Can be scalar or array matching shape.
        """
        if isinstance(self.value, ndarray):
            if isinstance(alpha, ndarray) and alpha.shape != self.value.shape[:-1]:
                raise ValueError(
                    f"Alpha shape {alpha.shape} doesn't match color shape {self.value.shape[:-1]}"
                )
            a = np.broadcast_to(np.clip(alpha, 0, self.alpha_max), self.value.shape[:-1])
            new_vals = np.concatenate([
                self.value[..., :-1],
                np.expand_dims(a, axis=-1).astype(self.value.dtype)
            ], axis=-1)
        else:
            if isinstance(alpha, ndarray):
                raise TypeError("Cannot use array alpha with scalar color value")
            a = max(0, min(alpha, self.alpha_max))
            values = cast(ScalarVector, self.value)
            new_vals = values[:-1] + (a,)

        return self.__class__(new_vals)  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
