from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, Union, cast

from ..conversions import convert
from ..types.color_types import ColorElement, ColorSpace
from ..types.format_type import FormatType, format_classes


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    maxima:      ClassVar[Tuple[float, ...]]
    format_type: ClassVar[FormatType]
    strict_range: ClassVar[bool] = False
    # def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorBase, ColorElement]) -> None:
        # ---- Handle ColorBase / hex input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                value = convert(value.value, value.mode, self.mode)
            else:
                value = value.value
        elif isinstance(value, str):
            value = convert(value, "hex", self.mode)

        values = tuple(cast(Tuple[Any, ...], value))
        if len(values) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {len(values)}"
            )

        # type enforcement
        cast_type = format_classes[self.format_type]
        values = tuple(cast_type(v) for v in values)

        if self.strict_range:
            for v, m in zip(values, self.maxima):
                if not 0 <= v <= m:
                    raise ValueError(f"{self.mode} channel {v!r} outside [0, {m}]")

        # safe assignment; __setattr__ still allows it during init
        self._value = values

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        return self._value

    @property
    def hex(self) -> str:
        return cast(str, convert(self._value, self.mode, "hex"))

    @classmethod
    def from_hex(cls, hex_color: str) -> ColorBase:
        return cls(hex_color)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
