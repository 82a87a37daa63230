from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterator, Tuple

LOGGER = logging.getLogger("rgbcolour")

UINT32_MAX = 0xFFFFFFFF

PALETTE: Dict[str, int] = {
    "WHITE": 0xFFFFFF,
    "BLACK": 0x000000,
    "AQUA": 0x1ABC9C,
    "GREEN": 0x57F287,
    "BLUE": 0x3498DB,
    "YELLOW": 0xFEE75C,
    "PURPLE": 0x9B59B6,
    "GOLD": 0xF1C40F,
    "ORANGE": 0xE67E22,
    "RED": 0xED4245,
    "GREY": 0x95A5A6,
    "NAVY": 0x34495E,
    "DARK_AQUA": 0x11806A,
    "DARK_GREEN": 0x1F8B4C,
    "DARK_BLUE": 0x206694,
    "DARK_PURPLE": 0x71368A,
    "DARK_GOLD": 0xC27C0E,
    "DARK_ORANGE": 0xA84300,
    "DARK_RED": 0x992D22,
    "DARK_GREY": 0x979C9F,
    "DARK_NAVY": 0x2C3E50,
    "LIGHT_GREY": 0xBCC0C0,
}


def _wrap(value: int) -> int:
    return value & UINT32_MAX


class _PaletteEntry:
    """Class attribute that hands out a new colour on every access."""

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __get__(self, instance: Any, owner: type) -> "Colour":
        return owner(self.value)


class Colour:
    """An RGB colour packed into an unsigned 32-bit integer.

    Red lives in bits 16-23, green in 8-15 and blue in 0-7. The top byte is
    carried along untouched but ignored by the channel accessors.

    Arithmetic works on the raw packed integer rather than per channel, so
    carries bleed from one channel into the next. Results wrap around to
    32 bits. Compound operators (``+=`` and friends) update the colour in
    place.
    """

    __slots__ = ("value",)

    # Mutable through the compound operators.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: int = 0) -> None:
        value = int(value)
        wrapped = _wrap(value)
        if wrapped != value:
            LOGGER.debug("Colour value %#x wrapped to %#010x", value, wrapped)
        self.value = wrapped

    def __repr__(self) -> str:
        return f"<Colour value={self.value:#08x}>"

    def __str__(self) -> str:
        return f"#{self.value:x}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(self.value, format_spec)

    def __int__(self) -> int:
        return int(self.value)

    def __index__(self) -> int:
        return int(self.value)

    def __iter__(self) -> Iterator[int]:
        yield self.red()
        yield self.green()
        yield self.blue()

    def __copy__(self) -> "Colour":
        return type(self)(self.value)

    def copy(self) -> "Colour":
        return self.__copy__()

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Colour":
        return cls(((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

    @classmethod
    def from_tuple(cls, rgb: Tuple[int, int, int]) -> "Colour":
        r, g, b = rgb
        return cls.from_rgb(r, g, b)

    @classmethod
    def default(cls) -> "Colour":
        return cls(0)

    @classmethod
    def random(cls) -> "Colour":
        return cls(random.randint(0, 0xFFFFFF))

    def red(self) -> int:
        """Red component (bits 16-23)."""
        return (self.value >> 16) & 0xFF

    def green(self) -> int:
        """Green component (bits 8-15)."""
        return (self.value >> 8) & 0xFF

    def blue(self) -> int:
        """Blue component (bits 0-7)."""
        return self.value & 0xFF

    def to_rgb(self) -> Tuple[int, int, int]:
        """Return ``(red, green, blue)``. The top byte is dropped."""
        return (self.red(), self.green(), self.blue())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value != other.value

    def __lt__(self, other: "Colour") -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: "Colour") -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: "Colour") -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: "Colour") -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.value >= other.value

    def __add__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        return type(self)(_wrap(self.value + other.value))

    def __sub__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        return type(self)(_wrap(self.value - other.value))

    def __mul__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        return type(self)(_wrap(self.value * other.value))

    def __floordiv__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        # ZeroDivisionError propagates
        return type(self)(self.value // other.value)

    __truediv__ = __floordiv__

    def __iadd__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        self.value = _wrap(self.value + other.value)
        return self

    def __isub__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        self.value = _wrap(self.value - other.value)
        return self

    def __imul__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        self.value = _wrap(self.value * other.value)
        return self

    def __ifloordiv__(self, other: "Colour") -> "Colour":
        if not isinstance(other, Colour):
            return NotImplemented
        self.value = self.value // other.value
        return self

    __itruediv__ = __ifloordiv__


for _name, _value in PALETTE.items():
    setattr(Colour, _name, _PaletteEntry(_value))
del _name, _value


Color = Colour
