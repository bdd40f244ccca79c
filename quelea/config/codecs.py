"""
Value codecs for Quelea properties.

Every property is stored as a string. These functions convert between
those strings and the richer types the application works with.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

INT_PATTERN = re.compile(r'[+-]?[0-9]+')


class ConfigDecodeError(ValueError):
    """Raised when a stored property value cannot be decoded."""

    def __init__(self, message: str, value: str, key: Optional[str] = None):
        self.value = value
        self.key = key
        if key is not None:
            message = f"{key}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class Rectangle:
    """Screen rectangle in pixels."""

    x: int
    y: int
    width: int
    height: int

    def to_qrect(self):
        """Convert to a PySide6 QRect."""
        from PySide6.QtCore import QRect
        return QRect(self.x, self.y, self.width, self.height)

    @classmethod
    def from_qrect(cls, rect) -> "Rectangle":
        """Build from a PySide6 QRect."""
        return cls(rect.x(), rect.y(), rect.width(), rect.height())


@dataclass(frozen=True)
class Color:
    """RGB colour, each channel in the range 0-255."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for channel in ("red", "green", "blue"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise ValueError(f"Color {channel} out of range: {value}")

    def to_qcolor(self):
        """Convert to a PySide6 QColor."""
        from PySide6.QtGui import QColor
        return QColor(self.red, self.green, self.blue)

    @classmethod
    def from_qcolor(cls, color) -> "Color":
        """Build from a PySide6 QColor."""
        return cls(color.red(), color.green(), color.blue())


# ---------------------------------------------------------------------------
# Integer / boolean
# ---------------------------------------------------------------------------

def decode_int(value: str) -> int:
    """
    Parse a decimal integer.

    Raises:
        ConfigDecodeError: If value is not a plain decimal integer
    """
    if not INT_PATTERN.fullmatch(value):
        raise ConfigDecodeError(f"not a decimal integer: {value!r}", value)
    return int(value)


def encode_int(value: int) -> str:
    return str(int(value))


def decode_bool(value: str) -> bool:
    """Anything other than a case-insensitive "true" is False."""
    return value.lower() == "true"


def encode_bool(value: bool) -> str:
    return "true" if value else "false"


# ---------------------------------------------------------------------------
# Structured values
# ---------------------------------------------------------------------------

def _split_fields(text: str) -> List[str]:
    # Trailing empty fields are dropped, so "0,0,800,600," still has four
    tokens = text.split(",")
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    return tokens


def _decode_ints(value: str, tokens: List[str], count: int, kind: str) -> List[int]:
    if len(tokens) != count:
        raise ConfigDecodeError(
            f"{kind} needs {count} comma separated values, got {len(tokens)}",
            value,
        )
    try:
        return [decode_int(token) for token in tokens]
    except ConfigDecodeError as e:
        raise ConfigDecodeError(f"bad {kind} value {value!r} ({e})", value) from e


def decode_rectangle(value: str) -> Rectangle:
    """
    Parse "x,y,width,height".

    Raises:
        ConfigDecodeError: On wrong token count or non-numeric tokens
    """
    x, y, width, height = _decode_ints(
        value, _split_fields(value.strip()), 4, "rectangle"
    )
    return Rectangle(x, y, width, height)


def encode_rectangle(rect: Rectangle) -> str:
    return f"{rect.x},{rect.y},{rect.width},{rect.height}"


def decode_color(value: str) -> Color:
    """
    Parse "red,green,blue"; whitespace around each channel is ignored.

    Raises:
        ConfigDecodeError: On wrong token count, non-numeric tokens, or a
            channel outside 0-255
    """
    tokens = [token.strip() for token in _split_fields(value)]
    red, green, blue = _decode_ints(value, tokens, 3, "color")
    try:
        return Color(red, green, blue)
    except ValueError as e:
        raise ConfigDecodeError(str(e), value) from e


def encode_color(color: Color) -> str:
    return f"{color.red},{color.green},{color.blue}"


def decode_string_list(value: str) -> List[str]:
    # No escaping: items can't contain commas. "" decodes to [""].
    return value.split(",")


def encode_string_list(items: List[str]) -> str:
    return ",".join(items)
