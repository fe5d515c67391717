"""Colour values and their conversion to concrete RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

ErrorReporter = Callable[[Exception], None]


def _print_error(err: Exception) -> None:
    print(f"ERROR: {err}")


_reporter: ErrorReporter = _print_error


def set_color_error_reporter(reporter: ErrorReporter | None) -> None:
    """Set the callable that receives colour conversion errors.

    Passing ``None`` keeps the current reporter.
    """
    global _reporter
    if reporter is not None:
        _reporter = reporter


def _check_channel(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0-255, got {value!r}")


@dataclass(frozen=True)
class RGBA:
    """An 8-bit-per-channel colour with alpha."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))


WHITE = RGBA(255, 255, 255, 255)
BLACK = RGBA(0, 0, 0, 255)


@dataclass(frozen=True)
class ColorValue:
    """A colour given either as an ``RGBA`` or as a grey level 0-255."""

    value: Any


def color_from(c: Any) -> ColorValue:
    """Wrap a concrete colour in a ``ColorValue``."""
    return ColorValue(c)


def gray_from(gray: int) -> ColorValue:
    """Make a grey ``ColorValue`` from a level 0-255."""
    _check_channel("gray", gray)
    return ColorValue(gray)


def parse_color_value(c: ColorValue) -> RGBA:
    """Resolve a ``ColorValue`` to an ``RGBA``.

    Invalid values are reported to the colour error reporter and
    resolve to white.
    """
    value = c.value
    if isinstance(value, RGBA):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value <= 255:
            return RGBA(value, value, value, 255)
        _reporter(ValueError(f"int colour value out of range: {value} - must be within 0-255"))
        return WHITE
    _reporter(TypeError(f"invalid colour type inside ColorValue: {type(value).__name__}"))
    return WHITE


def rgb(r: int, g: int, b: int) -> ColorValue:
    """An opaque colour from red, green and blue levels."""
    return ColorValue(RGBA(r, g, b, 255))


def rgba(r: int, g: int, b: int, a: int) -> ColorValue:
    """A colour from red, green, blue and alpha levels."""
    return ColorValue(RGBA(r, g, b, a))


def color(gray: int) -> ColorValue:
    """An opaque grey: 0 is black, 255 is white."""
    _check_channel("gray", gray)
    return ColorValue(gray)


def color_a(gray: int, a: int) -> ColorValue:
    """A grey with the given alpha."""
    return ColorValue(RGBA(gray, gray, gray, a))