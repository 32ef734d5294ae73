"""Frames and colour handling for a 5x5 WS2812B LED matrix."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Sequence

PIXELS = 25
SIZE = 5
LED_PIN = 7


@dataclass(frozen=True)
class Pixel:
    """One RGB LED value, each channel 0-255."""

    red: int = 0
    green: int = 0
    blue: int = 0


BLACK_PIXEL = Pixel(0, 0, 0)

Frame = tuple[Pixel, ...]


class Direction(IntEnum):
    """Compass directions an arrow can point to."""

    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7


_COLOR_LABELS = (
    "Preto",
    "Marrom",
    "Vermelho",
    "Laranja",
    "Amarelo",
    "Verde",
    "Azul",
    "Violeta",
    "Cinza",
    "Branco",
)


class Color(IntEnum):
    """Resistor colour-code colours; the value is the digit they stand for."""

    BLACK = 0
    BROWN = 1
    RED = 2
    ORANGE = 3
    YELLOW = 4
    GREEN = 5
    BLUE = 6
    VIOLET = 7
    GRAY = 8
    WHITE = 9

    @property
    def label(self) -> str:
        """The colour's display name."""
        return _COLOR_LABELS[self.value]


_COLOR_PIXELS = {
    Color.BLACK: Pixel(0, 0, 0),
    Color.BROWN: Pixel(165, 25, 0),
    Color.RED: Pixel(255, 0, 0),
    Color.ORANGE: Pixel(205, 43, 0),
    Color.YELLOW: Pixel(255, 255, 0),
    Color.GREEN: Pixel(0, 255, 0),
    Color.BLUE: Pixel(0, 0, 255),
    Color.VIOLET: Pixel(121, 8, 205),
    Color.GRAY: Pixel(55, 55, 55),
    Color.WHITE: Pixel(255, 255, 255),
}

_ARROW_COLORS = {
    Color.RED: Pixel(255, 0, 0),
    Color.GREEN: Pixel(0, 255, 0),
    Color.BLUE: Pixel(0, 0, 255),
    Color.WHITE: Pixel(255, 255, 255),
}

_DIAGONAL_RIGHT = (
    "....#",
    ".#...",
    "#.#..",
    "...##",
    "###..",
)

_DIAGONAL_LEFT = (
    "#....",
    "...#.",
    "..#.#",
    "##...",
    "..###",
)

_REGULAR_ARROW = (
    "..#..",
    "..#..",
    "#.#.#",
    ".###.",
    "..#..",
)

_ARROW_INTENSITY = 0.125
_LINE_INTENSITY = 0.05
_TEST_INTENSITY = 0.5
_TEST_DELAY_MS = 50


def _check_frame(frame: Sequence[Pixel]) -> Frame:
    pixels = tuple(frame)
    if len(pixels) != PIXELS:
        raise ValueError(f"a frame holds {PIXELS} pixels, got {len(pixels)}")
    return pixels


def _pattern(rows: Iterable[str], lit: Pixel) -> Frame:
    return tuple(lit if mark == "#" else BLACK_PIXEL for row in rows for mark in row)


def matrix_rgb(r: int, g: int, b: int, intensity: float) -> int:
    """Scale a colour by ``intensity`` and pack it as a GRB word for the LEDs."""
    red = int(r * intensity) & 0xFF
    green = int(g * intensity) & 0xFF
    blue = int(b * intensity) & 0xFF
    return ((green << 24) | (red << 16) | (blue << 8)) & 0xFFFFFFFF


def encode_frame(frame: Sequence[Pixel], intensity: float) -> list[int]:
    """Return the words to shift out for every pixel of ``frame``."""
    return [matrix_rgb(p.red, p.green, p.blue, intensity) for p in _check_frame(frame)]


def rotate_frame(frame: Sequence[Pixel], rotations: int) -> Frame:
    """Rotate a frame clockwise by 90 degrees ``rotations`` times."""
    current = _check_frame(frame)
    for _ in range(rotations % 4):
        result: list[Pixel] = [BLACK_PIXEL] * PIXELS
        for index, value in enumerate(current):
            row, col = divmod(index, SIZE)
            result[col * SIZE + (SIZE - 1 - row)] = value
        current = tuple(result)
    return current


def color_pixel(color: Color) -> Pixel:
    """The LED colour used to show a colour-code colour."""
    return _COLOR_PIXELS.get(color, BLACK_PIXEL)


def arrow_frame(direction: Direction, color: Color) -> Frame:
    """A frame with an arrow pointing to ``direction``.

    Only red, green, blue and white are available; other colours show red.
    """
    lit = _ARROW_COLORS.get(color, Pixel(255, 0, 0))
    straight_turns = {
        Direction.NORTH: 0,
        Direction.SOUTH: 2,
        Direction.EAST: 3,
        Direction.WEST: 1,
    }
    if direction in straight_turns:
        return rotate_frame(_pattern(_REGULAR_ARROW, lit), straight_turns[direction])
    if direction in (Direction.SOUTHEAST, Direction.NORTHWEST):
        frame = _pattern(_DIAGONAL_LEFT, lit)
        return rotate_frame(frame, 2) if direction == Direction.SOUTHEAST else frame
    frame = _pattern(_DIAGONAL_RIGHT, lit)
    return rotate_frame(frame, 2) if direction == Direction.SOUTHWEST else frame


def line_frame(colors: Sequence[Color]) -> Frame:
    """A frame whose first three rows show the three given colours."""
    colors = tuple(colors)
    if len(colors) != 3:
        raise ValueError(f"expected three colours, got {len(colors)}")
    pixels = [color_pixel(color) for color in colors]
    return tuple(
        pixels[row] if row < 3 else BLACK_PIXEL
        for row in range(SIZE)
        for _ in range(SIZE)
    )


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class LedMatrix:
    """A 5x5 LED matrix fed one word at a time through ``put``."""

    def __init__(
        self,
        put: Callable[[int], object],
        sleep: Callable[[int], object] | None = None,
    ) -> None:
        self._put = put
        self._sleep = sleep if sleep is not None else _sleep_ms

    def draw(self, frame: Sequence[Pixel], intensity: float) -> None:
        """Send a whole frame at the given intensity."""
        for word in encode_frame(frame, intensity):
            self._put(word)

    def test_pattern(self) -> None:
        """Light the pixels red one by one, then clear the matrix."""
        red = Pixel(255, 0, 0)
        pixels = [BLACK_PIXEL] * PIXELS
        for index in range(PIXELS):
            pixels[index] = red
            self.draw(pixels, _TEST_INTENSITY)
            self._sleep(_TEST_DELAY_MS)
        self.draw([BLACK_PIXEL] * PIXELS, 1)
        self._sleep(_TEST_DELAY_MS)

    def draw_arrow(self, direction: Direction, color: Color) -> None:
        """Show an arrow pointing to ``direction``."""
        self.draw(arrow_frame(direction, color), _ARROW_INTENSITY)

    def draw_line(self, colors: Sequence[Color]) -> None:
        """Show three colour-code colours as three rows."""
        self.draw(line_frame(colors), _LINE_INTENSITY)