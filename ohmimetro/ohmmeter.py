"""Resistance measurement with a voltage divider, E24 rounding and colour bands."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from .leds import Color, LedMatrix
from .ssd1306 import SSD1306

KNOWN_RESISTANCE = 10000
ADC_RESOLUTION = 4095
SAMPLES = 500
MIN_RESISTANCE = 10
MAX_RESISTANCE = 990000
OUT_OF_RANGE = "Fora alcance"

# E24 series in tenths: 1.0, 1.1, ... 9.1
_E24_TENTHS = (
    10, 11, 12, 13, 15, 16, 18, 20,
    22, 24, 27, 30, 33, 36, 39, 43,
    47, 51, 56, 62, 68, 75, 82, 91,
)
_TOLERANCE = 0.05

_SAMPLE_DELAY_MS = 1
_SUMMARY_DELAY_MS = 500
_CODE_DELAY_MS = 700


def _e24_decade(tenths: int, exponent: int) -> float:
    """The E24 value ``tenths / 10 * 10**exponent`` without rounding drift."""
    if exponent >= 1:
        return float(tenths * 10 ** (exponent - 1))
    return tenths / 10 ** (1 - exponent)


def approximate_e24(value: float) -> float:
    """Snap ``value`` to the nearest E24 value within 5 %.

    The decade holding ``value`` and the one above it are searched. When no
    E24 value lies within tolerance, ``value`` is returned unchanged.
    """
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"resistance must be a positive finite number, got {value!r}")

    exponent = 0
    while value / 10.0 ** exponent >= 10.0:
        exponent += 1
    while value / 10.0 ** exponent < 1.0:
        exponent -= 1

    best = value
    smallest = math.inf
    for decade in (exponent, exponent + 1):
        for tenths in _E24_TENTHS:
            candidate = _e24_decade(tenths, decade)
            low = candidate * (1 - _TOLERANCE)
            high = candidate * (1 + _TOLERANCE)
            if low <= value <= high:
                difference = abs(value - candidate)
                if difference < smallest:
                    smallest = difference
                    best = candidate
    return best


@dataclass(frozen=True)
class ColorCode:
    """The three colour bands of a resistor, or ``None`` when out of range."""

    bands: tuple[Color, Color, Color] | None

    @property
    def in_range(self) -> bool:
        """Whether the resistance could be expressed in three bands."""
        return self.bands is not None

    @property
    def lines(self) -> tuple[str, str, str]:
        """The three lines shown on the display."""
        if self.bands is None:
            return (OUT_OF_RANGE, "", "")
        first, second, multiplier = self.bands
        return (first.label, second.label, multiplier.label)


def color_code(resistance: float) -> ColorCode:
    """Colour bands (two digits and a multiplier) for ``resistance`` in ohms."""
    if not math.isfinite(resistance):
        return ColorCode(None)
    value = int(resistance)
    if value < MIN_RESISTANCE or value > MAX_RESISTANCE:
        return ColorCode(None)
    power = 0
    while value >= 100:
        value //= 10
        power += 1
    first, second = divmod(value, 10)
    return ColorCode((Color(first), Color(second), Color(power)))


def resistance_from_adc(
    mean: float,
    known: float = KNOWN_RESISTANCE,
    resolution: float = ADC_RESOLUTION,
) -> float:
    """Unknown resistance from the mean ADC reading across it in a divider."""
    if mean >= resolution:
        raise ValueError(f"ADC reading {mean} at full scale {resolution}: open circuit")
    return known * mean / (resolution - mean)


@dataclass(frozen=True)
class Reading:
    """One measurement: mean ADC count, raw and E24 resistance, colour bands."""

    mean: float
    resistance: float
    approximate: float
    code: ColorCode


def _reading(mean: float, known: float, resolution: float) -> Reading:
    try:
        resistance = resistance_from_adc(mean, known, resolution)
    except ValueError:
        resistance = math.inf
    if math.isfinite(resistance) and resistance > 0:
        approximate = approximate_e24(resistance)
    else:
        approximate = resistance
    return Reading(mean, resistance, approximate, color_code(approximate))


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000)


class Ohmmeter:
    """Reads the divider, shows the result on the display and the LED matrix."""

    def __init__(
        self,
        read_adc: Callable[[], float],
        display: SSD1306,
        matrix: LedMatrix,
        sleep: Callable[[int], object] | None = None,
        known_resistance: float = KNOWN_RESISTANCE,
        resolution: float = ADC_RESOLUTION,
        samples: int = SAMPLES,
    ) -> None:
        if samples < 1:
            raise ValueError(f"at least one sample is needed, got {samples}")
        self._read_adc = read_adc
        self.display = display
        self.matrix = matrix
        self._sleep = sleep if sleep is not None else _sleep_ms
        self.known_resistance = known_resistance
        self.resolution = resolution
        self.samples = samples

    def _sample(self) -> float:
        value = self._read_adc()
        self._sleep(_SAMPLE_DELAY_MS)
        return value

    def measure(self) -> Reading:
        """Average the ADC samples and derive the resistance from them."""
        total = sum(self._sample() for _ in range(self.samples))
        mean = total / self.samples
        return _reading(mean, self.known_resistance, self.resolution)

    def render(self, reading: Reading) -> None:
        """Show the summary screen, then the colour band names."""
        display = self.display
        lit = True
        display.fill(not lit)
        display.rect(3, 3, 122, 60, lit, not lit)
        display.line(3, 25, 123, 25, lit)
        display.line(3, 37, 123, 37, lit)
        display.draw_string("CEPEDI   TIC37", 8, 6)
        display.draw_string("EMBARCATECH", 20, 16)
        display.draw_string("  Ohmimetro", 10, 28)
        display.draw_string("ADC", 13, 41)
        display.draw_string("Resisten.", 50, 41)
        display.line(44, 37, 44, 60, lit)
        display.draw_string(f"{reading.mean:1.0f}", 8, 52)
        display.draw_string(f"{reading.approximate:1.0f}", 59, 52)
        display.send_data()
        self._sleep(_SUMMARY_DELAY_MS)

        display.fill(not lit)
        for row, text in enumerate(reading.code.lines):
            display.draw_string(text, 8, 8 + 8 * row)
        display.send_data()
        self._sleep(_CODE_DELAY_MS)

    def step(self) -> Reading:
        """Take one measurement and show it everywhere."""
        reading = self.measure()
        if reading.code.bands is not None:
            self.matrix.draw_line(reading.code.bands)
        self.render(reading)
        return reading


def main(argv: Sequence[str] | None = None) -> int:
    """Report resistance and colour bands for mean ADC readings given on the command line."""
    parser = argparse.ArgumentParser(
        prog="ohmimetro",
        description="Resistance, E24 value and colour bands from mean ADC readings.",
    )
    parser.add_argument("adc", type=float, nargs="+", help="mean ADC reading")
    parser.add_argument("--known", type=float, default=KNOWN_RESISTANCE,
                        help="known divider resistance in ohms")
    parser.add_argument("--resolution", type=float, default=ADC_RESOLUTION,
                        help="ADC full-scale count")
    args = parser.parse_args(argv)

    for mean in args.adc:
        reading = _reading(mean, args.known, args.resolution)
        bands = " ".join(line for line in reading.code.lines if line)
        print(f"resultado: {reading.resistance:f}")
        print(f"ADC {reading.mean:.0f}  R {reading.approximate:.0f}  {bands}")
    return 0