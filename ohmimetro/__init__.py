"""Resistance meter logic: E24 rounding, colour bands, SSD1306 frame buffer and LED matrix frames."""

__version__ = "0.1.0"

__all__ = ["font", "ssd1306", "leds", "ohmmeter"]