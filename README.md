# ohmimetro

Logic for a small resistance meter. An unknown resistor sits in a voltage
divider with a known one; from the mean ADC reading across it the package
computes the resistance, snaps it to the nearest E24 value within 5 %, and
shows it on a 128x64 SSD1306 display and on a 5x5 RGB LED matrix as resistor
colour bands. Colour names are in Portuguese ("Marrom", "Preto", "Laranja",
...).

The package reaches hardware only through callables you pass in: an I2C
`write(address, data)` function for the display, a `put(word)` function for
the LED chain, an ADC reader and a `sleep(ms)` function. Everything can
therefore run and be tested on an ordinary computer.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ohmimetro.font`: the 8x8 bitmap font for printable ASCII. `glyph(char)`
  returns the eight column bytes of a character; characters outside space to
  tilde are drawn as a space, and a string that is not exactly one character
  raises `ValueError`.
- `ohmimetro.ssd1306`: `SSD1306`, a frame buffer for the display with
  `pixel`, `is_set`, `fill`, `rect`, `line`, `hline`, `vline`, `draw_char` and
  `draw_string`, and the `buffer` property holding the bytes that are sent.
  `config`, `command` and `send_data` hand bytes to the `write` callable.
  `Command` holds the controller's command codes. A pixel outside the buffer
  raises `IndexError`.
- `ohmimetro.leds`: `Pixel`, `Color` (with a `label` for each colour) and
  `Direction`; `matrix_rgb` and `encode_frame` turn pixels into the 32-bit
  GRB words for the LED chain; `rotate_frame`, `color_pixel`, `arrow_frame`
  and `line_frame` build 25-pixel frames; `LedMatrix` sends them through its
  `put` callable (`draw`, `test_pattern`, `draw_arrow`, `draw_line`).
- `ohmimetro.ohmmeter`: `resistance_from_adc`, `approximate_e24`,
  `color_code` (returning a `ColorCode`), the `Reading` record, and
  `Ohmmeter`, which ties an ADC reader, an `SSD1306` and a `LedMatrix`
  together: `measure` averages the samples, `render` draws the summary screen
  and then the band names, and `step` does one full measure-and-show cycle.

## Examples

```python
from ohmimetro.ohmmeter import approximate_e24, color_code, resistance_from_adc

resistance_from_adc(2047.5, 10000, 4095)   # 10000.0
approximate_e24(9870)                      # 10000.0, within 5 % of 10k
color_code(10000).lines                    # ('Marrom', 'Preto', 'Laranja')
color_code(5).lines                        # ('Fora alcance', '', '')
```

Values below 10 or above 990000 ohms have no bands and are reported as out
of range ("Fora alcance"). `resistance_from_adc` raises `ValueError` when the
reading is at or above full scale, and `approximate_e24` raises `ValueError`
for values that are not positive and finite.

Drawing on the display buffer:

```python
from ohmimetro.ssd1306 import SSD1306

sent = []
display = SSD1306(lambda address, data: sent.append(data), 128, 64, 0x3C, False)
display.fill(False)
display.draw_string("Ohmimetro", 10, 28)
display.is_set(11, 28)    # True
display.send_data()       # address window commands, then the frame
```

## Command

```
ohmimetro 2047.5 1000
ohmimetro 3000 --known 4700 --resolution 4095
```

For each mean ADC reading given, the command prints the computed resistance,
then the reading, the E24 value and the colour band names.

## What it does not do

There is no driver for real hardware here: no I2C bus, ADC or LED-chain
access, and no boot-mode button handling. The `ohmimetro` command does not
sample anything itself; it works only from the readings given on its command
line. `Ohmmeter.step` performs one cycle; running it repeatedly is left to
the caller.