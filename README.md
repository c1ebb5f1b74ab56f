# saucerlights

A software model of an RGB light controller for a pinball saucer toy. The
controller takes the sixteen lamp signals the machine drives (active low),
works out what the game is doing (booting, attract mode, idle, attack, lamp
test) and computes the colours of the saucer's sixteen RGB pixels and four
flasher pixels: colour patterns, afterglow fades, rotating and blinking
backgrounds, flasher bursts and random sparkles while the shaker runs.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `saucerlights.colors` – integer colour helpers: `bits_set` (bits set in a
  16-bit value), `hsv_to_rgb` (8-bit HSV to an `(r, g, b)` tuple) and
  `blend8` (8-bit blend of two values).
- `saucerlights.pixels` – the WS2812 pixel wire format: `ns_to_cycles`,
  `bit_timing` (high/low delay cycles for one bit), `encode_byte` and
  `encode_pixel` (bits most significant first, red, green, blue), and
  `PixelBus`, which records the pixels sent to the two LED strings in its
  `first` and `second` lists; `clear()` empties them.
- `saucerlights.patterns` – the saucer modes (`SaucerMode`), LED mode
  parameters (`LedMode`, `LedModeValues`), `ColorPattern`, and the sixteen
  built-in colour patterns in `COLOR_PATTERNS`, looked up with `get_pattern`.
- `saucerlights.modes` – the light engine. `SaucerLights` detects the saucer
  mode from the lamp state (`update_led_state`), reacts to
  `trigger_flasher` and `trigger_shaker`, and renders one `Frame` per call to
  `update_leds(config)`, also sending it to its `PixelBus`. Helper functions
  `next_value`, `advance_mode`, `init_values` and `rotate_values` do the
  per-LED animation steps.
- `saucerlights.controller` – `SaucerController`, which models the board's
  main loop: `clock_led_bit` shifts in lamp data, `flash_interrupt` and
  `shaker_interrupt` note the flasher and shaker lines, `set_config` changes
  the pattern configuration, and `step(flash_line_low)` runs one 20 ms frame.

## Example

```python
import random

from saucerlights.colors import hsv_to_rgb
from saucerlights.modes import SaucerLights
from saucerlights.pixels import PixelBus

print(hsv_to_rgb(0, 255, 255))   # (255, 0, 0)

bus = PixelBus()
lights = SaucerLights(random.Random(1), bus)
lights.update_led_state(0x0000)  # all sixteen lamp signals active
frame = lights.update_leds(config=5)  # render one frame with colour pattern 5
print(frame.leds, frame.flashers)
```

Driving the whole controller:

```python
from saucerlights.controller import SaucerController

controller = SaucerController(seed=1234, config=0)
for bit in (1, 0, 1, 1):
    controller.clock_led_bit(bit)
controller.flash_interrupt()
frame = controller.step(flash_line_low=True)
```

A pending flash fires only if the flash line is still low when `step` runs.
The engine holds off mode changes for the first 200 frames after start-up.

Configuration 0 picks a random pattern from 1 to 14 every time the mode is
set; configurations 1 to 15 select a fixed pattern, with 15 reproducing the
plain red lamps of the original saucer look (and no shaker sparkles).

## Command line

```
saucerlights --seed 1 --config 5 --frames 3 --state 0x0000 --flash --shake
```

sets the lamp state (`--state`, active low, default `0xffff`), optionally
fires the flashers and the shaker, runs the given number of frames and prints
each frame's LED and flasher colours as hex values. See
`saucerlights --help` for all options.

## What it does not do

The package only computes and records colours. It does not read real lamp,
flasher or shaker lines and does not drive physical LEDs; `PixelBus` keeps
the pixels in lists, and `encode_pixel` and `bit_timing` describe the wire
bits and timing without putting anything on a wire.