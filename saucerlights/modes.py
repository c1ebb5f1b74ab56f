"""Saucer mode detection and per-frame LED colour animation."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace

from .colors import bits_set, blend8, hsv_to_rgb
from .patterns import (
    CM_OFF,
    NUM_COLOR_PATTERNS,
    VSCALE,
    LedMode,
    LedModeValues,
    SaucerMode,
    get_pattern,
)
from .pixels import PixelBus

__all__ = [
    "NUM_LEDS",
    "NUM_FLASHERS",
    "FLASH_DURATION",
    "SHAKER_DURATION",
    "MODE_INDICATOR_STEPS",
    "BOOTUP_JINGLE_FRAMES",
    "FLASHER_ON_COLOR",
    "Frame",
    "SaucerLights",
    "next_value",
    "advance_mode",
    "init_values",
    "rotate_values",
]

NUM_LEDS = 16
NUM_FLASHERS = 4
FLASH_DURATION = 4  # flasher duration [frames]
SHAKER_DURATION = 64  # shaker duration [frames]
MODE_INDICATOR_STEPS = 64
BOOTUP_JINGLE_FRAMES = 200
FLASHER_ON_COLOR = (100, 255, 100)
ORIGINAL_CONFIG = 15  # the plain red configuration never sparkles
RAND_MAX = 0x7FFF

_ATTRACT_STATES = frozenset({0xCCCC, 0x3333, 0x6666, 0x9999})

Rgb = tuple[int, int, int]


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def next_value(value: int, increment: int, minimum: int, maximum: int) -> tuple[int, int]:
    """Step ``value`` by ``increment``, bouncing off the range ends.

    Returns the new value and the (possibly reversed) increment.
    """
    new_value = _int16(value + increment)
    if new_value > maximum:
        new_value = maximum
        increment = -increment
    elif new_value < minimum:
        new_value = minimum
        increment = -increment
    return new_value & 0xFFFF, increment


def advance_mode(led_mode: LedMode, values: list[LedModeValues]) -> None:
    """Advance hue and value of every LED by one animation step, in place."""
    for led in values:
        led.curr_h, led.curr_speed_h = next_value(
            led.curr_h, led.curr_speed_h, led_mode.start_h, led_mode.end_h
        )
        led.curr_v, led.curr_speed_v = next_value(
            led.curr_v, led.curr_speed_v, led_mode.start_v, led_mode.end_v
        )


def init_values(led_mode: LedMode) -> list[LedModeValues]:
    """Return the starting animation state of all LEDs for ``led_mode``."""
    ofs_h, ofs_v = led_mode.ofs_h, led_mode.ofs_v
    h, v = led_mode.start_h, led_mode.start_v
    values = []
    for _ in range(NUM_LEDS):
        speed_h = led_mode.speed_h if (ofs_h < 0) == (led_mode.ofs_h < 0) else -led_mode.speed_h
        speed_v = led_mode.speed_v if (ofs_v < 0) == (led_mode.ofs_v < 0) else -led_mode.speed_v
        values.append(
            LedModeValues(
                curr_h=h,
                curr_shaker_h=0,
                curr_v=v,
                curr_speed_h=speed_h,
                curr_speed_v=speed_v,
            )
        )
        h, ofs_h = next_value(h, ofs_h, led_mode.start_h, led_mode.end_h)
        v, ofs_v = next_value(v, ofs_v, led_mode.start_v, led_mode.end_v)
    return values


def rotate_values(values: list[LedModeValues], clockwise: bool) -> list[LedModeValues]:
    """Return ``values`` rotated by one LED position."""
    if not values:
        return []
    if clockwise:
        return values[1:] + values[:1]
    return values[-1:] + values[:-1]


@dataclass(frozen=True)
class Frame:
    """Colours sent out in one update: the saucer LEDs and the flashers."""

    leds: tuple[Rgb, ...]
    flashers: tuple[Rgb, ...]


class SaucerLights:
    """Animated colour state of the saucer's LEDs and flashers."""

    def __init__(self, rng: random.Random | None = None, bus: PixelBus | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.bus = bus if bus is not None else PixelBus()
        self.led_state = 0
        self.flash_countdown = 0
        self.shaker_countdown = 0
        self.mode: SaucerMode | None = None
        self.mode_indicators = [0] * len(SaucerMode)
        self.fg_mode: LedMode = CM_OFF
        self.bg_mode: LedMode = CM_OFF
        self.fg_values = [LedModeValues() for _ in range(NUM_LEDS)]
        self.bg_values = [LedModeValues() for _ in range(NUM_LEDS)]
        self.led_active = [0] * NUM_LEDS
        self.bg_anim_count = 0
        self.config = 0
        self.selected_config = 0
        self.frame_count = 0
        self.jingle_countdown = BOOTUP_JINGLE_FRAMES

    def _rand(self) -> int:
        return self._rng.randrange(RAND_MAX + 1)

    @staticmethod
    def _detect_mode(led_state: int) -> SaucerMode:
        if led_state == 0x0000:
            return SaucerMode.GAME_IDLE
        if led_state == 0xFFFF:
            return SaucerMode.BOOT
        if led_state in _ATTRACT_STATES:
            return SaucerMode.ATTRACT
        return SaucerMode.TEST if bits_set(led_state) == 1 else SaucerMode.ATTACK

    def update_led_state(self, new_state: int) -> None:
        """Take the latest lamp state (active low) and follow the detected mode."""
        self.led_state = ~new_state & 0xFFFF

        if self.mode is None:
            self.set_mode(SaucerMode.BOOT)

        detected = self._detect_mode(self.led_state)
        indicators = self.mode_indicators
        new_mode = self.mode
        for mode in SaucerMode:
            if mode == detected:
                if indicators[mode] < MODE_INDICATOR_STEPS:
                    indicators[mode] += 1
            elif indicators[mode]:
                indicators[mode] -= 1
            if indicators[mode] > indicators[new_mode]:
                new_mode = mode

        if self.jingle_countdown == 0:
            if new_mode != self.mode:
                self.set_mode(new_mode)
        else:
            self.jingle_countdown -= 1

    def trigger_flasher(self) -> None:
        """Light the flashers for the next few frames."""
        self.flash_countdown = FLASH_DURATION

    def trigger_shaker(self) -> None:
        """Start the shaker sparkle effect."""
        self.shaker_countdown = SHAKER_DURATION

    @staticmethod
    def _hsv(values: LedModeValues, hue: int | None = None) -> Rgb:
        h = (values.curr_h >> 4) if hue is None else hue
        return hsv_to_rgb(h & 0xFF, 255, (values.curr_v >> 4) & 0xFF)

    def get_color(self, pos: int, afterglow_step: int) -> Rgb:
        """Return the colour of LED ``pos`` given its afterglow step."""
        if not 0 <= pos < NUM_LEDS:
            raise IndexError(f"LED position must be in 0..{NUM_LEDS - 1}, got {pos}")

        if afterglow_step:
            if afterglow_step >= self.fg_mode.afterglow:
                led = self.fg_values[pos]
                if (
                    self.shaker_countdown
                    and self._rand() % 10 == 0
                    and self.config != ORIGINAL_CONFIG
                ):
                    led.curr_shaker_h = (self._rand() & 0xFF) << 4
                    led.curr_v = 255 * VSCALE
                elif self.shaker_countdown == 0:
                    led.curr_shaker_h = 0
                hue = (led.curr_shaker_h if led.curr_shaker_h > 0 else led.curr_h) >> 4
                return self._hsv(led, hue)

            fore = self._hsv(self.fg_values[pos])
            back = self._hsv(self.bg_values[pos])
            ratio = (afterglow_step * (256 // self.fg_mode.afterglow)) & 0xFF
            return tuple(blend8(b, f, ratio) for b, f in zip(back, fore))

        blink = self.bg_mode.blink_int
        if blink and (self.frame_count >> blink) % 2:
            return (0, 0, 0)
        return self._hsv(self.bg_values[pos])

    def _apply_mode(self, mode: SaucerMode | None) -> None:
        if self.config == 0:
            self.selected_config = self._rand() % 14 + 1
        else:
            self.selected_config = self.config

        if self.config < NUM_COLOR_PATTERNS and mode is not None:
            pattern = get_pattern(self.selected_config)
            self.fg_mode = pattern.fg_modes[mode]
            self.bg_mode = pattern.bg_modes[mode]
            self.fg_values = init_values(self.fg_mode)
            self.bg_values = init_values(self.bg_mode)
            self.bg_anim_count = self.bg_mode.anim_speed
            self.mode = mode

    def set_mode(self, mode: SaucerMode | int) -> None:
        """Switch to ``mode`` using the colour pattern of the current configuration."""
        self._apply_mode(SaucerMode(mode))

    def update_leds(self, config: int) -> Frame:
        """Advance the animation by one frame, send it out and return it.

        ``config`` is the pattern configuration read from the DIP switches.
        """
        if not 0 <= config < NUM_COLOR_PATTERNS:
            raise ValueError(f"config must be in 0..{NUM_COLOR_PATTERNS - 1}, got {config}")

        advance_mode(self.fg_mode, self.fg_values)
        advance_mode(self.bg_mode, self.bg_values)
        if self.bg_mode.anim_speed:
            self.bg_anim_count = (self.bg_anim_count - 1) & 0xFF
            if self.bg_anim_count == 0:
                self.bg_values = rotate_values(self.bg_values, self.bg_mode.anim_dir)
                self.bg_anim_count = self.bg_mode.anim_speed

        colors = []
        for pos in range(NUM_LEDS):
            if (self.led_state >> pos) & 1:
                self.led_active[pos] = self.fg_mode.afterglow
            elif self.led_active[pos]:
                self.led_active[pos] -= 1
            colors.append(self.get_color(pos, self.led_active[pos]))

        for r, g, b in colors:
            self.bus.send_pixel(r, g, b, True)

        flasher = FLASHER_ON_COLOR if self.flash_countdown else (0, 0, 0)
        flashers = (flasher,) * NUM_FLASHERS
        for r, g, b in flashers:
            self.bus.send_pixel(r, g, b, False)

        if self.flash_countdown:
            self.flash_countdown -= 1
        if self.shaker_countdown:
            self.shaker_countdown -= 1

        if config != self.config:
            self.config = config
            self._apply_mode(self.mode)

        self.frame_count = (self.frame_count + 1) & 0xFFFFFFFF
        return Frame(leds=tuple(colors), flashers=flashers)

    def snapshot_values(self) -> tuple[list[LedModeValues], list[LedModeValues]]:
        """Return copies of the foreground and background animation state."""
        return (
            [replace(v) for v in self.fg_values],
            [replace(v) for v in self.bg_values],
        )