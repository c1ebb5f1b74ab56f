"""Saucer modes, LED colour modes and the table of colour patterns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "VSCALE",
    "NUM_COLOR_PATTERNS",
    "SaucerMode",
    "LedMode",
    "ColorPattern",
    "LedModeValues",
    "CM_OFF",
    "CM_BOOT",
    "CM_RED",
    "CM_GREEN",
    "CM_BLUE",
    "CM_RED_ORIG",
    "CM_BRIGHT_RED_ORANGE",
    "CM_RAINBOW",
    "CM_TEAL_PULSE",
    "CM_YELLOW_PULSE",
    "CM_BLUE_BREATHE",
    "CM_GREEN_BREATHE",
    "CM_YELLOW_GREEN_BREATHE",
    "CM_RED_GREEN_BREATHE",
    "CM_RED_GREEN_PULSE",
    "CM_RAINBOW_PULSE",
    "CM_YELLOW_BLINK",
    "CM_BRIGHT_PINK_RED",
    "CM_BRIGHT_LIGHT_BLUE",
    "CM_ALTERNATE",
    "COLOR_PATTERNS",
    "get_pattern",
]

VSCALE = 16  # fixed-point scale of hue and value in LED modes (a power of two)


class SaucerMode(IntEnum):
    """What the pinball machine is doing with the saucer lamps."""

    BOOT = 0  # boot up sequence, all LEDs on
    ATTRACT = 1  # attract mode, alternating blinking pattern
    GAME_IDLE = 2  # game running, saucer idle, all LEDs off
    ATTACK = 3  # game running, saucer attack
    TEST = 4  # test mode, one LED at a time


@dataclass(frozen=True)
class LedMode:
    """Parameters of one animated colour mode; hue and value are scaled by VSCALE."""

    start_h: int = 0
    end_h: int = 0
    start_v: int = 0
    end_v: int = 0
    speed_h: int = 0
    speed_v: int = 0
    ofs_h: int = 0
    ofs_v: int = 0
    afterglow: int = 0  # afterglow length in frames
    anim_speed: int = 0  # frames between background rotations, 0 for none
    blink_int: int = 0  # blink every 2**n frames, background only, 0 for none
    anim_dir: bool = False  # True rotates clockwise


@dataclass(frozen=True)
class ColorPattern:
    """Foreground and background LED modes for every saucer mode."""

    fg_modes: tuple[LedMode, ...]
    bg_modes: tuple[LedMode, ...]

    def __post_init__(self) -> None:
        expected = len(SaucerMode)
        if len(self.fg_modes) != expected or len(self.bg_modes) != expected:
            raise ValueError(f"a colour pattern needs {expected} foreground and background modes")


@dataclass
class LedModeValues:
    """Current animated state of one LED within a mode."""

    curr_h: int = 0
    curr_shaker_h: int = 0
    curr_v: int = 0
    curr_speed_h: int = 0
    curr_speed_v: int = 0


CM_OFF = LedMode()

CM_BOOT = LedMode(
    start_h=0 * VSCALE, end_h=255 * VSCALE, start_v=0 * VSCALE, end_v=255 * VSCALE,
    speed_h=8, speed_v=40, ofs_h=16 * VSCALE, ofs_v=0,
    afterglow=0, anim_speed=2,
)

CM_RED = LedMode(
    start_h=0 * VSCALE, end_h=16 * VSCALE, start_v=255 * VSCALE, end_v=255 * VSCALE,
    speed_h=1, afterglow=8,
)

CM_GREEN = LedMode(
    start_h=82 * VSCALE, end_h=86 * VSCALE, start_v=255 * VSCALE, end_v=255 * VSCALE,
    speed_h=1, afterglow=8,
)

CM_BLUE = LedMode(
    start_h=160 * VSCALE, end_h=166 * VSCALE, start_v=255 * VSCALE, end_v=255 * VSCALE,
    speed_h=1, afterglow=8,
)

CM_RED_ORIG = LedMode(
    start_h=0, end_h=0, start_v=255 * VSCALE, end_v=255 * VSCALE,
    afterglow=1,
)

CM_BRIGHT_RED_ORANGE = LedMode(
    start_h=2 * VSCALE, end_h=24 * VSCALE, start_v=222 * VSCALE, end_v=222 * VSCALE,
    speed_h=1, ofs_h=2, afterglow=16,
)

CM_RAINBOW = LedMode(
    start_h=0 * VSCALE, end_h=255 * VSCALE, start_v=155 * VSCALE, end_v=155 * VSCALE,
    speed_h=2, ofs_h=16 * VSCALE, afterglow=8,
)

CM_TEAL_PULSE = LedMode(
    start_h=103 * VSCALE, end_h=180 * VSCALE, start_v=0 * VSCALE, end_v=4 * VSCALE,
    ofs_h=4, ofs_v=4, afterglow=4, anim_speed=4,
)

CM_YELLOW_PULSE = LedMode(
    start_h=30 * VSCALE, end_h=38 * VSCALE, start_v=0 * VSCALE, end_v=6 * VSCALE,
    ofs_h=2, ofs_v=4, afterglow=4, anim_speed=4,
)

CM_BLUE_BREATHE = LedMode(
    start_h=153 * VSCALE, end_h=170 * VSCALE, start_v=0 * VSCALE, end_v=14 * VSCALE,
    speed_h=1, speed_v=1, afterglow=4,
)

CM_GREEN_BREATHE = LedMode(
    start_h=78 * VSCALE, end_h=84 * VSCALE, start_v=0 * VSCALE, end_v=14 * VSCALE,
    speed_h=1, speed_v=1, afterglow=4,
)

CM_YELLOW_GREEN_BREATHE = LedMode(
    start_h=50 * VSCALE, end_h=58 * VSCALE, start_v=0 * VSCALE, end_v=24 * VSCALE,
    speed_h=1, speed_v=1, ofs_h=2, ofs_v=2, afterglow=4, anim_speed=8,
)

CM_RED_GREEN_BREATHE = LedMode(
    start_h=2 * VSCALE, end_h=82 * VSCALE, start_v=4 * VSCALE, end_v=24 * VSCALE,
    speed_h=1, speed_v=8, ofs_h=80, afterglow=4,
)

CM_RED_GREEN_PULSE = LedMode(
    start_h=2 * VSCALE, end_h=182 * VSCALE, start_v=0 * VSCALE, end_v=24 * VSCALE,
    speed_h=1, speed_v=24, ofs_h=80, ofs_v=24, afterglow=8, anim_speed=8,
)

CM_RAINBOW_PULSE = LedMode(
    start_h=0 * VSCALE, end_h=255 * VSCALE, start_v=8 * VSCALE, end_v=24 * VSCALE,
    speed_h=8, speed_v=2, ofs_h=16 * VSCALE, ofs_v=4, afterglow=4, anim_speed=4,
)

CM_YELLOW_BLINK = LedMode(
    start_h=30 * VSCALE, end_h=38 * VSCALE, start_v=10 * VSCALE, end_v=10 * VSCALE,
    afterglow=4, blink_int=4,
)

CM_BRIGHT_PINK_RED = LedMode(
    start_h=230 * VSCALE, end_h=255 * VSCALE, start_v=255 * VSCALE, end_v=255 * VSCALE,
    speed_h=4, ofs_h=4, afterglow=2,
)

CM_BRIGHT_LIGHT_BLUE = LedMode(
    start_h=130 * VSCALE, end_h=140 * VSCALE, start_v=255 * VSCALE, end_v=255 * VSCALE,
    speed_h=4, ofs_h=2, afterglow=2,
)

CM_ALTERNATE = LedMode(
    start_h=2 * VSCALE, end_h=72 * VSCALE, start_v=4 * VSCALE, end_v=44 * VSCALE,
    speed_v=4, ofs_h=72 * VSCALE, ofs_v=0, afterglow=4, anim_speed=10,
)


def _pattern(fg: tuple[LedMode, ...], bg: tuple[LedMode, ...]) -> ColorPattern:
    return ColorPattern(fg_modes=fg, bg_modes=bg)


_BOOT_ONLY_BG = (CM_BOOT, CM_OFF, CM_OFF, CM_OFF, CM_OFF)

# Mode order in each tuple: BOOT, ATTRACT, GAME_IDLE, ATTACK, TEST.
COLOR_PATTERNS: tuple[ColorPattern, ...] = (
    # 0: placeholder; configuration 0 picks a random pattern instead
    _pattern((CM_OFF,) * 5, _BOOT_ONLY_BG),
    # 1-9: animated backgrounds
    _pattern(
        (CM_OFF, CM_RED, CM_BRIGHT_RED_ORANGE, CM_BRIGHT_PINK_RED, CM_RAINBOW),
        (CM_BOOT, CM_TEAL_PULSE, CM_TEAL_PULSE, CM_OFF, CM_OFF),
    ),
    _pattern(
        (CM_OFF, CM_RED, CM_BRIGHT_RED_ORANGE, CM_BRIGHT_LIGHT_BLUE, CM_RAINBOW),
        (CM_BOOT, CM_RAINBOW_PULSE, CM_RAINBOW_PULSE, CM_OFF, CM_OFF),
    ),
    _pattern(
        (CM_OFF, CM_RED, CM_BRIGHT_RED_ORANGE, CM_BRIGHT_LIGHT_BLUE, CM_RAINBOW),
        (CM_BOOT, CM_YELLOW_BLINK, CM_YELLOW_BLINK, CM_OFF, CM_OFF),
    ),
    _pattern(
        (CM_OFF, CM_RED, CM_BRIGHT_RED_ORANGE, CM_GREEN, CM_RAINBOW),
        (CM_BOOT, CM_GREEN_BREATHE, CM_GREEN_BREATHE, CM_OFF, CM_OFF),
    ),
    _pattern((CM_RED, CM_RED, CM_RED, CM_RED, CM_RAINBOW), _BOOT_ONLY_BG),
    _pattern(
        (CM_RED, CM_RED, CM_RED, CM_GREEN, CM_RAINBOW),
        (CM_BOOT, CM_RED_GREEN_BREATHE, CM_RED_GREEN_BREATHE, CM_OFF, CM_OFF),
    ),
    _pattern(
        (CM_RED, CM_RED, CM_RED, CM_BLUE, CM_RAINBOW),
        (CM_BOOT, CM_RED_GREEN_PULSE, CM_RED_GREEN_PULSE, CM_OFF, CM_OFF),
    ),
    _pattern(
        (CM_RED, CM_RED, CM_RED, CM_BLUE, CM_RAINBOW),
        (CM_BOOT, CM_YELLOW_GREEN_BREATHE, CM_YELLOW_GREEN_BREATHE, CM_OFF, CM_OFF),
    ),
    _pattern(
        (CM_RED, CM_RED, CM_GREEN, CM_RED, CM_RAINBOW),
        (CM_BOOT, CM_ALTERNATE, CM_ALTERNATE, CM_OFF, CM_OFF),
    ),
    # 10-15: no background
    _pattern((CM_RAINBOW,) * 5, _BOOT_ONLY_BG),
    _pattern((CM_RED, CM_RED, CM_GREEN, CM_RAINBOW, CM_RED), _BOOT_ONLY_BG),
    _pattern((CM_RED, CM_RED, CM_GREEN, CM_BLUE, CM_RED), _BOOT_ONLY_BG),
    _pattern((CM_BLUE,) * 5, _BOOT_ONLY_BG),
    _pattern((CM_GREEN,) * 5, _BOOT_ONLY_BG),
    # 15: the original all-red look
    _pattern((CM_RED_ORIG,) * 5, (CM_OFF,) * 5),
)

NUM_COLOR_PATTERNS = len(COLOR_PATTERNS)


def get_pattern(index: int) -> ColorPattern:
    """Return the colour pattern selected by configuration ``index``."""
    if not 0 <= index < NUM_COLOR_PATTERNS:
        raise IndexError(f"colour pattern must be in 0..{NUM_COLOR_PATTERNS - 1}, got {index}")
    return COLOR_PATTERNS[index]