"""Main loop of the saucer board: input lines, interrupts and frame stepping."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from .modes import RAND_MAX, Frame, SaucerLights
from .patterns import NUM_COLOR_PATTERNS
from .pixels import PixelBus

__all__ = [
    "LED_UPDATE_INTERVAL_MS",
    "FLASH_CONSECUTIVE_CHECKS",
    "SaucerController",
    "main",
]

LED_UPDATE_INTERVAL_MS = 20  # LED update interval [ms]
FLASH_CONSECUTIVE_CHECKS = 1  # flash line checks needed before the flasher fires


def _check_config(config: int) -> int:
    if not 0 <= config < NUM_COLOR_PATTERNS:
        raise ValueError(f"config must be in 0..{NUM_COLOR_PATTERNS - 1}, got {config}")
    return config


class SaucerController:
    """Collects the machine's lamp, flash and shaker signals and drives the lights."""

    def __init__(self, seed: int = 0, config: int = 0) -> None:
        self.config = _check_config(config)
        rng = random.Random(seed)
        # The value that would be stored as the seed for the next power-up.
        self.next_seed = rng.randrange(RAND_MAX + 1)
        self.bus = PixelBus()
        self.lights = SaucerLights(rng=rng, bus=self.bus)
        self.led_state = 0xFFFF
        self.flash_pending = False
        self.shaker_pending = False
        self.flash_counter = 0
        self.frames = 0

    def clock_led_bit(self, bit: bool | int) -> int:
        """Shift one lamp data bit into the LED state and return the new state."""
        self.led_state = ((self.led_state << 1) | (1 if bit else 0)) & 0xFFFF
        return self.led_state

    def flash_interrupt(self) -> None:
        """Note a falling edge on the flasher line."""
        self.flash_pending = True

    def shaker_interrupt(self) -> None:
        """Note a change on the shaker line."""
        self.shaker_pending = True

    def set_config(self, config: int) -> None:
        """Change the DIP switch configuration read on the next frame."""
        self.config = _check_config(config)

    def step(self, flash_line_low: bool = False) -> Frame:
        """Run one pass of the main loop and return the frame sent out.

        ``flash_line_low`` is the current level check of the flash line, used
        to filter noise on a pending flash.
        """
        self.lights.update_led_state(self.led_state)

        if self.flash_pending:
            if flash_line_low:
                self.flash_counter += 1
                if self.flash_counter >= FLASH_CONSECUTIVE_CHECKS:
                    self.lights.trigger_flasher()
                    self.flash_counter = 0
                    self.flash_pending = False
            else:
                self.flash_counter = 0
                self.flash_pending = False

        if self.shaker_pending:
            self.lights.trigger_shaker()
            self.shaker_pending = False

        frame = self.lights.update_leds(self.config)
        self.frames += 1
        return frame


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="saucerlights",
        description="Simulate the saucer lights and print the colours of each frame.",
    )
    parser.add_argument("--seed", type=int, default=0, help="random seed")
    parser.add_argument(
        "--config", type=int, default=0,
        help=f"colour pattern configuration 0..{NUM_COLOR_PATTERNS - 1}",
    )
    parser.add_argument("--frames", type=int, default=1, help="number of frames to run")
    parser.add_argument(
        "--state", type=lambda text: int(text, 0), default=0xFFFF,
        help="lamp line state, active low (e.g. 0xffff for all lamps off)",
    )
    parser.add_argument("--flash", action="store_true", help="fire the flashers first")
    parser.add_argument("--shake", action="store_true", help="shake the saucer first")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    if not 0 <= args.state <= 0xFFFF:
        parser.error("--state must fit in 16 bits")
    if not 0 <= args.config < NUM_COLOR_PATTERNS:
        parser.error(f"--config must be in 0..{NUM_COLOR_PATTERNS - 1}")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from the command line."""
    args = _parse_args(argv)
    controller = SaucerController(seed=args.seed, config=args.config)
    for bit in range(15, -1, -1):
        controller.clock_led_bit((args.state >> bit) & 1)
    if args.flash:
        controller.flash_interrupt()
    if args.shake:
        controller.shaker_interrupt()

    out = sys.stdout
    for index in range(args.frames):
        frame = controller.step(flash_line_low=args.flash)
        leds = " ".join(_hex(c) for c in frame.leds)
        flashers = " ".join(_hex(c) for c in frame.flashers)
        out.write(f"frame {index}: leds {leds} flashers {flashers}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())