"""Serial pixel protocol: bit timing, bit encoding and a recording pixel bus."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "T1H",
    "T1L",
    "T0H",
    "T0L",
    "RESET_NS",
    "DEFAULT_CPU_HZ",
    "ns_to_cycles",
    "bit_timing",
    "encode_byte",
    "encode_pixel",
    "PixelBus",
]

T1H = 900  # high time of a 1 bit [ns]
T1L = 600  # low time of a 1 bit [ns]
T0H = 400  # high time of a 0 bit [ns]
T0L = 900  # low time of a 0 bit [ns]
RESET_NS = 250_000  # low gap that latches a frame [ns]

NS_PER_SEC = 1_000_000_000
DEFAULT_CPU_HZ = 16_000_000
_SET_CLEAR_OVERHEAD = 2

Pixel = tuple[int, int, int]


def ns_to_cycles(nanoseconds: int, cpu_hz: int = DEFAULT_CPU_HZ) -> int:
    """Return how many whole CPU cycles fit into ``nanoseconds`` at ``cpu_hz``."""
    if cpu_hz <= 0:
        raise ValueError(f"cpu_hz must be positive, got {cpu_hz}")
    ns_per_cycle = NS_PER_SEC // cpu_hz
    if ns_per_cycle == 0:
        raise ValueError(f"cpu_hz {cpu_hz} is faster than one cycle per nanosecond")
    return int(nanoseconds / ns_per_cycle)


def bit_timing(bit: bool, cpu_hz: int = DEFAULT_CPU_HZ) -> tuple[int, int]:
    """Return the ``(high, low)`` delay cycles used to send one bit."""
    high_ns, low_ns = (T1H, T1L) if bit else (T0H, T0L)
    return (
        ns_to_cycles(high_ns, cpu_hz) - _SET_CLEAR_OVERHEAD,
        ns_to_cycles(low_ns, cpu_hz) - _SET_CLEAR_OVERHEAD,
    )


def encode_byte(value: int) -> tuple[bool, ...]:
    """Return the eight bits of ``value``, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte must be in 0..255, got {value}")
    return tuple(bool(value & (0x80 >> shift)) for shift in range(8))


def encode_pixel(r: int, g: int, b: int) -> tuple[bool, ...]:
    """Return the 24 bits sent for one pixel, in red, green, blue order."""
    return encode_byte(r) + encode_byte(g) + encode_byte(b)


@dataclass
class PixelBus:
    """Records pixels sent to the two LED strings."""

    first: list[Pixel] = field(default_factory=list)
    second: list[Pixel] = field(default_factory=list)

    def send_pixel(self, r: int, g: int, b: int, first_string: bool) -> tuple[bool, ...]:
        """Send one pixel to a string and return the bits put on the wire."""
        bits = encode_pixel(r, g, b)
        (self.first if first_string else self.second).append((r, g, b))
        return bits

    def clear(self) -> None:
        """Forget everything sent so far."""
        self.first.clear()
        self.second.clear()