"""Small integer colour helpers: bit counting, HSV conversion and blending."""

from __future__ import annotations

__all__ = ["bits_set", "hsv_to_rgb", "blend8"]


def _build_bit_table() -> tuple[int, ...]:
    table = [0] * 256
    for index in range(1, 256):
        table[index] = (index & 1) + table[index >> 1]
    return tuple(table)


_BITS_SET_TABLE = _build_bit_table()


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..255, got {value}")


def bits_set(value: int) -> int:
    """Return the number of bits set in the low 16 bits of ``value``."""
    value &= 0xFFFF
    return _BITS_SET_TABLE[value & 0xFF] + _BITS_SET_TABLE[(value >> 8) & 0xFF]


def hsv_to_rgb(hue: int, saturation: int, value: int) -> tuple[int, int, int]:
    """Convert 8-bit hue, saturation and value to an 8-bit ``(r, g, b)`` tuple."""
    _check_byte("hue", hue)
    _check_byte("saturation", saturation)
    _check_byte("value", value)

    segment = (6 * hue) >> 8
    within = (6 * hue) & 0xFF
    low = (value * (255 - saturation)) >> 8
    ramp = (value * saturation * within) >> 16

    rising = (low + ramp) & 0xFF
    falling = (value - ramp) & 0xFF
    channels = {
        0: (value, rising, low),
        1: (falling, value, low),
        2: (low, value, rising),
        3: (low, falling, value),
        4: (rising, low, value),
        5: (value, low, falling),
    }
    return channels[segment]


def blend8(a: int, b: int, amount_of_b: int) -> int:
    """Blend ``a`` towards ``b`` by ``amount_of_b``/255, returning an 8-bit value."""
    _check_byte("a", a)
    _check_byte("b", b)
    _check_byte("amount_of_b", amount_of_b)
    partial = ((a << 8) | b) - a * amount_of_b + b * amount_of_b
    return ((partial & 0xFFFF) >> 8) & 0xFF