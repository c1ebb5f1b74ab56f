import pytest

from saucerlights.pixels import (
    T0H,
    T1H,
    PixelBus,
    bit_timing,
    encode_byte,
    encode_pixel,
    ns_to_cycles,
)


def test_bit_timing_for_one_at_16mhz():
    assert bit_timing(True, 16_000_000) == (12, 7)


def test_one_bit_is_held_high_longer_than_zero_bit():
    for hz in (8_000_000, 16_000_000, 20_000_000):
        assert bit_timing(True, hz)[0] > bit_timing(False, hz)[0]


def test_ns_to_cycles_grows_with_clock():
    assert ns_to_cycles(T1H, 8_000_000) < ns_to_cycles(T1H, 16_000_000)
    assert ns_to_cycles(T0H, 16_000_000) < ns_to_cycles(T1H, 16_000_000)


def test_ns_to_cycles_zero():
    assert ns_to_cycles(0, 16_000_000) == 0


@pytest.mark.parametrize("hz", [0, -5, 2_000_000_000])
def test_ns_to_cycles_rejects_bad_clock(hz):
    with pytest.raises(ValueError):
        ns_to_cycles(100, hz)


def test_encode_byte_msb_first():
    assert encode_byte(0x80) == (True,) + (False,) * 7
    assert encode_byte(0x01) == (False,) * 7 + (True,)


def test_encode_byte_round_trip():
    for value in range(256):
        bits = encode_byte(value)
        assert len(bits) == 8
        assert int("".join("1" if bit else "0" for bit in bits), 2) == value


@pytest.mark.parametrize("value", [-1, 256])
def test_encode_byte_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_encode_pixel_is_red_green_blue():
    bits = encode_pixel(0xFF, 0x00, 0x0F)
    assert len(bits) == 24
    assert bits[:8] == encode_byte(0xFF)
    assert bits[8:16] == encode_byte(0x00)
    assert bits[16:] == encode_byte(0x0F)


def test_bus_routes_pixels_to_strings():
    bus = PixelBus()
    bus.send_pixel(1, 2, 3, True)
    bus.send_pixel(100, 255, 100, False)
    bus.send_pixel(4, 5, 6, True)
    assert bus.first == [(1, 2, 3), (4, 5, 6)]
    assert bus.second == [(100, 255, 100)]


def test_bus_returns_wire_bits():
    bus = PixelBus()
    assert bus.send_pixel(9, 8, 7, False) == encode_pixel(9, 8, 7)


def test_bus_rejects_bad_pixel_without_recording():
    bus = PixelBus()
    with pytest.raises(ValueError):
        bus.send_pixel(0, 0, 300, True)
    assert bus.first == []


def test_bus_clear():
    bus = PixelBus()
    bus.send_pixel(1, 1, 1, True)
    bus.send_pixel(2, 2, 2, False)
    bus.clear()
    assert bus.first == [] and bus.second == []