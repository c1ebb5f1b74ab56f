import dataclasses

import pytest

from saucerlights.patterns import (
    CM_ALTERNATE,
    CM_BOOT,
    CM_OFF,
    CM_RAINBOW,
    CM_RED,
    CM_RED_ORIG,
    CM_YELLOW_BLINK,
    COLOR_PATTERNS,
    NUM_COLOR_PATTERNS,
    VSCALE,
    ColorPattern,
    LedMode,
    LedModeValues,
    SaucerMode,
    get_pattern,
)


def test_there_are_sixteen_patterns():
    assert NUM_COLOR_PATTERNS == 16
    assert len(COLOR_PATTERNS) == 16
    assert get_pattern(NUM_COLOR_PATTERNS - 1) is COLOR_PATTERNS[-1]
    with pytest.raises(IndexError):
        get_pattern(NUM_COLOR_PATTERNS)


def test_saucer_mode_order():
    assert [m.value for m in SaucerMode] == [0, 1, 2, 3, 4]
    assert SaucerMode(0) is SaucerMode.BOOT
    assert SaucerMode(4) is SaucerMode.TEST
    with pytest.raises(ValueError):
        SaucerMode(5)


@pytest.mark.parametrize("index", range(16))
def test_every_pattern_covers_every_mode(index):
    pattern = get_pattern(index)
    assert len(pattern.fg_modes) == len(SaucerMode)
    assert len(pattern.bg_modes) == len(SaucerMode)
    assert pattern is COLOR_PATTERNS[index]


@pytest.mark.parametrize("index", [-1, 16, 100])
def test_out_of_range_pattern_raises(index):
    with pytest.raises(IndexError):
        get_pattern(index)


def test_pattern_zero_is_boot_only():
    pattern = get_pattern(0)
    assert all(mode == CM_OFF for mode in pattern.fg_modes)
    assert pattern.bg_modes[SaucerMode.BOOT] == CM_BOOT
    assert all(mode == CM_OFF for mode in pattern.bg_modes[1:])


def test_pattern_fifteen_is_original_red():
    pattern = get_pattern(15)
    assert all(mode == CM_RED_ORIG for mode in pattern.fg_modes)
    assert all(mode == CM_OFF for mode in pattern.bg_modes)


@pytest.mark.parametrize("index", range(1, 15))
def test_boot_background_for_selectable_patterns(index):
    assert get_pattern(index).bg_modes[SaucerMode.BOOT] == CM_BOOT


def test_pattern_nine_uses_alternate_background():
    pattern = get_pattern(9)
    assert pattern.bg_modes[SaucerMode.ATTRACT] == CM_ALTERNATE
    assert pattern.bg_modes[SaucerMode.GAME_IDLE] == CM_ALTERNATE
    assert pattern.fg_modes[SaucerMode.ATTACK] == CM_RED
    assert pattern.fg_modes[SaucerMode.TEST] == CM_RAINBOW


def test_mode_values_from_source():
    assert VSCALE == 16
    boot = get_pattern(1).bg_modes[SaucerMode.BOOT]
    assert boot.end_h == 255 * VSCALE
    assert boot.speed_v == 40
    assert boot.anim_speed == 2
    yellow_blink = get_pattern(3).bg_modes[SaucerMode.ATTRACT]
    assert yellow_blink == CM_YELLOW_BLINK
    assert yellow_blink.blink_int == 4
    red = get_pattern(5).fg_modes[SaucerMode.BOOT]
    assert red.afterglow == 8
    assert red.end_h == 16 * VSCALE


def test_off_mode_is_all_zero():
    assert CM_OFF == LedMode()
    assert CM_OFF.afterglow == 0
    assert CM_OFF.anim_dir is False


@pytest.mark.parametrize("index", range(16))
def test_mode_ranges_are_ordered(index):
    pattern = get_pattern(index)
    for mode in pattern.fg_modes + pattern.bg_modes:
        assert mode.start_h <= mode.end_h
        assert mode.start_v <= mode.end_v
        assert mode.end_v <= 255 * VSCALE


def test_led_mode_is_immutable():
    mode = get_pattern(5).fg_modes[SaucerMode.BOOT]
    with pytest.raises(dataclasses.FrozenInstanceError):
        mode.afterglow = 3
    assert mode.afterglow == 8


def test_color_pattern_rejects_wrong_length():
    with pytest.raises(ValueError):
        ColorPattern(fg_modes=(CM_OFF,) * 4, bg_modes=(CM_OFF,) * 5)
    with pytest.raises(ValueError):
        ColorPattern(fg_modes=(CM_OFF,) * 5, bg_modes=(CM_OFF,) * 6)


def test_led_mode_values_are_mutable_and_start_at_zero():
    values = LedModeValues()
    assert dataclasses.astuple(values) == (0, 0, 0, 0, 0)
    values.curr_h = 42
    values.curr_speed_v = -3
    assert values.curr_h == 42
    assert values.curr_speed_v == -3
    assert LedModeValues().curr_h == 0