import pytest

from tilequake.context import Input, _fps_to_frame_ms, _frame_delay, default_key_mapping


def test_mapping_covers_every_input():
    assert set(default_key_mapping()) == set(Input)


def test_movement_keys():
    mapping = default_key_mapping()
    assert [mapping[i] for i in (Input.UP, Input.LEFT, Input.DOWN, Input.RIGHT)] == ["W", "A", "S", "D"]


def test_mapping_keys_in_input_order():
    keys = sorted(default_key_mapping())
    assert [i.name for i in keys][:4] == ["LEFT", "DOWN", "UP", "RIGHT"]


def test_frame_delay_waits_remainder():
    assert _frame_delay(2, 6) == 4


def test_frame_delay_none_when_slow_or_unlimited():
    assert _frame_delay(10, 6) == 0
    assert _frame_delay(0, 0) == 0


def test_fps_to_frame_ms():
    assert _fps_to_frame_ms(165) == 1000 // 165


def test_fps_zero_rejected():
    with pytest.raises(ValueError):
        _fps_to_frame_ms(0)