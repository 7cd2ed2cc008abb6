import pytest

from tilequake.render import normalized_color, present


def test_full_channels():
    assert normalized_color(255, 255, 255, 255) == (1.0, 1.0, 1.0, 1.0)


def test_black_opaque():
    assert normalized_color(0x00, 0x00, 0x00, 0xFF) == (0.0, 0.0, 0.0, 1.0)


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        normalized_color(256, 0, 0, 0)


def test_present_flips_window():
    class _Window:
        flips = 0

        def flip(self):
            self.flips += 1

    class _Ctx:
        window = _Window()

    ctx = _Ctx()
    present(ctx)
    assert ctx.window.flips == 1