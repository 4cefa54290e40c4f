import random

import pytest

from lumisky.colors import WHITE, random_hex, random_hsl, to_rgb, to_rgba


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#ff0000", (255, 0, 0)),
        ("#FBBF24", (251, 191, 36)),
        ("#0f0", (0, 255, 0)),
        ("white", (255, 255, 255)),
        ("  #06b6d4 ", (6, 182, 212)),
    ],
)
def test_to_rgb_parses_palette_strings(value, expected):
    assert to_rgb(value) == expected


def test_to_rgb_parses_hsl():
    r, g, b = to_rgb("hsl(0, 100%, 50%)")
    assert r == 255 and g <= 1 and b <= 1

    r, g, b = to_rgb("hsl(120, 100%, 60%)")
    assert g > 200 and r < 120 and b < 120


def test_unparseable_color_is_white():
    assert to_rgb("not-a-color") == WHITE
    assert to_rgb("#12") == WHITE


def test_to_rgba_is_premultiplied():
    assert to_rgba((200, 100, 50), 1.0) == (200, 100, 50, 255)
    assert to_rgba((200, 100, 50), 0.5) == (100, 50, 25, 128)
    assert to_rgba((200, 100, 50), -0.2) == (0, 0, 0, 0)
    assert to_rgba((200, 100, 50), 1.7) == (200, 100, 50, 255)


def test_random_colors_are_parseable():
    rng = random.Random(8)
    for _ in range(20):
        assert len(to_rgb(random_hex(rng))) == 3
        h = random_hsl(rng)
        assert h.startswith("hsl(")
        assert len(to_rgb(h)) == 3
    assert random_hex(random.Random(1)).startswith("#")
    assert len(random_hex(random.Random(1))) == 7
