import io
import math
import numpy as np
import pytest
from chromacore.colors import Color3F, Color3D, Color4F, Color4D, get_color_class, convert_color
from chromacore.layouts import ArrayComponentOrder, PackedIntComponentOrder
from chromacore.types import Precision

FLOAT32_TOL = 1e-6


def test_scalar_constructor_fills_color_channels():
    assert Color3F(0.5).value == (0.5, 0.5, 0.5)
    assert Color4F(0.5).value == (0.5, 0.5, 0.5, 1.0)


def test_sequence_constructor():
    assert Color3D((0.1, 0.2, 0.3)).value == (0.1, 0.2, 0.3)
    assert Color4D((0.1, 0.2, 0.3, 0.4)).value == (0.1, 0.2, 0.3, 0.4)
    assert Color4D((0.1, 0.2, 0.3), alpha=0.25).a == 0.25


def test_float32_rounding():
    color = Color3F((0.1, 0.2, 0.3))
    assert color.r == float(np.float32(0.1))
    assert color.r != 0.1


def test_constructor_from_other_color():
    source = Color4D((0.1, 0.2, 0.3, 0.4))
    assert Color3D(source).value == (0.1, 0.2, 0.3)
    assert Color4D(Color3D((0.1, 0.2, 0.3))).a == 1.0


def test_invalid_constructor_arguments():
    with pytest.raises(TypeError):
        Color3F(None)
    with pytest.raises(ValueError):
        Color3F((0.1, 0.2))
    with pytest.raises(ValueError):
        Color3F((0.1, 0.2, 0.3), alpha=0.5)


def test_colors_are_immutable():
    color = Color3F(0.5)
    with pytest.raises(AttributeError):
        color._value = (0.0, 0.0, 0.0)
    with pytest.raises(AttributeError):
        color.r = 1.0


def test_no_implicit_clamping():
    color = Color3D((-1.0, 2.0, math.inf))
    assert color.value == (-1.0, 2.0, math.inf)
    assert color.has_infinites()
    assert not color.has_nans()


def test_from_ints():
    color = Color4F.from_ints(255, 128, 0)
    assert color.r == 1.0
    assert abs(color.g - 128 / 255) < FLOAT32_TOL
    assert color.b == 0.0
    assert color.a == 1.0
    assert Color3D.from_ints(300, -5, 51).value == (1.0, 0.0, 0.2)
    with pytest.raises(ValueError):
        Color3F.from_ints(1, 2, 3, 4)


def test_as_int_accessors():
    color = Color4F((1.0, 0.5, -0.5, 2.0))
    assert (color.as_int_r, color.as_int_g, color.as_int_b, color.as_int_a) == (255, 128, 0, 255)
    assert Color3F(math.nan).as_int_r == 0


def test_equality_and_hash():
    assert Color3F((0.1, 0.2, 0.3)) == Color3F((0.1, 0.2, 0.3))
    assert hash(Color3F((0.1, 0.2, 0.3))) == hash(Color3F((0.1, 0.2, 0.3)))
    assert Color3F(0.5) != Color3D(0.5)
    assert Color3F(0.5) != Color3F(0.25)


def test_equality_nan_and_signed_zero():
    assert Color3F(math.nan) == Color3F(math.nan)
    assert hash(Color3F(math.nan)) == hash(Color3F(math.nan))
    assert Color3F(0.0) != Color3F(-0.0)


def test_is_close():
    assert Color3D((0.1, 0.2, 0.3)).is_close(Color3D((0.1 + 1e-12, 0.2, 0.3)))
    assert not Color3D((0.1, 0.2, 0.3)).is_close(Color3D((0.2, 0.2, 0.3)))
    assert not Color3D(0.5).is_close(Color4D(0.5))


def test_derived_scalars():
    color = Color3D((0.2, 0.4, 0.9))
    assert color.average == pytest.approx(0.5)
    assert color.lightness == pytest.approx(0.55)
    assert color.maximum == 0.9
    assert color.minimum == 0.2
    assert color.luminance == pytest.approx(0.212671 * 0.2 + 0.715160 * 0.4 + 0.072169 * 0.9)
    assert Color3D(1.0).luminance == pytest.approx(1.0)


def test_derived_scalars_ignore_alpha():
    assert Color4D((0.0, 0.0, 0.0, 1.0)).maximum == 0.0
    assert Color4D((0.3, 0.3, 0.3, 0.0)).average == pytest.approx(0.3)


def test_primary_predicates():
    assert Color3F((2.0, 0.5, 0.5)).is_red()
    assert not Color3F((1.0, 0.5, 0.5)).is_red()
    assert Color3F((1.0, 0.5, 0.5)).is_red(0.5, 0.5)
    assert Color3F((0.0, 1.0, 0.0)).is_green()
    assert Color3F((0.0, 0.0, 1.0)).is_blue()
    assert not Color3F((0.0, 0.0, 1.0)).is_green()


def test_red_predicate_boundaries():
    assert Color3D((1.0, 0.0, 0.0)).is_red()
    assert not Color3D((0.99, 0.0, 0.0)).is_red()
    assert not Color3D((math.nan, 0.0, 0.0)).is_red()
    assert not Color3D((1.0, math.nan, 0.0)).is_red()


@pytest.mark.parametrize("cls", [Color3F, Color3D])
def test_secondary_predicates_reject_named_secondaries(cls):
    assert not cls.CYAN.is_cyan()
    assert not cls.MAGENTA.is_magenta()
    assert not cls.YELLOW.is_yellow()
    assert not cls((0.0, 100.0, 100.0)).is_cyan()
    assert not cls((100.0, 0.0, 100.0)).is_magenta()
    assert not cls((100.0, 100.0, 0.0)).is_yellow()


def test_secondary_predicates_hold_for_infinite_pairs():
    inf = math.inf
    assert Color3D((0.0, inf, inf)).is_cyan()
    assert Color3D((inf, 0.0, inf)).is_magenta()
    assert Color3D((inf, inf, 0.0)).is_yellow()
    assert not Color3D((math.nan, inf, inf)).is_cyan()
    assert not Color3D((inf, math.nan, inf)).is_magenta()
    assert not Color3D((inf, inf, math.nan)).is_yellow()


def test_secondary_predicate_terms_at_threshold():
    # cyan: is_green(1, 0.5) and is_blue(1, 0.5)
    assert Color3D((0.0, 1.0, 0.5)).is_green(1.0, 0.5)
    assert not Color3D((0.0, 1.0, 0.51)).is_green(1.0, 0.5)
    assert Color3D((0.0, 0.5, 1.0)).is_blue(1.0, 0.5)
    assert not Color3D((0.01, 0.5, 1.0)).is_blue(1.0, 0.5)
    # magenta: is_red(1, 0.5) and is_blue(0.5, 1)
    assert Color3D((1.5, 0.5, 1.0)).is_red(1.0, 0.5)
    assert not Color3D((1.5, 0.5, 1.01)).is_red(1.0, 0.5)
    assert Color3D((1.0, 0.5, 1.5)).is_blue(0.5, 1.0)
    assert not Color3D((1.0, 0.51, 1.5)).is_blue(0.5, 1.0)
    # yellow: is_red(0.5, 1) and is_green(0.5, 1)
    assert Color3D((1.5, 1.0, 0.5)).is_red(0.5, 1.0)
    assert not Color3D((1.5, 1.01, 0.5)).is_red(0.5, 1.0)
    assert Color3D((1.0, 1.5, 0.5)).is_green(0.5, 1.0)
    assert not Color3D((1.0, 1.5, 0.5)).is_green(0.51, 1.0)
    assert not Color3D((1.0, 1.5, math.nan)).is_green(0.5, 1.0)


def test_gray_predicates():
    assert Color3F(0.0).is_black()
    assert Color3F(0.3).is_grayscale()
    assert not Color3F((0.3, 0.3, 0.31)).is_grayscale()
    assert Color3F(1.0).is_white()
    assert Color3F(2.0).is_white()
    assert not Color3F(0.99).is_white()


def test_pack_and_unpack():
    color = Color4F.from_ints(10, 20, 30, 40)
    word = color.pack(PackedIntComponentOrder.ARGB)
    assert word == 40 << 24 | 10 << 16 | 20 << 8 | 30
    assert Color4F.unpack(word, PackedIntComponentOrder.ARGB) == color
    assert Color3F.from_ints(10, 20, 30).pack() == 255 << 24 | 10 << 16 | 20 << 8 | 30
    assert Color4F.unpack(Color3F.from_ints(1, 2, 3).pack(PackedIntComponentOrder.RGB), PackedIntComponentOrder.RGB).a == 1.0


def test_array_of():
    colors = Color3F.array_of(3)
    assert colors == [Color3F.BLACK] * 3
    assert Color3F.array_of(2, lambda: Color3F.RED) == [Color3F.RED, Color3F.RED]
    assert Color3F.array_of(0) == []
    with pytest.raises(ValueError):
        Color3F.array_of(-1)
    with pytest.raises(TypeError):
        Color3F.array_of(1, lambda: None)


def test_array_random():
    colors = Color4D.array_random(5, np.random.default_rng(7))
    assert len(colors) == 5
    for color in colors:
        assert all(0.0 <= c <= 1.0 for c in color.value[:3])
        assert color.a == 1.0


def test_array_read():
    colors = Color3F.array_read(bytes([255, 0, 0, 0, 0, 255]), ArrayComponentOrder.RGB)
    assert colors == [Color3F.RED, Color3F.BLUE]
    colors = Color4F.array_read([0, 255, 0, 0], ArrayComponentOrder.ARGB)
    assert colors == [Color4F((1.0, 0.0, 0.0, 0.0))]
    with pytest.raises(ValueError):
        Color3F.array_read([1, 2, 3, 4], ArrayComponentOrder.RGB)


def test_array_unpack():
    words = [Color3F.RED.pack(), Color3F.GREEN.pack()]
    assert Color3F.array_unpack(words) == [Color3F.RED, Color3F.GREEN]


def test_binary_round_trip():
    stream = io.BytesIO()
    colors = [Color3F((0.1, 0.2, 0.3)), Color3F((math.nan, -0.0, math.inf))]
    for color in colors:
        color.write(stream)
    assert len(stream.getvalue()) == 2 * 3 * 4

    stream.seek(0)
    assert [Color3F.read(stream) for _ in colors] == colors


def test_binary_layout_is_big_endian():
    stream = io.BytesIO()
    Color4D((1.0, 0.0, 0.0, 0.5)).write(stream)
    data = stream.getvalue()
    assert len(data) == 4 * 8
    assert data[:8] == bytes([0x3F, 0xF0, 0, 0, 0, 0, 0, 0])


def test_binary_short_read_raises():
    with pytest.raises(EOFError):
        Color3D.read(io.BytesIO(b"\x00" * 10))


def test_variant_registry():
    assert get_color_class(3, Precision.FLOAT32) is Color3F
    assert get_color_class(4, "float64") is Color4D
    with pytest.raises(ValueError):
        get_color_class(5, Precision.FLOAT32)
    with pytest.raises(ValueError):
        get_color_class(3, "float16")


def test_variant_conversion():
    color = Color4D((0.1, 0.2, 0.3, 0.4))
    assert color.without_alpha() == Color3D((0.1, 0.2, 0.3))
    assert color.to_precision(Precision.FLOAT32) == Color4F((0.1, 0.2, 0.3, 0.4))
    assert Color3F(0.5).with_alpha(0.25) == Color4F((0.5, 0.5, 0.5, 0.25))
    assert color.convert(3, Precision.FLOAT32) == Color3F((0.1, 0.2, 0.3))
    assert color.convert() is color
    assert convert_color((0.1, 0.2, 0.3), 4, Precision.FLOAT64) == Color4D((0.1, 0.2, 0.3, 1.0))


def test_named_colors():
    assert Color3F.RED.value == (1.0, 0.0, 0.0)
    assert Color4D.WHITE.value == (1.0, 1.0, 1.0, 1.0)
    assert Color4F.TRANSPARENT.a == 0.0
    assert Color3D.GRAY_0_50.value == (0.5, 0.5, 0.5)
    assert not hasattr(Color3F, "TRANSPARENT")
    assert not hasattr(Color4F, "AU_METALLIC")


def test_iteration_and_repr():
    color = Color4F((0.5, 0.25, 0.0, 1.0))
    assert list(color) == [0.5, 0.25, 0.0, 1.0]
    assert len(color) == 4
    assert repr(color).startswith("Color4F(+0.5000000000")
