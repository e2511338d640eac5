import math
import numpy as np
import pytest
from chromacore.colors import (
    Color3F, Color3D, Color4D,
    add, subtract, multiply, divide,
    add_and_multiply, add_multiply_and_divide, add_sample,
    blend, blend_over, maximum, minimum,
    invert, maximum_to_1, minimum_to_0, multiply_and_saturate_negative,
    normalize, normalize_luminance, saturate, sepia, sqrt,
    grayscale_average, grayscale_luminance, grayscale_maximum,
)


def test_operators():
    a = Color3D((0.1, 0.2, 0.3))
    b = Color3D((0.5, 0.4, 0.3))
    assert np.allclose((a + b).value, (0.6, 0.6, 0.6))
    assert np.allclose((b - a).value, (0.4, 0.2, 0.0))
    assert np.allclose((a * b).value, (0.05, 0.08, 0.09))
    assert np.allclose((b / a).value, (5.0, 2.0, 1.0))
    assert np.allclose((a * 2).value, (0.2, 0.4, 0.6))
    assert np.allclose((-a).value, (-0.1, -0.2, -0.3))


def test_reflected_operators():
    a = Color3D((0.25, 0.5, 1.0))
    assert np.allclose((1 - a).value, (0.75, 0.5, 0.0))
    assert np.allclose((2 * a).value, (0.5, 1.0, 2.0))
    assert np.allclose((1.0 / a).value, (4.0, 2.0, 1.0))
    assert np.allclose((1 + a).value, (1.25, 1.5, 2.0))


def test_operands_are_not_mutated():
    a = Color3D((0.1, 0.2, 0.3))
    before = a.value
    _ = a + a
    _ = -a
    assert a.value == before


def test_float32_arithmetic_rounds_like_float32():
    result = Color3F(0.1) + Color3F(0.2)
    expected = float(np.float32(0.1) + np.float32(0.2))
    assert result.value == (expected, expected, expected)


def test_combining_operations_include_alpha():
    a = Color4D((0.1, 0.2, 0.3, 0.5))
    assert (a + 0.25).a == 0.75
    assert (a * 2.0).a == 1.0
    assert maximum(a, Color4D((0.0, 0.0, 0.0, 0.9))).a == 0.9


def test_mixed_variants_raise_type_error():
    with pytest.raises(TypeError):
        Color3F(0.5) + Color3D(0.5)
    with pytest.raises(TypeError):
        add(Color3D(0.5), Color4D(0.5))
    with pytest.raises(TypeError):
        add(Color3D(0.5), None)
    with pytest.raises(TypeError):
        add(Color3D(0.5), "red")


def test_subtract_two_operands():
    result = subtract(Color3D(1.0), Color3D(0.25), 0.5)
    assert np.allclose(result.value, (0.25, 0.25, 0.25))


def test_multiply_factor_count():
    a = Color3D((1.0, 2.0, 3.0))
    assert np.allclose(multiply(a, a, a, 0.5).value, (0.5, 4.0, 13.5))
    with pytest.raises(TypeError):
        multiply(a)
    with pytest.raises(TypeError):
        multiply(a, 1, 2, 3, 4)


def test_divide_by_zero_gives_zero():
    assert divide(Color3D((1.0, 2.0, 3.0)), 0.0) == Color3D(0.0)
    result = divide(Color3D((1.0, 2.0, 3.0)), Color3D((1.0, 0.0, 2.0)))
    assert result.value == (1.0, 0.0, 1.5)
    assert divide(Color3D(0.0), Color3D(0.0)) == Color3D(0.0)


def test_add_and_multiply():
    result = add_and_multiply(Color3D(0.1), Color3D(2.0), Color3D(3.0))
    assert np.allclose(result.value, (6.1, 6.1, 6.1))
    result = add_and_multiply(Color3D(0.1), Color3D(2.0), Color3D(3.0), 0.5)
    assert np.allclose(result.value, (3.1, 3.1, 3.1))


def test_add_multiply_and_divide():
    result = add_multiply_and_divide(Color3D(0.1), Color3D(2.0), Color3D(3.0), 2.0)
    assert np.allclose(result.value, (3.1, 3.1, 3.1))
    result = add_multiply_and_divide(
        Color3D(0.0), Color3D(2.0), Color3D(3.0), 4.0, scalar_multiply=2.0, color_c=Color3D(0.5)
    )
    assert np.allclose(result.value, (1.5, 1.5, 1.5))


def test_add_sample_running_mean():
    samples = [Color3D((0.2, 0.4, 0.6)), Color3D((0.4, 0.0, 1.0)), Color3D((0.6, 0.2, 0.2))]
    mean = Color3D(0.0)
    for i, sample in enumerate(samples, start=1):
        mean = add_sample(mean, sample, i)
    assert np.allclose(mean.value, (0.4, 0.2, 0.6))


def test_add_sample_rejects_non_positive_count():
    with pytest.raises(ValueError):
        add_sample(Color3D(0.0), Color3D(1.0), 0)


def test_blend():
    a = Color3D(0.0)
    b = Color3D(1.0)
    assert np.allclose(blend(a, b).value, (0.5, 0.5, 0.5))
    assert np.allclose(blend(a, b, 0.25).value, (0.25, 0.25, 0.25))
    assert np.allclose(blend(a, b, (0.0, 0.5, 1.0)).value, (0.0, 0.5, 1.0))
    with pytest.raises(ValueError):
        blend(a, b, (0.0, 0.5))


def test_blend_over():
    top = Color4D((1.0, 0.0, 0.0, 0.5))
    bottom = Color4D((0.0, 0.0, 1.0, 1.0))
    assert np.allclose(blend_over(top, bottom).value, (0.5, 0.0, 0.5, 1.0))


def test_blend_over_transparent_is_zero():
    result = blend_over(Color4D((1.0, 1.0, 1.0, 0.0)), Color4D((1.0, 1.0, 1.0, 0.0)))
    assert result.value == (0.0, 0.0, 0.0, 0.0)


def test_blend_over_requires_alpha():
    with pytest.raises(TypeError):
        blend_over(Color3D(0.5), Color3D(0.5))


def test_minimum_and_maximum():
    a = Color3D((0.1, 0.5, 0.9))
    b = Color3D((0.4, 0.4, 0.4))
    assert maximum(a, b).value == (0.4, 0.5, 0.9)
    assert minimum(a, b).value == (0.1, 0.4, 0.4)


def test_transforms_keep_alpha():
    color = Color4D((0.25, 0.5, 1.0, 0.3))
    assert np.allclose(invert(color).value, (0.75, 0.5, 0.0, 0.3))
    assert (-color).a == 0.3
    assert saturate(Color4D((2.0, -1.0, 0.5, 3.0))).value == (1.0, 0.0, 0.5, 3.0)


def test_saturate_edges_in_either_order():
    color = Color3D((2.0, -1.0, 0.5))
    assert saturate(color, 1.0, 0.0).value == (1.0, 0.0, 0.5)
    assert saturate(color, 0.25, 0.75).value == (0.75, 0.25, 0.5)


def test_maximum_to_1_and_minimum_to_0():
    assert np.allclose(maximum_to_1(Color3D((2.0, 1.0, 0.5))).value, (1.0, 0.5, 0.25))
    assert maximum_to_1(Color3D(0.5)) == Color3D(0.5)
    assert np.allclose(minimum_to_0(Color3D((-0.5, 0.0, 0.5))).value, (0.0, 0.5, 1.0))


def test_multiply_and_saturate_negative():
    result = multiply_and_saturate_negative(Color3D((-1.0, 0.5, 1.0)), 2.0)
    assert result.value == (0.0, 1.0, 2.0)


def test_normalize():
    assert np.allclose(normalize(Color3D((1.0, 1.0, 2.0))).value, (0.25, 0.25, 0.5))
    tiny = Color3D(1e-9)
    assert normalize(tiny) is tiny


def test_normalize_luminance():
    color = Color3D(0.5)
    assert np.allclose(normalize_luminance(color).value, (1.0, 1.0, 1.0))
    assert normalize_luminance(Color4D((0.0, 0.0, 0.0, 0.2))).value == (1.0, 1.0, 1.0, 0.2)


def test_sepia():
    result = sepia(Color3D(1.0))
    assert np.allclose(result.value, (1.351, 1.203, 0.937))


def test_sqrt():
    result = sqrt(Color3D((4.0, 0.25, -1.0)))
    assert result.value[:2] == (2.0, 0.5)
    assert math.isnan(result.value[2])


def test_grayscale():
    color = Color4D((0.2, 0.4, 0.9, 0.5))
    assert np.allclose(grayscale_average(color).value, (0.5, 0.5, 0.5, 0.5))
    assert grayscale_maximum(color).value == (0.9, 0.9, 0.9, 0.5)
    luminance = color.luminance
    assert np.allclose(grayscale_luminance(color).value[:3], (luminance,) * 3)
