import pytest

from rigsmith.vec3 import Vec3, Vec3Type


def test_add_then_subtract_round_trips():
    a = Vec3(1.5, -2.0, 7.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_scalar_multiply_then_divide_round_trips():
    v = Vec3(3.0, -6.0, 9.0)
    assert (v * 2.0) / 2.0 == v


def test_negation_cancels():
    v = Vec3(1.0, -2.0, 3.0)
    assert v + (-v) == Vec3()


def test_componentwise_product_matches_dot():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    assert (a * b).components_sum() == a.dot(b)


def test_components_sum():
    assert Vec3(1.0, 2.0, 3.0).components_sum() == 6.0


def test_length_of_three_four_five():
    assert Vec3(3.0, 4.0, 0.0).length() == 5.0


def test_normalized_has_unit_length():
    assert Vec3(2.0, -3.0, 6.0).normalized().length() == pytest.approx(1.0)


def test_normalized_zero_vector_is_nan():
    result = Vec3().normalized()
    assert [str(c) for c in result] == ["nan", "nan", "nan"]


def test_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_triple_product_matches_definition():
    a = Vec3(1.0, 0.0, 2.0)
    b = Vec3(0.0, 3.0, 1.0)
    c = Vec3(2.0, 1.0, 0.0)
    assert a.triple(b, c) == pytest.approx(a.dot(b.cross(c)))
    assert a.triple(b, b) == pytest.approx(0.0)


def test_to_gl_reorders_axes():
    assert Vec3(1.0, 2.0, 3.0).to_gl() == (2.0, 3.0, -1.0)


def test_to_gl_size_is_absolute():
    assert all(c >= 0 for c in Vec3(1.0, -2.0, -3.0).to_gl(Vec3Type.SIZE))


def test_gl_round_trip():
    v = Vec3(1.0, -2.0, 3.5)
    assert Vec3.from_gl(v.to_gl()) == v


def test_str_format():
    assert str(Vec3(1.0, 2.5, -3.0)) == "1 2.5 -3"


def test_parse_round_trip():
    v = Vec3(0.25, -8.0, 12.5)
    assert Vec3.parse(str(v)) == v


def test_parse_rejects_short_input():
    with pytest.raises(ValueError):
        Vec3.parse("1 2")


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        Vec3.parse("1 two 3")