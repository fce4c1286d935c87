import pytest

from objmesh.normalize import normalize_positions, scale_coefficient

POINTS = [(1.0, 2.0, 3.0), (5.0, -2.0, 4.0), (3.0, 6.0, -1.0), (2.0, 0.0, 0.0)]


def _bounds(points):
    lo = [min(p[a] for p in points) for a in range(3)]
    hi = [max(p[a] for p in points) for a in range(3)]
    return lo, hi


def test_scale_coefficient_uses_largest_dimension():
    assert scale_coefficient((2.0, 4.0, 1.0), 8.0) == pytest.approx(2.0)


def test_scale_coefficient_zero_dimensions_raise():
    with pytest.raises(ValueError):
        scale_coefficient((0.0, 0.0, 0.0), 3.0)


def test_no_center_no_rescale_keeps_positions():
    result = normalize_positions(POINTS, False, False, 10.0)
    assert result.positions == POINTS
    assert result.scale == 1.0
    assert not result.centered and not result.rescaled


def test_dimensions_match_bounding_box():
    result = normalize_positions(POINTS, False, False, 10.0)
    lo, hi = _bounds(POINTS)
    assert result.dimensions == pytest.approx(tuple(h - l for l, h in zip(lo, hi)))


def test_center_offset_is_box_center():
    result = normalize_positions(POINTS, True, False, 10.0)
    lo, hi = _bounds(POINTS)
    assert result.center_offset == pytest.approx(tuple((l + h) / 2 for l, h in zip(lo, hi)))


def test_centering_puts_box_around_origin():
    result = normalize_positions(POINTS, True, False, 10.0)
    lo, hi = _bounds(result.positions)
    for a in range(3):
        assert lo[a] + hi[a] == pytest.approx(0.0)


def test_rescale_fits_largest_dimension_to_size():
    result = normalize_positions(POINTS, True, True, 7.5)
    assert max(result.dimensions) == pytest.approx(7.5)
    lo, hi = _bounds(result.positions)
    assert tuple(h - l for l, h in zip(lo, hi)) == pytest.approx(result.dimensions)


def test_rescale_without_center_scales_from_origin():
    result = normalize_positions(POINTS, False, True, 4.0)
    for original, scaled in zip(POINTS, result.positions):
        assert scaled == pytest.approx(tuple(c * result.scale for c in original))
    assert result.rescaled and not result.centered


def test_unit_cube_to_size_two():
    cube = [(x, y, z) for x in (0.0, 1.0) for y in (0.0, 1.0) for z in (0.0, 1.0)]
    result = normalize_positions(cube, True, True, 2.0)
    assert result.scale == pytest.approx(2.0)
    assert set(result.positions) == {
        (x, y, z) for x in (-1.0, 1.0) for y in (-1.0, 1.0) for z in (-1.0, 1.0)
    }


def test_empty_positions_raise():
    with pytest.raises(ValueError):
        normalize_positions([], True, True, 1.0)


def test_single_point_rescale_raises():
    with pytest.raises(ValueError):
        normalize_positions([(1.0, 1.0, 1.0)], True, True, 1.0)