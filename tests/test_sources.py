import math

import pytest

from maxwellkit.sources import InitialField, Planewave, Sources, cross_product
from maxwellkit.types import Direction, FieldType


def gaussian(x):
    return math.exp(-(x[0] ** 2) / 2.0)


def test_cross_product_basis():
    assert cross_product((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)


def test_cross_product_anticommutes():
    a, b = (1.0, 2.0, 3.0), (-4.0, 0.5, 2.0)
    assert cross_product(a, b) == tuple(-v for v in cross_product(b, a))
    assert sum(x * y for x, y in zip(cross_product(a, b), a)) == pytest.approx(0.0)


def test_cross_product_requires_three_components():
    with pytest.raises(ValueError):
        cross_product((1.0, 0.0), (0.0, 1.0))


def test_initial_field_is_centred_and_polarised():
    src = InitialField(gaussian, FieldType.E, (0.0, 1.0, 0.0), (2.0,))
    assert src.eval((2.0,), 0.0, FieldType.E, Direction.Y) == pytest.approx(1.0)
    assert src.eval((2.0,), 0.0, FieldType.E, Direction.X) == 0.0
    assert src.eval((3.0,), 0.0, FieldType.E, Direction.Y) == pytest.approx(gaussian((1.0,)))
    assert src.eval((2.0,), 0.0, FieldType.H, Direction.Y) == 0.0


def test_initial_field_dimension_mismatch():
    src = InitialField(gaussian, FieldType.E, (0.0, 0.0, 1.0), (0.0, 0.0))
    with pytest.raises(ValueError):
        src.eval((0.0,), 0.0, FieldType.E, Direction.Z)


def test_initial_field_requires_unit_polarization():
    with pytest.raises(ValueError):
        InitialField(gaussian, FieldType.E, (0.0, 2.0, 0.0), (0.0,))


def test_planewave_translation_invariance():
    wave = Planewave(gaussian, (0.0, 1.0, 0.0), (1.0, 0.0, 0.0), FieldType.E)
    a = wave.eval((0.3,), 0.1, FieldType.E, Direction.Y)
    b = wave.eval((0.8,), 0.6, FieldType.E, Direction.Y)
    assert a == pytest.approx(b)


def test_planewave_magnetic_component_from_electric():
    wave = Planewave(gaussian, (0.0, 1.0, 0.0), (1.0, 0.0, 0.0), FieldType.E)
    ey = wave.eval((0.4, 0.2), 0.1, FieldType.E, Direction.Y)
    assert wave.eval((0.4, 0.2), 0.1, FieldType.H, Direction.Z) == pytest.approx(ey)
    assert wave.eval((0.4, 0.2), 0.1, FieldType.H, Direction.Y) == 0.0


def test_planewave_electric_component_from_magnetic():
    wave = Planewave(gaussian, (0.0, 0.0, 1.0), (1.0, 0.0, 0.0), FieldType.H)
    hz = wave.eval((0.5, 0.0, 0.0), 0.2, FieldType.H, Direction.Z)
    assert wave.eval((0.5, 0.0, 0.0), 0.2, FieldType.E, Direction.Y) == pytest.approx(hz)


def test_planewave_rejects_long_positions():
    wave = Planewave(gaussian, (0.0, 1.0, 0.0), (1.0, 0.0, 0.0), FieldType.E)
    with pytest.raises(ValueError):
        wave.eval((0.0, 0.0, 0.0, 0.0), 0.0, FieldType.E, Direction.Y)


def test_planewave_requires_unit_propagation():
    with pytest.raises(ValueError):
        Planewave(gaussian, (0.0, 1.0, 0.0), (2.0, 0.0, 0.0), FieldType.E)


def test_sources_collection():
    sources = Sources()
    first = InitialField(gaussian, FieldType.E, (1.0, 0.0, 0.0), (0.0,))
    second = Planewave(gaussian, (0.0, 1.0, 0.0), (1.0, 0.0, 0.0), FieldType.E)
    assert sources.add(first) is first
    sources.add(second)
    assert len(sources) == 2
    assert list(sources) == [first, second]
    assert list(Sources(sources)) == [first, second]