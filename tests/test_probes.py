import math

from maxwellkit.probes import (
    ExporterProbe,
    FieldProbe,
    NearToFarFieldProbe,
    PointProbe,
    Probes,
)
from maxwellkit.types import Direction, FieldsForFP, FieldType


def _probe():
    return PointProbe(FieldType.E, Direction.Y, [0.5])


def test_defaults_match_source():
    assert ExporterProbe().name == "MaxwellView"
    assert ExporterProbe().vis_steps == 10
    assert NearToFarFieldProbe().name == "NearToFarField"
    assert NearToFarFieldProbe().tags == []


def test_empty_movie_frames():
    p = _probe()
    assert p.find_frame_with_max() == (0.0, -math.inf)
    assert p.find_frame_with_min() == (0.0, math.inf)


def test_max_and_min_frames():
    p = _probe()
    for t, f in [(0.0, 0.2), (1.0, 1.5), (2.0, -0.7), (3.0, 0.1)]:
        p.add_field_to_movies(t, f)
    assert p.find_frame_with_max() == (1.0, 1.5)
    assert p.find_frame_with_min() == (2.0, -0.7)


def test_ties_keep_earliest_time_regardless_of_insertion_order():
    p = _probe()
    p.add_field_to_movies(3.0, 2.0)
    p.add_field_to_movies(1.0, 2.0)
    assert p.find_frame_with_max() == (1.0, 2.0)


def test_repeated_time_keeps_first_value():
    p = _probe()
    p.add_field_to_movies(1.0, 0.3)
    p.add_field_to_movies(1.0, 9.0)
    assert p.field_movie == {1.0: 0.3}


def test_field_probe_records_fields():
    fp = FieldProbe([0.0, 1.0])
    first = FieldsForFP(Ex=1.0)
    fp.add_fields_to_movies(0.5, first)
    fp.add_fields_to_movies(0.5, FieldsForFP(Ex=2.0))
    assert fp.field_movies == {0.5: first}


def test_probes_lists_are_independent():
    a, b = Probes(), Probes()
    a.point_probes.append(_probe())
    assert len(a.point_probes) == 1
    assert b.point_probes == []