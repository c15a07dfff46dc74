import pytest

from maxwellkit.types import (
    BdrCond,
    Direction,
    FieldsForFP,
    FieldType,
    FluxType,
    SubMeshingMarkers,
)


def test_alternate_swaps_field():
    assert FieldType.E.alternate() is FieldType.H
    assert FieldType.H.alternate() is FieldType.E


def test_alternate_is_involution():
    assert FieldType.E.alternate().alternate() is FieldType.E
    assert FieldType.H.alternate().alternate() is FieldType.H


def test_bdrcond_attribute_values():
    assert BdrCond.NearToFarField == 201
    assert BdrCond.TotalFieldIn == 301
    assert BdrCond(1) is BdrCond.PEC


@pytest.mark.parametrize(
    "value,name",
    [(1000, "TotalField"), (2000, "ScatteredField"), (3000, "Global_SubMesh"), (4000, "NearToFarField")],
)
def test_submeshing_markers_values(value, name):
    assert SubMeshingMarkers(value).name == name


@pytest.mark.parametrize("index,name", [(0, "X"), (1, "Y"), (2, "Z")])
def test_direction_indices_are_consecutive(index, name):
    assert Direction(index).name == name


def test_flux_type_members():
    names = {FluxType(member.value).name for member in FluxType}
    assert names == {"Centered", "Upwind"}


def test_fields_for_fp_equality():
    a = FieldsForFP(Ex=1.0, Hz=2.0)
    assert a == FieldsForFP(1.0, 0.0, 0.0, 0.0, 0.0, 2.0)
    assert a.Ey == 0.0