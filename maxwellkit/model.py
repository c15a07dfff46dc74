"""Geometry-tag to material and boundary-condition bookkeeping for a mesh."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .material import Material
from .types import BdrCond, FieldType, GeomTag

BoundaryMarker = list

_INTERIOR_CAPABLE = (BdrCond.PEC, BdrCond.PMC, BdrCond.SMA)


class MeshLike(Protocol):
    """What the model needs to know about a mesh.

    ``bdr_attributes`` lists the boundary attributes present in the mesh.
    ``face_to_bdr_element`` maps each face index to its boundary element
    index, or to -1 for faces that are not boundary elements.
    """

    bdr_attributes: Sequence[int]
    face_to_bdr_element: Sequence[int]


@dataclass
class GeomTagToBoundaryInfo:
    """Boundary conditions on exterior and interior boundaries, keyed by tag."""

    boundaries: dict[GeomTag, BdrCond] = field(default_factory=dict)
    interior_boundaries: dict[GeomTag, BdrCond] = field(default_factory=dict)


@dataclass
class GeomTagToMaterialInfo:
    """Materials of domains and of boundaries, keyed by geometry tag."""

    materials: dict[GeomTag, Material] = field(default_factory=dict)
    boundary_materials: dict[GeomTag, Material] = field(default_factory=dict)


def _find(values: Sequence[int], target: int) -> int:
    try:
        return list(values).index(target)
    except ValueError:
        return -1


class Model:
    """A mesh with its materials and boundary-condition markers."""

    def __init__(
        self,
        mesh: MeshLike,
        material_info: GeomTagToMaterialInfo | None = None,
        boundary_info: GeomTagToBoundaryInfo | None = None,
    ) -> None:
        material_info = material_info or GeomTagToMaterialInfo()
        boundary_info = boundary_info or GeomTagToBoundaryInfo()
        self._mesh = mesh

        if material_info.materials:
            self._materials = dict(material_info.materials)
        else:
            self._materials = {1: Material(1.0, 1.0, 0.0)}

        self._markers: dict[tuple[BdrCond, bool], BoundaryMarker] = {}
        self._tfsf_marker: BoundaryMarker = []
        self._face_to_geom_tag: dict[int, GeomTag] = {}

        f2bdr = list(mesh.face_to_bdr_element)
        for tag in boundary_info.boundaries:
            self._face_to_geom_tag.setdefault(_find(f2bdr, tag - 1), tag)
        self._boundaries = dict(boundary_info.boundaries)

        self._interior_boundaries: dict[GeomTag, BdrCond] = {}
        for tag, cond in boundary_info.interior_boundaries.items():
            if cond in _INTERIOR_CAPABLE:
                self._face_to_geom_tag.setdefault(_find(f2bdr, tag - 1), tag)
                self._interior_boundaries.setdefault(tag, cond)

        self._assemble_markers(self._boundaries, is_interior=False)
        self._assemble_markers(self._interior_boundaries, is_interior=True)

        self._boundary_to_marker: dict[BdrCond, BoundaryMarker] = {}
        self._interior_boundary_to_marker: dict[BdrCond, BoundaryMarker] = {}
        for cond in _INTERIOR_CAPABLE:
            exterior = self._markers.get((cond, False), [])
            if exterior:
                self._boundary_to_marker[cond] = exterior
            interior = self._markers.get((cond, True), [])
            if interior:
                self._interior_boundary_to_marker[cond] = interior

        self._tfsf_to_marker: dict[BdrCond, BoundaryMarker] = {}
        self._interior_source_to_marker: dict[BdrCond, BoundaryMarker] = {}

    @property
    def mesh(self) -> MeshLike:
        return self._mesh

    @property
    def boundary_to_marker(self) -> dict[BdrCond, BoundaryMarker]:
        return self._boundary_to_marker

    @property
    def interior_boundary_to_marker(self) -> dict[BdrCond, BoundaryMarker]:
        return self._interior_boundary_to_marker

    @property
    def total_field_scattered_field_to_marker(self) -> dict[BdrCond, BoundaryMarker]:
        return self._tfsf_to_marker

    @property
    def interior_source_to_marker(self) -> dict[BdrCond, BoundaryMarker]:
        return self._interior_source_to_marker

    @property
    def face_to_geom_tag(self) -> dict[int, GeomTag]:
        return self._face_to_geom_tag

    def _assemble_markers(self, tag_to_cond: dict[GeomTag, BdrCond], is_interior: bool) -> None:
        size = max(self._mesh.bdr_attributes, default=0)
        for tag, cond in tag_to_cond.items():
            if tag <= 0:
                raise ValueError("geomTag <= 0 in GeomTagToTypeMap assembly.")
            marker = self.get_marker(cond, is_interior)
            if not marker:
                marker.extend([0] * size)
            if tag > len(marker):
                raise IndexError(f"Geometry tag {tag} exceeds the boundary attributes of the mesh.")
            marker[tag - 1] = 1

    def get_marker(self, bdr_cond: BdrCond, is_interior: bool) -> BoundaryMarker:
        """Return the (mutable) marker list for a boundary condition."""
        if bdr_cond == BdrCond.TotalFieldIn:
            return self._tfsf_marker
        if bdr_cond in _INTERIOR_CAPABLE:
            return self._markers.setdefault((BdrCond(bdr_cond), bool(is_interior)), [])
        raise ValueError("Wrong BdrCond in getMarkerForBdrCond.")

    def initialise_geom_tag_vector(self) -> list[float]:
        """Zero vector with one entry per geometry tag up to the largest one."""
        size = max((tag for tag in self._materials), default=0)
        size = max(size, 0)
        if size <= 0:
            raise ValueError("Materials must use positive geometry tags.")
        return [0.0] * size

    def eps_mu_piecewise_vector(self, field_type: FieldType) -> list[float]:
        """Permittivity (E) or permeability (H) per geometry tag."""
        res = self.initialise_geom_tag_vector()
        for tag, mat in self._materials.items():
            if field_type == FieldType.E:
                res[tag - 1] = mat.permittivity
            elif field_type == FieldType.H:
                res[tag - 1] = mat.permeability
        return res

    def sigma_piecewise_vector(self) -> list[float]:
        """Conductivity per geometry tag."""
        res = self.initialise_geom_tag_vector()
        for tag, mat in self._materials.items():
            res[tag - 1] = mat.conductivity
        return res

    def number_of_materials(self) -> int:
        return len(self._materials)

    def number_of_boundary_materials(self) -> int:
        return len(self._boundaries)