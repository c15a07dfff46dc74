"""Shared enumerations and small records used across the solver components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

Time = float
GeomTag = int
FaceId = int
ElementId = int
Attribute = int


class FieldType(IntEnum):
    """Electric or magnetic field."""

    E = 0
    H = 1

    def alternate(self) -> "FieldType":
        """Return the other field type."""
        return FieldType.H if self is FieldType.E else FieldType.E


class FluxType(Enum):
    """Numerical flux used between elements."""

    Centered = "Centered"
    Upwind = "Upwind"


class BdrCond(IntEnum):
    """Boundary condition kinds; values double as geometry attributes."""

    NONE = 0
    PEC = 1
    PMC = 2
    SMA = 3
    SurfaceCond = 4
    NearToFarField = 201
    TotalFieldIn = 301


class SubMeshingMarkers(IntEnum):
    """Element attributes used to tag elements before sub-meshing."""

    TotalField = 1000
    ScatteredField = 2000
    Global_SubMesh = 3000
    NearToFarField = 4000


class Direction(IntEnum):
    """Cartesian component."""

    X = 0
    Y = 1
    Z = 2


@dataclass
class FieldsForFP:
    """All six field components sampled at one point."""

    Ex: float = 0.0
    Ey: float = 0.0
    Ez: float = 0.0
    Hx: float = 0.0
    Hy: float = 0.0
    Hz: float = 0.0