"""Probe descriptions and recorded field time series."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .types import Direction, FieldsForFP, FieldType

Point = list


@dataclass
class ExporterProbe:
    """Periodic export of the full solution."""

    name: str = "MaxwellView"
    vis_steps: int = 10


@dataclass
class NearToFarFieldProbe:
    """Export of fields on tagged surfaces for near-to-far-field transforms."""

    name: str = "NearToFarField"
    steps: int = 10
    tags: list[int] = field(default_factory=list)


@dataclass
class PointProbe:
    """Records one component of one field at a point over time."""

    field_type: FieldType
    direction: Direction
    point: list[float]
    field_movie: dict[float, float] = field(default_factory=dict)

    def add_field_to_movies(self, time: float, field: float) -> None:
        """Record a value; an already recorded time keeps its first value."""
        self.field_movie.setdefault(time, field)

    def _frames(self):
        return sorted(self.field_movie.items())

    def find_frame_with_max(self) -> tuple[float, float]:
        """Earliest (time, value) with the largest value; (0.0, -inf) if empty."""
        res = (0.0, -math.inf)
        for t, f in self._frames():
            if res[1] < f:
                res = (t, f)
        return res

    def find_frame_with_min(self) -> tuple[float, float]:
        """Earliest (time, value) with the smallest value; (0.0, inf) if empty."""
        res = (0.0, math.inf)
        for t, f in self._frames():
            if res[1] > f:
                res = (t, f)
        return res


@dataclass
class FieldProbe:
    """Records all field components at a point over time."""

    point: list[float]
    field_movies: dict[float, FieldsForFP] = field(default_factory=dict)

    def add_fields_to_movies(self, time: float, fields: FieldsForFP) -> None:
        """Record fields; an already recorded time keeps its first record."""
        self.field_movies.setdefault(time, fields)


@dataclass
class Probes:
    """All probes of a problem."""

    point_probes: list[PointProbe] = field(default_factory=list)
    exporter_probes: list[ExporterProbe] = field(default_factory=list)
    field_probes: list[FieldProbe] = field(default_factory=list)
    near_to_far_field_probes: list[NearToFarFieldProbe] = field(default_factory=list)