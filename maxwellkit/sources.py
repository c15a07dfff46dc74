"""Field sources: initial fields and plane waves."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence

from .constants import SPEED_OF_LIGHT
from .types import Direction, FieldType

TOLERANCE = 10.0 * sys.float_info.epsilon

Magnitude = Callable[[Sequence[float]], float]


def cross_product(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float]:
    """Cross product of two 3-vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("Cross product requires 3-component vectors.")
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _check_unit(vector: Sequence[float], name: str) -> None:
    if abs(1.0 - math.sqrt(sum(v * v for v in vector))) > TOLERANCE:
        raise ValueError(f"{name} must be a unit vector.")


class Source(ABC):
    """A field source evaluated per position, time, field and component."""

    @abstractmethod
    def eval(
        self,
        position: Sequence[float],
        time: float,
        field_type: FieldType,
        direction: Direction,
    ) -> float:
        """Value of the given field component at a position and time."""


class InitialField(Source):
    """A field shape centred at a point, present at the initial time."""

    def __init__(
        self,
        magnitude: Magnitude,
        field_type: FieldType,
        polarization: Sequence[float],
        center: Sequence[float],
        angles: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.magnitude = magnitude
        self.field_type = FieldType(field_type)
        self.polarization = tuple(polarization)
        self.center = tuple(center)
        self.angles = tuple(angles)
        _check_unit(self.polarization, "Polarization")

    def eval(self, position, time, field_type, direction):
        if len(position) != len(self.center):
            raise ValueError("Position and center must have the same dimension.")
        if field_type != self.field_type:
            return 0.0
        shifted = tuple(p - c for p, c in zip(position, self.center))
        return self.magnitude(shifted) * self.polarization[direction]


class Planewave(Source):
    """A plane wave whose magnitude is a function of the retarded time."""

    def __init__(
        self,
        magnitude: Magnitude,
        polarization: Sequence[float],
        propagation: Sequence[float],
        field_type: FieldType,
    ) -> None:
        self.magnitude = magnitude
        self.polarization = tuple(polarization)
        self.propagation = tuple(propagation)
        self.field_type = FieldType(field_type)
        _check_unit(self.polarization, "Polarization")
        _check_unit(self.propagation, "Propagation")

    def _field_polarization(self, field_type: FieldType) -> tuple[float, ...]:
        if field_type == self.field_type:
            return self.polarization
        if self.field_type == FieldType.E:
            return cross_product(self.propagation, self.polarization)
        return cross_product(self.polarization, self.propagation)

    def eval(self, position, time, field_type, direction):
        if len(position) > 3:
            raise ValueError("Position may have at most three components.")
        if field_type not in (FieldType.E, FieldType.H):
            raise ValueError(f"Unknown field type: {field_type!r}.")
        if direction not in (Direction.X, Direction.Y, Direction.Z):
            raise ValueError(f"Unknown direction: {direction!r}.")
        pos = tuple(position) + (0.0,) * (3 - len(position))
        phase_delay = sum(p * k for p, k in zip(pos, self.propagation)) / SPEED_OF_LIGHT
        return self.magnitude((phase_delay - time,)) * self._field_polarization(field_type)[direction]


class Sources:
    """An ordered collection of sources."""

    def __init__(self, sources: Iterable[Source] = ()) -> None:
        self._sources: list[Source] = list(sources)

    def add(self, source: Source) -> Source:
        """Append a source and return it."""
        self._sources.append(source)
        return source

    def __iter__(self) -> Iterator[Source]:
        return iter(self._sources)

    def __len__(self) -> int:
        return len(self._sources)