"""Helpers for time-step estimation from element eigenvalues."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Direction, FieldType

NUMBER_OF_FIELD_COMPONENTS = 2
NUMBER_OF_MAX_DIMENSIONS = 3


def highest_modulus(eigenvalues: Iterable[complex]) -> complex:
    """Return the first eigenvalue of largest modulus, or 0j if there are none."""
    res = 0j
    for ev in eigenvalues:
        if abs(res) < abs(ev):
            res = complex(ev)
    return res


def field_offset(field_type: FieldType, direction: Direction, ndofs: int) -> int:
    """Row/column offset of a field component block in the element operator."""
    try:
        ft = FieldType(field_type)
    except ValueError:
        raise ValueError(f"Incorrect FieldType: {field_type!r}.") from None
    try:
        d = Direction(direction)
    except ValueError:
        raise ValueError(f"Incorrect Direction for FieldType {ft.name}: {direction!r}.") from None
    return (NUMBER_OF_MAX_DIMENSIONS * int(ft) + int(d)) * ndofs