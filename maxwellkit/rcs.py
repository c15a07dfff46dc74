"""Radar cross section post-processing: frequency transforms and far-field kernels."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from .constants import SPEED_OF_LIGHT_SI, VACUUM_PERMITTIVITY_SI

Phi = float
Theta = float
SphericalAngles = tuple[Phi, Theta]
ComplexVector = list[complex]

_FIELD_NAMES = ("Ex", "Ey", "Ez", "Hx", "Hy", "Hz")
_LOW_MAGNITUDE_TOLERANCE = 1e-2


def _field_name(field: str) -> str:
    name = field.lstrip("/")
    if name.endswith(".gf"):
        name = name[: -len(".gf")]
    return name


class FreqFields:
    """Frequency-domain field components, one complex vector per frequency."""

    def __init__(self, sizes: int) -> None:
        for name in _FIELD_NAMES:
            setattr(self, name, [[] for _ in range(sizes)])

    def components(self) -> dict[str, list[ComplexVector]]:
        """All six components keyed by name."""
        return {name: getattr(self, name) for name in _FIELD_NAMES}

    def append(self, vector: Sequence[complex], field: str, freq: int) -> None:
        """Store a vector for a field ("/Ex.gf" or "Ex") at a frequency index.

        Unknown field names are ignored.
        """
        name = _field_name(field)
        if name in _FIELD_NAMES:
            getattr(self, name)[freq] = list(vector)

    def normalise(self, value: float) -> None:
        """Divide every stored value by ``value``."""
        divisor = float(value)
        for vectors in self.components().values():
            for index, vector in enumerate(vectors):
                vectors[index] = [v / divisor for v in vector]


@dataclass(frozen=True)
class PlaneWaveData:
    """Spread and delay of the incident Gaussian pulse, in seconds."""

    mean: float
    delay: float


@dataclass(frozen=True)
class RCSData:
    """One radar cross section value at a frequency and observation direction."""

    value: float
    frequency: float
    angles: SphericalAngles


def logspace(start: float, stop: float, num: int, base: float = 10.0) -> list[float]:
    """``num`` values from base**start to base**stop, evenly spaced in exponent."""
    if num <= 0:
        return []
    if num == 1:
        raise ValueError("logspace needs at least two points.")
    step = (stop - start) / (num - 1)
    return [base ** (start + i * step) for i in range(num)]


def complex_inner_product(first: Sequence[complex], second: Sequence[complex]) -> complex:
    """Sum of first[i] * conj(second[i])."""
    if len(first) != len(second):
        raise ValueError("Complex Vectors do not have the same sizes.")
    return sum((a * complex(b).conjugate() for a, b in zip(first, second)), 0j)


def _wavenumber(freq: float) -> float:
    return 2.0 * math.pi / (SPEED_OF_LIGHT_SI / freq)


def _phase_2d(x: Sequence[float], freq: float, phi: Phi) -> float:
    return _wavenumber(freq) * (x[0] * math.cos(phi) + x[1] * math.sin(phi))


def _phase_3d(x: Sequence[float], freq: float, angles: SphericalAngles) -> float:
    phi, theta = angles
    return _wavenumber(freq) * (
        x[0] * math.sin(theta) * math.cos(phi)
        + x[1] * math.sin(theta) * math.sin(phi)
        + x[2] * math.cos(theta)
    )


def exp_real_part_2d(x: Sequence[float], freq: float, phi: Phi) -> float:
    """Real part of the 2D far-field phase kernel."""
    return math.cos(_phase_2d(x, freq, phi))


def exp_imag_part_2d(x: Sequence[float], freq: float, phi: Phi) -> float:
    """Imaginary part of the 2D far-field phase kernel."""
    return math.sin(_phase_2d(x, freq, phi))


def exp_real_part_3d(x: Sequence[float], freq: float, angles: SphericalAngles) -> float:
    """Real part of the 3D far-field phase kernel; angles are (phi, theta)."""
    return math.cos(_phase_3d(x, freq, angles))


def exp_imag_part_3d(x: Sequence[float], freq: float, angles: SphericalAngles) -> float:
    """Imaginary part of the 3D far-field phase kernel; angles are (phi, theta)."""
    return math.sin(_phase_3d(x, freq, angles))


def read_time(path: str | Path) -> float:
    """Read the time value on the first line of a time file."""
    try:
        with open(path, encoding="utf-8") as handle:
            line = handle.readline()
    except OSError as exc:
        raise FileNotFoundError(f"File could not be opened: {path}") from exc
    tokens = line.split()
    if not tokens:
        raise ValueError(f"No time value in {path}.")
    return float(tokens[0])


def _data_directories(data_path: str | Path) -> list[Path]:
    return sorted(p for p in Path(data_path).iterdir() if not str(p).endswith("mesh"))


def build_time_vector(data_path: str | Path) -> list[float]:
    """Times in seconds of every exported step under ``data_path``."""
    return [
        read_time(entry / "time.txt") / SPEED_OF_LIGHT_SI
        for entry in _data_directories(data_path)
    ]


def fill_post_data_maps(
    frequencies: Sequence[float], angles: Sequence[SphericalAngles]
) -> dict[SphericalAngles, dict[float, float]]:
    """Zeroed RCS table keyed by observation angles, then by frequency."""
    return {tuple(ang): {f: 0.0 for f in frequencies} for ang in angles}


def build_plane_wave_data(data: Mapping) -> PlaneWaveData:
    """Extract the total-field pulse from a parsed problem description."""
    mean = delay = None
    for source in data.get("sources", []):
        if source.get("type") == "totalField":
            magnitude = source.get("magnitude", {})
            mean = magnitude.get("spread")
            delay = magnitude.get("delay")
    if mean is None or delay is None:
        raise ValueError("Verify PlaneWaveData inputs for RCS normalization term.")
    return PlaneWaveData(mean / SPEED_OF_LIGHT_SI, delay / SPEED_OF_LIGHT_SI)


def evaluate_gaussian_vector(
    time: Sequence[float], delay: float, mean: float
) -> list[float]:
    """Gaussian pulse exp(-0.5 ((t - delay) / mean)^2) at each time."""
    return [math.exp(-0.5 * ((t - delay) / mean) ** 2) for t in time]


def trim_low_magnitude_frequencies(
    transform: Mapping[float, complex], frequencies: Sequence[float]
) -> list[float]:
    """Frequencies up to, not including, the first whose transform is negligible."""
    for index, f in enumerate(frequencies):
        if abs(transform[f]) < _LOW_MAGNITUDE_TOLERANCE:
            return list(frequencies[:index])
    return list(frequencies)


def _kernel(frequency: float, time: float) -> complex:
    arg = 2.0 * math.pi * frequency * time
    return complex(math.cos(arg), -math.sin(arg))


def calculate_dft(
    values: Sequence[float], frequencies: Sequence[float], time: float
) -> list[ComplexVector]:
    """Contribution of one time sample to the transform at each frequency."""
    result = []
    for f in frequencies:
        w = _kernel(f, time)
        result.append([v * w for v in values])
    return result


def fields_dft(
    time_fields: Sequence[Sequence[float]],
    times: Sequence[float],
    frequencies: Sequence[float],
) -> list[ComplexVector]:
    """Discrete Fourier transform of sampled field vectors, indexed [frequency][dof]."""
    if len(time_fields) != len(times):
        raise ValueError("One field vector is needed per time sample.")
    result = []
    for f in frequencies:
        size = len(time_fields[0]) if time_fields else 0
        accumulated = [0j] * size
        for t, values in zip(times, time_fields):
            if len(values) != size:
                raise ValueError("Field vectors must all have the same size.")
            w = _kernel(f, t)
            accumulated = [acc + v * w for acc, v in zip(accumulated, values)]
        result.append(accumulated)
    return result


def normalization_term(
    gauss_values: Sequence[float],
    time: Sequence[float],
    frequencies: Sequence[float],
) -> tuple[list[float], dict[float, complex]]:
    """Incident-pulse energy per frequency and the pulse transform itself.

    Returns (terms, transform) where terms[i] = eps0 * |G(f_i)|^2.
    """
    if len(gauss_values) != len(time):
        raise ValueError("One pulse value is needed per time sample.")
    transform: dict[float, complex] = {}
    terms = []
    for f in frequencies:
        value = sum((g * _kernel(f, t) for g, t in zip(gauss_values, time)), 0j)
        transform.setdefault(f, value)
        terms.append(VACUUM_PERMITTIVITY_SI * abs(value) ** 2)
    return terms, transform