"""Linear isotropic materials described by permittivity, permeability and conductivity."""

from __future__ import annotations

import math
from dataclasses import dataclass


def verify_parameters(epsilon: float, mu: float, sigma: float) -> None:
    """Raise ValueError if the relative parameters are not physical."""
    if epsilon < 1.0:
        raise ValueError("Permittivity under 1.0 not allowed.")
    if mu < 1.0:
        raise ValueError("Permeability under 1.0 not allowed.")
    if sigma < 0.0:
        raise ValueError("Conductivity under 0.0 not allowed.")


@dataclass(frozen=True)
class Material:
    """Relative permittivity, relative permeability and conductivity."""

    epsilon: float
    mu: float
    sigma: float = 0.0

    def __post_init__(self) -> None:
        verify_parameters(self.epsilon, self.mu, self.sigma)

    @property
    def permittivity(self) -> float:
        return self.epsilon

    @property
    def permeability(self) -> float:
        return self.mu

    @property
    def conductivity(self) -> float:
        return self.sigma

    def _require_lossless(self, quantity: str) -> None:
        if self.sigma != 0.0:
            raise ValueError(
                f"{quantity} calculation is not supported for materials with conductivity."
            )

    def impedance(self) -> float:
        """Wave impedance sqrt(mu/epsilon) of a lossless material."""
        self._require_lossless("Impedance")
        return math.sqrt(self.mu / self.epsilon)

    def admittance(self) -> float:
        """Wave admittance sqrt(epsilon/mu) of a lossless material."""
        self._require_lossless("Admittance")
        return math.sqrt(self.epsilon / self.mu)

    def speed_of_wave(self) -> float:
        """Propagation speed relative to vacuum of a lossless material."""
        self._require_lossless("Wave speed")
        return 1.0 / math.sqrt(self.mu * self.epsilon)


def build_vacuum_material() -> Material:
    """Return the vacuum material."""
    return Material(1.0, 1.0)