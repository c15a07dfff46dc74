"""A complete problem: model, probes and sources."""

from __future__ import annotations

from dataclasses import dataclass, field

from .model import Model
from .probes import Probes
from .sources import Sources


@dataclass
class Problem:
    """Everything a solver needs to run a simulation."""

    model: Model
    probes: Probes = field(default_factory=Probes)
    sources: Sources = field(default_factory=Sources)