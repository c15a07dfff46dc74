"""Materials, models, sources, probes and RCS post-processing for time-domain Maxwell solvers."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "constants",
    "material",
    "probes",
    "optimization",
    "model",
    "sources",
    "problem",
    "rcs",
]