# maxwellkit

Building blocks for time-domain Maxwell solvers, in plain Python with no
third-party dependencies.

## Modules

- `maxwellkit.types`: `FieldType` (`E`, `H`, with `alternate()`), `FluxType`
  (`Centered`, `Upwind`), `BdrCond` (boundary conditions whose values double
  as geometry attributes), `SubMeshingMarkers`, `Direction` (`X`, `Y`, `Z`)
  and the `FieldsForFP` record of six field components.
- `maxwellkit.constants`: physical constants in SI units
  (`SPEED_OF_LIGHT_SI`, `VACUUM_PERMITTIVITY_SI`, `VACUUM_PERMEABILITY_SI`,
  `FREE_SPACE_IMPEDANCE_SI`) and the normalised `SPEED_OF_LIGHT`.
- `maxwellkit.material`: `Material(epsilon, mu, sigma=0.0)`, a frozen record
  that raises `ValueError` for permittivity or permeability below 1.0 or
  negative conductivity. `impedance()`, `admittance()` and `speed_of_wave()`
  work for lossless materials and raise `ValueError` otherwise.
  `build_vacuum_material()` returns vacuum; `verify_parameters()` runs the
  checks on their own.
- `maxwellkit.model`: `Model(mesh, material_info, boundary_info)` maps
  geometry tags to materials and boundary conditions. It builds boundary
  markers (`get_marker()`, `boundary_to_marker`,
  `interior_boundary_to_marker`), the face-to-tag map (`face_to_geom_tag`)
  and piecewise material vectors (`eps_mu_piecewise_vector()`,
  `sigma_piecewise_vector()`). With no materials given, tag 1 is vacuum.
  The mesh is any object with `bdr_attributes` and `face_to_bdr_element`.
- `maxwellkit.sources`: `InitialField` and `Planewave` sources, evaluated with
  `eval(position, time, field_type, direction)`, held in a `Sources`
  collection. Polarization and propagation must be unit vectors.
  `cross_product()` is exported too.
- `maxwellkit.probes`: `PointProbe` and `FieldProbe` record time series
  (`find_frame_with_max()`, `find_frame_with_min()`), alongside
  `ExporterProbe`, `NearToFarFieldProbe` and the `Probes` bundle.
- `maxwellkit.problem`: `Problem`, which bundles a model, probes and sources.
- `maxwellkit.optimization`: `highest_modulus()` picks the eigenvalue of
  largest modulus; `field_offset()` gives the block offset of a field
  component in a six-component element operator.
- `maxwellkit.rcs`: radar cross section post-processing: `logspace()`,
  `complex_inner_product()`, 2D and 3D far-field phase kernels
  (`exp_real_part_2d()` and the like), `read_time()` and
  `build_time_vector()` for exported step directories,
  `build_plane_wave_data()`, `evaluate_gaussian_vector()`,
  `normalization_term()`, `trim_low_magnitude_frequencies()`,
  `calculate_dft()`, `fields_dft()`, and the `FreqFields`, `PlaneWaveData`
  and `RCSData` records.

## Installation

```
pip install .
```

## Example

```python
import math
from types import SimpleNamespace

from maxwellkit.material import Material
from maxwellkit.model import GeomTagToBoundaryInfo, Model
from maxwellkit.rcs import calculate_dft, logspace
from maxwellkit.sources import Planewave
from maxwellkit.types import BdrCond, Direction, FieldType

glass = Material(4.0, 1.0)
print(glass.impedance())       # 0.5
print(glass.speed_of_wave())   # 0.5

mesh = SimpleNamespace(bdr_attributes=[1, 2, 3], face_to_bdr_element=[0, -1, 1, 2])
model = Model(mesh, boundary_info=GeomTagToBoundaryInfo({1: BdrCond.PEC}))
print(model.boundary_to_marker)                      # {<BdrCond.PEC: 1>: [1, 0, 0]}
print(model.eps_mu_piecewise_vector(FieldType.E))    # [1.0]

wave = Planewave(lambda t: math.exp(-t[0] ** 2), (0, 0, 1), (1, 0, 0), FieldType.E)
print(wave.eval((0.0, 0.0, 0.0), 0.0, FieldType.E, Direction.Z))  # 1.0
print(wave.eval((0.0, 0.0, 0.0), 0.0, FieldType.H, Direction.Y))  # -1.0

freqs = logspace(6.0, 7.7, 100)
spectrum = calculate_dft([1.0, 2.0], freqs[:3], time=0.0)
```

## What this package does not do

It has no mesh or finite element machinery: it does not load meshes, assemble
mass, flux or derivative operators, estimate element eigenvalues, split meshes
into total-field and scattered-field parts, or advance fields in time. It does
not read exported field files; the RCS helpers work on field values and times
that the caller supplies, and write no result files. There is no command-line
program.

## Running the tests

```
pip install .[test]
pytest
```