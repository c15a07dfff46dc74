"""Physical constants, in SI units and in the solver's normalised units."""

SPEED_OF_LIGHT_SI = 299792458.0
VACUUM_PERMITTIVITY_SI = 8.8541878128e-12
VACUUM_PERMEABILITY_SI = 1.25663706212e-6
FREE_SPACE_IMPEDANCE_SI = VACUUM_PERMEABILITY_SI * SPEED_OF_LIGHT_SI

SPEED_OF_LIGHT = 1.0