"""
Physical Constants for Baroclinic Cyclogenesis Modeling.

This module provides the physical constants used by the cyclogenesis model,
together with their units and sources. All constants are defined in SI units.

References
----------
- Earth rotation: IERS Conventions (2010)
- Atmospheric constants: AMS Glossary of Meteorology
- Standard atmosphere: ISO 2533:1975
"""

from dataclasses import dataclass
from typing import Final, Union
import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Constant:
    """A physical constant with provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


# =========================================================================
# Earth Rotation and Gravity
# =========================================================================

EARTH_ANGULAR_VELOCITY: Final[Constant] = Constant(
    value=7.2921e-5,
    unit="rad/s",
    source="IERS Conventions (2010), rounded",
    description="Earth's angular velocity of rotation"
)

REFERENCE_GRAVITY: Final[Constant] = Constant(
    value=9.81,
    unit="m/s²",
    source="ISO 80000-3:2006, rounded",
    description="Acceleration due to gravity used for buoyancy scaling"
)

# =========================================================================
# Atmospheric Constants
# =========================================================================

STANDARD_SEA_LEVEL_TEMPERATURE: Final[Constant] = Constant(
    value=288.15,
    unit="K",
    source="ISO 2533:1975",
    description="Standard temperature at sea level (15°C)"
)


@dataclass(frozen=True)
class PhysicalConstants:
    """Environmental constants used by a cyclogenesis simulation.

    Instances are plain values: an engine receives one explicitly or
    builds the default. Overrides are accepted for sensitivity studies.

    Attributes
    ----------
    earth_omega : float
        Earth's angular rotation rate in rad/s.
    gravity : float
        Gravitational acceleration in m/s².
    base_temp : float
        Reference temperature in K.

    Raises
    ------
    ValueError
        If any constant is not a strictly positive finite number.

    Examples
    --------
    >>> constants = PhysicalConstants()
    >>> round(constants.coriolis_parameter(45.0), 8)
    0.00010313
    """
    earth_omega: float = EARTH_ANGULAR_VELOCITY.value
    gravity: float = REFERENCE_GRAVITY.value
    base_temp: float = STANDARD_SEA_LEVEL_TEMPERATURE.value

    def __post_init__(self):
        """Validate that all constants are strictly positive."""
        for name in ("earth_omega", "gravity", "base_temp"):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                raise ValueError(
                    f"Physical constant '{name}' must be strictly positive, got {value}"
                )

    def coriolis_parameter(
        self,
        latitude_deg: Union[float, NDArray[np.float64]]
    ) -> Union[float, NDArray[np.float64]]:
        """Compute Coriolis parameter f at a given latitude.

        Parameters
        ----------
        latitude_deg : float or ndarray
            Latitude in degrees North.

        Returns
        -------
        float or ndarray
            Coriolis parameter f in s⁻¹.

        Notes
        -----
        f = 2 * Ω * sin(φ), where Ω is Earth's angular velocity.
        """
        return 2.0 * self.earth_omega * np.sin(np.radians(latitude_deg))
