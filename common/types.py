"""
Type Definitions with Physical Units for the Cyclogenesis Model.

This module defines the validated value types exchanged between the
simulation engine and its callers. Each type checks its physical ranges
on construction and is immutable afterwards, so a constructed object is
always valid.

Units
-----
- latitude in DEGREES North
- altitude in METERS above mean sea level
- pressure in HECTOPASCALS
- temperature anomaly in KELVIN
"""

from dataclasses import dataclass
from typing import Tuple

from common.errors import (
    InvalidAltitude,
    InvalidLatitude,
    InvalidPressure,
    InvalidTemperatureAnomaly,
)

LATITUDE_RANGE: Tuple[float, float] = (-90.0, 90.0)
ALTITUDE_RANGE: Tuple[float, float] = (-400.0, 20000.0)
PRESSURE_RANGE: Tuple[float, float] = (100.0, 1100.0)
TEMPERATURE_ANOMALY_RANGE: Tuple[float, float] = (-50.0, 50.0)


def _within(value: float, bounds: Tuple[float, float]) -> bool:
    # NaN compares False on both sides and is rejected
    return bounds[0] <= value <= bounds[1]


@dataclass(frozen=True)
class Position:
    """A geographic and vertical location.

    Attributes
    ----------
    latitude : float
        Latitude in DEGREES North. Range: [-90, 90].
    altitude : float
        Height above mean sea level in METERS. Range: [-400, 20000].
    pressure : float
        Pressure in HPA. Range: [100, 1100].

    Raises
    ------
    InvalidLatitude, InvalidAltitude, InvalidPressure
        The first failing check, in that order.

    Examples
    --------
    >>> Position(latitude=45.0, altitude=0.0, pressure=1013.0)
    Position(latitude=45.0, altitude=0.0, pressure=1013.0)
    """
    latitude: float  # degrees
    altitude: float  # m
    pressure: float  # hPa

    def __post_init__(self):
        """Validate coordinate ranges."""
        if not _within(self.latitude, LATITUDE_RANGE):
            raise InvalidLatitude(self.latitude, LATITUDE_RANGE)
        if not _within(self.altitude, ALTITUDE_RANGE):
            raise InvalidAltitude(self.altitude, ALTITUDE_RANGE)
        if not _within(self.pressure, PRESSURE_RANGE):
            raise InvalidPressure(self.pressure, PRESSURE_RANGE)


@dataclass(frozen=True)
class ThermalAnomaly:
    """A temperature perturbation located at a position.

    Whether the anomaly acts as the surface or the upper-level forcing is
    decided by the slot it occupies in the simulation engine.

    Attributes
    ----------
    position : Position
        Where the anomaly sits.
    delta_t : float
        Temperature deviation in KELVIN. Range: [-50, 50].
    """
    position: Position
    delta_t: float  # K

    def __post_init__(self):
        if not _within(self.delta_t, TEMPERATURE_ANOMALY_RANGE):
            raise InvalidTemperatureAnomaly(self.delta_t, TEMPERATURE_ANOMALY_RANGE)

    @classmethod
    def at(
        cls,
        latitude: float,
        altitude: float,
        pressure: float,
        delta_t: float
    ) -> 'ThermalAnomaly':
        """Create an anomaly and its position in one call.

        Position validation runs first, so an invalid location is reported
        before an invalid magnitude.
        """
        return cls(position=Position(latitude, altitude, pressure), delta_t=delta_t)

    @property
    def is_warm(self) -> bool:
        """True for a positive (warm) anomaly."""
        return self.delta_t > 0.0


@dataclass(frozen=True)
class SimulationResult:
    """Model output for a single forecast hour.

    Attributes
    ----------
    hour : int
        Hours since the start of the simulation.
    vertical_velocity_cm_s : float
        Vertical velocity in CM/S, positive for ascent.
    relative_vorticity_1e5_s : float
        Relative vorticity in units of 10⁻⁵ S⁻¹.
    latitude : float
        Latitude of the simulation in DEGREES North.
    """
    hour: int
    vertical_velocity_cm_s: float
    relative_vorticity_1e5_s: float
    latitude: float

    def to_string_formatted(self) -> str:
        """Render the result as one fixed-width table row.

        Examples
        --------
        >>> SimulationResult(12, 8.5321, 6.1, 45.0).to_string_formatted()
        '  12 |       8.53 cm/s |       6.10 10⁻⁵ s⁻¹ |  45.00°'
        """
        return (
            f"{self.hour:4d} | "
            f"{self.vertical_velocity_cm_s:10.2f} cm/s | "
            f"{self.relative_vorticity_1e5_s:10.2f} 10⁻⁵ s⁻¹ | "
            f"{self.latitude:6.2f}°"
        )
