"""
Baroclinic Cyclogenesis Simulation.

This module couples a warm surface thermal anomaly with a cold upper-level
anomaly and follows the resulting perturbation hour by hour.

Purpose
-------
The engine answers a teaching question: how fast does ascent develop and
how much cyclonic vorticity is spun up when an upper cold anomaly
overruns a surface warm anomaly at a given latitude? Each hour is a pure
function of the elapsed time and the fixed parameters of the instance;
there is no feedback from one hour to the next.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import PhysicalConstants
from common.logging_config import get_logger
from common.types import ThermalAnomaly, SimulationResult
from common.units import vertical_velocity_to_display, vorticity_to_display
from physics_extraction.baroclinic_dynamics import (
    compute_buoyancy_contrast,
    compute_intensification,
    compute_vertical_velocity,
    compute_relative_vorticity,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Calibration of the cyclogenesis model.

    Attributes
    ----------
    intensification_timescale_hours : float
        e-folding time τ of the spin-up curve, in hours.
    brunt_vaisala_frequency : float
        Static stability N of the layer, in s⁻¹.
    vertical_velocity_efficiency : float
        Dimensionless calibration coefficient k₁ for vertical velocity.
    vorticity_efficiency : float
        Dimensionless calibration coefficient k₂ for relative vorticity.
    surface_altitude_m : float
        Altitude of the surface anomaly in meters.
    surface_pressure_hPa : float
        Pressure of the surface anomaly in hPa.
    upper_altitude_m : float
        Altitude of the upper-level anomaly in meters.
    upper_pressure_hPa : float
        Pressure of the upper-level anomaly in hPa.
    baroclinic_band_deg : Tuple[float, float]
        Latitude band (degrees, absolute value) where the model is meant
        to be used. Latitudes outside it are accepted with a warning.
    """
    intensification_timescale_hours: float = 12.0
    brunt_vaisala_frequency: float = 1.0e-2
    vertical_velocity_efficiency: float = 0.25
    vorticity_efficiency: float = 1.0
    surface_altitude_m: float = 0.0
    surface_pressure_hPa: float = 1013.0
    upper_altitude_m: float = 5500.0
    upper_pressure_hPa: float = 500.0
    baroclinic_band_deg: Tuple[float, float] = (30.0, 60.0)

    def __post_init__(self):
        for name in (
            "intensification_timescale_hours",
            "brunt_vaisala_frequency",
            "vertical_velocity_efficiency",
            "vorticity_efficiency",
        ):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                raise ValueError(f"'{name}' must be strictly positive, got {value}")

        if self.upper_altitude_m <= self.surface_altitude_m:
            raise ValueError(
                f"Upper level ({self.upper_altitude_m} m) must lie above "
                f"the surface level ({self.surface_altitude_m} m)"
            )
        if self.upper_pressure_hPa >= self.surface_pressure_hPa:
            raise ValueError(
                f"Upper pressure ({self.upper_pressure_hPa} hPa) must be lower "
                f"than surface pressure ({self.surface_pressure_hPa} hPa)"
            )

        low, high = self.baroclinic_band_deg
        if not 0.0 <= low < high <= 90.0:
            raise ValueError(f"Invalid baroclinic band {self.baroclinic_band_deg}")

    @property
    def layer_depth_m(self) -> float:
        """Vertical distance between the two anomalies in meters."""
        return self.upper_altitude_m - self.surface_altitude_m

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return asdict(self)


class BaroclinicCyclogenesis:
    """Simulation of a surface / upper-level thermal anomaly interaction.

    Parameters
    ----------
    surface_anomaly_k : float
        Surface temperature anomaly in K (warm, typically positive).
    upper_anomaly_k : float
        Upper-level temperature anomaly in K (cold, typically negative).
    latitude_deg : float
        Latitude of the system in degrees North.
    constants : PhysicalConstants, optional
        Physical constants; defaults are used if omitted.
    config : SimulationConfig, optional
        Model calibration; defaults are used if omitted.

    Raises
    ------
    MeteoError
        If the latitude, a level or an anomaly magnitude is out of range.

    Examples
    --------
    >>> model = BaroclinicCyclogenesis(5.0, -8.0, 45.0)
    >>> results = model.simulate_interaction(24)
    >>> len(results), results[0].hour, results[-1].hour
    (25, 0, 24)
    """

    def __init__(
        self,
        surface_anomaly_k: float,
        upper_anomaly_k: float,
        latitude_deg: float,
        constants: Optional[PhysicalConstants] = None,
        config: Optional[SimulationConfig] = None
    ):
        self._constants = constants or PhysicalConstants()
        self._config = config or SimulationConfig()

        self._surface_anomaly = ThermalAnomaly.at(
            latitude_deg,
            self._config.surface_altitude_m,
            self._config.surface_pressure_hPa,
            surface_anomaly_k,
        )
        self._upper_anomaly = ThermalAnomaly.at(
            latitude_deg,
            self._config.upper_altitude_m,
            self._config.upper_pressure_hPa,
            upper_anomaly_k,
        )
        self._latitude = float(latitude_deg)
        self._coriolis = float(self._constants.coriolis_parameter(self._latitude))
        self._buoyancy = float(compute_buoyancy_contrast(
            self.thermal_contrast,
            self._constants.gravity,
            self._constants.base_temp,
        ))

        low, high = self._config.baroclinic_band_deg
        if not low <= abs(self._latitude) <= high:
            logger.warning(
                f"Latitude {self._latitude:.2f}° is outside the baroclinic band "
                f"[{low}, {high}]; forcing will be atypical (f={self._coriolis:.3e} s⁻¹)"
            )

    @property
    def surface_anomaly(self) -> ThermalAnomaly:
        return self._surface_anomaly

    @property
    def upper_anomaly(self) -> ThermalAnomaly:
        return self._upper_anomaly

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def coriolis_parameter(self) -> float:
        """Coriolis parameter at the instance latitude, in s⁻¹."""
        return self._coriolis

    @property
    def thermal_contrast(self) -> float:
        """Surface minus upper anomaly, in K."""
        return self._surface_anomaly.delta_t - self._upper_anomaly.delta_t

    @property
    def constants(self) -> PhysicalConstants:
        return self._constants

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def _vertical_velocity_ms(self, hours: NDArray[np.float64]) -> NDArray[np.float64]:
        intensification = compute_intensification(
            hours, self._config.intensification_timescale_hours
        )
        return compute_vertical_velocity(
            self._buoyancy,
            self._coriolis,
            self._config.brunt_vaisala_frequency,
            intensification,
            self._config.vertical_velocity_efficiency,
        )

    def _relative_vorticity_s(self, hours: NDArray[np.float64]) -> NDArray[np.float64]:
        intensification = compute_intensification(
            hours, self._config.intensification_timescale_hours
        )
        return compute_relative_vorticity(
            self._buoyancy,
            self._coriolis,
            self._config.layer_depth_m,
            self._config.brunt_vaisala_frequency,
            intensification,
            self._config.vorticity_efficiency,
        )

    def develop_baroclinic_perturbation(self, hour: int) -> float:
        """Vertical velocity after `hour` hours, in cm/s (positive = ascent)."""
        w = self._vertical_velocity_ms(np.float64(hour))
        return float(vertical_velocity_to_display(w))

    def compute_relative_vorticity(self, hour: int) -> float:
        """Relative vorticity after `hour` hours, in units of 10⁻⁵ s⁻¹."""
        zeta = self._relative_vorticity_s(np.float64(hour))
        return float(vorticity_to_display(zeta))

    def simulate_interaction(self, duration_hours: int) -> List[SimulationResult]:
        """Simulate the anomaly interaction over a forecast window.

        Parameters
        ----------
        duration_hours : int
            Length of the window in hours (>= 0).

        Returns
        -------
        List[SimulationResult]
            One result per hour for hours 0..duration_hours inclusive,
            ordered by hour. Hour 0 is the initial, undeveloped state.

        Raises
        ------
        ValueError
            If `duration_hours` is not a non-negative integer.
        """
        if isinstance(duration_hours, bool) or not isinstance(duration_hours, (int, np.integer)):
            raise ValueError(f"duration_hours must be an integer, got {duration_hours!r}")
        if duration_hours < 0:
            raise ValueError(f"duration_hours must be non-negative, got {duration_hours}")

        hours = np.arange(int(duration_hours) + 1, dtype=np.float64)
        w_cm_s = vertical_velocity_to_display(self._vertical_velocity_ms(hours))
        zeta = vorticity_to_display(self._relative_vorticity_s(hours))

        results = [
            SimulationResult(
                hour=int(hour),
                vertical_velocity_cm_s=float(w_cm_s[i]),
                relative_vorticity_1e5_s=float(zeta[i]),
                latitude=self._latitude,
            )
            for i, hour in enumerate(hours)
        ]

        logger.debug(
            f"Simulated {len(results)} hours at {self._latitude:.2f}°: "
            f"w={results[-1].vertical_velocity_cm_s:.2f} cm/s, "
            f"zeta={results[-1].relative_vorticity_1e5_s:.2f} 1e-5 s^-1 at hour {results[-1].hour}"
        )

        return results
