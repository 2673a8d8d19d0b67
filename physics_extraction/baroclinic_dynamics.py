"""
Baroclinic Dynamics Calculations for Cyclogenesis.

This module holds the closed-form relations used by the cyclogenesis
engine. Every function is pure and accepts either scalars or numpy arrays,
so a whole forecast window can be evaluated in one call.

All inputs and outputs are in SI units; conversion to display units is
done by the caller.

Model
-----
A warm surface anomaly beneath a cold upper anomaly gives a buoyancy
contrast b = g·ΔT/T₀ across the layer. With static stability N and
Coriolis parameter f, quasi-geostrophic scaling gives

    w ~ (b/N)·(|f|/N)            vertical velocity
    ζ ~ f·(b/Δz)/N²              relative vorticity (thermal-wind shear / depth)

Both are switched on by a saturating spin-up curve I(t) = 1 − exp(−t/τ).

References
----------
- Holton, J.R. & Hakim, G.J. (2013). An Introduction to Dynamic Meteorology,
  Sections 3.4 (thermal wind) and 6.4 (QG omega equation).
- Eady, E.T. (1949). Long waves and cyclone waves. Tellus, 1(3), 33-52.
"""

from typing import Union
import numpy as np
from numpy.typing import NDArray

ArrayLike = Union[float, NDArray[np.float64]]


def compute_buoyancy_contrast(
    thermal_contrast_k: ArrayLike,
    gravity: float,
    base_temp: float
) -> ArrayLike:
    """Compute the buoyancy contrast between two thermal anomalies.

    Parameters
    ----------
    thermal_contrast_k : float or ndarray
        Surface anomaly minus upper anomaly, in K.
    gravity : float
        Gravitational acceleration in m/s².
    base_temp : float
        Reference temperature in K.

    Returns
    -------
    float or ndarray
        b = g·ΔT/T₀ in m/s².
    """
    return gravity * thermal_contrast_k / base_temp


def compute_intensification(
    hour: ArrayLike,
    timescale_hours: float
) -> ArrayLike:
    """Compute the spin-up factor of a developing perturbation.

    Parameters
    ----------
    hour : float or ndarray
        Elapsed time in hours (>= 0).
    timescale_hours : float
        e-folding time τ of the spin-up, in hours.

    Returns
    -------
    float or ndarray
        I = 1 − exp(−t/τ); 0 at t = 0, strictly increasing, bounded by 1.
    """
    # expm1 keeps precision for small t/τ
    return -np.expm1(-np.asarray(hour, dtype=np.float64) / timescale_hours)


def compute_vertical_velocity(
    buoyancy_contrast: ArrayLike,
    coriolis: ArrayLike,
    stability: float,
    intensification: ArrayLike,
    efficiency: float
) -> ArrayLike:
    """Compute the vertical velocity forced by the baroclinic contrast.

    Parameters
    ----------
    buoyancy_contrast : float or ndarray
        b in m/s².
    coriolis : float or ndarray
        Coriolis parameter f in s⁻¹. Only its magnitude is used.
    stability : float
        Brunt-Väisälä frequency N in s⁻¹.
    intensification : float or ndarray
        Spin-up factor in [0, 1].
    efficiency : float
        Dimensionless calibration coefficient.

    Returns
    -------
    float or ndarray
        Vertical velocity in m/s; positive for ascent ahead of the warm
        surface anomaly.

    Notes
    -----
    w = k₁ · (b/N) · (|f|/N) · I
    """
    return (
        efficiency
        * (buoyancy_contrast / stability)
        * (np.abs(coriolis) / stability)
        * intensification
    )


def compute_relative_vorticity(
    buoyancy_contrast: ArrayLike,
    coriolis: ArrayLike,
    layer_depth_m: float,
    stability: float,
    intensification: ArrayLike,
    efficiency: float
) -> ArrayLike:
    """Compute the relative vorticity spun up by the thermal-wind shear.

    Parameters
    ----------
    buoyancy_contrast : float or ndarray
        b in m/s².
    coriolis : float or ndarray
        Coriolis parameter f in s⁻¹.
    layer_depth_m : float
        Depth between the surface and upper anomalies in meters.
    stability : float
        Brunt-Väisälä frequency N in s⁻¹.
    intensification : float or ndarray
        Spin-up factor in [0, 1].
    efficiency : float
        Dimensionless calibration coefficient.

    Returns
    -------
    float or ndarray
        Relative vorticity in s⁻¹; cyclonic (same sign as f) for a warm
        surface / cold upper configuration.

    Notes
    -----
    ζ = k₂ · f · (b/Δz) / N² · I
    """
    shear = buoyancy_contrast / layer_depth_m
    return efficiency * coriolis * shear / stability**2 * intensification
