"""
Latitude Sweep of Baroclinic Cyclogenesis.

This module runs the same anomaly pair at several latitudes, one
independent engine per latitude, and packages the output as xarray
datasets for comparison and plotting.
"""

from typing import Dict, List, Optional, Sequence
import numpy as np
import xarray as xr

from common.constants import PhysicalConstants
from common.logging_config import get_logger, run_context
from common.types import SimulationResult
from common.units import DISPLAY_UNITS
from scenario_simulation.cyclogenesis import BaroclinicCyclogenesis, SimulationConfig

logger = get_logger(__name__)

DEFAULT_LATITUDES = (30.0, 45.0, 60.0)


def run_latitude_sweep(
    surface_anomaly_k: float,
    upper_anomaly_k: float,
    latitudes: Sequence[float] = DEFAULT_LATITUDES,
    duration_hours: int = 24,
    constants: Optional[PhysicalConstants] = None,
    config: Optional[SimulationConfig] = None
) -> Dict[float, List[SimulationResult]]:
    """Simulate one anomaly pair at each of several latitudes.

    Parameters
    ----------
    surface_anomaly_k : float
        Surface temperature anomaly in K.
    upper_anomaly_k : float
        Upper-level temperature anomaly in K.
    latitudes : Sequence[float]
        Latitudes in degrees North, in the order they should be reported.
    duration_hours : int
        Forecast window passed to `simulate_interaction`.
    constants : PhysicalConstants, optional
        Physical constants shared by all runs.
    config : SimulationConfig, optional
        Calibration shared by all runs.

    Returns
    -------
    Dict[float, List[SimulationResult]]
        Results keyed by latitude, in input order.

    Raises
    ------
    MeteoError
        If any latitude or anomaly is invalid. No partial sweep is returned.
    ValueError
        If a latitude is repeated (0.0 and -0.0 count as the same latitude).
    """
    constants = constants or PhysicalConstants()
    config = config or SimulationConfig()

    latitudes = list(latitudes)
    repeated = sorted({lat for i, lat in enumerate(latitudes) if lat in latitudes[:i]})
    if repeated:
        raise ValueError(f"Latitudes must be distinct, repeated: {repeated}")

    # Validate every instance before running any of them
    models = [
        BaroclinicCyclogenesis(
            surface_anomaly_k, upper_anomaly_k, latitude,
            constants=constants, config=config,
        )
        for latitude in latitudes
    ]

    run_config = {
        "surface_anomaly_k": surface_anomaly_k,
        "upper_anomaly_k": upper_anomaly_k,
        "latitudes": latitudes,
        "duration_hours": duration_hours,
        "constants": {
            "earth_omega": constants.earth_omega,
            "gravity": constants.gravity,
            "base_temp": constants.base_temp,
        },
        "config": config.to_dict(),
    }

    sweep: Dict[float, List[SimulationResult]] = {}
    with run_context("latitude_sweep", config=run_config, logger=logger) as run:
        for model in models:
            sweep[model.latitude] = model.simulate_interaction(duration_hours)
        run.num_results = sum(len(results) for results in sweep.values())
        run.output_metadata["latitudes"] = list(sweep)

    return sweep


def results_to_dataset(results: List[SimulationResult]) -> xr.Dataset:
    """Convert the output of one simulation to an xarray Dataset.

    Parameters
    ----------
    results : List[SimulationResult]
        Output of `simulate_interaction` (a single latitude).

    Returns
    -------
    xr.Dataset
        Variables `vertical_velocity` and `relative_vorticity` along the
        `hour` dimension, with `latitude` as a scalar coordinate.
    """
    if not results:
        raise ValueError("Cannot build a dataset from an empty result list")

    latitudes = {r.latitude for r in results}
    if len(latitudes) != 1:
        raise ValueError(f"Results span several latitudes: {sorted(latitudes)}")

    hours = np.array([r.hour for r in results], dtype=np.int64)
    w = np.array([r.vertical_velocity_cm_s for r in results], dtype=np.float64)
    zeta = np.array([r.relative_vorticity_1e5_s for r in results], dtype=np.float64)

    def attrs(name: str) -> Dict[str, str]:
        return {'units': DISPLAY_UNITS[name].attribute, 'long_name': name}

    return xr.Dataset(
        data_vars={
            "vertical_velocity": ("hour", w, attrs("vertical_velocity")),
            "relative_vorticity": ("hour", zeta, attrs("relative_vorticity")),
        },
        coords={
            "hour": ("hour", hours, attrs("hour")),
            "latitude": ((), results[0].latitude, attrs("latitude")),
        },
    )


def sweep_to_dataset(sweep: Dict[float, List[SimulationResult]]) -> xr.Dataset:
    """Stack the output of `run_latitude_sweep` along a latitude dimension.

    All runs must cover the same hours.
    """
    if not sweep:
        raise ValueError("Cannot build a dataset from an empty sweep")

    datasets = [results_to_dataset(results) for results in sweep.values()]
    return xr.concat(datasets, dim="latitude")
