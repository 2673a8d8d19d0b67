"""
Scenario Simulation Module for Baroclinic Cyclogenesis.

This module runs the cyclogenesis engine for a single latitude or a
sweep of latitudes.
"""

from scenario_simulation.cyclogenesis import (
    BaroclinicCyclogenesis,
    SimulationConfig,
)

from scenario_simulation.latitude_sweep import (
    DEFAULT_LATITUDES,
    run_latitude_sweep,
    results_to_dataset,
    sweep_to_dataset,
)

__all__ = [
    "BaroclinicCyclogenesis",
    "SimulationConfig",
    "DEFAULT_LATITUDES",
    "run_latitude_sweep",
    "results_to_dataset",
    "sweep_to_dataset",
]
