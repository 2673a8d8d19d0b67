"""
Common utilities and infrastructure for the Baroclinic Cyclogenesis Model.

This package provides foundational components used across all modules:
- Physical constants with sources
- Validation error taxonomy
- Validated value types with physical units
- Unit registry and display-unit conversion
- Logging and run provenance
"""

from common.constants import PhysicalConstants
from common.errors import (
    MeteoError,
    InvalidLatitude,
    InvalidAltitude,
    InvalidPressure,
    InvalidTemperatureAnomaly,
)
from common.types import (
    Position,
    ThermalAnomaly,
    SimulationResult,
)
from common.units import ureg, Q_
from common.logging_config import get_logger, run_context

__all__ = [
    "PhysicalConstants",
    "MeteoError",
    "InvalidLatitude",
    "InvalidAltitude",
    "InvalidPressure",
    "InvalidTemperatureAnomaly",
    "Position",
    "ThermalAnomaly",
    "SimulationResult",
    "ureg",
    "Q_",
    "get_logger",
    "run_context",
]
