"""
Physics Extraction Module for Baroclinic Cyclogenesis.

This module converts thermal anomalies into physically interpretable
quantities. Only closed-form physics relations live here.
"""

from physics_extraction.baroclinic_dynamics import (
    compute_buoyancy_contrast,
    compute_intensification,
    compute_vertical_velocity,
    compute_relative_vorticity,
)

__all__ = [
    "compute_buoyancy_contrast",
    "compute_intensification",
    "compute_vertical_velocity",
    "compute_relative_vorticity",
]
