"""
Validation Framework for the Cyclogenesis Model.

This module provides consistency checks on simulation output.
"""

from validation.physics_tests import (
    PhysicsConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "PhysicsConsistencyChecker",
    "ValidationResult",
]
