from __future__ import annotations

import dataclasses

import pytest

from common.types import SimulationResult
from validation.physics_tests import PhysicsConsistencyChecker


def test_clean_simulation_passes_all_checks(results_45n):
    checks = PhysicsConsistencyChecker(strict_mode=True).check_all(results_45n)
    assert [c.test_name for c in checks] == [
        "hour_sequence",
        "monotonic_intensification",
        "output_bounds",
    ]
    assert all(c.passed for c in checks)


def test_detects_hour_gap(results_45n):
    broken = results_45n[:5] + results_45n[6:]
    check = PhysicsConsistencyChecker().check_hour_sequence(broken)
    assert not check.passed
    assert check.details["last_hour"] == 24


def test_detects_weakening(results_45n):
    broken = list(results_45n)
    broken[10] = dataclasses.replace(broken[10], vertical_velocity_cm_s=0.0)
    check = PhysicsConsistencyChecker().check_monotonic_intensification(broken)
    assert not check.passed
    assert check.details["vertical_velocity_decreases"] == 1
    assert check.details["vorticity_decreases"] == 0


def test_detects_implausible_values():
    results = [
        SimulationResult(0, 0.0, 0.0, 45.0),
        SimulationResult(1, 250.0, 3.0, 45.0),
        SimulationResult(2, 5.0, float("nan"), 45.0),
    ]
    check = PhysicsConsistencyChecker().check_output_bounds(results)
    assert not check.passed
    assert "2 violations" in check.message


def test_strict_mode_raises(results_45n):
    broken = results_45n[:5] + results_45n[6:]
    with pytest.raises(ValueError, match="hour_sequence"):
        PhysicsConsistencyChecker(strict_mode=True).check_all(broken)


def test_short_sequences_pass():
    checker = PhysicsConsistencyChecker(strict_mode=True)
    assert checker.check_monotonic_intensification([SimulationResult(0, 0.0, 0.0, 45.0)]).passed
    assert checker.check_output_bounds([]).passed
    assert checker.check_hour_sequence([]).passed
