from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

import physics_extraction.baroclinic_dynamics as D

G = 9.81
T0 = 288.15
N = 1.0e-2
F45 = 2 * 7.2921e-5 * np.sin(np.pi / 4)


def test_buoyancy_contrast():
    assert_allclose(D.compute_buoyancy_contrast(13.0, G, T0), 9.81 * 13.0 / 288.15)
    assert D.compute_buoyancy_contrast(0.0, G, T0) == 0.0
    assert D.compute_buoyancy_contrast(-13.0, G, T0) < 0.0


def test_intensification_starts_at_zero_and_saturates():
    hours = np.arange(0, 241, dtype=np.float64)
    intensification = D.compute_intensification(hours, 12.0)

    assert intensification[0] == 0.0
    assert np.all(np.diff(intensification) > 0.0)
    assert np.all(intensification < 1.0)
    assert_allclose(intensification[-1], 1.0, atol=1e-8)
    assert_allclose(D.compute_intensification(12.0, 12.0), 1.0 - np.exp(-1.0))


@pytest.mark.parametrize("timescale", [3.0, 12.0, 48.0])
def test_intensification_scalar_matches_array(timescale):
    hours = np.array([0.0, 1.0, 6.0, 24.0])
    vector = D.compute_intensification(hours, timescale)
    scalar = [D.compute_intensification(h, timescale) for h in hours]
    assert_allclose(vector, scalar, rtol=1e-14)


def test_vertical_velocity_reference_value():
    b = D.compute_buoyancy_contrast(13.0, G, T0)
    w = D.compute_vertical_velocity(b, F45, N, 1.0, 0.25)
    assert_allclose(w, 0.25 * (b / N) * (F45 / N))
    # ~11 cm/s once fully developed
    assert 0.10 < w < 0.12


def test_vertical_velocity_uses_magnitude_of_coriolis():
    b = D.compute_buoyancy_contrast(13.0, G, T0)
    north = D.compute_vertical_velocity(b, F45, N, 0.5, 0.25)
    south = D.compute_vertical_velocity(b, -F45, N, 0.5, 0.25)
    assert_allclose(north, south)
    assert D.compute_vertical_velocity(b, 0.0, N, 0.5, 0.25) == 0.0


def test_vertical_velocity_sign_follows_thermal_contrast():
    b = D.compute_buoyancy_contrast(-13.0, G, T0)
    assert D.compute_vertical_velocity(b, F45, N, 0.5, 0.25) < 0.0


def test_relative_vorticity_reference_value():
    b = D.compute_buoyancy_contrast(13.0, G, T0)
    zeta = D.compute_relative_vorticity(b, F45, 5500.0, N, 1.0, 1.0)
    assert_allclose(zeta, F45 * (b / 5500.0) / N**2)
    # ~8e-5 s^-1 once fully developed
    assert 7e-5 < zeta < 9e-5


def test_relative_vorticity_follows_sign_of_coriolis():
    b = D.compute_buoyancy_contrast(13.0, G, T0)
    north = D.compute_relative_vorticity(b, F45, 5500.0, N, 0.5, 1.0)
    south = D.compute_relative_vorticity(b, -F45, 5500.0, N, 0.5, 1.0)
    assert north > 0.0
    assert_allclose(south, -north)


def test_relative_vorticity_weakens_with_deeper_layer():
    b = D.compute_buoyancy_contrast(13.0, G, T0)
    shallow = D.compute_relative_vorticity(b, F45, 4000.0, N, 0.5, 1.0)
    deep = D.compute_relative_vorticity(b, F45, 8000.0, N, 0.5, 1.0)
    assert_allclose(shallow, 2 * deep)
