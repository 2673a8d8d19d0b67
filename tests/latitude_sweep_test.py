from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from common.errors import InvalidLatitude
from common.units import DISPLAY_UNITS
from scenario_simulation.cyclogenesis import BaroclinicCyclogenesis
from scenario_simulation.latitude_sweep import (
    DEFAULT_LATITUDES,
    results_to_dataset,
    run_latitude_sweep,
    sweep_to_dataset,
)


def test_sweep_runs_one_instance_per_latitude():
    sweep = run_latitude_sweep(5.0, -8.0)

    assert list(sweep) == list(DEFAULT_LATITUDES)
    for latitude, results in sweep.items():
        expected = BaroclinicCyclogenesis(5.0, -8.0, latitude).simulate_interaction(24)
        assert results == expected


def test_sweep_strengthens_poleward():
    sweep = run_latitude_sweep(5.0, -8.0, latitudes=[30.0, 45.0, 60.0], duration_hours=24)
    final_w = [results[-1].vertical_velocity_cm_s for results in sweep.values()]
    final_zeta = [results[-1].relative_vorticity_1e5_s for results in sweep.values()]
    assert np.all(np.diff(final_w) > 0.0)
    assert np.all(np.diff(final_zeta) > 0.0)
    assert_allclose(final_w, [6.977, 9.866, 12.084], rtol=1e-3)
    assert_allclose(final_zeta, [5.074, 7.175, 8.789], rtol=1e-3)


def test_sweep_fails_before_running_on_invalid_latitude():
    with pytest.raises(InvalidLatitude):
        run_latitude_sweep(5.0, -8.0, latitudes=[45.0, 95.0])


@pytest.mark.parametrize("latitudes", [[45.0, 45.0], [30.0, 45.0, 30.0], [0.0, -0.0]])
def test_sweep_rejects_repeated_latitudes(latitudes):
    with pytest.raises(ValueError, match="distinct"):
        run_latitude_sweep(5.0, -8.0, latitudes=latitudes, duration_hours=1)


def test_results_to_dataset(results_45n):
    ds = results_to_dataset(results_45n)

    assert ds.sizes["hour"] == 25
    assert ds["latitude"].item() == 45.0
    assert ds["vertical_velocity"].attrs["units"] == "cm s**-1"
    assert ds["relative_vorticity"].attrs["units"] == "1e-5 s**-1"
    assert_allclose(ds["hour"].values, np.arange(25))
    assert_allclose(
        ds["vertical_velocity"].values,
        [r.vertical_velocity_cm_s for r in results_45n],
    )


def test_results_to_dataset_rejects_bad_input(results_45n):
    with pytest.raises(ValueError):
        results_to_dataset([])

    other = BaroclinicCyclogenesis(5.0, -8.0, 50.0).simulate_interaction(24)
    with pytest.raises(ValueError):
        results_to_dataset(results_45n + other)


def test_sweep_to_dataset():
    sweep = run_latitude_sweep(5.0, -8.0, latitudes=[30.0, 45.0, 60.0], duration_hours=12)
    ds = sweep_to_dataset(sweep)

    assert ds["vertical_velocity"].dims == ("latitude", "hour")
    assert ds["vertical_velocity"].shape == (3, 13)
    assert_allclose(ds["latitude"].values, [30.0, 45.0, 60.0])
    assert_allclose(
        ds["relative_vorticity"].sel(latitude=60.0).values,
        [r.relative_vorticity_1e5_s for r in sweep[60.0]],
    )


def test_sweep_to_dataset_rejects_empty():
    with pytest.raises(ValueError):
        sweep_to_dataset({})


def test_dataset_units_follow_display_units(results_45n):
    ds = results_to_dataset(results_45n)
    for name in ("vertical_velocity", "relative_vorticity", "hour", "latitude"):
        assert ds[name].attrs["units"] == DISPLAY_UNITS[name].attribute
        assert ds[name].attrs["long_name"] == name
