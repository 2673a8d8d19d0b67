from __future__ import annotations

import pytest

from scenario_simulation.cyclogenesis import BaroclinicCyclogenesis

# Warm surface / cold aloft pair used throughout the documentation
SURFACE_ANOMALY = 5.0
UPPER_ANOMALY = -8.0


@pytest.fixture
def model_45n():
    return BaroclinicCyclogenesis(SURFACE_ANOMALY, UPPER_ANOMALY, 45.0)


@pytest.fixture
def results_45n(model_45n):
    return model_45n.simulate_interaction(24)
