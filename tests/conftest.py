import matplotlib

matplotlib.use("Agg")

import pytest

from epiprojector.parameters import InterventionParameters, SimulationParameters


@pytest.fixture
def baseline_params():
    """Small closed population, no seasonality, R0 > 1."""
    return SimulationParameters(
        population_size=1000,
        initial_cases=10,
        transmission_rate=0.3,
        incubation_period=5,
        recovery_rate=0.1,
        mortality_rate=0.02,
        simulation_days=100,
        seasonality=0.0,
    )


@pytest.fixture
def no_interventions():
    return InterventionParameters()
