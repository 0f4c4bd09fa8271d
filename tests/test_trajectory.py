import json

import numpy as np
import pandas as pd
import pytest

from epiprojector.parameters import SimulationParameters
from epiprojector.projector import run
from epiprojector.trajectory import Trajectory


def test_series_are_read_only(baseline_params):
    traj = run(baseline_params)
    with pytest.raises(ValueError):
        traj.infected[0] = 0.0
    with pytest.raises(AttributeError):
        traj.peak_day = 3


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError, match="one length"):
        Trajectory(
            susceptible=[1.0, 2.0], exposed=[0.0, 0.0], infected=[1.0],
            recovered=[0.0, 0.0], deceased=[0.0, 0.0], vaccinated=[0.0, 0.0],
            peak_infection=1.0, peak_day=0, total_cases=1.0, total_deaths=0.0,
            r0=1.0, population_size=2,
        )


def test_derived_metrics(baseline_params):
    traj = run(baseline_params)
    assert traj.attack_rate == pytest.approx(traj.total_cases / 1000)
    assert traj.herd_immunity_threshold == pytest.approx(1 - 1 / traj.r0)
    np.testing.assert_array_equal(traj.days, np.arange(100))

    summary = traj.summary()
    assert set(summary) == {'peak_infection', 'peak_day', 'total_cases', 'total_deaths',
                            'r0', 'attack_rate', 'herd_immunity_threshold'}
    assert summary['peak_day'] == traj.peak_day


def test_to_dataframe(baseline_params):
    df = run(baseline_params).to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ['day', 'S', 'E', 'I', 'R', 'D', 'V']
    assert len(df) == 100
    assert df['I'].iloc[0] == 10


def test_to_dict_is_strict_json(baseline_params):
    payload = run(baseline_params).to_dict()
    for key in ('susceptible', 'exposed', 'infected', 'recovered', 'deceased',
                'vaccinated', 'peakInfection', 'peakDay', 'totalCases', 'totalDeaths', 'r0'):
        assert key in payload
    assert len(payload['infected']) == 100
    assert payload['metrics']['attackRate'] == pytest.approx(payload['totalCases'] / 1000)
    json.dumps(payload, allow_nan=False)


def test_to_dict_maps_undefined_threshold_to_none():
    params = SimulationParameters(population_size=1, initial_cases=1, simulation_days=10,
                                  seasonality=0.0)
    traj = run(params)
    assert traj.r0 == 0
    assert np.isnan(traj.herd_immunity_threshold)
    assert traj.to_dict()['metrics']['herdImmunityThreshold'] is None


def test_print_summary(baseline_params, capsys):
    run(baseline_params).print_summary()
    out = capsys.readouterr().out
    assert "Total deaths" in out
    assert "Herd immunity threshold" in out
