import numpy as np
import pytest

from epiprojector.experiments import (
    compare_scenarios,
    heatmap,
    intervention_sweep,
    pivot_for_plot,
    standard_scenarios,
)
from epiprojector.parameters import InterventionParameters, SimulationParameters


@pytest.fixture
def city():
    return SimulationParameters(population_size=100_000, initial_cases=10, simulation_days=365,
                                seasonality=0.0)


def test_compare_standard_scenarios(city):
    df = compare_scenarios(city, standard_scenarios())
    assert list(df['scenario']) == ['no intervention', 'distancing + masks', 'vaccination', 'combined']
    rates = df.set_index('scenario')['attack_rate']
    assert rates['combined'] < rates['distancing + masks'] < rates['no intervention']
    assert rates['vaccination'] < rates['no intervention']
    r0 = df.set_index('scenario')['r0']
    assert r0['vaccination'] == pytest.approx(r0['no intervention'])


def test_intervention_sweep_grid(baseline_params):
    base = InterventionParameters(vaccination_rate=0.01, vaccine_effectiveness=0.5)
    df = intervention_sweep(baseline_params, [0.4, 0.0, 0.2], [0.0, 0.3], base=base)
    assert len(df) == 6
    assert list(df['social_distancing']) == [0.0, 0.0, 0.2, 0.2, 0.4, 0.4]
    assert (df['vaccination_rate'] == 0.01).all()

    no_masks = df[df['mask_effectiveness'] == 0.0]['attack_rate'].to_numpy()
    assert np.all(np.diff(no_masks) < 0)


def test_pivot_and_heatmap(baseline_params):
    df = intervention_sweep(baseline_params, [0.0, 0.2, 0.4], [0.0, 0.3])
    X, Y, Z = pivot_for_plot(df, x='social_distancing', y='mask_effectiveness', value='r0')
    assert Z.shape == (2, 3)
    assert Z[0, 0] == pytest.approx(df['r0'].max())

    ax = heatmap(df, x='social_distancing', y='mask_effectiveness', value='attack_rate',
                 title='Attack rate', show=False)
    assert ax.get_title() == 'Attack rate'


def test_pivot_averages_repeated_cells():
    import pandas as pd
    df = pd.DataFrame({'a': [0.0, 0.0, 1.0, 0.0, 1.0],
                       'b': [0.0, 0.0, 0.0, 1.0, 1.0],
                       'v': [1.0, 3.0, 4.0, 5.0, 6.0]})
    X, Y, Z = pivot_for_plot(df, x='a', y='b', value='v')
    np.testing.assert_array_equal(X, [[0.0, 1.0], [0.0, 1.0]])
    np.testing.assert_array_equal(Y, [[0.0, 0.0], [1.0, 1.0]])
    np.testing.assert_array_equal(Z, [[2.0, 4.0], [5.0, 6.0]])
