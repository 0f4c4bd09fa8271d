import pytest

from epiprojector.tools import available_tools, run_tool


BODY = {
    'params': {
        'populationSize': 1000,
        'initialCases': 10,
        'transmissionRate': 0.3,
        'incubationPeriod': 5,
        'recoveryRate': 0.1,
        'mortalityRate': 0.02,
        'simulationDays': 100,
        'seasonality': 0,
    },
    'interventions': {
        'socialDistancing': 0.2,
        'maskEffectiveness': 0.1,
        'vaccinationRate': 0.005,
        'vaccineEffectiveness': 0.9,
    },
}


def test_available_tools():
    assert available_tools() == ['epidemic-projection', 'seir-standard']


def test_unknown_tool():
    assert run_tool('t-test', {}) == ({'error': 'Unknown tool'}, 404)


def test_epidemic_projection():
    payload, status = run_tool('epidemic-projection', BODY)
    assert status == 200
    assert len(payload['infected']) == 100
    assert payload['infected'][0] == 10
    assert payload['r0'] == pytest.approx(0.3 * 0.8 * 0.9 / 0.12 * 0.99)


def test_flat_body_means_no_interventions():
    payload, status = run_tool('epidemic-projection', BODY['params'])
    assert status == 200
    assert payload['vaccinated'][-1] == 0
    assert payload['r0'] == pytest.approx(0.3 / 0.12 * 0.99)


@pytest.mark.parametrize("body,fragment", [
    ({'params': dict(BODY['params'], initialCases=5000)}, 'initial_cases'),
    ({'params': dict(BODY['params'], recoveryRate=2)}, 'recovery_rate'),
    ({'params': BODY['params'], 'interventions': {'curfew': 1}}, 'curfew'),
    ({'params': BODY['params'], 'extra': 1}, 'extra'),
    ({'params': 'fast'}, 'object'),
    ({'params': dict(BODY['params'], populationSize=10**400)}, 'population_size'),
    ({'params': dict(BODY['params'], simulationDays=100.5)}, 'simulation_days'),
    ({'params': BODY['params'], 'interventions': 0}, 'object'),
    ({'params': BODY['params'], 'interventions': ''}, 'object'),
])
def test_bad_requests(body, fragment):
    payload, status = run_tool('epidemic-projection', body)
    assert status == 400
    assert fragment in payload['error']


def test_non_object_body():
    payload, status = run_tool('epidemic-projection', [1, 2, 3])
    assert status == 400


def test_standard_form():
    body = {'population': 10_000, 'initialInfected': 10, 'transmissionRate': 0.3,
            'incubationRate': 0.2, 'recoveryRate': 0.1, 'days': 120}
    payload, status = run_tool('seir-standard', body)
    assert status == 200
    assert len(payload['susceptible']) == 120
    assert payload['totalDeaths'] > 0

    payload, status = run_tool('seir-standard', dict(body, incubationRate=0))
    assert status == 400
    payload, status = run_tool('seir-standard', dict(body, latency=3))
    assert status == 400


def test_null_interventions_mean_none():
    payload, status = run_tool('epidemic-projection', {'params': BODY['params'], 'interventions': None})
    assert status == 200
    assert payload['vaccinated'][-1] == 0


def test_whole_number_floats_accepted():
    params = dict(BODY['params'], populationSize=1000.0, initialCases=10.0, simulationDays=100.0)
    payload, status = run_tool('epidemic-projection', {'params': params})
    assert status == 200
    assert len(payload['infected']) == 100

    body = {'population': 10_000.0, 'initialInfected': 10.0, 'days': 60.0}
    payload, status = run_tool('seir-standard', body)
    assert status == 200
    assert len(payload['susceptible']) == 60
