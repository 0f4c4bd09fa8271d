"""
===========================================================
tools.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================

Description:
    Tool registry for the calculator's request/response
    endpoint: a JSON-shaped body goes in, a JSON-shaped
    result and a status code come out. No server here; the
    web layer only has to forward bodies to run_tool().

Tools:
    "epidemic-projection"
        {"params": {...}, "interventions": {...}} with camelCase
        keys (a flat body of parameter keys is accepted too)
    "seir-standard"
        {"population", "initialInfected", "transmissionRate",
         "incubationRate", "recoveryRate", "days"}

Notes:
    - Unknown tool -> ({"error": "Unknown tool"}, 404)
    - Bad input    -> ({"error": <message>}, 400)
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Tuple

from .parameters import (
    InterventionParameters,
    InvalidParameterError,
    SimulationParameters,
    create_standard_seir_params,
)
from .projector import run

STANDARD_FORM_KEYS = {
    'population': 'population',
    'initialInfected': 'initial_infected',
    'transmissionRate': 'transmission_rate',
    'incubationRate': 'incubation_rate',
    'recoveryRate': 'recovery_rate',
    'days': 'days',
}


def _epidemic_projection(body: Mapping) -> Dict:
    if 'params' in body:
        extra = set(body) - {'params', 'interventions'}
        if extra:
            raise InvalidParameterError(f"Unknown request fields: {sorted(extra)}")
        params = SimulationParameters.from_dict(body['params'])
        raw = body.get('interventions')
        interventions = InterventionParameters.from_dict({} if raw is None else raw)
    else:
        params = SimulationParameters.from_dict(body)
        interventions = InterventionParameters()
    return run(params, interventions).to_dict()


def _seir_standard(body: Mapping) -> Dict:
    kwargs = {}
    for key, value in body.items():
        if key not in STANDARD_FORM_KEYS:
            raise InvalidParameterError(f"Unknown standard model field: {key!r}")
        kwargs[STANDARD_FORM_KEYS[key]] = value
    return run(create_standard_seir_params(**kwargs)).to_dict()


TOOLS: Dict[str, Callable[[Mapping], Dict]] = {
    'epidemic-projection': _epidemic_projection,
    'seir-standard': _seir_standard,
}


def available_tools() -> List[str]:
    return sorted(TOOLS)


def run_tool(name: str, body: Mapping) -> Tuple[Dict, int]:
    """Dispatch one tool request; returns (payload, http_status)"""
    handler = TOOLS.get(name)
    if handler is None:
        return {'error': 'Unknown tool'}, 404
    if not isinstance(body, Mapping):
        return {'error': 'Request body must be a JSON object'}, 400
    try:
        return handler(body), 200
    except InvalidParameterError as e:
        return {'error': str(e)}, 400
