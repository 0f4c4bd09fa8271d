"""
===============================================================================
parameters.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===============================================================================
Parameter sets for the epidemic projector

Disease parameters (population, seed cases, transmission/recovery/mortality
rates, incubation period, horizon, seasonality) and intervention parameters
(social distancing, masks, vaccination) as immutable dataclasses.

Also provides:
- the input gate (validate) with its error/warning types
- camelCase dict conversion used by the tool registry
- preset factories for the calculator's default scenarios
- advisory notes for values outside the recommended ranges
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""
from __future__ import annotations

import math
import numbers
import sys
from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, Tuple


class InvalidParameterError(ValueError):
    """Raised when an input is outside its documented range."""


class NumericDegeneracyWarning(RuntimeWarning):
    """A derived summary (e.g. R0) is undefined for the given inputs."""


class NegativeCompartmentWarning(RuntimeWarning):
    """A compartment went below zero during an unclamped run."""


# recommended ranges shown by the calculator form (advisory only)
RECOMMENDED_RANGES: Dict[str, Tuple[float, float]] = {
    'population_size': (1_000, 100_000_000),
    'initial_cases': (1, 10_000),
    'transmission_rate': (0.01, 2.0),
    'incubation_period': (1.0, 30.0),
    'recovery_rate': (0.01, 1.0),
    'mortality_rate': (0.0, 0.1),
    'simulation_days': (30, 1095),
    'seasonality': (0.0, 0.8),
}


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def _check_integer(name: str, value, low=None, high=None):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value > sys.float_info.max:
        raise InvalidParameterError(f"{name} is too large to represent as a float, got {value}")
    if low is not None and value < low:
        raise InvalidParameterError(f"{name} must be >= {low}, got {value}")
    if high is not None and value > high:
        raise InvalidParameterError(f"{name} must be <= {high}, got {value}")


def _check_real(name: str, value, low=None, high=None, low_exclusive=False):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")
    if low is not None:
        if low_exclusive and value <= low:
            raise InvalidParameterError(f"{name} must be > {low}, got {value}")
        if not low_exclusive and value < low:
            raise InvalidParameterError(f"{name} must be >= {low}, got {value}")
    if high is not None and value > high:
        raise InvalidParameterError(f"{name} must be <= {high}, got {value}")


def whole_number(value):
    """JSON numbers such as 1000.0 stand for the integer 1000; anything else is left for validate()."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _from_camel_dict(cls, data: Mapping):
    """Build a parameter dataclass from a camelCase (or snake_case) mapping."""
    if not isinstance(data, Mapping):
        raise InvalidParameterError(f"{cls.__name__} must be given as an object, got {data!r}")
    field_types = {f.name: f.type for f in fields(cls)}
    lookup = {}
    for f in fields(cls):
        lookup[f.name] = f.name
        lookup[_camel(f.name)] = f.name
    kwargs = {}
    for key, value in data.items():
        if key not in lookup:
            raise InvalidParameterError(f"Unknown {cls.__name__} field: {key!r}")
        if field_types[lookup[key]] == "int":
            value = whole_number(value)
        kwargs[lookup[key]] = value
    return cls(**kwargs)


@dataclass(frozen=True)
class SimulationParameters:
    """
    Disease and horizon parameters for a single projection.

    All rates are per day. Defaults match the calculator's advanced model.
    """

    # ==================== Population =============================================
    population_size: int = 1_000_000    # closed population N
    initial_cases: int = 10             # infectious at day 0

    # ==================== Natural history ========================================
    transmission_rate: float = 0.3      # beta, before interventions
    incubation_period: float = 5.0      # days; sigma = 1/incubation_period
    recovery_rate: float = 0.1          # gamma, daily fraction of I resolving
    mortality_rate: float = 0.02        # share of resolutions that are deaths

    # ==================== Simulation =============================================
    simulation_days: int = 180          # inclusive of day 0
    seasonality: float = 0.1            # amplitude of sinusoidal forcing

    @property
    def sigma(self) -> float:
        return 1.0 / self.incubation_period

    @property
    def gamma(self) -> float:
        return self.recovery_rate

    @property
    def infectious_period(self) -> float:
        return 1.0 / self.recovery_rate if self.recovery_rate > 0 else math.inf

    def validate(self) -> 'SimulationParameters':
        """Check every field against its range; raise InvalidParameterError."""
        _check_integer('population_size', self.population_size, low=1)
        _check_integer('initial_cases', self.initial_cases, low=1)
        if self.initial_cases > self.population_size:
            raise InvalidParameterError(
                f"initial_cases ({self.initial_cases}) cannot exceed "
                f"population_size ({self.population_size})"
            )
        _check_real('transmission_rate', self.transmission_rate, 0.0, 10.0)
        _check_real('incubation_period', self.incubation_period, 0.0, low_exclusive=True)
        _check_real('recovery_rate', self.recovery_rate, 0.0, 1.0)
        _check_real('mortality_rate', self.mortality_rate, 0.0, 1.0)
        _check_integer('simulation_days', self.simulation_days, 1, 3650)
        _check_real('seasonality', self.seasonality, 0.0, 1.0)
        return self

    def to_dict(self) -> Dict:
        """camelCase dict, the shape the calculator's tool endpoint uses."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping) -> 'SimulationParameters':
        return _from_camel_dict(cls, data)

    def print_summary(self):
        """Print parameter summary for documentation."""
        print("EPIDEMIC PROJECTION PARAMETERS:")
        print("\n--- POPULATION ---")
        print(f"Population size: {self.population_size:,}")
        print(f"Initial cases: {self.initial_cases:,}")
        print("\n--- NATURAL HISTORY ---")
        print(f"Transmission rate (β): {self.transmission_rate:.3f} per day")
        print(f"Incubation period: {self.incubation_period:.1f} days (σ = {self.sigma:.3f})")
        print(f"Recovery rate (γ): {self.recovery_rate:.3f} per day")
        print(f"Mortality (share of resolutions): {self.mortality_rate * 100:.2f}%")
        print("\n--- SIMULATION ---")
        print(f"Horizon: {self.simulation_days} days")
        print(f"Seasonality amplitude: {self.seasonality * 100:.0f}%")


@dataclass(frozen=True)
class InterventionParameters:
    """
    Non-pharmaceutical and vaccination interventions, each on a 0-1 scale.

    Distancing and masks compound multiplicatively on transmission.
    Vaccination moves vaccination_rate * vaccine_effectiveness of the
    current susceptible pool into V every day.
    """

    social_distancing: float = 0.0
    mask_effectiveness: float = 0.0
    vaccination_rate: float = 0.0       # daily share of S vaccinated
    vaccine_effectiveness: float = 0.0

    @property
    def transmission_multiplier(self) -> float:
        return (1 - self.social_distancing) * (1 - self.mask_effectiveness)

    @property
    def daily_vaccination_fraction(self) -> float:
        return self.vaccination_rate * self.vaccine_effectiveness

    def validate(self) -> 'InterventionParameters':
        for f in fields(self):
            _check_real(f.name, getattr(self, f.name), 0.0, 1.0)
        return self

    def to_dict(self) -> Dict:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping) -> 'InterventionParameters':
        return _from_camel_dict(cls, data)


def recommended_range_notes(params: SimulationParameters) -> List[str]:
    """
    List the fields that sit outside the calculator's recommended ranges.

    These are guidance values, narrower than the hard limits in validate().
    """
    notes = []
    for name, (low, high) in RECOMMENDED_RANGES.items():
        value = getattr(params, name)
        if value < low or value > high:
            notes.append(f"{name}={value} is outside the recommended range [{low}, {high}]")
    return notes


# Preset parameter sets
def create_baseline_params() -> SimulationParameters:
    """Advanced-model defaults."""
    return SimulationParameters()


def create_standard_seir_params(population: int = 1_000_000,
                                initial_infected: int = 100,
                                transmission_rate: float = 0.3,
                                incubation_rate: float = 0.1,
                                recovery_rate: float = 0.05,
                                days: int = 365) -> SimulationParameters:
    """
    Standard SEIR form: incubation is given as a rate and converted to a
    period; mortality and seasonality are fixed at 1% and 10%.
    """
    if isinstance(incubation_rate, bool) or not isinstance(incubation_rate, numbers.Real) \
            or not incubation_rate > 0:
        raise InvalidParameterError(f"incubation_rate must be > 0, got {incubation_rate!r}")
    return SimulationParameters(
        population_size=whole_number(population),
        initial_cases=whole_number(initial_infected),
        transmission_rate=transmission_rate,
        incubation_period=1.0 / incubation_rate,
        recovery_rate=recovery_rate,
        mortality_rate=0.01,
        simulation_days=whole_number(days),
        seasonality=0.1,
    )


def create_default_interventions() -> InterventionParameters:
    """Advanced-model intervention defaults (0.5% of S vaccinated per day)."""
    return InterventionParameters(
        social_distancing=0.2,
        mask_effectiveness=0.1,
        vaccination_rate=0.005,
        vaccine_effectiveness=0.9,
    )


if __name__ == "__main__":
    params = create_baseline_params()
    params.print_summary()

    print("\nParameter dictionary:")
    import pprint
    pprint.pprint(params.to_dict())
