"""
===============================================================================
projector.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===============================================================================
Epidemic projector: SEIRDV model with interventions

Deterministic discrete-time compartmental model that projects an outbreak
day by day. Compartments:
- Susceptible (S), Exposed (E), Infected (I), Recovered (R),
  Deceased (D), Vaccinated (V)
- Social distancing and masks derate transmission once for the whole run
- Sinusoidal seasonal forcing on transmission (365-day period, no phase shift)
- Daily vaccination of a fixed share of the current susceptible pool

The default scheme is explicit Euler with a fixed one-day step. RK4 and
scipy's odeint are available as opt-in schemes on the same right-hand side;
they give different numbers and are never used implicitly.

API:
    run(params, interventions=None, method="euler", clamp=False, validate=True)
        -> Trajectory
    EpidemicProjector(params, interventions).simulate() -> Trajectory
--------------------------------------------------------------------------------
License: MIT
================================================================================
"""
from __future__ import annotations
import warnings
import numpy as np
from scipy.integrate import odeint
from typing import Optional, Tuple

from .parameters import (
    InterventionParameters,
    NegativeCompartmentWarning,
    NumericDegeneracyWarning,
    SimulationParameters,
)
from .trajectory import Trajectory

METHODS = ('euler', 'rk4', 'odeint')
SEASON_LENGTH = 365.0


def seasonal_factor(t, seasonality: float):
    """Multiplier on transmission at day t: 1 + a*sin(2πt/365)"""
    return 1.0 + seasonality * np.sin(2.0 * np.pi * t / SEASON_LENGTH)


def _euler_step(y: np.ndarray, beta, sigma, gamma, mu, vax_rate, vax_eff, N) -> Tuple:
    """One explicit Euler day; every flow is computed from day-d values."""
    S, E, I, R, D, V = y

    new_vaccinated = S * vax_rate * vax_eff
    new_exposed = beta * S * I / N
    new_infected = sigma * E
    new_recovered = gamma * I * (1 - mu)
    new_deceased = gamma * I * mu

    return (
        S - new_exposed - new_vaccinated,
        E + new_exposed - new_infected,
        I + new_infected - new_recovered - new_deceased,
        R + new_recovered,
        D + new_deceased,
        V + new_vaccinated,
    )


def derivatives(y: np.ndarray, t: float, adjusted_beta, seasonality, sigma, gamma, mu,
                vax_fraction, N) -> np.ndarray:
    """Continuous-time right-hand side of the same flows (odeint signature).

    Parameters:
    y : np.ndarray. Current state [S, E, I, R, D, V]
    t : float. Current time (days)

    Returns:
    dydt : np.ndarray. Derivatives [dS, dE, dI, dR, dD, dV]
    """
    S, E, I, R, D, V = y
    beta = adjusted_beta * seasonal_factor(t, seasonality)

    force = beta * S * I / N
    vax = vax_fraction * S

    dS = -force - vax
    dE = force - sigma * E
    dI = sigma * E - gamma * I
    dR = gamma * (1 - mu) * I
    dD = gamma * mu * I
    dV = vax
    return np.array([dS, dE, dI, dR, dD, dV])


def _rk4_step(y: np.ndarray, t: float, h: float, args: tuple) -> np.ndarray:
    k1 = derivatives(y, t, *args)
    k2 = derivatives(y + 0.5*h*k1, t + 0.5*h, *args)
    k3 = derivatives(y + 0.5*h*k2, t + 0.5*h, *args)
    k4 = derivatives(y + h*k3, t + h, *args)
    return y + (h/6.0)*(k1 + 2*k2 + 2*k3 + k4)


def find_peak(infected: np.ndarray) -> Tuple[float, int]:
    """Running maximum of I; only a strictly greater value moves the peak,
    so ties keep the earliest day."""
    peak, peak_day = float(infected[0]), 0
    for day in range(1, len(infected)):
        if infected[day] > peak:
            peak, peak_day = float(infected[day]), day
    return peak, peak_day


def basic_reproduction_number(adjusted_beta, gamma, mu, S0, N) -> float:
    """Static R0 from the initial derated transmission rate and the initial
    susceptible fraction. NaN (with a warning) when gamma + mu == 0."""
    denom = gamma + mu
    if denom == 0:
        warnings.warn(
            "recovery_rate + mortality_rate is zero; R0 is undefined",
            NumericDegeneracyWarning,
            stacklevel=3,
        )
        return float('nan')
    return float((adjusted_beta / denom) * (S0 / N))


def initial_conditions(params: SimulationParameters) -> np.ndarray:
    """Day-0 state [S, E, I, R, D, V]: everyone but the seed cases is susceptible."""
    I0 = float(params.initial_cases)
    S0 = float(params.population_size) - I0
    return np.array([S0, 0.0, I0, 0.0, 0.0, 0.0], dtype=float)


def run(params: SimulationParameters,
        interventions: Optional[InterventionParameters] = None,
        *,
        method: str = 'euler',
        clamp: bool = False,
        validate: bool = True) -> Trajectory:
    """Project the epidemic over params.simulation_days days.

    Parameters:
    params: SimulationParameters. Disease, population and horizon
    interventions: InterventionParameters, optional. None means no intervention
    method: str. 'euler' (default, fixed daily step), 'rk4' or 'odeint'
    clamp: bool. If True, clip every compartment into [0, N] after each step
    validate: bool. If False, skip the input gate and let NaN/inf propagate

    Returns:
    Trajectory with the six daily series and summary metrics
    """
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}; expected one of {METHODS}")
    if interventions is None:
        interventions = InterventionParameters()
    if validate:
        params.validate()
        interventions.validate()

    n_days = int(params.simulation_days)
    N = np.float64(params.population_size)
    mu = np.float64(params.mortality_rate)
    gamma = np.float64(params.recovery_rate)
    seasonality = np.float64(params.seasonality)
    vax_rate = np.float64(interventions.vaccination_rate)
    vax_eff = np.float64(interventions.vaccine_effectiveness)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        sigma = np.float64(1.0) / np.float64(params.incubation_period)
        adjusted_beta = (np.float64(params.transmission_rate)
                         * (1 - np.float64(interventions.social_distancing))
                         * (1 - np.float64(interventions.mask_effectiveness)))

        y = np.empty((n_days, 6), dtype=float)
        y[0] = initial_conditions(params)
        args = (adjusted_beta, seasonality, sigma, gamma, mu, vax_rate * vax_eff, N)

        if method == 'odeint' and n_days > 1:
            # odeint picks its own internal steps; clamping applies to the daily samples
            y[:] = odeint(derivatives, y[0], np.arange(n_days, dtype=float), args=args)
            if clamp:
                y = np.clip(y, 0.0, N)
        else:
            for day in range(n_days - 1):
                if method == 'euler':
                    beta = adjusted_beta * seasonal_factor(day, seasonality)
                    y[day + 1] = _euler_step(y[day], beta, sigma, gamma, mu, vax_rate, vax_eff, N)
                else:
                    y[day + 1] = _rk4_step(y[day], float(day), 1.0, args)
                if clamp:
                    y[day + 1] = np.clip(y[day + 1], 0.0, N)

        r0 = basic_reproduction_number(adjusted_beta, gamma, mu, y[0, 0], N)

    if not clamp and np.any(y < 0):
        warnings.warn(
            "Negative compartment values produced; the fixed step is too coarse "
            "for these rates (values left unclamped)",
            NegativeCompartmentWarning,
            stacklevel=2,
        )

    S, E, I, R, D, V = y.T
    peak_infection, peak_day = find_peak(I)

    return Trajectory(
        susceptible=S,
        exposed=E,
        infected=I,
        recovered=R,
        deceased=D,
        vaccinated=V,
        peak_infection=peak_infection,
        peak_day=peak_day,
        total_cases=float(N - S[-1] - V[-1]),
        total_deaths=float(D[-1]),
        r0=r0,
        population_size=params.population_size,
        method=method,
    )


class EpidemicProjector:
    """SEIRDV projector holding one parameter/intervention pair.

    Parameters:
    params : SimulationParameters
    interventions : InterventionParameters, optional
    method : str. Integration scheme passed to run()
    clamp : bool. Opt-in clipping of compartments into [0, N]
    """

    def __init__(self,
                 params: SimulationParameters,
                 interventions: Optional[InterventionParameters] = None,
                 method: str = 'euler',
                 clamp: bool = False):
        self.params = params
        self.interventions = interventions if interventions is not None else InterventionParameters()
        self.method = method
        self.clamp = clamp

        # store simulation results
        self.results: Optional[Trajectory] = None

    @property
    def adjusted_beta(self) -> float:
        return self.params.transmission_rate * self.interventions.transmission_multiplier

    @property
    def r0(self) -> float:
        S0 = self.params.population_size - self.params.initial_cases
        return basic_reproduction_number(
            self.adjusted_beta, self.params.recovery_rate, self.params.mortality_rate,
            S0, self.params.population_size,
        )

    def simulate(self) -> Trajectory:
        """Run a fresh projection from day 0 and keep it on self.results."""
        self.results = run(self.params, self.interventions, method=self.method, clamp=self.clamp)
        return self.results

    def plot_dynamics(self, save_path: Optional[str] = None, show: bool = True):
        if self.results is None:
            raise ValueError("Must run simulate() before plotting")
        from .utils.plotting import plot_dynamics
        return plot_dynamics(self.results, save_path=save_path, show=show)

    def print_summary(self):
        """Print summary of simulation results."""
        if self.results is None:
            raise ValueError("Must run simulate() before printing summary")
        self.results.print_summary()


if __name__ == "__main__":
    from .parameters import create_baseline_params, create_default_interventions

    print("Initializing epidemic projector...")
    params = create_baseline_params()
    params.print_summary()

    print("\nRunning simulation...")
    model = EpidemicProjector(params, create_default_interventions())
    model.simulate()

    print("\nSimulation complete!")
    model.print_summary()
