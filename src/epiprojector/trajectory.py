"""
===========================================================
trajectory.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================

Description:
    Result container for one epidemic projection: six daily
    compartment series (S, E, I, R, D, V) plus the scalar
    summaries (peak, totals, R0).

API:
    Trajectory(...)
      - summary() -> dict of scalar metrics
      - to_dataframe() -> one row per day
      - to_dict() -> JSON-shaped dict (camelCase keys)
      - mass_balance() -> S+E+I+R+D+V per day

Notes:
    - Arrays are made read-only on construction.
    - attack_rate = total_cases / N
    - herd_immunity_threshold = 1 - 1/R0 (NaN unless R0 > 0)
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import math
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Dict, Optional

COMPARTMENTS = ('susceptible', 'exposed', 'infected', 'recovered', 'deceased', 'vaccinated')
SHORT_NAMES = ('S', 'E', 'I', 'R', 'D', 'V')


def _json_float(x: float) -> Optional[float]:
    x = float(x)
    return x if math.isfinite(x) else None


@dataclass(frozen=True)
class Trajectory:
    susceptible: np.ndarray
    exposed: np.ndarray
    infected: np.ndarray
    recovered: np.ndarray
    deceased: np.ndarray
    vaccinated: np.ndarray
    peak_infection: float
    peak_day: int
    total_cases: float
    total_deaths: float
    r0: float
    population_size: int
    method: str = "euler"

    def __post_init__(self):
        lengths = set()
        for name in COMPARTMENTS:
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
            lengths.add(arr.shape)
        if len(lengths) != 1:
            raise ValueError(f"Compartment series must share one length, got {sorted(lengths)}")

    def __len__(self) -> int:
        return len(self.susceptible)

    @property
    def days(self) -> np.ndarray:
        return np.arange(len(self))

    @property
    def attack_rate(self) -> float:
        return self.total_cases / self.population_size

    @property
    def herd_immunity_threshold(self) -> float:
        if not self.r0 > 0:
            return float('nan')
        return 1.0 - 1.0 / self.r0

    def mass_balance(self) -> np.ndarray:
        """Total of all six compartments per day (≈ N in an unclamped run)."""
        return (self.susceptible + self.exposed + self.infected
                + self.recovered + self.deceased + self.vaccinated)

    def summary(self) -> Dict[str, float]:
        return {
            'peak_infection': float(self.peak_infection),
            'peak_day': int(self.peak_day),
            'total_cases': float(self.total_cases),
            'total_deaths': float(self.total_deaths),
            'r0': float(self.r0),
            'attack_rate': float(self.attack_rate),
            'herd_immunity_threshold': float(self.herd_immunity_threshold),
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Tidy daily series, columns day, S, E, I, R, D, V"""
        data = {'day': self.days}
        for short, name in zip(SHORT_NAMES, COMPARTMENTS):
            data[short] = getattr(self, name)
        return pd.DataFrame(data)

    def to_dict(self) -> Dict:
        """JSON-shaped result; non-finite numbers become None."""
        out = {name: [_json_float(x) for x in getattr(self, name)] for name in COMPARTMENTS}
        out.update({
            'peakInfection': _json_float(self.peak_infection),
            'peakDay': int(self.peak_day),
            'totalCases': _json_float(self.total_cases),
            'totalDeaths': _json_float(self.total_deaths),
            'r0': _json_float(self.r0),
            'metrics': {
                'attackRate': _json_float(self.attack_rate),
                'herdImmunityThreshold': _json_float(self.herd_immunity_threshold),
            },
        })
        return out

    def print_summary(self):
        """Print summary of projection results."""
        print("EPIDEMIC PROJECTION RESULTS:")
        print(f"Horizon: {len(self)} days ({self.method})")
        print(f"Population size: {self.population_size:,}")
        print("\n--- EPIDEMIC OUTCOMES ---")
        print(f"R₀: {self.r0:.2f}")
        print(f"Herd immunity threshold: {self.herd_immunity_threshold * 100:.1f}%")
        print(f"Peak infections: {self.peak_infection:,.0f} (day {self.peak_day})")
        print(f"Total cases: {self.total_cases:,.0f}")
        print(f"Attack rate: {self.attack_rate * 100:.2f}%")
        print(f"Total deaths: {self.total_deaths:,.0f}")
        print("\n--- FINAL STATE ---")
        print(f"Susceptible: {self.susceptible[-1]:,.0f}")
        print(f"Recovered: {self.recovered[-1]:,.0f}")
        print(f"Vaccinated: {self.vaccinated[-1]:,.0f}")
