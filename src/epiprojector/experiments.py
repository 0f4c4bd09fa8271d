"""
===========================================================
experiments.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================

Description:
    Scenario comparison and intervention sweeps for the
    epidemic projector: run named intervention sets or a grid
    over (social_distancing, mask_effectiveness), collect the
    summary metrics as a tidy DataFrame, and plot heatmaps.

Example Usage:
    from epiprojector.experiments import compare_scenarios, standard_scenarios
    df = compare_scenarios(params, standard_scenarios())
    sweep = intervention_sweep(params, [0, .2, .4], [0, .3, .6])
    heatmap(sweep, x='social_distancing', y='mask_effectiveness', value='attack_rate')

Notes:
    - Uses only numpy, pandas, matplotlib.
    - Extra keyword arguments are forwarded to projector.run().
-----------------------------------------------------------
License: MIT
===========================================================
"""
from __future__ import annotations
import dataclasses
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from typing import Dict, Mapping, Optional, Sequence

from .parameters import InterventionParameters, SimulationParameters, create_default_interventions
from .projector import run


def _summarize_one(params, interventions, **run_kwargs) -> Dict[str, float]:
    """Run one projection and return its summary metrics"""
    traj = run(params, interventions, **run_kwargs)
    rec = {
        'social_distancing': float(interventions.social_distancing),
        'mask_effectiveness': float(interventions.mask_effectiveness),
        'vaccination_rate': float(interventions.vaccination_rate),
        'vaccine_effectiveness': float(interventions.vaccine_effectiveness),
    }
    rec.update(traj.summary())
    return rec


def standard_scenarios() -> Dict[str, InterventionParameters]:
    """No intervention, NPIs only, vaccination only, and both combined."""
    combined = create_default_interventions()
    return {
        'no intervention': InterventionParameters(),
        'distancing + masks': InterventionParameters(
            social_distancing=combined.social_distancing,
            mask_effectiveness=combined.mask_effectiveness,
        ),
        'vaccination': InterventionParameters(
            vaccination_rate=combined.vaccination_rate,
            vaccine_effectiveness=combined.vaccine_effectiveness,
        ),
        'combined': combined,
    }


def compare_scenarios(params: SimulationParameters,
                      scenarios: Mapping[str, InterventionParameters],
                      **run_kwargs) -> pd.DataFrame:
    """One row per named scenario, in the order given"""
    records = []
    for name, interventions in scenarios.items():
        rec = {'scenario': name}
        rec.update(_summarize_one(params, interventions, **run_kwargs))
        records.append(rec)
    return pd.DataFrame.from_records(records)


def intervention_sweep(params: SimulationParameters,
                       social_distancing: Sequence[float],
                       mask_effectiveness: Sequence[float],
                       base: Optional[InterventionParameters] = None,
                       **run_kwargs) -> pd.DataFrame:
    """
    Evaluate the projector across a grid of (social_distancing,
    mask_effectiveness). Vaccination settings come from `base`.
    Returns a tidy DataFrame with one row per combination.
    """
    base = base if base is not None else InterventionParameters()
    records = []
    for sd in social_distancing:
        for mask in mask_effectiveness:
            iv = dataclasses.replace(base, social_distancing=float(sd), mask_effectiveness=float(mask))
            records.append(_summarize_one(params, iv, **run_kwargs))
    df = pd.DataFrame.from_records(records)
    return df.sort_values(['social_distancing', 'mask_effectiveness']).reset_index(drop=True)


def pivot_for_plot(df: pd.DataFrame, x: str, y: str, value: str):
    """Reshape a tidy sweep into meshgrid arrays (rows follow y, columns follow x).
    Repeated (x, y) pairs are averaged.
    """
    grid = df.pivot_table(index=y, columns=x, values=value, aggfunc="mean")
    grid = grid.sort_index().sort_index(axis=1)
    X, Y = np.meshgrid(grid.columns.to_numpy(dtype=float), grid.index.to_numpy(dtype=float))
    return X, Y, grid.to_numpy(dtype=float)


def heatmap(df: pd.DataFrame, x: str, y: str, value: str, xlabel=None, ylabel=None,
            title=None, show: bool = True):
    """Plot a heatmap of a summary metric (e.g., attack_rate, peak_infection)"""
    X, Y, Z = pivot_for_plot(df, x=x, y=y, value=value)
    fig, ax = plt.subplots()
    extent = [X.min(), X.max(), Y.min(), Y.max()]
    im = ax.imshow(Z, origin='lower', aspect='auto', extent=extent)
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label(value.replace("_", " ").title())
    ax.set_xlabel(xlabel if xlabel else x)
    ax.set_ylabel(ylabel if ylabel else y)
    if title:
        ax.set_title(title)
    fig.tight_layout()
    if show:
        plt.show()
    return ax
