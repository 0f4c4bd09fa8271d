"""
===========================================================
plotting.py
Author: Veronica Scerra
Last Updated: 2026-10-19
===========================================================
Visualization functions for epidemic projections.

Time series of the six compartments, the infection curve
with its peak marked, and a 2x2 dashboard combining them
with cumulative cases/deaths and vaccination coverage.
"""
import matplotlib.pyplot as plt
from typing import Optional
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..trajectory import Trajectory

COLORS = {
    'susceptible': 'blue',
    'exposed': 'orange',
    'infected': 'red',
    'recovered': 'green',
    'deceased': 'black',
    'vaccinated': 'purple',
}


def plot_compartments(traj: Trajectory,
                      ax: Optional[Axes] = None,
                      show: bool = True,
                      title: Optional[str] = None) -> Axes:
    """
    Plot all six compartments against day.

    Parameters
    ----------
    traj : Trajectory
        Projection result
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates new figure
    show : bool
        Whether to display the plot immediately
    title : str, optional
        Custom title. Defaults to one showing R0

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    for name, color in COLORS.items():
        ax.plot(traj.days, getattr(traj, name), color=color, linewidth=2, label=name.title())

    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('Number of individuals', fontsize=12)
    ax.set_title(title if title else f'SEIRDV Projection ($R_0$ = {traj.r0:.2f})', fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    if show:
        plt.tight_layout()
        plt.show()

    return ax


def plot_infection_curve(traj: Trajectory,
                         ax: Optional[Axes] = None,
                         show: bool = True) -> Axes:
    """Infected over time with the peak day marked"""
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(traj.days, traj.infected, color='red', linewidth=2, label='Infected')
    ax.axvline(traj.peak_day, color='gray', linestyle='--', alpha=0.7)
    ax.plot([traj.peak_day], [traj.peak_infection], 'ko',
            label=f'Peak {traj.peak_infection:,.0f} (day {traj.peak_day})')
    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('Infected', fontsize=12)
    ax.set_title('Infection Curve', fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    if show:
        plt.tight_layout()
        plt.show()

    return ax


def plot_dynamics(traj: Trajectory,
                  save_path: Optional[str] = None,
                  show: bool = True) -> Figure:
    """2x2 dashboard; saved to save_path when given"""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))

    plot_compartments(traj, ax=axes[0, 0], show=False)
    plot_infection_curve(traj, ax=axes[0, 1], show=False)

    # cumulative cases = everyone who has left S other than by vaccination
    ax = axes[1, 0]
    cumulative_cases = traj.population_size - traj.susceptible - traj.vaccinated
    ax.plot(traj.days, cumulative_cases, color='darkblue', linewidth=2, label='Cumulative cases')
    ax.plot(traj.days, traj.deceased, color='black', linewidth=2, label='Cumulative deaths')
    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('Individuals', fontsize=12)
    ax.set_title('Cumulative Cases and Deaths', fontsize=14, fontweight='bold')
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    ax = axes[1, 1]
    ax.plot(traj.days, traj.vaccinated / traj.population_size * 100, color='purple', linewidth=2)
    ax.set_xlabel('Day', fontsize=12)
    ax.set_ylabel('Vaccinated (%)', fontsize=12)
    ax.set_title('Vaccination Coverage', fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)

    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to {save_path}")

    if show:
        plt.show()

    return fig
