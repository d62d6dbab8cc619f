"""Visualization tools for volatility and storage sizing results."""

from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .analysis import StorageReport, WindowReport
from .timeseries import TimeSeries


def plot_volatility(
    reports: Sequence[WindowReport],
    figsize: Tuple[int, int] = (10, 6)
) -> plt.Figure:
    """Plot min and max moving average against window length."""
    filled = [r for r in reports if r.filled]
    hours = np.array([r.window_hours for r in filled], dtype=float)
    mins = np.array([r.min_average_gw for r in filled], dtype=float)
    maxs = np.array([r.max_average_gw for r in filled], dtype=float)

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(hours, maxs, 'g-o', label='Max moving average')
    ax.plot(hours, mins, 'r-o', label='Min moving average')
    ax.fill_between(hours, mins, maxs, alpha=0.15)
    if reports:
        ax.axhline(reports[0].overall_average_gw, color='k', linestyle='--', label='Overall average')

    ax.set_xscale('log')
    ax.set_xlabel("Window length (hours)")
    ax.set_ylabel("Power (GW)")
    ax.set_title("Wind Output Moving Average Extremes")
    ax.grid(True)
    ax.legend()
    fig.tight_layout()

    return fig


def plot_storage(
    reports: Sequence[StorageReport],
    backup_overbuild_factors: Sequence[float] = (1.0, 2.0),
    figsize: Tuple[int, int] = (12, 5)
) -> plt.Figure:
    """Plot required overbuild and backup power against storage capacity."""
    # log axis, so zero storage is drawn at the first positive capacity
    capacities = np.array([r.capacity_gwh for r in reports], dtype=float)
    positive = capacities[capacities > 0]
    floor = positive.min() / 2 if positive.size else 1.0
    x = np.where(capacities > 0, capacities, floor)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    overbuild = np.array(
        [np.nan if r.required_overbuild is None else r.required_overbuild for r in reports],
        dtype=float
    )
    ax1.plot(x, overbuild, 'b-o')
    ax1.set_xscale('log')
    ax1.set_xlabel("Storage (GWh)")
    ax1.set_ylabel("Overbuild factor")
    ax1.set_title("Overbuild Required")
    ax1.grid(True)

    for factor in backup_overbuild_factors:
        backup = np.array([r.backup_gw.get(factor, np.nan) for r in reports], dtype=float)
        ax2.plot(x, backup, '-o', label=f"{factor:g}x overbuild")
    ax2.set_xscale('log')
    ax2.set_xlabel("Storage (GWh)")
    ax2.set_ylabel("Backup (GW)")
    ax2.set_title("Backup Power Required")
    ax2.grid(True)
    ax2.legend()

    fig.tight_layout()
    return fig


def plot_series(
    series: TimeSeries,
    rolling_window: Optional[int] = None,
    figsize: Tuple[int, int] = (12, 6)
) -> plt.Figure:
    """Plot hourly output, optionally smoothed by a rolling mean."""
    df = series.to_dataframe()
    values = df["output_gw"]
    if rolling_window:
        values = values.rolling(window=rolling_window).mean()

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(np.arange(len(values)), values.to_numpy(), linewidth=0.8)

    ax.set_xlabel("Hour")
    ax.set_ylabel("Power (GW)")
    title = "Wind Output"
    if rolling_window:
        title += f" ({rolling_window}h rolling mean)"
    ax.set_title(title)
    ax.grid(True)

    return fig
