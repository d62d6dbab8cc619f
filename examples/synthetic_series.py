"""
Storage sizing on a synthetic series.
This example demonstrates:
- Building a TimeSeries in memory
- Using the analyzers directly without a configuration file
- Deriving demand by rescaling the series to a target mean output
"""

import numpy as np

from windstore import TimeSeries
from windstore.analysis import StorageAnalyzer, VolatilityAnalyzer
from windstore.reporting import render_table, storage_table, volatility_table


def synthetic_wind(hours: int, seed: int = 42) -> TimeSeries:
    """Seasonal cycle plus weather noise, clipped at zero."""
    rng = np.random.RandomState(seed)
    t = np.arange(hours)
    seasonal = 40 + 15 * np.cos(2 * np.pi * t / (365 * 24))
    weather = np.convolve(rng.normal(0, 20, hours), np.ones(48) / 48 * 4, mode="same")
    output = np.clip(seasonal + weather, 0, None)
    return TimeSeries.from_pairs((f"hour {i}", value) for i, value in enumerate(output))


def main():
    series = synthetic_wind(2 * 365 * 24).scaled_to_mean(30.0)
    print(f"Synthetic series: {series!r}, mean {series.mean():.2f} GW")

    volatility = VolatilityAnalyzer([1, 24, 120, 720]).analyze(series)
    print(render_table(volatility_table(volatility)))
    print()

    analyzer = StorageAnalyzer(series, demand_gw=30.0)
    reports = analyzer.analyze([0, 100, 1000, 10000])
    print(render_table(storage_table(reports)))


if __name__ == "__main__":
    main()
