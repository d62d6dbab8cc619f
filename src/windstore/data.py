"""Loading of national wind output from capacity and capacity-factor CSV files."""

from pathlib import Path
from typing import Union
import logging

import numpy as np
import pandas as pd

from .exceptions import DataError
from .timeseries import TimeSeries

logger = logging.getLogger(__name__)

MW_PER_GW = 1000.0


def load_capacities(path: Union[str, Path]) -> np.ndarray:
    """Read installed capacity per region, in GW.

    The file has one column per region and the capacities in MW on the
    first data row.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Capacities file not found: {path}")

    df = pd.read_csv(path)
    if df.empty:
        raise DataError(f"Capacities file has no data rows: {path}")

    try:
        capacities_mw = df.iloc[0].astype(float).to_numpy()
    except ValueError as e:
        raise DataError(f"Non-numeric capacity in {path}: {e}") from e

    if np.any(capacities_mw < 0):
        raise DataError(f"Negative capacity in {path}")

    return capacities_mw / MW_PER_GW


def load_wind_data(
    capacities_path: Union[str, Path],
    output_path: Union[str, Path]
) -> TimeSeries:
    """Load hourly total wind output in GW across all regions.

    ``output_path`` holds a timestamp column followed by one column per
    region, each a ratio of that region's installed capacity. Regions are
    matched to the capacities file by column position.
    """
    capacities_gw = load_capacities(capacities_path)

    output_path = Path(output_path)
    if not output_path.exists():
        raise FileNotFoundError(f"Output file not found: {output_path}")

    df = pd.read_csv(output_path)
    if df.empty:
        raise DataError(f"Output file has no data rows: {output_path}")

    ratios = df.iloc[:, 1:]
    if ratios.shape[1] != len(capacities_gw):
        raise DataError(
            f"{output_path} has {ratios.shape[1]} regions but "
            f"{capacities_path} has {len(capacities_gw)}"
        )

    try:
        totals = ratios.astype(float).to_numpy() @ capacities_gw
    except ValueError as e:
        raise DataError(f"Non-numeric capacity factor in {output_path}: {e}") from e

    labels = df.iloc[:, 0].astype(str)
    series = TimeSeries.from_pairs(zip(labels, totals))

    logger.info(
        "Loaded %d hourly samples across %d regions (%.2f GW installed)",
        len(series), len(capacities_gw), float(capacities_gw.sum())
    )
    return series
