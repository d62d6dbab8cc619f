"""Tabular reports of analysis results."""

from typing import List, Optional, Sequence

import pandas as pd

from .analysis import StorageReport, WindowReport
from .core import AnalysisResults

VOLATILITY_COLUMNS = ["Window Size", "Min (GW)", "Max (GW)", "Min as % Avg", "Date of Min"]


def format_window_size(hours: int) -> str:
    """Render a window length in hours below a day and in days otherwise."""
    if hours < 24:
        return f"{hours: >3} hrs"
    return f"{hours / 24.0: >3g} days"


def _fmt(value: Optional[float], suffix: str = "") -> str:
    if value is None:
        return "n/a"
    return f"{value:.2f}{suffix}"


def backup_column(factor: float) -> str:
    """Column heading for backup power at an overbuild factor."""
    if factor == 1.0:
        return "Backup required (GW)"
    return f"Backup required {factor:g}x overbuild (GW)"


def volatility_table(reports: Sequence[WindowReport]) -> pd.DataFrame:
    """One row per window length."""
    rows = [
        {
            "Window Size": format_window_size(report.window_hours),
            "Min (GW)": _fmt(report.min_average_gw),
            "Max (GW)": _fmt(report.max_average_gw),
            "Min as % Avg": _fmt(report.min_percent_of_average, "%"),
            "Date of Min": report.min_label or ""
        }
        for report in reports
    ]
    return pd.DataFrame(rows, columns=VOLATILITY_COLUMNS)


def storage_table(
    reports: Sequence[StorageReport],
    backup_overbuild_factors: Sequence[float] = (1.0, 2.0)
) -> pd.DataFrame:
    """One row per storage capacity."""
    columns = ["Storage (GWh)", "Overbuild factor required"]
    columns += [backup_column(factor) for factor in backup_overbuild_factors]

    rows = []
    for report in reports:
        row = {
            "Storage (GWh)": f"{report.capacity_gwh:g}",
            "Overbuild factor required": _fmt(report.required_overbuild)
        }
        for factor in backup_overbuild_factors:
            row[backup_column(factor)] = _fmt(report.backup_gw.get(factor))
        rows.append(row)

    return pd.DataFrame(rows, columns=columns)


def render_table(df: pd.DataFrame) -> str:
    """Left-aligned plain text table."""
    return df.to_string(index=False, justify="left")


def render_results(results: AnalysisResults) -> str:
    """Both tables with the average output footer."""
    sections: List[str] = [
        render_table(volatility_table(results.volatility)),
        f"Average output: {results.average_output_gw:.2f} GW",
        "",
        f"Demand load: {results.demand_gw:.2f} GW",
        render_table(storage_table(results.storage, results.backup_overbuild_factors))
    ]
    return "\n".join(sections)
