"""Volatility and storage sizing analyses over a wind output series."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
import logging

from .config import SolverConfig
from .exceptions import AnalysisError, ConfigurationError, InfeasibleError, ValidationError
from .models import Reservoir, SlidingWindow
from .optimization import bisect_bracket
from .timeseries import TimeSeries
from .validation import StorageValidator

logger = logging.getLogger(__name__)


@dataclass
class WindowReport:
    """Moving average statistics for one window length."""
    window_hours: int
    overall_average_gw: float
    filled: bool = True
    min_average_gw: Optional[float] = None
    max_average_gw: Optional[float] = None
    min_label: Optional[str] = None

    @property
    def min_percent_of_average(self) -> Optional[float]:
        """Lowest moving average as a percentage of the overall average."""
        if self.min_average_gw is None or self.overall_average_gw == 0:
            return None
        return self.min_average_gw / self.overall_average_gw * 100.0


@dataclass
class StorageReport:
    """Sizing results for one storage capacity."""
    capacity_gwh: float
    required_overbuild: Optional[float] = None
    backup_gw: Dict[float, float] = field(default_factory=dict)
    backup_labels: Dict[float, Optional[str]] = field(default_factory=dict)
    solver_iterations: int = 0
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        """Whether every quantity was computed."""
        return self.error is None


class VolatilityAnalyzer:
    """Moving average extremes over several horizons."""

    def __init__(self, window_hours: Sequence[int]):
        """Initialize with the window lengths to evaluate."""
        self.window_hours = list(window_hours)
        # raises ConfigurationError on the first bad length
        for hours in self.window_hours:
            SlidingWindow(hours)

    def analyze(self, series: TimeSeries) -> List[WindowReport]:
        """Push the whole series through every window in a single pass."""
        windows = [SlidingWindow(hours) for hours in self.window_hours]

        for sample in series:
            for window in windows:
                window.push(sample.output_gw, sample.label)

        reports = []
        for window in windows:
            summary = window.summary()
            if not summary.filled:
                logger.warning(
                    "%dh window never filled over %d samples; no extremes recorded",
                    window.window_hours, len(series)
                )
            reports.append(WindowReport(
                window_hours=summary.window_hours,
                overall_average_gw=summary.overall_average,
                filled=summary.filled,
                min_average_gw=summary.min_average,
                max_average_gw=summary.max_average,
                min_label=summary.min_label
            ))

        logger.info("Analyzed %d window lengths over %d samples", len(windows), len(series))
        return reports


class StorageAnalyzer:
    """Storage, overbuild and backup sizing against a constant demand load.

    Every query replays the full series through a fresh reservoir; the
    series itself is shared and never modified.
    """

    def __init__(
        self,
        series: TimeSeries,
        demand_gw: float,
        solver: Optional[SolverConfig] = None
    ):
        """Initialize with the series, demand load and solver settings."""
        try:
            StorageValidator.validate_demand(demand_gw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid demand {demand_gw!r}: {e}") from e

        self.series = series
        self.demand_gw = float(demand_gw)
        self.solver = solver or SolverConfig()

    def _check_overbuild(self, overbuild: float) -> None:
        try:
            StorageValidator.validate_overbuild(overbuild)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid overbuild factor {overbuild!r}: {e}") from e

    def always_meets_demand(self, capacity_gwh: float, overbuild: float) -> bool:
        """Whether demand is met in every hour, stopping at the first shortfall."""
        self._check_overbuild(overbuild)
        reservoir = Reservoir(capacity_gwh)
        demand = self.demand_gw
        for sample in self.series:
            if not reservoir.step_succeeded(sample.output_gw * overbuild - demand, sample.label):
                return False
        return True

    def simulate(self, capacity_gwh: float, overbuild: float) -> Reservoir:
        """Run a full pass and return the reservoir in its final state."""
        self._check_overbuild(overbuild)
        reservoir = Reservoir(capacity_gwh)
        demand = self.demand_gw
        for sample in self.series:
            reservoir.step(sample.output_gw * overbuild - demand, sample.label)
        return reservoir

    def required_backup(self, capacity_gwh: float, overbuild: float = 1.0) -> float:
        """Dispatchable power in GW needed to cover the worst hourly shortfall."""
        return self.simulate(capacity_gwh, overbuild).max_shortfall

    def required_overbuild(self, capacity_gwh: float) -> float:
        """Smallest overbuild factor for which demand is always met."""
        return self._solve_overbuild(capacity_gwh).value

    def _solve_overbuild(self, capacity_gwh: float):
        Reservoir(capacity_gwh)  # reject a bad capacity before searching
        upper = self.solver.upper_bound
        if not self.always_meets_demand(capacity_gwh, upper):
            raise InfeasibleError(
                f"Demand of {self.demand_gw} GW is not met with {capacity_gwh} GWh "
                f"of storage even at {upper}x overbuild"
            )
        return bisect_bracket(
            self.solver.lower_bound,
            upper,
            lambda overbuild: self.always_meets_demand(capacity_gwh, overbuild),
            self.solver.tolerance
        )

    def analyze_capacity(
        self,
        capacity_gwh: float,
        backup_overbuild_factors: Sequence[float] = (1.0, 2.0)
    ) -> StorageReport:
        """Size overbuild and backup for one storage capacity."""
        report = StorageReport(capacity_gwh=capacity_gwh)

        try:
            result = self._solve_overbuild(capacity_gwh)
            report.required_overbuild = result.value
            report.solver_iterations = result.iterations
        except AnalysisError as e:
            logger.warning("Overbuild search failed for %s GWh: %s", capacity_gwh, e)
            report.error = str(e)
        except ConfigurationError as e:
            logger.error("Skipping storage capacity %r: %s", capacity_gwh, e)
            report.error = str(e)
            return report

        for factor in backup_overbuild_factors:
            reservoir = self.simulate(capacity_gwh, factor)
            report.backup_gw[factor] = reservoir.max_shortfall
            report.backup_labels[factor] = reservoir.max_shortfall_label

        logger.debug(
            "storage=%s GWh overbuild=%s backup=%s",
            capacity_gwh, report.required_overbuild, report.backup_gw
        )
        return report

    def analyze(
        self,
        capacities_gwh: Sequence[float],
        backup_overbuild_factors: Sequence[float] = (1.0, 2.0)
    ) -> List[StorageReport]:
        """Size every capacity independently; one failure does not stop the rest."""
        for factor in backup_overbuild_factors:
            self._check_overbuild(factor)

        reports = [
            self.analyze_capacity(capacity, backup_overbuild_factors)
            for capacity in capacities_gwh
        ]

        failures = sum(1 for r in reports if not r.success)
        logger.info(
            "Sized %d storage capacities against %.2f GW demand (%d failed)",
            len(reports), self.demand_gw, failures
        )
        return reports
