"""Core wind storage analysis driver."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
import logging

from .analysis import StorageAnalyzer, StorageReport, VolatilityAnalyzer, WindowReport
from .config import AnalysisConfig
from .data import load_wind_data
from .exceptions import ConfigurationError
from .timeseries import TimeSeries

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResults:
    """Everything produced by one analysis run."""
    sample_count: int
    average_output_gw: float
    demand_gw: float
    volatility: List[WindowReport] = field(default_factory=list)
    storage: List[StorageReport] = field(default_factory=list)
    backup_overbuild_factors: List[float] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)


class WindAnalysis:
    """Runs the volatility and storage analyses described by a configuration."""

    def __init__(self, config: AnalysisConfig, series: Optional[TimeSeries] = None):
        """Initialize with configuration and an optional preloaded series."""
        config.ensure_valid()
        self.config = config
        self._raw_series = series
        self._series: Optional[TimeSeries] = None
        self.last_run_time: Optional[datetime] = None

    @property
    def series(self) -> TimeSeries:
        """The series analysed, loaded and rescaled on first access."""
        if self._series is None:
            raw = self._raw_series if self._raw_series is not None else self._load()
            if self.config.demand.is_derived:
                target = self.config.demand.mean_output_gw
                logger.info("Rescaling series from %.2f GW to %.2f GW mean output", raw.mean(), target)
                raw = raw.scaled_to_mean(target)
            self._series = raw
        return self._series

    @property
    def demand_gw(self) -> float:
        """Demand load used by the storage analysis."""
        if self.config.demand.is_derived:
            return self.config.demand.mean_output_gw
        return self.config.demand.load_gw

    def _load(self) -> TimeSeries:
        data = self.config.data
        if not data.capacities_file or not data.output_file:
            raise ConfigurationError("No series given and no data files configured")
        return load_wind_data(data.capacities_file, data.output_file)

    def run_volatility(self) -> List[WindowReport]:
        """Moving average extremes for every configured window length."""
        analyzer = VolatilityAnalyzer(self.config.volatility.window_hours)
        return analyzer.analyze(self.series)

    def run_storage(self) -> List[StorageReport]:
        """Overbuild and backup requirements for every configured capacity."""
        analyzer = StorageAnalyzer(self.series, self.demand_gw, self.config.solver)
        return analyzer.analyze(
            self.config.storage.capacities_gwh,
            self.config.storage.backup_overbuild_factors
        )

    def run(self) -> AnalysisResults:
        """Run both analyses."""
        series = self.series
        logger.info(
            "Starting analysis '%s' over %d samples (%s .. %s)",
            self.config.name, len(series), series[0].label, series[-1].label
        )

        results = AnalysisResults(
            sample_count=len(series),
            average_output_gw=series.mean(),
            demand_gw=self.demand_gw,
            volatility=self.run_volatility(),
            storage=self.run_storage(),
            backup_overbuild_factors=list(self.config.storage.backup_overbuild_factors)
        )

        self.last_run_time = results.timestamp
        logger.info("Analysis '%s' complete", self.config.name)
        return results
