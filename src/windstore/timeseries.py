"""Hourly wind output time series used by every analysis."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, overload

import numpy as np
import pandas as pd

from .exceptions import DataError, ValidationError
from .validation import SeriesValidator


@dataclass(frozen=True)
class Sample:
    """One hourly sample of total wind output."""
    label: str  # timestamp as it appears in the source data
    output_gw: float


class TimeSeries(Sequence):
    """Immutable, ordered sequence of hourly samples.

    The series is assumed gapless and in chronological order; no
    interpolation or reordering is performed. Analyses re-scan the same
    series many times, so it is never mutated after construction.
    """

    def __init__(self, samples: Iterable[Sample]):
        """Initialize from samples, rejecting empty or invalid data."""
        self._samples: Tuple[Sample, ...] = tuple(samples)
        if not self._samples:
            raise DataError("Time series must contain at least one sample")

        for index, sample in enumerate(self._samples):
            try:
                SeriesValidator.validate_label(sample.label)
                SeriesValidator.validate_output(sample.output_gw)
            except ValidationError as e:
                raise DataError(f"Invalid sample at position {index}: {e}") from e

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, float]]) -> 'TimeSeries':
        """Create a series from (label, output_gw) tuples."""
        return cls(Sample(str(label), float(output)) for label, output in pairs)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        label_column: str = "time",
        output_column: str = "output_gw"
    ) -> 'TimeSeries':
        """Create a series from two DataFrame columns."""
        missing = {label_column, output_column} - set(df.columns)
        if missing:
            raise DataError(f"Missing columns: {sorted(missing)}")
        return cls.from_pairs(zip(df[label_column].astype(str), df[output_column]))

    @overload
    def __getitem__(self, index: int) -> Sample: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Sample, ...]: ...

    def __getitem__(self, index):
        return self._samples[index]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return (
            f"TimeSeries({len(self)} samples, "
            f"{self._samples[0].label} .. {self._samples[-1].label})"
        )

    @property
    def labels(self) -> List[str]:
        """Sample labels in order."""
        return [s.label for s in self._samples]

    @property
    def values(self) -> np.ndarray:
        """Output values in GW as a new array."""
        return np.fromiter((s.output_gw for s in self._samples), dtype=float, count=len(self))

    def mean(self) -> float:
        """Average output over the whole series in GW."""
        return float(np.mean(self.values))

    def scaled(self, factor: float) -> 'TimeSeries':
        """Return a new series with every output multiplied by ``factor``."""
        if factor < 0:
            raise DataError(f"Scale factor must be >= 0, got {factor}")
        return TimeSeries(Sample(s.label, s.output_gw * factor) for s in self._samples)

    def scaled_to_mean(self, target_gw: float) -> 'TimeSeries':
        """Return a new series rescaled so its mean output equals ``target_gw``."""
        if target_gw <= 0:
            raise DataError(f"Target mean output must be > 0, got {target_gw}")
        current = self.mean()
        if current == 0:
            raise DataError("Cannot rescale a series whose mean output is zero")
        return self.scaled(target_gw / current)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a DataFrame with ``time`` and ``output_gw`` columns."""
        return pd.DataFrame({"time": self.labels, "output_gw": self.values})


