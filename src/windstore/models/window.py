"""
Sliding window tracker for moving averages over a fixed number of hours.
Keeps the running extremes of the moving average and the label at which the
lowest average was observed.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from ..exceptions import AnalysisError, ConfigurationError, ValidationError, WindowNotFilledError
from ..validation import WindowValidator


@dataclass
class WindowSummary:
    """Final statistics read from a window after the series has been pushed."""
    window_hours: int
    filled: bool
    sample_count: int
    overall_average: float
    min_average: Optional[float] = None
    max_average: Optional[float] = None
    min_label: Optional[str] = None


class SlidingWindow:
    """Moving average over the most recent ``window_hours`` samples.

    The ring holds at most ``window_hours`` values; the oldest is evicted
    once it is full. The window sum is maintained incrementally with
    compensated (Neumaier) summation, so each push is O(1) and a large value
    leaving the ring does not swallow the small ones that follow it.
    Min/max of the moving average only count once the ring has filled: a
    partial window is not a fair sample at this horizon.
    """

    def __init__(self, window_hours: int):
        """Initialize an empty window of the given length."""
        try:
            WindowValidator.validate_window_hours(window_hours)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid window length {window_hours!r}: {e}") from e

        self.window_hours = int(window_hours)

        self._ring: Deque[float] = deque(maxlen=self.window_hours)
        self._window_sum = 0.0
        self._compensation = 0.0  # low-order bits lost from _window_sum

        # totals across every push, independent of the window length
        self._total_of_all_samples = 0.0
        self._sample_count = 0

        self._min_average = float("inf")
        self._max_average = float("-inf")
        self._min_label: Optional[str] = None

    def push(self, value: float, label: str) -> None:
        """Append one sample, evicting the oldest value if the ring is full."""
        if len(self._ring) == self.window_hours:
            self._accumulate(-self._ring[0])
        self._ring.append(value)
        self._accumulate(value)

        if self.is_full:
            average = self.current_average()
            if average > self._max_average:
                self._max_average = average
            if average < self._min_average:
                self._min_average = average
                self._min_label = label

        self._total_of_all_samples += value
        self._sample_count += 1

    @property
    def is_full(self) -> bool:
        """Whether the ring holds ``window_hours`` values."""
        return len(self._ring) == self.window_hours

    @property
    def has_filled(self) -> bool:
        """Whether a full-window average has ever been recorded."""
        return self._min_label is not None

    @property
    def sample_count(self) -> int:
        """Number of samples pushed so far."""
        return self._sample_count

    def __len__(self) -> int:
        return len(self._ring)

    def recent_values(self) -> List[float]:
        """Values currently held in the ring, oldest first."""
        return list(self._ring)

    def current_average(self) -> float:
        """Mean of the values currently held in the ring."""
        if not self._ring:
            raise AnalysisError("Window is empty")
        return (self._window_sum + self._compensation) / len(self._ring)

    def overall_average(self) -> float:
        """Mean of every value ever pushed."""
        if self._sample_count == 0:
            raise AnalysisError("Cannot average a window that has received no samples")
        return self._total_of_all_samples / self._sample_count

    def min_average(self) -> float:
        """Lowest full-window moving average seen."""
        self._require_filled()
        return self._min_average

    def max_average(self) -> float:
        """Highest full-window moving average seen."""
        self._require_filled()
        return self._max_average

    def min_label(self) -> str:
        """Label of the sample that completed the lowest moving average."""
        self._require_filled()
        return self._min_label

    def summary(self) -> WindowSummary:
        """Collect the window's statistics, tolerating a window that never filled."""
        summary = WindowSummary(
            window_hours=self.window_hours,
            filled=self.has_filled,
            sample_count=self._sample_count,
            overall_average=self.overall_average()
        )
        if self.has_filled:
            summary.min_average = self._min_average
            summary.max_average = self._max_average
            summary.min_label = self._min_label
        return summary

    def _accumulate(self, value: float) -> None:
        total = self._window_sum + value
        if abs(self._window_sum) >= abs(value):
            self._compensation += (self._window_sum - total) + value
        else:
            self._compensation += (value - total) + self._window_sum
        self._window_sum = total

    def _require_filled(self) -> None:
        if not self.has_filled:
            raise WindowNotFilledError(
                f"{self.window_hours}h window never filled "
                f"({self._sample_count} samples pushed)"
            )
