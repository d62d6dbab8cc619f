"""
Bounded energy reservoir stepped one hour at a time.
Charges from surplus generation, discharges to cover deficits, and records the
worst shortfall it could not cover.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ConfigurationError, ValidationError
from ..validation import StorageValidator


@dataclass
class ReservoirState:
    """Current state of the reservoir."""
    capacity: float  # GWh
    current: float  # GWh stored
    max_shortfall: float = 0.0  # GWh, largest single-step shortfall
    max_shortfall_label: Optional[str] = None
    steps: int = 0
    shortfall_steps: int = 0


class Reservoir:
    """Energy store with ``0 <= current <= capacity`` after every step.

    The reservoir starts full. A step that asks for more energy than is
    stored leaves the reservoir empty and records the missing energy as a
    shortfall; the stored energy is never driven negative.
    """

    def __init__(self, capacity_gwh: float):
        """Initialize a full reservoir with the given capacity."""
        try:
            StorageValidator.validate_capacity(capacity_gwh)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid storage capacity {capacity_gwh!r}: {e}") from e

        self.capacity = float(capacity_gwh)
        self.current = self.capacity
        self.max_shortfall = 0.0
        self.max_shortfall_label: Optional[str] = None
        self.last_shortfall = 0.0
        self._steps = 0
        self._shortfall_steps = 0

    def step(self, delta_gwh: float, label: str) -> bool:
        """Add ``delta_gwh`` (negative to draw down) for one hour.

        Returns True if the step was met without shortfall.
        """
        tentative = min(self.current + delta_gwh, self.capacity)
        self.current = max(tentative, 0.0)

        shortfall = self.current - tentative
        self.last_shortfall = shortfall
        self._steps += 1
        if shortfall > 0.0:
            self._shortfall_steps += 1
            if shortfall > self.max_shortfall:
                self.max_shortfall = shortfall
                self.max_shortfall_label = label
            return False
        return True

    def step_succeeded(self, delta_gwh: float, label: str) -> bool:
        """Step and report whether demand was fully met."""
        return self.step(delta_gwh, label)

    def step_had_shortfall(self, delta_gwh: float, label: str) -> bool:
        """Step and report whether any energy was missing."""
        return not self.step(delta_gwh, label)

    @property
    def state_of_charge(self) -> float:
        """Stored energy as a fraction of capacity (1.0 for a zero-capacity store)."""
        if self.capacity == 0:
            return 1.0
        return self.current / self.capacity

    def get_state(self) -> ReservoirState:
        """Snapshot of the reservoir state."""
        return ReservoirState(
            capacity=self.capacity,
            current=self.current,
            max_shortfall=self.max_shortfall,
            max_shortfall_label=self.max_shortfall_label,
            steps=self._steps,
            shortfall_steps=self._shortfall_steps
        )
