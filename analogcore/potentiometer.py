"""Potentiometer acting as a voltage divider with a selectable taper."""

from __future__ import annotations

from enum import Enum

MIN_POSITION = 0.0
MAX_POSITION = 1.0


class TaperType(Enum):
    """How wiper travel maps onto resistance."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


def _clamp_position(value: float) -> float:
    return min(max(value, MIN_POSITION), MAX_POSITION)


class Potentiometer:
    """A three-terminal potentiometer."""

    def __init__(
        self,
        total_resistance: float,
        initial_position: float = 0.5,
        taper: TaperType = TaperType.LINEAR,
    ) -> None:
        self.total_resistance = total_resistance
        self._position = _clamp_position(initial_position)
        self.taper = taper

    @property
    def position(self) -> float:
        """Wiper position between 0.0 and 1.0."""
        return self._position

    @position.setter
    def position(self, value: float) -> None:
        self._position = _clamp_position(value)

    @property
    def effective_position(self) -> float:
        """Wiper position after applying the taper curve."""
        if self.taper is TaperType.LOGARITHMIC:
            return (10.0**self._position - 1.0) / 9.0
        return self._position

    @property
    def resistance1(self) -> float:
        """Resistance between the wiper and terminal 1."""
        return self.total_resistance * self.effective_position

    @property
    def resistance2(self) -> float:
        """Resistance between the wiper and terminal 2."""
        return self.total_resistance * (1.0 - self.effective_position)

    def process(self, voltage1: float, voltage2: float) -> float:
        """Return the wiper voltage with the terminals at the given voltages."""
        return voltage1 + (voltage2 - voltage1) * self.effective_position