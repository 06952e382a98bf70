"""Resistor model with temperature, self-heating and parasitic effects."""

from __future__ import annotations

import math

MIN_RESISTANCE = 1.0
MAX_RESISTANCE = 1e6
DEFAULT_TEMPERATURE = 293.15
MIN_TEMPERATURE = 233.15
MAX_TEMPERATURE = 373.15
BOLTZMANN = 1.380649e-23
NOISE_BANDWIDTH = 20000.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Resistor:
    """A resistor whose value drifts with temperature and dissipated power."""

    def __init__(
        self,
        resistance: float = 1000.0,
        temp_coeff: float = 0.0039,
        power_rating: float = 0.25,
        parasitic_cap: float = 0.5e-12,
        parasitic_ind: float = 0.1e-9,
    ) -> None:
        self._nominal = _clamp(resistance, MIN_RESISTANCE, MAX_RESISTANCE)
        self.temp_coeff = temp_coeff
        self.power_rating = power_rating
        self.parasitic_cap = parasitic_cap
        self.parasitic_ind = parasitic_ind
        self._temperature = DEFAULT_TEMPERATURE
        self.power_dissipation = 0.0
        self.last_voltage = 0.0
        self.last_current = 0.0
        self._actual = self._nominal
        self._update_actual_resistance()

    @property
    def resistance(self) -> float:
        """Nominal resistance, clamped to 1 Ω .. 1 MΩ."""
        return self._nominal

    @resistance.setter
    def resistance(self, value: float) -> None:
        self._nominal = _clamp(value, MIN_RESISTANCE, MAX_RESISTANCE)
        self._update_actual_resistance()

    @property
    def temperature(self) -> float:
        """Temperature in kelvin, clamped to the operating range."""
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._temperature = _clamp(value, MIN_TEMPERATURE, MAX_TEMPERATURE)
        self._update_actual_resistance()

    @property
    def actual_resistance(self) -> float:
        """Resistance including temperature and power effects."""
        return self._actual

    def _update_actual_resistance(self) -> None:
        temp_effect = 1.0 + self.temp_coeff * (self._temperature - DEFAULT_TEMPERATURE)
        power_effect = 1.0 + self.power_dissipation / self.power_rating
        self._actual = self._nominal * temp_effect * power_effect

    def _frequency_effect(self, frequency: float) -> float:
        if frequency <= 0.0:
            return 1.0
        omega = 2.0 * math.pi * frequency
        xc = 1.0 / (omega * self.parasitic_cap)
        xl = omega * self.parasitic_ind
        parasitic = (xc * xl) / math.sqrt(xc * xc + xl * xl)
        total = math.sqrt(self._actual**2 + parasitic**2)
        return total / self._actual

    def process(self, voltage: float) -> float:
        """Apply ``voltage``, update self-heating and return the current."""
        current = self.current(voltage)
        self.power_dissipation = self.power(voltage)
        self._update_actual_resistance()
        self.last_voltage = voltage
        self.last_current = current
        return current

    def current(self, voltage: float) -> float:
        """Return the current through the resistor for ``voltage``."""
        return voltage / self._actual

    def voltage(self, current: float, frequency: float = 0.0) -> float:
        """Return the voltage across the resistor for ``current`` at ``frequency``."""
        return current * self._actual * self._frequency_effect(frequency)

    def power(self, voltage: float) -> float:
        """Return the power dissipated with ``voltage`` across the resistor."""
        return voltage * voltage / self._actual

    def thermal_noise(self) -> float:
        """Return the Johnson-Nyquist noise voltage over the audio band."""
        return math.sqrt(
            4.0 * BOLTZMANN * self._temperature * self._actual * NOISE_BANDWIDTH
        )

    def reset(self) -> None:
        """Clear history and self-heating."""
        self.last_voltage = 0.0
        self.last_current = 0.0
        self.power_dissipation = 0.0
        self._update_actual_resistance()