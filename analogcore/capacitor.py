"""Capacitor model with ESR, ESL, temperature drift and dielectric absorption."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

MIN_CAPACITANCE = 1e-12
MAX_CAPACITANCE = 1e-3
REFERENCE_TEMPERATURE = 293.15
DEFAULT_SAMPLE_RATE = 44100.0

# Time constants (seconds) of the dielectric absorption mechanisms.
DA_TIME_CONSTANTS = (0.001, 0.01, 0.1, 1.0, 10.0, 100.0, 1000.0, 10000.0)


class CapacitorType(Enum):
    """Dielectric families with their own typical characteristics."""

    FILM = "film"
    CERAMIC = "ceramic"
    ELECTROLYTIC = "electrolytic"
    MICA = "mica"
    PAPER = "paper"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Characteristics:
    """Typical electrical and environmental ratings of a capacitor type."""

    default_esr: float
    default_esl: float
    dielectric_absorption: float
    temp_coef_cap: float
    temp_coef_esr: float
    max_voltage: float
    min_temp: float
    max_temp: float
    max_current: float
    min_frequency: float
    max_frequency: float
    is_polarized: bool


CHARACTERISTICS: dict[CapacitorType, Characteristics] = {
    CapacitorType.FILM: Characteristics(
        0.25, 2.5e-9, 0.002, -150e-6, 0.002, 400.0, 233.15, 373.15, 0.1, 0.1, 1e6, False
    ),
    CapacitorType.CERAMIC: Characteristics(
        0.015, 0.3e-9, 0.02, -1500e-6, 0.001, 50.0, 233.15, 398.15, 0.5, 0.1, 1e9, False
    ),
    CapacitorType.ELECTROLYTIC: Characteristics(
        0.1, 5.0e-9, 0.05, -1000e-6, 0.005, 16.0, 233.15, 358.15, 1.0, 0.1, 1e5, True
    ),
    CapacitorType.MICA: Characteristics(
        0.05, 1.0e-9, 0.001, 50e-6, 0.001, 500.0, 233.15, 398.15, 0.2, 0.1, 1e8, False
    ),
    CapacitorType.PAPER: Characteristics(
        0.5, 10.0e-9, 0.01, -200e-6, 0.003, 600.0, 233.15, 373.15, 0.05, 0.1, 1e5, False
    ),
}


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Capacitor:
    """A non-ideal capacitor processed one sample at a time."""

    def __init__(
        self,
        type: CapacitorType = CapacitorType.FILM,
        capacitance: float = 1e-6,
        temperature: float = REFERENCE_TEMPERATURE,
    ) -> None:
        self._type = type
        self._capacitance = _clamp(capacitance, MIN_CAPACITANCE, MAX_CAPACITANCE)
        self._temperature = temperature
        self.voltage = 0.0
        self.current = 0.0
        self._last_voltage = 0.0
        self._last_current = 0.0
        self.sample_rate = DEFAULT_SAMPLE_RATE
        self._dt = 1.0 / DEFAULT_SAMPLE_RATE
        self._da_voltages = [0.0] * len(DA_TIME_CONSTANTS)
        # A custom capacitor starts from film values until tuned.
        self.characteristics = CHARACTERISTICS[CapacitorType.FILM]
        self._apply_characteristics()

    def _apply_characteristics(self) -> None:
        if self._type is not CapacitorType.CUSTOM:
            self.characteristics = CHARACTERISTICS[self._type]
        self._esr = self.characteristics.default_esr
        self._esl = self.characteristics.default_esl

    @property
    def type(self) -> CapacitorType:
        return self._type

    @type.setter
    def type(self, value: CapacitorType) -> None:
        self._type = value
        self._apply_characteristics()

    @property
    def capacitance(self) -> float:
        return self._capacitance

    @capacitance.setter
    def capacitance(self, value: float) -> None:
        self._capacitance = _clamp(value, MIN_CAPACITANCE, MAX_CAPACITANCE)

    @property
    def esr(self) -> float:
        """Equivalent series resistance; only writable for custom capacitors."""
        return self._esr

    @esr.setter
    def esr(self, value: float) -> None:
        if self._type is CapacitorType.CUSTOM:
            self._esr = value

    @property
    def esl(self) -> float:
        """Equivalent series inductance; only writable for custom capacitors."""
        return self._esl

    @esl.setter
    def esl(self, value: float) -> None:
        if self._type is CapacitorType.CUSTOM:
            self._esl = value

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._temperature = _clamp(
            value, self.characteristics.min_temp, self.characteristics.max_temp
        )

    @property
    def is_polarized(self) -> bool:
        return self.characteristics.is_polarized

    def set_sample_rate(self, sample_rate: float) -> None:
        """Set the sample rate that fixes the integration time step."""
        self.sample_rate = sample_rate
        self._dt = 1.0 / sample_rate

    def _adjusted_capacitance(self) -> float:
        diff = self._temperature - REFERENCE_TEMPERATURE
        return self._capacitance * (1.0 + self.characteristics.temp_coef_cap * diff)

    def _adjusted_esr(self) -> float:
        diff = self._temperature - REFERENCE_TEMPERATURE
        return self._esr * (1.0 + self.characteristics.temp_coef_esr * diff)

    def _dielectric_absorption_voltage(self) -> float:
        total = sum(
            v * math.exp(-self._dt / tau)
            for v, tau in zip(self._da_voltages, DA_TIME_CONSTANTS)
        )
        return total * self.characteristics.dielectric_absorption

    def _update_da_voltages(self, new_voltage: float) -> None:
        delta = new_voltage - self._last_voltage
        updated = []
        for v, tau in zip(self._da_voltages, DA_TIME_CONSTANTS):
            decay = math.exp(-self._dt / tau)
            updated.append(delta * (1.0 - decay) + v * decay)
        self._da_voltages = updated

    def process(self, input_voltage: float, frequency: float) -> float:
        """Advance one sample driven by ``input_voltage`` and return the voltage."""
        cap = self._adjusted_capacitance()
        esr = self._adjusted_esr()

        xc = 1.0 / (2.0 * math.pi * frequency * cap)
        xl = 2.0 * math.pi * frequency * self._esl
        impedance = math.sqrt(xc**2 + esr**2 + xl**2)

        current = (input_voltage - self._last_voltage) / impedance
        limit = self.characteristics.max_current
        if abs(current) > limit:
            current = limit if current > 0 else -limit
        self.current = current

        esr_drop = current * esr
        esl_drop = self._esl * (current - self._last_current) / self._dt
        xc_drop = current * xc

        self.voltage = (
            self._last_voltage
            + xc_drop
            + esr_drop
            + esl_drop
            + self._dielectric_absorption_voltage()
        )
        self._last_voltage = self.voltage
        self._last_current = current
        return self.voltage

    def reset(self) -> None:
        """Discharge the capacitor and clear its history."""
        self.voltage = 0.0
        self._last_voltage = 0.0
        self._last_current = 0.0
        self._da_voltages = [0.0] * len(DA_TIME_CONSTANTS)

    def current_for(self, input_voltage: float) -> float:
        """Return the ideal charging current for ``input_voltage`` over one step."""
        return self._adjusted_capacitance() * (input_voltage - self._last_voltage) / self._dt