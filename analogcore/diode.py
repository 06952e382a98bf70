"""Diode model based on the Shockley equation with series resistance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

BOLTZMANN = 1.380649e-23
ELEMENTARY_CHARGE = 1.602176634e-19
REFERENCE_TEMPERATURE = 293.15


class DiodeType(Enum):
    """Families of diodes with their own typical characteristics."""

    SILICON = "silicon"
    ZENER = "zener"
    GERMANIUM = "germanium"
    LED = "led"
    SCHOTTKY = "schottky"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DiodeCharacteristics:
    """Typical parameters and ratings of a diode type."""

    default_is: float
    default_n: float
    default_rs: float
    default_breakdown: float
    default_junction_cap: float
    default_transit_time: float
    min_temp: float
    max_temp: float
    temp_coef_is: float
    temp_coef_vf: float


CHARACTERISTICS: dict[DiodeType, DiodeCharacteristics] = {
    DiodeType.SILICON: DiodeCharacteristics(
        1e-12, 1.0, 0.1, 100.0, 1e-12, 1e-9, 233.15, 398.15, 0.15, -2.0
    ),
    DiodeType.ZENER: DiodeCharacteristics(
        1e-9, 1.0, 0.5, 5.1, 5e-12, 1e-9, 233.15, 398.15, 0.15, 0.1
    ),
    DiodeType.GERMANIUM: DiodeCharacteristics(
        1e-6, 1.0, 0.2, 50.0, 2e-12, 2e-9, 233.15, 373.15, 0.15, -2.0
    ),
    DiodeType.LED: DiodeCharacteristics(
        1e-10, 2.0, 0.5, 5.0, 10e-12, 5e-9, 233.15, 373.15, 0.15, -2.0
    ),
    DiodeType.SCHOTTKY: DiodeCharacteristics(
        1e-8, 1.0, 0.05, 30.0, 0.5e-12, 0.1e-9, 233.15, 398.15, 0.15, -1.5
    ),
}


def _exp(x: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


class Diode:
    """A diode evaluated one sample at a time."""

    def __init__(
        self,
        type: DiodeType = DiodeType.SILICON,
        temperature: float = REFERENCE_TEMPERATURE,
    ) -> None:
        self._type = type
        self._temperature = temperature
        self.last_voltage = 0.0
        self.last_current = 0.0
        # A custom diode starts from silicon values until tuned.
        self.characteristics = CHARACTERISTICS[DiodeType.SILICON]
        self._apply_characteristics()

    def _apply_characteristics(self) -> None:
        if self._type is not DiodeType.CUSTOM:
            self.characteristics = CHARACTERISTICS[self._type]
        c = self.characteristics
        self._is = c.default_is
        self._n = c.default_n
        self._rs = c.default_rs
        self._breakdown = c.default_breakdown
        self._junction_cap = c.default_junction_cap
        self._transit_time = c.default_transit_time

    @property
    def type(self) -> DiodeType:
        return self._type

    @type.setter
    def type(self, value: DiodeType) -> None:
        self._type = value
        self._apply_characteristics()

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        c = self.characteristics
        self._temperature = min(max(value, c.min_temp), c.max_temp)

    def _custom_only(self) -> bool:
        return self._type is DiodeType.CUSTOM

    @property
    def saturation_current(self) -> float:
        """Reverse saturation current; only writable for custom diodes."""
        return self._is

    @saturation_current.setter
    def saturation_current(self, value: float) -> None:
        if self._custom_only():
            self._is = value

    @property
    def ideality_factor(self) -> float:
        """Ideality factor; only writable for custom diodes."""
        return self._n

    @ideality_factor.setter
    def ideality_factor(self, value: float) -> None:
        if self._custom_only():
            self._n = value

    @property
    def series_resistance(self) -> float:
        """Series resistance; only writable for custom diodes."""
        return self._rs

    @series_resistance.setter
    def series_resistance(self, value: float) -> None:
        if self._custom_only():
            self._rs = value

    @property
    def breakdown_voltage(self) -> float:
        """Reverse breakdown voltage; only writable for custom diodes."""
        return self._breakdown

    @breakdown_voltage.setter
    def breakdown_voltage(self, value: float) -> None:
        if self._custom_only():
            self._breakdown = value

    @property
    def junction_capacitance(self) -> float:
        """Zero-bias junction capacitance; only writable for custom diodes."""
        return self._junction_cap

    @junction_capacitance.setter
    def junction_capacitance(self, value: float) -> None:
        if self._custom_only():
            self._junction_cap = value

    @property
    def transit_time(self) -> float:
        """Transit time; only writable for custom diodes."""
        return self._transit_time

    @transit_time.setter
    def transit_time(self, value: float) -> None:
        if self._custom_only():
            self._transit_time = value

    @property
    def thermal_voltage(self) -> float:
        """Thermal voltage kT/q at the current temperature."""
        return BOLTZMANN * self._temperature / ELEMENTARY_CHARGE

    def _adjusted_is(self) -> float:
        diff = self._temperature - REFERENCE_TEMPERATURE
        return self._is * (1.0 + self.characteristics.temp_coef_is * diff)

    def _adjusted_vf(self) -> float:
        diff = self._temperature - REFERENCE_TEMPERATURE
        return self.characteristics.temp_coef_vf * diff

    def _forward_current(self, voltage: float) -> float:
        vt = self.thermal_voltage
        return self._is * (_exp(voltage / (self._n * vt)) - 1.0)

    def _reverse_current(self, voltage: float) -> float:
        base = -self._is * (1.0 - _exp(voltage / (self._n * self.thermal_voltage)))
        if voltage < -self._breakdown:
            return base * (1.0 + (voltage + self._breakdown) / self._breakdown)
        return base

    def process(self, voltage: float) -> float:
        """Apply ``voltage`` across the diode, remember it and return the current."""
        self.last_voltage = voltage
        self.last_current = self.current_at(voltage)
        return self.last_current

    def current_at(self, voltage: float) -> float:
        """Return the current for ``voltage``, corrected once for series resistance."""
        vt = self.thermal_voltage
        current = self._is * (_exp(voltage / (self._n * vt)) - 1.0)
        if abs(current) > 0:
            voltage -= current * self._rs
            current = self._is * (_exp(voltage / (self._n * vt)) - 1.0)
        return current

    def voltage_at(self, current: float) -> float:
        """Return the junction voltage magnitude that carries ``current``."""
        vt = self.thermal_voltage
        if current > 0:
            return self._n * vt * math.log(current / self._is + 1.0)
        return self._n * vt * math.log(-current / self._is + 1.0)

    def junction_capacitance_at(self, voltage: float) -> float:
        """Return the junction (reverse) or diffusion (forward) capacitance."""
        if voltage < 0:
            return self._junction_cap / math.sqrt(1.0 - voltage / self._breakdown)
        current = self._forward_current(voltage)
        return self._junction_cap + self._transit_time * current / self.thermal_voltage

    def reset(self) -> None:
        """Clear the remembered voltage and current."""
        self.last_voltage = 0.0
        self.last_current = 0.0