"""Bipolar junction transistor based on a simplified Ebers-Moll model."""

from __future__ import annotations

import math
from enum import Enum

BOLTZMANN = 1.380649e-23
ELEMENTARY_CHARGE = 1.602176634e-19
REFERENCE_TEMPERATURE = 293.15


class TransistorType(Enum):
    """Polarity of a bipolar transistor."""

    NPN = "npn"
    PNP = "pnp"


def _exp(x: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-style division: x/0 gives a signed infinity and 0/0 gives NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Transistor:
    """A bipolar transistor whose currents are evaluated per sample."""

    def __init__(
        self,
        type: TransistorType,
        beta: float = 100.0,
        vt: float = 0.026,
        is_: float = 1e-12,
        va: float = 100.0,
        temperature: float = REFERENCE_TEMPERATURE,
        cbc: float = 1e-12,
        rb: float = 100.0,
        rc: float = 1.0,
        re: float = 0.1,
        vce_sat: float = 0.2,
    ) -> None:
        self.type = type
        self.beta = beta
        self.vt = vt
        self.saturation_current = is_
        self.early_voltage = va
        self._temperature = temperature
        self.miller_cap = cbc
        self.base_resistance = rb
        self.collector_resistance = rc
        self.emitter_resistance = re
        self.saturation_vce = vce_sat
        self.alpha = beta / (beta + 1.0)
        self.last_vbe = 0.0
        self.last_vce = 0.0
        self.last_ic = 0.0
        self.last_ib = 0.0
        self.last_ie = 0.0

    @property
    def temperature(self) -> float:
        """Temperature in kelvin; setting it recomputes the thermal voltage."""
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._temperature = value
        self.vt = BOLTZMANN * value / ELEMENTARY_CHARGE

    @property
    def _sign(self) -> float:
        return 1.0 if self.type is TransistorType.NPN else -1.0

    def base_current(self, vbe: float, vce: float) -> float:
        """Return the base current for the given junction voltages."""
        return self.saturation_current * (_exp(self._sign * vbe / self.vt) - 1.0)

    def collector_current(self, vbe: float, vce: float) -> float:
        """Return the collector current, including Early effect and saturation."""
        self.last_vbe = vbe
        self.last_vce = vce

        ib = self.base_current(vbe, vce)
        ic = self.beta * ib * (1.0 + vce / self.early_voltage)

        if self.is_in_saturation(vce, ib, ic):
            vce_sat = self.saturation_voltage(ib, ic)
            factor = max(0.0, 1.0 - _divide(vce - vce_sat, 0.1 * vce_sat))
            ic *= factor

        self.last_ib = ib
        self.last_ic = ic
        self.last_ie = ic + ib
        return ic

    def emitter_current(self, vbe: float, vce: float) -> float:
        """Return the emitter current, the sum of collector and base currents."""
        ic = self.collector_current(vbe, vce)
        ib = self.base_current(vbe, vce)
        return ic + ib

    def miller_capacitance(self, vce: float, gain: float) -> float:
        """Return the Miller capacitance seen at the base for a stage ``gain``."""
        return self.miller_cap * (1.0 + abs(gain))

    def saturation_voltage(self, ib: float, ic: float) -> float:
        """Return the collector-emitter saturation voltage at these currents."""
        vce_sat = self.saturation_vce * (
            1.0 + (self._temperature - REFERENCE_TEMPERATURE) / 100.0
        )
        ratio = abs(_divide(ic, self.beta * ib))
        if ratio > 0.9:
            vce_sat *= 1.0 + (ratio - 0.9) * 2.0
        return vce_sat

    def is_in_saturation(self, vce: float, ib: float, ic: float) -> bool:
        """Return whether ``vce`` lies below the saturation voltage."""
        sign = self._sign
        return sign * vce < sign * self.saturation_voltage(ib, ic)

    def reset(self) -> None:
        """Clear the remembered voltages and currents."""
        self.last_vbe = 0.0
        self.last_vce = 0.0
        self.last_ic = 0.0
        self.last_ib = 0.0
        self.last_ie = 0.0