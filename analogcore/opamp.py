"""Operational amplifier with finite gain, bandwidth, slew rate and rails."""

from __future__ import annotations

import math

DEFAULT_GAIN = 100000.0
DEFAULT_SLEW_RATE = 0.5
DEFAULT_BANDWIDTH = 1000000.0
DEFAULT_INPUT_IMPEDANCE = 1e6
DEFAULT_OUTPUT_IMPEDANCE = 75.0
DEFAULT_SAMPLE_RATE = 44100.0
RAIL_VOLTAGE = 15.0


class OpAmp:
    """An op-amp processed one sample at a time."""

    def __init__(
        self,
        gain: float = DEFAULT_GAIN,
        slew_rate: float = DEFAULT_SLEW_RATE,
        bandwidth: float = DEFAULT_BANDWIDTH,
    ) -> None:
        self.gain = gain
        self.slew_rate = slew_rate  # V/µs
        self.bandwidth = bandwidth  # unity-gain bandwidth, Hz
        self.input_impedance = DEFAULT_INPUT_IMPEDANCE
        self.output_impedance = DEFAULT_OUTPUT_IMPEDANCE
        self.sample_rate = DEFAULT_SAMPLE_RATE
        self._dt = 1.0 / DEFAULT_SAMPLE_RATE
        self._last_output = 0.0
        self._v_plus = 0.0
        self._v_minus = 0.0
        self.output = 0.0

    @property
    def input_offset(self) -> float:
        """Differential voltage seen at the inputs on the last sample."""
        return self._v_plus - self._v_minus

    def set_sample_rate(self, sample_rate: float) -> None:
        """Set the sample rate that fixes the time step."""
        self.sample_rate = sample_rate
        self._dt = 1.0 / sample_rate

    def process(self, in_plus: float, in_minus: float) -> float:
        """Amplify the differential input and return the output voltage."""
        self._v_plus = in_plus
        self._v_minus = in_minus
        amplified = (in_plus - in_minus) * self.gain
        amplified = self._frequency_response(amplified)
        amplified = self._limit_slew(amplified)
        self.output = min(max(amplified, -RAIL_VOLTAGE), RAIL_VOLTAGE)
        self._last_output = self.output
        return self.output

    def reset(self) -> None:
        """Clear inputs and output history."""
        self._last_output = 0.0
        self._v_plus = 0.0
        self._v_minus = 0.0
        self.output = 0.0

    def _limit_slew(self, new_output: float) -> float:
        max_change = self.slew_rate * self._dt * 1e6
        change = new_output - self._last_output
        if abs(change) > max_change:
            return self._last_output + (max_change if change > 0 else -max_change)
        return new_output

    def _frequency_response(self, value: float) -> float:
        pole = 2.0 * math.pi * self.bandwidth / self.gain
        alpha = pole * self._dt
        return (value + alpha * self._last_output) / (1.0 + alpha)