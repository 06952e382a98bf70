"""Two-transistor clipping circuit with a diode and a drive control."""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Sequence

from analogcore.capacitor import Capacitor, CapacitorType
from analogcore.diode import Diode, DiodeType
from analogcore.potentiometer import Potentiometer, TaperType
from analogcore.resistor import Resistor
from analogcore.transistor import Transistor, TransistorType

logger = logging.getLogger(__name__)

VCC = 9.0
BIAS_RESISTANCE = 10000.0
INPUT_CAP = 0.47e-6
OUTPUT_CAP = 0.056e-6
TEMPERATURE = 293.15
GAIN = 4.0
DEFAULT_SAMPLE_RATE = 44100.0

_block_counter = itertools.count(1)


def _log(x: float) -> float:
    """Natural logarithm that yields -inf or NaN instead of raising."""
    if math.isnan(x):
        return math.nan
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan


def _make_2n5088() -> Transistor:
    return Transistor(
        TransistorType.NPN,
        beta=400.0,
        vt=0.026,
        is_=1e-12,
        va=100.0,
        temperature=293.15,
        cbc=1e-12,
        rb=100.0,
        rc=1.0,
        re=0.1,
        vce_sat=0.15,
    )


class TransistorClipper:
    """A 2N5088 pair with a 1N914 clipping diode and a log drive pot."""

    def __init__(self) -> None:
        self.input_cap = Capacitor(CapacitorType.FILM, INPUT_CAP, TEMPERATURE)
        self.diode = Diode(DiodeType.SILICON, TEMPERATURE)
        self.transistor1 = _make_2n5088()
        self.transistor2 = _make_2n5088()
        self.bias_resistor = Resistor(BIAS_RESISTANCE, 0.0039, 0.25, 0.5e-12, 0.1e-9)
        self.output_cap = Capacitor(CapacitorType.FILM, OUTPUT_CAP, TEMPERATURE)
        self.drive_pot = Potentiometer(100000.0, 0.5, TaperType.LOGARITHMIC)
        self.sample_rate = DEFAULT_SAMPLE_RATE
        self.drive_pot.position = 0.5
        logger.debug("TransistorClipper initialized with 2N5088 transistors and 1N914 diode")

    @property
    def drive(self) -> float:
        """Drive control position between 0.0 and 1.0."""
        return self.drive_pot.position

    def prepare(self, sample_rate: float) -> None:
        """Set the sample rate and clear all state."""
        self.sample_rate = sample_rate
        self.input_cap.set_sample_rate(sample_rate)
        self.output_cap.set_sample_rate(sample_rate)
        self.reset()

    def reset(self) -> None:
        """Clear the capacitor histories."""
        self.input_cap.reset()
        self.output_cap.reset()
        logger.debug("TransistorClipper reset - all states cleared")

    def set_drive(self, drive: float) -> None:
        """Set the drive control, clamped to 0.0 .. 1.0."""
        self.drive_pot.position = drive
        logger.debug("Drive set to: %s", drive)

    def process_sample(self, sample: float) -> float:
        """Run one input sample through the circuit and return the output."""
        frequency = self.sample_rate / 2.0

        amplified = sample * GAIN
        cap_voltage = self.input_cap.process(amplified, frequency)

        diode_current = self.diode.process(-cap_voltage)
        diode_voltage = -self.diode.voltage_at(diode_current)

        bias_current = (VCC + diode_voltage) / BIAS_RESISTANCE
        vce2 = VCC - bias_current * BIAS_RESISTANCE
        vce1 = VCC - bias_current * BIAS_RESISTANCE

        vbe2 = diode_voltage + cap_voltage
        self.transistor2.collector_current(vbe2, vce2)
        emitter2 = self.transistor2.emitter_current(vbe2, vce2)

        vbe1 = self.transistor2.vt * _log(
            emitter2 / self.transistor2.saturation_current + 1.0
        )
        self.transistor1.collector_current(vbe1, vce1)

        output_voltage = self.output_cap.process(
            diode_voltage + VCC / BIAS_RESISTANCE, frequency
        )
        pot_output = self.drive_pot.process(0.0, output_voltage)
        return min(max(pot_output, -VCC), VCC)

    def process_block(self, buffer: Sequence[Sequence[float]]) -> list[list[float]]:
        """Process each channel in turn and return the output channels."""
        samples = len(buffer[0]) if buffer else 0
        logger.debug(
            "Processing block %d: %d samples, %d channels",
            next(_block_counter),
            samples,
            len(buffer),
        )
        output: list[list[float]] = []
        for index, channel in enumerate(buffer):
            processed = [self.process_sample(x) for x in channel]
            output.append(processed)
            if logger.isEnabledFor(logging.DEBUG) and processed:
                count = len(processed)
                logger.debug(
                    "Channel %d - Max input: %s, Max output: %s, RMS input: %s, RMS output: %s",
                    index,
                    max(abs(x) for x in channel),
                    max(abs(y) for y in processed),
                    math.sqrt(sum(x * x for x in channel) / count),
                    math.sqrt(sum(y * y for y in processed) / count),
                )
        return output