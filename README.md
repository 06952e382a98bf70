# analogcore

Behavioural models of analog electronic components and a small distortion
circuit built from them, for sample-by-sample audio processing in pure Python.
There are no dependencies beyond the standard library.

## Components

- `analogcore.capacitor.Capacitor`: film, ceramic, electrolytic, mica or
  paper types (`CapacitorType`, plus `CUSTOM`) with ESR, ESL, temperature
  drift and dielectric absorption. `process(input_voltage, frequency)`
  advances one sample; `set_sample_rate()` fixes the time step; `esr` and
  `esl` can only be changed on custom capacitors.
- `analogcore.resistor.Resistor`: resistance that drifts with temperature
  and dissipated power, parasitic capacitance and inductance (used by
  `voltage(current, frequency)`), and `thermal_noise()` over a 20 kHz band.
- `analogcore.diode.Diode`: Shockley-equation diode with silicon, zener,
  germanium, LED and Schottky presets (`DiodeType`). Offers `current_at()`,
  `voltage_at()` and `junction_capacitance_at()`.
- `analogcore.transistor.Transistor`: NPN/PNP model (`TransistorType`) with
  Early effect and a saturation region; `collector_current()`,
  `base_current()`, `emitter_current()` and `miller_capacitance()`.
- `analogcore.potentiometer.Potentiometer`: linear or logarithmic taper
  (`TaperType`) voltage divider with a `position` clamped to 0.0..1.0.
- `analogcore.opamp.OpAmp`: open-loop op-amp with a single-pole response,
  slew-rate limiting and ±15 V rails.

## Circuits and processing

`analogcore.clipper.TransistorClipper` wires these parts into a transistor
clipper with a logarithmic drive control. Its output is clamped to ±9 V.
It writes progress and per-channel level statistics to the
`analogcore.clipper` logger at DEBUG level.

`analogcore.processor.AnalogCoreProcessor` wraps the clipper with a `drive`
parameter (0.0 to 1.0, default 0.5) and saves and restores that parameter
as a small XML document.

```python
from analogcore.processor import AnalogCoreProcessor

processor = AnalogCoreProcessor()
processor.prepare_to_play(48000.0, 256)
processor.drive = 0.8

left = [0.0, 0.1, 0.2, 0.1]
right = [0.0, -0.1, -0.2, -0.1]
left_out, right_out = processor.process_block([left, right])  # new lists

saved = processor.get_state()     # bytes of XML
processor.set_state(saved)        # unreadable or foreign data is ignored
```

A buffer is a sequence of channels, each a sequence of float samples; the
input is left untouched and the processed channels are returned.

Individual components can be used on their own:

```python
from analogcore.capacitor import Capacitor, CapacitorType

cap = Capacitor(CapacitorType.FILM, 0.47e-6, 293.15)
cap.set_sample_rate(48000.0)
voltage = cap.process(1.0, 1000.0)
```

## What it does not do

The package is a library only. It has no command-line program, does not
read or write audio files, does not talk to audio devices, and has no
graphical control panel: feed it sample lists and use the returned ones.

## Tests

Install with the `test` extra and run `pytest`.