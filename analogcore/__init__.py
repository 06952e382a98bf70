"""Analog component models and a transistor clipper circuit for audio processing."""

__version__ = "1.0.0"

__all__ = ["capacitor", "potentiometer", "opamp", "diode", "resistor", "transistor", "clipper", "processor"]