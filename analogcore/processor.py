"""Stereo audio processor that runs the clipper with a drive parameter."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence

from analogcore.clipper import TransistorClipper

STATE_TAG = "Parameters"
PARAM_TAG = "PARAM"
DRIVE_ID = "drive"
DRIVE_MIN = 0.0
DRIVE_MAX = 1.0
DRIVE_DEFAULT = 0.5


def _clamp_drive(value: float) -> float:
    return min(max(value, DRIVE_MIN), DRIVE_MAX)


class AnalogCoreProcessor:
    """Audio processor exposing a single ``drive`` parameter."""

    accepts_midi = False
    produces_midi = False
    tail_length_seconds = 0.0

    def __init__(self) -> None:
        self.circuit = TransistorClipper()
        self.sample_rate = 44100.0
        self.block_size = 512
        self._drive = DRIVE_DEFAULT

    @property
    def drive(self) -> float:
        """Drive parameter between 0.0 and 1.0."""
        return self._drive

    @drive.setter
    def drive(self, value: float) -> None:
        self._drive = _clamp_drive(float(value))

    def prepare_to_play(self, sample_rate: float, samples_per_block: int) -> None:
        """Get ready to play at ``sample_rate`` with blocks of the given size."""
        self.sample_rate = sample_rate
        self.block_size = samples_per_block
        self.circuit.prepare(sample_rate)
        self.circuit.reset()

    def release_resources(self) -> None:
        """Clear the circuit state when playback stops."""
        self.circuit.reset()

    def process_block(self, buffer: Sequence[Sequence[float]]) -> list[list[float]]:
        """Apply the current drive and return the processed channels."""
        self.circuit.set_drive(self._drive)
        return self.circuit.process_block(buffer)

    def get_state(self) -> bytes:
        """Serialise the parameters as XML."""
        root = ET.Element(STATE_TAG)
        ET.SubElement(root, PARAM_TAG, id=DRIVE_ID, value=repr(self._drive))
        return ET.tostring(root, encoding="utf-8")

    def set_state(self, data: bytes) -> None:
        """Restore parameters from ``data``; unreadable or foreign state is ignored."""
        try:
            root = ET.fromstring(data)
        except ET.ParseError:
            return
        if root.tag != STATE_TAG:
            return
        for param in root.iter(PARAM_TAG):
            if param.get("id") != DRIVE_ID:
                continue
            try:
                self.drive = float(param.get("value", ""))
            except ValueError:
                continue

    def is_buses_layout_supported(self, input_channels: int, output_channels: int) -> bool:
        """Return whether input and output have the same channel layout."""
        return input_channels == output_channels