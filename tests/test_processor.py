import pytest

from analogcore.clipper import TransistorClipper
from analogcore.processor import AnalogCoreProcessor

BLOCK = [[0.0, 0.2, -0.4, 0.6, -0.8], [0.1, -0.1, 0.3, -0.3, 0.5]]


def test_default_drive():
    assert AnalogCoreProcessor().drive == 0.5


def test_drive_is_clamped():
    p = AnalogCoreProcessor()
    p.drive = 2.0
    assert p.drive == 1.0
    p.drive = -0.5
    assert p.drive == 0.0


def test_state_round_trip():
    p = AnalogCoreProcessor()
    p.drive = 0.8
    q = AnalogCoreProcessor()
    q.set_state(p.get_state())
    assert q.drive == pytest.approx(0.8)


def test_state_is_xml_with_parameters_root():
    data = AnalogCoreProcessor().get_state()
    assert b"<Parameters>" in data
    assert b'id="drive"' in data


def test_garbage_state_is_ignored():
    p = AnalogCoreProcessor()
    p.drive = 0.3
    p.set_state(b"\x00\x01not xml")
    assert p.drive == pytest.approx(0.3)


def test_foreign_tag_is_ignored():
    p = AnalogCoreProcessor()
    p.drive = 0.3
    p.set_state(b'<Other><PARAM id="drive" value="0.9"/></Other>')
    assert p.drive == pytest.approx(0.3)


def test_state_value_is_clamped():
    p = AnalogCoreProcessor()
    p.set_state(b'<Parameters><PARAM id="drive" value="7"/></Parameters>')
    assert p.drive == 1.0


def test_buses_layout():
    p = AnalogCoreProcessor()
    assert p.is_buses_layout_supported(2, 2) is True
    assert p.is_buses_layout_supported(1, 2) is False


def test_prepare_to_play_records_settings():
    p = AnalogCoreProcessor()
    p.prepare_to_play(48000.0, 256)
    assert p.sample_rate == 48000.0
    assert p.block_size == 256
    assert p.circuit.sample_rate == 48000.0


def test_zero_drive_silences_block():
    p = AnalogCoreProcessor()
    p.drive = 0.0
    out = p.process_block(BLOCK)
    assert all(y == 0.0 for channel in out for y in channel)
    assert [len(c) for c in out] == [len(c) for c in BLOCK]


def test_block_matches_clipper():
    p = AnalogCoreProcessor()
    p.drive = 0.7
    reference = TransistorClipper()
    reference.set_drive(0.7)
    assert p.process_block(BLOCK) == reference.process_block(BLOCK)


def test_release_resources_resets_circuit():
    p = AnalogCoreProcessor()
    first = p.process_block(BLOCK)
    p.release_resources()
    assert p.process_block(BLOCK) == first