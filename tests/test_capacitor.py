import pytest

from analogcore.capacitor import CHARACTERISTICS, Capacitor, CapacitorType


def test_capacitance_is_clamped():
    assert Capacitor(capacitance=1.0).capacitance == 1e-3
    assert Capacitor(capacitance=1e-15).capacitance == 1e-12
    cap = Capacitor()
    cap.capacitance = 5.0
    assert cap.capacitance == 1e-3


def test_film_defaults():
    cap = Capacitor()
    assert cap.esr == 0.25
    assert cap.esl == 2.5e-9
    assert cap.is_polarized is False


def test_changing_type_reloads_characteristics():
    cap = Capacitor()
    cap.type = CapacitorType.CERAMIC
    assert cap.esr == 0.015
    cap.type = CapacitorType.ELECTROLYTIC
    assert cap.is_polarized is True


def test_esr_only_settable_for_custom():
    cap = Capacitor(CapacitorType.MICA)
    cap.esr = 3.0
    assert cap.esr == CHARACTERISTICS[CapacitorType.MICA].default_esr
    cap.type = CapacitorType.CUSTOM
    cap.esr = 3.0
    cap.esl = 1e-6
    assert cap.esr == 3.0
    assert cap.esl == 1e-6


def test_temperature_setter_clamps_to_rating():
    cap = Capacitor(CapacitorType.FILM)
    cap.temperature = 1000.0
    assert cap.temperature == CHARACTERISTICS[CapacitorType.FILM].max_temp
    cap.temperature = 0.0
    assert cap.temperature == CHARACTERISTICS[CapacitorType.FILM].min_temp


def test_zero_input_stays_at_rest():
    cap = Capacitor()
    assert cap.process(0.0, 22050.0) == 0.0
    assert cap.current == 0.0


def test_current_is_limited_to_rating():
    cap = Capacitor(CapacitorType.FILM, 1e-6)
    cap.process(100.0, 1000.0)
    assert cap.current == 0.1
    cap.reset()
    cap.process(-100.0, 1000.0)
    assert cap.current == -0.1


def test_response_follows_input_sign():
    pos = Capacitor(capacitance=0.47e-6)
    neg = Capacitor(capacitance=0.47e-6)
    up = pos.process(0.5, 22050.0)
    down = neg.process(-0.5, 22050.0)
    assert up > 0
    assert down == pytest.approx(-up)


def test_reset_clears_voltage():
    cap = Capacitor()
    cap.process(1.0, 22050.0)
    assert cap.voltage != 0.0
    cap.reset()
    assert cap.voltage == 0.0
    assert cap.process(0.0, 22050.0) == 0.0


def test_current_for_is_linear_and_scales_with_rate():
    cap = Capacitor()
    one = cap.current_for(1.0)
    assert cap.current_for(2.0) == pytest.approx(2 * one)
    cap.set_sample_rate(88200.0)
    assert cap.current_for(1.0) == pytest.approx(2 * one)