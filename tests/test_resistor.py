import pytest

from analogcore.resistor import Resistor


def test_resistance_is_clamped():
    assert Resistor(0.01).resistance == 1.0
    assert Resistor(1e9).resistance == 1e6
    r = Resistor()
    r.resistance = -5.0
    assert r.resistance == 1.0


def test_actual_equals_nominal_at_rest():
    r = Resistor(4700.0)
    assert r.actual_resistance == pytest.approx(4700.0)


def test_ohms_law_round_trip():
    r = Resistor(2200.0)
    for v in (-3.0, 0.5, 9.0):
        assert r.voltage(r.current(v)) == pytest.approx(v)


def test_power_is_voltage_times_current():
    r = Resistor(1000.0)
    assert r.power(5.0) == pytest.approx(5.0 * r.current(5.0))


def test_process_heats_resistor_and_reset_cools_it():
    r = Resistor(100.0)
    current = r.process(5.0)
    assert current == pytest.approx(5.0 / 100.0)
    assert r.power_dissipation > 0.0
    assert r.actual_resistance > r.resistance
    assert r.last_voltage == 5.0
    assert r.last_current == current
    r.reset()
    assert r.power_dissipation == 0.0
    assert r.last_current == 0.0
    assert r.actual_resistance == pytest.approx(r.resistance)


def test_temperature_is_clamped():
    r = Resistor()
    r.temperature = 1000.0
    assert r.temperature == 373.15
    r.temperature = 0.0
    assert r.temperature == 233.15


def test_temperature_changes_actual_resistance():
    r = Resistor(1000.0)
    r.temperature = 350.0
    assert r.actual_resistance > 1000.0
    r.temperature = 250.0
    assert r.actual_resistance < 1000.0


def test_frequency_raises_voltage_above_dc():
    r = Resistor(1000.0)
    dc = r.voltage(0.01)
    assert r.voltage(0.01, 0.0) == dc
    assert r.voltage(0.01, 1e6) >= dc


def test_thermal_noise_scales_with_square_root_of_resistance():
    low = Resistor(1000.0).thermal_noise()
    high = Resistor(4000.0).thermal_noise()
    assert low > 0.0
    assert high / low == pytest.approx(2.0)


def test_thermal_noise_grows_with_temperature():
    r = Resistor(10000.0, temp_coeff=0.0)
    cold = r.thermal_noise()
    r.temperature = 350.0
    assert r.thermal_noise() > cold