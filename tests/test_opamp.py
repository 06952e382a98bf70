import pytest

from analogcore.opamp import OpAmp


def test_zero_differential_gives_zero():
    amp = OpAmp()
    assert amp.process(1.0, 1.0) == 0.0
    assert amp.output == 0.0


def test_input_offset_tracks_last_inputs():
    amp = OpAmp()
    amp.process(0.3, 0.1)
    assert amp.input_offset == pytest.approx(0.2)


def test_output_saturates_at_rails():
    amp = OpAmp()
    for _ in range(20):
        out = amp.process(1.0, 0.0)
    assert out == 15.0
    for _ in range(40):
        out = amp.process(0.0, 1.0)
    assert out == -15.0


def test_output_never_exceeds_rails():
    amp = OpAmp(gain=1e6, slew_rate=1e6)
    outputs = [amp.process(10.0, 0.0) for _ in range(5)]
    assert all(-15.0 <= o <= 15.0 for o in outputs)


def test_slew_step_scales_with_time_step():
    slow = OpAmp()
    fast = OpAmp()
    fast.set_sample_rate(88200.0)
    assert slow.process(1.0, 0.0) == pytest.approx(2 * fast.process(1.0, 0.0))


def test_response_is_antisymmetric():
    a = OpAmp(gain=10.0, slew_rate=100.0)
    b = OpAmp(gain=10.0, slew_rate=100.0)
    for x in (0.1, 0.2, -0.05):
        assert a.process(x, 0.0) == pytest.approx(-b.process(0.0, x))


def test_reset_clears_state():
    amp = OpAmp()
    first = amp.process(1.0, 0.0)
    amp.process(1.0, 0.0)
    amp.reset()
    assert amp.output == 0.0
    assert amp.input_offset == 0.0
    assert amp.process(1.0, 0.0) == pytest.approx(first)