import numpy as np
import pytest

from qwise import BinGainMask, ConstantGainMask, FunctionGainMask, SpectralGainEngine


def test_unit_gain_returns_windowed_frame() -> None:
    engine = SpectralGainEngine(256)
    frame = np.random.default_rng(0).uniform(-1.0, 1.0, 256)

    out = engine.process_frame(frame, ConstantGainMask(1.0))

    np.testing.assert_allclose(
        out.samples, frame * engine.window.coefficients, atol=1e-4
    )
    np.testing.assert_array_equal(out.gain, np.ones(256))


def test_zero_gain_returns_silence() -> None:
    engine = SpectralGainEngine(256)
    frame = np.random.default_rng(1).uniform(-1.0, 1.0, 256)

    out = engine.process_frame(frame, ConstantGainMask(0.0), frame_index=4)

    assert out.frame_index == 4
    assert np.all(out.samples == 0.0)


def test_constant_gain_scales_windowed_frame() -> None:
    engine = SpectralGainEngine(128)
    frame = np.random.default_rng(2).uniform(-1.0, 1.0, 128)

    out = engine.process_frame(frame, ConstantGainMask(0.65))

    np.testing.assert_allclose(
        out.samples, 0.65 * frame * engine.window.coefficients, atol=1e-10
    )


def test_reported_gain_is_clamped() -> None:
    engine = SpectralGainEngine(4)
    out = engine.process_frame(np.ones(4), BinGainMask([-1.0, 0.5, 1.0, 9.0]))
    np.testing.assert_array_equal(out.gain, [0.0, 0.5, 1.0, 1.0])


def test_provider_sees_unmodified_spectrum_and_index() -> None:
    engine = SpectralGainEngine(16)
    frame = np.random.default_rng(3).uniform(-1.0, 1.0, 16)
    seen: dict[str, object] = {}

    def record(frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        seen["index"] = frame_index
        seen["spectrum"] = spectrum.copy()
        return np.ones(spectrum.shape[0])

    engine.process_frame(frame, FunctionGainMask(record), frame_index=9)

    assert seen["index"] == 9
    np.testing.assert_allclose(
        seen["spectrum"], np.fft.fft(frame * engine.window.coefficients), atol=1e-12
    )


def test_filter_frame_matches_process_frame() -> None:
    engine = SpectralGainEngine(64)
    frame = np.random.default_rng(4).uniform(-1.0, 1.0, 64)
    gains = np.linspace(0.0, 1.0, 64)

    direct = engine.filter_frame(frame, gains)
    via_provider = engine.process_frame(frame, BinGainMask(gains)).samples

    np.testing.assert_array_equal(direct, via_provider)


def test_provider_returning_wrong_length_is_rejected() -> None:
    engine = SpectralGainEngine(16)
    provider = FunctionGainMask(lambda idx, spectrum: np.ones(8))
    with pytest.raises(ValueError, match="gain mask provider"):
        engine.process_frame(np.zeros(16), provider)


def test_engine_is_stateless_across_frames() -> None:
    engine = SpectralGainEngine(32)
    rng = np.random.default_rng(5)
    first = rng.uniform(-1.0, 1.0, 32)
    second = rng.uniform(-1.0, 1.0, 32)
    provider = ConstantGainMask(0.5)

    before = engine.process_frame(second, provider).samples
    engine.process_frame(first, provider)
    after = engine.process_frame(second, provider).samples

    np.testing.assert_array_equal(before, after)
