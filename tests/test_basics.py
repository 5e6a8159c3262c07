from qwise import (
    AnalysisWindow,
    ConstantGainMask,
    FramePipeline,
    SpectralFilter,
    SpectralGainEngine,
)


def test_public_imports() -> None:
    assert AnalysisWindow is not None
    assert SpectralFilter is not None
    assert SpectralGainEngine is not None
    assert FramePipeline is not None
    assert ConstantGainMask is not None
