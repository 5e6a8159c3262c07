"""Spectral gain engine: window, transform, gain, inverse transform."""

from __future__ import annotations

import numpy as np

from .io_models import FrameOutput
from .masks import GainMaskProviderProtocol
from .signal import AnalysisWindow, SpectralFilter, clamp_gain


class SpectralGainEngine:
    """Per-frame noise suppression driven by an external gain mask.

    One engine is created per processing session. It owns the immutable
    analysis window and keeps no history between frames, so frames may be
    processed in any order or concurrently with identical results.

    Procedure
    ---------
    ```text

       for each frame x (length N):
           w <- window * x
           X <- DFT(w)
           g <- clamp(provider(frame_index, X), 0, 1)
           y <- Re(IDFT(g * X))
    ```

    Examples
    --------
    ```python

       import numpy as np
       from qwise import ConstantGainMask, SpectralGainEngine

       engine = SpectralGainEngine(frame_size=256)
       frame = np.random.default_rng(0).standard_normal(256) * 0.1
       out = engine.process_frame(frame, ConstantGainMask(0.65))
       out.samples  # (256,)
    ```
    """

    def __init__(self, frame_size: int = 256, *, window: str = "hann") -> None:
        self.window = AnalysisWindow(frame_size, window)
        self.spectral_filter = SpectralFilter(frame_size)

    @property
    def frame_size(self) -> int:
        return self.window.frame_size

    def filter_frame(self, frame: np.ndarray, gain_mask: np.ndarray) -> np.ndarray:
        """Filter one raw frame with an explicit gain mask."""
        windowed = self.window.apply(frame)
        return self.spectral_filter.filter(windowed, gain_mask)

    def process_frame(
        self,
        frame: np.ndarray,
        provider: GainMaskProviderProtocol,
        *,
        frame_index: int = 0,
    ) -> FrameOutput:
        """Filter one raw frame with a gain mask requested from ``provider``."""
        spectrum = self.spectral_filter.forward(self.window.apply(frame))
        gain = clamp_gain(provider.gain_mask(frame_index, spectrum))
        if gain.shape != (self.frame_size,):
            raise ValueError(
                f"gain mask provider returned shape {gain.shape}, "
                f"expected ({self.frame_size},)"
            )
        spectrum = self.spectral_filter.apply_gain(spectrum, gain)
        samples = self.spectral_filter.inverse(spectrum)
        return FrameOutput(samples=samples, gain=gain, frame_index=int(frame_index))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(frame_size={self.frame_size}, "
            f"window={self.window.window!r})"
        )
