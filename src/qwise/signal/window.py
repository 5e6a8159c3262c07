"""Analysis window applied to each frame before the spectral transform."""

from __future__ import annotations

import numpy as np
from scipy.signal import get_window


class AnalysisWindow:
    """Fixed tapering window owned by one filtering session.

    The coefficients are computed once at construction and stored in a
    read-only array, so a single instance can be shared between threads.

    Parameters
    ----------
    frame_size:
        Number of samples ``N`` per frame.
    window:
        Window name understood by :func:`scipy.signal.get_window`. The default
        ``"hann"`` yields ``0.5 * (1 - cos(2 * pi * i / (N - 1)))``.
    """

    def __init__(self, frame_size: int, window: str = "hann") -> None:
        if int(frame_size) < 2:
            raise ValueError("frame_size must be at least 2")
        self.frame_size = int(frame_size)
        self.window = str(window)
        try:
            coeffs = get_window(self.window, self.frame_size, fftbins=False)
        except ValueError as exc:
            raise ValueError(f"Unknown window '{self.window}'") from exc
        # Exact mirror symmetry, independent of cos() rounding.
        coeffs = 0.5 * (coeffs + coeffs[::-1])
        coeffs = np.asarray(coeffs, dtype=np.float64)
        coeffs.flags.writeable = False
        self._coeffs = coeffs

    @property
    def coefficients(self) -> np.ndarray:
        """Return the read-only window coefficients."""
        return self._coeffs

    def apply(self, frame: np.ndarray) -> np.ndarray:
        """Multiply ``frame`` element-wise by the window coefficients."""
        frame_arr = np.asarray(frame, dtype=np.float64)
        if frame_arr.shape != (self.frame_size,):
            raise ValueError(
                f"frame must be a 1-D array of length {self.frame_size}, "
                f"got shape {frame_arr.shape}"
            )
        return frame_arr * self._coeffs

    def __len__(self) -> int:
        return self.frame_size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(frame_size={self.frame_size}, window={self.window!r})"
