"""Per-frame spectral filter with clamped per-bin gains."""

from __future__ import annotations

import numpy as np
from scipy.fft import fft


def clamp_gain(gain_mask: np.ndarray) -> np.ndarray:
    """Saturate gain values into ``[0, 1]``."""
    return np.clip(np.asarray(gain_mask, dtype=np.float64), 0.0, 1.0)


class SpectralFilter:
    """Forward DFT, per-bin gain, and inverse DFT for fixed-size frames.

    Procedure
    ---------
    ```text

       X = DFT(x)                      (no normalization)
       Y_k = clamp(g_k, 0, 1) * X_k    for k in [0, N)
       y = Re(conj(DFT(conj(Y))) / N)
    ```

    The inverse reuses the forward transform through conjugation, so only a
    single transform primitive is involved.
    """

    def __init__(self, frame_size: int) -> None:
        if int(frame_size) < 1:
            raise ValueError("frame_size must be positive")
        self.frame_size = int(frame_size)

    @property
    def n_bins(self) -> int:
        """Return the number of frequency bins (equal to the frame size)."""
        return self.frame_size

    def _check_length(self, value: np.ndarray, name: str) -> None:
        if value.shape != (self.frame_size,):
            raise ValueError(
                f"{name} must be a 1-D array of length {self.frame_size}, "
                f"got shape {value.shape}"
            )

    def forward(self, real_frame: np.ndarray) -> np.ndarray:
        """Transform a real frame into its complex spectrum."""
        frame = np.asarray(real_frame, dtype=np.float64)
        self._check_length(frame, "real_frame")
        return fft(frame.astype(np.complex128))

    def apply_gain(self, spectrum: np.ndarray, gain_mask: np.ndarray) -> np.ndarray:
        """Scale each bin of ``spectrum`` by its clamped gain."""
        spec = np.asarray(spectrum, dtype=np.complex128)
        self._check_length(spec, "spectrum")
        gain = clamp_gain(gain_mask)
        self._check_length(gain, "gain_mask")
        return spec * gain

    def inverse(self, spectrum: np.ndarray) -> np.ndarray:
        """Transform a spectrum back to a real frame via the conjugate method."""
        spec = np.asarray(spectrum, dtype=np.complex128)
        self._check_length(spec, "spectrum")
        restored = np.conj(fft(np.conj(spec))) / self.frame_size
        return np.real(restored).copy()

    def filter(self, real_frame: np.ndarray, gain_mask: np.ndarray) -> np.ndarray:
        """Run forward, gain, and inverse on one already-windowed frame."""
        return self.inverse(self.apply_gain(self.forward(real_frame), gain_mask))
