"""Concrete gain-mask providers."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from .base import BaseGainMaskProvider

GainFunction = Callable[[int, np.ndarray], np.ndarray]


class ConstantGainMask(BaseGainMaskProvider):
    """Apply the same gain to every bin of every frame.

    This stands in for a noise classifier that has settled on one
    attenuation level. The default of ``0.65`` matches the simulated
    classifier output.
    """

    def __init__(self, gain: float = 0.65) -> None:
        self.gain = float(gain)

    def gain_mask(self, frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        del frame_index
        return np.full(np.shape(spectrum)[0], self.gain, dtype=np.float64)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(gain={self.gain})"


class BinGainMask(BaseGainMaskProvider):
    """Apply a fixed per-bin gain profile to every frame."""

    def __init__(self, gains: Sequence[float] | np.ndarray) -> None:
        gains_arr = np.asarray(gains, dtype=np.float64)
        if gains_arr.ndim != 1 or gains_arr.shape[0] == 0:
            raise ValueError("gains must be a non-empty 1-D sequence")
        gains_arr.flags.writeable = False
        self.gains = gains_arr

    def gain_mask(self, frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        del frame_index
        n_bins = np.shape(spectrum)[0]
        if self.gains.shape[0] != n_bins:
            raise ValueError(
                f"gain profile has {self.gains.shape[0]} bins, frame has {n_bins}"
            )
        return self.gains


class FunctionGainMask(BaseGainMaskProvider):
    """Adapt a plain callable ``(frame_index, spectrum) -> gains``.

    This is the seam for plugging in an inference backend without writing
    a provider subclass.
    """

    def __init__(self, func: GainFunction) -> None:
        if not callable(func):
            raise TypeError("func must be callable")
        self.func = func

    def gain_mask(self, frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        return np.asarray(self.func(frame_index, spectrum), dtype=np.float64)
