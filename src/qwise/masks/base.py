"""Base class for gain-mask providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class BaseGainMaskProvider(ABC):
    """Common contract for everything that supplies per-bin gains.

    A provider receives the frame index and the unmodified spectrum of the
    frame and returns one real gain per bin. Values are unconstrained; the
    engine clamps them into ``[0, 1]`` before use.
    """

    @abstractmethod
    def gain_mask(self, frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        """Return ``N`` real gains for the frame at ``frame_index``."""

    def reset(self) -> None:
        """Reset internal state (override in subclasses when needed)."""

    def __call__(self, frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        """Alias for :meth:`gain_mask`."""
        return self.gain_mask(frame_index, spectrum)
