"""Protocol interface for duck-typed gain-mask providers."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class GainMaskProviderProtocol(Protocol):
    """Anything that can produce a gain mask for one frame."""

    def gain_mask(self, frame_index: int, spectrum: np.ndarray) -> np.ndarray:
        """Return ``N`` real gains for the frame at ``frame_index``."""

    def reset(self) -> None:
        """Reset internal runtime state."""
